"""Preview the apps.yaml entry an issue body would produce, without touching GitHub."""

from pathlib import Path

import click

from appsubmit.output import user_output
from appsubmit.submission.parser import parse_submission
from appsubmit.submission.render import render_entry
from appsubmit.submission.validation import validate_submission


@click.command(name="preview")
@click.argument("body_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def preview(body_file: Path) -> None:
    """Parse and validate BODY_FILE, then print the rendered entry.

    Validation errors are printed to stderr and exit with status 1.
    """
    record = parse_submission(body_file.read_text(encoding="utf-8"))
    validation = validate_submission(record)
    if not validation.is_valid:
        user_output(click.style("Submission is invalid:", fg="red"))
        for error in validation.errors:
            user_output(f"  - {error}")
        raise SystemExit(1)
    click.echo(render_entry(record), nl=False)
