import logging

import click

from appsubmit.cli.commands.preview import preview
from appsubmit.cli.commands.process_issue import process_issue

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="appsubmit")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Turn app submission issues into apps.yaml pull requests."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")


cli.add_command(preview)
cli.add_command(process_issue)


def main() -> None:
    """CLI entry point used by the `appsubmit` console script."""
    cli()
