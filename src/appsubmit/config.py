"""Submission processing configuration loaded from TOML."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(".github") / "appsubmit.toml"


@dataclass(frozen=True)
class SubmissionConfig:
    """In-memory representation of `.github/appsubmit.toml`.

    Example appsubmit.toml:
      apps_file = "apps.yaml"
      catalog_name = "F-Droid repository"
      community_name = "FOSS BU Community"
      branch_prefix = "add-app"
    """

    apps_file: str = "apps.yaml"
    catalog_name: str = "F-Droid repository"
    community_name: str = "FOSS BU Community"
    branch_prefix: str = "add-app"


def load_config(cfg_path: Path) -> SubmissionConfig:
    """Load config from the given TOML file if present; otherwise return defaults.

    Raises:
        ValueError: If a known key holds a non-string value
    """
    if not cfg_path.exists():
        return SubmissionConfig()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    defaults = SubmissionConfig()
    values: dict[str, str] = {}
    for key in ("apps_file", "catalog_name", "community_name", "branch_prefix"):
        value = data.get(key, getattr(defaults, key))
        if not isinstance(value, str) or not value:
            msg = f"{cfg_path}: '{key}' must be a non-empty string"
            raise ValueError(msg)
        values[key] = value
    return SubmissionConfig(**values)
