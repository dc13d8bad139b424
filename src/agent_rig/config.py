"""Configuration loading for agent-rig."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic import ValidationError

from .templates.registry import bundled_templates_dir

DEFAULT_CONFIG_PATH = Path("~/.agent_rig/config.yaml")
CONFIG_ENV = "AGENT_RIG_CONFIG"
INSTALL_SUBDIR = Path(".claude") / "skills" / "project-setup"


class RigConfig(BaseModel):
    """Where templates are read from and installed to."""

    templates_dir: Path | None = None
    install_dir: Path = Path("~") / INSTALL_SUBDIR
    log_level: str | None = None

    def resolved_templates_dir(self) -> Path:
        if self.templates_dir is None:
            return bundled_templates_dir()
        return self.templates_dir.expanduser()

    def expanded_install_dir(self) -> Path:
        return self.install_dir.expanduser()

    def installed_templates_dir(self) -> Path:
        return self.expanded_install_dir() / "templates"


def default_config_path() -> Path:
    return Path(os.getenv(CONFIG_ENV, str(DEFAULT_CONFIG_PATH))).expanduser()


def load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_rig_config(path: Path | None = None) -> RigConfig:
    """Load the YAML config at ``path``.

    Without an explicit path the default location is used and a missing file
    yields the defaults.
    """
    if path is None:
        path = default_config_path()
        if not path.exists():
            return RigConfig()
    try:
        raw = load_yaml(path)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid agent-rig config at {path}: {exc}") from exc
    try:
        return RigConfig.model_validate(raw or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid agent-rig config at {path}: {exc}") from exc
