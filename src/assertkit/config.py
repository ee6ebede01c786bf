from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ASSERTKIT_CONFIG"


class DiffFormat(str, Enum):
    DEFAULT = "default"
    PROPORTIONAL = "proportional"
    ASCII = "ascii"

    @property
    def markers(self) -> tuple[str, str, str]:
        """Prefixes for (removed, added, unchanged) lines."""
        if self is DiffFormat.PROPORTIONAL:
            return "\u2212", "+", "\u2007"
        if self is DiffFormat.ASCII:
            return "-", "+", " "
        return "\u2212", "+", " "


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    diff_format: DiffFormat = DiffFormat.DEFAULT
    max_depth: int = Field(default=12, ge=1)
    indent: int = Field(default=2, ge=1)


_current: Settings | None = None


def _expand(raw: dict[str, Any], source: Path) -> dict[str, Any]:
    """Expand ``${VAR}`` references in string values.

    Raises ValueError listing every missing variable so the user can fix them
    all at once.
    """
    expanded: dict[str, Any] = {}
    missing: list[str] = []
    for key, value in raw.items():
        if isinstance(value, str):
            try:
                value = expandvars(value, nounset=True)
            except Exception:
                missing.append(f"  {key}={value}")
                continue
        expanded[key] = value

    if missing:
        details = "\n".join(missing)
        raise ValueError(f"Config file '{source}' has missing environment variables:\n{details}")
    return expanded


def load_settings(path: Path) -> Settings:
    """Load and validate settings from a YAML file.

    The settings may sit at the top level or under an ``assertkit:`` key.
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file '{path}' must contain a mapping")
    if "assertkit" in raw:
        raw = raw["assertkit"] or {}

    settings = Settings(**_expand(raw, path))
    logger.debug(f"Loaded settings from {path}: {settings.model_dump(mode='json')}")
    return settings


def get_settings() -> Settings:
    """Return the active settings, reading ``$ASSERTKIT_CONFIG`` on first use."""
    global _current
    if _current is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        if config_path:
            _current = load_settings(Path(config_path))
        else:
            _current = Settings()
    return _current


def configure(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Replace the active settings and return the previous ones.

    ``overrides`` are applied on top of ``settings`` (or the active settings
    when ``settings`` is omitted).
    """
    global _current
    previous = get_settings()
    base = settings if settings is not None else previous
    if overrides:
        base = Settings(**{**base.model_dump(), **overrides})
    _current = base
    return previous
