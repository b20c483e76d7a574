"""User settings for mnemo.

Settings come from, in increasing precedence: built-in defaults, a JSON
file in the user's config directory, ``MNEMO_*`` environment variables,
and finally command-line overrides applied by the caller.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import platformdirs
from blessed.formatters import COLORS, COMPOUNDABLES

logger = logging.getLogger(__name__)

APP_NAME = "mnemo"
ENV_PREFIX = "MNEMO_"
DEFAULT_TEXTS_DIR = Path.home() / ".mnemo" / "texts"
DEFAULT_HIGHLIGHT_COLOR = "bright_cyan"


@dataclass(frozen=True)
class Settings:
    texts_dir: Path = DEFAULT_TEXTS_DIR
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR
    log_file: Optional[Path] = None

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a copy with every non-None override applied."""
        return _coerce(self, {k: v for k, v in overrides.items() if v is not None})


def is_known_color(name: Any) -> bool:
    """True if blessed can style text with this name, e.g. 'bright_cyan'."""
    return isinstance(name, str) and (name in COLORS or name in COMPOUNDABLES)


def config_file_path() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME)) / "settings.json"


def _load_file(path: Path) -> Dict[str, Any]:
    """Load the settings file.

    Returns an empty dict if the file is missing, unreadable or malformed.
    """
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def _from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
    values = {}
    for field in fields(Settings):
        raw = environ.get(ENV_PREFIX + field.name.upper())
        if raw:
            values[field.name] = raw
    return values


def _coerce(settings: Settings, values: Mapping[str, Any]) -> Settings:
    known = {field.name for field in fields(Settings)}
    updates: Dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            # Unknown settings are ignored (forward compatibility)
            continue
        if key in ('texts_dir', 'log_file'):
            if not isinstance(value, (str, os.PathLike)):
                logger.warning(f"Setting {key} must be a path, got {value!r}")
                continue
            updates[key] = Path(value).expanduser()
        elif key == 'highlight_color':
            if not is_known_color(value):
                logger.warning(f"Setting {key} must be a color name, got {value!r}")
                continue
            updates[key] = value
    return replace(settings, **updates)


def load_settings(path: Optional[Path] = None,
                  environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the config file and the environment."""
    settings = _coerce(Settings(), _load_file(path or config_file_path()))
    return _coerce(settings, _from_env(os.environ if environ is None else environ))
