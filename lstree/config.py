"""Read-only JSON config helpers.

Supplies default depth limit, theme, and color preference. The file is edited by
hand; lstree never writes it. Hidden-file visibility is not configurable here:
dot entries only appear with ``-a/--all``.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lstree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_no_color() -> bool:
    """Return whether colored output is disabled in the config.

    Only explicit booleans are honored; anything else reads as ``False``.
    """
    value = load_config().get("no_color")
    return bool(value) if isinstance(value, bool) else False


def load_max_depth() -> int:
    """Load the default depth limit.

    Booleans, non-integers, and negative values are treated as invalid and
    fall back to ``0`` (unlimited).
    """
    value = load_config().get("max_depth")
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_no_color",
    "load_max_depth",
    "load_theme_name",
]
