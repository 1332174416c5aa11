# texpass/config.py
"""
Generation options and the settings file that supplies their defaults.
Settings are JSON in $TEXPASS_CONFIG, %APPDATA%/TexPass/config.json (Windows)
or ~/.texpass/config.json (fallback).
"""

import os
import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Any, FrozenSet, Optional

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
DEFAULT_LENGTH = 16
DEFAULT_PURPOSE = "general"
PURPOSES = ("general", "database", "shell", "url", "xml", "json", "windows")

DEFAULTS: Dict[str, Any] = {
    "length": DEFAULT_LENGTH,
    "purpose": DEFAULT_PURPOSE,
    "exclude": "",
    "count": 1,
}

SETTING_TYPES = {
    "length": int,
    "purpose": str,
    "exclude": str,
    "count": int,
}


@dataclass(frozen=True)
class PasswordConfig:
    """
    Immutable options for one generation request.
    Values are normalized on construction: length is clamped to MIN_LENGTH,
    purpose is lower-cased, exclude becomes a frozenset and count is at least 1.
    """
    length: int = DEFAULT_LENGTH
    purpose: str = DEFAULT_PURPOSE
    exclude: FrozenSet[str] = field(default_factory=frozenset)
    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    special: bool = True
    count: int = 1

    def __post_init__(self) -> None:
        # 0 / None mean "not given", like an empty CLI option
        object.__setattr__(self, "length", max(MIN_LENGTH, self.length or DEFAULT_LENGTH))
        object.__setattr__(self, "purpose", (self.purpose or DEFAULT_PURPOSE).lower())
        object.__setattr__(self, "exclude", frozenset(self.exclude or ""))
        object.__setattr__(self, "count", max(1, self.count or 1))


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "TexPass")
    return os.path.join(os.path.expanduser("~"), ".texpass")


def config_path() -> str:
    override = os.getenv("TEXPASS_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Return DEFAULTS merged with whatever known keys the settings file holds."""
    p = path or config_path()
    out = DEFAULTS.copy()
    if not os.path.exists(p):
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", p)
        return out
    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        expected = SETTING_TYPES[key]
        # bool is an int subclass but never a valid length or count
        if not isinstance(value, expected) or isinstance(value, bool):
            logger.warning(
                "Ignoring setting %r in %s: expected %s, got %r", key, p, expected.__name__, value
            )
            continue
        out[key] = value
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    merged = DEFAULTS.copy()
    merged.update({k: v for k, v in cfg.items() if k in DEFAULTS})
    with open(p, "w", encoding="utf-8") as f:
        json.dump(merged, f, ensure_ascii=False, indent=2)
    return p
