"""
texpass.pools
Builds the character pools for one password: canonical classes, purpose
filtering and custom exclusions on the special set, plus one required seed
character per surviving pool.
"""

import logging
import string
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .config import PasswordConfig
from .random_source import DEFAULT_SOURCE, SecureRandomSource

logger = logging.getLogger(__name__)

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL_CHARS = "-&$#*_!@%^+=[]{}|:;<>.?/~"

# characters that break each target context
PURPOSE_EXCLUSIONS = {
    "general": "",
    "database": "%:*\\;@",       # SQL and connection strings
    "shell": "$/!\\~*?;|<>#",     # shell metacharacters
    "url": "&=+?/;:#@",           # reserved URL characters
    "xml": "<>&",
    "json": "\\",
    "windows": "\\/:*?<>|",       # path separators and reserved names
}

FALLBACK_WARNING = "All character types excluded. Using lowercase letters by default."


@dataclass(frozen=True)
class CharacterPools:
    pools: Tuple[str, ...]
    required: Tuple[str, ...]
    fallback: bool = False


def _without(chars: str, removed: Iterable[str]) -> str:
    removed = set(removed)
    return "".join(c for c in chars if c not in removed)


def special_pool(purpose: str = "general", exclude: Iterable[str] = ()) -> str:
    """Special characters left after the purpose profile and custom exclusions."""
    chars = _without(SPECIAL_CHARS, PURPOSE_EXCLUSIONS.get(purpose.lower(), ""))
    return _without(chars, exclude)


def build_pools(
    config: PasswordConfig,
    rng: Optional[SecureRandomSource] = None,
    warn: bool = True,
) -> CharacterPools:
    rng = rng or DEFAULT_SOURCE
    candidates = (
        (config.lowercase, LOWERCASE),
        (config.uppercase, UPPERCASE),
        (config.numbers, DIGITS),
        (config.special, special_pool(config.purpose, config.exclude)),
    )

    pools = []
    required = []
    for enabled, pool in candidates:
        if enabled and pool:
            pools.append(pool)
            required.append(rng.choice(pool))

    if not pools:
        if warn:
            logger.warning(FALLBACK_WARNING)
        return CharacterPools((LOWERCASE,), (rng.choice(LOWERCASE),), fallback=True)

    return CharacterPools(tuple(pools), tuple(required))
