"""
texpass.generator
Secure password generator: seed one character per pool, fill from the union
of pools, Fisher-Yates shuffle, then validate and retry until every pool is
represented.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .config import PasswordConfig
from .pools import build_pools
from .random_source import DEFAULT_SOURCE, SecureRandomSource

logger = logging.getLogger(__name__)


def build_candidate(
    pools: Sequence[str],
    required: Sequence[str],
    length: int,
    rng: SecureRandomSource,
) -> List[str]:
    password_chars = list(required)

    # duplicates across pools are kept, so shared characters weigh more
    all_chars = "".join(pools)
    remaining = length - len(password_chars)
    for _ in range(remaining):
        password_chars.append(rng.choice(all_chars))

    for i in range(len(password_chars) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        password_chars[i], password_chars[j] = password_chars[j], password_chars[i]

    return password_chars


def is_valid(candidate: Sequence[str], pools: Sequence[str]) -> bool:
    """True when the candidate holds at least one character of every pool."""
    present = set(candidate)
    return all(present.intersection(pool) for pool in pools)


def generate(
    pools: Sequence[str],
    required: Sequence[str],
    length: int,
    rng: Optional[SecureRandomSource] = None,
) -> str:
    """
    Generate one password of exactly `length` characters from the given pools.
    Candidates failing validation are discarded and rebuilt.
    """
    rng = rng or DEFAULT_SOURCE
    while True:
        candidate = build_candidate(pools, required, length, rng)
        if is_valid(candidate, pools):
            return "".join(candidate)
        logger.debug("Discarding candidate missing a required character class")


def generate_password(config: PasswordConfig, rng: Optional[SecureRandomSource] = None) -> str:
    char_pools = build_pools(config, rng)
    return generate(char_pools.pools, char_pools.required, config.length, rng)


def generate_batch(
    config: PasswordConfig, rng: Optional[SecureRandomSource] = None
) -> Tuple[List[str], bool]:
    """
    Generate `config.count` independent passwords, in request order.
    Returns the passwords and whether the lowercase fallback was used.
    The fallback warning is logged once per batch.
    """
    passwords = []
    fallback = False
    for i in range(config.count):
        char_pools = build_pools(config, rng, warn=i == 0)
        fallback = fallback or char_pools.fallback
        passwords.append(generate(char_pools.pools, char_pools.required, config.length, rng))
    return passwords, fallback


def generate_passwords(config: PasswordConfig, rng: Optional[SecureRandomSource] = None) -> List[str]:
    return generate_batch(config, rng)[0]
