"""Brute-force attack simulation with exact integer arithmetic."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from brutus.charsets import DEFAULT_LADDER, CharsetLadder, resolve_alphabet
from brutus.errors import ConfigurationError

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24
# Anything past a billion days (~2.7 million years) is reported as this value.
MAX_DAYS = 1_000_000_000


@dataclass(frozen=True)
class AttackProfile:
    name: str
    attempts_per_second: int

    def __post_init__(self) -> None:
        if self.attempts_per_second <= 0:
            raise ConfigurationError(
                f"Attack profile {self.name!r} must have a positive rate, got {self.attempts_per_second}"
            )

    @property
    def attempts_per_day(self) -> int:
        return self.attempts_per_second * SECONDS_PER_DAY


ATTACK_PROFILES: dict[str, AttackProfile] = {
    "low": AttackProfile("low", 10**6),
    "medium": AttackProfile("medium", 10**10),
    "high": AttackProfile("high", 10**14),
    "dedicated": AttackProfile("dedicated", 10**18),
}


@dataclass(frozen=True)
class BruteForceEstimate:
    alphabet: str
    attempts: int
    days: int


def get_profile(name: str) -> AttackProfile:
    """Look up a built-in attack profile by (case-insensitive) name."""

    key = name.strip().lower()
    try:
        return ATTACK_PROFILES[key]
    except KeyError:
        allowed = ", ".join(ATTACK_PROFILES)
        raise ConfigurationError(f"Invalid attack profile {name!r}. Allowed profiles are: {allowed}") from None


def count_attempts(password: str, alphabet: str) -> int:
    """Return the number of guesses made before *password* is reached.

    The password is read as a numeral in base ``len(alphabet)`` whose digits
    are the zero-based positions of its characters, so the first password an
    attacker tries costs zero attempts. With a PIN alphabet ``"6529"`` costs
    6529 attempts.
    """

    base = len(alphabet)
    positions = {char: idx for idx, char in enumerate(alphabet)}
    attempts = 0
    for char in password:
        try:
            digit = positions[char]
        except KeyError:
            raise ValueError(f"Character {char!r} is not in the alphabet") from None
        attempts = attempts * base + digit
    return attempts


def days_to_crack(attempts: int, profile: AttackProfile) -> int:
    """Convert an attempt count into whole days, saturating at :data:`MAX_DAYS`."""

    days = attempts // profile.attempts_per_day
    return min(days, MAX_DAYS)


def simulate_attack(
    password: str,
    profile: AttackProfile,
    ladder: CharsetLadder = DEFAULT_LADDER,
) -> BruteForceEstimate:
    """Resolve the attacker's alphabet and estimate days to brute force *password*."""

    alphabet = resolve_alphabet(password, ladder)
    attempts = count_attempts(password, alphabet)
    days = days_to_crack(attempts, profile)
    logger.debug(
        "brute force: base=%d length=%d profile=%s days=%d",
        len(alphabet),
        len(password),
        profile.name,
        days,
    )
    return BruteForceEstimate(alphabet=alphabet, attempts=attempts, days=days)
