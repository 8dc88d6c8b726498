"""Character-set ladder and composite alphabet resolution."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from brutus.errors import ConfigurationError

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
# Shifted number-row symbols are tried before the rest of the punctuation.
PRIMARY_SYMBOLS = "!@#$%^&*()-=_+"
SECONDARY_SYMBOLS = "[]\"{}|;':,./<>?`~ "


@dataclass(frozen=True)
class CharsetLadder:
    """Ordered character sets, simplest first.

    The last set is the attacker's broadest guess and must contain every
    character of the earlier sets.
    """

    sets: tuple[str, ...]
    _members: tuple[frozenset[str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        sets = tuple(self.sets)
        if not sets:
            raise ConfigurationError("Character set ladder must contain at least one set")
        if len(set(sets)) != len(sets):
            raise ConfigurationError("Character set ladder contains duplicate sets")
        for charset in sets:
            if not charset:
                raise ConfigurationError("Character set ladder contains an empty set")
            if len(set(charset)) != len(charset):
                raise ConfigurationError(f"Character set has duplicate characters: {charset!r}")
        members = tuple(frozenset(charset) for charset in sets)
        broadest = members[-1]
        for charset, chars in zip(sets, members):
            if not chars <= broadest:
                raise ConfigurationError(
                    f"Last character set does not cover {charset!r}"
                )
        object.__setattr__(self, "sets", sets)
        object.__setattr__(self, "_members", members)

    def __len__(self) -> int:
        return len(self.sets)

    def __getitem__(self, index: int) -> str:
        return self.sets[index]

    @property
    def broadest(self) -> str:
        return self.sets[-1]

    def covers(self, index: int, chars: set[str] | frozenset[str]) -> bool:
        """Return True if set *index* contains all of *chars*."""
        return chars <= self._members[index]


DEFAULT_LADDER = CharsetLadder(
    (
        DIGITS,
        LOWER,
        LOWER + DIGITS,
        LOWER + UPPER,
        LOWER + UPPER + DIGITS,
        LOWER + UPPER + DIGITS + PRIMARY_SYMBOLS,
        LOWER + UPPER + DIGITS + PRIMARY_SYMBOLS + SECONDARY_SYMBOLS,
    )
)


def _broadest_alphabet(password: str, ladder: CharsetLadder) -> str:
    broadest = ladder.broadest
    known = set(broadest)
    extra = "".join(dict.fromkeys(char for char in password if char not in known))
    return broadest + extra


def resolve_alphabet(password: str, ladder: CharsetLadder = DEFAULT_LADDER) -> str:
    """Return the alphabet an attacker would enumerate to find *password*.

    The smallest ladder entry holding every character of the password is
    chosen. A character that no remaining entry can hold switches the whole
    password to the broadest entry, extended with the unknown characters in
    the order they first appear.
    """

    if not password:
        return ladder[0]

    index = 0
    seen: set[str] = set()
    for char in password:
        seen.add(char)
        for candidate in range(index, len(ladder)):
            if ladder.covers(candidate, seen):
                index = candidate
                break
        else:
            logger.debug("character outside ladder, using broadest set (len=%d)", len(password))
            return _broadest_alphabet(password, ladder)

    return ladder[index]
