"""Common-password and dictionary word lists."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from brutus.errors import ResourceError

logger = logging.getLogger(__name__)


@runtime_checkable
class WordList(Protocol):
    def __contains__(self, word: object) -> bool: ...


class SetWordList:
    """Hashed, case-insensitive word list."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words = frozenset(word.strip().lower() for word in words if word.strip())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)


# Most breached passwords (NIST SP 800-63B guidance), lowercase.
COMMON_PASSWORDS = SetWordList(
    [
        "password", "password1", "password123", "123456", "12345678", "123456789",
        "1234567890", "qwerty", "qwerty123", "qwertyuiop", "abc123", "iloveyou",
        "admin", "letmein", "welcome", "monkey", "dragon", "master", "sunshine",
        "princess", "shadow", "superman", "michael", "football", "baseball",
        "soccer", "hockey", "batman", "trustno1", "hello", "passw0rd", "pass",
        "test", "root", "login", "access", "azerty", "111111", "1111111",
        "000000", "0000000000", "696969", "654321", "121212", "666666", "555555",
        "123123", "112233", "11111111", "1234567", "12345", "1234", "1q2w3e4r",
        "1q2w3e", "zxcvbnm", "qazwsx", "q1w2e3r4", "asdfgh", "asdfghjkl",
        "hunter2", "starwars", "whatever", "charlie", "donald", "password2",
        "matrix", "computer", "internet", "flower", "cheese", "lovely",
        "jessica", "michelle", "daniel", "george", "jordan", "harley",
        "ranger", "dakota", "robert", "thomas", "andrea", "maggie", "summer",
        "taylor", "andrew", "hunter", "joshua", "pepper", "austin",
        "ginger", "buster", "cookie", "biteme", "snoopy", "tigger", "oliver",
        "william", "jennifer", "mustang", "maverick", "thunder", "troubador",
        "correcthorsebatterystaple", "passwordpassword", "administrator",
    ]
)


def load_wordlist(path: Path, *, start_line: int = 1, end_line: int | None = None) -> SetWordList:
    """Load a flat word list, one entry per line.

    Only lines ``start_line`` through ``end_line`` (1-based, inclusive) are
    kept, which allows testing against the top-N slice of a large breach list.
    """

    if start_line < 1:
        raise ValueError(f"start_line must be >= 1, got {start_line}")
    if end_line is not None and end_line < start_line:
        raise ValueError("end_line must not be before start_line")

    words: list[str] = []
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            for line_number, line in enumerate(handle, start=1):
                if end_line is not None and line_number > end_line:
                    break
                if line_number >= start_line:
                    words.append(line)
    except FileNotFoundError as exc:
        raise ResourceError(f"Word list not found: {path}") from exc
    except OSError as exc:
        raise ResourceError(f"Word list is not readable: {path} ({exc})") from exc

    wordlist = SetWordList(words)
    logger.debug("loaded %d words from %s", len(wordlist), path)
    return wordlist
