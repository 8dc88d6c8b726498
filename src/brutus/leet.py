"""Reverse leetspeak substitutions to recover plain-text readings."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from brutus.errors import ConfigurationError, ExpansionLimitExceeded

logger = logging.getLogger(__name__)

DEFAULT_MAX_VARIANTS = 4096


@dataclass(frozen=True)
class LeetMap:
    """Canonical letter -> tokens that can stand in for it.

    Tokens are stored lowercased since expansion runs on lowercased text.
    """

    entries: tuple[tuple[str, tuple[str, ...]], ...]

    def __post_init__(self) -> None:
        normalized: list[tuple[str, tuple[str, ...]]] = []
        for letter, tokens in self.entries:
            if not letter:
                raise ConfigurationError("Leet map letter must not be empty")
            lowered = tuple(dict.fromkeys(token.lower() for token in tokens))
            if not lowered or any(not token for token in lowered):
                raise ConfigurationError(f"Leet map entry {letter!r} needs non-empty tokens")
            normalized.append((letter.lower(), lowered))
        object.__setattr__(self, "entries", tuple(normalized))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "LeetMap":
        return cls(tuple((letter, tuple(tokens)) for letter, tokens in mapping.items()))

    def substitutions(self) -> tuple[tuple[str, str], ...]:
        """Flatten to ``(token, letter)`` pairs in map order."""
        return tuple((token, letter) for letter, tokens in self.entries for token in tokens)


DEFAULT_LEET_MAP = LeetMap.from_mapping(
    {
        "a": ["4", "@"],
        "b": ["8"],
        "c": ["(", "{", "[", "<"],
        "d": ["6"],
        "e": ["3"],
        "f": ["#"],
        "g": ["9"],
        "h": ["#"],
        "i": ["1", "!", "|"],
        "j": ["7"],
        "k": ["X"],
        "l": ["1", "!", "|"],
        "o": ["0"],
        "s": ["5", "$"],
        "t": ["7"],
        "x": ["><"],
        "z": ["2"],
    }
)


def expand_all(
    variants: Iterable[str],
    leet_map: LeetMap = DEFAULT_LEET_MAP,
    *,
    max_variants: int = DEFAULT_MAX_VARIANTS,
) -> frozenset[str]:
    """Expand every string in *variants* until no new reading appears.

    Raises :exc:`ExpansionLimitExceeded` once more than *max_variants*
    readings would be held.
    """

    found = {variant.lower() for variant in variants}
    if len(found) > max_variants:
        raise ExpansionLimitExceeded(max_variants)

    substitutions = leet_map.substitutions()
    pending = set(found)
    while pending:
        produced: set[str] = set()
        for token, letter in substitutions:
            # Later substitutions also apply to readings produced earlier in this pass.
            for variant in list(pending | produced):
                if token not in variant:
                    continue
                candidate = variant.replace(token, letter)
                if candidate in found:
                    continue
                found.add(candidate)
                produced.add(candidate)
                if len(found) > max_variants:
                    logger.debug("leet expansion hit limit of %d variants", max_variants)
                    raise ExpansionLimitExceeded(max_variants)
        pending = produced

    return frozenset(found)


def expand(
    password: str,
    leet_map: LeetMap = DEFAULT_LEET_MAP,
    *,
    max_variants: int = DEFAULT_MAX_VARIANTS,
) -> frozenset[str]:
    """Return the lowercased password plus every plain-text leet reading of it."""

    return expand_all([password], leet_map, max_variants=max_variants)
