"""NIST SP 800-63 style entropy estimation."""
from __future__ import annotations

import math
from dataclasses import dataclass

COMPOSITION_BONUS_BITS = 1.5

# (threshold, factor) pairs applied to a repeated character's multiplier.
_REPEAT_PENALTIES: tuple[tuple[float, float], ...] = (
    (0.75, 0.75),
    (0.5625, 0.375),
    (0.421875, 0.1875),
)


@dataclass(frozen=True)
class ClassCounts:
    lower: int
    upper: int
    digits: int
    symbols: int


@dataclass(frozen=True)
class ClassRequirements:
    """Minimum count of each class needed to earn its composition bonus."""

    lower: int = 1
    upper: int = 1
    digits: int = 1
    symbols: int = 1


def count_classes(password: str, symbols: str | None = None) -> ClassCounts:
    """Count lowercase, uppercase, digit and symbol characters.

    Symbols are anything outside ``[a-zA-Z0-9]`` unless a custom *symbols*
    list is given, in which case only its characters count.
    """

    lower = upper = digits = other = 0
    for char in password:
        if "a" <= char <= "z":
            lower += 1
        elif "A" <= char <= "Z":
            upper += 1
        elif "0" <= char <= "9":
            digits += 1
        elif symbols is None or char in symbols:
            other += 1
    return ClassCounts(lower=lower, upper=upper, digits=digits, symbols=other)


def position_bits(position: int) -> float:
    """Bits granted to the character at 1-based *position*."""

    if position == 1:
        return 4.0
    if position <= 8:
        return 2.0
    if position <= 20:
        return 1.5
    return 1.0


def _penalize(multiplier: float) -> float:
    for threshold, factor in _REPEAT_PENALTIES:
        if multiplier >= threshold:
            return multiplier * factor
    return 0.0


def composition_bonus(counts: ClassCounts, requirements: ClassRequirements) -> float:
    met = (
        counts.lower >= requirements.lower,
        counts.upper >= requirements.upper,
        counts.digits >= requirements.digits,
        counts.symbols >= requirements.symbols,
    )
    return COMPOSITION_BONUS_BITS * sum(met)


def nist_bits(
    password: str,
    *,
    diminishing: bool = False,
    requirements: ClassRequirements = ClassRequirements(),
    symbols: str | None = None,
) -> float:
    """Estimate password entropy in bits.

    With *diminishing* enabled every repeat of a character earns less than
    the previous occurrence; from its fifth occurrence on a character earns
    nothing.
    """

    bits = 0.0
    multipliers: dict[str, float] = {}
    for position, char in enumerate(password, start=1):
        if diminishing:
            multiplier = multipliers.get(char, 1.0)
            bits += position_bits(position) * multiplier
            multipliers[char] = _penalize(multiplier)
        else:
            bits += position_bits(position)

    bits += composition_bonus(count_classes(password, symbols), requirements)
    return bits


def keyspace_entropy(password: str, alphabet: str, *, average: bool = True) -> float:
    """Entropy as ``N * log2(R)`` over the assumed and the observed charset.

    The assumed charset is *alphabet*; the observed one is the set of unique
    characters in the password. Returns their mean, or the lower (observed)
    figure when *average* is false.
    """

    if not password:
        return 0.0
    length = len(password)
    max_entropy = length * math.log2(len(alphabet)) if alphabet else 0.0
    min_entropy = length * math.log2(len(set(password)))
    if average:
        return (min_entropy + max_entropy) / 2
    return min_entropy
