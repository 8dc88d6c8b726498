"""Tests for NIST entropy estimation."""
from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from brutus.charsets import LOWER
from brutus.entropy import (
    ClassCounts,
    ClassRequirements,
    count_classes,
    keyspace_entropy,
    nist_bits,
    position_bits,
)

POLICY_REQUIREMENTS = ClassRequirements(lower=2, upper=1, digits=2, symbols=1)


@pytest.mark.parametrize(
    ("position", "bits"),
    [(1, 4.0), (2, 2.0), (8, 2.0), (9, 1.5), (20, 1.5), (21, 1.0), (100, 1.0)],
)
def test_position_allocation(position: int, bits: float) -> None:
    assert position_bits(position) == bits


def test_empty_and_single_character() -> None:
    assert nist_bits("") == 0.0
    assert nist_bits("a") == 5.5
    assert nist_bits("a", diminishing=True) == 5.5


def test_count_classes() -> None:
    assert count_classes("Tr0ub4dor&3") == ClassCounts(lower=6, upper=1, digits=3, symbols=1)
    assert count_classes("héllo") == ClassCounts(lower=4, upper=0, digits=0, symbols=1)


def test_custom_symbol_list_limits_symbol_count() -> None:
    assert count_classes("a&b!c", symbols="!").symbols == 1
    assert count_classes("a&b!c").symbols == 2


def test_all_four_bonuses_at_exact_requirement() -> None:
    # 4 + 5 * 2 positional bits, plus four 1.5-bit bonuses
    assert nist_bits("abC12!", requirements=POLICY_REQUIREMENTS) == pytest.approx(20.0)


def test_missing_class_loses_one_bonus() -> None:
    assert nist_bits("abC12x", requirements=POLICY_REQUIREMENTS) == pytest.approx(18.5)


def test_bonus_needs_required_count_not_presence() -> None:
    # only one digit against a requirement of two
    assert nist_bits("abC1x!", requirements=POLICY_REQUIREMENTS) == pytest.approx(18.5)


def test_troubador_expected_value() -> None:
    bits = nist_bits("Tr0ub4dor&3", requirements=POLICY_REQUIREMENTS)
    assert bits == pytest.approx(4 + 7 * 2 + 3 * 1.5 + 4 * 1.5)


def test_diminishing_penalty_schedule() -> None:
    assert nist_bits("aaa", diminishing=True) == pytest.approx(4 + 2 * 0.75 + 2 * 0.5625 + 1.5)
    assert nist_bits("aaaaaa", diminishing=True) == pytest.approx(
        4 + 2 * (0.75 + 0.5625 + 0.2109375) + 1.5
    )


def test_diminishing_without_repeats_matches_plain() -> None:
    assert nist_bits("abcdefgXYZ12", diminishing=True) == nist_bits("abcdefgXYZ12")


def test_repeats_are_penalized_per_character() -> None:
    plain = nist_bits("abababab")
    diminished = nist_bits("abababab", diminishing=True)
    assert diminished < plain


@given(st.text(max_size=80))
def test_entropy_never_negative(password: str) -> None:
    assert nist_bits(password) >= 0
    assert nist_bits(password, diminishing=True) >= 0


@given(st.text(min_size=1, max_size=40), st.characters())
def test_three_repeats_lower_entropy(prefix: str, char: str) -> None:
    password = prefix + char * 3
    assert nist_bits(password, diminishing=True) < nist_bits(password)


def test_keyspace_entropy() -> None:
    assert keyspace_entropy("", LOWER) == 0.0
    assert keyspace_entropy("abab", "ab") == pytest.approx(4.0)
    assert keyspace_entropy("aaaa", LOWER, average=False) == 0.0
    assert keyspace_entropy("aaaa", LOWER) == pytest.approx(2 * math.log2(26))
