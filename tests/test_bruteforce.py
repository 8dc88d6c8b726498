"""Tests for brute-force attempt counting and time estimation."""
from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from brutus.bruteforce import (
    ATTACK_PROFILES,
    MAX_DAYS,
    SECONDS_PER_DAY,
    AttackProfile,
    count_attempts,
    days_to_crack,
    get_profile,
    simulate_attack,
)
from brutus.charsets import DEFAULT_LADDER, DIGITS, LOWER
from brutus.errors import ConfigurationError


def test_pin_attempts_match_numeric_value() -> None:
    assert count_attempts("0629", DIGITS) == 629
    assert count_attempts("6529", DIGITS) == 6529


def test_first_password_costs_zero_attempts() -> None:
    assert count_attempts("", DIGITS) == 0
    assert count_attempts("0000", DIGITS) == 0
    assert count_attempts("aaa", LOWER) == 0


@given(st.text(alphabet=DIGITS, min_size=1, max_size=60))
def test_digit_strings_read_as_base_ten(password: str) -> None:
    assert count_attempts(password, DIGITS) == int(password)


def test_rightmost_character_increase_is_monotonic() -> None:
    assert count_attempts("abc", LOWER) < count_attempts("abd", LOWER)
    assert count_attempts("abd", LOWER) - count_attempts("abc", LOWER) == 1


def test_most_significant_position_dominates() -> None:
    assert count_attempts("baaaaa", LOWER) > count_attempts("azzzzz", LOWER)


def test_large_passwords_stay_exact() -> None:
    alphabet = DEFAULT_LADDER.broadest
    base = len(alphabet)
    digit = alphabet.index("~")
    attempts = count_attempts("~" * 50, alphabet)

    assert attempts == sum(digit * base**power for power in range(50))
    assert attempts > 10**90


def test_character_outside_alphabet_rejected() -> None:
    with pytest.raises(ValueError):
        count_attempts("12a", DIGITS)


def test_days_floor_division() -> None:
    profile = get_profile("low")
    per_day = profile.attempts_per_second * SECONDS_PER_DAY
    assert days_to_crack(0, profile) == 0
    assert days_to_crack(per_day - 1, profile) == 0
    assert days_to_crack(per_day * 5 + per_day - 1, profile) == 5


def test_days_saturate_at_one_billion() -> None:
    profile = get_profile("dedicated")
    per_day = profile.attempts_per_day
    assert days_to_crack(per_day * MAX_DAYS, profile) == MAX_DAYS
    assert days_to_crack(per_day * (MAX_DAYS + 1), profile) == MAX_DAYS
    assert days_to_crack(10**200, profile) == MAX_DAYS


def test_builtin_profiles() -> None:
    assert ATTACK_PROFILES["low"].attempts_per_second == 10**6
    assert ATTACK_PROFILES["medium"].attempts_per_second == 10**10
    assert ATTACK_PROFILES["high"].attempts_per_second == 10**14
    assert ATTACK_PROFILES["dedicated"].attempts_per_second == 10**18
    assert get_profile(" High ").name == "high"


def test_unknown_profile_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Allowed profiles"):
        get_profile("nation-state")


@pytest.mark.parametrize("rate", [0, -5])
def test_non_positive_rate_rejected(rate: int) -> None:
    with pytest.raises(ConfigurationError):
        AttackProfile("broken", rate)


def test_simulate_all_zero_pin() -> None:
    estimate = simulate_attack("0000000000", get_profile("dedicated"))
    assert estimate.alphabet == DIGITS
    assert estimate.attempts == 0
    assert estimate.days == 0


def test_simulate_empty_password() -> None:
    estimate = simulate_attack("", get_profile("low"))
    assert estimate.attempts == 0
    assert estimate.days == 0


def test_simulate_long_password_saturates() -> None:
    estimate = simulate_attack("zZ9!" * 10, get_profile("dedicated"))
    assert estimate.days == MAX_DAYS
