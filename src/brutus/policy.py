"""Password policy configuration."""
from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from brutus.bruteforce import AttackProfile, get_profile
from brutus.entropy import ClassRequirements
from brutus.errors import ConfigurationError
from brutus.leet import DEFAULT_MAX_VARIANTS

MIN_LENGTH_FLOOR = 10
ENTROPY_FLOOR_MIN = 30
BRUTE_FORCE_DAYS_MIN = 30  # even a high-school kid will wait a month

_BOOL_OPTIONS = ("diminishing_returns", "enable_dictionary_lookup", "enable_leet_expansion")
_INT_OPTIONS = ("min_length", "max_length", "max_leet_variants")
_OPTIONAL_INT_OPTIONS = (
    "required_lower",
    "required_upper",
    "required_digits",
    "required_symbols",
    "brute_force_floor_days",
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PolicyConfig:
    """Thresholds a password must meet. ``None`` disables an optional rule."""

    min_length: int = MIN_LENGTH_FLOOR
    max_length: int = 64
    required_lower: int | None = 2
    required_upper: int | None = 1
    required_digits: int | None = 2
    required_symbols: int | None = 1
    symbol_set: str | None = None
    entropy_floor_bits: float | None = 30
    diminishing_returns: bool = False
    brute_force_floor_days: int | None = 60
    attack_profile: str = "medium"
    enable_dictionary_lookup: bool = True
    enable_leet_expansion: bool = True
    max_leet_variants: int = DEFAULT_MAX_VARIANTS

    def __post_init__(self) -> None:
        self._check_types()
        if self.min_length < MIN_LENGTH_FLOOR:
            raise ConfigurationError(
                f"Password must be at least {MIN_LENGTH_FLOOR} characters long, got min_length={self.min_length}"
            )
        if self.min_length > self.max_length:
            raise ConfigurationError(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})"
            )
        for name in ("required_lower", "required_upper", "required_digits", "required_symbols"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ConfigurationError(f"{name} must be at least 1 when enabled, got {value}")
        if self.symbol_set is not None and not self.symbol_set:
            raise ConfigurationError("symbol_set requires at least 1 symbol")
        if self.entropy_floor_bits is not None and self.entropy_floor_bits < ENTROPY_FLOOR_MIN:
            raise ConfigurationError(
                f"entropy_floor_bits must be at least {ENTROPY_FLOOR_MIN}, got {self.entropy_floor_bits}"
            )
        if self.brute_force_floor_days is not None and self.brute_force_floor_days < BRUTE_FORCE_DAYS_MIN:
            raise ConfigurationError(
                f"brute_force_floor_days must be at least {BRUTE_FORCE_DAYS_MIN}, got {self.brute_force_floor_days}"
            )
        if self.max_leet_variants < 1:
            raise ConfigurationError(f"max_leet_variants must be positive, got {self.max_leet_variants}")
        object.__setattr__(self, "attack_profile", get_profile(self.attack_profile).name)

    def _check_types(self) -> None:
        for name in _BOOL_OPTIONS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false, got {getattr(self, name)!r}")
        for name in _INT_OPTIONS:
            if not _is_int(getattr(self, name)):
                raise ConfigurationError(f"{name} must be an integer, got {getattr(self, name)!r}")
        for name in _OPTIONAL_INT_OPTIONS:
            value = getattr(self, name)
            if value is not None and not _is_int(value):
                raise ConfigurationError(f"{name} must be an integer or null, got {value!r}")
        bits = self.entropy_floor_bits
        if bits is not None and (isinstance(bits, bool) or not isinstance(bits, (int, float))):
            raise ConfigurationError(f"entropy_floor_bits must be a number or null, got {bits!r}")
        if not isinstance(self.attack_profile, str):
            raise ConfigurationError(f"attack_profile must be a string, got {self.attack_profile!r}")
        if self.symbol_set is not None and not isinstance(self.symbol_set, str):
            raise ConfigurationError(f"symbol_set must be a string or null, got {self.symbol_set!r}")

    @property
    def profile(self) -> AttackProfile:
        return get_profile(self.attack_profile)

    @property
    def bonus_requirements(self) -> ClassRequirements:
        """Per-class counts needed for the entropy composition bonus."""
        return ClassRequirements(
            lower=self.required_lower or 1,
            upper=self.required_upper or 1,
            digits=self.required_digits or 1,
            symbols=self.required_symbols or 1,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PolicyConfig":
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown policy option(s): {', '.join(unknown)}")
        try:
            return cls(**dict(data))
        except (TypeError, AttributeError) as exc:
            raise ConfigurationError(f"Invalid policy value: {exc}") from exc


def load_policy(path: Path) -> PolicyConfig:
    """Read a JSON policy file."""

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Policy file is not readable: {path} ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Policy file is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError("Policy file must contain a JSON object")
    return PolicyConfig.from_mapping(raw)
