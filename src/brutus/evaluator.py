"""Evaluate passwords against a :class:`~brutus.policy.PolicyConfig`."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal, Union

from brutus.bruteforce import simulate_attack
from brutus.charsets import DEFAULT_LADDER, CharsetLadder
from brutus.entropy import ClassCounts, count_classes, keyspace_entropy, nist_bits
from brutus.errors import ExpansionLimitExceeded
from brutus.leet import DEFAULT_LEET_MAP, LeetMap, expand
from brutus.policy import PolicyConfig
from brutus.wordlist import COMMON_PASSWORDS, WordList

logger = logging.getLogger(__name__)

RuleKind = Literal[
    "min_length",
    "max_length",
    "lowercase",
    "uppercase",
    "digits",
    "symbols",
    "entropy",
    "brute_force",
    "leet_inconclusive",
    "dictionary",
    "identity",
]
Mode = Literal["collect-all", "fail-fast"]
Value = Union[int, float, str, None]

RULE_ORDER: tuple[RuleKind, ...] = (
    "min_length",
    "max_length",
    "lowercase",
    "uppercase",
    "digits",
    "symbols",
    "entropy",
    "brute_force",
    "leet_inconclusive",
    "dictionary",
    "identity",
)


@dataclass(frozen=True)
class Violation:
    kind: RuleKind
    observed: Value
    required: Value


@dataclass(frozen=True)
class EvaluationReport:
    violations: tuple[Violation, ...]
    mode: Mode = "collect-all"

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def kinds(self) -> tuple[RuleKind, ...]:
        return tuple(violation.kind for violation in self.violations)


@dataclass(frozen=True)
class StrengthAnalysis:
    length: int
    counts: ClassCounts
    alphabet_size: int
    attempts: int
    days_to_crack: int
    entropy_bits: float
    keyspace_bits: float


def _normalize_tokens(tokens: Iterable[str]) -> tuple[str, ...]:
    cleaned = (token.strip().lower() for token in tokens)
    return tuple(dict.fromkeys(token for token in cleaned if token))


@dataclass(frozen=True)
class PolicyEvaluator:
    """Runs every policy rule against a password.

    Holds only read-only configuration, so a single instance can be shared
    between threads.
    """

    config: PolicyConfig = field(default_factory=PolicyConfig)
    ladder: CharsetLadder = DEFAULT_LADDER
    leet_map: LeetMap = DEFAULT_LEET_MAP
    dictionary: WordList | None = COMMON_PASSWORDS

    def evaluate(
        self,
        password: str,
        identity_tokens: Iterable[str] = (),
        *,
        mode: Mode = "collect-all",
    ) -> EvaluationReport:
        if mode not in ("collect-all", "fail-fast"):
            raise ValueError(f"Unknown evaluation mode: {mode!r}")

        checks = self._violations(password, _normalize_tokens(identity_tokens))
        if mode == "fail-fast":
            first = next(checks, None)
            violations: tuple[Violation, ...] = () if first is None else (first,)
        else:
            violations = tuple(checks)

        logger.debug(
            "evaluated password (len=%d, mode=%s): %s",
            len(password),
            mode,
            ", ".join(v.kind for v in violations) or "passed",
        )
        return EvaluationReport(violations=violations, mode=mode)

    def _violations(self, password: str, tokens: tuple[str, ...]) -> Iterator[Violation]:
        # Ordered cheapest first; fail-fast stops consuming after the first yield.
        config = self.config
        length = len(password)
        if length < config.min_length:
            yield Violation("min_length", length, config.min_length)
        if length > config.max_length:
            yield Violation("max_length", length, config.max_length)

        counts = count_classes(password, config.symbol_set)
        for kind, observed, required in (
            ("lowercase", counts.lower, config.required_lower),
            ("uppercase", counts.upper, config.required_upper),
            ("digits", counts.digits, config.required_digits),
            ("symbols", counts.symbols, config.required_symbols),
        ):
            if required is not None and observed < required:
                yield Violation(kind, observed, required)

        if config.entropy_floor_bits is not None:
            bits = nist_bits(
                password,
                diminishing=config.diminishing_returns,
                requirements=config.bonus_requirements,
                symbols=config.symbol_set,
            )
            if bits < config.entropy_floor_bits:
                yield Violation("entropy", bits, config.entropy_floor_bits)

        if config.brute_force_floor_days is not None:
            estimate = simulate_attack(password, config.profile, self.ladder)
            if estimate.days < config.brute_force_floor_days:
                yield Violation("brute_force", estimate.days, config.brute_force_floor_days)

        check_dictionary = config.enable_dictionary_lookup and self.dictionary is not None
        if not check_dictionary and not tokens:
            return

        if config.enable_leet_expansion:
            try:
                variants = expand(password, self.leet_map, max_variants=config.max_leet_variants)
            except ExpansionLimitExceeded as exc:
                yield Violation("leet_inconclusive", exc.limit, None)
                return
        else:
            variants = frozenset({password.lower()})
        ordered = sorted(variants)

        if check_dictionary:
            match = next((variant for variant in ordered if variant in self.dictionary), None)
            if match is not None:
                yield Violation("dictionary", match, None)

        if tokens:
            hit = next((token for token in tokens if any(token in variant for variant in ordered)), None)
            if hit is not None:
                yield Violation("identity", hit, None)

    def analyze(self, password: str) -> StrengthAnalysis:
        """Collect the raw strength figures behind the rules."""

        config = self.config
        estimate = simulate_attack(password, config.profile, self.ladder)
        bits = nist_bits(
            password,
            diminishing=config.diminishing_returns,
            requirements=config.bonus_requirements,
            symbols=config.symbol_set,
        )
        return StrengthAnalysis(
            length=len(password),
            counts=count_classes(password, config.symbol_set),
            alphabet_size=len(estimate.alphabet),
            attempts=estimate.attempts,
            days_to_crack=estimate.days,
            entropy_bits=bits,
            keyspace_bits=keyspace_entropy(password, estimate.alphabet),
        )


def evaluate_password(
    password: str,
    config: PolicyConfig | None = None,
    identity_tokens: Iterable[str] = (),
    *,
    mode: Mode = "collect-all",
    dictionary: WordList | None = COMMON_PASSWORDS,
) -> EvaluationReport:
    """Evaluate *password* with the default ladder and leet map."""

    evaluator = PolicyEvaluator(config or PolicyConfig(), dictionary=dictionary)
    return evaluator.evaluate(password, identity_tokens, mode=mode)


def analyze_password(password: str, config: PolicyConfig | None = None) -> StrengthAnalysis:
    return PolicyEvaluator(config or PolicyConfig()).analyze(password)
