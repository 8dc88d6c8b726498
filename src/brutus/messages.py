"""Localized rendering of evaluation results."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from brutus.evaluator import RuleKind, Violation

Lang = Literal["en", "ru"]


@dataclass(frozen=True)
class Strings:
    min_length: str
    max_length: str
    lowercase: str
    uppercase: str
    digits: str
    symbols: str
    entropy: str
    brute_force: str
    leet_inconclusive: str
    dictionary: str
    identity: str
    passed: str
    failed: str
    rule_header: str
    detail_header: str
    analysis_title: str
    label_length: str
    label_classes: str
    label_alphabet: str
    label_attempts: str
    label_days: str
    label_entropy: str
    label_keyspace: str
    days_unbounded: str


STRINGS: dict[Lang, Strings] = {
    "en": Strings(
        min_length="Password must be at least {required} characters (has {observed})",
        max_length="Password must be at most {required} characters (has {observed})",
        lowercase="Password needs at least {required} lowercase letters (has {observed})",
        uppercase="Password needs at least {required} uppercase letters (has {observed})",
        digits="Password needs at least {required} digits (has {observed})",
        symbols="Password needs at least {required} symbols (has {observed})",
        entropy="Password entropy is {observed:.1f} bits, at least {required} required",
        brute_force="Password could be brute forced in {observed} days, at least {required} required",
        leet_inconclusive="Password has too many look-alike characters to check safely (over {observed} readings)",
        dictionary="Password is a common password or dictionary word ({observed})",
        identity="Password contains personal information ({observed})",
        passed="You have a strong password!",
        failed="Password does not meet the policy.",
        rule_header="Rule",
        detail_header="Detail",
        analysis_title="Password analysis",
        label_length="Length",
        label_classes="lower / upper / digits / symbols",
        label_alphabet="Attacker alphabet",
        label_attempts="Attempts to reach",
        label_days="Days to crack",
        label_entropy="NIST entropy",
        label_keyspace="Keyspace entropy",
        days_unbounded="1,000,000,000+ (practically uncrackable)",
    ),
    "ru": Strings(
        min_length="Пароль должен содержать не менее {required} символов (сейчас {observed})",
        max_length="Пароль должен содержать не более {required} символов (сейчас {observed})",
        lowercase="Нужно не менее {required} строчных букв (сейчас {observed})",
        uppercase="Нужно не менее {required} заглавных букв (сейчас {observed})",
        digits="Нужно не менее {required} цифр (сейчас {observed})",
        symbols="Нужно не менее {required} спецсимволов (сейчас {observed})",
        entropy="Энтропия пароля {observed:.1f} бит, требуется не менее {required}",
        brute_force="Пароль можно подобрать за {observed} дн., требуется не менее {required}",
        leet_inconclusive="Слишком много похожих символов для проверки (более {observed} вариантов)",
        dictionary="Пароль слишком распространён или есть в словаре ({observed})",
        identity="Пароль содержит личные данные ({observed})",
        passed="Надёжный пароль!",
        failed="Пароль не соответствует политике.",
        rule_header="Правило",
        detail_header="Подробности",
        analysis_title="Анализ пароля",
        label_length="Длина",
        label_classes="строчные / заглавные / цифры / спецсимволы",
        label_alphabet="Алфавит атакующего",
        label_attempts="Попыток до пароля",
        label_days="Дней на подбор",
        label_entropy="Энтропия NIST",
        label_keyspace="Энтропия пространства",
        days_unbounded="1 000 000 000+ (практически не подобрать)",
    ),
}


def get_strings(lang: Lang) -> Strings:
    """Return localized strings, defaulting to English."""

    return STRINGS.get(lang, STRINGS["en"])


def format_violation(violation: Violation, lang: Lang = "en") -> str:
    template: str = getattr(get_strings(lang), violation.kind)
    return template.format(observed=violation.observed, required=violation.required)


def rule_label(kind: RuleKind) -> str:
    return kind.replace("_", "-")
