"""Command line interface for Brutus."""

from __future__ import annotations

import getpass
import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from brutus import __version__
from brutus.bruteforce import MAX_DAYS
from brutus.errors import ConfigurationError, ExpansionLimitExceeded, ResourceError
from brutus.evaluator import PolicyEvaluator
from brutus.leet import DEFAULT_MAX_VARIANTS, expand
from brutus.messages import format_violation, get_strings, rule_label
from brutus.policy import PolicyConfig, load_policy
from brutus.wordlist import COMMON_PASSWORDS, WordList, load_wordlist

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_WEAK = 2
EXIT_CONFIG = 3
EXIT_RESOURCE = 4

console = Console()


def _package_version() -> str:
    try:
        return version("brutus-strength")
    except PackageNotFoundError:
        return __version__


def _prompt_password(password_opt: str | None) -> str:
    if password_opt is not None:
        return password_opt
    return getpass.getpass("Password: ")


def _handle_action(action: Callable[[], int]) -> int:
    try:
        return action()
    except ConfigurationError as exc:
        console.print(f"[red]Invalid policy:[/red] {exc}")
        return EXIT_CONFIG
    except ResourceError as exc:
        console.print(f"[red]Word list error:[/red] {exc}")
        return EXIT_RESOURCE
    except ExpansionLimitExceeded as exc:
        console.print(f"[red]{exc}.[/red] Use --max-variants to raise the limit.")
        return EXIT_USAGE
    except click.ClickException as exc:
        console.print(f"[red]{escape(exc.format_message())}[/red]")
        return EXIT_USAGE
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Unexpected error:[/red] {exc}")
        return EXIT_USAGE


def _load_config(policy_path: Path | None) -> PolicyConfig:
    if policy_path is None:
        return PolicyConfig()
    return load_policy(policy_path)


def _load_dictionary(
    wordlist: Path | None, start_line: int, end_line: int | None
) -> WordList:
    if wordlist is None:
        return COMMON_PASSWORDS
    return load_wordlist(wordlist, start_line=start_line, end_line=end_line)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="Brutus")
@click.option("--verbose/--quiet", "verbose", default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Grade password strength against a brute-force and entropy policy."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command(
    help="Check a password against the policy.",
    epilog="Examples:\n  brutus check --identity chris --identity 1492\n  brutus check 'Tr0ub4dor&3' --policy policy.json --fail-fast",
)
@click.argument("password_arg", metavar="PASSWORD", required=False)
@click.option(
    "--policy",
    "policy_path",
    type=click.Path(path_type=Path),
    help="JSON policy file (defaults to the built-in policy).",
)
@click.option("--identity", "identity", multiple=True, help="Personal token the password must not contain.")
@click.option(
    "--wordlist",
    type=click.Path(path_type=Path),
    help="Common-password file, one entry per line.",
)
@click.option("--start-line", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--end-line", type=click.IntRange(min=1), default=None)
@click.option("--no-dictionary", "no_dictionary", is_flag=True, help="Skip the common-password lookup.")
@click.option(
    "--fail-fast/--collect-all",
    "fail_fast",
    default=False,
    help="Stop at the first violated rule.",
)
@click.option(
    "--lang",
    type=click.Choice(["en", "ru"], case_sensitive=False),
    default="en",
    show_default=True,
)
@click.pass_context
def check(
    ctx: click.Context,
    password_arg: str | None,
    policy_path: Path | None,
    identity: tuple[str, ...],
    wordlist: Path | None,
    start_line: int,
    end_line: int | None,
    no_dictionary: bool,
    fail_fast: bool,
    lang: str,
) -> None:
    def _run() -> int:
        if wordlist is None and (start_line != 1 or end_line is not None):
            raise click.UsageError("--start-line and --end-line require --wordlist")
        if end_line is not None and end_line < start_line:
            raise click.BadParameter("must not be before --start-line", param_hint="--end-line")
        config = _load_config(policy_path)
        dictionary = None if no_dictionary else _load_dictionary(wordlist, start_line, end_line)
        password = _prompt_password(password_arg)
        evaluator = PolicyEvaluator(config, dictionary=dictionary)
        report = evaluator.evaluate(
            password, identity, mode="fail-fast" if fail_fast else "collect-all"
        )
        strings = get_strings(lang)  # type: ignore[arg-type]
        if report.passed:
            console.print(f"[green]{strings.passed}[/green]")
            return EXIT_SUCCESS

        table = Table(show_header=True, box=None)
        table.add_column(strings.rule_header)
        table.add_column(strings.detail_header)
        for violation in report.violations:
            table.add_row(rule_label(violation.kind), escape(format_violation(violation, lang)))  # type: ignore[arg-type]
        console.print(f"[red]{strings.failed}[/red]")
        console.print(table)
        return EXIT_WEAK

    ctx.exit(_handle_action(_run))


@cli.command(
    help="Show entropy and brute-force figures for a password.",
    epilog="Example:\n  brutus analyze 'Tr0ub4dor&3' --policy policy.json",
)
@click.argument("password_arg", metavar="PASSWORD", required=False)
@click.option("--policy", "policy_path", type=click.Path(path_type=Path))
@click.option(
    "--lang",
    type=click.Choice(["en", "ru"], case_sensitive=False),
    default="en",
    show_default=True,
)
@click.pass_context
def analyze(ctx: click.Context, password_arg: str | None, policy_path: Path | None, lang: str) -> None:
    def _run() -> int:
        config = _load_config(policy_path)
        password = _prompt_password(password_arg)
        analysis = PolicyEvaluator(config).analyze(password)
        strings = get_strings(lang)  # type: ignore[arg-type]
        counts = analysis.counts

        days = strings.days_unbounded if analysis.days_to_crack >= MAX_DAYS else f"{analysis.days_to_crack:,}"
        table = Table(show_header=False, box=None)
        table.add_row(strings.label_length, str(analysis.length))
        table.add_row(
            strings.label_classes,
            f"{counts.lower} / {counts.upper} / {counts.digits} / {counts.symbols}",
        )
        table.add_row(strings.label_alphabet, f"{analysis.alphabet_size} chars")
        table.add_row(strings.label_attempts, f"{analysis.attempts:,}")
        table.add_row(strings.label_days, f"{days} ({config.attack_profile})")
        table.add_row(strings.label_entropy, f"{analysis.entropy_bits:.1f} bits")
        table.add_row(strings.label_keyspace, f"{analysis.keyspace_bits:.1f} bits")

        console.print(f"[bold]{strings.analysis_title}[/bold]")
        console.print(table)
        return EXIT_SUCCESS

    ctx.exit(_handle_action(_run))


@cli.command(
    name="expand",
    help="List the plain-text readings of a leetspeak password.",
    epilog="Example:\n  brutus expand 'p@55w0rd'",
)
@click.argument("password")
@click.option("--max-variants", type=click.IntRange(min=1), default=DEFAULT_MAX_VARIANTS, show_default=True)
@click.pass_context
def expand_cmd(ctx: click.Context, password: str, max_variants: int) -> None:
    def _run() -> int:
        for variant in sorted(expand(password, max_variants=max_variants)):
            console.print(variant, markup=False, highlight=False)
        return EXIT_SUCCESS

    ctx.exit(_handle_action(_run))


@cli.command(name="version", help="Print the Brutus version.")
def version_cmd() -> None:
    console.print(f"Brutus, version {_package_version()}")


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="brutus", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
