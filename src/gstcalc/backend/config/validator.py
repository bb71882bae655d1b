"""Utilities for validating rate table configuration and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Sequence

from .rate_config import ConfigurationError, RateTable, load_rate_table_from, resolve_rates_file
from .schema import FIXED_RATES, REQUIRED_CATEGORIES


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_required(scope: str, table: RateTable) -> list[str]:
    missing = [name for name in REQUIRED_CATEGORIES if name not in table.categories]
    if missing:
        return [_format_scope(scope, f"missing required categories: {', '.join(missing)}")]

    return [
        _format_scope(f"{scope}.{name}", f"fixed rate must stay at {rate:g}")
        for name, rate in FIXED_RATES.items()
        if table.categories[name] != rate
    ]


def _validate_bounds(scope: str, table: RateTable) -> list[str]:
    errors: list[str] = []
    for name, rate in table.categories.items():
        if rate < 0 or rate > 100:
            errors.append(
                _format_scope(f"{scope}.{name}", "rate must be between 0 and 100")
            )
    return errors


def _validate_ordering(scope: str, table: RateTable) -> list[str]:
    errors: list[str] = []
    rates = list(table.categories.values())

    duplicates = [value for value, count in Counter(rates).items() if count > 1]
    if duplicates:
        errors.append(
            _format_scope(
                scope,
                f"duplicate rate values detected: {sorted(duplicates)}",
            )
        )

    if rates != sorted(rates):
        errors.append(
            _format_scope(scope, "categories should be declared in ascending rate order"),
        )

    return errors


def validate_rate_table(table: RateTable) -> list[str]:
    """Return a list of human-readable issues found in ``table``."""

    scope = "rates"
    errors: list[str] = []
    errors.extend(_validate_required(scope, table))
    errors.extend(_validate_bounds(scope, table))
    errors.extend(_validate_ordering(scope, table))
    return errors


def validate_rates_file(path: Path) -> list[str]:
    """Load ``path`` and report schema failures alongside lint issues."""

    try:
        table = load_rate_table_from(path)
    except (ConfigurationError, FileNotFoundError) as error:
        return [_format_scope(path.name, str(error))]
    return validate_rate_table(table)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate GST rate table files.")
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Rate table files to validate (defaults to the active configuration)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    paths: list[Path] = args.paths or [resolve_rates_file()]

    exit_code = 0

    for path in paths:
        issues = validate_rates_file(path)
        if issues:
            exit_code = 1
            print(f"[{path.name}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{path.name}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
