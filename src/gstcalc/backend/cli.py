"""Command-line GST calculator.

Examples::

    gstcalc forward 1000 --rate 18
    gstcalc reverse 1180 --category standard --json
    gstcalc rates
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence, TextIO

from gstcalc.backend.app.errors import InvalidArgument
from gstcalc.backend.app.services import GSTCalculator, get_default_calculator
from gstcalc.backend.version import get_project_version

logger = logging.getLogger(__name__)


class InputNotice(Exception):
    """User input that could not be parsed as a number."""


def _parse_number(raw: str, label: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise InputNotice(f"Please enter a valid {label} (non-negative number)") from None


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gstcalc",
        description="Compute Indian GST forward (base to total) or in reverse.",
    )
    parser.add_argument("--version", action="version", version=get_project_version())
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, amount, help_text in (
        ("forward", "base_price", "Add GST on top of a base price"),
        ("reverse", "total_price", "Extract GST from a tax-inclusive total"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument(amount, help="Amount in rupees")
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument("-r", "--rate", help="GST rate as a percentage, e.g. 18")
        source.add_argument("-c", "--category", help="Rate category, e.g. standard")
        sub.add_argument("--json", action="store_true", help="Print the full result as JSON")

    rates = subparsers.add_parser("rates", help="List the GST rate categories")
    rates.add_argument("--json", action="store_true", help="Print the table as JSON")

    return parser


def _resolve_rate(args: argparse.Namespace, calculator: GSTCalculator) -> float:
    if args.category is not None:
        return calculator.rate_for(args.category)
    return _parse_number(args.rate, "GST rate")


def _run_forward(args: argparse.Namespace, calculator: GSTCalculator, out: TextIO) -> None:
    base_price = _parse_number(args.base_price, "base price")
    result = calculator.calculate_forward(base_price, _resolve_rate(args, calculator))
    if args.json:
        json.dump(result.as_dict(), out, indent=2)
        out.write("\n")
        return
    out.write(f"GST amount:  {result.formatted.gst_amount}\n")
    out.write(f"Total price: {result.formatted.total_price}\n")


def _run_reverse(args: argparse.Namespace, calculator: GSTCalculator, out: TextIO) -> None:
    total_price = _parse_number(args.total_price, "total price")
    result = calculator.calculate_reverse(total_price, _resolve_rate(args, calculator))
    if args.json:
        json.dump(result.as_dict(), out, indent=2)
        out.write("\n")
        return
    out.write(f"Base price:  {result.formatted.base_price}\n")
    out.write(f"GST amount:  {result.formatted.gst_amount}\n")


def _run_rates(args: argparse.Namespace, calculator: GSTCalculator, out: TextIO) -> None:
    rates = calculator.get_gst_rates()
    if args.json:
        json.dump(rates, out, indent=2)
        out.write("\n")
        return
    width = max(len(name) for name in rates)
    for name, rate in rates.items():
        out.write(f"{name:<{width}}  {rate:g}%\n")


_COMMANDS = {"forward": _run_forward, "reverse": _run_reverse, "rates": _run_rates}


def main(
    argv: Sequence[str] | None = None,
    *,
    calculator: GSTCalculator | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Entry point for the ``gstcalc`` console script."""

    out = stdout or sys.stdout
    err = stderr or sys.stderr

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    calculator = calculator or get_default_calculator()
    try:
        _COMMANDS[args.command](args, calculator, out)
    except InputNotice as notice:
        err.write(f"{notice}\n")
        return 1
    except InvalidArgument as error:
        logger.debug("Calculation rejected: %r", error)
        err.write(f"Invalid input: {error}\n")
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
