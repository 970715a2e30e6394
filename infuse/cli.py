"""Command-line interface for the infusion dose calculator.

Exit codes:
    0: results (or help/examples) printed.
    1: a flag value could not be parsed as a number.
    2: a required measurement is missing, zero or not finite.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import List, Optional, Sequence

from .calculator import DEFAULT_EFFICIENCY_PERCENT, Inputs, calculate_dosage
from .presets import EXAMPLES
from .reporting import format_results
from .units import Unit

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

MISSING_INPUTS_MESSAGE = (
    "Missing required numeric inputs. See --help for required flags."
)

_UNIT_CHOICES = ", ".join(u.value for u in Unit)


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the dose calculator."""
    parser = argparse.ArgumentParser(
        prog="infuse",
        description="Dosing calculator for home-made cannabis infusions.",
        epilog=(
            "Example: infuse --grams 7 --thc 21.5 --efficiency 75 "
            "--totalBaseMade 1 --totalBaseUnit cup --baseUsed 0.5 "
            "--recipeUnit cup --servings 10"
        ),
    )
    parser.add_argument("--grams", metavar="<number>", help="Cannabis grams (required).")
    parser.add_argument("--thc", metavar="<number>", help="THC %% (optional).")
    parser.add_argument(
        "--thca",
        metavar="<number>",
        help="THCA %% (optional, converted to THC with factor 0.877).",
    )
    parser.add_argument(
        "--efficiency",
        metavar="<number>",
        help=f"Extraction efficiency %% (default {DEFAULT_EFFICIENCY_PERCENT:g}).",
    )
    parser.add_argument(
        "--totalBaseMade",
        metavar="<number>",
        help="Total base volume made, e.g. 1 (required).",
    )
    parser.add_argument(
        "--totalBaseUnit",
        metavar="<unit>",
        default=Unit.ML.value,
        help=f"Unit for base made: {_UNIT_CHOICES} (default ml).",
    )
    parser.add_argument(
        "--baseUsed",
        metavar="<number>",
        help="Amount of base used in the recipe, e.g. 0.5 (required).",
    )
    parser.add_argument(
        "--recipeUnit",
        metavar="<unit>",
        default=Unit.ML.value,
        help=f"Unit for base used: {_UNIT_CHOICES} (default ml).",
    )
    parser.add_argument(
        "--servings",
        metavar="<number>",
        help="Number of servings in the recipe (required).",
    )
    parser.add_argument(
        "--examples", action="store_true", help="Show the worked example runs."
    )
    return parser


def _parse_number(flag: str, raw: Optional[str], default: float = 0.0) -> float:
    """Parse a numeric flag value; empty or absent values give ``default``.

    Raises:
        ValueError: If ``raw`` is not a number.
    """
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"--{flag} expects a number, got {raw!r}") from None


def inputs_from_args(args: argparse.Namespace) -> Inputs:
    """Build an :class:`Inputs` record from parsed CLI arguments.

    Raises:
        ValueError: If a numeric flag holds a non-numeric value.
    """
    return Inputs(
        cannabis_grams=_parse_number("grams", args.grams),
        thc_percent=_parse_number("thc", args.thc),
        thca_percent=_parse_number("thca", args.thca),
        efficiency_percent=_parse_number(
            "efficiency", args.efficiency, DEFAULT_EFFICIENCY_PERCENT
        ),
        total_base_made=_parse_number("totalBaseMade", args.totalBaseMade),
        total_base_unit=args.totalBaseUnit or Unit.ML.value,
        base_used=_parse_number("baseUsed", args.baseUsed),
        recipe_unit=args.recipeUnit or Unit.ML.value,
        servings=_parse_number("servings", args.servings),
    )


def missing_required(inputs: Inputs) -> List[str]:
    """Return the names of required measurements that are absent, zero or not finite."""
    required = {
        "grams": inputs.cannabis_grams,
        "totalBaseMade": inputs.total_base_made,
        "baseUsed": inputs.base_used,
        "servings": inputs.servings,
    }
    return [
        name
        for name, value in required.items()
        if not value or not math.isfinite(value)
    ]


def run_examples() -> None:
    """Print every worked example, separated by a divider."""
    for i, (description, inputs) in enumerate(EXAMPLES.values()):
        if i:
            print("\n---\n")
        results = calculate_dosage(inputs)
        print(f"Example {i + 1}: {description}")
        print(format_results(results))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    parser = _build_arg_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv:
        parser.print_help()
        return EXIT_OK

    args = parser.parse_args(argv)

    if args.examples:
        logger.debug("Running %d worked examples", len(EXAMPLES))
        run_examples()
        return EXIT_OK

    try:
        inputs = inputs_from_args(args)
    except ValueError as exc:
        logger.error("Invalid argument: %s", exc)
        return EXIT_ERROR

    missing = missing_required(inputs)
    if missing:
        logger.debug(
            "Missing, zero or non-finite required inputs: %s", ", ".join(missing)
        )
        print(MISSING_INPUTS_MESSAGE, file=sys.stderr)
        return EXIT_USAGE

    results = calculate_dosage(inputs)
    print(format_results(results))

    return EXIT_OK
