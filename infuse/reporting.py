"""Render dose results as console text.

Numbers arrive already rounded by :func:`infuse.calculator.calculate_dosage`
and are only formatted here.
"""

from __future__ import annotations

from .calculator import Results
from .units import Unit

# Display names for the per-unit block; mL is already reported on its own line.
_UNIT_LABELS = (
    (Unit.TSP, "tsp"),
    (Unit.TBSP, "tbsp"),
    (Unit.FL_OZ, "fl oz"),
    (Unit.CUP, "cup"),
)


def format_number(value: float) -> str:
    """Format a 2-decimal value without trailing zeros (``4.50`` -> ``4.5``)."""
    txt = f"{float(value):.2f}".rstrip("0").rstrip(".")
    return "0" if txt in ("", "-0") else txt


def format_results(results: Results) -> str:
    """Return the line-oriented, human-readable rendering of ``results``."""
    lines = [
        "Results:",
        f"  Total THC in infusion: {format_number(results.total_thc_mg)} mg",
        f"  mg per mL: {format_number(results.mg_per_ml)} mg",
        "  mg per unit:",
    ]
    for unit, label in _UNIT_LABELS:
        lines.append(f"    {label}: {format_number(results.mg_per_unit[unit])} mg")
    lines.append(
        f"  Total THC in recipe portion: {format_number(results.total_thc_in_recipe)} mg"
    )
    lines.append(f"  mg per serving: {format_number(results.mg_per_serving)} mg")
    return "\n".join(lines)
