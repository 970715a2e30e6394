"""Worked example infusions used by ``--examples``."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .calculator import Inputs
from .units import Unit

EXAMPLES: Mapping[str, Tuple[str, Inputs]] = MappingProxyType(
    {
        "example1": (
            "7g flower, 21.5% THC, 75% efficiency, 1 cup base, "
            "recipe uses 0.5 cup, 10 servings",
            Inputs(
                cannabis_grams=7,
                thc_percent=21.5,
                efficiency_percent=75,
                total_base_made=1,
                total_base_unit=Unit.CUP,
                base_used=0.5,
                recipe_unit=Unit.CUP,
                servings=10,
            ),
        ),
        "example2": (
            "5g flower, 18% THC + 2.5% THCA, 70% efficiency, 250 mL base, "
            "recipe uses 50 mL, 8 servings",
            Inputs(
                cannabis_grams=5,
                thc_percent=18,
                thca_percent=2.5,
                efficiency_percent=70,
                total_base_made=250,
                total_base_unit=Unit.ML,
                base_used=50,
                recipe_unit=Unit.ML,
                servings=8,
            ),
        ),
    }
)


def get_example(name: str) -> Tuple[str, Inputs]:
    """Return ``(description, inputs)`` for a named example.

    Raises:
        KeyError: If ``name`` is not a known example.
    """
    try:
        return EXAMPLES[name]
    except KeyError:
        raise KeyError(
            f"Unknown example {name!r}. Available: {', '.join(EXAMPLES)}"
        ) from None
