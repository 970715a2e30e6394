"""
A Python package for estimating THC doses in home-made cannabis infusions.

Converts flower mass, potency and extraction efficiency into the THC content of
an infused base, then into the dose carried by a recipe portion and a serving.

Modules:
    - units: Kitchen volume units and their millilitre conversion factors.
    - calculator: The dose calculation and its input/result records.
    - presets: Worked example infusions.
    - reporting: Console text rendering of results.
    - cli: Command-line interface.
"""

__version__ = "1.0.0"

from .calculator import (
    THCA_TO_THC,
    Inputs,
    Results,
    calculate_dosage,
    round2,
)
from .presets import EXAMPLES, get_example
from .reporting import format_results
from .units import CONVERSION_TO_ML, Unit, ml_factor, to_ml

__all__ = [
    # Units
    "Unit",
    "CONVERSION_TO_ML",
    "ml_factor",
    "to_ml",
    # Calculation
    "THCA_TO_THC",
    "Inputs",
    "Results",
    "calculate_dosage",
    "round2",
    # Presets
    "EXAMPLES",
    "get_example",
    # Reporting
    "format_results",
]
