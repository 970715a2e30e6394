"""Cannabinoid dose calculation for home-made infusions.

Total THC in an infusion is derived from the dry flower mass, its THC and THCA
potency, and the fraction assumed to transfer into the base during infusion:

    THC_total (mg) = m_flower (g) * 1000 * (THC% + 0.877 * THCA%) / 100 * eff% / 100

The factor 0.877 is the molar-mass ratio THC/THCA (314.5 / 358.5), i.e. the
mass of THC obtained from complete decarboxylation of 1 mg THCA.

The concentration of the base (mg/mL) then fixes the dose carried by any
portion of it, and the recipe portion is split evenly across servings.

Rounding convention:
    Every reported value is rounded to 2 decimal places only at the output
    boundary; intermediate arithmetic keeps full float precision so rounding
    error does not compound across steps.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .units import CONVERSION_TO_ML, Unit, to_ml

logger = logging.getLogger(__name__)

THCA_TO_THC: float = 0.877
DEFAULT_EFFICIENCY_PERCENT: float = 75.0
MG_PER_G: float = 1000.0


@dataclass(frozen=True)
class Inputs:
    """Measurements describing one infusion and the recipe that uses it.

    Attributes:
        cannabis_grams: Dry flower mass infused, in grams.
        total_base_made: Amount of infused base produced.
        total_base_unit: Unit of ``total_base_made``.
        base_used: Amount of infused base the recipe uses.
        recipe_unit: Unit of ``base_used``.
        servings: Number of servings the recipe yields.
        thc_percent: THC content of the flower, percent by mass.
        thca_percent: THCA content of the flower, percent by mass.
        efficiency_percent: Share of cannabinoids extracted into the base.
            ``None`` selects the 75 % default.
    """

    cannabis_grams: Optional[float]
    total_base_made: Optional[float]
    total_base_unit: Union[Unit, str]
    base_used: Optional[float]
    recipe_unit: Union[Unit, str]
    servings: Optional[float]
    thc_percent: Optional[float] = 0.0
    thca_percent: Optional[float] = 0.0
    efficiency_percent: Optional[float] = DEFAULT_EFFICIENCY_PERCENT


@dataclass(frozen=True)
class Results:
    """Rounded dose figures for one infusion.

    Attributes:
        total_thc_mg: THC in the whole batch of base, mg.
        mg_per_ml: Concentration of the base, mg/mL.
        mg_per_unit: Concentration expressed per each supported unit. Left
            out of the hash, so records stay hashable.
        total_thc_in_recipe: THC in the portion of base the recipe uses, mg.
        mg_per_serving: THC per serving, mg.
    """

    total_thc_mg: float
    mg_per_ml: float
    mg_per_unit: Dict[Unit, float] = field(hash=False)
    total_thc_in_recipe: float
    mg_per_serving: float

    def as_dict(self) -> Dict[str, Any]:
        """Return a plain-dict copy with unit keys as strings."""
        return {
            "total_thc_mg": self.total_thc_mg,
            "mg_per_ml": self.mg_per_ml,
            "mg_per_unit": {u.value: v for u, v in self.mg_per_unit.items()},
            "total_thc_in_recipe": self.total_thc_in_recipe,
            "mg_per_serving": self.mg_per_serving,
        }


def round2(x: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    Non-finite values (an overflowed intermediate) round to 0.
    """
    if not math.isfinite(x):
        return 0.0
    scaled = abs(x) * 100.0
    if not math.isfinite(scaled):
        # Already integral at this magnitude.
        return x
    r = math.floor(scaled)
    if scaled - r >= 0.5:
        r += 1
    return math.copysign(r / 100.0, x) if r else 0.0


def _non_negative(value: Any) -> float:
    """Coerce a raw numeric field to a finite, non-negative float (else 0)."""
    if value is None:
        return 0.0
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(x) or x < 0:
        return 0.0
    return x


def _efficiency(value: Any) -> float:
    if value is None:
        return DEFAULT_EFFICIENCY_PERCENT
    return _non_negative(value)


def calculate_dosage(inputs: Inputs) -> Results:
    """Calculate THC totals, concentration and per-serving dose.

    Args:
        inputs (Inputs): Infusion and recipe measurements. Missing, negative,
            non-numeric or non-finite amounts are treated as 0; a missing
            efficiency falls back to 75 %.

    Returns:
        Results: All figures rounded to 2 decimal places.

    Note:
        Never raises for bad measurements. A zero base volume yields a zero
        concentration and zero servings yield a zero per-serving dose instead
        of a division error.
    """
    grams = _non_negative(inputs.cannabis_grams)
    thc_percent = _non_negative(inputs.thc_percent)
    thca_percent = _non_negative(inputs.thca_percent)
    efficiency_percent = _efficiency(inputs.efficiency_percent)
    total_base_made = _non_negative(inputs.total_base_made)
    base_used = _non_negative(inputs.base_used)
    servings = _non_negative(inputs.servings)

    thc_from_thca = thca_percent * THCA_TO_THC
    total_thc_percent = thc_percent + thc_from_thca

    total_thc_mg = (
        grams * MG_PER_G * (total_thc_percent / 100.0) * (efficiency_percent / 100.0)
    )

    total_base_ml = to_ml(total_base_made, inputs.total_base_unit)
    base_used_ml = to_ml(base_used, inputs.recipe_unit)

    mg_per_ml = total_thc_mg / total_base_ml if total_base_ml > 0 else 0.0
    total_thc_in_recipe = mg_per_ml * base_used_ml
    mg_per_serving = total_thc_in_recipe / servings if servings > 0 else 0.0

    logger.debug(
        "THC %.4f%% (THCA contributes %.4f%%), %.4f mg over %.4f mL base",
        total_thc_percent,
        thc_from_thca,
        total_thc_mg,
        total_base_ml,
    )

    mg_per_unit = {
        unit: round2(mg_per_ml * factor) for unit, factor in CONVERSION_TO_ML.items()
    }

    return Results(
        total_thc_mg=round2(total_thc_mg),
        mg_per_ml=round2(mg_per_ml),
        mg_per_unit=mg_per_unit,
        total_thc_in_recipe=round2(total_thc_in_recipe),
        mg_per_serving=round2(mg_per_serving),
    )
