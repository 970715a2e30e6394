"""Centralized volume unit conversion utilities."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

logger = logging.getLogger(__name__)


class Unit(str, Enum):
    """Supported kitchen volume units."""

    ML = "ml"
    TSP = "tsp"
    TBSP = "tbsp"
    FL_OZ = "fl_oz"
    CUP = "cup"


# US customary kitchen measures.
CONVERSION_TO_ML: Mapping[Unit, float] = MappingProxyType(
    {
        Unit.ML: 1.0,
        Unit.TSP: 4.92892,
        Unit.TBSP: 14.7868,
        Unit.FL_OZ: 29.5735,
        Unit.CUP: 236.588,
    }
)


def ml_factor(unit: Union[Unit, str, None]) -> float:
    """Return the millilitre factor for a unit token.

    Args:
        unit (Unit | str | None): A :class:`Unit` member or its string value.

    Returns:
        float: Millilitres per one ``unit``.

    Note:
        Unrecognized tokens convert as millilitres (factor 1). A warning is
        logged so typos such as ``"cups"`` remain visible to the caller.
    """
    try:
        return CONVERSION_TO_ML[Unit(unit)]
    except ValueError:
        logger.warning("Unrecognized volume unit %r; treating it as ml", unit)
        return CONVERSION_TO_ML[Unit.ML]


def to_ml(amount: float, unit: Union[Unit, str, None]) -> float:
    """Convert ``amount`` expressed in ``unit`` to millilitres."""
    return ml_factor(unit) * float(amount)
