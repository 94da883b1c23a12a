"""
BAC estimator: current BAC from drinks and drinks needed for a target BAC.
Use from project root: python -m bac_estimator
"""

from bac_estimator.units import convert, switch_units, unit_label
from bac_estimator.drinks import (
    DRINK_TYPES,
    Drink,
    DrinkKind,
    list_drink_kinds,
    total_alcohol_units,
)
from bac_estimator.levels import BAC_LEVELS, list_levels
from bac_estimator.calculations import (
    BodyMetrics,
    DrinkTargetResult,
    EstimationResult,
    estimate_current_bac,
    estimate_drinks_for_target,
)
from bac_estimator.session import SessionState
from bac_estimator.graph import save_target_chart, target_chart_data

__all__ = [
    "SessionState",
    "BodyMetrics",
    "Drink",
    "DrinkKind",
    "DrinkTargetResult",
    "EstimationResult",
    "estimate_current_bac",
    "estimate_drinks_for_target",
    "convert",
    "switch_units",
    "unit_label",
    "list_drink_kinds",
    "total_alcohol_units",
    "list_levels",
    "save_target_chart",
    "target_chart_data",
    "DRINK_TYPES",
    "BAC_LEVELS",
]
