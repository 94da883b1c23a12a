"""Imperial/metric conversions for body weight and height.

- weight: lb <-> kg
- height: in <-> cm
"""

from typing import Optional, Tuple

IMPERIAL = "imperial"
METRIC = "metric"
UNIT_SYSTEMS = (IMPERIAL, METRIC)

WEIGHT = "weight"
HEIGHT = "height"

LB_TO_KG = 0.453592
KG_TO_LB = 2.20462
IN_TO_CM = 2.54
CM_TO_IN = 0.393701

_TO_METRIC = {WEIGHT: LB_TO_KG, HEIGHT: IN_TO_CM}
_TO_IMPERIAL = {WEIGHT: KG_TO_LB, HEIGHT: CM_TO_IN}

_LABELS = {
    IMPERIAL: {WEIGHT: "lbs", HEIGHT: "inches"},
    METRIC: {WEIGHT: "kg", HEIGHT: "cm"},
}

# Form fields show one decimal after a unit switch.
DISPLAY_DECIMALS = 1


def _check(units: str, dimension: str) -> None:
    if units not in UNIT_SYSTEMS:
        raise ValueError(f"unknown unit system: {units!r}")
    if dimension not in _TO_METRIC:
        raise ValueError(f"unknown dimension: {dimension!r}")


def to_metric(value: float, dimension: str) -> float:
    """lb -> kg or in -> cm."""
    _check(METRIC, dimension)
    return value * _TO_METRIC[dimension]


def to_imperial(value: float, dimension: str) -> float:
    """kg -> lb or cm -> in."""
    _check(IMPERIAL, dimension)
    return value * _TO_IMPERIAL[dimension]


def convert(value: float, from_units: str, to_units: str, dimension: str) -> float:
    """Convert a weight or height between unit systems."""
    _check(from_units, dimension)
    _check(to_units, dimension)
    if from_units == to_units:
        return value
    if to_units == METRIC:
        return to_metric(value, dimension)
    return to_imperial(value, dimension)


def unit_label(units: str, dimension: str) -> str:
    """Short label for form fields, e.g. 'lbs' or 'cm'."""
    _check(units, dimension)
    return _LABELS[units][dimension]


def unit_labels(units: str) -> dict:
    return {WEIGHT: unit_label(units, WEIGHT), HEIGHT: unit_label(units, HEIGHT)}


def switch_units(
    weight: Optional[float],
    height: Optional[float],
    from_units: str,
    to_units: str,
) -> Tuple[Optional[float], Optional[float]]:
    """Rewrite stored weight and height for a new unit system.

    Values are rounded to the form's display precision. A missing value stays
    missing.
    """
    def _one(value: Optional[float], dimension: str) -> Optional[float]:
        if value is None:
            return None
        return round(convert(value, from_units, to_units, dimension), DISPLAY_DECIMALS)

    return _one(weight, WEIGHT), _one(height, HEIGHT)
