"""BAC estimates using a Widmark-style ratio with a BMI adjustment.

Model:
- BAC = [alcohol_units * 100 / (body_weight_g * r * bmi_adjustment)] - 0.015
- r = 0.68 (male), 0.55 (female)
- bmi_adjustment = 0.85 if BMI > 25, 1.15 if BMI < 18.5, else 1.0
- Elimination: a flat 0.015 subtracted once, not scaled by elapsed time

Both estimators return None ("unavailable") when weight, height or gender is
missing or not a finite positive number.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from bac_estimator import units as unit_conv
from bac_estimator.drinks import DRINK_TYPES, Drink, DrinkKind, total_alcohol_units

logger = logging.getLogger(__name__)

MALE = "male"
FEMALE = "female"
GENDERS = (MALE, FEMALE)

# Distribution ratio (Widmark r)
R_MALE = 0.68
R_FEMALE = 0.55

BMI_OVERWEIGHT = 25.0
BMI_UNDERWEIGHT = 18.5
ADJUST_OVERWEIGHT = 0.85
ADJUST_UNDERWEIGHT = 1.15

# Flat elimination term (% BAC), applied once.
ELIMINATION_FLAT = 0.015


def parse_positive(value) -> Optional[float]:
    """Float from a number or numeric string; None unless finite and > 0."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed) or parsed <= 0:
        return None
    return parsed


def parse_gender(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    lowered = value.strip().lower()
    return lowered if lowered in GENDERS else None


@dataclass(frozen=True)
class BodyMetrics:
    """Weight and height in the selected unit system, plus gender.

    Fields may be None when the form is incomplete.
    """

    weight: Optional[float]
    height: Optional[float]
    gender: Optional[str]
    units: str = unit_conv.IMPERIAL

    @classmethod
    def from_raw(cls, weight, height, gender, units: str = unit_conv.IMPERIAL) -> "BodyMetrics":
        """Build from form values; unparseable entries become None."""
        if units not in unit_conv.UNIT_SYSTEMS:
            raise ValueError(f"unknown unit system: {units!r}")
        return cls(
            weight=parse_positive(weight),
            height=parse_positive(height),
            gender=parse_gender(gender),
            units=units,
        )

    @property
    def is_complete(self) -> bool:
        return (
            parse_positive(self.weight) is not None
            and parse_positive(self.height) is not None
            and parse_gender(self.gender) is not None
        )

    def to_metric(self) -> Optional[Tuple[float, float]]:
        """(weight_kg, height_cm), or None when incomplete."""
        if not self.is_complete:
            return None
        weight = float(self.weight)
        height = float(self.height)
        if self.units == unit_conv.IMPERIAL:
            weight = unit_conv.to_metric(weight, unit_conv.WEIGHT)
            height = unit_conv.to_metric(height, unit_conv.HEIGHT)
        return weight, height

    def with_units(self, units: str) -> "BodyMetrics":
        """Same body, values rewritten for another unit system."""
        weight, height = unit_conv.switch_units(self.weight, self.height, self.units, units)
        return BodyMetrics(weight=weight, height=height, gender=self.gender, units=units)


@dataclass(frozen=True)
class EstimationResult:
    current_bac: float

    def to_dict(self) -> dict:
        return {"current_bac": round(self.current_bac, 4)}


@dataclass(frozen=True)
class DrinkTargetResult:
    """Drinks of one kind alone that reach the target; three alternatives."""

    beers: int
    wines: int
    shots: int

    def to_dict(self) -> dict:
        return {"beers": self.beers, "wines": self.wines, "shots": self.shots}


def bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100.0
    return weight_kg / (height_m * height_m)


def bmi_adjustment(bmi_value: float) -> float:
    if bmi_value > BMI_OVERWEIGHT:
        return ADJUST_OVERWEIGHT
    if bmi_value < BMI_UNDERWEIGHT:
        return ADJUST_UNDERWEIGHT
    return 1.0


def gender_constant(gender: str) -> float:
    return R_MALE if gender == MALE else R_FEMALE


def _distribution(metrics: Optional[BodyMetrics]) -> Optional[Tuple[float, float, float]]:
    """(body_weight_g, r, bmi_adjustment), shared by both estimators."""
    if metrics is None:
        return None
    normalized = metrics.to_metric()
    if normalized is None:
        return None
    weight_kg, height_cm = normalized
    bmi_value = bmi(weight_kg, height_cm)
    adjustment = bmi_adjustment(bmi_value)
    r = gender_constant(parse_gender(metrics.gender))
    logger.debug("bmi=%.2f adjustment=%.2f r=%.2f", bmi_value, adjustment, r)
    return weight_kg * 1000.0, r, adjustment


def estimate_current_bac(metrics: Optional[BodyMetrics], drinks: Iterable[Drink]) -> Optional[float]:
    """Current estimated BAC (%), clamped at 0, or None if inputs are missing."""
    parts = _distribution(metrics)
    if parts is None:
        return None
    weight_g, r, adjustment = parts
    alcohol = total_alcohol_units(drinks)
    bac = (alcohol * 100.0) / (weight_g * r * adjustment) - ELIMINATION_FLAT
    return max(0.0, bac)


def estimate_drinks_for_target(metrics: Optional[BodyMetrics], target_bac) -> Optional[DrinkTargetResult]:
    """Beers, wines or shots (each alone) needed to reach target_bac."""
    target = parse_positive(target_bac)
    if target is None:
        return None
    parts = _distribution(metrics)
    if parts is None:
        return None
    weight_g, r, adjustment = parts
    # Product is evaluated left to right; ceil() is sensitive to regrouping.
    target_units = (target * weight_g * r * adjustment) / 100.0
    return DrinkTargetResult(
        beers=math.ceil(target_units / DRINK_TYPES[DrinkKind.BEER].alcohol_units),
        wines=math.ceil(target_units / DRINK_TYPES[DrinkKind.WINE].alcohol_units),
        shots=math.ceil(target_units / DRINK_TYPES[DrinkKind.SHOT].alcohol_units),
    )


def estimate(metrics: Optional[BodyMetrics], drinks: Iterable[Drink]) -> Optional[EstimationResult]:
    bac = estimate_current_bac(metrics, drinks)
    return None if bac is None else EstimationResult(current_bac=bac)
