"""
Estimator session: form values (body metrics, unit system, target, drink log).
SessionState is immutable; every user action returns a new state.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple

from bac_estimator import calculations
from bac_estimator import units as unit_conv
from bac_estimator.calculations import BodyMetrics, DrinkTargetResult
from bac_estimator.drinks import MAX_COUNT, MIN_COUNT, Drink, DrinkKind, parse_kind
from bac_estimator.levels import DEFAULT_TARGET_BAC


def _clamp_count(value: Any) -> int:
    try:
        parsed = int(float(value))
    except (TypeError, ValueError):
        parsed = MIN_COUNT
    return max(MIN_COUNT, min(MAX_COUNT, parsed))


@dataclass(frozen=True)
class SessionState:
    weight: Any = None
    height: Any = None
    gender: Optional[str] = None
    units: str = unit_conv.IMPERIAL
    target_bac: float = DEFAULT_TARGET_BAC
    drinks: Tuple[Drink, ...] = field(default_factory=tuple)

    def with_weight(self, weight: Any) -> "SessionState":
        return replace(self, weight=weight)

    def with_height(self, height: Any) -> "SessionState":
        return replace(self, height=height)

    def with_gender(self, gender: Optional[str]) -> "SessionState":
        return replace(self, gender=calculations.parse_gender(gender))

    def with_target(self, target_bac: Any) -> "SessionState":
        parsed = calculations.parse_positive(target_bac)
        return replace(self, target_bac=DEFAULT_TARGET_BAC if parsed is None else parsed)

    def switch_units(self, units: str) -> "SessionState":
        """Change unit system, converting stored weight and height."""
        if units not in unit_conv.UNIT_SYSTEMS:
            raise ValueError(f"unknown unit system: {units!r}")
        if units == self.units:
            return self
        weight, height = unit_conv.switch_units(
            calculations.parse_positive(self.weight),
            calculations.parse_positive(self.height),
            self.units,
            units,
        )
        return replace(self, units=units, weight=weight, height=height)

    def add_drink(self, kind) -> "SessionState":
        kind = kind if isinstance(kind, DrinkKind) else parse_kind(kind)
        return replace(self, drinks=self.drinks + (Drink(kind, 1),))

    def set_drink_count(self, index: int, count: Any) -> "SessionState":
        if not 0 <= index < len(self.drinks):
            raise IndexError(f"no drink at index {index}")
        drinks = list(self.drinks)
        drinks[index] = replace(drinks[index], count=_clamp_count(count))
        return replace(self, drinks=tuple(drinks))

    def remove_drink(self, index: int) -> "SessionState":
        if not 0 <= index < len(self.drinks):
            raise IndexError(f"no drink at index {index}")
        return replace(self, drinks=self.drinks[:index] + self.drinks[index + 1:])

    def clear_drinks(self) -> "SessionState":
        return replace(self, drinks=())

    def metrics(self) -> Optional[BodyMetrics]:
        """BodyMetrics when weight, height and gender are all usable, else None."""
        m = BodyMetrics.from_raw(self.weight, self.height, self.gender, self.units)
        return m if m.is_complete else None

    @property
    def drink_count(self) -> int:
        return sum(d.count for d in self.drinks)

    def current_bac(self) -> Optional[float]:
        return calculations.estimate_current_bac(self.metrics(), self.drinks)

    def drinks_for_target(self) -> Optional[DrinkTargetResult]:
        return calculations.estimate_drinks_for_target(self.metrics(), self.target_bac)

    def to_dict(self) -> dict:
        return {
            "weight": self.weight,
            "height": self.height,
            "gender": self.gender,
            "units": self.units,
            "target_bac": self.target_bac,
            "drinks": [[d.kind.value, d.count] for d in self.drinks],
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "SessionState":
        """Rebuild from to_dict() output; malformed entries are dropped."""
        if not isinstance(raw, dict):
            return cls()
        units = raw.get("units")
        if units not in unit_conv.UNIT_SYSTEMS:
            units = unit_conv.IMPERIAL
        drinks = []
        drinks_raw = raw.get("drinks", [])
        if isinstance(drinks_raw, list):
            for item in drinks_raw:
                if not isinstance(item, (list, tuple)) or len(item) != 2:
                    continue
                try:
                    kind = parse_kind(item[0])
                except ValueError:
                    continue
                drinks.append(Drink(kind, _clamp_count(item[1])))
        weight = raw.get("weight")
        height = raw.get("height")
        state = cls(
            weight=weight if isinstance(weight, (str, int, float)) else None,
            height=height if isinstance(height, (str, int, float)) else None,
            units=units,
            drinks=tuple(drinks),
        )
        return state.with_gender(raw.get("gender")).with_target(raw.get("target_bac"))
