"""Drink kinds and their alcohol-unit contribution.

Alcohol units per drink are simplified proxies, not grams of ethanol:
beer 0.54, wine 0.6, shot 0.6.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class DrinkKind(str, Enum):
    BEER = "beer"
    WINE = "wine"
    SHOT = "shot"


@dataclass(frozen=True)
class DrinkType:
    """A drink kind with its serving label and alcohol units per drink."""

    kind: DrinkKind
    name: str
    serving: str
    alcohol_units: float


DRINK_TYPES = {
    DrinkKind.BEER: DrinkType(DrinkKind.BEER, "Beer", "12oz, 4.5%", 0.54),
    DrinkKind.WINE: DrinkType(DrinkKind.WINE, "Wine", "5oz, 12%", 0.6),
    DrinkKind.SHOT: DrinkType(DrinkKind.SHOT, "Shot", "1.5oz, 40%", 0.6),
}

MIN_COUNT = 1
MAX_COUNT = 10


@dataclass(frozen=True)
class Drink:
    kind: DrinkKind
    count: int = 1

    def __post_init__(self):
        if not isinstance(self.kind, DrinkKind):
            object.__setattr__(self, "kind", parse_kind(self.kind))
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise ValueError(f"count must be a positive integer, got {self.count!r}")


def parse_kind(value) -> DrinkKind:
    """DrinkKind from 'beer' / 'wine' / 'shot' (case-insensitive)."""
    try:
        return DrinkKind(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"unknown drink kind: {value!r}") from None


def parse_count(value) -> int:
    """Positive int from an int, an integral float or a digit string."""
    if isinstance(value, bool):
        raise ValueError(f"count must be a positive integer, got {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ValueError(f"count must be a positive integer, got {value!r}")
        value = int(value)
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"count must be a positive integer, got {value!r}")
        value = int(value)
    elif not isinstance(value, int):
        raise ValueError(f"count must be a positive integer, got {value!r}")
    if value < 1:
        raise ValueError(f"count must be a positive integer, got {value!r}")
    return value


def units_per_drink(kind: DrinkKind) -> float:
    match kind:
        case DrinkKind.BEER | DrinkKind.WINE | DrinkKind.SHOT:
            return DRINK_TYPES[kind].alcohol_units
        case _:
            raise ValueError(f"unhandled drink kind: {kind!r}")


def total_alcohol_units(drinks: Iterable[Drink]) -> float:
    """Sum alcohol units over a drink log."""
    return sum(units_per_drink(d.kind) * d.count for d in drinks)


def list_drink_kinds() -> List[dict]:
    """Drink kinds for UI buttons."""
    return [
        {
            "kind": d.kind.value,
            "name": d.name,
            "serving": d.serving,
            "alcohol_units": d.alcohol_units,
        }
        for d in DRINK_TYPES.values()
    ]
