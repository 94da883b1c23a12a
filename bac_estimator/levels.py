"""
Target BAC levels with short effect descriptions, for the target selector.
Values are BAC percent (0.08 = 0.08%).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional


@dataclass(frozen=True)
class BACLevel:
    level: float
    label: str
    description: str


def _l(label: str, description: str) -> BACLevel:
    return BACLevel(level=float(label), label=label, description=description)


LEVELS: tuple = (
    _l("0.02", "Slight mood changes, relaxation"),
    _l("0.05", "Lowered inhibitions, mild impairment"),
    _l("0.08", "Legal intoxication limit - unsafe to drive"),
    _l("0.10", "Significant impairment of coordination"),
    _l("0.15", "DANGER: High intoxication"),
)

BAC_LEVELS = MappingProxyType({lv.level: lv.description for lv in LEVELS})

DEFAULT_TARGET_BAC = 0.08
LEGAL_LIMIT_BAC = 0.08


def get_level(level: float) -> Optional[BACLevel]:
    for lv in LEVELS:
        if abs(lv.level - level) < 1e-9:
            return lv
    return None


def highest_level_reached(bac: float) -> Optional[BACLevel]:
    """Highest catalog level at or below bac, or None below the first level."""
    reached = None
    for lv in LEVELS:
        if bac >= lv.level:
            reached = lv
    return reached


def list_levels() -> List[dict]:
    return [{"level": lv.level, "label": lv.label, "description": lv.description} for lv in LEVELS]
