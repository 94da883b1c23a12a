"""Advisory messaging for BAC estimates.

Educational only. Never a guarantee of safety or of legal driving status.
"""

from typing import Optional

from bac_estimator.levels import LEGAL_LIMIT_BAC, highest_level_reached

DISCLAIMER = (
    "This is an estimate only. Actual BAC can vary based on many factors including "
    "metabolism, time since last meal, medications, and overall health."
)

TARGET_WARNING = (
    "Warning: These are estimates for total drinks. Consuming this many drinks quickly "
    "is dangerous. Always drink slowly and responsibly."
)

SAFETY_NOTICE = {
    "title": "Important Safety Information",
    "message": (
        "This tool is for educational purposes only. Never drink and drive. "
        "If you need help, call 800-662-4357 (SAMHSA's National Helpline). "
        "You must be of legal drinking age to consume alcohol."
    ),
}

RESOURCES = (
    {"name": "SAMHSA's National Helpline", "contact": "800-662-4357"},
    {"name": "Alcoholics Anonymous", "contact": "aa.org"},
    {"name": "National Association for Addiction Professionals", "contact": "naadac.org"},
)


def target_warning() -> str:
    return TARGET_WARNING


def safety_info() -> dict:
    """Safety notice and help resources, shown with every result."""
    return {
        "notice": dict(SAFETY_NOTICE),
        "resources": [dict(r) for r in RESOURCES],
    }


def get_advice(bac: Optional[float]) -> Optional[dict]:
    """Return the catalog level reached and disclaimer text for an estimate."""
    if bac is None:
        return None

    if bac <= 0:
        return {
            "status": "none",
            "title": "No estimated alcohol",
            "level": None,
            "description": None,
            "over_legal_limit": False,
            "legal_limit_bac": LEGAL_LIMIT_BAC,
            "disclaimer": DISCLAIMER,
        }

    level = highest_level_reached(bac)
    if level is None:
        return {
            "status": "below_levels",
            "title": "Below listed levels",
            "level": None,
            "description": None,
            "over_legal_limit": False,
            "legal_limit_bac": LEGAL_LIMIT_BAC,
            "disclaimer": DISCLAIMER,
        }

    return {
        "status": "level",
        "title": f"At or above {level.label}%",
        "level": level.level,
        "description": level.description,
        "over_legal_limit": bac >= LEGAL_LIMIT_BAC,
        "legal_limit_bac": LEGAL_LIMIT_BAC,
        "disclaimer": DISCLAIMER,
    }
