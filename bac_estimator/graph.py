"""
Drinks-to-target chart. Produces an image file or returns data for web clients.
"""

from pathlib import Path
from typing import List

from bac_estimator.calculations import BodyMetrics, estimate_drinks_for_target
from bac_estimator.levels import LEVELS


def target_chart_data(metrics: BodyMetrics) -> List[dict]:
    """One row per catalog level: {level, label, beers, wines, shots}.

    Empty when metrics are incomplete.
    """
    rows = []
    for lv in LEVELS:
        result = estimate_drinks_for_target(metrics, lv.level)
        if result is None:
            return []
        rows.append({"level": lv.level, "label": lv.label, **result.to_dict()})
    return rows


def save_target_chart(
    metrics: BodyMetrics,
    output_path: str = "bac_targets.png",
    title: str = "Drinks to reach each BAC level",
) -> str:
    """
    Grouped bar chart of beers / wines / shots per BAC level, saved to file.
    Returns path to saved file. Requires: pip install matplotlib
    """
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for save_target_chart. pip install matplotlib")

    rows = target_chart_data(metrics)
    if not rows:
        raise ValueError("weight, height and gender are required to chart targets")

    labels = [f"{r['label']}%" for r in rows]
    xs = list(range(len(rows)))
    width = 0.27

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar([x - width for x in xs], [r["beers"] for r in rows], width, color="#ca8a04", label="Beers")
    ax.bar(xs, [r["wines"] for r in rows], width, color="#dc2626", label="Wine")
    ax.bar([x + width for x in xs], [r["shots"] for r in rows], width, color="#2563eb", label="Shots")
    ax.set_xticks(xs)
    ax.set_xticklabels(labels)
    ax.set_xlabel("Target BAC")
    ax.set_ylabel("Drinks (one kind only)")
    ax.set_title(title)
    ax.legend(loc="upper left")
    ax.grid(True, axis="y", alpha=0.3)
    fig.tight_layout()
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
