"""
BAC estimator CLI. Run from project root: python -m bac_estimator
Prints current BAC for the given drinks and how many drinks reach a target BAC.
"""

import argparse
import sys

from bac_estimator import units as unit_conv
from bac_estimator.advice import RESOURCES, SAFETY_NOTICE, get_advice, target_warning
from bac_estimator.drinks import Drink, DrinkKind
from bac_estimator.graph import save_target_chart
from bac_estimator.levels import DEFAULT_TARGET_BAC, get_level
from bac_estimator.session import SessionState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BAC estimator: current BAC and drinks to reach a target")
    parser.add_argument("--weight", type=float, help="Body weight (lbs, or kg with --metric)")
    parser.add_argument("--height", type=float, help="Height (inches, or cm with --metric)")
    parser.add_argument("--metric", action="store_true", help="Weight in kg and height in cm")
    gender = parser.add_mutually_exclusive_group()
    gender.add_argument("--male", action="store_true", help="Male")
    gender.add_argument("--female", action="store_true", help="Female")
    parser.add_argument("--beer", type=int, default=0, metavar="N", help="Beers consumed")
    parser.add_argument("--wine", type=int, default=0, metavar="N", help="Glasses of wine consumed")
    parser.add_argument("--shot", type=int, default=0, metavar="N", help="Shots consumed")
    parser.add_argument("--target", type=float, default=DEFAULT_TARGET_BAC, help="Target BAC (default 0.08)")
    parser.add_argument("--graph", type=str, metavar="FILE", help="Save drinks-per-level chart to FILE (e.g. targets.png)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if min(args.beer, args.wine, args.shot) < 0:
        parser.error("drink counts cannot be negative")

    gender = "female" if args.female else ("male" if args.male else None)
    state = SessionState(
        weight=args.weight,
        height=args.height,
        units=unit_conv.METRIC if args.metric else unit_conv.IMPERIAL,
        drinks=tuple(
            Drink(kind, count)
            for kind, count in ((DrinkKind.BEER, args.beer), (DrinkKind.WINE, args.wine), (DrinkKind.SHOT, args.shot))
            if count > 0
        ),
    ).with_gender(gender).with_target(args.target)

    metrics = state.metrics()
    if metrics is None:
        print("Weight, height and --male/--female are required.", file=sys.stderr)
        return 1

    labels = unit_conv.unit_labels(state.units)
    print(f"Weight: {state.weight} {labels['weight']}, height: {state.height} {labels['height']}, {metrics.gender}")

    bac = state.current_bac()
    advice = get_advice(bac)
    print(f"Current BAC: {bac:.3f}%")
    if advice["description"]:
        print(f"  {advice['title']}: {advice['description']}")
    print(f"  {advice['disclaimer']}")

    level = get_level(state.target_bac)
    suffix = f" ({level.description})" if level else ""
    targets = state.drinks_for_target()
    print(f"Estimated drinks to reach {state.target_bac}% BAC{suffix}:")
    print(f"  Beers (12oz, 4.5%): {targets.beers}")
    print(f"  Wine (5oz, 12%): {targets.wines}")
    print(f"  Shots (1.5oz, 40%): {targets.shots}")
    print(f"  {target_warning()}")

    print(f"{SAFETY_NOTICE['title']}: {SAFETY_NOTICE['message']}")
    print("Resources for help:")
    for resource in RESOURCES:
        print(f"  {resource['name']}: {resource['contact']}")

    if args.graph:
        try:
            path = save_target_chart(metrics, output_path=args.graph)
            print(f"Chart saved: {path}")
        except ImportError:
            print("matplotlib not installed. pip install matplotlib", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
