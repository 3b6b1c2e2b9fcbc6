"""Self-test demo: python -m convex_hull [--animate] [-v]"""

import argparse
import logging
import sys

from .jarvis_march import gift_wrapping

POINTS = [(0, 3), (2, 2), (1, 1), (2, 1), (3, 0), (0, 0), (3, 3)]
EXPECTED = [(0, 3), (0, 0), (3, 0), (3, 3)]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Compute the convex hull of a fixed point set with the Jarvis march."
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Show the step-by-step animation after the check.",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=700,
        help="Milliseconds between animation frames (default: 700).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    hull = gift_wrapping(POINTS)
    print("Convex Hull:", [tuple(p) for p in hull])
    if hull != EXPECTED:
        logging.error("Expected %s, got %s", EXPECTED, hull)
        return 1
    print("Test passed!")

    if args.animate:
        import matplotlib.pyplot as plt
        from .jarvis_march_vis_animator import build_animation

        fig, ani = build_animation(POINTS, interval=args.interval)
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
