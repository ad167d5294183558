"""
Command line interface.

Builds a polygon from points given on the command line (or a demo
pentagon), prints its area and bounding box, then classifies a query
point read from the arguments or from stdin.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from .core.errors import PolygonError
from .polygons.polygon import Polygon, PolygonKind
from .visualization.plotting import plot_polygon

logger = logging.getLogger(__name__)


DEMO_POINTS = [(-4, 2), (-2, -2), (2, 1), (0, 4), (-3, 4)]


def _parse_point(text: str) -> Tuple[float, float]:
    try:
        x, y = (float(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}") from None
    return x, y


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="shapes", description="Polygon area, bounding box and point query")
    parser.add_argument("--point", "-p", dest="points", action="append", type=_parse_point, metavar="X,Y",
                        help="Polygon vertex; repeat for each vertex (default: demo pentagon)")
    parser.add_argument("--kind", choices=[k.value for k in PolygonKind], default=PolygonKind.CONVEX.value,
                        help="convex points are reordered; concave points must be in boundary order")
    parser.add_argument("--query", nargs=2, type=float, metavar=("X", "Y"), default=None,
                        help="Query point (prompted on stdin when omitted)")
    parser.add_argument("--plot", default=None, help="Save a plot of the polygon to this path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _read_query() -> Tuple[float, float]:
    print("Enter a point to query:")
    x = float(input("X = "))
    y = float(input("Y = "))
    return x, y


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    points = args.points or DEMO_POINTS

    try:
        polygon = Polygon.from_points(points, args.kind)
    except PolygonError as exc:
        logger.warning("Construction failed: %s", exc)
        print(exc.message)
        return 1

    print(f"Area: {polygon.area:g}")
    print("Bounding Box:")
    for corner in polygon.bounding_box:
        print(f"({corner.x:g},{corner.y:g})")
    print()

    if args.query is not None:
        x, y = args.query
    else:
        try:
            x, y = _read_query()
        except ValueError:
            print("Query point must be two numbers.")
            return 2

    result = polygon.classify(x, y)
    print(f"Point is {result.value}")

    if args.plot:
        ax = plot_polygon(polygon, query_points=[(x, y)], title=f"{polygon.kind.value.title()} polygon")
        ax.figure.savefig(args.plot, dpi=150, bbox_inches="tight")
        plt.close(ax.figure)
        print(f"Plot saved to: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
