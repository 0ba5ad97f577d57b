"""Example: locate positions against a polygon with a hole."""

import numpy as np

from planar_kernel import Point, Polygon, contains, contains_positions, locate_position

SHELL = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
COURTYARD = [(3, 3), (7, 3), (7, 7), (3, 7), (3, 3)]


def main() -> None:
    building = Polygon.from_coords(SHELL, [COURTYARD])
    print(f"Envelope: {building.envelope()}")
    print(f"Area: {building.area():.1f}")

    for xy in [(1, 1), (5, 5), (3, 5), (10, 2), (12, 12)]:
        where = locate_position(xy, building)
        print(f"{xy}: {where} (contained: {contains(building, Point.from_xy(*xy))})")

    rng = np.random.default_rng(123)
    samples = rng.uniform(-2, 12, size=(1000, 2))
    mask = contains_positions(building, samples)
    print(f"\n{int(mask.sum())} of {len(samples)} random positions lie in the building")


if __name__ == "__main__":
    main()
