"""Example: structural errors at construction, topological ones on demand."""

from planar_kernel import GeometryError, MultiPolygon, Polygon, ValidationConfig, validate

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]


def main() -> None:
    try:
        Polygon.from_coords(SQUARE[:-1])
    except GeometryError as exc:
        print(f"Rejected at construction: {exc}")

    candidates = {
        "square": Polygon.from_coords(SQUARE),
        "bow tie": Polygon.from_coords([(0, 0), (2, 2), (2, 0), (0, 2), (0, 0)]),
        "hole outside": Polygon.from_coords(SQUARE, [[(5, 5), (6, 5), (6, 6), (5, 5)]]),
        "overlapping members": MultiPolygon((SQUARE, [(2, 2), (6, 2), (6, 6), (2, 6), (2, 2)])),
        "repeated vertex": Polygon.from_coords([(0, 0), (4, 0), (4, 0), (4, 4), (0, 0)]),
    }
    for name, geometry in candidates.items():
        print(f"{name}: {validate(geometry)}")

    lenient = ValidationConfig(allow_repeated_points=True)
    print(f"repeated vertex (lenient): {validate(candidates['repeated vertex'], lenient)}")


if __name__ == "__main__":
    main()
