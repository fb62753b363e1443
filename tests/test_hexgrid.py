"""Test the hex metric and field predicates."""
import itertools
from paradroid.hexgrid import (
    HEX_DIRECTIONS, ORIGIN, Coordinate, add, distance, hex_disc, on_field, step_toward_origin,
)


def grid(radius: int):
    return [Coordinate(x, y) for x in range(-radius, radius + 1) for y in range(-radius, radius + 1)]


def test_distance_is_a_metric():
    """Identity, symmetry and triangle inequality on a small grid."""
    points = grid(3)
    for a in points:
        assert distance(a, a) == 0
    for a, b in itertools.product(points, repeat=2):
        assert distance(a, b) == distance(b, a)
        if a != b:
            assert distance(a, b) > 0
    sample = points[::3]
    for a, b, c in itertools.product(sample, repeat=3):
        assert distance(a, c) <= distance(a, b) + distance(b, c)


def test_distance_values():
    assert distance(ORIGIN, Coordinate(2, -1)) == 2
    assert distance(ORIGIN, Coordinate(2, 1)) == 3
    assert distance(Coordinate(1, 1), Coordinate(-1, -1)) == 4
    for d in HEX_DIRECTIONS:
        assert distance(ORIGIN, d) == 1


def test_on_field_requires_box_and_disc():
    assert on_field(ORIGIN, 5)
    assert on_field(Coordinate(5, -5), 5)
    assert on_field(Coordinate(-5, 0), 5)
    # Inside the bounding box but outside the hex disc
    assert not on_field(Coordinate(3, 3), 5)
    assert not on_field(Coordinate(6, -1), 5)


def test_hex_disc_sizes():
    assert len(list(hex_disc(1))) == 6
    assert len(list(hex_disc(2))) == 18
    assert len(list(hex_disc(2, include_center=True))) == 19
    assert all(0 < distance(ORIGIN, p) <= 3 for p in hex_disc(3))


def test_step_toward_origin():
    assert step_toward_origin(ORIGIN) == ORIGIN
    for p in grid(4):
        if p != ORIGIN:
            q = step_toward_origin(p)
            assert distance(p, q) == 1
            assert distance(ORIGIN, q) == distance(ORIGIN, p) - 1


def test_add_is_componentwise():
    assert add(Coordinate(1, -2), Coordinate(3, 4)) == Coordinate(4, 2)
    assert Coordinate(1, -2) - Coordinate(3, 4) == Coordinate(-2, -6)
