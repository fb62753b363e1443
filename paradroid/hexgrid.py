from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Coordinate:
    """Axial hex position on the battlefield."""
    x: int
    y: int

    def __add__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x - other.x, self.y - other.y)

    def scaled(self, k: int) -> "Coordinate":
        return Coordinate(self.x * k, self.y * k)


ORIGIN = Coordinate(0, 0)

# Unit neighbours under the skewed hex metric
HEX_DIRECTIONS: Tuple[Coordinate, ...] = (
    Coordinate(1, 0),
    Coordinate(1, -1),
    Coordinate(0, -1),
    Coordinate(-1, 0),
    Coordinate(-1, 1),
    Coordinate(0, 1),
)


def distance(a: Coordinate, b: Coordinate) -> int:
    """Max-distance in a hexagonal tiling."""
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    dz = abs(a.x + a.y - b.x - b.y)
    return max(dx, dy, dz)


def add(a: Coordinate, b: Coordinate) -> Coordinate:
    return a + b


def on_field(p: Coordinate, field_radius: int) -> bool:
    """Bounding box and hex disc check combined."""
    if not (-field_radius <= p.x <= field_radius):
        return False
    if not (-field_radius <= p.y <= field_radius):
        return False
    return distance(ORIGIN, p) <= field_radius


def hex_disc(radius: int, include_center: bool = False) -> Iterator[Coordinate]:
    """Yield every offset within `radius` of the origin, row by row."""
    for i in range(-radius, radius + 1):
        for j in range(-radius, radius + 1):
            pos = Coordinate(i, j)
            d = distance(pos, ORIGIN)
            if d > radius:
                continue
            if d == 0 and not include_center:
                continue
            yield pos


def neighbours(p: Coordinate) -> List[Coordinate]:
    return [p + d for d in HEX_DIRECTIONS]


def step_toward_origin(p: Coordinate) -> Coordinate:
    """Return the neighbour of p closest to the origin (p itself at the origin)."""
    if p == ORIGIN:
        return p
    best = p
    best_dist = distance(ORIGIN, p)
    for n in neighbours(p):
        d = distance(ORIGIN, n)
        if d < best_dist:
            best = n
            best_dist = d
    return best
