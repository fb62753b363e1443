"""Radar tiling of the hex field.

Disc centers sit on the lattice spanned by u=(R+1, R) and v=(-R, 2R+1).
Radius-R hex discs around those centers tile the plane exactly, since the
lattice cell holds 3R^2+3R+1 points, the size of one disc.
"""
import logging
from typing import List, Tuple

from .config import AiConfig
from .hexgrid import HEX_DIRECTIONS, ORIGIN, Coordinate, distance, step_toward_origin
from .model import FieldConfig
from .rng import DRNG

log = logging.getLogger(__name__)


def lattice_point(i: int, j: int, radar_radius: int) -> Coordinate:
    r = radar_radius
    return Coordinate((r + 1) * i - r * j, r * i + (2 * r + 1) * j)


def lattice_axes(radar_radius: int) -> Tuple[Coordinate, ...]:
    """The six lattice neighbours of the origin, each 2R+1 away."""
    u = lattice_point(1, 0, radar_radius)
    v = lattice_point(0, 1, radar_radius)
    w = u - v
    return (u, v, w, u.scaled(-1), v.scaled(-1), w.scaled(-1))


def corner_translations(field: FieldConfig) -> List[Coordinate]:
    reach = field.field_radius - field.radar_radius
    return [d.scaled(reach) for d in HEX_DIRECTIONS]


def tile_limit(field: FieldConfig, config: AiConfig) -> int:
    """Tiles must lie strictly closer to the origin than this."""
    limit = field.field_radius - (field.radar_radius - 1)
    if config.avoid_field_border_in_radar:
        limit -= 1
    return limit


def in_tile_zone(p: Coordinate, field: FieldConfig, config: AiConfig) -> bool:
    return distance(ORIGIN, p) < tile_limit(field, config)


def pull_into_zone(p: Coordinate, field: FieldConfig, config: AiConfig) -> Coordinate:
    """Walk p toward the origin until its radar disc fits the tile zone."""
    while not in_tile_zone(p, field, config):
        nxt = step_toward_origin(p)
        if nxt == p:
            break
        p = nxt
    return p


def choose_translation(field: FieldConfig, config: AiConfig, rng: DRNG) -> Coordinate:
    r = field.radar_radius
    if rng.bernoulli(config.probability_for_random_tiling):
        return Coordinate(rng.next_int(-r, r), rng.next_int(-r, r))
    return rng.choice(corner_translations(field))


def generate_tiling(field: FieldConfig, config: AiConfig, rng: DRNG) -> List[Coordinate]:
    """Generate a shuffled set of radar tile centers covering the field."""
    r = field.radar_radius
    translation = choose_translation(field, config, rng)
    # Over-cover: the translation may shift the lattice by up to F-R
    span = 2 * (field.field_radius // r) + 3
    tiles = []
    for i in range(-span, span + 1):
        for j in range(-span, span + 1):
            center = lattice_point(i, j, r) + translation
            if in_tile_zone(center, field, config):
                tiles.append(center)
    if not tiles:
        # Radar wider than the field: one scan from the middle sees everything
        tiles.append(ORIGIN)
    log.debug("Generated %d tiles around translation %s", len(tiles), translation)
    return rng.shuffle(tiles)
