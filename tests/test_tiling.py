"""Test radar tiling generation and the sweep scheduler."""
import pytest
from paradroid.config import AiConfig
from paradroid.hexgrid import ORIGIN, Coordinate, distance, hex_disc
from paradroid.model import FieldConfig
from paradroid.rng import DRNG
from paradroid.sweep import SweepScheduler
from paradroid.tiling import (
    corner_translations, generate_tiling, in_tile_zone, lattice_axes, pull_into_zone,
)

FIELD = FieldConfig(field_radius=10, radar_radius=2, move_radius=1)


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("p_random", [0.0, 1.0])
def test_tiles_keep_radar_inside_field(seed, p_random):
    config = AiConfig(probability_for_random_tiling=p_random)
    tiles = generate_tiling(FIELD, config, DRNG(seed))
    assert tiles
    assert len(set(tiles)) == len(tiles)
    for t in tiles:
        assert distance(ORIGIN, t) < FIELD.field_radius - (FIELD.radar_radius - 1)


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("p_random", [0.0, 1.0])
def test_tiling_covers_inner_field(seed, p_random):
    """Every point at least 2R inside the border is under some radar disc."""
    config = AiConfig(probability_for_random_tiling=p_random)
    tiles = generate_tiling(FIELD, config, DRNG(seed))
    inner = FIELD.field_radius - 2 * FIELD.radar_radius
    for p in hex_disc(inner, include_center=True):
        assert any(distance(p, t) <= FIELD.radar_radius for t in tiles), p


def test_corner_translation_places_a_tile_on_a_corner():
    config = AiConfig(probability_for_random_tiling=0.0)
    corners = set(corner_translations(FIELD))
    assert all(distance(ORIGIN, c) == FIELD.field_radius - FIELD.radar_radius for c in corners)
    for seed in range(5):
        tiles = set(generate_tiling(FIELD, config, DRNG(seed)))
        assert tiles & corners


def test_avoid_field_border_tightens_margin():
    config = AiConfig(avoid_field_border_in_radar=True)
    tiles = generate_tiling(FIELD, config, DRNG(3))
    assert tiles
    assert all(distance(ORIGIN, t) < FIELD.field_radius - FIELD.radar_radius for t in tiles)


def test_radar_wider_than_field_scans_center():
    field = FieldConfig(field_radius=2, radar_radius=4, move_radius=1)
    assert generate_tiling(field, AiConfig(), DRNG(0)) == [ORIGIN]


def test_lattice_axes_are_one_disc_apart():
    for r in (1, 2, 3, 5):
        axes = lattice_axes(r)
        assert len(set(axes)) == 6
        assert all(distance(ORIGIN, a) == 2 * r + 1 for a in axes)


def test_pull_into_zone():
    config = AiConfig()
    assert pull_into_zone(Coordinate(10, 0), FIELD, config) == Coordinate(8, 0)
    assert pull_into_zone(Coordinate(1, 1), FIELD, config) == Coordinate(1, 1)
    assert in_tile_zone(pull_into_zone(Coordinate(-5, 10), FIELD, config), FIELD, config)


def test_scheduler_never_repeats_within_a_cycle():
    sched = SweepScheduler(FIELD, AiConfig(), DRNG(11))
    sched.reset()
    count = len(sched)
    swept = [sched.next() for _ in range(count)]
    assert len(set(swept)) == count
    assert len(sched) == 0
    assert sched.cycles == 1
    sched.next()
    assert sched.cycles == 2


def test_scheduler_refills_when_empty():
    sched = SweepScheduler(FIELD, AiConfig(), DRNG(1))
    tile = sched.next()
    assert in_tile_zone(tile, FIELD, AiConfig())
    assert sched.cycles == 1


def test_team_persist_requeues_position():
    sched = SweepScheduler(FIELD, AiConfig(), DRNG(2))
    sched.reset()
    before = len(sched)
    sched.persist(Coordinate(1, 1), active_teammates=3)
    assert len(sched) == before + 1
    assert sched.next() == Coordinate(1, 1)


def test_persist_pulls_border_sightings_inward():
    sched = SweepScheduler(FIELD, AiConfig(), DRNG(2))
    sched.unswept_tiles = [ORIGIN]
    sched.persist(Coordinate(10, 0), active_teammates=2)
    assert sched.next() == Coordinate(8, 0)


def test_solo_persist_adds_neighbouring_tile():
    sched = SweepScheduler(FIELD, AiConfig(), DRNG(4))
    sched.unswept_tiles = []
    sched.persist(ORIGIN, active_teammates=1)
    assert len(sched) == 2
    assert sched.unswept_tiles[0] == ORIGIN
    assert distance(ORIGIN, sched.unswept_tiles[1]) == 2 * FIELD.radar_radius + 1


def test_solo_persist_skips_already_covered_neighbour():
    sched = SweepScheduler(FIELD, AiConfig(), DRNG(4))
    sched.unswept_tiles = list(lattice_axes(FIELD.radar_radius))
    sched.persist(ORIGIN, active_teammates=1)
    assert len(sched) == 7
    assert sched.unswept_tiles[-1] == ORIGIN


def test_wide_persist_scan_distance_suppresses_expansion():
    sched = SweepScheduler(FIELD, AiConfig(persist_scan_distance=2 * FIELD.radar_radius + 1), DRNG(4))
    sched.unswept_tiles = []
    sched.persist(ORIGIN, active_teammates=1)
    assert sched.unswept_tiles == [ORIGIN]
