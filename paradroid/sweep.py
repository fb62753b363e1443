import logging
from typing import List

from .config import AiConfig
from .hexgrid import Coordinate, distance
from .model import FieldConfig
from .rng import DRNG
from .tiling import generate_tiling, in_tile_zone, lattice_axes, pull_into_zone

log = logging.getLogger(__name__)


class SweepScheduler:
    """Stack of radar tiles not yet swept in the current cycle."""

    def __init__(self, field: FieldConfig, config: AiConfig, rng: DRNG):
        self.field = field
        self.config = config
        self._rng = rng
        self.unswept_tiles: List[Coordinate] = []
        self.cycles = 0

    def __len__(self) -> int:
        return len(self.unswept_tiles)

    def reset(self) -> None:
        """Throw away the current queue and generate a fresh tiling."""
        self.unswept_tiles = generate_tiling(self.field, self.config, self._rng)
        self.cycles += 1
        log.debug("Sweep cycle %d with %d tiles", self.cycles, len(self.unswept_tiles))

    def next(self) -> Coordinate:
        """Pop the next tile to sweep, refilling when the queue runs dry."""
        if not self.unswept_tiles:
            self.reset()
        return self.unswept_tiles.pop()

    def persist(self, coord: Coordinate, active_teammates: int) -> None:
        """Queue a productive position for another sweep.

        A lone bot also queues one neighbouring lattice tile, unless a queued
        tile already covers it.
        """
        tile = pull_into_zone(coord, self.field, self.config)
        self.unswept_tiles.append(tile)
        if active_teammates > 1:
            return
        candidate = tile + self._rng.choice(lattice_axes(self.field.radar_radius))
        if not in_tile_zone(candidate, self.field, self.config):
            return
        radius = self.config.persist_radius(self.field)
        if any(distance(candidate, t) <= radius for t in self.unswept_tiles):
            return
        self.unswept_tiles.append(candidate)
        log.debug("Persist expanded %s with neighbour %s", tile, candidate)
