import logging
from typing import List, Optional, Sequence

from .hexgrid import Coordinate, distance, hex_disc, on_field
from .model import FieldConfig
from .rng import DRNG

log = logging.getLogger(__name__)

AVOID = -1
APPROACH = 1


def offset_template(radius: int) -> List[Coordinate]:
    """All the possible movement deltas within radius, origin excluded."""
    return list(hex_disc(radius))


class MovementPlanner:
    """One-step movement search over precomputed offset templates.

    `move_template` holds the legal one-round moves. `escape_template` is
    used to pick evasion waypoints and may reach further than one move; it is
    never used to produce a Move action directly.
    """

    def __init__(self, field: FieldConfig, rng: DRNG, escape_radius: Optional[int] = None):
        self.field = field
        self._rng = rng
        self.move_template = offset_template(field.move_radius)
        self.escape_template = offset_template(escape_radius or field.move_radius)

    def best_move(self, origin: Coordinate, reference: Coordinate, sign: int,
                  template: Optional[Sequence[Coordinate]] = None) -> Coordinate:
        """Return the on-field candidate scoring lowest on sign * distance.

        Candidates are shuffled before the stable sort so ties break randomly.
        With no on-field candidate the origin itself is returned.
        """
        if template is None:
            template = self.move_template
        candidates = [origin + o for o in template if on_field(origin + o, self.field.field_radius)]
        if not candidates:
            log.debug("No on-field move from %s, staying put", origin)
            return origin
        ranked = sorted(self._rng.shuffle(candidates),
                        key=lambda c: sign * distance(c, reference))
        return ranked[0]

    def avoid(self, origin: Coordinate, avoid_coord: Coordinate) -> Coordinate:
        return self.best_move(origin, avoid_coord, AVOID)

    def approach(self, origin: Coordinate, target: Coordinate) -> Coordinate:
        return self.best_move(origin, target, APPROACH)

    def escape_waypoint(self, origin: Coordinate) -> Coordinate:
        """Pick a point far from where the bot was found."""
        return self.best_move(origin, origin, AVOID, self.escape_template)
