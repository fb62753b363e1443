from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from .hexgrid import Coordinate

DecisionKind = Literal["scan", "move", "fire"]


class EventKind(Enum):
    """Event tags sent by the game server"""
    HIT = "hit"
    RADAR_ECHO = "radarEcho"
    SEE = "see"
    DETECTED = "detected"
    DAMAGED = "damaged"
    NOACTION = "noaction"


# Tags whose payload is a position rather than a bot id
POSITION_EVENTS = {EventKind.RADAR_ECHO, EventKind.SEE}


@dataclass(frozen=True)
class FieldConfig:
    """Match geometry, fixed for the whole game."""
    field_radius: int
    radar_radius: int
    move_radius: int

    def __post_init__(self):
        for name in ("field_radius", "radar_radius", "move_radius"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "FieldConfig":
        """Build from the server's config object.

        Older servers send `radar`/`move` instead of `radarRadius`/`moveRadius`.
        """
        radar = raw.get("radarRadius", raw.get("radar"))
        move = raw.get("moveRadius", raw.get("move"))
        return cls(
            field_radius=raw.get("fieldRadius"),
            radar_radius=radar,
            move_radius=move,
        )


@dataclass
class Bot:
    id: str
    pos: Coordinate
    alive: bool = True
    hp: Optional[int] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Bot":
        bot_id = raw.get("botId", raw.get("id"))
        return cls(
            id=str(bot_id),
            pos=Coordinate(int(raw["x"]), int(raw["y"])),
            alive=bool(raw.get("alive", True)),
            hp=raw.get("hp"),
        )


@dataclass
class Event:
    kind: EventKind
    pos: Optional[Coordinate] = None
    bot_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ThreatRecord:
    bot_id: str
    avoid_coordinate: Coordinate
    remaining_rounds: int = 2


@dataclass(frozen=True)
class Decision:
    bot_id: str
    kind: DecisionKind
    pos: Coordinate

    def as_dict(self) -> Dict[str, Any]:
        return {"botId": self.bot_id, "action": self.kind, "x": self.pos.x, "y": self.pos.y}


@dataclass
class RoundRecord:
    """One decided round as stored by the runtime log"""
    round_id: int
    events: List[Event]
    decisions: List[Decision]
