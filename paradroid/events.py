import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set

from .config import AiConfig
from .hexgrid import Coordinate
from .model import POSITION_EVENTS, Bot, Event, EventKind

log = logging.getLogger(__name__)


@dataclass
class RoundIntel:
    """What one round's events mean for the decisions."""
    fire_candidates: List[Coordinate] = field(default_factory=list)
    persist_candidates: List[Coordinate] = field(default_factory=list)
    newly_threatened: Dict[str, Coordinate] = field(default_factory=dict)
    hits: int = 0
    no_actions: int = 0


def parse_event(raw: Any) -> Optional[Event]:
    """Turn a server event into an Event, or None if it is unusable."""
    if not isinstance(raw, dict):
        return None
    try:
        kind = EventKind(raw.get("event"))
    except ValueError:
        log.debug("Ignoring unknown event %r", raw.get("event"))
        return None
    if kind in POSITION_EVENTS:
        pos = raw.get("pos")
        try:
            return Event(kind, pos=Coordinate(int(pos["x"]), int(pos["y"])))
        except (TypeError, KeyError, ValueError):
            log.debug("Ignoring %s without a usable position: %r", kind.value, raw)
            return None
    bot_id = raw.get("botId")
    data = raw.get("data") or {}
    if bot_id is None and kind is not EventKind.NOACTION:
        log.debug("Ignoring %s without a bot id: %r", kind.value, raw)
        return None
    return Event(kind, bot_id=None if bot_id is None else str(bot_id),
                 data=data if isinstance(data, dict) else {"value": data})


def parse_events(raw_events: Iterable[Any]) -> List[Event]:
    events = []
    for raw in raw_events or []:
        evt = parse_event(raw)
        if evt is not None:
            events.append(evt)
    return events


def classify_events(events: Iterable[Event], bots: Iterable[Bot], config: AiConfig) -> RoundIntel:
    """Sort a round's events into fire, persist and threat candidates."""
    intel = RoundIntel()
    positions = {b.id: b.pos for b in bots if b.alive}
    seen: Set[Coordinate] = set()
    for evt in events:
        if evt.kind in POSITION_EVENTS:
            log.info("%s at %s", evt.kind.value, evt.pos)
            if evt.pos in seen:
                continue
            seen.add(evt.pos)
            intel.fire_candidates.append(evt.pos)
            if config.persist:
                intel.persist_candidates.append(evt.pos)
        elif evt.kind in (EventKind.DETECTED, EventKind.DAMAGED):
            log.info("%s: bot %s", evt.kind.value, evt.bot_id)
            if evt.bot_id in positions:
                intel.newly_threatened[evt.bot_id] = positions[evt.bot_id]
        elif evt.kind is EventKind.HIT:
            intel.hits += 1
            log.info("hit: bot %s", evt.bot_id)
        elif evt.kind is EventKind.NOACTION:
            intel.no_actions += 1
            log.warning("Bot %s did not respond in required time: %s", evt.bot_id, evt.data)
    return intel
