import asyncio
import logging
from typing import Any, Dict, Iterable, List, Protocol, Tuple
from paradroid.engine import DecisionEngine
from paradroid.events import parse_events
from paradroid.model import Decision, RoundRecord
from .eventlog import EventLog

log = logging.getLogger(__name__)


class Actuator(Protocol):
    """Primitive bot commands understood by the game server."""

    def scan(self, bot_id: str, x: int, y: int) -> None: ...

    def move(self, bot_id: str, x: int, y: int) -> None: ...

    def fire(self, bot_id: str, x: int, y: int) -> None: ...


class CollectingActuator:
    """Actuator that records the calls, for transports that reply in bulk."""

    def __init__(self):
        self.calls: List[Tuple[str, str, int, int]] = []

    def scan(self, bot_id: str, x: int, y: int) -> None:
        self.calls.append(("scan", bot_id, x, y))

    def move(self, bot_id: str, x: int, y: int) -> None:
        self.calls.append(("move", bot_id, x, y))

    def fire(self, bot_id: str, x: int, y: int) -> None:
        self.calls.append(("fire", bot_id, x, y))

    def drain(self) -> List[Tuple[str, str, int, int]]:
        calls, self.calls = self.calls, []
        return calls


class RoundRunner:
    """Drives the engine one round at a time and issues the resulting actions."""

    def __init__(self, engine: DecisionEngine, actuator: Actuator):
        self.engine = engine
        self.actuator = actuator
        self.events = EventLog()
        self.started = False
        self._lock = asyncio.Lock()

    async def start(self, startup_config: Dict[str, Any], bots: Iterable[Any]) -> None:
        """Initialize the engine for a new game."""
        async with self._lock:
            self.engine.initialize(startup_config, bots)
            self.started = True

    async def play_round(self, round_id: int, raw_events: Iterable[Any], bots: Iterable[Any],
                         config: Dict[str, Any] | None = None) -> List[Decision]:
        """Decide the whole round first, then send one command per decision."""
        events = parse_events(raw_events)
        async with self._lock:
            decisions = self.engine.decide(round_id, events, bots, config)
        for d in decisions:
            self._issue(d)
        self.events.record(RoundRecord(round_id, events, decisions))
        log.info("Round %s: %d events, %d actions", round_id, len(events), len(decisions))
        return decisions

    def _issue(self, decision: Decision) -> None:
        command = getattr(self.actuator, decision.kind)
        command(decision.bot_id, decision.pos.x, decision.pos.y)
