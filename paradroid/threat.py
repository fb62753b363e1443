import logging
from typing import Dict

from .hexgrid import Coordinate
from .model import ThreatRecord

log = logging.getLogger(__name__)

THREAT_ROUNDS = 2


class ThreatMemory:
    """Short-lived per-bot evasion records.

    A record lives for THREAT_ROUNDS consultations; a fresh trigger replaces
    it. Bots without a record are in the clear.
    """

    def __init__(self):
        self.threats: Dict[str, ThreatRecord] = {}

    def __contains__(self, bot_id: str) -> bool:
        return bot_id in self.threats

    def __len__(self) -> int:
        return len(self.threats)

    def enter(self, bot_id: str, avoid_coordinate: Coordinate) -> ThreatRecord:
        record = ThreatRecord(bot_id, avoid_coordinate, THREAT_ROUNDS)
        self.threats[bot_id] = record
        log.debug("Bot %s threatened, evading toward %s", bot_id, avoid_coordinate)
        return record

    def consult(self, bot_id: str) -> Coordinate | None:
        """Return the bot's evasion waypoint for this round and age its record."""
        record = self.threats.get(bot_id)
        if record is None:
            return None
        record.remaining_rounds -= 1
        if record.remaining_rounds <= 0:
            del self.threats[bot_id]
        return record.avoid_coordinate

    def advance(self) -> Dict[str, Coordinate]:
        """Consult every record once; returns the waypoints active this round."""
        return {bot_id: self.consult(bot_id) for bot_id in list(self.threats)}

    def forget(self, bot_id: str) -> None:
        self.threats.pop(bot_id, None)
