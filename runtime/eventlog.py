from collections import Counter, defaultdict
from typing import Dict, List, Tuple
from paradroid.model import Decision, RoundRecord

class EventLog:
    """Round history indexed both by round offset and by bot."""

    def __init__(self):
        self._rounds: List[RoundRecord] = []
        self._by_bot: Dict[str, List[Tuple[int, Decision]]] = defaultdict(list)
        self._kinds: Counter = Counter()

    def __len__(self) -> int:
        return len(self._rounds)

    def record(self, entry: RoundRecord) -> int:
        """Store one decided round and return its offset."""
        self._rounds.append(entry)
        for d in entry.decisions:
            self._by_bot[d.bot_id].append((entry.round_id, d))
            self._kinds[d.kind] += 1
        return len(self._rounds) - 1

    def since(self, offset: int, limit: int = 1000) -> tuple[list[RoundRecord], int]:
        """Return rounds starting from offset, up to limit."""
        offset = max(0, offset)
        chunk = self._rounds[offset: offset + limit]
        return chunk, offset + len(chunk)

    def bot_history(self, bot_id: str) -> List[Tuple[int, Decision]]:
        """(round_id, decision) pairs issued to one bot, oldest first."""
        return list(self._by_bot.get(bot_id, []))

    def action_counts(self) -> Dict[str, int]:
        """How many scan, move and fire commands were issued overall."""
        return dict(self._kinds)
