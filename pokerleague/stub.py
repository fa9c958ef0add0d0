"""An in-memory player store that remembers the wins it was asked to record."""

from __future__ import annotations

import threading
from typing import Iterable, Mapping

from .league import League, Player


class StubPlayerStore:
    """Fixed scores and league; record_win only logs the name."""

    def __init__(
        self,
        scores: Mapping[str, int] | None = None,
        league: Iterable[Player] | None = None,
    ) -> None:
        self.scores = dict(scores or {})
        self.league = League(league or [])
        self.win_calls: list[str] = []
        self._lock = threading.Lock()

    def get_player_score(self, name: str) -> int:
        """Return the fixed score of ``name``, 0 if unknown."""
        return self.scores.get(name, 0)

    def record_win(self, name: str) -> None:
        """Remember that a win was recorded for ``name``."""
        with self._lock:
            self.win_calls.append(name)

    def get_league(self) -> League:
        """Return the fixed league."""
        return self.league