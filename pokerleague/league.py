"""Players, the league they form, and reading a league from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import IO, Any

_DECODER = json.JSONDecoder()


class LeagueError(ValueError):
    """Raised when a league cannot be parsed."""


@dataclass
class Player:
    """A player and the number of games they have won."""

    name: str = ""
    wins: int = 0


class League(list):
    """An ordered list of players."""

    def find(self, name: str) -> Player | None:
        """Return the first player called ``name``, or None."""
        for player in self:
            if player.name == name:
                return player
        return None


def _field(item: dict, wanted: str) -> Any:
    if wanted in item:
        return item[wanted]
    for key, value in item.items():
        if key.casefold() == wanted.casefold():
            return value
    return None


def _player_from_json(item: Any) -> Player:
    if item is None:
        return Player()
    if not isinstance(item, dict):
        raise LeagueError(f"Problem parsing league, expected an object but got {item!r}")
    name = _field(item, "Name")
    wins = _field(item, "Wins")
    if name is not None and not isinstance(name, str):
        raise LeagueError(f"Problem parsing league, Name must be a string, got {name!r}")
    if wins is not None and (isinstance(wins, bool) or not isinstance(wins, int)):
        raise LeagueError(f"Problem parsing league, Wins must be an integer, got {wins!r}")
    return Player(name or "", wins or 0)


def load_league(stream: IO) -> League:
    """Read a league from the JSON array at the start of ``stream``."""
    data = stream.read()
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise LeagueError(f"Problem parsing league, {err}") from err
    try:
        value, _ = _DECODER.raw_decode(data.lstrip(" \t\r\n"))
    except json.JSONDecodeError as err:
        raise LeagueError(f"Problem parsing league, {err}") from err
    if value is None:
        return League()
    if not isinstance(value, list):
        raise LeagueError(f"Problem parsing league, expected a JSON array but got {value!r}")
    return League(_player_from_json(item) for item in value)


def _encode_league(league: list[Player]) -> str:
    """Encode a league as one line of compact JSON ending in a newline."""
    text = json.dumps(
        [{"Name": player.name, "Wins": player.wins} for player in league],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    for char, escaped in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escaped)
    return text + "\n"