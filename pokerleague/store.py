"""A player store kept as JSON in a file."""

from __future__ import annotations

import io
import os
import threading
from contextlib import contextmanager
from operator import attrgetter
from typing import IO, Iterator

from .league import League, LeagueError, Player, _encode_league, load_league
from .tape import Tape


class StoreError(Exception):
    """Raised when the player store cannot be opened or loaded."""


def _file_name(file: IO) -> str:
    return str(getattr(file, "name", ""))


def _is_text(file: IO) -> bool:
    return isinstance(file, io.TextIOBase)


def _initialise_db_file(file: IO) -> None:
    try:
        file.seek(0)
        size = file.seek(0, io.SEEK_END)
    except OSError as err:
        raise StoreError(
            f"problem getting file info from file {_file_name(file)}, {err}"
        ) from err
    if size == 0:
        file.write("[]" if _is_text(file) else b"[]")
        file.flush()
    file.seek(0)


class FileSystemPlayerStore:
    """Keeps the league in memory and writes it to the file after each win."""

    def __init__(self, file: IO) -> None:
        try:
            _initialise_db_file(file)
        except (StoreError, OSError) as err:
            raise StoreError(f"problem initialising player db file, {err}") from err
        try:
            self._league = load_league(file)
        except LeagueError as err:
            raise StoreError(
                f"problem loading player store from file {_file_name(file)}, {err}"
            ) from err
        self._text = _is_text(file)
        self._tape = Tape(file)
        self._lock = threading.Lock()

    def get_league(self) -> League:
        """Return the league sorted by wins, most first."""
        with self._lock:
            self._league.sort(key=attrgetter("wins"), reverse=True)
            return self._league

    def get_player_score(self, name: str) -> int:
        """Return the wins of ``name``, 0 if unknown."""
        with self._lock:
            player = self._league.find(name)
            return player.wins if player is not None else 0

    def record_win(self, name: str) -> None:
        """Add a win for ``name`` and save the league."""
        with self._lock:
            player = self._league.find(name)
            if player is not None:
                player.wins += 1
            else:
                self._league.append(Player(name, 1))
            encoded = _encode_league(self._league)
            self._tape.write(encoded if self._text else encoded.encode("utf-8"))


@contextmanager
def open_player_store(path: str | os.PathLike) -> Iterator[FileSystemPlayerStore]:
    """Open (creating if needed) the store at ``path``; close it on exit."""
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o666)
    except OSError as err:
        raise StoreError(f"problem opening {os.fspath(path)} {err}") from err
    with os.fdopen(fd, "r+b") as file:
        try:
            store = FileSystemPlayerStore(file)
        except StoreError as err:
            raise StoreError(f"problem creating file system player store, {err}") from err
        yield store