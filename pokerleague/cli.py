"""Command line game that records the winner typed by the user."""

from __future__ import annotations

import argparse
import sys
from typing import IO

from .server import PlayerStore
from .store import StoreError, open_player_store

DB_FILE_NAME = "game.db.json"


def extract_winner(user_input: str) -> str:
    """Turn "<name> wins" into "<name>"."""
    return user_input.replace(" wins", "", 1)


class CLI:
    """Reads one line from input and records the winner it names."""

    def __init__(self, store: PlayerStore, stdin: IO[str]) -> None:
        self._store = store
        self._stdin = stdin

    def play_poker(self) -> None:
        """Read a line and record a win for the player in it."""
        self._store.record_win(extract_winner(self._read_line()))

    def _read_line(self) -> str:
        return self._stdin.readline().removesuffix("\n").removesuffix("\r")


def main(argv: list[str] | None = None) -> int:
    """Run one game against the league stored on disk."""
    parser = argparse.ArgumentParser(description="Record the winner of a poker game.")
    parser.add_argument("--db", default=DB_FILE_NAME, help="league file (default: %(default)s)")
    args = parser.parse_args(argv)
    try:
        with open_player_store(args.db) as store:
            print("Let's play poker")
            print("Type {Name} wins to record a win")
            CLI(store, sys.stdin).play_poker()
    except StoreError as err:
        raise SystemExit(str(err)) from err
    return 0


if __name__ == "__main__":
    sys.exit(main())