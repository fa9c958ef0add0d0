"""WSGI application that reports and records player wins."""

from __future__ import annotations

from http import HTTPStatus
from typing import Iterable, Protocol

from .league import League, _encode_league

JSON_CONTENT_TYPE = "application/json"
_TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
_PLAYERS_PREFIX = "/players/"


class PlayerStore(Protocol):
    """Storage the server reads scores from and records wins in."""

    def get_player_score(self, name: str) -> int:
        """Return the number of wins of ``name``, 0 if unknown."""

    def record_win(self, name: str) -> None:
        """Add one win for ``name``."""

    def get_league(self) -> League:
        """Return all players."""


def _status(code: HTTPStatus) -> str:
    return f"{code.value} {code.phrase}"


def _request_path(environ: dict) -> str:
    raw = environ.get("PATH_INFO", "")
    try:
        return raw.encode("latin-1").decode("utf-8", "replace")
    except UnicodeEncodeError:
        return raw


class PlayerServer:
    """Serves ``/league`` and ``/players/<name>`` from a player store."""

    def __init__(self, store: PlayerStore) -> None:
        self.store = store

    def __call__(self, environ: dict, start_response) -> Iterable[bytes]:
        path = _request_path(environ)
        method = environ.get("REQUEST_METHOD", "GET")

        if path == "/league":
            status, headers, body = self._league()
        elif path.startswith(_PLAYERS_PREFIX):
            status, headers, body = self._players(method, path[len(_PLAYERS_PREFIX):])
        elif path == _PLAYERS_PREFIX.rstrip("/"):
            status = _status(HTTPStatus.MOVED_PERMANENTLY)
            headers = [("Location", _PLAYERS_PREFIX)]
            body = b""
        else:
            status = _status(HTTPStatus.NOT_FOUND)
            headers = [("Content-Type", _TEXT_CONTENT_TYPE)]
            body = b"404 page not found\n"

        headers.append(("Content-Length", str(len(body))))
        start_response(status, headers)
        return [body]

    def _players(self, method: str, player: str):
        if method == "POST":
            self.store.record_win(player)
            return _status(HTTPStatus.ACCEPTED), [], b""
        if method == "GET":
            score = self.store.get_player_score(player)
            code = HTTPStatus.NOT_FOUND if score == 0 else HTTPStatus.OK
            return _status(code), [("Content-Type", _TEXT_CONTENT_TYPE)], str(score).encode()
        return _status(HTTPStatus.OK), [], b""

    def _league(self):
        body = _encode_league(self.store.get_league()).encode("utf-8")
        return _status(HTTPStatus.OK), [("Content-Type", JSON_CONTENT_TYPE)], body