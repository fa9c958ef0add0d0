# pokerleague

A small poker league tracker. Wins are stored as JSON in a file
(`game.db.json` in the current directory by default), recorded from the
command line or through a WSGI application.

## Installing

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Recording a win from the terminal

    pokerleague-cli

The program asks you to type `{Name} wins`; answering `Chris wins`
records one win for Chris. Use `--db PATH` to keep the league in another
file. The file is created if it does not exist.

## The WSGI application

`pokerleague.server.PlayerServer` is a WSGI application built around any
object that implements the `PlayerStore` interface (`get_player_score`,
`record_win`, `get_league`). It answers:

- `GET /players/{name}`: the player's number of wins as plain text, with
  status 404 when the player has none.
- `POST /players/{name}`: records a win for the player and answers
  202 Accepted.
- `GET /league`: every player as JSON, `[{"Name": "Chris", "Wins": 33}]`,
  in the order the store returns them.

Other paths get 404, and `/players` is redirected to `/players/`.

## Storage

`pokerleague.store.FileSystemPlayerStore` wraps an open file, keeps the
whole league in memory and rewrites the file after each recorded win. Its
`get_league` returns players ordered by wins, highest first. An empty
file is initialised to an empty league; a file that does not hold a JSON
array raises `StoreError`.

`open_player_store(path)` is a context manager that opens (or creates) the
file, yields a store and closes the file on exit.

`pokerleague.stub.StubPlayerStore` is an in-memory store with fixed scores
and league that remembers the names passed to `record_win` in `win_calls`.

## What is not included

The package has no command that starts an HTTP server. To serve the
league over HTTP, run `PlayerServer` under any WSGI server, for example
the one in the standard library:

    from wsgiref.simple_server import make_server

    from pokerleague.server import PlayerServer
    from pokerleague.store import open_player_store

    with open_player_store("game.db.json") as store:
        make_server("", 5000, PlayerServer(store)).serve_forever()