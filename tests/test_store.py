import json

import pytest

from pokerleague.league import League, Player, load_league
from pokerleague.server import PlayerServer
from pokerleague.store import FileSystemPlayerStore, StoreError, open_player_store
from tests.test_server import call

INITIAL = """[
    {"Name": "Cleo", "Wins": 10},
    {"Name": "Chris", "Wins": 33}]"""


@pytest.fixture
def database(tmp_path):
    opened = []

    def make(initial_data):
        path = tmp_path / f"db{len(opened)}"
        path.write_text(initial_data)
        file = open(path, "r+b")
        opened.append(file)
        return file

    yield make
    for file in opened:
        file.close()


def test_get_league_sorted(database):
    store = FileSystemPlayerStore(database(INITIAL))
    want = League([Player("Chris", 33), Player("Cleo", 10)])
    assert store.get_league() == want
    assert store.get_league() == want


def test_get_player_score(database):
    store = FileSystemPlayerStore(database(INITIAL))
    assert store.get_player_score("Chris") == 33


def test_store_wins_for_existing_players(database):
    store = FileSystemPlayerStore(database(INITIAL))
    store.record_win("Chris")
    assert store.get_player_score("Chris") == 34


def test_store_wins_for_new_players(database):
    store = FileSystemPlayerStore(database(INITIAL))
    store.record_win("Pepper")
    assert store.get_player_score("Pepper") == 1


def test_unknown_player_scores_zero(database):
    store = FileSystemPlayerStore(database(INITIAL))
    assert store.get_player_score("Apollo") == 0


def test_works_with_an_empty_file(database):
    file = database("")
    store = FileSystemPlayerStore(file)
    assert store.get_league() == []
    file.seek(0)
    assert file.read() == b"[]"


def test_record_win_rewrites_file(database):
    file = database(INITIAL)
    store = FileSystemPlayerStore(file)
    store.record_win("Chris")
    file.seek(0)
    assert file.read() == b'[{"Name":"Cleo","Wins":10},{"Name":"Chris","Wins":34}]\n'


def test_bad_json_raises(database):
    with pytest.raises(StoreError, match="problem loading player store"):
        FileSystemPlayerStore(database("not json"))


def test_open_player_store_creates_and_persists(tmp_path):
    path = tmp_path / "game.db.json"
    with open_player_store(path) as store:
        store.record_win("Pepper")
        store.record_win("Pepper")
    with open_player_store(path) as store:
        assert store.get_player_score("Pepper") == 2
    with open(path, "rb") as file:
        assert load_league(file) == [Player("Pepper", 2)]


def test_open_player_store_missing_directory(tmp_path):
    with pytest.raises(StoreError, match="problem opening"):
        with open_player_store(tmp_path / "missing" / "db.json"):
            pass


def test_open_player_store_bad_content(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{")
    with pytest.raises(StoreError, match="problem creating file system player store"):
        with open_player_store(path):
            pass


def test_recording_wins_and_retrieving_them(database):
    store = FileSystemPlayerStore(database("[]"))
    server = PlayerServer(store)
    player = "Pepper"

    for _ in range(3):
        call(server, "POST", f"/players/{player}")

    response = call(server, "GET", f"/players/{player}")
    assert response.code == 200
    assert response.body == "3"

    response = call(server, "GET", "/league")
    assert response.code == 200
    got = [Player(item["Name"], item["Wins"]) for item in json.loads(response.body)]
    assert got == [Player("Pepper", 3)]