"""Tests for the game API."""

import threading
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from solitaire_engine.board import Board
from solitaire_engine.cards import Card, Rank, Suit
from solitaire_engine.commands import Direction, MoveCursor, Quit, ToggleSelect
from solitaire_engine.game import Game
from web.api import app
from web.api.session_manager import (
    GameSession,
    GameSessionManager,
    SessionClosedError,
    session_manager,
)


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def game_id(client):
    response = client.post("/api/games", json={"seed": 42})
    assert response.status_code == 200
    yield response.json()["game_id"]
    session_manager.delete_session(response.json()["game_id"])


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestGames:
    def test_create_game(self, client, game_id):
        state = client.get(f"/api/games/{game_id}").json()

        assert [len(column) for column in state["tableau"]] == [1, 2, 3, 4, 5, 6, 7]
        assert state["deck_count"] == 24
        assert state["foundation_tops"] == [None, None, None, None]
        assert state["cursor"] == [0, 0]
        assert state["selected"] is None
        assert state["focused_foundation"] == 0

    def test_face_down_cards_are_hidden(self, client, game_id):
        state = client.get(f"/api/games/{game_id}").json()
        hidden = state["tableau"][6][0]
        visible = state["tableau"][6][-1]

        assert hidden == {"face_up": False, "display": "** *"}
        assert visible["face_up"] is True
        assert 1 <= visible["rank"] <= 13

    def test_list_games(self, client, game_id):
        ids = [game["id"] for game in client.get("/api/games").json()]
        assert game_id in ids

    def test_unknown_game(self, client):
        assert client.get("/api/games/missing").status_code == 404
        assert client.delete("/api/games/missing").status_code == 404

    def test_delete_game(self, client):
        game_id = client.post("/api/games", json={}).json()["game_id"]
        assert client.delete(f"/api/games/{game_id}").json() == {"deleted": True}
        assert client.get(f"/api/games/{game_id}").status_code == 404


class TestCommands:
    def test_move_cursor(self, client, game_id):
        response = client.post(
            f"/api/games/{game_id}/commands",
            json={"command": "move_cursor", "direction": "right"},
        )
        assert response.status_code == 200
        assert response.json()["cursor"] == [1, 0]

    def test_cycle_foundation_defaults_forward(self, client, game_id):
        response = client.post(
            f"/api/games/{game_id}/commands", json={"command": "cycle_foundation"}
        )
        assert response.json()["focused_foundation"] == 1

    def test_toggle_select(self, client, game_id):
        response = client.post(
            f"/api/games/{game_id}/commands", json={"command": "toggle_select"}
        )
        assert response.json()["selected"] == [0, 0]

    def test_draw_exposes_deck_top(self, client, game_id):
        response = client.post(
            f"/api/games/{game_id}/commands", json={"command": "draw_from_deck"}
        )
        state = response.json()
        assert state["deck_count"] == 24
        assert state["deck_top"]["face_up"] is True

    def test_quit(self, client, game_id):
        response = client.post(f"/api/games/{game_id}/commands", json={"command": "quit"})
        assert response.json()["should_quit"] is True

    def test_commands_after_quit_are_rejected(self, client, game_id):
        client.post(f"/api/games/{game_id}/commands", json={"command": "quit"})
        before = client.get(f"/api/games/{game_id}").json()

        response = client.post(
            f"/api/games/{game_id}/commands",
            json={"command": "move_cursor", "direction": "right"},
        )

        assert response.status_code == 400
        assert client.get(f"/api/games/{game_id}").json() == before
        history = client.get(f"/api/games/{game_id}/history").json()["commands"]
        assert [entry["command"] for entry in history] == ["QUIT"]

    def test_history(self, client, game_id):
        client.post(f"/api/games/{game_id}/commands", json={"command": "draw_from_deck"})
        history = client.get(f"/api/games/{game_id}/history").json()["commands"]
        assert [entry["command"] for entry in history] == ["DRAW_FROM_DECK"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"command": "fly"},
            {"command": "move_cursor"},
            {"command": "move_cursor", "direction": "sideways"},
            {"command": "cycle_foundation", "direction": "up"},
        ],
    )
    def test_bad_command(self, client, game_id, payload):
        response = client.post(f"/api/games/{game_id}/commands", json=payload)
        assert response.status_code == 400

    def test_command_on_unknown_game(self, client):
        response = client.post("/api/games/missing/commands", json={"command": "quit"})
        assert response.status_code == 404


class TestSessionManager:
    def test_seeded_sessions_match(self):
        manager = GameSessionManager()
        first = manager.create_session(seed=3).to_client_state()
        second = manager.create_session(seed=3).to_client_state()
        assert first["tableau"] == second["tableau"]
        assert first["game_id"] != second["game_id"]

    def test_list_sessions(self):
        manager = GameSessionManager()
        session = manager.create_session(seed=3)
        listed = manager.list_sessions()
        assert listed[0]["id"] == session.id
        assert listed[0]["deck_count"] == 24

    def test_apply_after_quit_raises(self):
        session = GameSessionManager().create_session(seed=3)
        session.apply(Quit())

        with pytest.raises(SessionClosedError):
            session.apply(MoveCursor(Direction.RIGHT))

        assert session.to_client_state()["cursor"] == [0, 0]
        assert len(session.history()) == 1


# Moves the whole run to column 1 and back again.
SHUTTLE = [
    ToggleSelect(),
    MoveCursor(Direction.RIGHT),
    ToggleSelect(),
    ToggleSelect(),
    MoveCursor(Direction.LEFT),
    ToggleSelect(),
]


class TestSessionLocking:
    @pytest.fixture
    def session(self):
        run = [Card(rank, Suit.SPADES, face_up=True) for rank in reversed(list(Rank))]
        game = Game(board=Board(tableau=[run, []]))
        return GameSession(id="shuttle", game=game, created_at=datetime.now())

    def test_shuttle_moves_run_back_and_forth(self, session):
        for command in SHUTTLE[:3]:
            session.apply(command)
        assert [len(column) for column in session.to_client_state()["tableau"]] == [0, 13]

        for command in SHUTTLE[3:]:
            session.apply(command)
        assert [len(column) for column in session.to_client_state()["tableau"]] == [13, 0]

    def test_reads_never_see_a_half_moved_run(self, session):
        done = threading.Event()

        def play():
            try:
                for _ in range(300):
                    for command in SHUTTLE:
                        session.apply(command)
            finally:
                done.set()

        writer = threading.Thread(target=play)
        writer.start()
        counts = set()
        while not done.is_set():
            state = session.to_client_state()
            counts.add(sum(len(column) for column in state["tableau"]))
        writer.join()
        state = session.to_client_state()
        counts.add(sum(len(column) for column in state["tableau"]))

        assert counts == {13}
        assert len(session.history()) == 300 * len(SHUTTLE)
