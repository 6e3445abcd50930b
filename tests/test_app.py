import json
import os
import unittest
from unittest.mock import patch

from app import app as flask_app
from app import board_to_json, json_to_board
from game import BoardState


def _post(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _new_board(self, **payload):
        r = _post(self.client, "/api/new", payload)
        self.assertEqual(r.status_code, 200)
        return r.get_json()["board"]

    def test_given_layout_when_requested_then_spaces_view_and_window(self):
        r = self.client.get("/api/layout")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        self.assertEqual(len(data["spaces"]), 46)
        self.assertEqual(data["spaces"][0]["name"], "Space 0")
        self.assertEqual(data["spaces"][0]["kind"], "special")
        self.assertEqual(data["view"]["top"], 7.5)
        self.assertEqual(data["window"]["title"], "Finans")

    def test_given_no_body_when_creating_then_configured_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            board = self._new_board()
        self.assertEqual(board, {"trackLength": 46, "positions": {"0": 0}})

    def test_given_sizes_when_creating_then_players_on_zero(self):
        board = self._new_board(trackLength=10, players=3)
        self.assertEqual(board["trackLength"], 10)
        self.assertEqual(board["positions"], {"0": 0, "1": 0, "2": 0})

    def test_given_bad_sizes_when_creating_then_400(self):
        payloads = (
            {"trackLength": 0},
            {"players": -1},
            {"trackLength": "ten"},
            {"trackLength": 10.7},
            {"players": 2.5},
            [1],
            "x",
        )
        for payload in payloads:
            r = _post(self.client, "/api/new", payload)
            self.assertEqual(r.status_code, 400, payload)
            d = r.get_json()
            self.assertFalse(d["ok"])
            self.assertTrue(d["error"].startswith("bad request"))

    def test_given_board_when_moving_then_positions_follow_wraparound(self):
        board = self._new_board(trackLength=10, players=1)
        r = _post(self.client, "/api/move", {"board": board, "player": 0, "steps": 5})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertEqual(d["position"], 5)
        r = _post(self.client, "/api/move", {"board": d["board"], "player": 0, "steps": 4})
        self.assertEqual(r.get_json()["position"], 9)

        fresh = self._new_board(trackLength=10, players=1)
        r = _post(self.client, "/api/move", {"board": fresh, "player": 0, "steps": 11})
        d = r.get_json()
        self.assertEqual(d["position"], 0)
        self.assertEqual(d["board"]["positions"], {"0": 0})

    def test_given_unknown_player_when_moving_then_400_and_board_unchanged(self):
        board = self._new_board(trackLength=10, players=1)
        r = _post(self.client, "/api/move", {"board": board, "player": 3, "steps": 2})
        self.assertEqual(r.status_code, 400)
        d = r.get_json()
        self.assertEqual(d["error"], "NonExistentPlayer")
        self.assertEqual(d["board"], board)

    def test_given_targets_when_moving_to_position_then_bound_checked_before_player(self):
        board = self._new_board(trackLength=10, players=1)
        r = _post(self.client, "/api/move_to", {"board": board, "player": 0, "position": 4})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["position"], 4)

        r = _post(self.client, "/api/move_to", {"board": board, "player": 5, "position": 40})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["error"], "NonExistentPosition")

        r = _post(self.client, "/api/move_to", {"board": board, "player": 5, "position": 4})
        self.assertEqual(r.get_json()["error"], "NonExistentPlayer")

    def test_given_board_when_querying_position_then_value_or_null(self):
        board = {"trackLength": 10, "positions": {"0": 7}}
        r = _post(self.client, "/api/position", {"board": board, "player": 0})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json(), {"ok": True, "position": 7})
        r = _post(self.client, "/api/position", {"board": board, "player": 2})
        self.assertEqual(r.status_code, 200)
        self.assertIsNone(r.get_json()["position"])

    def test_given_malformed_bodies_when_posting_then_400(self):
        board = {"trackLength": 10, "positions": {"0": 0}}
        cases = [
            ("/api/move", {"player": 0, "steps": 1}),
            ("/api/move", {"board": board, "player": 0}),
            ("/api/move", {"board": board, "player": 0, "steps": -2}),
            ("/api/move", {"board": board, "player": 0, "steps": True}),
            ("/api/move_to", {"board": board, "player": "x", "position": 1}),
            ("/api/move_to", {"board": board, "player": 0, "position": -1}),
            ("/api/position", {"board": {"positions": {}}, "player": 0}),
            ("/api/position", {"board": {"trackLength": 10, "positions": []}, "player": 0}),
            ("/api/move", {"board": board, "player": 0, "steps": 2.9}),
            ("/api/move", {"board": {"trackLength": 10.7, "positions": {"0": 0}}, "player": 0, "steps": 1}),
            ("/api/move", {"board": {"trackLength": 10, "positions": {"0": 1.5}}, "player": 0, "steps": 1}),
            ("/api/move_to", {"board": board, "player": 0.0, "position": 1}),
            ("/api/move", [board]),
            ("/api/position", "board"),
        ]
        for url, payload in cases:
            r = _post(self.client, url, payload)
            self.assertEqual(r.status_code, 400, (url, payload))
            self.assertTrue(r.get_json()["error"].startswith("bad request"))

    def test_given_board_with_unregistered_ids_when_moving_then_400_and_nobody_moved(self):
        boards = [
            {"trackLength": 10, "positions": {"0": 0, "-7": 99}},
            {"trackLength": 10, "positions": {"0": 0, "2": 0}},
            {"trackLength": 10, "positions": {"1": 0}},
        ]
        for board in boards:
            player = min(int(p) for p in board["positions"])
            r = _post(self.client, "/api/move", {"board": board, "player": player, "steps": 1})
            self.assertEqual(r.status_code, 400, board)
            d = r.get_json()
            self.assertTrue(d["error"].startswith("bad request"))
            self.assertNotIn("position", d)

    def test_given_wrapped_positions_off_the_track_when_sent_back_then_accepted(self):
        board = {"trackLength": 10, "positions": {"0": -1, "1": 24}}
        r = _post(self.client, "/api/position", {"board": board, "player": 1})
        self.assertEqual(r.get_json(), {"ok": True, "position": 24})
        r = _post(self.client, "/api/move", {"board": board, "player": 0, "steps": 3})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["position"], 2)

    def test_given_board_when_round_tripping_json_then_equal(self):
        b = BoardState.new(12, 2)
        b.move_to_position(1, 6)
        self.assertEqual(json_to_board(board_to_json(b)), b)


if __name__ == "__main__":
    unittest.main(verbosity=2)
