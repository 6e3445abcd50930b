from __future__ import annotations

import logging
import os
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

from game import (
    BoardSpace,
    BoardState,
    GameSession,
    MoveResult,
    build_layout,
    check_sizes,
    load_settings,
    view_bounds,
)
from finans_core.config import CLEAR_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from finans_core.logging_utils import configure_logging

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _as_int(value: Any, what: str) -> int:
    # JSON floats and booleans are not ids or counts
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    return value


def _non_negative(value: Any, what: str) -> int:
    n = _as_int(value, what)
    if n < 0:
        raise ValueError(f"{what} must not be negative")
    return n


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise TypeError("body must be a JSON object")
    return body


def board_to_json(b: BoardState) -> Dict[str, Any]:
    return {
        "trackLength": int(b.track_length),
        "positions": {str(p): int(pos) for p, pos in sorted(b.positions.items())},
    }


def json_to_board(obj: Dict[str, Any]) -> BoardState:
    """Rebuilds a board sent back by a client.

    Player ids must be exactly 0 .. n - 1, as on a freshly built board.
    Positions are not range-checked: a wrapped move can leave the track.
    """
    track_length = _as_int(obj["trackLength"], "trackLength")
    check_sizes(track_length, 0)
    positions = {int(p): _as_int(pos, f"position of player {p}") for p, pos in obj.get("positions", {}).items()}
    if sorted(positions) != list(range(len(positions))):
        raise ValueError("players must be numbered 0 .. n - 1")
    return BoardState(track_length=track_length, positions=positions)


def _space_to_json(s: BoardSpace) -> Dict[str, Any]:
    return {
        "index": s.index,
        "name": s.name,
        "kind": s.kind.value,
        "center": list(s.center),
        "size": s.size,
        "color": list(s.color),
    }


def _bad_request(e: Exception) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": f"bad request: {e}"}), 400


def _move_response(session: GameSession, res: MoveResult) -> Any:
    if res.error is not None:
        return jsonify({"ok": False, "error": res.error.value, "board": board_to_json(session.board)}), 400
    return jsonify({"ok": True, "position": res.position, "board": board_to_json(session.board)})


@app.get("/api/layout")
def api_layout() -> Any:
    vb = view_bounds()
    return jsonify({
        "ok": True,
        "spaces": [_space_to_json(s) for s in build_layout()],
        "view": {"left": vb.left, "right": vb.right, "bottom": vb.bottom, "top": vb.top},
        "window": {
            "title": WINDOW_TITLE,
            "width": WINDOW_WIDTH,
            "height": WINDOW_HEIGHT,
            "clearColor": list(CLEAR_COLOR),
        },
    })


@app.post("/api/new")
def api_new() -> Any:
    try:
        body = _json_body()
        settings = load_settings()
        track_length = _as_int(body.get("trackLength", settings.track_length), "trackLength")
        players = _as_int(body.get("players", settings.players), "players")
        check_sizes(track_length, players)
    except (TypeError, ValueError) as e:
        return _bad_request(e)
    session = GameSession.start(track_length, players)
    return jsonify({"ok": True, "board": board_to_json(session.board)})


@app.post("/api/move")
def api_move() -> Any:
    try:
        body = _json_body()
        session = GameSession(json_to_board(body["board"]))
        player = _as_int(body["player"], "player")
        steps = _non_negative(body["steps"], "steps")
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        return _bad_request(e)
    return _move_response(session, session.move_relative(player, steps))


@app.post("/api/move_to")
def api_move_to() -> Any:
    try:
        body = _json_body()
        session = GameSession(json_to_board(body["board"]))
        player = _as_int(body["player"], "player")
        position = _non_negative(body["position"], "position")
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        return _bad_request(e)
    return _move_response(session, session.move_to_position(player, position))


@app.post("/api/position")
def api_position() -> Any:
    try:
        body = _json_body()
        board = json_to_board(body["board"])
        player = _as_int(body["player"], "player")
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        return _bad_request(e)
    return jsonify({"ok": True, "position": board.position_of(player)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging(level=load_settings().log_level)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
