from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from .board import BoardState, MoveResult, PlayerId, Position

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the board of one game and hands it to whoever issues moves.

    Moves hold the lock for their whole read-modify-write, so readers only
    ever see fully applied positions.
    """

    def __init__(self, board: BoardState) -> None:
        self.board = board
        self._lock = threading.Lock()

    @classmethod
    def start(cls, track_length: int, player_count: int) -> 'GameSession':
        board = BoardState.new(track_length, player_count)
        logger.info("new board: %d spaces, %d players", track_length, player_count)
        return cls(board)

    @property
    def track_length(self) -> int:
        return self.board.track_length

    def move_relative(self, player: PlayerId, delta: int) -> MoveResult:
        with self._lock:
            res = self.board.move_relative(player, delta)
        self._log_move("move", player, delta, res)
        return res

    def move_to_position(self, player: PlayerId, position: Position) -> MoveResult:
        with self._lock:
            res = self.board.move_to_position(player, position)
        self._log_move("move_to", player, position, res)
        return res

    def position_of(self, player: PlayerId) -> Optional[Position]:
        with self._lock:
            return self.board.position_of(player)

    def snapshot(self) -> Dict[PlayerId, Position]:
        with self._lock:
            return self.board.snapshot()

    def _log_move(self, kind: str, player: PlayerId, arg: int, res: MoveResult) -> None:
        if res.error is None:
            logger.info("%s player=%d arg=%d -> %d", kind, player, arg, res.position)
        else:
            logger.warning("%s player=%d arg=%d rejected: %s", kind, player, arg, res.error.value)
