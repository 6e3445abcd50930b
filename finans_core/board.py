from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

PlayerId = int
Position = int


class MoveError(Enum):
    """Reasons a move can be rejected. The board is left untouched in both cases."""
    NON_EXISTENT_PLAYER = "NonExistentPlayer"
    NON_EXISTENT_POSITION = "NonExistentPosition"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move: either the new position or the error, never both."""
    position: Optional[Position] = None
    error: Optional[MoveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, position: Position) -> 'MoveResult':
        return cls(position=position)

    @classmethod
    def failure(cls, error: MoveError) -> 'MoveResult':
        return cls(error=error)


@dataclass
class BoardState:
    """Positions of every player on a circular track of ``track_length`` spaces."""
    track_length: int
    positions: Dict[PlayerId, Position] = field(default_factory=dict)

    @classmethod
    def new(cls, track_length: int, player_count: int) -> 'BoardState':
        """Registers players ``0 .. player_count - 1``, all on space 0.

        ``track_length`` is taken as given; callers validate it.
        """
        return cls(track_length=track_length, positions={player: 0 for player in range(player_count)})

    def move_relative(self, player: PlayerId, delta: int) -> MoveResult:
        """Advances a player by ``delta`` steps.

        On overflow the new position is ``p + delta - track_length - 1``, one
        step short of a modulo wrap. Large deltas can land outside the track.
        """
        current = self.positions.get(player)
        if current is None:
            return MoveResult.failure(MoveError.NON_EXISTENT_PLAYER)
        if current + delta >= self.track_length:
            new_position = current + delta - self.track_length - 1
        else:
            new_position = current + delta
        self.positions[player] = new_position
        return MoveResult.success(new_position)

    def move_to_position(self, player: PlayerId, position: Position) -> MoveResult:
        """Puts a player on ``position``. The bound is checked before the player."""
        if position >= self.track_length:
            return MoveResult.failure(MoveError.NON_EXISTENT_POSITION)
        if player not in self.positions:
            return MoveResult.failure(MoveError.NON_EXISTENT_PLAYER)
        self.positions[player] = position
        return MoveResult.success(position)

    def position_of(self, player: PlayerId) -> Optional[Position]:
        return self.positions.get(player)

    def players(self) -> List[PlayerId]:
        return sorted(self.positions)

    def snapshot(self) -> Dict[PlayerId, Position]:
        return dict(self.positions)

    def pretty(self) -> str:
        """Renders the track on one line: '.' for an empty space, the player id
        for a single token and '*' where several tokens share a space."""
        occupants: Dict[Position, List[PlayerId]] = {}
        for player, pos in self.positions.items():
            occupants.setdefault(pos, []).append(player)
        cells: List[str] = []
        for pos in range(self.track_length):
            here = occupants.get(pos, [])
            if not here:
                cells.append(".")
            elif len(here) == 1:
                cells.append(str(here[0]))
            else:
                cells.append("*")
        return " ".join(cells)
