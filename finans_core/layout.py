from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .config import RESOLUTION, VIEW_HALF_HEIGHT

Color = Tuple[float, float, float]
Point = Tuple[float, float]

WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)
YELLOW: Color = (1.0, 1.0, 0.0)

BASIC_SPACE_SIZE = 1.3
SPECIAL_SPACE_SIZE = 1.5

# x of the inner edge of the side columns
_COLUMN_EDGE = 8.16
_SPECIAL_X = 8.6


class SpaceKind(Enum):
    BASIC = "basic"
    SPECIAL = "special"


@dataclass(frozen=True)
class BoardSpace:
    """One drawable space of the board, in world units centred on the origin."""
    index: int
    kind: SpaceKind
    center: Point
    size: float
    color: Color

    @property
    def name(self) -> str:
        return f"Space {self.index}"


@dataclass(frozen=True)
class ViewBounds:
    left: float
    right: float
    bottom: float
    top: float


def _alternating(i: int) -> Color:
    return WHITE if i % 2 == 0 else BLACK


def _basic(index: int, center: Point, i: int) -> BoardSpace:
    return BoardSpace(index, SpaceKind.BASIC, center, BASIC_SPACE_SIZE, _alternating(i))


def _left_column() -> Iterable[BoardSpace]:
    x = -_COLUMN_EDGE - BASIC_SPACE_SIZE / 2.0
    for i, index in enumerate(range(1, 10)):
        yield _basic(index, (x, i * BASIC_SPACE_SIZE - 4.0 * BASIC_SPACE_SIZE), i)


def _top_row() -> Iterable[BoardSpace]:
    y = VIEW_HALF_HEIGHT - BASIC_SPACE_SIZE / 2.0
    for i, index in enumerate(range(11, 23)):
        yield _basic(index, (i * BASIC_SPACE_SIZE - 6.0 * BASIC_SPACE_SIZE + BASIC_SPACE_SIZE / 2.0, y), i)


def _right_column() -> Iterable[BoardSpace]:
    x = _COLUMN_EDGE + BASIC_SPACE_SIZE / 2.0
    for i, index in enumerate(range(32, 23, -1)):
        yield _basic(index, (x, i * BASIC_SPACE_SIZE - 4.0 * BASIC_SPACE_SIZE), i)


def _bottom_row() -> Iterable[BoardSpace]:
    y = -VIEW_HALF_HEIGHT + BASIC_SPACE_SIZE / 2.0
    for i, index in enumerate(range(45, 33, -1)):
        yield _basic(index, (i * BASIC_SPACE_SIZE - 6.0 * BASIC_SPACE_SIZE + BASIC_SPACE_SIZE / 2.0, y), i)


def _corners() -> Iterable[BoardSpace]:
    low = -VIEW_HALF_HEIGHT + SPECIAL_SPACE_SIZE / 2.0
    high = VIEW_HALF_HEIGHT - SPECIAL_SPACE_SIZE / 2.0
    for index, center in (
        (0, (-_SPECIAL_X, low)),
        (10, (-_SPECIAL_X, high)),
        (23, (_SPECIAL_X, high)),
        (33, (_SPECIAL_X, low)),
    ):
        yield BoardSpace(index, SpaceKind.SPECIAL, center, SPECIAL_SPACE_SIZE, YELLOW)


def build_layout() -> List[BoardSpace]:
    """All spaces of the board sorted by index, clockwise from the bottom-left corner."""
    spaces: List[BoardSpace] = []
    for part in (_corners(), _left_column(), _top_row(), _right_column(), _bottom_row()):
        spaces.extend(part)
    return sorted(spaces, key=lambda s: s.index)


_BY_INDEX: Dict[int, BoardSpace] = {s.index: s for s in build_layout()}


def space_at(index: int) -> Optional[BoardSpace]:
    return _BY_INDEX.get(index)


def view_bounds() -> ViewBounds:
    """Orthographic bounds of the 2-D camera; the board fills the height."""
    half_width = VIEW_HALF_HEIGHT * RESOLUTION
    return ViewBounds(left=-half_width, right=half_width, bottom=-VIEW_HALF_HEIGHT, top=VIEW_HALF_HEIGHT)
