from __future__ import annotations

# Facade module that re-exports the Finans core.
# Kept so the Flask app and tests have one import point.
# Single-responsibility modules live under finans_core/*.

from finans_core.board import BoardState, MoveError, MoveResult, PlayerId, Position  # noqa: F401
from finans_core.session import GameSession  # noqa: F401
from finans_core.layout import (  # noqa: F401
    BoardSpace,
    SpaceKind,
    ViewBounds,
    build_layout,
    space_at,
    view_bounds,
)
from finans_core.config import Settings, check_sizes, load_settings  # noqa: F401


def main() -> None:
    # CLI driver delegated to finans_core.cli
    from finans_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
