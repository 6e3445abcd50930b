"""
Finans core Python package.

This package holds the board state model and the pure-logic helpers around
it, kept apart from the Flask app and the CLI to keep them testable.
Modules:
- board.py: BoardState, MoveError, MoveResult
- session.py: GameSession (owns a BoardState, serialises moves)
- layout.py: static geometry of the board spaces
- config.py: environment settings, window and camera constants
- logging_utils.py: root logger setup
- cli.py: command line driver
"""
