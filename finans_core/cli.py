from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from .config import check_sizes, load_settings
from .layout import build_layout
from .logging_utils import configure_logging
from .session import GameSession

HELP = "commands: m <player> <steps> | t <player> <position> | p <player> | show | q"


def _parse_pair(parts: List[str]) -> Tuple[int, int]:
    if len(parts) != 2:
        raise ValueError('expected two numbers')
    a, b = int(parts[0]), int(parts[1])
    if a < 0 or b < 0:
        raise ValueError('numbers must not be negative')
    return a, b


def run_command(session: GameSession, line: str) -> str:
    """Applies one play-loop command and returns the text to show."""
    parts = line.split()
    if not parts:
        return HELP
    cmd, args = parts[0].lower(), parts[1:]
    try:
        if cmd == 'show':
            return session.board.pretty()
        if cmd == 'p':
            if len(args) != 1:
                raise ValueError('expected a player')
            pos = session.position_of(int(args[0]))
            return f"player {args[0]} is not on the board" if pos is None else f"player {args[0]} is on {pos}"
        if cmd in ('m', 't'):
            player, n = _parse_pair(args)
            res = session.move_relative(player, n) if cmd == 'm' else session.move_to_position(player, n)
            if res.error is not None:
                return f"error: {res.error.value}"
            return f"player {player} moves to {res.position}"
    except ValueError as e:
        return f"Could not parse ({e}). {HELP}"
    return HELP


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Finans board')
    parser.add_argument('--track-length', type=int, default=None, help='Number of spaces on the track (FINANS_TRACK_LENGTH)')
    parser.add_argument('--players', type=int, default=None, help='Number of players (FINANS_PLAYERS)')
    parser.add_argument('--layout', action='store_true', help='List the board spaces')
    parser.add_argument('--play', action='store_true', help='Read move commands from stdin')
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.track_length is None:
            args.track_length = settings.track_length
        if args.players is None:
            args.players = settings.players
        check_sizes(args.track_length, args.players)
        configure_logging(level=settings.log_level)
    except ValueError as e:
        parser.error(str(e))

    session = GameSession.start(args.track_length, args.players)
    print(f"Board of {args.track_length} spaces, {args.players} player(s):")
    print(session.board.pretty())

    if args.layout:
        for space in build_layout():
            x, y = space.center
            print(f"{space.index:>2} {space.name:<9} ({x:6.2f}, {y:6.2f}) size={space.size} color={space.color}")

    if not args.play:
        return

    print(HELP)
    while True:
        try:
            text = input('> ').strip()
        except EOFError:
            break
        if text.lower() in ('q', 'quit'):
            break
        print(run_command(session, text))
