from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

# Window and camera, in the units the board layout uses.
WINDOW_TITLE = "Finans"
WINDOW_HEIGHT = 600.0
RESOLUTION = 15.0 / 12.0
WINDOW_WIDTH = WINDOW_HEIGHT * RESOLUTION
CLEAR_COLOR: Tuple[float, float, float] = (0.3, 0.3, 0.3)
VIEW_HALF_HEIGHT = 7.5

DEFAULT_TRACK_LENGTH = 46
DEFAULT_PLAYERS = 1


def _truthy(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in ('1', 'true', 'yes', 'on')


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def check_sizes(track_length: int, player_count: int) -> None:
    """Rejects sizes that would leave the board without a valid space."""
    if track_length < 1:
        raise ValueError(f"track length must be at least 1, got {track_length}")
    if player_count < 0:
        raise ValueError(f"player count must not be negative, got {player_count}")


@dataclass(frozen=True)
class Settings:
    track_length: int = DEFAULT_TRACK_LENGTH
    players: int = DEFAULT_PLAYERS
    log_level: str = "INFO"
    debug: bool = False


def load_settings() -> Settings:
    """Reads FINANS_TRACK_LENGTH, FINANS_PLAYERS, LOG_LEVEL and FINANS_DEBUG."""
    track_length = _int_env('FINANS_TRACK_LENGTH', DEFAULT_TRACK_LENGTH)
    players = _int_env('FINANS_PLAYERS', DEFAULT_PLAYERS)
    check_sizes(track_length, players)
    debug = _truthy(os.getenv('FINANS_DEBUG'))
    level = 'DEBUG' if debug else os.getenv('LOG_LEVEL', 'INFO').upper()
    return Settings(track_length=track_length, players=players, log_level=level, debug=debug)
