from __future__ import annotations

from pathlib import Path

from starlette.config import Config

cfg = Config(".env")

DEBUG: bool = cfg("DEBUG", cast=bool, default=False)

# pass negative tier counts through to the calculator when False
STRICT_SYNTHESIS: bool = cfg("STRICT_SYNTHESIS", cast=bool, default=False)

BEATMAPS_PATH: Path = cfg("BEATMAPS_PATH", cast=Path, default=Path("beatmaps"))

LEADERBOARD_LIMIT: int = cfg("LEADERBOARD_LIMIT", cast=int, default=50)
TOP_PLAY_LIMIT: int = cfg("TOP_PLAY_LIMIT", cast=int, default=100)

# do NOT change
VERSION = "0.1.0"
