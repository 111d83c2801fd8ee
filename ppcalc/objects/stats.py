from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ppcalc.errors import InvalidParameter


@dataclass(frozen=True)
class PlayResult:
    local_pp: float
    live_pp: float

    beatmap_id: Optional[int] = None
    mods: str = ""

    def __post_init__(self) -> None:
        if self.local_pp < 0:
            raise InvalidParameter("local_pp", "can't be negative")

        if self.live_pp < 0:
            raise InvalidParameter("live_pp", "can't be negative")


@dataclass(frozen=True)
class WeightedPlay:
    position: int
    play: PlayResult

    weight: float

    @property
    def weighted_pp(self) -> float:
        return self.play.local_pp * self.weight


@dataclass(frozen=True)
class PlayerTotal:
    username: str

    local_pp: float
    live_pp: float
    bonus_pp: float

    @property
    def difference(self) -> float:
        return self.local_pp - self.live_pp


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    rank_delta: int

    player: PlayerTotal

    @property
    def username(self) -> str:
        return self.player.username

    @property
    def difference(self) -> float:
        return self.player.difference

    @property
    def basic_info(self) -> dict:
        return {
            "rank": self.rank,
            "rank_delta": self.rank_delta,
            "username": self.player.username,
            "live_pp": self.player.live_pp,
            "local_pp": self.player.local_pp,
            "bonus_pp": self.player.bonus_pp,
            "difference": self.difference,
        }
