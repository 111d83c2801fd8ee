from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import Field

from ppcalc.objects.beatmap import HitObjectKind


class HitObjectModel(BaseModel):
    kind: HitObjectKind
    nested: list[HitObjectKind] = []


class SimulateRequest(BaseModel):
    total_objects: Optional[int] = None
    hit_objects: Optional[list[HitObjectModel]] = None

    beatmap_id: Optional[int] = None
    mods: str = ""

    accuracy: float = 1.0
    misses: int = 0

    combo: Optional[int] = None
    combo_percent: Optional[float] = None

    greats: Optional[int] = None
    goods: Optional[int] = None
    oks: Optional[int] = None
    mehs: Optional[int] = None

    strict: Optional[bool] = None


class PlayModel(BaseModel):
    local_pp: float = Field(ge=0)
    live_pp: float = Field(ge=0)

    beatmap_id: Optional[int] = None
    mods: str = ""


class ProfileRequest(BaseModel):
    username: str
    live_pp: float
    plays: list[PlayModel]

    bonus: bool = True


class LeaderboardRequest(BaseModel):
    players: list[ProfileRequest]
