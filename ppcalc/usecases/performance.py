from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Optional
from typing import Protocol

import rosu_pp_py as rosu

import ppcalc.config
import log
from ppcalc.constants.hit_result import HitResult
from ppcalc.constants.mode import Mode
from ppcalc.constants.mods import Mods
from ppcalc.errors import MissingExternalData
from ppcalc.objects import accuracy
from ppcalc.objects.beatmap import Beatmap
from ppcalc.objects.statistics import HitStatistics
from ppcalc.objects.statistics import SimulationTarget
from ppcalc.usecases import combo
from ppcalc.usecases import synthesis


class PerformanceCalculator(Protocol):
    def calculate(
        self,
        statistics: HitStatistics,
        mods: Mods,
        combo: int,
    ) -> tuple[float, dict[str, float]]:
        ...


@dataclass
class SimulationResult:
    mode: Mode
    mods: Mods

    statistics: HitStatistics
    accuracy: float

    combo: int
    max_combo: int
    combo_percent: Optional[float]

    pp: float
    attributes: dict[str, float]

    @property
    def basic_info(self) -> dict[str, Any]:
        return {
            "mode": self.mode.short_name,
            "mods": repr(self.mods),
            "statistics": self.statistics.as_dict(),
            "accuracy": round(self.accuracy * 100, 2),
            "combo": self.combo,
            "max_combo": self.max_combo,
            "combo_percent": self.combo_percent,
            "pp": round(self.pp, 2),
            "attributes": self.attributes,
        }


def simulate(
    beatmap: Beatmap,
    mode: Mode,
    target: SimulationTarget,
    calculator: PerformanceCalculator,
    mods: Mods = Mods.NOMOD,
    strict: Optional[bool] = None,
) -> SimulationResult:
    statistics = synthesis.synthesize_beatmap(beatmap, mode, target, strict)

    beatmap_max_combo = combo.max_combo(beatmap, mode)
    play_combo = combo.resolve_combo(target, beatmap_max_combo)

    pp, attributes = calculator.calculate(statistics, mods, play_combo)
    log.debug(f"Simulated {beatmap!r} +{mods!r} ({mode!r}): {pp:.2f}pp")

    return SimulationResult(
        mode=mode,
        mods=mods,
        statistics=statistics,
        accuracy=accuracy.for_mode(mode).accuracy(statistics),
        combo=play_combo,
        max_combo=beatmap_max_combo,
        combo_percent=combo.combo_percentage(play_combo, beatmap_max_combo),
        pp=pp,
        attributes=attributes,
    )


GAME_MODES = {
    Mode.STD: rosu.GameMode.Osu,
    Mode.TAIKO: rosu.GameMode.Taiko,
    Mode.CATCH: rosu.GameMode.Catch,
    Mode.MANIA: rosu.GameMode.Mania,
}

# which rosu-pp hit count each of our results is passed as
ROSU_COUNTS = {
    Mode.STD: {
        HitResult.GREAT: "n300",
        HitResult.GOOD: "n100",
        HitResult.MEH: "n50",
        HitResult.MISS: "misses",
    },
    Mode.TAIKO: {
        HitResult.GREAT: "n300",
        HitResult.GOOD: "n100",
        HitResult.MISS: "misses",
    },
    Mode.CATCH: {
        HitResult.GREAT: "n300",
        HitResult.LARGE_TICK_HIT: "n100",
        HitResult.SMALL_TICK_HIT: "n50",
        HitResult.SMALL_TICK_MISS: "n_katu",
        HitResult.MISS: "misses",
    },
    Mode.MANIA: {
        HitResult.PERFECT: "n_geki",
        HitResult.GREAT: "n300",
        HitResult.GOOD: "n_katu",
        HitResult.OK: "n100",
        HitResult.MEH: "n50",
        HitResult.MISS: "misses",
    },
}

SUB_ATTRIBUTES = (
    "pp_aim",
    "pp_speed",
    "pp_accuracy",
    "pp_flashlight",
    "pp_difficulty",
    "effective_miss_count",
)


def performance_kwargs(
    mode: Mode,
    statistics: HitStatistics,
    mods: Mods,
    max_combo: int,
) -> dict[str, int]:
    kwargs = {"mods": int(mods)}

    # rosu-pp has no notion of a combo in mania
    if mode is not Mode.MANIA:
        kwargs["combo"] = max_combo

    for result, name in ROSU_COUNTS[mode].items():
        kwargs[name] = statistics.get(result, 0)

    return kwargs


class RosuCalculator:
    def __init__(self, osu_file_path: Path, mode: Mode) -> None:
        if not osu_file_path.exists():
            raise MissingExternalData(f"Beatmap file {osu_file_path} doesn't exist")

        self.mode = mode
        self.beatmap = rosu.Beatmap(path=str(osu_file_path))

        if self.beatmap.mode != GAME_MODES[mode]:
            self.beatmap.convert(GAME_MODES[mode])

    @classmethod
    def from_beatmap_id(cls, beatmap_id: int, mode: Mode) -> RosuCalculator:
        return cls(ppcalc.config.BEATMAPS_PATH / f"{beatmap_id}.osu", mode)

    def calculate(
        self,
        statistics: HitStatistics,
        mods: Mods,
        combo: int,
    ) -> tuple[float, dict[str, float]]:
        performance = rosu.Performance(
            **performance_kwargs(self.mode, statistics, mods, combo),
        )
        result = performance.calculate(self.beatmap)

        attributes = {
            name: getattr(result, name)
            for name in SUB_ATTRIBUTES
            if getattr(result, name, None) is not None
        }
        attributes["stars"] = result.difficulty.stars

        return result.pp, attributes
