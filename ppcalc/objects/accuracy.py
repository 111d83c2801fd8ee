from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ppcalc.constants.hit_result import HitResult
from ppcalc.constants.mode import Mode


@dataclass(frozen=True)
class AccuracyModel:
    """Point weights of a ruleset's hit results.

    Accuracy is the weighted sum of the counts divided by the weight every
    object would have scored had it been hit with the best tier.
    """

    mode: Mode
    weights: tuple[tuple[HitResult, int], ...]  # best tier first

    @property
    def tiers(self) -> list[HitResult]:
        return [result for result, _ in self.weights]

    @property
    def top_tier(self) -> HitResult:
        return self.weights[0][0]

    @property
    def max_weight(self) -> int:
        return max(weight for _, weight in self.weights)

    def weight(self, result: HitResult) -> int:
        for tier, weight in self.weights:
            if tier is result:
                return weight

        raise KeyError(result)

    def empty(self) -> dict[HitResult, int]:
        return {result: 0 for result in self.tiers}

    def weighted_sum(self, counts: Mapping[HitResult, int]) -> int:
        return sum(counts.get(result, 0) * weight for result, weight in self.weights)

    def accuracy(self, counts: Mapping[HitResult, int]) -> float:
        total = sum(counts.get(result, 0) for result in self.tiers)
        if total == 0:
            return 1.0

        return self.weighted_sum(counts) / (total * self.max_weight)


PRECISION = AccuracyModel(
    Mode.STD,
    (
        (HitResult.GREAT, 6),
        (HitResult.GOOD, 2),
        (HitResult.MEH, 1),
        (HitResult.MISS, 0),
    ),
)

TIMING = AccuracyModel(
    Mode.TAIKO,
    (
        (HitResult.GREAT, 2),
        (HitResult.GOOD, 1),
        (HitResult.MISS, 0),
    ),
)

# fruits, droplets and tiny droplets all count the same
CATCH = AccuracyModel(
    Mode.CATCH,
    (
        (HitResult.GREAT, 1),
        (HitResult.LARGE_TICK_HIT, 1),
        (HitResult.SMALL_TICK_HIT, 1),
        (HitResult.SMALL_TICK_MISS, 0),
        (HitResult.MISS, 0),
    ),
)

# (meh/6 + ok/3 + good/1.5 + great + perfect) / total, scaled by 6
KEY = AccuracyModel(
    Mode.MANIA,
    (
        (HitResult.PERFECT, 6),
        (HitResult.GREAT, 6),
        (HitResult.GOOD, 4),
        (HitResult.OK, 2),
        (HitResult.MEH, 1),
        (HitResult.MISS, 0),
    ),
)

MODELS = {
    Mode.STD: PRECISION,
    Mode.TAIKO: TIMING,
    Mode.CATCH: CATCH,
    Mode.MANIA: KEY,
}


def for_mode(mode: Mode) -> AccuracyModel:
    return MODELS[mode]
