from __future__ import annotations

from typing import Callable
from typing import Optional

import ppcalc.config
import log
from ppcalc.constants.hit_result import HitResult
from ppcalc.constants.mode import Mode
from ppcalc.errors import InfeasibleDistribution
from ppcalc.errors import InvalidParameter
from ppcalc.objects import accuracy
from ppcalc.objects.beatmap import Beatmap
from ppcalc.objects.beatmap import CatchObjectCounts
from ppcalc.objects.statistics import HitStatistics
from ppcalc.objects.statistics import SimulationTarget
from ppcalc.usecases import combo


def _truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    # rounds towards zero, the remainder keeps the dividend's sign
    quotient = abs(dividend) // divisor
    if dividend < 0:
        quotient = -quotient

    return quotient, dividend - quotient * divisor


def _precision(total: int, target: SimulationTarget) -> dict[HitResult, int]:
    misses = target.misses

    if target.goods is not None or target.mehs is not None:
        goods = target.goods or 0
        mehs = target.mehs or 0
        greats = total - goods - mehs - misses
    elif misses == total:
        greats = goods = mehs = 0
    else:
        # great=6, good=2, meh=1, miss=0
        target_total = round(target.accuracy * total * 6)

        # start with every non miss as a meh, greats and goods make up the rest
        delta = target_total - (total - misses)

        # great - meh = 5, good - meh = 1
        greats, goods = _truncated_divmod(delta, 5)

        # negative if the miss count can't reach the accuracy
        mehs = total - greats - goods - misses

    return {
        HitResult.GREAT: greats,
        HitResult.GOOD: goods,
        HitResult.MEH: mehs,
        HitResult.MISS: misses,
    }


def _timing(total: int, target: SimulationTarget) -> dict[HitResult, int]:
    misses = target.misses

    if target.goods is not None:
        goods = target.goods
        greats = total - goods - misses
    elif misses == total:
        greats = goods = 0
    else:
        # great=2, good=1, miss=0
        target_total = round(target.accuracy * total * 2)

        greats = target_total - (total - misses)
        goods = total - greats - misses

    return {
        HitResult.GREAT: greats,
        HitResult.GOOD: goods,
        HitResult.MISS: misses,
    }


def _key(total: int, target: SimulationTarget) -> dict[HitResult, int]:
    misses = target.misses
    counts = accuracy.KEY.empty()
    counts[HitResult.MISS] = misses

    if not target.has_explicit_counts:
        # only the amount of hits matters to mania performance for now
        counts[HitResult.PERFECT] = total - misses
        return counts

    oks = target.oks or 0
    goods = target.goods or 0

    mehs = target.mehs
    if mehs is None:
        # miss + 5/6 meh + 2/3 ok + 1/3 good = total - acc * total
        mehs = round(
            1.2 * (total - total * target.accuracy)
            - 1.2 * misses
            - 0.8 * oks
            - 0.4 * goods,
        )

    remaining = total - misses
    for result, count in (
        (HitResult.MEH, mehs),
        (HitResult.OK, oks),
        (HitResult.GOOD, goods),
        (HitResult.GREAT, target.greats or 0),
    ):
        counts[result] = min(max(count, 0), remaining)
        remaining -= counts[result]

    counts[HitResult.PERFECT] = remaining
    return counts


SYNTHESIZERS: dict[Mode, Callable[[int, SimulationTarget], dict[HitResult, int]]] = {
    Mode.STD: _precision,
    Mode.TAIKO: _timing,
    Mode.MANIA: _key,
}


def _finish(
    counts: dict[HitResult, int],
    mode: Mode,
    strict: Optional[bool],
) -> HitStatistics:
    statistics = HitStatistics(counts)

    if not statistics.feasible:
        if strict is None:
            strict = ppcalc.config.STRICT_SYNTHESIS

        if strict:
            raise InfeasibleDistribution(statistics)

        log.warning(f"Synthesized an infeasible {mode.short_name} play: {statistics!r}")

    return statistics


def synthesize(
    mode: Mode,
    total_objects: int,
    target: SimulationTarget,
    strict: Optional[bool] = None,
) -> HitStatistics:
    if total_objects < 0:
        raise InvalidParameter("total_objects", "can't be negative")

    if mode is Mode.CATCH:
        raise InvalidParameter(
            "ruleset",
            "fruits plays need the beatmap's droplet counts",
        )

    target.validate(total_objects)

    if total_objects == 0:
        counts = accuracy.for_mode(mode).empty()
    else:
        counts = SYNTHESIZERS[mode](total_objects, target)

    return _finish(counts, mode, strict)


def synthesize_catch(
    objects: CatchObjectCounts,
    target: SimulationTarget,
    strict: Optional[bool] = None,
) -> HitStatistics:
    # goods and mehs stand for droplets and tiny droplets here
    target.validate(objects.max_combo)
    misses = target.misses

    if target.goods is not None:
        droplets = target.goods
    else:
        droplets = max(0, objects.droplets - misses)

    # whatever misses the droplets didn't take, negative on impossible misses
    fruits = objects.fruits - (misses - (objects.droplets - droplets))

    if target.mehs is not None:
        tiny_droplets = target.mehs
    else:
        tiny_droplets = (
            round(target.accuracy * (objects.max_combo + objects.tiny_droplets))
            - fruits
            - droplets
        )

    counts = {
        HitResult.GREAT: fruits,
        HitResult.LARGE_TICK_HIT: droplets,
        HitResult.SMALL_TICK_HIT: tiny_droplets,
        HitResult.SMALL_TICK_MISS: objects.tiny_droplets - tiny_droplets,
        HitResult.MISS: misses,
    }
    return _finish(counts, Mode.CATCH, strict)


def synthesize_beatmap(
    beatmap: Beatmap,
    mode: Mode,
    target: SimulationTarget,
    strict: Optional[bool] = None,
) -> HitStatistics:
    if mode is Mode.CATCH:
        combo.check_mode(beatmap, mode)
        return synthesize_catch(combo.catch_object_counts(beatmap), target, strict)

    return synthesize(mode, combo.countable_objects(beatmap, mode), target, strict)
