from __future__ import annotations

from typing import Iterable
from typing import Sequence

import log
from ppcalc.objects.stats import PlayerTotal
from ppcalc.objects.stats import PlayResult
from ppcalc.objects.stats import WeightedPlay

WEIGHT_DECAY = 0.95


def weighted_total(values: Iterable[float]) -> float:
    return sum(
        WEIGHT_DECAY**index * value
        for index, value in enumerate(sorted(values, reverse=True))
    )


def weighted_plays(plays: Sequence[PlayResult]) -> list[WeightedPlay]:
    ordered = sorted(plays, key=lambda play: play.local_pp, reverse=True)

    return [
        WeightedPlay(position=index + 1, play=play, weight=WEIGHT_DECAY**index)
        for index, play in enumerate(ordered)
    ]


def aggregate(
    username: str,
    plays: Sequence[PlayResult],
    reported_live_pp: float,
    include_bonus: bool = True,
    inactive_without_bonus: bool = False,
) -> PlayerTotal:
    # local and live rankings of the same plays can differ, so they're sorted apart
    local_pp = weighted_total(play.local_pp for play in plays)
    non_bonus_live_pp = weighted_total(play.live_pp for play in plays)

    if reported_live_pp == 0:
        log.warning(f"{username} has no live pp, they're likely inactive.")

    if reported_live_pp == 0 and inactive_without_bonus:
        # inactive players keep the weighted sum of their plays as live total
        reported_live_pp = non_bonus_live_pp
        bonus_pp = 0.0
    else:
        # TODO: this only approximates bonus pp, the playcount based formula would need score counts we don't get
        bonus_pp = reported_live_pp - non_bonus_live_pp

    if include_bonus:
        local_pp += bonus_pp

    log.debug(
        f"Aggregated {len(plays)} plays for {username}: "
        f"{local_pp:.2f}pp local, {reported_live_pp:.2f}pp live, {bonus_pp:.2f}pp bonus",
    )

    return PlayerTotal(
        username=username,
        local_pp=local_pp,
        live_pp=reported_live_pp,
        bonus_pp=bonus_pp,
    )
