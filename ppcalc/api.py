from __future__ import annotations

from typing import Any
from typing import Literal

from fastapi import APIRouter
from fastapi import Query
from fastapi.responses import PlainTextResponse
from fastapi.responses import Response

import ppcalc.config
import ppcalc.usecases
import ppcalc.utils
import log
from ppcalc.constants.mode import Mode
from ppcalc.constants.mods import Mods
from ppcalc.errors import InvalidParameter
from ppcalc.models import LeaderboardRequest
from ppcalc.models import ProfileRequest
from ppcalc.models import SimulateRequest
from ppcalc.objects import accuracy
from ppcalc.objects.beatmap import Beatmap
from ppcalc.objects.beatmap import HitObject
from ppcalc.objects.stats import PlayerTotal
from ppcalc.objects.stats import PlayResult
from ppcalc.objects.statistics import SimulationTarget

router = APIRouter(tags=["ppcalc API"])


@router.get("/")
async def index() -> dict[str, str]:
    return {"status": "ok", "version": ppcalc.config.VERSION}


@router.post("/simulate/{mode}")
async def simulate_statistics(mode: str, request: SimulateRequest) -> dict[str, Any]:
    ruleset = Mode.parse(mode)
    mods = Mods.from_str(request.mods, ruleset)

    target = SimulationTarget(
        accuracy=request.accuracy,
        misses=request.misses,
        combo=request.combo,
        combo_percent=request.combo_percent,
        greats=request.greats,
        goods=request.goods,
        oks=request.oks,
        mehs=request.mehs,
    )

    beatmap = None
    if request.hit_objects is not None:
        beatmap = Beatmap(
            [HitObject(obj.kind, tuple(obj.nested)) for obj in request.hit_objects],
            id=request.beatmap_id,
        )

    if request.beatmap_id is not None:
        if beatmap is None:
            raise InvalidParameter(
                "hit_objects",
                "the beatmap's hit objects are required to calculate pp",
            )

        calculator = ppcalc.usecases.performance.RosuCalculator.from_beatmap_id(
            request.beatmap_id,
            ruleset,
        )
        result = ppcalc.usecases.performance.simulate(
            beatmap,
            ruleset,
            target,
            calculator,
            mods,
            request.strict,
        )

        return {"status": "ok", **result.basic_info}

    response: dict[str, Any] = {
        "status": "ok",
        "mode": ruleset.short_name,
        "mods": repr(mods),
    }

    if beatmap is not None:
        statistics = ppcalc.usecases.synthesis.synthesize_beatmap(
            beatmap,
            ruleset,
            target,
            request.strict,
        )

        max_combo = ppcalc.usecases.combo.max_combo(beatmap, ruleset)
        combo = ppcalc.usecases.combo.resolve_combo(target, max_combo)

        response["combo"] = combo
        response["max_combo"] = max_combo
        response["combo_percent"] = ppcalc.usecases.combo.combo_percentage(
            combo,
            max_combo,
        )
    elif request.total_objects is not None:
        statistics = ppcalc.usecases.synthesis.synthesize(
            ruleset,
            request.total_objects,
            target,
            request.strict,
        )
    else:
        raise InvalidParameter("total_objects", "either total_objects or hit_objects is required")

    response["statistics"] = statistics.as_dict()
    response["accuracy"] = round(accuracy.for_mode(ruleset).accuracy(statistics) * 100, 2)

    return response


def _player_total(
    request: ProfileRequest,
    inactive_without_bonus: bool = False,
) -> tuple[PlayerTotal, list[PlayResult]]:
    if len(request.plays) > ppcalc.config.TOP_PLAY_LIMIT:
        raise InvalidParameter(
            "plays",
            f"{request.username} has more than {ppcalc.config.TOP_PLAY_LIMIT} plays",
        )

    plays = [PlayResult(**play.model_dump()) for play in request.plays]
    total = ppcalc.usecases.stats.aggregate(
        request.username,
        plays,
        request.live_pp,
        include_bonus=request.bonus,
        inactive_without_bonus=inactive_without_bonus,
    )

    return total, plays


@router.post("/profile")
async def profile(request: ProfileRequest) -> dict[str, Any]:
    total, plays = _player_total(request, inactive_without_bonus=True)

    return {
        "status": "ok",
        "username": total.username,
        "local_pp": total.local_pp,
        "live_pp": total.live_pp,
        "bonus_pp": total.bonus_pp,
        "plays": [
            {
                "position": weighted.position,
                "beatmap_id": weighted.play.beatmap_id,
                "mods": weighted.play.mods,
                "local_pp": weighted.play.local_pp,
                "live_pp": weighted.play.live_pp,
                "weight": weighted.weight,
            }
            for weighted in ppcalc.usecases.stats.weighted_plays(plays)
        ],
    }


@router.post("/leaderboard")
async def leaderboard(
    request: LeaderboardRequest,
    output: Literal["json", "table"] = Query("json", alias="format"),
) -> Response:
    if len(request.players) > ppcalc.config.LEADERBOARD_LIMIT:
        raise InvalidParameter(
            "players",
            f"at most {ppcalc.config.LEADERBOARD_LIMIT} players can be ranked at once",
        )

    seen: set[str] = set()
    totals = []
    for player in request.players:
        safe_name = ppcalc.utils.make_safe_name(player.username)
        if safe_name in seen:
            raise InvalidParameter("players", f"{player.username} is listed twice")

        seen.add(safe_name)

        log.debug(f"Calculating {player.username} top plays...")
        total, _ = _player_total(player)
        totals.append(total)

    entries = ppcalc.usecases.leaderboard.rank(totals)

    if output == "table":
        return PlainTextResponse(ppcalc.usecases.leaderboard.to_table(entries))

    return Response(
        content=ppcalc.usecases.leaderboard.to_json(entries),
        media_type="application/json",
    )
