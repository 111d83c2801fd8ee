from __future__ import annotations

from typing import Iterable

import orjson

import log
from ppcalc.objects.stats import LeaderboardEntry
from ppcalc.objects.stats import PlayerTotal

TABLE_HEADERS = ("#", "username", "live pp", "local pp", "pp change")


def rank(players: Iterable[PlayerTotal]) -> list[LeaderboardEntry]:
    players = list(players)

    # usernames settle exact ties so the order doesn't depend on the input
    local_order = sorted(
        range(len(players)),
        key=lambda idx: (-players[idx].local_pp, players[idx].username),
    )
    live_order = sorted(
        range(len(players)),
        key=lambda idx: (-players[idx].live_pp, players[idx].username),
    )

    live_positions = {player_idx: pos for pos, player_idx in enumerate(live_order)}

    log.info(f"Ranked {len(players)} players.")

    return [
        LeaderboardEntry(
            rank=pos + 1,
            rank_delta=live_positions[player_idx] - pos,
            player=players[player_idx],
        )
        for pos, player_idx in enumerate(local_order)
    ]


def format_delta(rank_delta: int) -> str:
    if rank_delta == 0:
        return "-"

    return f"{rank_delta:+d}"


def to_table(entries: Iterable[LeaderboardEntry]) -> str:
    rows = [TABLE_HEADERS]
    for entry in entries:
        rows.append(
            (
                format_delta(entry.rank_delta),
                entry.username,
                f"{entry.player.live_pp:.1f}",
                f"{entry.player.local_pp:.1f}",
                f"{entry.difference:.1f}",
            ),
        )

    widths = [max(len(row[col]) for row in rows) for col in range(len(TABLE_HEADERS))]

    lines = []
    for row in rows:
        cells = [row[0].ljust(widths[0]), row[1].ljust(widths[1])]
        cells += [cell.rjust(width) for cell, width in zip(row[2:], widths[2:])]
        lines.append("  ".join(cells).rstrip())

    return "\n".join(lines)


def to_json(entries: Iterable[LeaderboardEntry]) -> bytes:
    return orjson.dumps([entry.basic_info for entry in entries])
