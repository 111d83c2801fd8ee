from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator
from typing import Mapping
from typing import Optional

from ppcalc.constants.hit_result import HitResult
from ppcalc.errors import InvalidParameter


class HitStatistics(Mapping[HitResult, int]):
    """Read-only hit result counts of a single (simulated) play."""

    __slots__ = ("_counts",)

    def __init__(self, counts: Mapping[HitResult, int]) -> None:
        self._counts = {HitResult(result): int(count) for result, count in counts.items()}

    def __getitem__(self, result: HitResult) -> int:
        return self._counts[result]

    def __iter__(self) -> Iterator[HitResult]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        counts = ", ".join(f"{result.value}={count}" for result, count in self.items())
        return f"<HitStatistics {counts}>"

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    @property
    def feasible(self) -> bool:
        return all(count >= 0 for count in self._counts.values())

    def as_dict(self) -> dict[str, int]:
        return {result.value: count for result, count in self._counts.items()}


@dataclass(frozen=True)
class SimulationTarget:
    accuracy: float = 1.0
    misses: int = 0

    combo: Optional[int] = None
    combo_percent: Optional[float] = None  # 0-100

    # explicit tier counts, these override the accuracy target
    greats: Optional[int] = None
    goods: Optional[int] = None
    oks: Optional[int] = None
    mehs: Optional[int] = None

    @property
    def has_explicit_counts(self) -> bool:
        return any(
            count is not None
            for count in (self.greats, self.goods, self.oks, self.mehs)
        )

    def validate(self, total_objects: int) -> None:
        if not 0.0 <= self.accuracy <= 1.0:
            raise InvalidParameter("accuracy", "must be between 0 and 1")

        if self.misses < 0:
            raise InvalidParameter("misses", "can't be negative")

        if self.misses > total_objects:
            raise InvalidParameter(
                "misses",
                f"{self.misses} misses exceed the {total_objects} objects in the beatmap",
            )

        if self.combo is not None and self.combo < 0:
            raise InvalidParameter("combo", "can't be negative")

        if self.combo_percent is not None and not 0.0 <= self.combo_percent <= 100.0:
            raise InvalidParameter("combo_percent", "must be between 0 and 100")

        for name in ("greats", "goods", "oks", "mehs"):
            count = getattr(self, name)
            if count is not None and count < 0:
                raise InvalidParameter(name, "can't be negative")
