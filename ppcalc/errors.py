from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ppcalc.objects.statistics import HitStatistics


class PPCalcError(Exception):
    pass


class InvalidParameter(PPCalcError, ValueError):
    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        self.message = message

        super().__init__(f"Invalid {parameter}: {message}")


class InfeasibleDistribution(PPCalcError):
    def __init__(self, statistics: HitStatistics) -> None:
        self.statistics = statistics

        negative = ", ".join(
            f"{result.value}={count}"
            for result, count in statistics.items()
            if count < 0
        )
        super().__init__(
            f"Requested accuracy and misses can't be reached ({negative})",
        )


class MissingExternalData(PPCalcError):
    pass
