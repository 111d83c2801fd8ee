from __future__ import annotations

from enum import IntEnum
from typing import Union

from ppcalc.errors import InvalidParameter

MODE_NAMES = {
    "osu": 0,
    "std": 0,
    "taiko": 1,
    "fruits": 2,
    "catch": 2,
    "mania": 3,
}


class Mode(IntEnum):
    STD = 0
    TAIKO = 1
    CATCH = 2
    MANIA = 3

    def __repr__(self) -> str:
        return self.short_name

    @property
    def short_name(self) -> str:
        return ("osu", "taiko", "fruits", "mania")[self.value]

    @classmethod
    def parse(cls, value: Union[int, str]) -> Mode:
        if isinstance(value, str):
            value = value.strip().lower()

            if value.isdigit():
                value = int(value)
            elif value in MODE_NAMES:
                value = MODE_NAMES[value]

        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass

        raise InvalidParameter("ruleset", f"unknown ruleset {value!r}")
