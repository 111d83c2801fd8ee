from __future__ import annotations

from enum import IntFlag
from typing import Iterable

from ppcalc.constants.mode import Mode
from ppcalc.errors import InvalidParameter


class Mods(IntFlag):
    NOMOD = 0
    NOFAIL = 1 << 0
    EASY = 1 << 1
    TOUCHSCREEN = 1 << 2
    HIDDEN = 1 << 3
    HARDROCK = 1 << 4
    SUDDENDEATH = 1 << 5
    DOUBLETIME = 1 << 6
    RELAX = 1 << 7
    HALFTIME = 1 << 8
    NIGHTCORE = 1 << 9
    FLASHLIGHT = 1 << 10
    AUTOPLAY = 1 << 11
    SPUNOUT = 1 << 12
    AUTOPILOT = 1 << 13
    PERFECT = 1 << 14
    KEY4 = 1 << 15
    KEY5 = 1 << 16
    KEY6 = 1 << 17
    KEY7 = 1 << 18
    KEY8 = 1 << 19
    FADEIN = 1 << 20
    RANDOM = 1 << 21
    CINEMA = 1 << 22
    TARGET = 1 << 23
    KEY9 = 1 << 24
    KEYCOOP = 1 << 25
    KEY1 = 1 << 26
    KEY3 = 1 << 27
    KEY2 = 1 << 28
    SCOREV2 = 1 << 29
    MIRROR = 1 << 30

    def __repr__(self) -> str:
        if self.value == Mods.NOMOD:
            return "NM"

        mods = self
        # nightcore and perfect always carry their base mod
        if mods & Mods.NIGHTCORE:
            mods &= ~Mods.DOUBLETIME
        if mods & Mods.PERFECT:
            mods &= ~Mods.SUDDENDEATH

        return "".join(
            acronym for mod, acronym in MOD_ACRONYMS.items() if mods & mod
        )

    @property
    def acronyms(self) -> list[str]:
        if self.value == Mods.NOMOD:
            return []

        mod_str = repr(self)
        return [mod_str[i : i + 2] for i in range(0, len(mod_str), 2)]

    @classmethod
    def from_acronyms(cls, acronyms: Iterable[str], mode: Mode = Mode.STD) -> Mods:
        mods = cls.NOMOD

        for acronym in acronyms:
            acronym = acronym.strip().upper()
            if not acronym or acronym == "NM":
                continue

            if not (mod := ACRONYM_MODS.get(acronym)):
                raise InvalidParameter("mods", f"unknown mod {acronym}")

            if mode not in MOD_MODES.get(mod, ALL_MODES):
                raise InvalidParameter(
                    "mods",
                    f"{acronym} is not available in {mode.short_name}",
                )

            mods |= mod

        if mods & cls.NIGHTCORE:
            mods |= cls.DOUBLETIME
        if mods & cls.PERFECT:
            mods |= cls.SUDDENDEATH

        return mods

    @classmethod
    def from_str(cls, mod_str: str, mode: Mode = Mode.STD) -> Mods:
        mod_str = mod_str.strip().lstrip("+")
        if len(mod_str) % 2 != 0:
            raise InvalidParameter("mods", f"malformed mod string {mod_str!r}")

        return cls.from_acronyms(
            (mod_str[i : i + 2] for i in range(0, len(mod_str), 2)),
            mode,
        )


MOD_ACRONYMS = {
    Mods.NOFAIL: "NF",
    Mods.EASY: "EZ",
    Mods.TOUCHSCREEN: "TD",
    Mods.HIDDEN: "HD",
    Mods.HARDROCK: "HR",
    Mods.SUDDENDEATH: "SD",
    Mods.DOUBLETIME: "DT",
    Mods.RELAX: "RX",
    Mods.HALFTIME: "HT",
    Mods.NIGHTCORE: "NC",
    Mods.FLASHLIGHT: "FL",
    Mods.AUTOPLAY: "AT",
    Mods.SPUNOUT: "SO",
    Mods.AUTOPILOT: "AP",
    Mods.PERFECT: "PF",
    Mods.KEY4: "4K",
    Mods.KEY5: "5K",
    Mods.KEY6: "6K",
    Mods.KEY7: "7K",
    Mods.KEY8: "8K",
    Mods.FADEIN: "FI",
    Mods.RANDOM: "RD",
    Mods.CINEMA: "CN",
    Mods.TARGET: "TP",
    Mods.KEY9: "9K",
    Mods.KEYCOOP: "CO",
    Mods.KEY1: "1K",
    Mods.KEY3: "3K",
    Mods.KEY2: "2K",
    Mods.SCOREV2: "V2",
    Mods.MIRROR: "MR",
}

ACRONYM_MODS = {acronym: mod for mod, acronym in MOD_ACRONYMS.items()}

ALL_MODES = frozenset(Mode)

MOD_MODES = {
    Mods.TOUCHSCREEN: frozenset({Mode.STD}),
    Mods.SPUNOUT: frozenset({Mode.STD}),
    Mods.AUTOPILOT: frozenset({Mode.STD}),
    Mods.TARGET: frozenset({Mode.STD}),
    Mods.RELAX: frozenset({Mode.STD, Mode.TAIKO, Mode.CATCH}),
    **{
        mod: frozenset({Mode.MANIA})
        for mod in (
            Mods.KEY1,
            Mods.KEY2,
            Mods.KEY3,
            Mods.KEY4,
            Mods.KEY5,
            Mods.KEY6,
            Mods.KEY7,
            Mods.KEY8,
            Mods.KEY9,
            Mods.KEYCOOP,
            Mods.FADEIN,
            Mods.RANDOM,
            Mods.MIRROR,
        )
    },
}
