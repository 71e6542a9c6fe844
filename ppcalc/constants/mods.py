from __future__ import annotations

from enum import IntFlag
from enum import unique


@unique
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
    NIGHTCORE = 1 << 9  # always used with DT
    FLASHLIGHT = 1 << 10
    AUTOPLAY = 1 << 11
    SPUNOUT = 1 << 12
    AUTOPILOT = 1 << 13
    PERFECT = 1 << 14  # always used with SD
    FADEIN = 1 << 20
    SCOREV2 = 1 << 29
    MIRROR = 1 << 30

    # lazer-only, never sent by stable clients
    CLASSIC = 1 << 31
    LAZER = 1 << 32

    def __repr__(self) -> str:
        if self.value == Mods.NOMOD:
            return "NM"

        mod_str = ""
        for mod, acronym in MOD_ACRONYMS.items():
            if self.value & mod:
                mod_str += acronym

        return mod_str

    def filter_invalid_combos(self) -> Mods:
        """Add the implied mods of NC and PF."""
        mods = self

        if mods & Mods.NIGHTCORE:
            mods |= Mods.DOUBLETIME

        if mods & Mods.PERFECT:
            mods |= Mods.SUDDENDEATH

        return mods

    @classmethod
    def from_acronym(cls, acronym: str) -> Mods:
        try:
            return ACRONYM_MODS[acronym.upper()]
        except KeyError:
            raise ValueError(f"Unknown mod acronym: {acronym!r}") from None

    @classmethod
    def from_modstr(cls, s: str) -> Mods:
        # from fmt: `HDDTRX`
        if len(s) % 2 != 0:
            raise ValueError(f"Invalid mod string: {s!r}")

        mods = cls.NOMOD

        for idx in range(0, len(s), 2):
            mods |= cls.from_acronym(s[idx : idx + 2])

        return mods.filter_invalid_combos()


MOD_ACRONYMS: dict[Mods, str] = {
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
    Mods.FADEIN: "FI",
    Mods.SCOREV2: "V2",
    Mods.MIRROR: "MR",
    Mods.CLASSIC: "CL",
    Mods.LAZER: "LZ",
}

ACRONYM_MODS: dict[str, Mods] = {acronym: mod for mod, acronym in MOD_ACRONYMS.items()}
