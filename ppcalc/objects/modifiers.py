from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from typing import Protocol
from typing import TypeVar

from ppcalc.constants.mods import Mods

T = TypeVar("T")


@dataclass(frozen=True)
class ClassicSettings:
    """Settings of the lazer Classic mod which affect performance."""

    no_slider_head_accuracy: bool = True

    @classmethod
    def from_json(cls, settings: Mapping[str, Any]) -> ClassicSettings:
        return cls(
            no_slider_head_accuracy=bool(
                settings.get("no_slider_head_accuracy", True),
            ),
        )


# acronym -> settings type parsed from lazer's `settings` object
MOD_SETTINGS: dict[str, type[ClassicSettings]] = {
    "CL": ClassicSettings,
}


class ModifierContext(Protocol):
    def is_active(self, mod: Mods) -> bool: ...

    def get_config(self, settings_type: type[T]) -> T | None: ...


@dataclass(frozen=True)
class ModSet:
    """An immutable set of active mods, plus their typed settings."""

    mods: Mods = Mods.NOMOD
    # (settings type, settings) pairs; settings are frozen dataclasses
    configs: tuple[tuple[type, Any], ...] = ()

    def is_active(self, mod: Mods) -> bool:
        return bool(self.mods & mod)

    def get_config(self, settings_type: type[T]) -> T | None:
        for config_type, config in self.configs:
            if config_type is settings_type:
                return config

        return None

    @classmethod
    def from_modstr(cls, s: str) -> ModSet:
        return cls(mods=Mods.from_modstr(s))

    @classmethod
    def from_acronyms(
        cls,
        mods: Iterable[str | Mapping[str, Any]],
        lazer: bool = True,
    ) -> ModSet:
        """\
        Build a mod set from a lazer-style mod list.

        Entries may be plain acronyms (`"HD"`) or objects
        (`{"acronym": "CL", "settings": {...}}`).
        """
        flags = Mods.LAZER if lazer else Mods.NOMOD
        configs: dict[type, Any] = {}

        for mod in mods:
            if isinstance(mod, str):
                acronym, settings = mod, {}
            else:
                acronym, settings = mod["acronym"], mod.get("settings") or {}

            flags |= Mods.from_acronym(acronym)

            settings_type = MOD_SETTINGS.get(acronym.upper())
            if settings_type is not None:
                configs[settings_type] = settings_type.from_json(settings)

        return cls(
            mods=flags.filter_invalid_combos(),
            configs=tuple(configs.items()),
        )
