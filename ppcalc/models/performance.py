from __future__ import annotations

from typing import Any

from pydantic import Field

from ppcalc.objects.modifiers import ModSet
from ppcalc.usecases.performance import UNSET
from ppcalc.usecases.performance import DifficultyAttributes
from ppcalc.usecases.performance import PerformanceResult
from ppcalc.usecases.performance import ScoreStatistics

from . import BaseModel

# input models


class DifficultyAttributesModel(BaseModel):
    aim: float = Field(ge=0)
    speed: float = Field(ge=0)
    flashlight: float = Field(default=0.0, ge=0)

    sliders: int = Field(ge=0)
    circles: int = Field(ge=0)
    spinners: int = Field(ge=0)
    object_count: int = Field(ge=0)
    max_combo: int

    approach_rate: float
    overall_difficulty: float

    def to_attributes(self) -> DifficultyAttributes:
        return DifficultyAttributes(**self.model_dump())


class ScoreStatisticsModel(BaseModel):
    # unset great count & combo are derived from the beatmap
    count_great: int | None = Field(default=None, ge=0)
    count_ok: int = Field(default=0, ge=0)
    count_meh: int = Field(default=0, ge=0)
    count_miss: int = Field(default=0, ge=0)
    max_combo: int | None = Field(default=None, ge=0)

    slider_ends: int = Field(default=0, ge=0)
    slider_breaks: int = Field(default=0, ge=0)

    accuracy: float = Field(ge=0, le=1)

    def to_statistics(self) -> ScoreStatistics:
        return ScoreStatistics(
            count_great=UNSET if self.count_great is None else self.count_great,
            count_ok=self.count_ok,
            count_meh=self.count_meh,
            count_miss=self.count_miss,
            max_combo=UNSET if self.max_combo is None else self.max_combo,
            slider_ends=self.slider_ends,
            slider_breaks=self.slider_breaks,
            accuracy=self.accuracy,
        )


class ModModel(BaseModel):
    acronym: str = Field(min_length=2, max_length=2)
    settings: dict[str, Any] = Field(default_factory=dict)


class PlayModel(BaseModel):
    score: ScoreStatisticsModel
    mods: list[ModModel | str] = Field(default_factory=list)

    # lazer scores may carry CL & its settings
    lazer: bool = False

    def to_mod_set(self) -> ModSet:
        return ModSet.from_acronyms(
            (mod if isinstance(mod, str) else mod.model_dump() for mod in self.mods),
            lazer=self.lazer,
        )


class PerformanceRequest(PlayModel):
    difficulty: DifficultyAttributesModel


class BatchPerformanceRequest(BaseModel):
    difficulty: DifficultyAttributesModel
    plays: list[PlayModel]


# output models


class PerformanceRating(BaseModel):
    pp: float
    pp_aim: float
    pp_speed: float
    pp_acc: float
    pp_flashlight: float
    effective_miss_count: float

    @classmethod
    def from_result(cls, result: PerformanceResult) -> PerformanceRating:
        return cls(
            pp=result.total,
            pp_aim=result.aim,
            pp_speed=result.speed,
            pp_acc=result.accuracy,
            pp_flashlight=result.flashlight,
            effective_miss_count=result.effective_miss_count,
        )
