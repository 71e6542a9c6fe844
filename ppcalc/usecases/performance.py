from __future__ import annotations

import math
from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import replace

from ppcalc.constants.mods import Mods
from ppcalc.logging import Ansi
from ppcalc.logging import log
from ppcalc.objects.modifiers import ClassicSettings
from ppcalc.objects.modifiers import ModifierContext
from ppcalc.usecases.skills import DifficultyToPerformance
from ppcalc.usecases.skills import default_difficulty_to_performance

VERSION = "pp241007"

PERFORMANCE_BASE_MULTIPLIER = 1.09

# score fields set to this are derived from the difficulty attributes
UNSET = -1


@dataclass(frozen=True)
class DifficultyAttributes:
    aim: float
    speed: float
    flashlight: float

    sliders: int
    circles: int
    spinners: int
    object_count: int
    max_combo: int

    # post-mod, continuous values
    approach_rate: float
    overall_difficulty: float


@dataclass(frozen=True)
class ScoreStatistics:
    count_ok: int
    count_meh: int
    count_miss: int
    accuracy: float  # [0, 1]

    count_great: int = UNSET
    max_combo: int = UNSET

    slider_ends: int = 0
    slider_breaks: int = 0


@dataclass(frozen=True)
class PerformanceResult:
    """Result of a performance calculation."""

    aim: float
    speed: float
    accuracy: float
    flashlight: float
    total: float

    effective_miss_count: float


@dataclass(frozen=True)
class CalculationContext:
    """Normalized inputs and derived counts for a single calculation."""

    attributes: DifficultyAttributes
    score: ScoreStatistics
    mods: ModifierContext

    using_classic_slider_accuracy: bool

    total_hits: int
    total_imperfect_hits: int
    slider_ends_dropped: int
    objects_with_accuracy: int

    effective_miss_count: float = 0.0


FlashlightValue = Callable[[CalculationContext], float]


def uses_classic_slider_accuracy(mods: ModifierContext) -> bool:
    if not mods.is_active(Mods.LAZER):
        return True

    if mods.is_active(Mods.CLASSIC):
        settings = mods.get_config(ClassicSettings)
        if settings is not None:
            return settings.no_slider_head_accuracy

    return False


def normalize(
    attributes: DifficultyAttributes,
    score: ScoreStatistics,
    mods: ModifierContext,
) -> CalculationContext:
    """\
    Fill in unset score fields and derive the counts shared by every skill.

    The returned context has no effective miss count yet; see
    `estimate_effective_miss_count`.
    """
    attributes = replace(attributes, max_combo=max(1, attributes.max_combo))

    if score.max_combo < 0:
        score = replace(score, max_combo=attributes.max_combo)

    if score.count_great < 0:
        score = replace(
            score,
            count_great=(
                attributes.object_count
                - score.count_ok
                - score.count_meh
                - score.count_miss
            ),
        )

    using_classic_slider_accuracy = uses_classic_slider_accuracy(mods)

    objects_with_accuracy = attributes.circles
    if not using_classic_slider_accuracy:
        objects_with_accuracy += attributes.sliders

    return CalculationContext(
        attributes=attributes,
        score=score,
        mods=mods,
        using_classic_slider_accuracy=using_classic_slider_accuracy,
        total_hits=(
            score.count_great + score.count_ok + score.count_meh + score.count_miss
        ),
        total_imperfect_hits=score.count_ok + score.count_meh + score.count_miss,
        slider_ends_dropped=attributes.sliders - score.slider_ends,
        objects_with_accuracy=objects_with_accuracy,
    )


def estimate_effective_miss_count(ctx: CalculationContext) -> float:
    """\
    Estimate the number of combo breaks, counting missed slider ends and
    slider breaks as well as regular misses.
    """
    attributes, score = ctx.attributes, ctx.score
    combo_based_miss_count = 0.0

    if attributes.sliders > 0:
        if ctx.using_classic_slider_accuracy:
            # dropped slider tails don't break combo, but classic scores
            # don't record them; assume 10% of the map's sliders were dropped
            full_combo_threshold = attributes.max_combo - 0.1 * attributes.sliders

            if score.max_combo < full_combo_threshold:
                combo_based_miss_count = full_combo_threshold / max(
                    1.0,
                    score.max_combo,
                )

            combo_based_miss_count = min(
                combo_based_miss_count,
                float(ctx.total_imperfect_hits),
            )
        else:
            full_combo_threshold = attributes.max_combo - ctx.slider_ends_dropped

            if score.max_combo < full_combo_threshold:
                combo_based_miss_count = full_combo_threshold / max(
                    1.0,
                    score.max_combo,
                )

            # slider breaks are combo breaks too
            combo_based_miss_count = min(
                combo_based_miss_count,
                float(score.slider_breaks + score.count_miss),
            )

    return max(float(score.count_miss), combo_based_miss_count)


def calculate_length_bonus(total_hits: int) -> float:
    # longer maps are worth more
    length_bonus = 0.88 + 0.4 * min(1.0, total_hits / 2000.0)

    if total_hits > 2000:
        length_bonus += math.log10(total_hits / 2000.0) * 0.5

    return length_bonus


def calculate_miss_penalty(miss_count: float, total_hits: int) -> float:
    # a flat 3% off for any misses, growing with the share of missed objects
    return 0.97 * (
        1 - _pow(_pow(miss_count / total_hits, 0.5), 1 + miss_count / 1.5)
    )


def calculate_approach_rate_factor(approach_rate: float) -> float:
    if approach_rate > 10.33:
        return 0.3 * (approach_rate - 10.33)
    elif approach_rate < 8.0:
        return 0.025 * (8.0 - approach_rate)

    return 0.0


def _apply_shared_adjustments(value: float, ctx: CalculationContext) -> float:
    """Length, miss, approach rate and HD adjustments common to aim & speed."""
    length_bonus = calculate_length_bonus(ctx.total_hits)
    value *= length_bonus

    if ctx.effective_miss_count > 0 and ctx.total_hits > 0:
        value *= calculate_miss_penalty(ctx.effective_miss_count, ctx.total_hits)

    approach_rate = ctx.attributes.approach_rate
    value *= 1.0 + calculate_approach_rate_factor(approach_rate) * length_bonus

    # more reward for lower AR with HD; nerfs high AR & buffs low AR
    if ctx.mods.is_active(Mods.HIDDEN):
        value *= 1.0 + 0.05 * (11.0 - approach_rate)

    return value


def compute_aim_value(
    ctx: CalculationContext,
    curve: DifficultyToPerformance = default_difficulty_to_performance,
) -> float:
    aim_value = _apply_shared_adjustments(curve(ctx.attributes.aim), ctx)

    if ctx.mods.is_active(Mods.FLASHLIGHT):
        total_hits = ctx.total_hits
        aim_value *= 1.0 + min(0.3 * (total_hits / 200), 1.0)

        if total_hits > 200:
            aim_value += 0.25 * min((total_hits - 200) / 300, 1.0)

        if total_hits > 500:
            aim_value += (total_hits - 500) / 1600

    aim_value *= 0.3 + ctx.score.accuracy / 2
    # accuracy difficulty matters too
    aim_value *= 0.98 + ctx.attributes.overall_difficulty**2 / 2500

    return aim_value


def compute_speed_value(
    ctx: CalculationContext,
    curve: DifficultyToPerformance = default_difficulty_to_performance,
) -> float:
    if ctx.mods.is_active(Mods.RELAX):
        return 0.0

    speed_value = _apply_shared_adjustments(curve(ctx.attributes.speed), ctx)

    overall_difficulty = ctx.attributes.overall_difficulty
    speed_value *= (0.93 + overall_difficulty**2 / 750) * ctx.score.accuracy ** (
        14.5 - max(overall_difficulty, 8) / 2
    )

    meh_threshold = ctx.total_hits / 500
    if ctx.score.count_meh > meh_threshold:
        speed_value *= ctx.score.count_meh - meh_threshold

    return speed_value


def compute_accuracy_value(ctx: CalculationContext) -> float:
    score = ctx.score
    objects_with_accuracy = ctx.objects_with_accuracy

    # only objects judged on hit timing count here
    better_accuracy_percentage = 0.0
    if objects_with_accuracy > 0:
        better_accuracy_percentage = (
            (score.count_great - (ctx.total_hits - objects_with_accuracy)) * 6
            + score.count_ok * 2
            + score.count_meh
        ) / (objects_with_accuracy * 6)

    # can go negative when few objects are judged on timing
    better_accuracy_percentage = max(better_accuracy_percentage, 0.0)

    accuracy_value = (
        1.52163 ** ctx.attributes.overall_difficulty
        * better_accuracy_percentage**24
        * 2.83
    )

    # harder to keep accuracy up over more objects
    accuracy_value *= min(1.15, (objects_with_accuracy / 1000.0) ** 0.3)

    if ctx.mods.is_active(Mods.HIDDEN):
        accuracy_value *= 1.08

    if ctx.mods.is_active(Mods.FLASHLIGHT):
        accuracy_value *= 1.02

    return accuracy_value


def compute_flashlight_value(ctx: CalculationContext) -> float:
    return 0.0


def _round_half_away(value: float, digits: int) -> float:
    scale = 10**digits
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def _pow(base: float, exponent: float) -> float:
    # IEEE semantics rather than ValueError/complex on a negative base
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _non_negative_or_zero(name: str, value: float) -> float:
    if math.isnan(value) or math.isinf(value) or value < 0:
        log(f"Invalid {name} performance value ({value}), using 0.", Ansi.LYELLOW)
        return 0.0

    return value


class PerformanceCalculator:
    """\
    osu!standard performance calculator.

    The difficulty -> performance curve and the flashlight value are
    pluggable; the defaults reproduce the stock formula.
    """

    version = VERSION

    def __init__(
        self,
        curve: DifficultyToPerformance = default_difficulty_to_performance,
        flashlight: FlashlightValue = compute_flashlight_value,
    ) -> None:
        self.curve = curve
        self.flashlight = flashlight

    def calculate(
        self,
        attributes: DifficultyAttributes,
        score: ScoreStatistics,
        mods: ModifierContext,
    ) -> PerformanceResult:
        ctx = normalize(attributes, score, mods)
        ctx = replace(ctx, effective_miss_count=estimate_effective_miss_count(ctx))

        multiplier = PERFORMANCE_BASE_MULTIPLIER

        if mods.is_active(Mods.SPUNOUT) and ctx.total_hits > 0:
            multiplier *= 1.0 - (ctx.attributes.spinners / ctx.total_hits) ** 0.85

        aim_value = compute_aim_value(ctx, self.curve)
        speed_value = compute_speed_value(ctx, self.curve)
        accuracy_value = compute_accuracy_value(ctx)
        flashlight_value = self.flashlight(ctx)

        # streams nerf; speed-dominant maps lose aim on lower accuracy
        acc_depression = 1.0

        if ctx.attributes.speed > 0:
            streams_nerf = _round_half_away(
                ctx.attributes.aim / ctx.attributes.speed,
                2,
            )

            if streams_nerf < 1.09:
                acc_factor = abs(1 - ctx.score.accuracy)
                acc_depression = max(0.86 - acc_factor, 0.5)

                if acc_depression > 0.0:
                    aim_value *= acc_depression

        total = (
            _pow(
                _pow(aim_value, 1.185)
                + _pow(speed_value, 0.83 * acc_depression)
                + _pow(accuracy_value, 1.14),
                1.0 / 1.1,
            )
            * multiplier
        )

        return PerformanceResult(
            aim=_non_negative_or_zero("aim", aim_value),
            speed=_non_negative_or_zero("speed", speed_value),
            accuracy=_non_negative_or_zero("accuracy", accuracy_value),
            flashlight=_non_negative_or_zero("flashlight", flashlight_value),
            total=_non_negative_or_zero("total", total),
            effective_miss_count=ctx.effective_miss_count,
        )


DEFAULT_CALCULATOR = PerformanceCalculator()


def calculate(
    attributes: DifficultyAttributes,
    score: ScoreStatistics,
    mods: ModifierContext,
) -> PerformanceResult:
    return DEFAULT_CALCULATOR.calculate(attributes, score, mods)


def calculate_performances(
    attributes: DifficultyAttributes,
    scores: Iterable[tuple[ScoreStatistics, ModifierContext]],
    calculator: PerformanceCalculator = DEFAULT_CALCULATOR,
) -> list[PerformanceResult]:
    """\
    Calculate performance for multiple scores on a single beatmap.

    Typically most useful for mass-recalculation situations. Results are
    returned in the order the scores were given.
    """
    return [calculator.calculate(attributes, score, mods) for score, mods in scores]
