from __future__ import annotations

from collections.abc import Callable

DifficultyToPerformance = Callable[[float], float]


def default_difficulty_to_performance(difficulty: float) -> float:
    """Map a skill's star difficulty onto its base performance value."""
    return (5.0 * max(1.0, difficulty / 0.0675) - 4.0) ** 3.0 / 100000.0
