from __future__ import annotations

from ppcalc.usecases.performance import calculate
from ppcalc.usecases.performance import calculate_performances

__all__ = ("calculate", "calculate_performances")
