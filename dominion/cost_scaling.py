from __future__ import annotations

import math
from typing import Callable


class CostScaling:
    """Determines how a building's cost changes with its owned count."""

    def __init__(self, fn: Callable[[int, int], int], growth_rate: float) -> None:
        self._fn = fn
        self.growth_rate = growth_rate

    def compute(self, base_cost: int, current_count: int) -> int:
        if current_count == 0:
            return base_cost
        return self._fn(base_cost, current_count)

    @classmethod
    def exponential(cls, growth_rate: float = 1.15) -> CostScaling:
        """Cost = floor(base * growth_rate^count)."""
        gr = growth_rate  # capture

        def _compute(base: int, count: int) -> int:
            # int() truncates toward zero, matching the save-file contract
            return int(base * math.pow(gr, count))

        return cls(_compute, gr)
