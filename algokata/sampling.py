"""Random sampling by rejection."""

from __future__ import annotations

import random
from typing import Optional


class Rand10:
    """Draws uniform integers in 1..10 from a uniform source over 1..7."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def rand7(self) -> int:
        """Return a uniform integer from 1 to 7."""
        return self._rng.randint(1, 7)

    def rand10(self) -> int:
        """Return a uniform integer from 1 to 10 built from two rand7 draws."""
        while True:
            row = self.rand7()
            col = self.rand7()
            idx = col + (row - 1) * 7
            if idx <= 40:
                return (idx - 1) % 10 + 1


class CirclePointGenerator:
    """Draws points uniformly from inside a circle."""

    def __init__(
        self,
        radius: float,
        x_center: float,
        y_center: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.radius = radius
        self.x_center = x_center
        self.y_center = y_center
        self._rng = rng if rng is not None else random.Random()

    def rand_point(self) -> list[float]:
        """Return ``[x, y]`` chosen uniformly from the disc."""
        r = self.radius
        while True:
            x = self._rng.random() * 2 * r - r + self.x_center
            y = self._rng.random() * 2 * r - r + self.y_center
            if (x - self.x_center) ** 2 + (y - self.y_center) ** 2 <= r**2:
                return [x, y]