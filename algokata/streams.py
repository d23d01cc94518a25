"""Online answers over a stream of values."""

from __future__ import annotations

from collections import deque


class StockSpanner:
    """Reports, for each price, how many consecutive days up to today it tops."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record today's price and return its span."""
        span = 1
        while self._stack and self._stack[-1][0] <= price:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span


class RecentCounter:
    """Counts requests within the last 3000 milliseconds."""

    WINDOW = 3000

    def __init__(self) -> None:
        self._timestamps: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time ``t`` and return how many fall in [t-3000, t]."""
        self._timestamps.append(t)
        while self._timestamps[0] < t - self.WINDOW:
            self._timestamps.popleft()
        return len(self._timestamps)