"""Time budget for waiting on events between frame ticks."""

from __future__ import annotations


class WaitBudget:
    """How long the loop may still wait for an event before the next tick.

    Waiting for an event spends part of the budget; when the wait times out
    the budget is refilled. A spend that would leave nothing, or that leaves
    the budget at its full starting value, drops it to zero so that the next
    wait only polls.
    """

    def __init__(self, start: int) -> None:
        if start < 0:
            raise ValueError("start must not be negative")
        self.start = start
        self.remaining = start

    def spend(self, elapsed: int) -> int:
        """Take the time spent waiting off the budget and return what is left."""
        if elapsed < 0:
            raise ValueError("elapsed time must not be negative")
        left = self.remaining - elapsed
        if left < 0 or left >= self.start:
            left = 0
        self.remaining = left
        return left

    def expire(self) -> int:
        """Refill the budget after a timed-out wait and return it."""
        self.remaining = self.start
        return self.remaining