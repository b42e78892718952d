"""Animation clock.

Tracks elapsed animation time in fixed nominal steps, independent of how
long the host actually takes between frames.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TICK_SECONDS = 0.016  # ~60fps


@dataclass
class Clock:
    """Fixed-step animation clock.

    Attributes:
        tick_rate: Seconds added per tick
        current_time: Elapsed time in seconds
        tick_count: Number of ticks elapsed
    """
    tick_rate: float = DEFAULT_TICK_SECONDS
    current_time: float = 0.0
    tick_count: int = 0

    def tick(self) -> float:
        """Advance time by one tick.

        Returns:
            Delta time (seconds) for this tick
        """
        self.current_time += self.tick_rate
        self.tick_count += 1
        return self.tick_rate

    def reset(self) -> None:
        """Reset clock to initial state."""
        self.current_time = 0.0
        self.tick_count = 0

    def seconds_to_ticks(self, seconds: float) -> int:
        """Convert seconds to ticks (rounded)."""
        return round(seconds / self.tick_rate)

    def format_time(self) -> str:
        """Format current time as readable string."""
        return f"{self.current_time:.2f}s (tick {self.tick_count})"

    def __repr__(self) -> str:
        return f"Clock(time={self.current_time:.3f}s, tick={self.tick_count})"
