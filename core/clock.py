"""
Clock - Single Source of Truth for Time
---------------------------------------
Abstracts "now" so default query windows can be computed against a real
clock in production and a fixed one in tests.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
import pytz


class Clock(ABC):
    """
    Abstract base class for all clocks.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Returns the current 'system' time."""
        pass


class RealTimeClock(Clock):
    """
    Wall-clock implementation, timezone-aware (UTC unless told otherwise).
    """

    def __init__(self, timezone: str = 'UTC'):
        self.tz = pytz.timezone(timezone)

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock(Clock):
    """
    Clock pinned to a given instant.
    Time only advances when manually set or advanced.
    """

    def __init__(self, current_time: datetime):
        self._current_time = current_time

    def now(self) -> datetime:
        return self._current_time

    def set_time(self, dt: datetime):
        """Move the clock to a new instant."""
        self._current_time = dt

    def advance(self, delta: timedelta):
        """Advance the clock by a duration."""
        self._current_time += delta
