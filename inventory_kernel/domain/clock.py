"""
Clock -- where "today" comes from.

Responsibility:
    Services ask a Clock for the current date and pass it to the engines as
    ``as_of_date``.  Nothing else in the codebase reads wall-clock time.

Architecture position:
    Kernel > Domain.  ``SystemClock`` is the only place that touches the
    real clock.

Failure modes:
    None.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone

_DEFAULT_PINNED_TIME = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)


class Clock(ABC):
    """
    Source of the current instant for stateful services.

    Contract:
        ``now()`` is timezone-aware.  ``today()`` is its UTC calendar date,
        so scans and alerts agree on the day regardless of server zone.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current instant, timezone-aware."""

    def today(self) -> date:
        """UTC calendar date of ``now()``."""
        return self.now().astimezone(timezone.utc).date()


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class DeterministicClock(Clock):
    """
    Pinned clock for tests and demos.

    Time only moves when told to: ``advance``, ``advance_days`` or
    ``set_time``.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._current = fixed_time or _DEFAULT_PINNED_TIME

    def now(self) -> datetime:
        return self._current

    def set_time(self, moment: datetime) -> None:
        self._current = moment

    def advance(self, seconds: int = 1) -> None:
        self._current += timedelta(seconds=seconds)

    def advance_days(self, days: int = 1) -> None:
        self._current += timedelta(days=days)
