"""Clock abstraction so time-dependent code can run against fixed timestamps."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import pytz

from ..core.settings import settings


@dataclass(frozen=True)
class TimeProvider:
    now: Callable[[], datetime]

    @classmethod
    def live(cls, timezone: Optional[str] = None) -> "TimeProvider":
        """Wall clock in `timezone` (defaults to DAY_TIMEZONE)."""
        tz = pytz.timezone(timezone or settings.DAY_TIMEZONE)
        return cls(now=lambda: datetime.now(tz))

    @classmethod
    def fixed(cls, moment: datetime) -> "TimeProvider":
        return cls(now=lambda: moment)
