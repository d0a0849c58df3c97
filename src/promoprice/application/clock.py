"""Wall-clock access for the application layer.

Handlers read the clock once per request and thread that single instant
through every resolution, so all cards of one screen agree on which
campaigns are live.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
