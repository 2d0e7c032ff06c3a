"""
Clock — Источник текущего мгновения

Чистые функции движка всегда принимают reference явно. Clock используется
только фасадом TemporalEngine, когда reference не передан.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from src.core.domain.instants import now_utc, to_instant


class Clock(Protocol):
    """Источник текущего мгновения (UTC)"""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Системные часы: одно чтение на вызов"""

    def now(self) -> datetime:
        return now_utc()

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Часы, всегда возвращающие одно и то же мгновение (для тестов и replay)"""

    instant: Any

    def now(self) -> datetime:
        return to_instant(self.instant)
