"""
Calendar — Календарная арифметика для calendar-relative единиц

Абстракция CalendarBackend отделяет движок периодов от конкретной
библиотеки календаря. Реализация по умолчанию — ArrowCalendar (arrow).

Политика сдвига месяцев/лет (arrow / dateutil.relativedelta):
- день месяца сохраняется, если он существует в целевом месяце
- иначе обрезается до последнего дня месяца (31.01 + 1 month = 29.02)

Такие сдвиги НЕ обратимы (31.01 + 1 month - 1 month = 29.01); это
принятое поведение, не корректируется.

Неделя начинается в понедельник 00:00:00.
"""

from datetime import datetime
from typing import Final, FrozenSet, Protocol

import arrow

from src.core.domain.instants import to_instant


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимые рамки усечения
FLOOR_FRAMES: Final[FrozenSet[str]] = frozenset(
    {"second", "minute", "hour", "day", "week", "month", "year"}
)

# Начало недели (ISO: понедельник = 1)
WEEK_START_ISOWEEKDAY: Final[int] = 1


# =============================================================================
# PROTOCOL
# =============================================================================


class CalendarBackend(Protocol):
    """Календарная арифметика над мгновениями UTC"""

    def shift(
        self, instant: datetime, *, weeks: int = 0, months: int = 0, years: int = 0
    ) -> datetime:
        """Календарный сдвиг (знаковые значения)"""
        ...

    def floor(self, instant: datetime, frame: str) -> datetime:
        """Усечение до начала рамки (second..year)"""
        ...


# =============================================================================
# ARROW IMPLEMENTATION
# =============================================================================


class ArrowCalendar:
    """
    CalendarBackend на базе arrow.

    Не хранит состояния: один экземпляр безопасно разделяется между потоками.
    """

    def shift(
        self, instant: datetime, *, weeks: int = 0, months: int = 0, years: int = 0
    ) -> datetime:
        shifted = arrow.get(to_instant(instant)).shift(weeks=weeks, months=months, years=years)
        return to_instant(shifted)

    def floor(self, instant: datetime, frame: str) -> datetime:
        if frame not in FLOOR_FRAMES:
            raise ValueError(f"Unsupported floor frame: {frame!r}")
        floored, _ = arrow.get(to_instant(instant)).span(frame, week_start=WEEK_START_ISOWEEKDAY)
        return to_instant(floored)

    def __repr__(self) -> str:
        return "ArrowCalendar()"


# Глобальный экземпляр календаря по умолчанию
DEFAULT_CALENDAR: Final[CalendarBackend] = ArrowCalendar()
