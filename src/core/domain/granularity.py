"""
Granularity — Единицы времени для сдвигов и выравнивания периодов

Два перечисления:
- Granularity: единицы сдвига мгновения (nanosecond..millennium)
- PeriodGranularity: единицы выровненных периодов (second..year,
  включая trimester и semester)

Классификация Granularity:
- fixed-duration: nanosecond..half_day, day — конвертируются в timedelta
- calendar-relative: week, month, year, decade, century, millennium —
  длина зависит от положения в календаре

Trimester/semester НЕ являются единицами сдвига: это 3× и 6× month
на стороне вызывающего кода.
"""

from enum import Enum
from typing import Any, Final


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedGranularity(Exception):
    """
    Запрошена единица времени вне перечисления.

    Не восстанавливается: сигнализирует об ошибке вызывающего кода.
    """

    def __init__(self, granularity: Any):
        self.granularity = granularity
        super().__init__(f"Unsupported granularity: {granularity!r}")


# =============================================================================
# ENUMS
# =============================================================================


class Granularity(str, Enum):
    """Единица сдвига мгновения"""

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    HALF_DAY = "half_day"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    MILLENNIUM = "millennium"

    @property
    def is_fixed_duration(self) -> bool:
        """True, если единица имеет постоянную длину (nanosecond..day)"""
        return self in FIXED_DURATION_GRANULARITIES

    @property
    def is_calendar_relative(self) -> bool:
        """True, если длина единицы зависит от календаря (week..millennium)"""
        return not self.is_fixed_duration


class PeriodGranularity(str, Enum):
    """Единица выровненного периода (last/next/past)"""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    TRIMESTER = "trimester"
    SEMESTER = "semester"
    YEAR = "year"


class ShiftDirection(str, Enum):
    """Направление сдвига: знак несёт direction, а не amount"""

    PAST = "past"
    FUTURE = "future"


FIXED_DURATION_GRANULARITIES: Final[frozenset] = frozenset(
    {
        Granularity.NANOSECOND,
        Granularity.MICROSECOND,
        Granularity.MILLISECOND,
        Granularity.SECOND,
        Granularity.MINUTE,
        Granularity.HOUR,
        Granularity.HALF_DAY,
        Granularity.DAY,
    }
)


# =============================================================================
# COERCION
# =============================================================================


def coerce_granularity(unit: Any) -> Granularity:
    """
    Приведение произвольного значения к Granularity.

    Принимает член перечисления или его строковое значение ("week").

    Raises:
        UnsupportedGranularity: Если значение не соответствует ни одной единице
    """
    if isinstance(unit, Granularity):
        return unit
    try:
        return Granularity(getattr(unit, "value", unit))
    except ValueError:
        raise UnsupportedGranularity(unit) from None


def coerce_period_granularity(unit: Any) -> PeriodGranularity:
    """
    Приведение произвольного значения к PeriodGranularity.

    Raises:
        UnsupportedGranularity: Если значение не соответствует ни одной единице
    """
    if isinstance(unit, PeriodGranularity):
        return unit
    try:
        return PeriodGranularity(getattr(unit, "value", unit))
    except ValueError:
        raise UnsupportedGranularity(unit) from None


def coerce_direction(direction: Any) -> ShiftDirection:
    """
    Приведение к ShiftDirection.

    Raises:
        ValueError: Если направление не past/future
    """
    if isinstance(direction, ShiftDirection):
        return direction
    try:
        return ShiftDirection(direction)
    except ValueError:
        raise ValueError(f"direction must be 'past' or 'future', got {direction!r}") from None
