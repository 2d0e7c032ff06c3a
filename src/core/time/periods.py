"""
Period Boundary Engine — Периоды относительно опорного мгновения

Три семейства:
- past:  скользящее окно [reference - 1 unit, reference), без выравнивания
- last:  предыдущая целая единица, выровненная по началу единицы
- next:  следующая целая единица, выровненная по началу единицы

Выравнивание:
- second/minute/hour/day: обнуление младших полей
- week: понедельник 00:00:00
- month: 1-е число 00:00:00
- trimester/semester: 1-е число месяца, смещение по формуле differential;
  last выровнен по кварталам/полугодиям, next выровнен только от
  последнего месяца квартала (полугодия)
- year: 1 января 00:00:00

Все вычисления — функция календарных полей reference в UTC.
"""

from datetime import datetime
from typing import Any, Dict, Final, Tuple, Union

from src.core.domain.granularity import (
    Granularity,
    PeriodGranularity,
    ShiftDirection,
    coerce_period_granularity,
)
from src.core.domain.instants import to_instant
from src.core.domain.period import Period
from src.core.time.arithmetic import SEMESTER_MONTHS, TRIMESTER_MONTHS, shift_instant
from src.core.time.calendar import DEFAULT_CALENDAR, CalendarBackend


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# PeriodGranularity → (единица сдвига, рамка усечения)
ALIGNED_UNITS: Final[Dict[PeriodGranularity, Tuple[Granularity, str]]] = {
    PeriodGranularity.SECOND: (Granularity.SECOND, "second"),
    PeriodGranularity.MINUTE: (Granularity.MINUTE, "minute"),
    PeriodGranularity.HOUR: (Granularity.HOUR, "hour"),
    PeriodGranularity.DAY: (Granularity.DAY, "day"),
    PeriodGranularity.WEEK: (Granularity.WEEK, "week"),
    PeriodGranularity.MONTH: (Granularity.MONTH, "month"),
    PeriodGranularity.YEAR: (Granularity.YEAR, "year"),
}

# Многомесячные периоды: длина в месяцах
MONTH_SPANS: Final[Dict[PeriodGranularity, int]] = {
    PeriodGranularity.TRIMESTER: TRIMESTER_MONTHS,
    PeriodGranularity.SEMESTER: SEMESTER_MONTHS,
}


# =============================================================================
# PAST (скользящее окно)
# =============================================================================


def past_period(
    reference: Any,
    granularity: Any,
    calendar: CalendarBackend = DEFAULT_CALENDAR,
) -> Period:
    """
    Скользящее окно длиной в одну единицу, заканчивающееся в reference.

    Example: reference = 18.04.1996 09:00:00, granularity = HOUR
    → [18.04.1996 08:00:00, 18.04.1996 09:00:00)

    Raises:
        UnsupportedGranularity: Если granularity вне PeriodGranularity
    """
    end = to_instant(reference)
    unit = coerce_period_granularity(granularity)

    if unit in MONTH_SPANS:
        start = shift_instant(end, MONTH_SPANS[unit], Granularity.MONTH, ShiftDirection.PAST, calendar)
    else:
        shift_unit, _ = ALIGNED_UNITS[unit]
        start = shift_instant(end, 1, shift_unit, ShiftDirection.PAST, calendar)

    return Period(start=start, end=end)


# =============================================================================
# LAST / NEXT (выровненные периоды)
# =============================================================================


def _aligned_period(
    reference: datetime,
    unit: PeriodGranularity,
    direction: ShiftDirection,
    calendar: CalendarBackend,
) -> Period:
    if unit in MONTH_SPANS:
        span = MONTH_SPANS[unit]
        if direction is ShiftDirection.PAST:
            differential = (reference.month - 1) % span
            months_to_shift = span + differential
        else:
            differential = reference.month % span
            months_to_shift = differential + 1

        shifted = shift_instant(reference, months_to_shift, Granularity.MONTH, direction, calendar)
        start = calendar.floor(shifted, "month")
        end = shift_instant(start, span, Granularity.MONTH, ShiftDirection.FUTURE, calendar)
        return Period(start=start, end=end)

    shift_unit, frame = ALIGNED_UNITS[unit]
    shifted = shift_instant(reference, 1, shift_unit, direction, calendar)
    start = calendar.floor(shifted, frame)
    end = shift_instant(start, 1, shift_unit, ShiftDirection.FUTURE, calendar)
    return Period(start=start, end=end)


def last_period(
    reference: Any,
    granularity: Any,
    calendar: CalendarBackend = DEFAULT_CALENDAR,
) -> Period:
    """
    Предыдущая целая единица относительно reference.

    Examples:
        reference = 18.04.1996 09:00:00 (четверг)
        - WEEK      → [08.04.1996 00:00, 15.04.1996 00:00)
        - TRIMESTER → [01.01.1996 00:00, 01.04.1996 00:00)

    Trimester/semester:
        differential = (month - 1) mod span
        start = floor_month(reference - (span + differential) months)

    Raises:
        UnsupportedGranularity: Если granularity вне PeriodGranularity
    """
    return _aligned_period(
        to_instant(reference),
        coerce_period_granularity(granularity),
        ShiftDirection.PAST,
        calendar,
    )


def next_period(
    reference: Any,
    granularity: Any,
    calendar: CalendarBackend = DEFAULT_CALENDAR,
) -> Period:
    """
    Следующая целая единица относительно reference.

    Trimester/semester:
        differential = month mod span
        start = floor_month(reference + (differential + 1) months)

    ВНИМАНИЕ: в отличие от last, окно next trimester/semester НЕ выровнено
    по кварталам/полугодиям. Выровненный результат получается только для
    последнего месяца квартала (полугодия); для остальных месяцев окно
    смещено. Example: reference = 18.04.1996, TRIMESTER →
    [01.06.1996, 01.09.1996), а не [01.07.1996, 01.10.1996).

    Raises:
        UnsupportedGranularity: Если granularity вне PeriodGranularity
    """
    return _aligned_period(
        to_instant(reference),
        coerce_period_granularity(granularity),
        ShiftDirection.FUTURE,
        calendar,
    )


# =============================================================================
# DECADE
# =============================================================================


def decade_of(value: Union[int, Any]) -> int:
    """
    Номер десятилетия внутри века (0..90).

    decade = (year mod 100) - ((year mod 100) mod 10)

    Args:
        value: Год (int) или мгновение (datetime, Arrow)

    Examples:
        >>> decade_of(1996)
        90
        >>> decade_of(2005)
        0
    """
    if isinstance(value, int) and not isinstance(value, bool):
        year = value
    else:
        year = to_instant(value).year

    year_of_century = year % 100
    return year_of_century - (year_of_century % 10)
