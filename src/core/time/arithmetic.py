"""
Temporal Arithmetic — Сдвиг мгновения на N единиц времени

Правила:
- fixed-duration (nanosecond..half_day, day): instant ± amount * duration,
  точно, без обращения к календарю
- week: календарный сдвиг на amount недель (кратно 7 суткам)
- month/year: календарный сдвиг с обрезкой дня месяца (см. calendar.py)
- decade/century/millennium: сдвиг на amount * 10/100/1000 лет

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. amount >= 0; знак задаётся direction
2. Для fixed-duration: shift(shift(d, n, u, FUTURE), n, u, PAST) == d
3. Функции чистые: результат зависит только от аргументов

Nanosecond: разрешение datetime — микросекунды. Наносекунды переводятся
в микросекунды целочисленно, остаток < 1000 нс отбрасывается
(сдвиг на 999 нс — тождественный).
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Final

from src.core.domain.granularity import (
    Granularity,
    ShiftDirection,
    UnsupportedGranularity,
    coerce_direction,
    coerce_granularity,
)
from src.core.domain.instants import to_instant
from src.core.time.calendar import DEFAULT_CALENDAR, CalendarBackend


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Длительность одной fixed-duration единицы (кроме nanosecond)
FIXED_DURATIONS: Final[Dict[Granularity, timedelta]] = {
    Granularity.MICROSECOND: timedelta(microseconds=1),
    Granularity.MILLISECOND: timedelta(milliseconds=1),
    Granularity.SECOND: timedelta(seconds=1),
    Granularity.MINUTE: timedelta(minutes=1),
    Granularity.HOUR: timedelta(hours=1),
    Granularity.HALF_DAY: timedelta(hours=12),
    Granularity.DAY: timedelta(days=1),
}

NANOSECONDS_PER_MICROSECOND: Final[int] = 1000

# Сколько лет в одной year-based единице
YEARS_PER_UNIT: Final[Dict[Granularity, int]] = {
    Granularity.YEAR: 1,
    Granularity.DECADE: 10,
    Granularity.CENTURY: 100,
    Granularity.MILLENNIUM: 1000,
}

TRIMESTER_MONTHS: Final[int] = 3
SEMESTER_MONTHS: Final[int] = 6


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_amount(amount: Any) -> int:
    """
    Проверка количества единиц сдвига.

    Raises:
        ValueError: Если amount не int или отрицательный
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"amount must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    return amount


def fixed_duration(amount: int, unit: Granularity) -> timedelta:
    """
    Длительность amount fixed-duration единиц.

    Raises:
        UnsupportedGranularity: Если unit не fixed-duration
    """
    if unit is Granularity.NANOSECOND:
        microseconds, _ = divmod(amount, NANOSECONDS_PER_MICROSECOND)
        return timedelta(microseconds=microseconds)
    if unit not in FIXED_DURATIONS:
        raise UnsupportedGranularity(unit)
    return FIXED_DURATIONS[unit] * amount


# =============================================================================
# СДВИГ
# =============================================================================


def shift_instant(
    instant: Any,
    amount: int,
    unit: Any,
    direction: Any,
    calendar: CalendarBackend = DEFAULT_CALENDAR,
) -> datetime:
    """
    Сдвиг мгновения на amount единиц unit в направлении direction.

    Args:
        instant: Опорное мгновение (datetime, Arrow, epoch ms)
        amount: Количество единиц (>= 0)
        unit: Granularity или её строковое значение
        direction: ShiftDirection или "past"/"future"
        calendar: Календарная арифметика для week..millennium

    Returns:
        Сдвинутое мгновение (aware datetime, UTC)

    Raises:
        UnsupportedGranularity: Если unit вне перечисления
        ValueError: Если amount отрицательный или direction некорректен

    Examples:
        >>> shift_instant(datetime(1996, 4, 18, 22, tzinfo=timezone.utc), 2,
        ...               Granularity.WEEK, ShiftDirection.PAST)
        datetime.datetime(1996, 4, 4, 22, 0, tzinfo=datetime.timezone.utc)
    """
    reference = to_instant(instant)
    amount = validate_amount(amount)
    granularity = coerce_granularity(unit)
    sign = -1 if coerce_direction(direction) is ShiftDirection.PAST else 1

    if granularity.is_fixed_duration:
        return reference + sign * fixed_duration(amount, granularity)

    if granularity is Granularity.WEEK:
        return calendar.shift(reference, weeks=sign * amount)

    if granularity is Granularity.MONTH:
        return calendar.shift(reference, months=sign * amount)

    if granularity in YEARS_PER_UNIT:
        return calendar.shift(reference, years=sign * amount * YEARS_PER_UNIT[granularity])

    raise UnsupportedGranularity(granularity)


def prior_instant(
    instant: Any, amount: int, unit: Any, calendar: CalendarBackend = DEFAULT_CALENDAR
) -> datetime:
    """Мгновение на amount единиц раньше instant"""
    return shift_instant(instant, amount, unit, ShiftDirection.PAST, calendar)


def posterior_instant(
    instant: Any, amount: int, unit: Any, calendar: CalendarBackend = DEFAULT_CALENDAR
) -> datetime:
    """Мгновение на amount единиц позже instant"""
    return shift_instant(instant, amount, unit, ShiftDirection.FUTURE, calendar)


# =============================================================================
# ИМЕНОВАННЫЕ СДВИГИ
# =============================================================================


def seconds_prior(instant: Any, amount: int) -> datetime:
    return prior_instant(instant, amount, Granularity.SECOND)


def minutes_prior(instant: Any, amount: int) -> datetime:
    return prior_instant(instant, amount, Granularity.MINUTE)


def hours_prior(instant: Any, amount: int) -> datetime:
    return prior_instant(instant, amount, Granularity.HOUR)


def days_prior(instant: Any, amount: int) -> datetime:
    return prior_instant(instant, amount, Granularity.DAY)


def weeks_prior(instant: Any, amount: int) -> datetime:
    return prior_instant(instant, amount, Granularity.WEEK)


def months_prior(instant: Any, amount: int) -> datetime:
    return prior_instant(instant, amount, Granularity.MONTH)


def trimesters_prior(instant: Any, amount: int) -> datetime:
    """Trimester = 3 месяца (не отдельная единица сдвига)"""
    return prior_instant(instant, validate_amount(amount) * TRIMESTER_MONTHS, Granularity.MONTH)


def semesters_prior(instant: Any, amount: int) -> datetime:
    """Semester = 6 месяцев (не отдельная единица сдвига)"""
    return prior_instant(instant, validate_amount(amount) * SEMESTER_MONTHS, Granularity.MONTH)


def years_prior(instant: Any, amount: int) -> datetime:
    return prior_instant(instant, amount, Granularity.YEAR)


def seconds_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, amount, Granularity.SECOND)


def minutes_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, amount, Granularity.MINUTE)


def hours_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, amount, Granularity.HOUR)


def days_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, amount, Granularity.DAY)


def weeks_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, amount, Granularity.WEEK)


def months_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, amount, Granularity.MONTH)


def trimesters_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, validate_amount(amount) * TRIMESTER_MONTHS, Granularity.MONTH)


def semesters_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, validate_amount(amount) * SEMESTER_MONTHS, Granularity.MONTH)


def years_posterior(instant: Any, amount: int) -> datetime:
    return posterior_instant(instant, amount, Granularity.YEAR)
