"""
Instants — Приведение мгновений к единому представлению

Мгновение (Instant) в системе — это timezone-aware datetime в UTC.

Допустимые входы:
- aware datetime (переводится в UTC)
- naive datetime (интерпретируется как UTC)
- int — epoch миллисекунды (конвенция *_ts_utc_ms)
- arrow.Arrow

Разрешение: микросекунды (ограничение datetime).
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Final

import arrow


# Начало эпохи Unix (UTC)
EPOCH_UTC: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MILLISECOND: Final[timedelta] = timedelta(milliseconds=1)


def to_instant(value: Any) -> datetime:
    """
    Приведение значения к aware datetime в UTC.

    Args:
        value: datetime, arrow.Arrow или epoch миллисекунды (int)

    Returns:
        datetime с tzinfo=timezone.utc

    Raises:
        TypeError: Если тип значения не поддерживается

    Examples:
        >>> to_instant(0)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, arrow.Arrow):
        return value.datetime.astimezone(timezone.utc)

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    # bool является подклассом int, но не мгновением
    if isinstance(value, int) and not isinstance(value, bool):
        return EPOCH_UTC + timedelta(milliseconds=value)

    raise TypeError(f"Unsupported instant type: {type(value).__name__}")


def to_epoch_ms(value: Any) -> int:
    """
    Мгновение → epoch миллисекунды (UTC).

    Считается через timedelta, без float: точно для любых дат datetime.
    """
    return (to_instant(value) - EPOCH_UTC) // _ONE_MILLISECOND


def now_utc() -> datetime:
    """Текущее мгновение (UTC)"""
    return datetime.now(timezone.utc)
