"""
TemporalEngine — Фасад над чистыми функциями движка времени

Единственная точка, где допускается чтение текущего времени:
если reference не передан (None), используется clock.now().

Календарь и часы инжектируются, что делает фасад детерминированным
в тестах (FixedClock + любой CalendarBackend).
"""

from datetime import datetime
from typing import Any, Optional

from src.core.domain.granularity import ShiftDirection
from src.core.domain.period import Period
from src.core.time.arithmetic import shift_instant
from src.core.time.calendar import DEFAULT_CALENDAR, CalendarBackend
from src.core.time.clock import Clock, SystemClock
from src.core.time.periods import decade_of, last_period, next_period, past_period


class TemporalEngine:
    """
    Фасад движка времени с инжектируемыми календарём и часами.

    Не хранит изменяемого состояния; безопасен для конкурентного использования.
    """

    def __init__(
        self,
        calendar: CalendarBackend = DEFAULT_CALENDAR,
        clock: Optional[Clock] = None,
    ):
        self.calendar = calendar
        self.clock = clock if clock is not None else SystemClock()

    def _reference(self, reference: Optional[Any]) -> Any:
        return self.clock.now() if reference is None else reference

    def now(self) -> datetime:
        return self.clock.now()

    def shift(
        self,
        amount: int,
        unit: Any,
        direction: Any,
        reference: Optional[Any] = None,
    ) -> datetime:
        """Сдвиг reference (или текущего мгновения) на amount единиц"""
        return shift_instant(self._reference(reference), amount, unit, direction, self.calendar)

    def prior(self, amount: int, unit: Any, reference: Optional[Any] = None) -> datetime:
        return self.shift(amount, unit, ShiftDirection.PAST, reference)

    def posterior(self, amount: int, unit: Any, reference: Optional[Any] = None) -> datetime:
        return self.shift(amount, unit, ShiftDirection.FUTURE, reference)

    def past_period(self, granularity: Any, reference: Optional[Any] = None) -> Period:
        return past_period(self._reference(reference), granularity, self.calendar)

    def last_period(self, granularity: Any, reference: Optional[Any] = None) -> Period:
        return last_period(self._reference(reference), granularity, self.calendar)

    def next_period(self, granularity: Any, reference: Optional[Any] = None) -> Period:
        return next_period(self._reference(reference), granularity, self.calendar)

    def decade(self, reference: Optional[Any] = None) -> int:
        """Номер десятилетия для reference (год или мгновение)"""
        return decade_of(self._reference(reference))
