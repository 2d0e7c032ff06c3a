"""
Period — Полуоткрытый интервал времени [start, end)

Immutable Pydantic модель. Каждое вычисление периода создаёт новый
экземпляр, существующие экземпляры не изменяются.

ИНВАРИАНТ: start <= end (start == end допустим — пустой период).
"""

from datetime import datetime, timedelta
from typing import Any, Dict

import arrow
from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.contracts import validate_period
from src.core.domain.instants import to_epoch_ms, to_instant


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidTimePeriod(Exception):
    """Период с началом позже конца"""

    def __init__(self, start: datetime, end: datetime):
        self.start = start
        self.end = end
        super().__init__(
            f"Invalid time period: start {start.isoformat()} is after end {end.isoformat()}"
        )


# =============================================================================
# PERIOD MODEL
# =============================================================================


class Period(BaseModel):
    """
    Полуоткрытый интервал [start, end) над мгновениями UTC.

    Используется слоем хранилища для фильтрации объектов по last_modified.
    """

    start: datetime = Field(..., description="Начало периода (включительно, UTC)")
    end: datetime = Field(..., description="Конец периода (исключительно, UTC)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("start", "end", mode="before")
    @classmethod
    def normalize_instant(cls, v: Any) -> datetime:
        """Приведение к aware datetime в UTC (datetime, Arrow, epoch ms)"""
        return to_instant(v)

    @model_validator(mode="after")
    def validate_order(self) -> "Period":
        """
        Проверка инварианта start <= end.

        InvalidTimePeriod не является ValueError, поэтому проходит
        через Pydantic без обёртки в ValidationError.
        """
        if self.start > self.end:
            raise InvalidTimePeriod(self.start, self.end)
        return self

    @property
    def duration(self) -> timedelta:
        """Длительность периода"""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, instant: Any) -> bool:
        """
        Принадлежность мгновения периоду (полуоткрытый интервал).

        Args:
            instant: datetime, Arrow или epoch ms

        Returns:
            start <= instant < end
        """
        value = to_instant(instant)
        return self.start <= value < self.end

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в JSON-контракт period.json.

        Returns:
            dict с ISO-8601 строками и epoch миллисекундами
        """
        return {
            "start_utc": self.start.isoformat(),
            "end_utc": self.end.isoformat(),
            "start_ts_utc_ms": to_epoch_ms(self.start),
            "end_ts_utc_ms": to_epoch_ms(self.end),
        }

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "Period":
        """
        Восстановление периода из контракта.

        Границы берутся из ISO-8601 полей (с микросекундами), epoch ms
        поля обязаны с ними совпадать.

        Raises:
            ValidationError (jsonschema): Если данные не соответствуют схеме
            ValueError: Если ISO-8601 и epoch ms представления расходятся
        """
        validate_period(data)

        bounds = {}
        for bound in ("start", "end"):
            instant = to_instant(arrow.get(data[f"{bound}_utc"]))
            ts_ms = data[f"{bound}_ts_utc_ms"]
            if to_epoch_ms(instant) != ts_ms:
                raise ValueError(
                    f"Inconsistent period contract: {bound}_utc={data[f'{bound}_utc']!r} "
                    f"does not match {bound}_ts_utc_ms={ts_ms}"
                )
            bounds[bound] = instant

        return cls(**bounds)
