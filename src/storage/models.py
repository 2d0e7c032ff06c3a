"""
Storage Models — Объекты и бакеты хранилища

Immutable Pydantic модели того, что возвращает внешний API хранилища.
Соответствуют схемам stored_object.json и bucket.json.
"""

from datetime import datetime
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import validate_bucket, validate_stored_object
from src.core.domain.instants import to_epoch_ms, to_instant


# =============================================================================
# STORED OBJECT
# =============================================================================


class StoredObject(BaseModel):
    """
    Объект в бакете хранилища.

    Immutable модель (frozen=True).
    """

    key: str = Field(..., min_length=1, description="Ключ объекта (полный путь)")
    size_bytes: int = Field(..., ge=0, description="Размер объекта в байтах")
    last_modified: datetime = Field(..., description="Время последнего изменения (UTC)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("last_modified", mode="before")
    @classmethod
    def normalize_last_modified(cls, v: Any) -> datetime:
        return to_instant(v)

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в контракт stored_object.json"""
        return {
            "key": self.key,
            "size_bytes": self.size_bytes,
            "last_modified_ts_utc_ms": to_epoch_ms(self.last_modified),
        }

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "StoredObject":
        """
        Построение объекта из контракта.

        Raises:
            ValidationError (jsonschema): Если данные не соответствуют схеме
        """
        validate_stored_object(data)
        return cls(
            key=data["key"],
            size_bytes=data["size_bytes"],
            last_modified=data["last_modified_ts_utc_ms"],
        )


# =============================================================================
# BUCKET
# =============================================================================


class Bucket(BaseModel):
    """Бакет хранилища"""

    name: str = Field(..., min_length=3, max_length=63, description="Имя бакета")
    created_at: datetime = Field(..., description="Время создания (UTC)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("created_at", mode="before")
    @classmethod
    def normalize_created_at(cls, v: Any) -> datetime:
        return to_instant(v)

    def to_contract(self) -> Dict[str, Any]:
        return {"name": self.name, "created_ts_utc_ms": to_epoch_ms(self.created_at)}

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "Bucket":
        validate_bucket(data)
        return cls(name=data["name"], created_at=data["created_ts_utc_ms"])


# =============================================================================
# DELETION RESULT
# =============================================================================


class DeletionResult(BaseModel):
    """Результат пакетного удаления объектов"""

    bucket: str = Field(..., min_length=1)
    deleted_keys: Tuple[str, ...] = Field(default=(), description="Удалённые ключи")
    failed_keys: Tuple[str, ...] = Field(default=(), description="Ключи, которые не удалось удалить")

    model_config = {"frozen": True}  # Immutable

    @property
    def deleted_count(self) -> int:
        return len(self.deleted_keys)

    @property
    def is_complete(self) -> bool:
        """True, если все ключи удалены"""
        return not self.failed_keys
