"""
StorageUnits — Централизованный модуль конверсии единиц хранения

Единственный допустимый способ преобразований между единицами ёмкости
BYTE → KILOBYTE → ... → BRONTOBYTE.

Масштаб определяется ТОЛЬКО порядковой позицией единицы в перечислении:
каждая следующая единица в 1024 раза больше предыдущей.

ЗАПРЕЩЕНО смешивать единицы без явного конвертера из этого модуля.
"""

import math
from enum import Enum
from typing import Final, List, Optional, Union


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Множитель между соседними единицами
STORAGE_SCALE_FACTOR: Final[int] = 1024


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SameStorageUnit(Exception):
    """Конверсия из единицы в неё же"""

    def __init__(self, unit: "StorageUnit"):
        self.unit = unit
        super().__init__(f"Source and target storage units are the same: {unit.value}")


class UnexpectedStorageConversion(Exception):
    """
    Нарушение инварианта порядковых номеров единиц.

    Недостижимо при корректном перечислении; возникновение означает дефект
    таблицы единиц.
    """

    def __init__(self, from_unit: "StorageUnit", to_unit: "StorageUnit"):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f"Unexpected storage conversion: {from_unit.value} -> {to_unit.value} "
            f"have equal ordinals"
        )


# =============================================================================
# ENUMS
# =============================================================================


class StorageUnit(str, Enum):
    """Единица ёмкости хранения (строго упорядочена)"""

    BYTE = "BYTE"
    KILOBYTE = "KILOBYTE"
    MEGABYTE = "MEGABYTE"
    GIGABYTE = "GIGABYTE"
    TERABYTE = "TERABYTE"
    PETABYTE = "PETABYTE"
    EXABYTE = "EXABYTE"
    ZETTABYTE = "ZETTABYTE"
    YOTTABYTE = "YOTTABYTE"
    BRONTOBYTE = "BRONTOBYTE"

    @property
    def ordinal(self) -> int:
        """Позиция единицы в перечислении (BYTE = 0)"""
        return _ORDERED_UNITS.index(self)

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["StorageUnit"]:
        """
        Поиск единицы по имени без учёта регистра.

        Args:
            name: Имя единицы ("megabyte", "MegaByte", ...)

        Returns:
            StorageUnit или None для пустого/неизвестного имени
        """
        if not name:
            return None
        normalized = name.strip().upper()
        for unit in cls:
            if unit.value == normalized:
                return unit
        return None


_ORDERED_UNITS: Final[List[StorageUnit]] = list(StorageUnit)


# =============================================================================
# БАЗОВЫЙ КОНВЕРТЕР
# =============================================================================


def resolve_storage_unit(unit: Union[StorageUnit, str]) -> StorageUnit:
    """
    Приведение StorageUnit | имя → StorageUnit.

    Raises:
        ValueError: Если имя не соответствует ни одной единице
    """
    if isinstance(unit, StorageUnit):
        return unit
    resolved = StorageUnit.from_name(unit)
    if resolved is None:
        raise ValueError(f"Unknown storage unit: {unit!r}")
    return resolved


def convert_storage_unit(
    value: float,
    from_unit: Union[StorageUnit, str],
    to_unit: Union[StorageUnit, str],
) -> float:
    """
    Конверсия значения между единицами хранения.

    differential = ordinal(from_unit) - ordinal(to_unit)
    - differential > 0 (в меньшую единицу): value * 1024 ** differential
    - differential < 0 (в большую единицу): value / 1024 ** |differential|

    Округление не применяется; для больших масштабов возможна потеря
    точности float.

    Args:
        value: Исходное значение в from_unit
        from_unit: Исходная единица
        to_unit: Целевая единица

    Returns:
        Значение в to_unit

    Raises:
        SameStorageUnit: Если from_unit и to_unit совпадают
        UnexpectedStorageConversion: Если порядковые номера совпали у разных единиц
        ValueError: Если value NaN/Inf или имя единицы неизвестно

    Examples:
        >>> convert_storage_unit(1024, StorageUnit.BYTE, StorageUnit.KILOBYTE)
        1.0
        >>> convert_storage_unit(1, StorageUnit.KILOBYTE, StorageUnit.BYTE)
        1024.0
    """
    source = resolve_storage_unit(from_unit)
    target = resolve_storage_unit(to_unit)

    if source is target:
        raise SameStorageUnit(source)

    if not math.isfinite(value):
        raise ValueError(f"Storage value must be finite, got {value}")

    differential = source.ordinal - target.ordinal

    if differential > 0:
        return float(value) * STORAGE_SCALE_FACTOR**differential
    elif differential < 0:
        return float(value) / STORAGE_SCALE_FACTOR ** abs(differential)
    else:
        raise UnexpectedStorageConversion(source, target)


# =============================================================================
# ИМЕНОВАННЫЕ КОНВЕРТЕРЫ
# =============================================================================


def bytes_to_kilobytes(bytes_value: float) -> float:
    return convert_storage_unit(bytes_value, StorageUnit.BYTE, StorageUnit.KILOBYTE)


def bytes_to_megabytes(bytes_value: float) -> float:
    return convert_storage_unit(bytes_value, StorageUnit.BYTE, StorageUnit.MEGABYTE)


def bytes_to_gigabytes(bytes_value: float) -> float:
    return convert_storage_unit(bytes_value, StorageUnit.BYTE, StorageUnit.GIGABYTE)


def bytes_to_terabytes(bytes_value: float) -> float:
    return convert_storage_unit(bytes_value, StorageUnit.BYTE, StorageUnit.TERABYTE)


def kilobytes_to_bytes(kilobytes_value: float) -> float:
    return convert_storage_unit(kilobytes_value, StorageUnit.KILOBYTE, StorageUnit.BYTE)


def megabytes_to_bytes(megabytes_value: float) -> float:
    return convert_storage_unit(megabytes_value, StorageUnit.MEGABYTE, StorageUnit.BYTE)


def gigabytes_to_bytes(gigabytes_value: float) -> float:
    return convert_storage_unit(gigabytes_value, StorageUnit.GIGABYTE, StorageUnit.BYTE)


def terabytes_to_bytes(terabytes_value: float) -> float:
    return convert_storage_unit(terabytes_value, StorageUnit.TERABYTE, StorageUnit.BYTE)
