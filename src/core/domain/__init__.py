"""
Domain models and value objects.

Contains fundamental domain entities like Granularity, Period, StorageUnit.
"""

from src.core.domain.granularity import (
    FIXED_DURATION_GRANULARITIES,
    Granularity,
    PeriodGranularity,
    ShiftDirection,
    UnsupportedGranularity,
    coerce_direction,
    coerce_granularity,
    coerce_period_granularity,
)
from src.core.domain.instants import EPOCH_UTC, now_utc, to_epoch_ms, to_instant
from src.core.domain.period import InvalidTimePeriod, Period
from src.core.domain.units import (
    STORAGE_SCALE_FACTOR,
    SameStorageUnit,
    StorageUnit,
    UnexpectedStorageConversion,
    bytes_to_gigabytes,
    bytes_to_kilobytes,
    bytes_to_megabytes,
    bytes_to_terabytes,
    convert_storage_unit,
    gigabytes_to_bytes,
    kilobytes_to_bytes,
    megabytes_to_bytes,
    resolve_storage_unit,
    terabytes_to_bytes,
)

__all__ = [
    # Granularity module
    "FIXED_DURATION_GRANULARITIES",
    "Granularity",
    "PeriodGranularity",
    "ShiftDirection",
    "UnsupportedGranularity",
    "coerce_direction",
    "coerce_granularity",
    "coerce_period_granularity",
    # Instants
    "EPOCH_UTC",
    "now_utc",
    "to_epoch_ms",
    "to_instant",
    # Period model
    "Period",
    "InvalidTimePeriod",
    # Storage units
    "STORAGE_SCALE_FACTOR",
    "StorageUnit",
    "SameStorageUnit",
    "UnexpectedStorageConversion",
    "convert_storage_unit",
    "resolve_storage_unit",
    "bytes_to_kilobytes",
    "bytes_to_megabytes",
    "bytes_to_gigabytes",
    "bytes_to_terabytes",
    "kilobytes_to_bytes",
    "megabytes_to_bytes",
    "gigabytes_to_bytes",
    "terabytes_to_bytes",
]
