"""StorageService — Листинг и удаление объектов через фильтры по датам.

Тонкий слой делегирования над ObjectStorageManager:
- фильтры по ключу: prefix / suffix / regex pattern
- фильтры по last_modified: prior / posterior / period, вычисленные
  движком времени (TemporalEngine)
- удаление объектов, директорий, бакетов (с опциональной очисткой)
- агрегация размера с конверсией единиц хранения

Ошибки движка (UnsupportedGranularity, InvalidTimePeriod, SameStorageUnit)
пропагируют без перехвата.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from src.core.domain.instants import to_instant
from src.core.domain.period import Period
from src.core.domain.units import StorageUnit, convert_storage_unit, resolve_storage_unit
from src.core.time.engine import TemporalEngine
from src.storage.manager import ObjectStorageManager
from src.storage.models import Bucket, DeletionResult, StoredObject
from src.storage.paths import DIRECTORY_SEPARATOR, validate_directory_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageServiceConfig:
    """Конфигурация сервиса хранилища.

    - size_unit: единица по умолчанию для total_size
    - continue_on_failure: поведение delete_buckets по умолчанию
    - directory_separator: разделитель директорий в ключах
    """
    size_unit: StorageUnit = StorageUnit.MEGABYTE
    continue_on_failure: bool = False
    directory_separator: str = DIRECTORY_SEPARATOR


class StorageService:
    """Сервис хранилища поверх ObjectStorageManager."""

    def __init__(
        self,
        manager: ObjectStorageManager,
        config: Optional[StorageServiceConfig] = None,
        engine: Optional[TemporalEngine] = None,
    ):
        self.manager = manager
        self.config = config if config is not None else StorageServiceConfig()
        self.engine = engine if engine is not None else TemporalEngine()

    # -------------------------------------------------------------------------
    # Листинг
    # -------------------------------------------------------------------------

    def _filter_objects(
        self,
        bucket: str,
        predicate: Callable[[StoredObject], bool],
        prefix: Optional[str] = None,
    ) -> List[StoredObject]:
        objects = self.manager.list_objects(bucket, prefix) or []
        return [obj for obj in objects if predicate(obj)]

    def list_objects(self, bucket: str) -> List[StoredObject]:
        return list(self.manager.list_objects(bucket, None) or [])

    def list_prefix_objects(self, bucket: str, prefix: str) -> List[StoredObject]:
        return list(self.manager.list_objects(bucket, prefix) or [])

    def list_suffix_objects(self, bucket: str, suffix: str) -> List[StoredObject]:
        return self._filter_objects(bucket, lambda obj: obj.key.endswith(suffix))

    def list_pattern_objects(self, bucket: str, pattern: str) -> List[StoredObject]:
        """Объекты, ключ которых полностью совпадает с regex pattern"""
        compiled = re.compile(pattern)
        return self._filter_objects(bucket, lambda obj: compiled.fullmatch(obj.key) is not None)

    def list_prior_date_objects(self, bucket: str, instant: Any) -> List[StoredObject]:
        """Объекты, изменённые строго раньше instant"""
        threshold = to_instant(instant)
        return self._filter_objects(bucket, lambda obj: obj.last_modified < threshold)

    def list_posterior_date_objects(self, bucket: str, instant: Any) -> List[StoredObject]:
        """Объекты, изменённые строго позже instant"""
        threshold = to_instant(instant)
        return self._filter_objects(bucket, lambda obj: obj.last_modified > threshold)

    def list_period_objects(self, bucket: str, period: Period) -> List[StoredObject]:
        """Объекты, изменённые внутри [period.start, period.end)"""
        return self._filter_objects(bucket, lambda obj: period.contains(obj.last_modified))

    def list_units_prior_objects(
        self,
        bucket: str,
        amount: int,
        unit: Any,
        reference: Optional[Any] = None,
    ) -> List[StoredObject]:
        """Объекты старше, чем amount единиц unit до reference (по умолчанию — сейчас).

        Например, amount=2, unit=WEEK — всё, что изменено более двух недель назад.
        """
        threshold = self.engine.prior(amount, unit, reference)
        return self.list_prior_date_objects(bucket, threshold)

    def list_last_period_objects(
        self,
        bucket: str,
        granularity: Any,
        reference: Optional[Any] = None,
    ) -> List[StoredObject]:
        """Объекты из предыдущей выровненной единицы (last week, last month, ...)."""
        return self.list_period_objects(bucket, self.engine.last_period(granularity, reference))

    def list_past_period_objects(
        self,
        bucket: str,
        granularity: Any,
        reference: Optional[Any] = None,
    ) -> List[StoredObject]:
        """Объекты из скользящего окна (past hour, past day, ...)."""
        return self.list_period_objects(bucket, self.engine.past_period(granularity, reference))

    def list_buckets(self) -> List[Bucket]:
        return list(self.manager.list_buckets() or [])

    def list_buckets_created_before(self, instant: Any) -> List[Bucket]:
        threshold = to_instant(instant)
        return [bucket for bucket in self.list_buckets() if bucket.created_at < threshold]

    def list_buckets_created_after(self, instant: Any) -> List[Bucket]:
        threshold = to_instant(instant)
        return [bucket for bucket in self.list_buckets() if bucket.created_at > threshold]

    # -------------------------------------------------------------------------
    # Удаление
    # -------------------------------------------------------------------------

    def delete_objects(self, bucket: str, keys: Sequence[str]) -> DeletionResult:
        """Удаление объектов по ключам; пустой список не вызывает API."""
        keys = list(keys)
        if not keys:
            return DeletionResult(bucket=bucket)

        result = self.manager.delete_objects(bucket, keys)
        logger.info(
            f"Deleted {result.deleted_count}/{len(keys)} objects from bucket '{bucket}'"
        )
        if result.failed_keys:
            logger.warning(
                f"Failed to delete {len(result.failed_keys)} objects from bucket '{bucket}'"
            )
        return result

    def _delete_listed(self, bucket: str, objects: Sequence[StoredObject]) -> DeletionResult:
        return self.delete_objects(bucket, [obj.key for obj in objects])

    def delete_prefix_objects(self, bucket: str, prefix: str) -> DeletionResult:
        return self._delete_listed(bucket, self.list_prefix_objects(bucket, prefix))

    def delete_directory_objects(self, bucket: str, directory_path: str) -> DeletionResult:
        """Удаление всех объектов директории.

        Raises:
            InvalidDirectoryPath: Если путь не оканчивается разделителем
        """
        validate_directory_path(directory_path, self.config.directory_separator)
        return self.delete_prefix_objects(bucket, directory_path)

    def delete_prior_date_objects(self, bucket: str, instant: Any) -> DeletionResult:
        return self._delete_listed(bucket, self.list_prior_date_objects(bucket, instant))

    def delete_posterior_date_objects(self, bucket: str, instant: Any) -> DeletionResult:
        return self._delete_listed(bucket, self.list_posterior_date_objects(bucket, instant))

    def delete_period_objects(self, bucket: str, period: Period) -> DeletionResult:
        return self._delete_listed(bucket, self.list_period_objects(bucket, period))

    def empty_bucket(self, bucket: str) -> DeletionResult:
        return self._delete_listed(bucket, self.list_objects(bucket))

    def delete_bucket(self, bucket: str, force: bool = False) -> None:
        """Удаление бакета; force=True предварительно удаляет все объекты."""
        if force:
            self.empty_bucket(bucket)
        self.manager.delete_bucket(bucket)
        logger.info(f"Deleted bucket '{bucket}'")

    def delete_buckets(
        self,
        buckets: Mapping[str, bool],
        continue_on_failure: Optional[bool] = None,
    ) -> Dict[str, bool]:
        """Удаление нескольких бакетов.

        Args:
            buckets: {имя бакета: force}
            continue_on_failure: Пропускать ошибки (None — из конфигурации)

        Returns:
            {имя бакета: True если удалён}
        """
        if continue_on_failure is None:
            continue_on_failure = self.config.continue_on_failure

        outcome: Dict[str, bool] = {}
        for name, force in buckets.items():
            try:
                self.delete_bucket(name, force)
            except Exception as e:
                if not continue_on_failure:
                    raise
                logger.error(f"Failed to delete bucket '{name}': {e}")
                outcome[name] = False
            else:
                outcome[name] = True
        return outcome

    # -------------------------------------------------------------------------
    # Агрегация
    # -------------------------------------------------------------------------

    def total_size(
        self,
        bucket: str,
        unit: Optional[Any] = None,
        prefix: Optional[str] = None,
    ) -> float:
        """Суммарный размер объектов бакета (или префикса) в unit."""
        target = resolve_storage_unit(unit if unit is not None else self.config.size_unit)
        total_bytes = sum(obj.size_bytes for obj in self.manager.list_objects(bucket, prefix) or [])

        if target is StorageUnit.BYTE:
            return float(total_bytes)
        return convert_storage_unit(total_bytes, StorageUnit.BYTE, target)

    def directory_size(
        self,
        bucket: str,
        directory_path: str,
        unit: Optional[Any] = None,
    ) -> float:
        """Суммарный размер объектов директории в unit.

        Raises:
            InvalidDirectoryPath: Если путь не оканчивается разделителем
        """
        validate_directory_path(directory_path, self.config.directory_separator)
        return self.total_size(bucket, unit, prefix=directory_path)
