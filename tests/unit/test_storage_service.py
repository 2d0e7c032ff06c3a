"""
Тесты для StorageService — фильтры по датам, удаление, агрегация размеров

Менеджер хранилища подменяется in-memory реализацией протокола
ObjectStorageManager; время фиксировано через FixedClock.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

import pytest

from src.core.domain import (
    Granularity,
    Period,
    PeriodGranularity,
    StorageUnit,
    UnsupportedGranularity,
)
from src.core.time import FixedClock, TemporalEngine
from src.storage import (
    Bucket,
    DeletionResult,
    InvalidDirectoryPath,
    StorageService,
    StorageServiceConfig,
    StoredObject,
    is_directory,
    is_file,
)


UTC = timezone.utc


# =============================================================================
# IN-MEMORY MANAGER
# =============================================================================


class InMemoryStorageManager:
    """Реализация ObjectStorageManager поверх словарей"""

    def __init__(self, buckets: Dict[str, Bucket], objects: Dict[str, List[StoredObject]]):
        self.buckets = dict(buckets)
        self.objects = {name: list(items) for name, items in objects.items()}
        self.delete_calls: List[tuple] = []
        self.failing_keys: set = set()
        self.failing_buckets: set = set()

    def list_buckets(self) -> List[Bucket]:
        return list(self.buckets.values())

    def list_objects(self, bucket: str, prefix: Optional[str] = None) -> List[StoredObject]:
        items = self.objects.get(bucket, [])
        if prefix is None:
            return list(items)
        return [obj for obj in items if obj.key.startswith(prefix)]

    def delete_objects(self, bucket: str, keys: Sequence[str]) -> DeletionResult:
        self.delete_calls.append((bucket, tuple(keys)))
        deleted = tuple(key for key in keys if key not in self.failing_keys)
        failed = tuple(key for key in keys if key in self.failing_keys)
        self.objects[bucket] = [obj for obj in self.objects[bucket] if obj.key not in deleted]
        return DeletionResult(bucket=bucket, deleted_keys=deleted, failed_keys=failed)

    def delete_bucket(self, bucket: str) -> None:
        if bucket in self.failing_buckets:
            raise RuntimeError("BucketNotEmpty")
        del self.buckets[bucket]
        self.objects.pop(bucket, None)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def manager() -> InMemoryStorageManager:
    objects = [
        StoredObject(key="logs/a.log", size_bytes=1024, last_modified=datetime(1996, 4, 10, 12, tzinfo=UTC)),
        StoredObject(key="logs/b.log", size_bytes=2048, last_modified=datetime(1996, 4, 16, 8, tzinfo=UTC)),
        StoredObject(key="data/c.csv", size_bytes=1048576, last_modified=datetime(1996, 3, 20, tzinfo=UTC)),
        StoredObject(key="data/d.csv", size_bytes=0, last_modified=datetime(1995, 12, 31, 23, 59, 59, tzinfo=UTC)),
    ]
    buckets = {
        "archive": Bucket(name="archive", created_at=datetime(1990, 1, 1, tzinfo=UTC)),
        "empty-bucket": Bucket(name="empty-bucket", created_at=datetime(1996, 4, 1, tzinfo=UTC)),
    }
    return InMemoryStorageManager(buckets, {"archive": objects, "empty-bucket": []})


@pytest.fixture
def service(manager: InMemoryStorageManager) -> StorageService:
    engine = TemporalEngine(clock=FixedClock(datetime(1996, 4, 18, 9, tzinfo=UTC)))
    return StorageService(manager, engine=engine)


def keys(objects: List[StoredObject]) -> List[str]:
    return sorted(obj.key for obj in objects)


# =============================================================================
# ТЕСТЫ: листинг
# =============================================================================


class TestListing:
    """Фильтры по ключу и по дате изменения"""

    def test_list_all(self, service: StorageService) -> None:
        assert len(service.list_objects("archive")) == 4

    def test_prefix(self, service: StorageService) -> None:
        assert keys(service.list_prefix_objects("archive", "logs/")) == ["logs/a.log", "logs/b.log"]

    def test_suffix(self, service: StorageService) -> None:
        assert keys(service.list_suffix_objects("archive", ".csv")) == ["data/c.csv", "data/d.csv"]

    def test_pattern_is_full_match(self, service: StorageService) -> None:
        assert keys(service.list_pattern_objects("archive", r"logs/[a-z]\.log")) == [
            "logs/a.log",
            "logs/b.log",
        ]
        assert service.list_pattern_objects("archive", r"logs") == []

    def test_prior_date_is_strict(self, service: StorageService) -> None:
        threshold = datetime(1996, 4, 10, 12, tzinfo=UTC)
        assert keys(service.list_prior_date_objects("archive", threshold)) == [
            "data/c.csv",
            "data/d.csv",
        ]

    def test_posterior_date_is_strict(self, service: StorageService) -> None:
        threshold = datetime(1996, 4, 10, 12, tzinfo=UTC)
        assert keys(service.list_posterior_date_objects("archive", threshold)) == ["logs/b.log"]

    def test_period_is_half_open(self, service: StorageService) -> None:
        period = Period(
            start=datetime(1996, 4, 10, 12, tzinfo=UTC),
            end=datetime(1996, 4, 16, 8, tzinfo=UTC),
        )
        assert keys(service.list_period_objects("archive", period)) == ["logs/a.log"]

    def test_last_week(self, service: StorageService) -> None:
        assert keys(service.list_last_period_objects("archive", PeriodGranularity.WEEK)) == [
            "logs/a.log"
        ]

    def test_last_trimester(self, service: StorageService) -> None:
        """Прошлый квартал [01.01.1996, 01.04.1996)"""
        assert keys(service.list_last_period_objects("archive", "trimester")) == ["data/c.csv"]

    def test_units_prior(self, service: StorageService) -> None:
        """Всё, что изменено более двух недель назад"""
        assert keys(service.list_units_prior_objects("archive", 2, Granularity.WEEK)) == [
            "data/c.csv",
            "data/d.csv",
        ]

    def test_past_month(self, service: StorageService) -> None:
        assert keys(service.list_past_period_objects("archive", PeriodGranularity.MONTH)) == [
            "data/c.csv",
            "logs/a.log",
            "logs/b.log",
        ]

    def test_explicit_reference(self, service: StorageService) -> None:
        reference = datetime(1996, 1, 3, tzinfo=UTC)
        assert keys(service.list_last_period_objects("archive", "year", reference)) == ["data/d.csv"]

    def test_unsupported_granularity_propagates(self, service: StorageService) -> None:
        with pytest.raises(UnsupportedGranularity):
            service.list_last_period_objects("archive", "fortnight")

    def test_buckets_created_before(self, service: StorageService) -> None:
        buckets = service.list_buckets_created_before(datetime(1996, 1, 1, tzinfo=UTC))
        assert [bucket.name for bucket in buckets] == ["archive"]

    def test_buckets_created_after(self, service: StorageService) -> None:
        buckets = service.list_buckets_created_after(datetime(1996, 1, 1, tzinfo=UTC))
        assert [bucket.name for bucket in buckets] == ["empty-bucket"]

    def test_buckets_created_after_is_strict(self, service: StorageService) -> None:
        assert service.list_buckets_created_after(datetime(1996, 4, 1, tzinfo=UTC)) == []


# =============================================================================
# ТЕСТЫ: удаление
# =============================================================================


class TestDeletion:
    """Удаление объектов и бакетов"""

    def test_delete_directory(self, service: StorageService, manager: InMemoryStorageManager) -> None:
        result = service.delete_directory_objects("archive", "logs/")
        assert sorted(result.deleted_keys) == ["logs/a.log", "logs/b.log"]
        assert keys(service.list_objects("archive")) == ["data/c.csv", "data/d.csv"]

    @pytest.mark.parametrize("path", ["logs", ""])
    def test_invalid_directory_path(self, service: StorageService, manager: InMemoryStorageManager, path: str) -> None:
        with pytest.raises(InvalidDirectoryPath):
            service.delete_directory_objects("archive", path)
        assert manager.delete_calls == []

    def test_empty_key_list_skips_manager(
        self, service: StorageService, manager: InMemoryStorageManager
    ) -> None:
        result = service.delete_objects("archive", [])
        assert result == DeletionResult(bucket="archive")
        assert manager.delete_calls == []

    def test_no_match_skips_manager(self, service: StorageService, manager: InMemoryStorageManager) -> None:
        result = service.delete_posterior_date_objects("archive", datetime(2000, 1, 1, tzinfo=UTC))
        assert result.deleted_count == 0
        assert manager.delete_calls == []

    def test_delete_prior_date(self, service: StorageService) -> None:
        result = service.delete_prior_date_objects("archive", datetime(1996, 1, 1, tzinfo=UTC))
        assert result.deleted_keys == ("data/d.csv",)
        assert len(service.list_objects("archive")) == 3

    def test_delete_period(self, service: StorageService) -> None:
        period = Period(start=datetime(1996, 3, 1, tzinfo=UTC), end=datetime(1996, 4, 1, tzinfo=UTC))
        assert service.delete_period_objects("archive", period).deleted_keys == ("data/c.csv",)

    def test_partial_failure_logged(
        self,
        service: StorageService,
        manager: InMemoryStorageManager,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        manager.failing_keys = {"logs/b.log"}
        with caplog.at_level(logging.INFO, logger="src.storage.service"):
            result = service.delete_prefix_objects("archive", "logs/")
        assert not result.is_complete
        assert "Deleted 1/2 objects from bucket 'archive'" in caplog.text
        assert any(record.levelno == logging.WARNING for record in caplog.records)

    def test_empty_bucket(self, service: StorageService) -> None:
        assert service.empty_bucket("archive").deleted_count == 4
        assert service.list_objects("archive") == []

    def test_force_delete_bucket(self, service: StorageService, manager: InMemoryStorageManager) -> None:
        service.delete_bucket("archive", force=True)
        assert "archive" not in manager.buckets
        assert manager.delete_calls[0][0] == "archive"

    def test_delete_buckets_stops_on_failure(
        self, service: StorageService, manager: InMemoryStorageManager
    ) -> None:
        manager.failing_buckets = {"archive"}
        with pytest.raises(RuntimeError, match="BucketNotEmpty"):
            service.delete_buckets({"archive": False, "empty-bucket": False})
        assert "empty-bucket" in manager.buckets

    def test_delete_buckets_continue_on_failure(
        self,
        service: StorageService,
        manager: InMemoryStorageManager,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        manager.failing_buckets = {"archive"}
        with caplog.at_level(logging.ERROR, logger="src.storage.service"):
            outcome = service.delete_buckets(
                {"archive": False, "empty-bucket": False}, continue_on_failure=True
            )
        assert outcome == {"archive": False, "empty-bucket": True}
        assert "Failed to delete bucket 'archive': BucketNotEmpty" in caplog.text

    def test_continue_on_failure_from_config(self, manager: InMemoryStorageManager) -> None:
        manager.failing_buckets = {"archive"}
        service = StorageService(manager, config=StorageServiceConfig(continue_on_failure=True))
        assert service.delete_buckets({"archive": True}) == {"archive": False}


# =============================================================================
# ТЕСТЫ: агрегация размера
# =============================================================================


class TestTotalSize:
    """total_size с конверсией единиц"""

    def test_bytes(self, service: StorageService) -> None:
        assert service.total_size("archive", StorageUnit.BYTE) == 1051648.0

    def test_kilobytes(self, service: StorageService) -> None:
        assert service.total_size("archive", "kilobyte") == 1027.0

    def test_prefix(self, service: StorageService) -> None:
        assert service.total_size("archive", StorageUnit.KILOBYTE, prefix="logs/") == 3.0

    def test_default_unit_from_config(self, service: StorageService) -> None:
        assert service.total_size("archive") == pytest.approx(1051648 / 1024**2)

    def test_empty_bucket_is_zero(self, service: StorageService) -> None:
        assert service.total_size("empty-bucket", StorageUnit.GIGABYTE) == 0.0

    def test_directory_size(self, service: StorageService) -> None:
        assert service.directory_size("archive", "logs/", StorageUnit.KILOBYTE) == 3.0
        assert service.directory_size("archive", "data/", "megabyte") == 1.0

    @pytest.mark.parametrize("path", ["logs", ""])
    def test_directory_size_requires_directory_path(
        self, service: StorageService, path: str
    ) -> None:
        with pytest.raises(InvalidDirectoryPath):
            service.directory_size("archive", path, StorageUnit.BYTE)


class TestKeyPaths:
    """Классификация ключей"""

    def test_directory_and_file(self) -> None:
        assert is_directory("logs/")
        assert is_file("logs/a.log")
        assert not is_directory("logs")
