"""
ObjectStorageManager — Интерфейс внешнего API объектного хранилища

Сервис хранилища работает только через этот протокол. Конкретная
привязка (S3 и т.п.) находится вне пакета.
"""

from typing import List, Optional, Protocol, Sequence

from src.storage.models import Bucket, DeletionResult, StoredObject


class ObjectStorageManager(Protocol):
    """Минимальный API хранилища: листинг и удаление"""

    def list_buckets(self) -> List[Bucket]:
        ...

    def list_objects(self, bucket: str, prefix: Optional[str] = None) -> List[StoredObject]:
        """Объекты бакета; prefix=None — все объекты"""
        ...

    def delete_objects(self, bucket: str, keys: Sequence[str]) -> DeletionResult:
        ...

    def delete_bucket(self, bucket: str) -> None:
        ...
