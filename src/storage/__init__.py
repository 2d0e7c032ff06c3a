"""
Storage management layer.

Thin delegation over an external object-storage API, filtered by instants
and periods computed by the core temporal engine.
"""

from src.storage.manager import ObjectStorageManager
from src.storage.models import Bucket, DeletionResult, StoredObject
from src.storage.paths import (
    DIRECTORY_SEPARATOR,
    InvalidDirectoryPath,
    is_directory,
    is_file,
    validate_directory_path,
)
from src.storage.service import StorageService, StorageServiceConfig

__all__ = [
    "ObjectStorageManager",
    "Bucket",
    "DeletionResult",
    "StoredObject",
    "DIRECTORY_SEPARATOR",
    "InvalidDirectoryPath",
    "is_directory",
    "is_file",
    "validate_directory_path",
    "StorageService",
    "StorageServiceConfig",
]
