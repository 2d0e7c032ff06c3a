"""
Key paths — Классификация ключей объектов

Ключ, оканчивающийся разделителем, считается директорией.
"""

from typing import Final


DIRECTORY_SEPARATOR: Final[str] = "/"


class InvalidDirectoryPath(Exception):
    """Путь директории не оканчивается разделителем"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid directory path (must end with '{DIRECTORY_SEPARATOR}'): {path!r}")


def is_directory(key: str, separator: str = DIRECTORY_SEPARATOR) -> bool:
    return key.endswith(separator)


def is_file(key: str, separator: str = DIRECTORY_SEPARATOR) -> bool:
    return not key.endswith(separator)


def validate_directory_path(path: str, separator: str = DIRECTORY_SEPARATOR) -> str:
    """
    Raises:
        InvalidDirectoryPath: Если path не директория
    """
    if not path or not is_directory(path, separator):
        raise InvalidDirectoryPath(path)
    return path
