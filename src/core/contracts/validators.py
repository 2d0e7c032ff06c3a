"""
Contracts — JSON Schema контракты обмена движка и слоя хранилища

Каждый контракт описан схемой Draft 2020-12 в schema/<имя>.json и
компилируется в Draft202012Validator один раз на реестр.

Контракты:
- period: полуоткрытый период [start, end) в двух представлениях
  (ISO-8601 и epoch ms)
- stored_object: объект хранилища {key, size_bytes, last_modified}
- bucket: бакет {name, created}
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Final, Union

from jsonschema import Draft202012Validator, SchemaError


SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


class Contract(str, Enum):
    """Имя контракта = имя файла схемы без расширения"""

    PERIOD = "period"
    STORED_OBJECT = "stored_object"
    BUCKET = "bucket"


# =============================================================================
# REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр скомпилированных валидаторов.

    Схема читается с диска и проходит meta-validation при первом обращении,
    далее используется один и тот же валидатор.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._validators: Dict[str, Draft202012Validator] = {}

    def validator(self, contract: Union[Contract, str]) -> Draft202012Validator:
        """
        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если схема не проходит meta-validation
        """
        name = getattr(contract, "value", contract)
        compiled = self._validators.get(name)
        if compiled is None:
            compiled = self._validators[name] = self._compile(name)
        return compiled

    def schema(self, contract: Union[Contract, str]) -> Dict[str, Any]:
        return self.validator(contract).schema

    def _compile(self, name: str) -> Draft202012Validator:
        path = self._schema_dir / f"{name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e
        return Draft202012Validator(schema)


_REGISTRY = SchemaRegistry()


# =============================================================================
# API
# =============================================================================


def contract_validator(contract: Union[Contract, str]) -> Draft202012Validator:
    """Скомпилированный валидатор контракта из общего реестра"""
    return _REGISTRY.validator(contract)


def validate_contract(contract: Union[Contract, str], data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Первое нарушение схемы
    """
    _REGISTRY.validator(contract).validate(data)


def validate_period(data: Dict[str, Any]) -> None:
    validate_contract(Contract.PERIOD, data)


def validate_stored_object(data: Dict[str, Any]) -> None:
    validate_contract(Contract.STORED_OBJECT, data)


def validate_bucket(data: Dict[str, Any]) -> None:
    validate_contract(Contract.BUCKET, data)
