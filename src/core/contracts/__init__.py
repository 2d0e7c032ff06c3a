"""
Contract Validation Module

JSON Schema контракты периодов, объектов и бакетов chronostore.
"""

from .validators import (
    SCHEMA_DIR,
    Contract,
    SchemaRegistry,
    contract_validator,
    validate_bucket,
    validate_contract,
    validate_period,
    validate_stored_object,
)

__all__ = [
    "SCHEMA_DIR",
    "Contract",
    "SchemaRegistry",
    "contract_validator",
    "validate_contract",
    "validate_period",
    "validate_stored_object",
    "validate_bucket",
]
