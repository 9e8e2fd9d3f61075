# src/emis/validation/__init__.py
from .base import (
    ValidationResult,
    ValidationSeverity,
    Violation,
    ViolationKind,
    iter_validate,
    validate,
    validate_many,
    validate_or_raise,
    violations_from_error,
)
from .registry import SCHEMA_REGISTRY, get_schema, list_schemas

__all__ = [
    "ViolationKind",
    "ValidationSeverity",
    "Violation",
    "ValidationResult",
    "violations_from_error",
    "validate",
    "validate_or_raise",
    "iter_validate",
    "validate_many",
    "SCHEMA_REGISTRY",
    "get_schema",
    "list_schemas",
]
