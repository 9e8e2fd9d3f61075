"""EMIS domain data model and validation schemas."""

__version__ = "0.1.0"

from emis.exceptions import (  # noqa: E402
    BusinessRuleError,
    EMISError,
    RecordValidationError,
    SchemaNotFoundError,
)
from emis.validation import (  # noqa: E402
    ValidationResult,
    Violation,
    ViolationKind,
    get_schema,
    list_schemas,
    validate,
    validate_many,
    validate_or_raise,
)

__all__ = [
    "__version__",
    "EMISError",
    "RecordValidationError",
    "SchemaNotFoundError",
    "BusinessRuleError",
    "Violation",
    "ViolationKind",
    "ValidationResult",
    "validate",
    "validate_or_raise",
    "validate_many",
    "get_schema",
    "list_schemas",
]
