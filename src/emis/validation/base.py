"""
Validation API for EMIS records.

``validate`` turns any input into a ``ValidationResult``: either the parsed
record or the complete list of violations, each with a wire-name path, a
violation kind and a human-readable message. Bad data never raises here;
callers that want an exception use ``validate_or_raise``.
"""

from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from emis.app_logger import get_logger
from emis.exceptions import RecordValidationError
from emis.schemas.base import EMISModel

log = get_logger("validation")

PathItem = Union[str, int]
SchemaRef = Union[str, type[EMISModel]]


class ViolationKind(Enum):
    """Why a value was rejected."""

    INVALID_FORMAT = "invalid_format"
    OUT_OF_RANGE = "out_of_range"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    MISSING = "missing"
    INVALID_CHOICE = "invalid_choice"
    INVALID_TYPE = "invalid_type"
    CROSS_FIELD = "cross_field"
    OTHER = "other"

    @classmethod
    def from_error_type(cls, error_type: str) -> "ViolationKind":
        """Map a pydantic error type (or one of our own custom kinds) to a kind."""
        try:
            return cls(error_type)
        except ValueError:
            return _ERROR_TYPE_KINDS.get(error_type, cls.OTHER)


class ValidationSeverity(Enum):
    """Structural violations are always errors; rules may downgrade to warnings."""

    ERROR = "error"
    WARNING = "warning"


_ERROR_TYPE_KINDS: dict[str, ViolationKind] = {
    # lengths
    "string_too_short": ViolationKind.TOO_SHORT,
    "too_short": ViolationKind.TOO_SHORT,
    "string_too_long": ViolationKind.TOO_LONG,
    "too_long": ViolationKind.TOO_LONG,
    # bounds
    "greater_than": ViolationKind.OUT_OF_RANGE,
    "greater_than_equal": ViolationKind.OUT_OF_RANGE,
    "less_than": ViolationKind.OUT_OF_RANGE,
    "less_than_equal": ViolationKind.OUT_OF_RANGE,
    "finite_number": ViolationKind.OUT_OF_RANGE,
    # shape
    "string_pattern_mismatch": ViolationKind.INVALID_FORMAT,
    "uuid_parsing": ViolationKind.INVALID_FORMAT,
    "url_parsing": ViolationKind.INVALID_FORMAT,
    "value_error": ViolationKind.INVALID_FORMAT,
    # choices
    "literal_error": ViolationKind.INVALID_CHOICE,
    "enum": ViolationKind.INVALID_CHOICE,
    # types
    "string_type": ViolationKind.INVALID_TYPE,
    "int_type": ViolationKind.INVALID_TYPE,
    "int_parsing": ViolationKind.INVALID_TYPE,
    "int_from_float": ViolationKind.INVALID_TYPE,
    "float_type": ViolationKind.INVALID_TYPE,
    "float_parsing": ViolationKind.INVALID_TYPE,
    "bool_type": ViolationKind.INVALID_TYPE,
    "bool_parsing": ViolationKind.INVALID_TYPE,
    "list_type": ViolationKind.INVALID_TYPE,
    "dict_type": ViolationKind.INVALID_TYPE,
    "model_type": ViolationKind.INVALID_TYPE,
    "model_attributes_type": ViolationKind.INVALID_TYPE,
    "none_required": ViolationKind.INVALID_TYPE,
}


class Violation(BaseModel):
    """A single rejected value inside a record."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: tuple[PathItem, ...] = Field(
        default=(), description="Keys and list indices from the record root, using wire names"
    )
    kind: ViolationKind
    message: str
    input: Optional[Any] = Field(default=None, description="The offending value, when there is one")
    severity: ValidationSeverity = ValidationSeverity.ERROR

    @property
    def location(self) -> str:
        """Dotted form of ``path``, e.g. ``roles.0.schoolId``."""
        return ".".join(str(p) for p in self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "location": self.location,
            "kind": self.kind.value,
            "message": self.message,
            "input": self.input,
            "severity": self.severity.value,
        }

    def is_error(self) -> bool:
        return self.severity == ValidationSeverity.ERROR


class ValidationResult(BaseModel):
    """Outcome of validating one record against one schema."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    schema_name: str
    valid: bool
    violations: list[Violation] = Field(default_factory=list)
    record: Optional[EMISModel] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema_name,
            "valid": self.valid,
            "violations": [v.to_dict() for v in self.violations],
        }


def violations_from_error(exc: ValidationError) -> list[Violation]:
    """Translate every pydantic error into a ``Violation``, preserving order."""
    out: list[Violation] = []
    for err in exc.errors(include_url=False):
        kind = ViolationKind.from_error_type(err["type"])
        out.append(
            Violation(
                path=tuple(err["loc"]),
                kind=kind,
                message=err["msg"],
                # for a missing key pydantic reports the enclosing object as input
                input=None if kind is ViolationKind.MISSING else err.get("input"),
            )
        )
    return out


def _resolve(schema: SchemaRef) -> type[EMISModel]:
    if isinstance(schema, str):
        from emis.validation.registry import get_schema

        return get_schema(schema)
    return schema


def validate(schema: SchemaRef, data: Any) -> ValidationResult:
    """
    Validate ``data`` against ``schema`` (a model class or a registered name).

    Never raises for bad data. The result lists every violation found, in
    the order pydantic reports them, so the same input always produces the
    same result.
    """
    model = _resolve(schema)
    try:
        record = model.model_validate(data)
    except ValidationError as exc:
        violations = violations_from_error(exc)
        log.debug("%s: %d violation(s)", model.__name__, len(violations))
        return ValidationResult(schema_name=model.__name__, valid=False, violations=violations)
    log.debug("%s: valid", model.__name__)
    return ValidationResult(schema_name=model.__name__, valid=True, record=record)


def validate_or_raise(schema: SchemaRef, data: Any) -> EMISModel:
    """Return the parsed record or raise ``RecordValidationError`` with all violations."""
    model = _resolve(schema)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RecordValidationError(model.__name__, violations_from_error(exc), cause=exc) from exc


def iter_validate(schema: SchemaRef, records: Iterable[Any]) -> Iterator[ValidationResult]:
    model = _resolve(schema)
    for data in records:
        yield validate(model, data)


def validate_many(schema: SchemaRef, records: Iterable[Any]) -> list[ValidationResult]:
    """Validate a batch (bulk import). One result per input record, same order."""
    results = list(iter_validate(schema, records))
    invalid = sum(1 for r in results if not r.valid)
    log.info(
        "Validated %d %s record(s): %d valid, %d invalid",
        len(results),
        _resolve(schema).__name__,
        len(results) - invalid,
        invalid,
    )
    return results


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
]
