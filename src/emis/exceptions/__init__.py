"""
EMIS Exception Hierarchy

Structured exceptions for the schema layer. Validation of bad *data* never
raises (see ``emis.validation.validate``); these exceptions are for callers
that opt into raising (``validate_or_raise``), for registry lookups, and for
business rules configured to fail hard.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from emis.validation.base import Violation


class ErrorSeverity(Enum):
    """Error severity levels for categorizing exceptions."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class EMISError(Exception):
    """
    Base exception class for all EMIS errors.

    Attributes
    ----------
    message : str
        Human-readable error message
    error_code : str
        Machine-readable error code for categorization
    severity : ErrorSeverity
        Error severity level
    context : Dict[str, Any]
        Additional error context and metadata
    timestamp : datetime
        When the error occurred
    cause : Optional[Exception]
        Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.context = dict(context or {})
        self.timestamp = datetime.now(timezone.utc)
        self.cause = cause

        self.context.update(
            {
                "timestamp": self.timestamp.isoformat(),
                "error_code": self.error_code,
                "severity": self.severity.value,
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for logging and serialization.

        Returns
        -------
        Dict[str, Any]
            Structured error data with all metadata
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None,
            "exception_type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"severity={self.severity.value}"
            f")"
        )


class SchemaNotFoundError(EMISError):
    """Raised when a schema name is not present in the registry."""

    def __init__(self, schema_name: str, available: Optional[List[str]] = None) -> None:
        super().__init__(
            message=f"Unknown schema '{schema_name}'",
            error_code="schema_not_found",
            severity=ErrorSeverity.LOW,
            context={"schema_name": schema_name, "available_count": len(available or [])},
        )
        self.schema_name = schema_name
        self.available = list(available or [])


class RecordValidationError(EMISError):
    """
    Raised by ``validate_or_raise`` when a record fails its schema.

    Carries every violation so a caller can report them all in one pass.
    """

    def __init__(
        self,
        schema_name: str,
        violations: List["Violation"],
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message=f"{schema_name} failed validation with {len(violations)} violation(s)",
            error_code="record_invalid",
            severity=ErrorSeverity.MEDIUM,
            context={"schema_name": schema_name, "violation_count": len(violations)},
            cause=cause,
        )
        self.schema_name = schema_name
        self.violations = list(violations)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["violations"] = [v.to_dict() for v in self.violations]
        return data


class BusinessRuleError(EMISError):
    """Raised when a business rule is configured with the ``error`` policy and fails."""

    def __init__(self, rule: str, violations: List["Violation"]) -> None:
        super().__init__(
            message=f"Business rule '{rule}' failed with {len(violations)} violation(s)",
            error_code="business_rule_failed",
            severity=ErrorSeverity.HIGH,
            context={"rule": rule, "violation_count": len(violations)},
        )
        self.rule = rule
        self.violations = list(violations)


__all__ = [
    "ErrorSeverity",
    "EMISError",
    "SchemaNotFoundError",
    "RecordValidationError",
    "BusinessRuleError",
]
