"""Error Hierarchy — typed, categorized exceptions for all passport-check failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only corrupt input, bad configuration or contract violations raise
    - An invalid field value is never an error: validators return False
    - to_response() produces the structured envelope the CLI logs at DEBUG

Design Decisions:
    - Single hierarchy with PassportCheckError base: the CLI catches one type (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and exit handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    PARSE = "parse"
    IO = "io"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where in the input the failure happened."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_index: int | None = None
    field_name: str | None = None
    token: str | None = None
    source: str | None = None


class PassportCheckError(Exception):
    """Base exception for all passport-check errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        exit_code: int = 1,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.exit_code = exit_code

    def to_response(self) -> dict:
        """Convert to the standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "record_index": self.context.record_index,
                    "field_name": self.context.field_name,
                    "token": self.context.token,
                    "source": self.context.source,
                },
            }
        }


# ─── Input Errors ───────────────────────────────────────────────

class MalformedFieldError(PassportCheckError):
    """A token inside a record has no name:value separator."""
    def __init__(self, token: str, record_index: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.token = token
        ctx.record_index = record_index
        super().__init__(
            f"Malformed field {token!r} in record #{record_index}: expected name:value",
            "MALFORMED_FIELD", ErrorCategory.PARSE,
            ErrorSeverity.CRITICAL, ctx, 2,
        )
        self.token = token
        self.record_index = record_index


class InputSourceError(PassportCheckError):
    """The input blob could not be read."""
    def __init__(self, source: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.source = source
        super().__init__(
            f"Cannot read input {source}: {reason}",
            "INPUT_UNAVAILABLE", ErrorCategory.IO,
            ErrorSeverity.CRITICAL, ctx, 3,
        )
        self.source = source


# ─── Contract Errors ────────────────────────────────────────────

class UnknownFieldError(PassportCheckError):
    """Validator lookup for a field name the registry does not hold."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"No validator registered for field '{field_name}'",
            "UNKNOWN_FIELD", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, ctx, 1,
        )
        self.field_name = field_name
