"""Error Hierarchy — typed, categorized exceptions for all Doomsday failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are recoverable; programming errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DoomsdayError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - The pure core raises only programming errors; everything else it computes is total
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    date: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class DoomsdayError(Exception):
    """Base exception for all Doomsday errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "date": self.context.date,
                },
            }
        }


# ─── Validation Errors (400-level) ──────────────────────────────

class InvalidDateError(DoomsdayError):
    """Date does not exist in the Gregorian calendar (strict mode only)."""
    def __init__(self, date: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.date = date
        super().__init__(
            f"'{date}' is not a valid Gregorian calendar date after 1583",
            "INVALID_DATE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class RangeParseError(DoomsdayError):
    """Unknown random-date range letter."""
    def __init__(self, text: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not parse '{text}' range. Use M, Y, C or A.",
            "RANGE_PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.text = text


# ─── Programming Errors (500-level) ─────────────────────────────

class EmptyMnemonicError(DoomsdayError):
    """Nearest-doomsday search called with no anchors to measure against."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "It does not make sense to measure distance to nothing: mnemonic is empty",
            "EMPTY_MNEMONIC", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )

