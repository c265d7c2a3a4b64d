"""Error Hierarchy — typed, categorized exceptions for every request failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors are 400-level with WARNING severity; only unexpected failures reach 500
    - to_response() produces the {success: false, error: <message>} envelope
    - No secret material is ever copied into a message or context

Design Decisions:
    - Single hierarchy with SolscribeError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Messages are the user-facing contract; codes are for logs and tests
"""

from dataclasses import dataclass, field as dc_field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity; selects the log level of the handled error."""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ENCODING = "encoding"
    BUSINESS_RULE = "business_rule"
    INSTRUCTION = "instruction"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = dc_field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class SolscribeError(Exception):
    """Base exception for all Solscribe errors."""

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
        """Convert to the error variant of the response envelope."""
        return {"success": False, "error": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "severity": self.severity.value,
            "field": self.context.field,
            "operation": self.context.operation,
        }


# ─── Parsing Errors (400-level) ──────────────────────────────────

class InvalidPublicKeyError(SolscribeError):
    """Text did not decode to a 32-byte public key."""
    def __init__(
        self, label: str, context: ErrorContext | None = None,
        message: str | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field = ctx.field or label
        super().__init__(
            message or f"Invalid {label} pubkey", "INVALID_PUBLIC_KEY",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, ctx, 400,
        )


class InvalidSecretKeyError(SolscribeError):
    """Secret material has the wrong length or an inconsistent public half."""
    def __init__(
        self, message: str = "Invalid secret key", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_SECRET_KEY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidSignatureFormatError(SolscribeError):
    """Signature bytes are not exactly 64 long."""
    def __init__(
        self, message: str = "Invalid signature format",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_SIGNATURE_FORMAT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidBase64Error(SolscribeError):
    """Text is not valid standard base-64."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_BASE64", ErrorCategory.ENCODING,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidBase58Error(SolscribeError):
    """Text contains characters outside the base-58 alphabet."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_BASE58", ErrorCategory.ENCODING,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidMessageEncodingError(SolscribeError):
    """Message text has no UTF-8 form (lone surrogate code points)."""
    def __init__(
        self, message: str = "Invalid message encoding",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_MESSAGE_ENCODING", ErrorCategory.ENCODING,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingFieldError(SolscribeError):
    """A required request field is absent or empty."""
    def __init__(
        self, message: str = "Missing required fields",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidAmountError(SolscribeError):
    """Amount rejected by the zero-amount policy."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_AMOUNT", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Builder Errors ──────────────────────────────────────────────

class InstructionBuildFailedError(SolscribeError):
    """The SDK refused to encode an instruction from already-parsed values."""
    def __init__(self, instruction: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or instruction
        super().__init__(
            f"Failed to create {instruction} instruction",
            "INSTRUCTION_BUILD_FAILED", ErrorCategory.INSTRUCTION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.instruction = instruction
