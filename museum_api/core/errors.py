"""Error Hierarchy — typed, categorized exceptions for all Museum API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and auth-path rejections are 400-level; store, storage and encoder
      failures are 500-level
    - to_response() produces the REST envelope used by every error response
    - Collaborator messages are passed through verbatim, internals are not

Design Decisions:
    - Single hierarchy with MuseumAPIError base: one FastAPI handler catches all
    - ErrorContext as dataclass: request metadata without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DOCUMENT_STORE = "document_store"
    OBJECT_STORE = "object_store"
    ENCODING = "encoding"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-level context attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    document_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class MuseumAPIError(Exception):
    """Base exception for all Museum API errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "collection": self.context.collection,
                    "document_id": self.context.document_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class MissingFieldError(MuseumAPIError):
    """A required request field is absent or empty."""
    def __init__(self, field: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.field
        return response


class ResourceNotFoundError(MuseumAPIError):
    """Requested document does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class IdentityProviderError(MuseumAPIError):
    """Identity provider rejected a sign-in, refresh or verification call."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "IDENTITY_PROVIDER_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.operation = operation


# ─── Collaborator Errors (500-level) ────────────────────────────

class AccountCreationError(MuseumAPIError):
    """Identity provider failed to create an account."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = "create_account"
        super().__init__(
            message, "ACCOUNT_CREATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, ctx, 500,
        )


class DocumentStoreError(MuseumAPIError):
    """Document database operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        collection: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.collection = collection
        super().__init__(
            message, "DOCUMENT_STORE_ERROR", ErrorCategory.DOCUMENT_STORE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.collection = collection


class ObjectStoreError(MuseumAPIError):
    """Blob upload or URL signing failed."""
    def __init__(self, message: str, blob_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = "upload"
        super().__init__(
            message, "OBJECT_STORE_ERROR", ErrorCategory.OBJECT_STORE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.blob_name = blob_name


class QREncodeError(MuseumAPIError):
    """QR image generation failed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "QR_ENCODE_ERROR", ErrorCategory.ENCODING,
            ErrorSeverity.ERROR, context, 500,
        )


class ConfigurationError(MuseumAPIError):
    """Credentials or settings could not be loaded at startup."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
