"""Error Hierarchy — typed, categorized exceptions for document rendering failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only template corruption and serialization failures are raised; structural
      mismatches during injection are reported as status dicts, never raised
    - message is the diagnostic returned to the caller in the 500 body

Design Decisions:
    - Single hierarchy with PolicyOpenAPIError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Structural mismatch codes live here as constants so core and logs share one vocabulary
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    TEMPLATE = "template"
    SERIALIZATION = "serialization"
    STRUCTURE = "structure"
    INTERNAL = "internal"


# ─── Recoverable structural mismatch codes ──────────────────────

ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"
REFERENCE_NOT_MUTABLE = "REFERENCE_NOT_MUTABLE"
NON_QUERY_PARAMETER = "NON_QUERY_PARAMETER"


class PolicyOpenAPIError(Exception):
    """Base exception for all document rendering errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Internal Errors (500-level) ────────────────────────────────

class TemplateCorruptionError(PolicyOpenAPIError):
    """The shipped template could not be parsed into a document."""
    def __init__(self, message: str):
        super().__init__(
            f"Could not deserialize to OpenAPI object: {message}",
            "TEMPLATE_CORRUPTION", ErrorCategory.TEMPLATE,
            ErrorSeverity.CRITICAL, 500,
        )


class DocumentSerializationError(PolicyOpenAPIError):
    """The working document could not be rendered to JSON."""
    def __init__(self, message: str):
        super().__init__(
            f"Could not serialize OpenAPI object: {message}",
            "SERIALIZATION_FAILED", ErrorCategory.SERIALIZATION,
            ErrorSeverity.CRITICAL, 500,
        )
