"""Domain exceptions.

All domain-level errors raised by the catalog. Persistence failures are
reclassified into exactly one of these at the service boundary, and the
API layer renders them with a matching status code.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class ProductNotFoundError(CatalogError):
    """Raised when a lookup term or identifier does not resolve to a product."""

    def __init__(self, term: str) -> None:
        """Initialize product not found error.

        Args:
            term: The identifier, slug or title that was looked up.
        """
        super().__init__(
            f"Product with {term} not found",
            details={"term": term},
        )


class ProductConflictError(CatalogError):
    """Raised when a write violates the unique title or slug constraint."""

    def __init__(self, detail: str) -> None:
        """Initialize product conflict error.

        Args:
            detail: Detail text reported by the store.
        """
        super().__init__(detail, details={"detail": detail})


class CatalogInternalError(CatalogError):
    """Raised for any persistence failure that is not user-correctable.

    The original error is logged server-side only.
    """

    def __init__(self) -> None:
        """Initialize internal error with the generic caller-facing message."""
        super().__init__("Unexpected error, check server logs")
