"""Domain layer - catalog errors.

Every persistence failure surfaced by the catalog is reclassified into
one of these exceptions before it leaves the service layer.
"""

from app.domain.exceptions import (
    CatalogError,
    CatalogInternalError,
    DomainError,
    ProductConflictError,
    ProductNotFoundError,
)

__all__ = [
    "CatalogError",
    "CatalogInternalError",
    "DomainError",
    "ProductConflictError",
    "ProductNotFoundError",
]
