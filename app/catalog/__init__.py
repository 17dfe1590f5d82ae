"""Product Catalog.

Models, repository and service for product CRUD with owned images.
"""

from app.catalog.models import Gender, Product, ProductImage, Size
from app.catalog.repository import ProductRepository
from app.catalog.schemas import ProductCreate, ProductResponse, ProductUpdate
from app.catalog.service import CatalogService, PaginationParams
from app.catalog.slugs import is_uuid, slugify

__all__ = [
    # Models
    "Gender",
    "Product",
    "ProductImage",
    "Size",
    # Schemas
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    # Repository
    "ProductRepository",
    # Service
    "CatalogService",
    "PaginationParams",
    "is_uuid",
    "slugify",
]
