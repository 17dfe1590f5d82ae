"""Catalog service for product operations.

High-level service that combines repository operations with the
catalog's business rules: slug normalization, dual-mode lookup,
transactional image replacement and persistence error normalization.
"""

from dataclasses import dataclass
from typing import Any, NoReturn
import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Product, ProductImage
from app.catalog.repository import ProductRepository
from app.catalog.schemas import ProductCreate, ProductResponse, ProductUpdate
from app.catalog.slugs import is_uuid
from app.domain.exceptions import (
    CatalogInternalError,
    ProductConflictError,
    ProductNotFoundError,
)
from app.infrastructure.db_errors import error_detail, is_unique_violation

logger = structlog.get_logger()

# Columns that may be cleared to NULL by an update
NULLABLE_FIELDS = {"description"}


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        limit: Maximum number of products to return.
        offset: Number of products to skip.
    """

    limit: int = 10
    offset: int = 0


class CatalogService:
    """Service for catalog operations.

    Each public method is one unit of work: it commits what it wrote or
    rolls back and raises a domain error.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            product = await service.create(ProductCreate(title="Cotton Tee"))
            same = await service.find_one_plain(product.slug)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.repository = ProductRepository(session)

    async def create(self, data: ProductCreate) -> ProductResponse:
        """Create a product together with its images.

        Args:
            data: Product fields and image URLs.

        Returns:
            Created product with images flattened.

        Raises:
            ProductConflictError: If the title or slug is already taken.
            CatalogInternalError: On any other persistence failure.
        """
        fields = data.model_dump(exclude={"images", "slug"}, mode="json")
        product = Product(
            **fields,
            slug=data.slug,
            images=[ProductImage(url=url) for url in data.images],
        )

        try:
            await self.repository.save(product)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self._handle_db_exceptions(e)

        logger.info(
            "Product created",
            product_id=product.id,
            slug=product.slug,
            image_count=len(data.images),
        )
        return ProductResponse.from_model(product)

    async def find_all(self, pagination: PaginationParams) -> list[ProductResponse]:
        """List a page of products.

        Args:
            pagination: Limit and offset.

        Returns:
            Products with images flattened.
        """
        products = await self.repository.find_all(
            limit=pagination.limit,
            offset=pagination.offset,
        )
        return [ProductResponse.from_model(p) for p in products]

    async def find_one(self, term: str) -> Product:
        """Find a product by UUID, or by title/slug otherwise.

        Args:
            term: UUID, title or slug.

        Returns:
            Product entity with images loaded.

        Raises:
            ProductNotFoundError: If nothing matches.
        """
        if is_uuid(term):
            product = await self.repository.get_by_id(term)
        else:
            product = await self.repository.get_by_title_or_slug(term)

        if product is None:
            raise ProductNotFoundError(term)
        return product

    async def find_one_plain(self, term: str) -> ProductResponse:
        """Find a product and flatten its images.

        Args:
            term: UUID, title or slug.

        Returns:
            Product with images flattened.
        """
        return ProductResponse.from_model(await self.find_one(term))

    async def update(self, product_id: str, data: ProductUpdate) -> ProductResponse:
        """Apply a partial update, replacing the image set if one is given.

        Image deletion, image insertion and the product save run in one
        transaction; on failure none of them are visible.

        Args:
            product_id: Product ID.
            data: Fields to change.

        Returns:
            Updated product with images flattened.

        Raises:
            ProductNotFoundError: If the ID does not resolve.
            ProductConflictError: If the new title or slug is already taken.
            CatalogInternalError: On any other persistence failure.
        """
        product = await self._get_by_id(product_id, include_images=False)

        changes = data.model_dump(exclude_unset=True, mode="json")
        images = changes.pop("images", None)
        for field, value in changes.items():
            if value is None and field not in NULLABLE_FIELDS:
                continue
            setattr(product, field, value)

        try:
            if images is not None:
                deleted = await self.repository.delete_images(product.id)
                await self.repository.add_images(product.id, images)
                logger.debug(
                    "Product images replaced",
                    product_id=product.id,
                    deleted=deleted,
                    inserted=len(images),
                )
            await self.repository.save(product)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self._handle_db_exceptions(e)

        logger.info("Product updated", product_id=product_id, fields=sorted(changes))
        return await self.find_one_plain(product_id)

    async def remove(self, product_id: str) -> None:
        """Delete a product and, by cascade, its images.

        Args:
            product_id: Product ID.

        Raises:
            ProductNotFoundError: If the ID does not resolve.
            CatalogInternalError: On persistence failure.
        """
        product = await self._get_by_id(product_id)

        try:
            await self.repository.delete(product)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self._handle_db_exceptions(e)

        logger.info("Product removed", product_id=product_id)

    async def delete_all_products(self) -> int:
        """Bulk-delete the whole catalog.

        Returns:
            Number of deleted products.

        Raises:
            CatalogInternalError: On persistence failure.
        """
        try:
            deleted = await self.repository.delete_all()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self._handle_db_exceptions(e)

        logger.info("Catalog cleared", deleted=deleted)
        return deleted

    async def _get_by_id(self, product_id: str, include_images: bool = True) -> Product:
        """Get product by ID or raise.

        Args:
            product_id: Product ID.
            include_images: Whether to eagerly load images.

        Returns:
            Product entity.

        Raises:
            ProductNotFoundError: If the ID is not a UUID or not present.
        """
        product = None
        if is_uuid(product_id):
            product = await self.repository.get_by_id(product_id, include_images)

        if product is None:
            raise ProductNotFoundError(f"id {product_id}")
        return product

    def _handle_db_exceptions(self, error: Any) -> NoReturn:
        """Reclassify a persistence failure into a domain error.

        Args:
            error: Exception raised by the persistence layer.

        Raises:
            ProductConflictError: For uniqueness violations.
            CatalogInternalError: For everything else.
        """
        if is_unique_violation(error):
            raise ProductConflictError(error_detail(error)) from error

        logger.error(
            "Unexpected persistence error",
            error=str(error),
            error_type=type(error).__name__,
            exc_info=error,
        )
        raise CatalogInternalError() from error
