"""Product repository for database operations.

Thin mapping between Product/ProductImage entities and their rows.
Transaction boundaries belong to the caller.
"""

from collections.abc import Sequence

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.catalog.models import Product, ProductImage


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(limit=10, offset=0)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product (and any pending images) to database.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_by_id(
        self,
        product_id: str,
        include_images: bool = True,
    ) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID (UUID string).
            include_images: Whether to eagerly load images.

        Returns:
            Product if found, None otherwise.
        """
        query = select(Product).where(Product.id == product_id)

        if include_images:
            query = query.options(selectinload(Product.images))

        result = await self.session.execute(
            query.execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_title_or_slug(self, term: str) -> Product | None:
        """Get product whose title matches case-insensitively or whose slug matches.

        Case folding of the title happens in the store. PostgreSQL folds
        all letters, but SQLite `upper()` only folds ASCII, so there a
        non-ASCII title matches only when the term has the stored casing.
        The exact-title comparison keeps that case working on both, and
        slugs are ASCII-only so slug lookup is unaffected.

        Args:
            term: Title or slug.

        Returns:
            Product if found, None otherwise.
        """
        query = (
            select(Product)
            .where(
                or_(
                    Product.title == term,
                    func.upper(Product.title) == term.upper(),
                    Product.slug == term.lower(),
                )
            )
            .options(selectinload(Product.images))
            .limit(1)
        )

        result = await self.session.execute(
            query.execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def find_all(self, limit: int = 10, offset: int = 0) -> Sequence[Product]:
        """Get a page of products with images.

        Args:
            limit: Maximum results.
            offset: Number of rows to skip.

        Returns:
            Sequence of products.
        """
        query = (
            select(Product)
            .order_by(Product.id)
            .limit(limit)
            .offset(offset)
            .options(selectinload(Product.images))
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    async def delete(self, product: Product) -> None:
        """Delete a product; its images go with it via cascade.

        Args:
            product: Product to delete.
        """
        await self.session.delete(product)
        await self.session.flush()

    async def delete_images(self, product_id: str) -> int:
        """Delete all images owned by a product.

        Args:
            product_id: Owning product ID.

        Returns:
            Number of deleted images.
        """
        result = await self.session.execute(
            delete(ProductImage).where(ProductImage.product_id == product_id)
        )
        return result.rowcount

    async def add_images(self, product_id: str, urls: list[str]) -> list[ProductImage]:
        """Insert images for a product, preserving the given order.

        Args:
            product_id: Owning product ID.
            urls: Image URLs.

        Returns:
            Created images.
        """
        images = [ProductImage(product_id=product_id, url=url) for url in urls]
        self.session.add_all(images)
        await self.session.flush()
        return images

    async def delete_all(self) -> int:
        """Bulk-delete every image and product.

        Images are deleted first so the statement pair works with or
        without a cascading foreign key.

        Returns:
            Number of deleted products.
        """
        await self.session.execute(delete(ProductImage))
        result = await self.session.execute(delete(Product))
        return result.rowcount
