"""SQLAlchemy models for product catalog.

Defines Product and ProductImage tables for persistent storage.
"""

from enum import Enum
from uuid import uuid4

from sqlalchemy import JSON, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONList = JSON().with_variant(JSONB(), "postgresql")


class Size(str, Enum):
    """Available garment sizes."""

    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"
    XXXL = "XXXL"


class Gender(str, Enum):
    """Gender category of a product."""

    MEN = "men"
    WOMEN = "women"
    KID = "kid"
    UNISEX = "unisex"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID).
        title: Product title (unique).
        price: Unit price.
        description: Product description.
        slug: URL-friendly identifier derived from the title (unique).
        stock: Available quantity.
        sizes: Size values the product is offered in.
        gender: Gender category.
        tags: Free-form tags.
        images: Owned images, in insertion order.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    title: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sizes: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)
    gender: Mapped[str] = mapped_column(
        String(10), nullable=False, default=Gender.UNISEX.value
    )
    tags: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)

    # Relationships
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug})>"

    @property
    def image_urls(self) -> list[str]:
        """Get image URLs in insertion order.

        Returns:
            Flat list of URL strings.
        """
        return [image.url for image in self.images]


class ProductImage(Base):
    """Image owned by a product.

    Attributes:
        id: Auto-incrementing identifier.
        url: Image URL.
        product_id: Owning product ID.
    """

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    product_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductImage(id={self.id}, url={self.url})>"
