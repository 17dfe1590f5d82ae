"""Pydantic schemas for catalog input and output.

Images are accepted and returned as flat lists of URL strings. Titles
and slugs are checked here so that every stored slug is non-empty and
neither field can be mistaken for a product id on lookup.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from app.catalog.models import Gender, Product, Size
from app.catalog.slugs import normalized_slug, validate_title


class ProductCreate(BaseModel):
    """Fields accepted when creating a product.

    After validation `slug` is always set, normalized from the given
    slug or, when omitted, from the title.
    """

    title: str = Field(..., min_length=1, description="Product title (unique)")
    price: float = Field(default=0, ge=0, description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    slug: str | None = Field(
        default=None,
        min_length=1,
        description="URL-friendly identifier; derived from the title when omitted",
    )
    stock: int = Field(default=0, ge=0, description="Available quantity")
    sizes: list[Size] = Field(default_factory=list, description="Offered sizes")
    gender: Gender = Field(default=Gender.UNISEX, description="Gender category")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    images: list[str] = Field(default_factory=list, description="Image URLs")

    @field_validator("title")
    @classmethod
    def title_not_uuid(cls, value: str) -> str:
        return validate_title(value)

    @model_validator(mode="after")
    def derive_slug(self) -> "ProductCreate":
        self.slug = normalized_slug(self.slug or self.title)
        return self


class ProductUpdate(BaseModel):
    """Partial update; only fields explicitly sent are applied."""

    title: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    slug: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)
    sizes: list[Size] | None = None
    gender: Gender | None = None
    tags: list[str] | None = None
    images: list[str] | None = Field(
        default=None, description="Replacement image list"
    )

    @field_validator("title")
    @classmethod
    def title_not_uuid(cls, value: str | None) -> str | None:
        return value if value is None else validate_title(value)

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, value: str | None) -> str | None:
        return value if value is None else normalized_slug(value)


class ProductResponse(BaseModel):
    """Product representation returned to callers."""

    id: str
    title: str
    price: float
    description: str | None = None
    slug: str
    stock: int
    sizes: list[str]
    gender: str
    tags: list[str]
    images: list[str]

    @classmethod
    def from_model(cls, product: Product) -> "ProductResponse":
        """Build a response from an entity whose images are loaded.

        Args:
            product: Product entity.

        Returns:
            Response with images flattened to URLs.
        """
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            description=product.description,
            slug=product.slug,
            stock=product.stock,
            sizes=list(product.sizes or []),
            gender=product.gender,
            tags=list(product.tags or []),
            images=product.image_urls,
        )
