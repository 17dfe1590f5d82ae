"""Product API endpoints.

Provides endpoints for product CRUD:
- POST /products - create a product
- GET /products - list products (limit/offset)
- GET /products/{term} - get by UUID, slug or title
- PATCH /products/{id} - partial update
- DELETE /products/{id} - delete a product
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import ErrorResponse
from app.catalog.schemas import ProductCreate, ProductResponse, ProductUpdate
from app.catalog.service import CatalogService, PaginationParams
from app.infrastructure.config import settings
from app.infrastructure.database import get_session

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get catalog service bound to the request session."""
    return CatalogService(session)


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create product",
)
async def create_product(
    body: ProductCreate,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Create a product with its images.

    Args:
        body: Product fields and image URLs.
        service: Catalog service.

    Returns:
        Created product.
    """
    return await service.create(body)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
    limit: int = Query(
        default=settings.default_page_limit, ge=0, description="Maximum products"
    ),
    offset: int = Query(default=0, ge=0, description="Products to skip"),
) -> list[ProductResponse]:
    """List a page of products.

    Args:
        service: Catalog service.
        limit: Page size.
        offset: Number of products to skip.

    Returns:
        Products with image URLs.
    """
    return await service.find_all(PaginationParams(limit=limit, offset=offset))


@router.get(
    "/{term}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Look up a product by UUID, slug or title.",
)
async def get_product(
    term: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Get a product by identifier, slug or title.

    Args:
        term: UUID, slug or title.
        service: Catalog service.

    Returns:
        Product.
    """
    return await service.find_one_plain(term)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: UUID,
    body: ProductUpdate,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Partially update a product.

    Args:
        product_id: Product identifier.
        body: Fields to change; `images` replaces the whole image set.
        service: Catalog service.

    Returns:
        Updated product.
    """
    return await service.update(str(product_id), body)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: UUID,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Response:
    """Delete a product and its images.

    Args:
        product_id: Product identifier.
        service: Catalog service.
    """
    await service.remove(str(product_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
