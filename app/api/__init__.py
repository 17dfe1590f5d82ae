"""API layer module.

Contains FastAPI routers and response envelopes.
"""

from app.api.health import router as health_router
from app.api.products import router as products_router
from app.api.seed import router as seed_router

__all__ = [
    "health_router",
    "products_router",
    "seed_router",
]
