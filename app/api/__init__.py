# API endpoints and routers

from .categories_endpoints import router as categories_router
from .phrases_endpoints import router as phrases_router
from .health_endpoints import router as health_router

__all__ = [
    "categories_router",
    "phrases_router",
    "health_router",
]
