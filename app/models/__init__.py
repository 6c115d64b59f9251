"""
Models package for the Simile Board service.

Holds the SQLAlchemy tables and the API-level response models shared by
the error handlers and health endpoints.
"""

# Database Models
from .category import Category
from .phrase import Phrase

# API Models
from .api_models import (
    HealthCheckResponse,
    StandardErrorResponse,
)

__all__ = [
    # Database Models
    "Category",
    "Phrase",

    # API Models
    "HealthCheckResponse",
    "StandardErrorResponse",
]
