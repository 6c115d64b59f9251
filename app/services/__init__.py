# Business logic services

from .category_service import CategoryService
from .phrase_service import PhraseService

__all__ = [
    "CategoryService",
    "PhraseService",
]
