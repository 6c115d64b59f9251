"""
Category Service - create, list and delete phrase categories
"""
import logging
from typing import List

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config.settings import get_settings
from app.core.exceptions import (
    DuplicateLabelError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from app.models.category import Category
from app.schemas.category import CategoryCreate

logger = logging.getLogger(__name__)


def validation_details(exc: PydanticValidationError) -> dict:
    """Flatten pydantic errors into ``{field: [messages]}``."""
    details: dict = {}
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "_errors"
        details.setdefault(field, []).append(error["msg"])
    return details


class CategoryService:
    """Manages category CRUD operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_category(self, label: str, icon: str) -> Category:
        """
        Create a new category

        Args:
            label: Unique display label (1-255 characters)
            icon: Emoji or short glyph shown next to the label

        Returns:
            Created category

        Raises:
            ValidationError: label or icon missing or out of range
            DuplicateLabelError: label already used by another category
            StorageError: the insert failed for any other reason
        """
        try:
            data = CategoryCreate(label=label, icon=icon)
        except PydanticValidationError as e:
            raise ValidationError("Invalid category.", details=validation_details(e)) from e

        category = Category(label=data.label, icon=data.icon)
        self.db.add(category)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # label is the only constraint the validated insert can violate
            logger.info(f"Duplicate category label rejected: {data.label!r}")
            raise DuplicateLabelError(data.label) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error creating category", exc_info=True)
            raise StorageError("Failed to create category.") from e

        self.db.refresh(category)
        logger.info(f"Created category {category.id}", extra={"category_id": category.id})
        return category

    def list_categories(self) -> List[Category]:
        """
        List all categories ordered by id.

        A storage failure yields an empty list unless strict_list_errors is set.
        """
        stmt = select(Category).order_by(Category.id)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error getting categories", exc_info=True)
            if get_settings().strict_list_errors:
                raise StorageError("Failed to load categories.") from e
            return []

    def get_category(self, category_id: int) -> Category:
        category = self.db.get(Category, category_id)
        if category is None:
            raise NotFoundError("category", category_id)
        return category

    def delete_category(self, category_id: int) -> bool:
        """
        Delete a category and, through the foreign key cascade, its phrases.

        Args:
            category_id: Category ID

        Returns:
            True if a row was removed, False if the id did not exist
        """
        stmt = delete(Category).where(Category.id == category_id)
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error deleting category", exc_info=True)
            raise StorageError("Failed to delete category.") from e

        # Phrases removed by the cascade may still sit in the identity map
        self.db.expire_all()
        deleted = result.rowcount > 0
        logger.info(
            f"Deleted category {category_id}" if deleted else f"Category {category_id} already absent",
            extra={"category_id": category_id},
        )
        return deleted
