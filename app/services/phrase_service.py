"""
Phrase Service - phrase lifecycle, pin quota and browsing helpers
"""
import logging
import random
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from app.config.settings import get_settings
from app.core.exceptions import (
    NotFoundError,
    PinLimitError,
    StorageError,
    ValidationError,
)
from app.models.category import Category
from app.models.phrase import Phrase
from app.schemas.phrase import CarouselFrame, PhraseCreate, PhraseRead, PinToggleResult
from app.services.category_service import validation_details

logger = logging.getLogger(__name__)


class PhraseService:
    """Manages phrase CRUD operations and per-category pinning"""

    def __init__(self, db: Session, pin_limit: Optional[int] = None, rng: Optional[random.Random] = None):
        self.db = db
        self.pin_limit = pin_limit if pin_limit is not None else get_settings().pin_limit
        self._rng = rng or random.Random()

    def create_phrase(self, text: str, category_id: int) -> Phrase:
        """
        Create an unpinned phrase in a category

        Args:
            text: Phrase text (non-empty)
            category_id: ID of an existing category

        Returns:
            Created phrase

        Raises:
            ValidationError: empty text, non-integer or unknown category_id
            StorageError: the insert failed for any other reason
        """
        try:
            data = PhraseCreate(text=text, category_id=category_id)
        except PydanticValidationError as e:
            raise ValidationError("Invalid phrase.", details=validation_details(e)) from e

        try:
            category_exists = self.db.get(Category, data.category_id) is not None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error creating phrase", exc_info=True)
            raise StorageError("Failed to create phrase.") from e
        if not category_exists:
            raise ValidationError(
                "Category does not exist.",
                details={"category_id": [f"No category with id {data.category_id}"]},
            )

        phrase = Phrase(text=data.text, category_id=data.category_id, pinned=False)
        self.db.add(phrase)
        try:
            self.db.commit()
        except IntegrityError as e:
            # category deleted between the lookup and the insert
            self.db.rollback()
            raise ValidationError(
                "Category does not exist.",
                details={"category_id": [f"No category with id {data.category_id}"]},
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error creating phrase", exc_info=True)
            raise StorageError("Failed to create phrase.") from e

        self.db.refresh(phrase)
        logger.info(
            f"Created phrase {phrase.id} in category {phrase.category_id}",
            extra={"phrase_id": phrase.id, "category_id": phrase.category_id},
        )
        return phrase

    def list_phrases_by_category(self, category_id: int, pinned: Optional[bool] = None) -> List[Phrase]:
        """
        List phrases of a category ordered by id, optionally by pin state.

        A storage failure yields an empty list unless strict_list_errors is set.
        """
        stmt = select(Phrase).where(Phrase.category_id == category_id)
        if pinned is not None:
            stmt = stmt.where(Phrase.pinned.is_(pinned))
        stmt = stmt.order_by(Phrase.id)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error getting phrases", exc_info=True)
            if get_settings().strict_list_errors:
                raise StorageError("Failed to load phrases.") from e
            return []

    def count_pinned(self, category_id: int) -> int:
        stmt = select(func.count(Phrase.id)).where(
            Phrase.category_id == category_id,
            Phrase.pinned.is_(True),
        )
        return self.db.execute(stmt).scalar_one()

    def toggle_pin(self, phrase_id: int, current_pinned: bool) -> PinToggleResult:
        """
        Flip a phrase's pin state from ``current_pinned``.

        Pinning locks the parent category row and writes with a single
        conditional UPDATE, so concurrent pins cannot push a category past
        the limit. Every pinned phrase of the category counts, the target
        included, so a stale ``current_pinned=False`` in a full category fails.

        Args:
            phrase_id: Phrase ID
            current_pinned: Pin state the caller last saw

        Returns:
            PinToggleResult with the new pin state

        Raises:
            NotFoundError: no phrase with this id
            PinLimitError: category already holds pin_limit pinned phrases
            StorageError: the update failed
        """
        target = not current_pinned
        try:
            phrase = self.db.get(Phrase, phrase_id)
            if phrase is None:
                raise NotFoundError("phrase", phrase_id)
            category_id = phrase.category_id

            if target:
                # Serializes concurrent pinners of the same category (no-op on SQLite)
                self.db.execute(
                    select(Category.id).where(Category.id == category_id).with_for_update()
                )
                pinned_rows = aliased(Phrase)
                pinned_count = (
                    select(func.count(pinned_rows.id))
                    .where(
                        pinned_rows.category_id == category_id,
                        pinned_rows.pinned.is_(True),
                    )
                    .scalar_subquery()
                )
                stmt = (
                    update(Phrase)
                    .where(Phrase.id == phrase_id, pinned_count < self.pin_limit)
                    .values(pinned=True)
                    .execution_options(synchronize_session=False)
                )
            else:
                stmt = (
                    update(Phrase)
                    .where(Phrase.id == phrase_id)
                    .values(pinned=False)
                    .execution_options(synchronize_session=False)
                )

            result = self.db.execute(stmt)
            if result.rowcount == 0:
                self.db.rollback()
                if target and self.db.get(Phrase, phrase_id) is not None:
                    logger.info(
                        f"Pin limit reached in category {category_id}",
                        extra={"phrase_id": phrase_id, "category_id": category_id},
                    )
                    raise PinLimitError(category_id, self.pin_limit)
                raise NotFoundError("phrase", phrase_id)

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error toggling pin", exc_info=True)
            raise StorageError("Failed to toggle pin.") from e

        self.db.refresh(phrase)
        return PinToggleResult(success=True, phrase_id=phrase_id, pinned=phrase.pinned)

    def delete_phrase(self, phrase_id: int) -> bool:
        """
        Delete a phrase.

        Returns:
            True if a row was removed, False if the id did not exist
        """
        stmt = delete(Phrase).where(Phrase.id == phrase_id)
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error deleting phrase", exc_info=True)
            raise StorageError("Failed to delete phrase.") from e
        return result.rowcount > 0

    def pick_random_phrase(self, category_id: int) -> Optional[Phrase]:
        phrases = self.list_phrases_by_category(category_id)
        if not phrases:
            return None
        return self._rng.choice(phrases)

    def get_carousel_frame(self, category_id: int, index: int = 0) -> Optional[CarouselFrame]:
        """
        Phrase at ``index`` of the category's carousel, wrapping both ways.

        Returns None when the category has no phrases.
        """
        phrases = self.list_phrases_by_category(category_id)
        total = len(phrases)
        if total == 0:
            return None
        position = index % total
        return CarouselFrame(
            phrase=PhraseRead.model_validate(phrases[position]),
            index=position,
            total=total,
            previous_index=(position - 1) % total,
            next_index=(position + 1) % total,
        )
