"""
Category API endpoints - category lifecycle and per-category phrase views
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.base import DeletionResult, Envelope
from app.schemas.category import CategoryCreate, CategoryRead
from app.schemas.phrase import CarouselFrame, PhraseRead
from app.services.category_service import CategoryService
from app.services.phrase_service import PhraseService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=Envelope[CategoryRead], status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new category

    - **label**: Unique label, 1-255 characters (e.g., "Simile")
    - **icon**: Emoji or short glyph (e.g., "≈")
    """
    service = CategoryService(db)
    category = service.create_category(category_data.label, category_data.icon)

    return Envelope(status="ok", data=CategoryRead.model_validate(category))


@router.get("", response_model=Envelope[list[CategoryRead]])
def list_categories(db: Session = Depends(get_db)):
    """
    List all categories
    """
    service = CategoryService(db)
    categories = service.list_categories()

    return Envelope(
        status="ok",
        data=[CategoryRead.model_validate(c) for c in categories],
    )


@router.get("/{category_id}", response_model=Envelope[CategoryRead])
def get_category(category_id: int, db: Session = Depends(get_db)):
    service = CategoryService(db)
    category = service.get_category(category_id)

    return Envelope(status="ok", data=CategoryRead.model_validate(category))


@router.delete("/{category_id}", response_model=Envelope[DeletionResult])
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """
    Delete a category together with all of its phrases

    Deleting an unknown id succeeds with `deleted: false`.
    """
    service = CategoryService(db)
    deleted = service.delete_category(category_id)

    return Envelope(status="ok", data=DeletionResult(id=category_id, deleted=deleted))


@router.get("/{category_id}/phrases", response_model=Envelope[list[PhraseRead]])
def list_category_phrases(
    category_id: int,
    pinned: Optional[bool] = Query(None, description="Only pinned (true) or unpinned (false) phrases"),
    db: Session = Depends(get_db),
):
    """
    List phrases in a category

    - **pinned**: Optional pin-state filter
    """
    service = PhraseService(db)
    phrases = service.list_phrases_by_category(category_id, pinned=pinned)

    return Envelope(
        status="ok",
        data=[PhraseRead.model_validate(p) for p in phrases],
    )


@router.get("/{category_id}/phrases/random", response_model=Envelope[Optional[PhraseRead]])
def get_random_phrase(category_id: int, db: Session = Depends(get_db)):
    """
    Pick one phrase of the category at random

    `data` is null when the category has no phrases yet.
    """
    service = PhraseService(db)
    phrase = service.pick_random_phrase(category_id)

    if not phrase:
        return Envelope(status="ok", data=None)

    return Envelope(status="ok", data=PhraseRead.model_validate(phrase))


@router.get("/{category_id}/phrases/carousel", response_model=Envelope[Optional[CarouselFrame]])
def get_carousel_frame(
    category_id: int,
    index: int = Query(0, description="Carousel position; wraps around the phrase count"),
    db: Session = Depends(get_db),
):
    """
    Get one carousel position with its previous/next indices
    """
    service = PhraseService(db)
    frame = service.get_carousel_frame(category_id, index)

    return Envelope(status="ok", data=frame)
