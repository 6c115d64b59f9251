"""
Phrase API endpoints - phrase creation, pinning and removal
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.base import DeletionResult, Envelope
from app.schemas.phrase import PhraseCreate, PhraseRead, PinToggleRequest, PinToggleResult
from app.services.phrase_service import PhraseService

router = APIRouter(prefix="/phrases", tags=["phrases"])


@router.post("", response_model=Envelope[PhraseRead], status_code=status.HTTP_201_CREATED)
def create_phrase(
    phrase_data: PhraseCreate,
    db: Session = Depends(get_db),
):
    """
    Create a new (unpinned) phrase

    - **text**: Phrase text, e.g. "fast as lightning"
    - **category_id**: ID of an existing category
    """
    service = PhraseService(db)
    phrase = service.create_phrase(phrase_data.text, phrase_data.category_id)

    return Envelope(status="ok", data=PhraseRead.model_validate(phrase))


@router.post("/{phrase_id}/pin", response_model=Envelope[PinToggleResult])
def toggle_phrase_pin(
    phrase_id: int,
    toggle: PinToggleRequest,
    db: Session = Depends(get_db),
):
    """
    Toggle pin status for a phrase

    - **current_pinned**: Pin state currently shown to the user; the phrase
      is set to the opposite. Pinning fails with 409 once the category holds
      the maximum number of pinned phrases.
    """
    service = PhraseService(db)
    result = service.toggle_pin(phrase_id, toggle.current_pinned)

    return Envelope(status="ok", data=result)


@router.delete("/{phrase_id}", response_model=Envelope[DeletionResult])
def delete_phrase(phrase_id: int, db: Session = Depends(get_db)):
    """
    Delete a phrase

    Deleting an unknown id succeeds with `deleted: false`.
    """
    service = PhraseService(db)
    deleted = service.delete_phrase(phrase_id)

    return Envelope(status="ok", data=DeletionResult(id=phrase_id, deleted=deleted))
