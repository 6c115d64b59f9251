"""
Unit tests for phrase service operations
"""
import random

import pytest
from sqlalchemy.exc import OperationalError

from app.config.settings import get_settings
from app.core.exceptions import StorageError, ValidationError
from app.services.phrase_service import PhraseService


def test_create_phrase_starts_unpinned(phrase_service, simile_category):
    """Test creating a new phrase"""
    phrase = phrase_service.create_phrase("fast as lightning", simile_category.id)

    assert phrase.id is not None
    assert phrase.text == "fast as lightning"
    assert phrase.category_id == simile_category.id
    assert phrase.pinned is False


def test_create_phrase_accepts_numeric_string_category(phrase_service, simile_category):
    phrase = phrase_service.create_phrase("cold as ice", str(simile_category.id))
    assert phrase.category_id == simile_category.id


def test_create_phrase_text_longer_than_client_limit(phrase_service, simile_category):
    # Only the client caps entry at 25 characters
    text = "as quiet as a mouse in a library at midnight"
    phrase = phrase_service.create_phrase(text, simile_category.id)
    assert phrase.text == text


@pytest.mark.parametrize(
    "text, category_id, field",
    [
        ("", 1, "text"),
        (None, 1, "text"),
        ("busy as a bee", "abc", "category_id"),
        ("busy as a bee", None, "category_id"),
        ("busy as a bee", 1.5, "category_id"),
        ("busy as a bee", True, "category_id"),
    ],
)
def test_create_phrase_validation(phrase_service, simile_category, text, category_id, field):
    with pytest.raises(ValidationError) as exc_info:
        phrase_service.create_phrase(text, category_id)

    assert field in exc_info.value.details


def test_create_phrase_unknown_category(phrase_service):
    with pytest.raises(ValidationError) as exc_info:
        phrase_service.create_phrase("busy as a bee", 999)

    assert "category_id" in exc_info.value.details
    assert exc_info.value.status_code == 422


def test_list_phrases_by_category(phrase_service, category_service, simile_category):
    """Listing returns exactly the N created phrases, all unpinned"""
    other = category_service.create_category("Metaphor", "M")
    texts = ["fast as lightning", "slow as molasses", "bright as the sun"]
    for text in texts:
        phrase_service.create_phrase(text, simile_category.id)
    phrase_service.create_phrase("time is money", other.id)

    phrases = phrase_service.list_phrases_by_category(simile_category.id)

    assert len(phrases) == len(texts)
    assert [p.text for p in phrases] == texts
    assert all(p.pinned is False for p in phrases)


def test_list_phrases_pinned_filter(phrase_service, simile_category):
    first = phrase_service.create_phrase("fast as lightning", simile_category.id)
    phrase_service.create_phrase("slow as molasses", simile_category.id)
    phrase_service.toggle_pin(first.id, current_pinned=False)

    pinned = phrase_service.list_phrases_by_category(simile_category.id, pinned=True)
    unpinned = phrase_service.list_phrases_by_category(simile_category.id, pinned=False)

    assert [p.id for p in pinned] == [first.id]
    assert [p.text for p in unpinned] == ["slow as molasses"]


def test_list_phrases_unknown_category_is_empty(phrase_service):
    assert phrase_service.list_phrases_by_category(42) == []


def test_list_phrases_degrades_to_empty_on_storage_error(phrase_service, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    monkeypatch.setattr(phrase_service.db, "execute", broken_execute)

    assert phrase_service.list_phrases_by_category(1) == []


def test_list_phrases_strict_mode_raises(phrase_service, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection reset"))

    monkeypatch.setattr(phrase_service.db, "execute", broken_execute)
    monkeypatch.setattr(get_settings(), "strict_list_errors", True)

    with pytest.raises(StorageError) as exc_info:
        phrase_service.list_phrases_by_category(1)
    assert exc_info.value.message == "Failed to load phrases."


def test_create_phrase_storage_error(phrase_service, simile_category, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(phrase_service.db, "commit", broken_commit)

    with pytest.raises(StorageError) as exc_info:
        phrase_service.create_phrase("fast as lightning", simile_category.id)

    assert exc_info.value.message == "Failed to create phrase."
    monkeypatch.undo()
    assert phrase_service.list_phrases_by_category(simile_category.id) == []


def test_delete_phrase(phrase_service, simile_category):
    phrase = phrase_service.create_phrase("fast as lightning", simile_category.id)

    assert phrase_service.delete_phrase(phrase.id) is True
    assert phrase_service.list_phrases_by_category(simile_category.id) == []


def test_delete_missing_phrase_is_noop(phrase_service):
    assert phrase_service.delete_phrase(777) is False


def test_delete_phrase_storage_error(phrase_service, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("DELETE", {}, Exception("disk I/O error"))

    monkeypatch.setattr(phrase_service.db, "execute", broken_execute)

    with pytest.raises(StorageError) as exc_info:
        phrase_service.delete_phrase(1)
    assert exc_info.value.message == "Failed to delete phrase."


def test_delete_category_cascades_to_phrases(phrase_service, category_service, simile_category):
    for text in ["fast as lightning", "slow as molasses"]:
        phrase_service.create_phrase(text, simile_category.id)

    category_service.delete_category(simile_category.id)

    assert phrase_service.list_phrases_by_category(simile_category.id) == []


def test_pick_random_phrase(db_session, simile_category):
    service = PhraseService(db_session, rng=random.Random(7))
    created = [
        service.create_phrase(text, simile_category.id).id
        for text in ["fast as lightning", "slow as molasses", "bright as the sun"]
    ]

    for _ in range(10):
        picked = service.pick_random_phrase(simile_category.id)
        assert picked.id in created


def test_pick_random_phrase_empty_category(phrase_service, simile_category):
    assert phrase_service.pick_random_phrase(simile_category.id) is None


def test_carousel_frame_wraps_around(phrase_service, simile_category):
    texts = ["fast as lightning", "slow as molasses", "bright as the sun"]
    for text in texts:
        phrase_service.create_phrase(text, simile_category.id)

    first = phrase_service.get_carousel_frame(simile_category.id, 0)
    assert first.phrase.text == "fast as lightning"
    assert first.total == 3
    assert first.previous_index == 2
    assert first.next_index == 1

    last = phrase_service.get_carousel_frame(simile_category.id, 2)
    assert last.next_index == 0

    wrapped = phrase_service.get_carousel_frame(simile_category.id, 4)
    assert wrapped.index == 1
    assert wrapped.phrase.text == "slow as molasses"

    backwards = phrase_service.get_carousel_frame(simile_category.id, -1)
    assert backwards.index == 2
    assert backwards.phrase.text == "bright as the sun"


def test_carousel_frame_empty_category(phrase_service, simile_category):
    assert phrase_service.get_carousel_frame(simile_category.id) is None
