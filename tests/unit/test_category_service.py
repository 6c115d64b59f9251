"""
Unit tests for category service operations
"""
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.config.settings import get_settings
from app.core.exceptions import (
    DuplicateLabelError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from app.models.category import Category


def test_create_category(category_service):
    """Test creating a new category"""
    category = category_service.create_category("Simile", "≈")

    assert category.id is not None
    assert category.label == "Simile"
    assert category.icon == "≈"


def test_create_category_duplicate_label(category_service, db_session):
    """A duplicate label is rejected and no second row is written"""
    category_service.create_category("Simile", "≈")

    with pytest.raises(DuplicateLabelError) as exc_info:
        category_service.create_category("Simile", "~")

    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "Category with this name already exists."
    count = db_session.execute(
        select(func.count(Category.id)).where(Category.label == "Simile")
    ).scalar_one()
    assert count == 1


def test_session_usable_after_duplicate(category_service):
    category_service.create_category("Metaphor", "M")
    with pytest.raises(DuplicateLabelError):
        category_service.create_category("Metaphor", "M")

    other = category_service.create_category("Idiom", "I")
    assert other.id is not None


@pytest.mark.parametrize(
    "label, icon, field",
    [
        ("", "≈", "label"),
        ("x" * 256, "≈", "label"),
        ("Simile", "", "icon"),
        (None, "≈", "label"),
    ],
)
def test_create_category_validation(category_service, label, icon, field):
    with pytest.raises(ValidationError) as exc_info:
        category_service.create_category(label, icon)

    assert field in exc_info.value.details
    assert category_service.list_categories() == []


def test_label_of_255_characters_is_accepted(category_service):
    category = category_service.create_category("x" * 255, "≈")
    assert len(category.label) == 255


def test_list_categories_ordered_by_id(category_service):
    first = category_service.create_category("Simile", "≈")
    second = category_service.create_category("Metaphor", "M")

    categories = category_service.list_categories()

    assert [c.id for c in categories] == [first.id, second.id]


def test_list_categories_empty(category_service):
    assert category_service.list_categories() == []


def test_list_categories_degrades_to_empty_on_storage_error(category_service, monkeypatch):
    """Storage failures surface as an empty list by default"""
    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is down"))

    monkeypatch.setattr(category_service.db, "execute", broken_execute)

    assert category_service.list_categories() == []


def test_list_categories_strict_mode_raises(category_service, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is down"))

    monkeypatch.setattr(category_service.db, "execute", broken_execute)
    monkeypatch.setattr(get_settings(), "strict_list_errors", True)

    with pytest.raises(StorageError) as exc_info:
        category_service.list_categories()

    # cause stays in the logs, not in the message
    assert "database is down" not in exc_info.value.message


def test_create_category_storage_error(category_service, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("no space left on device"))

    monkeypatch.setattr(category_service.db, "commit", broken_commit)

    with pytest.raises(StorageError) as exc_info:
        category_service.create_category("Simile", "≈")

    assert exc_info.value.message == "Failed to create category."
    assert exc_info.value.status_code == 500
    monkeypatch.undo()
    assert category_service.list_categories() == []

def test_get_category_not_found(category_service):
    with pytest.raises(NotFoundError):
        category_service.get_category(999)


def test_delete_category(category_service):
    category = category_service.create_category("Simile", "≈")

    assert category_service.delete_category(category.id) is True
    assert category_service.list_categories() == []


def test_delete_missing_category_is_noop(category_service):
    assert category_service.delete_category(12345) is False


def test_delete_category_storage_error(category_service, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("DELETE", {}, Exception("disk I/O error"))

    monkeypatch.setattr(category_service.db, "execute", broken_execute)

    with pytest.raises(StorageError) as exc_info:
        category_service.delete_category(1)

    assert exc_info.value.message == "Failed to delete category."
    assert exc_info.value.status_code == 500
