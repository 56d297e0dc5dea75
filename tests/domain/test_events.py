"""
Tests for domain events.
"""

import pytest
from datetime import datetime

from library_catalog.domain.events import BookAdded
from library_catalog.domain.value_objects import BookId


class TestBookAdded:
    """Tests for the BookAdded event."""

    def test_event_carries_book_id(self):
        book_id = BookId.create_new()

        event = BookAdded(book_id=book_id)

        assert event.book_id == book_id
        assert event.event_type == "BookAdded"
        assert event.occurred_at.tzinfo is not None

    def test_each_event_has_its_own_id(self):
        book_id = BookId.create_new()

        assert BookAdded(book_id=book_id).event_id != BookAdded(book_id=book_id).event_id

    def test_to_dict(self):
        """Test that the serialized form is JSON-friendly."""
        book_id = BookId.create_new()
        event = BookAdded(book_id=book_id)

        data = event.to_dict()

        assert data["book_id"] == str(book_id)
        assert data["event_id"] == str(event.event_id)
        assert data["event_type"] == "BookAdded"
        datetime.fromisoformat(data["occurred_at"])

    def test_event_is_immutable(self):
        event = BookAdded(book_id=BookId.create_new())

        with pytest.raises(Exception):
            event.book_id = BookId.create_new()
