"""Tests for collection queries."""

import pytest

from fluent_collections import Collection


class TestEmptiness:
    """Test emptiness checks."""

    def test_is_empty(self):
        """Test is_empty before and after adding items."""
        collection = Collection()
        assert collection.is_empty() is True
        collection.add('some_item').add('some_other_item')
        assert collection.is_empty() is False

    def test_is_not_empty(self):
        """Test is_not_empty before and after adding items."""
        collection = Collection()
        assert collection.is_not_empty() is False
        collection.add('some_item')
        assert collection.is_not_empty() is True

    @pytest.mark.parametrize('items', [None, [], {}, [0], [None, None], {'a': 1}])
    def test_is_empty_matches_count(self, items):
        """Test that is_empty agrees with count."""
        collection = Collection(items)
        assert collection.is_empty() == (collection.count() == 0)

    def test_truthiness(self):
        """Test that an empty collection is falsy."""
        assert not Collection()
        assert Collection([0])


class TestFirstAndLast:
    """Test head and tail access."""

    def test_first(self, items):
        """Test first returns the first item without removing it."""
        assert items.first() == 'some_item'
        assert items.count() == 3

    def test_last(self, items):
        """Test last returns the last item without removing it."""
        assert items.last() == 'some_third_item'
        assert items.count() == 3

    def test_first_and_last_follow_insertion_order(self):
        """Test that keys do not affect first/last."""
        collection = Collection({9: 'nine', 'a': 'letter', 1: 'one'})
        assert collection.first() == 'nine'
        assert collection.last() == 'one'

    def test_empty_returns_none(self):
        """Test that first/last on an empty collection return None."""
        assert Collection().first() is None
        assert Collection().last() is None


class TestCount:
    """Test counting."""

    def test_count_and_len(self, items):
        """Test count() and len() agree."""
        assert items.count() == 3
        assert len(items) == 3

    def test_keys_and_values(self, person):
        """Test keys and values come back in insertion order."""
        assert person.keys() == ['name', 'age', 'sex']
        assert person.values() == ['john', 35, 'male']
