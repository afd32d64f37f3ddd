"""Unit tests for the key-value store interface."""

import pytest

from stockbook.core.interfaces import IKeyValueStore
from stockbook.infrastructure.storage import InMemoryKeyValueStore, SQLiteKeyValueStore


class TestIKeyValueStoreInterface:
    """Tests for IKeyValueStore abstract interface."""

    def test_is_abstract_class(self):
        with pytest.raises(TypeError, match="Can't instantiate abstract class"):
            IKeyValueStore()

    def test_operations_defined(self):
        """Verify read, write and delete are abstract."""
        assert set(IKeyValueStore.__abstractmethods__) == {"read", "write", "delete"}

    @pytest.mark.parametrize("store_cls", [InMemoryKeyValueStore, SQLiteKeyValueStore])
    def test_backends_implement_interface(self, store_cls):
        assert isinstance(store_cls(), IKeyValueStore)
