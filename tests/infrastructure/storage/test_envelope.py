"""Tests for the versioned value envelope."""

import json

import pytest

from stockbook.infrastructure.storage.envelope import (
    SCHEMA_VERSION,
    UnreadableValueError,
    decode,
    encode,
    namespaced,
)


class TestEncode:
    """Tests for encode()."""

    def test_wraps_value(self):
        assert json.loads(encode([1, 2])) == {"schema_version": SCHEMA_VERSION, "data": [1, 2]}

    def test_keeps_non_ascii(self):
        assert "چای" in encode({"name": "چای"})

    def test_rejects_nan(self):
        with pytest.raises(ValueError):
            encode([float("nan")])

    def test_rejects_unserializable(self):
        with pytest.raises(TypeError):
            encode({"when": object()})


class TestDecode:
    """Tests for decode()."""

    def test_current_version(self):
        assert decode(encode({"a": 1})) == {"a": 1}

    @pytest.mark.parametrize("text,expected", [("[1, 2]", [1, 2]), ('{"a": 1}', {"a": 1}), ("null", None)])
    def test_legacy_bare_value(self, text, expected):
        assert decode(text) == expected

    def test_dict_with_extra_keys_is_legacy(self):
        text = '{"schema_version": 1, "data": [], "other": true}'
        assert decode(text) == {"schema_version": 1, "data": [], "other": True}

    @pytest.mark.parametrize(
        "text",
        [
            "{not json",
            "",
            '{"schema_version": 2, "data": []}',
            '{"schema_version": -1, "data": []}',
            '{"schema_version": "1", "data": []}',
            '{"schema_version": true, "data": []}',
        ],
    )
    def test_unreadable(self, text):
        with pytest.raises(UnreadableValueError):
            decode(text)


class TestNamespaced:
    """Tests for namespaced()."""

    def test_prefix(self):
        assert namespaced("stockbook", "products") == "stockbook:products"

    def test_empty_namespace(self):
        assert namespaced("", "products") == "products"
