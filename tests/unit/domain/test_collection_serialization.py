"""Tests for collection serialization."""

import json
from decimal import Decimal

import pytest

from fluent_collections import Collection, JsonOptions, SerializationError
from fluent_collections.config import AppConfig, SerializationConfig, set_config


class TestToArray:
    """Test to_array() and to_dict()."""

    def test_sequential_collection_becomes_list(self):
        """Test that 0..n-1 keys give a list."""
        collection = Collection().add('some_item').add('some_other_item')
        assert collection.to_array() == ['some_item', 'some_other_item']

    def test_keyed_collection_becomes_dict(self, person):
        """Test that explicit keys give a dict."""
        assert person.to_array() == {'name': 'john', 'age': 35, 'sex': 'male'}

    def test_gapped_integer_keys_become_dict(self):
        """Test that non-contiguous integer keys give a dict."""
        collection = Collection(['a', 'b', 'c']).filter(lambda item: item != 'b')
        assert collection.to_array() == {0: 'a', 2: 'c'}

    def test_to_array_is_shallow(self):
        """Test that nested collections are returned untouched."""
        inner = Collection([1])
        assert Collection([inner]).to_array()[0] is inner

    def test_to_dict_always_returns_mapping(self):
        """Test to_dict on a sequential collection."""
        assert Collection(['a']).to_dict() == {0: 'a'}


class TestToJson:
    """Test to_json()."""

    def test_keyed_collection_as_object(self):
        """Test rendering explicit keys as a JSON object."""
        collection = Collection({'name': 'john', 'age': 35})
        assert collection.to_json() == '{"name":"john","age":35}'

    def test_sequential_collection_as_array(self):
        """Test rendering 0..n-1 keys as a JSON array."""
        assert Collection([1, 'two', None, True, 2.5]).to_json() == '[1,"two",null,true,2.5]'

    def test_empty_collection_as_array(self):
        """Test that an empty collection renders as an empty array."""
        assert Collection().to_json() == '[]'

    def test_gapped_keys_as_object(self):
        """Test that non-contiguous integer keys render as an object."""
        assert Collection({1: 'a', 0: 'b'}).to_json() == '{"1":"a","0":"b"}'

    def test_nested_structures(self):
        """Test nested collections, mappings and lists."""
        collection = Collection({
            'tags': Collection(['a', 'b']),
            'meta': {0: 'x', 1: 'y'},
            'pairs': [(1, 2)],
        })
        assert collection.to_json() == '{"tags":["a","b"],"meta":["x","y"],"pairs":[[1,2]]}'

    def test_round_trip(self, people_records):
        """Test that parsing the JSON gives back to_array()."""
        for collection in (Collection(people_records), Collection({'a': [1, 2], 'b': None})):
            assert json.loads(collection.to_json()) == collection.to_array()

    def test_slashes_escaped_by_default(self):
        """Test that forward slashes are escaped unless asked not to."""
        collection = Collection(['a/b'])
        assert collection.to_json() == '["a\\/b"]'
        assert collection.to_json(JsonOptions.UNESCAPED_SLASHES) == '["a/b"]'

    def test_unicode_escaped_by_default(self):
        """Test non-ASCII escaping and UNESCAPED_UNICODE."""
        collection = Collection(['café'])
        assert collection.to_json() == '["caf\\u00e9"]'
        assert collection.to_json(JsonOptions.UNESCAPED_UNICODE) == '["café"]'

    def test_force_object(self):
        """Test FORCE_OBJECT renders arrays as objects."""
        collection = Collection(['a', ['b']])
        assert collection.to_json(JsonOptions.FORCE_OBJECT) == '{"0":"a","1":{"0":"b"}}'

    def test_pretty_print(self):
        """Test PRETTY_PRINT output."""
        expected = '{\n    "name": "john",\n    "age": 35\n}'
        assert Collection({'name': 'john', 'age': 35}).to_json(JsonOptions.PRETTY_PRINT) == expected

    def test_combined_flags_as_int(self):
        """Test that plain integer option bits are accepted."""
        collection = Collection(['a/é'])
        assert collection.to_json(64 | 256) == '["a/é"]'

    def test_configured_defaults(self):
        """Test that configuration supplies default options and indent."""
        set_config(AppConfig(serialization=SerializationConfig(
            default_json_options=int(JsonOptions.PRETTY_PRINT), pretty_print_indent=2
        )))
        assert Collection({'a': 1}).to_json() == '{\n  "a": 1\n}'
        assert Collection({'a': 1}).to_json(0) == '{"a":1}'

    def test_str_is_json(self, person):
        """Test that str() renders JSON."""
        assert str(person) == '{"name":"john","age":35,"sex":"male"}'

    def test_unencodable_value(self):
        """Test that values JSON cannot represent raise SerializationError."""
        with pytest.raises(SerializationError) as exc_info:
            Collection([Decimal('1.5')]).to_json()
        assert exc_info.value.details

    def test_nan_is_refused(self):
        """Test that NaN cannot be encoded."""
        with pytest.raises(SerializationError):
            Collection([float('nan')]).to_json()
