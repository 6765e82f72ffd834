"""Unit tests for Collection."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from support import Collection, collect
from support.Config import settings
from support.Contracts import ToArrayInterface, ToJsonInterface
from support.Exceptions import InvalidArgumentException


class TestCollection:
    """Test suite for Collection."""

    @pytest.fixture
    def products(self) -> List[Dict[str, Any]]:
        """Product rows, one without a price."""
        return [
            {'product': 'Desk', 'price': 200},
            {'product': 'Chair', 'price': 100},
            {'product': 'Bookcase'},
        ]

    def test_construct_and_count(self) -> None:
        """Test building collections and counting items."""
        assert Collection([1, 2, 3]).count() == 3
        assert Collection().count() == 0
        assert len(Collection({'a': 1})) == 1
        assert Collection((x for x in range(4))).values() == [0, 1, 2, 3]

    def test_construct_rejects_scalars(self) -> None:
        """Test that strings and scalars cannot become collections."""
        with pytest.raises(InvalidArgumentException):
            Collection('abc')  # type: ignore[arg-type]

        with pytest.raises(InvalidArgumentException):
            Collection(5)  # type: ignore[arg-type]

    def test_make_and_collect(self) -> None:
        """Test the factory helpers."""
        assert Collection.make([1]).to_array() == [1]
        assert collect({'a': 1}).to_array() == {'a': 1}
        assert collect().is_empty()

    def test_contracts(self) -> None:
        """Test that collections implement both conversion contracts."""
        collection = Collection()
        assert isinstance(collection, ToArrayInterface)
        assert isinstance(collection, ToJsonInterface)

    def test_is_empty(self) -> None:
        """Test emptiness checks."""
        assert Collection([1]).is_empty() is False
        assert Collection().is_empty() is True
        assert not Collection()
        assert Collection([0])

    def test_iteration(self) -> None:
        """Test that iteration yields values in order."""
        collection = Collection({'a': 1, 'b': 2})
        assert list(collection) == [1, 2]
        assert collection.items() == [('a', 1), ('b', 2)]
        assert 2 in collection
        assert 'a' not in collection

    def test_filter(self) -> None:
        """Test filtering keeps keys and leaves the source alone."""
        collection = Collection([1, 2, 3, 4])
        filtered = collection.filter(lambda value: value > 2)

        assert filtered is not collection
        assert filtered.values() == [3, 4]
        assert filtered.to_array() == {2: 3, 3: 4}
        assert collection.to_array() == [1, 2, 3, 4]

    def test_filter_without_callback(self) -> None:
        """Test that falsy values are dropped by default."""
        assert Collection([0, 1, None, '', 'a', []]).filter().values() == [1, 'a']

    def test_filter_with_key(self) -> None:
        """Test that callbacks may take the key as well."""
        collection = Collection({'a': 1, 'b': 2, 'c': 3})
        assert collection.filter(lambda value, key: key != 'b').to_array() == {'a': 1, 'c': 3}

    def test_map(self) -> None:
        """Test mapping values."""
        collection = Collection([1, 2, 3])
        mapped = collection.map(lambda value: value * 2)

        assert mapped is not collection
        assert mapped.to_array() == [2, 4, 6]
        assert collection.to_array() == [1, 2, 3]

    def test_map_preserves_keys(self) -> None:
        """Test that mapping keeps each value's key."""
        collection = Collection({'a': 1, 'b': 2})
        assert collection.map(lambda value, key: f"{key}{value}").to_array() == {'a': 'a1', 'b': 'b2'}

    def test_reduce(self) -> None:
        """Test reducing to a single value."""
        collection = Collection([1, 2, 3])
        assert collection.reduce(lambda carry, item: carry + item, 0) == 6
        assert Collection().reduce(lambda carry, item: carry + item, 'empty') == 'empty'

    def test_first_and_last(self) -> None:
        """Test first and last items."""
        collection = Collection(['a', 'b', 'c'])
        assert collection.first() == 'a'
        assert collection.last() == 'c'
        assert Collection().first() is None
        assert Collection().last() is None

    def test_to_array(self) -> None:
        """Test that dense integer keys come back as a list."""
        assert Collection([1, 2, 3]).to_array() == [1, 2, 3]
        assert Collection({1: 'a', 0: 'b'}).to_array() == {1: 'a', 0: 'b'}
        assert Collection().to_array() == []

    def test_json_conversion(self) -> None:
        """Test JSON output and string conversion."""
        data = {'a': 1, 'b': 2}
        collection = Collection(data)

        assert collection.json_serialize() == data
        assert collection.to_json() == '{\n    "a": 1,\n    "b": 2\n}'
        assert str(collection) == collection.to_json()
        assert collection.to_json(indent=0) == '{\n"a": 1,\n"b": 2\n}'

    def test_json_unescaped_slashes_and_nested(self) -> None:
        """Test that slashes stay readable and nested values are converted."""
        collection = Collection({'url': 'a/b', 'inner': Collection([1]), 'obj': SimpleNamespace(x=1, _hidden=2)})
        assert json.loads(collection.to_json()) == {'url': 'a/b', 'inner': [1], 'obj': {'x': 1}}
        assert 'a/b' in collection.to_json()

    def test_json_indent_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the configured indent is used by default."""
        monkeypatch.setattr(settings, 'JSON_INDENT', 2)
        assert Collection({'a': 1}).to_json() == '{\n  "a": 1\n}'

    def test_mutable_methods(self) -> None:
        """Test set, add, remove and clear changing the collection in place."""
        collection = Collection({'a': 1})

        collection.set('a', 10).set('b', 20)
        assert collection.to_array() == {'a': 10, 'b': 20}

        collection.add(30)
        assert collection.to_array() == {'a': 10, 'b': 20, 0: 30}

        collection.remove('b')
        assert collection.to_array() == {'a': 10, 0: 30}

        collection.clear()
        assert collection.is_empty()

    def test_add_uses_next_integer_key(self) -> None:
        """Test that add appends after the largest integer key."""
        collection = Collection({5: 'a', 'x': 'b'})
        collection.add('c')
        assert collection.keys() == [5, 'x', 6]

    def test_set_normalises_digit_keys(self) -> None:
        """Test that "0" and 0 address the same item."""
        collection = Collection().set('0', 'a').add('b')
        assert collection.to_array() == ['a', 'b']
        assert collection.count() == 2

        collection.set(1, 'c').set('0', 'd')
        assert collection.to_json(indent=0) == '[\n"d",\n"c"\n]'

    def test_set_keeps_existing_string_key(self) -> None:
        """Test that an existing digit-string key is updated in place."""
        collection = Collection({'7': 'a'})
        collection.set(7, 'b').add('c')
        assert collection.to_array() == {'7': 'b', 8: 'c'}

    def test_add_then_remove_restores(self) -> None:
        """Test that removing the added key restores the prior state."""
        collection = Collection([1, 2])
        before = collection.to_array()

        collection.add(3)
        collection.remove(2)
        assert collection.to_array() == before

    def test_get_and_has(self) -> None:
        """Test key lookups, with None values still present."""
        collection = Collection({'a': 1, 'b': None, 'c': {'d': 4}})

        assert collection.has('a') is True
        assert collection.has('b') is True
        assert collection.has('z') is False
        assert collection.has('c.d') is True

        assert collection.get('a') == 1
        assert collection.get('b', 'default') is None
        assert collection.get('z', 'default') == 'default'
        assert collection.get('c.d') == 4

    def test_getitem(self) -> None:
        """Test indexing by key."""
        collection = Collection(['a', 'b'])
        assert collection[1] == 'b'
        assert collection['0'] == 'a'

        with pytest.raises(KeyError):
            collection[5]

    def test_keys_and_values(self) -> None:
        """Test key and value lists."""
        collection = Collection({'a': 1, 'b': 2})
        assert collection.keys() == ['a', 'b']
        assert collection.values() == [1, 2]

    def test_merge(self) -> None:
        """Test merging collections and raw arrays."""
        first = Collection({'a': 1})
        merged = first.merge(Collection({'b': 2}))

        assert merged is not first
        assert merged.to_array() == {'a': 1, 'b': 2}
        assert first.merge({'c': 3}).to_array() == {'a': 1, 'c': 3}
        assert first.to_array() == {'a': 1}

    def test_merge_renumbers_integer_keys(self) -> None:
        """Test that integer keys are appended and string keys overwritten."""
        merged = Collection({'a': 1, 0: 'x'}).merge({'a': 2, 0: 'y'})
        assert merged.to_array() == {'a': 2, 0: 'x', 1: 'y'}
        assert Collection([1, 2]).merge([3]).to_array() == [1, 2, 3]

    def test_slice(self) -> None:
        """Test slicing keeps the original keys."""
        collection = Collection(['a', 'b', 'c', 'd'])
        sliced = collection.slice(1, 2)

        assert sliced is not collection
        assert sliced.to_array() == {1: 'b', 2: 'c'}
        assert collection.slice(-2).to_array() == {2: 'c', 3: 'd'}
        assert collection.slice(1, -1).values() == ['b', 'c']
        assert collection.slice(10).to_array() == []

    def test_chunk(self) -> None:
        """Test splitting into keyed chunks."""
        chunks = Collection([1, 2, 3, 4, 5]).chunk(2)

        assert isinstance(chunks, Collection)
        assert chunks.count() == 3
        assert chunks.to_array() == [{0: 1, 1: 2}, {2: 3, 3: 4}, {4: 5}]

    def test_chunk_rejects_bad_size(self) -> None:
        """Test that a chunk size below one is invalid."""
        with pytest.raises(InvalidArgumentException):
            Collection([1]).chunk(0)

    def test_pluck(self, products: List[Dict[str, Any]]) -> None:
        """Test plucking a field, None where it is missing."""
        assert Collection(products).pluck('price').to_array() == [200, 100, None]

    def test_pluck_from_objects(self) -> None:
        """Test plucking attributes of objects."""
        collection = Collection([SimpleNamespace(name='a'), SimpleNamespace(name='b')])
        assert collection.pluck('name').to_array() == ['a', 'b']

    def test_group_by(self) -> None:
        """Test grouping rows by a field."""
        collection = Collection([
            {'account_id': 'acc-1', 'product': 'Desk'},
            {'account_id': 'acc-1', 'product': 'Chair'},
            {'account_id': 'acc-2', 'product': 'Bookcase'},
        ])

        grouped = collection.group_by('account_id')
        assert len(grouped) == 2
        assert grouped.keys() == ['acc-1', 'acc-2']
        assert len(grouped.get('acc-1')) == 2
        assert len(grouped.get('acc-2')) == 1

    def test_group_by_missing_value(self, products: List[Dict[str, Any]]) -> None:
        """Test that missing or None group values share the empty-string group."""
        grouped = Collection(products + [{'product': 'Lamp', 'price': None}]).group_by('price')
        assert grouped.keys() == [200, 100, '']
        assert [row['product'] for row in grouped['']] == ['Bookcase', 'Lamp']

    def test_group_by_unhashable_value(self) -> None:
        """Test that unhashable group values are rejected."""
        with pytest.raises(InvalidArgumentException):
            Collection([{'tags': ['a']}]).group_by('tags')

    def test_sort(self) -> None:
        """Test sorting by value."""
        collection = Collection([5, 3, 1, 4, 2])
        sorted_collection = collection.sort()

        assert sorted_collection is not collection
        assert sorted_collection.values() == [1, 2, 3, 4, 5]
        assert sorted_collection.keys() == [2, 4, 1, 3, 0]
        assert collection.values() == [5, 3, 1, 4, 2]

    def test_sort_mixed_values(self) -> None:
        """Test that None sorts first and numbers come before strings."""
        assert Collection([3, None, 1]).sort().values() == [None, 1, 3]
        assert Collection(['b', 2, None, 'a', 1.5]).sort().values() == [None, 1.5, 2, 'a', 'b']
        assert Collection({'x': None, 'y': 0}).sort().keys() == ['x', 'y']

    def test_sort_incomparable_values(self) -> None:
        """Test that values without an order need a comparator."""
        collection = Collection([{'a': 1}, {'a': 2}])
        with pytest.raises(InvalidArgumentException):
            collection.sort()

        assert collection.sort(lambda a, b: b['a'] - a['a']).values() == [{'a': 2}, {'a': 1}]

    def test_sort_with_comparator(self) -> None:
        """Test sorting with a comparison callback."""
        users = Collection([
            {'name': 'C', 'age': 20},
            {'name': 'A', 'age': 30},
            {'name': 'B', 'age': 10},
        ])
        sorted_users = users.sort(lambda a, b: a['age'] - b['age'])
        assert sorted_users.first()['name'] == 'B'
        assert sorted_users.pluck('name').values() == ['B', 'C', 'A']

    def test_reverse(self) -> None:
        """Test reversing order while keeping keys."""
        collection = Collection(['a', 'b', 'c'])
        reversed_collection = collection.reverse()

        assert reversed_collection is not collection
        assert reversed_collection.values() == ['c', 'b', 'a']
        assert reversed_collection.keys() == [2, 1, 0]

    def test_non_mutators_leave_source_unchanged(self, products: List[Dict[str, Any]]) -> None:
        """Test that derived collections never change the source."""
        collection = Collection(products)
        before = collection.to_array()

        collection.filter(lambda row: 'price' in row)
        collection.map(lambda row: row.get('price'))
        collection.pluck('product')
        collection.group_by('product')
        collection.merge([{'product': 'Lamp'}])
        collection.slice(1)
        collection.chunk(2)
        collection.sort(lambda a, b: 0)
        collection.reverse()

        assert collection.to_array() == before

    def test_equality_and_repr(self) -> None:
        """Test comparisons against collections and raw data."""
        assert Collection([1, 2]) == Collection([1, 2])
        assert Collection([1, 2]) == [1, 2]
        assert Collection({'a': 1}) == {'a': 1}
        assert Collection([1]) != Collection([2])
        assert repr(Collection([1])) == 'Collection([1])'
