import re
import numbers
from collections import abc
from dataclasses import dataclass

import pytest

from expecto import (
    MISSING, UsageError, AsymmetricMatcher,
    anything, any_of, array_containing, object_containing, string_containing, string_matching,
    expect,
)


@dataclass
class Point:
    x: int
    y: int


def test_anything():
    m = anything()
    assert isinstance(m, AsymmetricMatcher)
    assert m.type == 'expect.anything'
    assert m.describe() == 'Anything'

    assert m.matches(0) == True
    assert m.matches('') == True
    assert m.matches(False) == True
    assert m.matches([]) == True
    assert m.matches(None) == False
    assert m.matches(MISSING) == False


def test_any_of():
    # Builtin types match by category
    assert any_of(str).matches('a') == True
    assert any_of(str).matches(1) == False
    assert any_of(int).matches(1) == True
    assert any_of(int).matches(True) == False
    assert any_of(numbers.Number).matches(1.5) == True
    assert any_of(numbers.Number).matches(True) == False
    assert any_of(float).matches(1) == True
    assert any_of(float).matches(False) == False
    assert any_of(int).matches(1.5) == False
    assert any_of(bool).matches(False) == True
    assert any_of(bool).matches(0) == False
    assert any_of(abc.Callable).matches(len) == True
    assert any_of(list).matches([1]) == True
    assert any_of(list).matches((1,)) == True
    assert any_of(list).matches('ab') == False
    assert any_of(dict).matches({'a': 1}) == True
    assert any_of(dict).matches(Point(1, 2)) == True
    assert any_of(dict).matches([]) == False
    assert any_of(object).matches([]) == True
    assert any_of(object).matches(None) == False
    assert any_of(object).matches(1) == False

    # Other types: isinstance()
    assert any_of(Point).matches(Point(1, 2)) == True
    assert any_of(Point).matches({'x': 1, 'y': 2}) == False
    assert any_of(Exception).matches(ValueError()) == True

    # Description
    assert any_of(int).type == 'expect.any'
    assert any_of(int).describe() == 'Any<int>'

    # Not a type
    with pytest.raises(UsageError):
        any_of('int')


def test_array_containing():
    assert array_containing([3, 1]).matches([1, 2, 3]) == True
    assert array_containing([3, 1]).matches([1, 2]) == False
    assert array_containing([]).matches([]) == True
    assert array_containing([{'a': 1}]).matches([{'a': 1}, {'b': 2}]) == True
    assert array_containing([any_of(str)]).matches([1, 'a']) == True

    # Not a sequence
    assert array_containing([1]).matches({1: 1}) == False
    assert array_containing(['a']).matches('abc') == False


def test_object_containing():
    assert object_containing({'a': any_of(int)}).matches({'a': 5, 'b': 'x'}) == True
    assert object_containing({'a': any_of(int)}).matches({'a': 'x'}) == False
    assert object_containing({}).matches({}) == True
    assert object_containing({}).matches(None) == False
    assert object_containing({'x': 1}).matches(Point(1, 2)) == True

    assert object_containing({'a': 1}).describe() == 'ObjectContaining {"a":1}'

    # Shape must be a record
    with pytest.raises(UsageError):
        object_containing([1, 2])


def test_string_matchers():
    assert string_containing('ell').matches('hello') == True
    assert string_containing('ell').matches('world') == False
    assert string_containing('1').matches(1) == False
    assert string_containing('ell').describe() == 'StringContaining "ell"'

    # Pattern, or a str compiled into one
    assert string_matching(r'^h\w+').matches('hello') == True
    assert string_matching(re.compile('^H', re.I)).matches('hello') == True
    assert string_matching('^x').matches('hello') == False
    assert string_matching('1').matches(1) == False


def test_matchers_with_plain_assert():
    # Matchers work with == too
    assert {'id': 1, 'login': 'kolypto'} == {'id': any_of(int), 'login': string_containing('oly')}
    assert [1, 'a'] != [any_of(str), 'a']


def test_matchers_nested_in_expectations():
    expect({'user': {'id': 1, 'roles': ['admin', 'user']}}).to_equal({
        'user': {
            'id': anything(),
            'roles': array_containing(['user']),
        },
    })

    expect({'a': 5, 'b': 'x'}).to_match_object({'a': any_of(int)})


def test_expect_shortcuts():
    assert expect.anything().matches(1) == True
    assert expect.any(int).matches(1) == True
    assert expect.array_containing([1]).matches([1]) == True
    assert expect.object_containing({}).matches({}) == True
    assert expect.string_containing('a').matches('a') == True
    assert expect.string_matching('a').matches('a') == True
