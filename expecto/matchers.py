""" Asymmetric matchers: values that match a whole class of values

Use them anywhere a plain value is expected: in to_equal(), to_match_object(), to_have_been_called_with(),
at any nesting depth.

Example:
    expect(response).to_match_object({
        'id': any_of(int),
        'login': string_matching(r'^\\w+$'),
        'roles': array_containing(['admin']),
        'created': anything(),
    })
"""

from __future__ import annotations

import re
import numbers
from collections import abc
from typing import Any, Union

from .asymmetric import AsymmetricMatcher
from .errors import UsageError
from .format import format_value, format_pattern
from .compare import Category, category_of, is_object, deep_equal, object_contains


class Anything(AsymmetricMatcher):
    """ Matches anything but None and MISSING """
    __slots__ = ()
    type = 'expect.anything'

    def matches(self, other: Any) -> bool:
        return category_of(other) is not Category.NONE

    def describe(self) -> str:
        return 'Anything'


class AnyOfType(AsymmetricMatcher):
    """ Matches any value of the given type

    Builtin types match by category: `any_of(str)` matches any text, `any_of(float)` any number but a bool,
    `any_of(list)` any sequence, `any_of(dict)` any record, `any_of(object)` any object that is not a scalar.
    Other types use isinstance().
    """
    __slots__ = ('_cls',)
    type = 'expect.any'

    def __init__(self, cls: type):
        if not isinstance(cls, type):
            raise UsageError(f'any_of() expects a type, got {format_value(cls)}', matcher='any_of')
        self._cls = cls

    def matches(self, other: Any) -> bool:
        try:
            predicate = _TYPE_PREDICATES[self._cls]
        except KeyError:
            return isinstance(other, self._cls)
        else:
            return predicate(other)

    def describe(self) -> str:
        return f'Any<{self._cls.__name__}>'


class ArrayContaining(AsymmetricMatcher):
    """ Matches a sequence that has every one of the expected items, in any order """
    __slots__ = ('_items',)
    type = 'expect.arrayContaining'

    def __init__(self, items: abc.Iterable):
        self._items = list(items)

    def matches(self, other: Any) -> bool:
        if category_of(other) is not Category.SEQUENCE:
            return False
        return all(
            any(deep_equal(item, expected) for item in other)
            for expected in self._items
        )

    def describe(self) -> str:
        return f'ArrayContaining {format_value(self._items)}'


class ObjectContaining(AsymmetricMatcher):
    """ Matches an object that has at least the expected keys and values """
    __slots__ = ('_shape',)
    type = 'expect.objectContaining'

    def __init__(self, shape: Any):
        if category_of(shape) is not Category.RECORD:
            raise UsageError(
                f'object_containing() expects a record, got {format_value(shape)}',
                'Pass a dict, a dataclass or a pydantic model',
                matcher='object_containing',
            )
        self._shape = shape

    def matches(self, other: Any) -> bool:
        return is_object(other) and object_contains(other, self._shape)

    def describe(self) -> str:
        return f'ObjectContaining {format_value(self._shape)}'


class StringContaining(AsymmetricMatcher):
    """ Matches a string that contains the substring """
    __slots__ = ('_substring',)
    type = 'expect.stringContaining'

    def __init__(self, substring: str):
        self._substring = substring

    def matches(self, other: Any) -> bool:
        return isinstance(other, str) and self._substring in other

    def describe(self) -> str:
        return f'StringContaining "{self._substring}"'


class StringMatching(AsymmetricMatcher):
    """ Matches a string where the pattern is found. A str argument is compiled first """
    __slots__ = ('_pattern',)
    type = 'expect.stringMatching'

    def __init__(self, pattern: Union[str, re.Pattern]):
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def matches(self, other: Any) -> bool:
        return isinstance(other, str) and self._pattern.search(other) is not None

    def describe(self) -> str:
        return f'StringMatching {format_pattern(self._pattern)}'


# Factories

def anything() -> Anything:
    """ Matches any value except None and MISSING """
    return Anything()


def any_of(cls: type) -> AnyOfType:
    """ Matches any value of the given type """
    return AnyOfType(cls)


def array_containing(items: abc.Iterable) -> ArrayContaining:
    """ Matches a sequence that includes all of the `items` """
    return ArrayContaining(items)


def object_containing(shape: Any) -> ObjectContaining:
    """ Matches an object that includes all the keys and values of `shape` """
    return ObjectContaining(shape)


def string_containing(substring: str) -> StringContaining:
    """ Matches a string that includes `substring` """
    return StringContaining(substring)


def string_matching(pattern: Union[str, re.Pattern]) -> StringMatching:
    """ Matches a string in which `pattern` is found """
    return StringMatching(pattern)


# Types that match by category rather than by isinstance()
_TYPE_PREDICATES: dict[type, abc.Callable[[Any], bool]] = {
    str: lambda v: category_of(v) is Category.TEXT,
    bool: lambda v: category_of(v) is Category.BOOLEAN,
    int: lambda v: isinstance(v, int) and not isinstance(v, bool),
    float: lambda v: category_of(v) is Category.NUMBER,
    numbers.Number: lambda v: category_of(v) is Category.NUMBER,
    abc.Callable: callable,  # type: ignore[dict-item]
    list: lambda v: category_of(v) is Category.SEQUENCE,
    dict: lambda v: category_of(v) is Category.RECORD,
    object: is_object,
}
