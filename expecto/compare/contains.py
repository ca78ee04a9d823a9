""" Containment: one-directional subset matching, and property lookups """

from __future__ import annotations

from collections import abc
from typing import Any, Union

from expecto.asymmetric import AsymmetricMatcher
from expecto.util.magic_symbol import MISSING
from .category import Category, category_of, record_items, is_object
from .equal import deep_equal


# Property path: 'a.b.c' or ['a', 'b', 'c']
PropertyPath = Union[str, abc.Sequence]


def object_contains(candidate: Any, expected: Any) -> bool:
    """ Check that `candidate` has at least the keys and values of `expected`

    Keys that `candidate` has, but `expected` does not, are ignored.
    Nested records are matched partially as well; everything else is compared with deep_equal().

    Example:
        object_contains({'a': 1, 'b': {'c': 2, 'd': 3}}, {'b': {'c': 2}})  # -> True
    """
    for key, expected_value in record_items(expected).items():
        candidate_value = lookup_key(candidate, key)
        if candidate_value is MISSING:
            return False

        if isinstance(expected_value, AsymmetricMatcher):
            if not expected_value.matches(candidate_value):
                return False
        elif category_of(expected_value) is Category.RECORD:
            if not is_object(candidate_value):
                return False
            if not object_contains(candidate_value, expected_value):
                return False
        elif not deep_equal(candidate_value, expected_value):
            return False

    return True


def array_contains_equal(items: abc.Iterable, expected: Any) -> bool:
    """ Check that at least one of the items is deep_equal() to `expected` """
    return any(deep_equal(item, expected) for item in items)


def get_property(obj: Any, path: PropertyPath) -> tuple[bool, Any]:
    """ Follow a property path through nested objects

    Returns:
        (exists, value). When the path is not found, `value` is MISSING.

    Example:
        get_property({'a': {'b': 2}}, 'a.b')  # -> (True, 2)
        get_property({'a': 1}, ['a', 'b'])  # -> (False, MISSING)
    """
    keys = path.split('.') if isinstance(path, str) else list(path)

    current = obj
    for key in keys:
        # Only objects have properties
        if not is_object(current):
            return False, MISSING

        current = lookup_key(current, key)
        if current is MISSING:
            return False, MISSING

    return True, current


def lookup_key(obj: Any, key: Any) -> Any:
    """ Get one property of an object, or MISSING

    Mappings are looked up by key, sequences by integer index, anything else by attribute.
    """
    if isinstance(obj, abc.Mapping):
        return obj[key] if key in obj else MISSING
    elif category_of(obj) is Category.SEQUENCE:
        index = _as_index(key)
        if index is None or not 0 <= index < len(obj):
            return MISSING
        return obj[index]
    elif isinstance(key, str):
        return getattr(obj, key, MISSING)
    else:
        return MISSING


def _as_index(key: Any) -> Union[int, None]:
    if isinstance(key, bool):
        return None
    elif isinstance(key, int):
        return key
    elif isinstance(key, str) and key.isdigit():
        return int(key)
    else:
        return None
