""" Deep equality: recursive structural comparison with matchers """

from __future__ import annotations

import math
import logging
import numbers
from collections import abc
from typing import Any

from expecto.asymmetric import AsymmetricMatcher
from expecto.util.magic_symbol import MISSING
from .category import Category, category_of, record_items, is_nan


logger = logging.getLogger(__name__)


def same_value(a: Any, b: Any) -> bool:
    """ Identity for objects; value equality for scalars of the same category

    NaN is the same as NaN; 0.0 is not the same as -0.0.
    """
    return _same_scalar(a, b, signed_zero=True)


def same_value_zero(a: Any, b: Any) -> bool:
    """ Like same_value(), but 0.0 is the same as -0.0 """
    return _same_scalar(a, b, signed_zero=False)


def deep_equal(a: Any, b: Any) -> bool:
    """ Compare two values recursively

    Rules, first match wins:

    1. A matcher on either side decides by itself
    2. Same value (see `same_value()`)
    3. None and MISSING are only equal to themselves
    4. Values of different categories are not equal
    5. Then, by category: numbers by value, dates by instant, patterns by source and flags,
       sequences item by item, records key by key. Other objects use their own `==`.

    Cyclic structures are not supported: the recursion has no cycle guard.
    """
    # Matchers first, on either side
    if isinstance(b, AsymmetricMatcher):
        return b.matches(a)
    if isinstance(a, AsymmetricMatcher):
        return a.matches(b)

    if same_value(a, b):
        return True

    # None, MISSING
    if a is None or b is None or a is MISSING or b is MISSING:
        return a is b

    category = category_of(a)
    if category is not category_of(b):
        return False

    compare = _COMPARE_BY_CATEGORY.get(category, _not_equal)
    return compare(a, b)


def _same_scalar(a: Any, b: Any, *, signed_zero: bool) -> bool:
    if a is b:
        return True

    category = category_of(a)
    if category not in (Category.BOOLEAN, Category.NUMBER, Category.TEXT) or category is not category_of(b):
        return False

    if category is Category.NUMBER:
        if is_nan(a) or is_nan(b):
            return is_nan(a) and is_nan(b)
        if signed_zero and a == 0 and b == 0 and isinstance(a, numbers.Real) and isinstance(b, numbers.Real):
            return math.copysign(1, a) == math.copysign(1, b)

    return a == b


def _equal_numbers(a: numbers.Number, b: numbers.Number) -> bool:
    # Signalling Decimal NaNs refuse to be compared
    try:
        return a == b
    except ArithmeticError as e:
        logger.debug('Comparison of %r with %r raised %r; treating as unequal', a, b, e)
        return False


def _equal_temporal(a, b) -> bool:
    return type(a) is type(b) and a == b


def _equal_patterns(a, b) -> bool:
    return a.pattern == b.pattern and a.flags == b.flags


def _equal_sequences(a: abc.Sequence, b: abc.Sequence) -> bool:
    if len(a) != len(b):
        return False
    return all(deep_equal(x, y) for x, y in zip(a, b))


def _equal_records(a, b) -> bool:
    a_items = record_items(a)
    b_items = record_items(b)

    if a_items.keys() != b_items.keys():
        return False
    return all(deep_equal(value, b_items[key]) for key, value in a_items.items())


def _equal_other(a, b) -> bool:
    # Objects we know nothing about decide for themselves
    try:
        return bool(a == b)
    except Exception as e:
        logger.debug('Comparison of %s with %s raised %r; treating as unequal', type(a).__name__, type(b).__name__, e)
        return False


def _not_equal(a, b) -> bool:
    return False


_COMPARE_BY_CATEGORY: dict[Category, abc.Callable[[Any, Any], bool]] = {
    Category.NUMBER: _equal_numbers,
    Category.TEMPORAL: _equal_temporal,
    Category.PATTERN: _equal_patterns,
    Category.SEQUENCE: _equal_sequences,
    Category.RECORD: _equal_records,
    Category.OTHER: _equal_other,
}
