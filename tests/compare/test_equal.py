import re
import math
import datetime
from dataclasses import dataclass
from decimal import Decimal

import pytest
import pydantic as pd

from expecto import MISSING, any_of, anything, string_containing
from expecto.compare import deep_equal, same_value, same_value_zero


@dataclass
class Point:
    x: int
    y: int


class User(pd.BaseModel):
    id: int
    login: str


def test_same_value():
    # Scalars: by value
    assert same_value(1, 1) == True
    assert same_value(1, 1.0) == True
    assert same_value('a', 'a') == True
    assert same_value(True, True) == True

    # NaN is NaN
    assert same_value(math.nan, float('nan')) == True
    assert same_value(Decimal('NaN'), float('nan')) == True
    assert same_value(math.nan, 1.0) == False

    # Signed zeroes are different
    assert same_value(0.0, -0.0) == False
    assert same_value(0, 0.0) == True
    assert same_value_zero(0.0, -0.0) == True

    # Different categories
    assert same_value(True, 1) == False
    assert same_value('1', 1) == False

    # Objects: by identity
    lst = [1]
    assert same_value(lst, lst) == True
    assert same_value([1], [1]) == False
    assert same_value(None, None) == True
    assert same_value(MISSING, MISSING) == True


@pytest.mark.parametrize('value', [
    1, 1.5, 'a', True, None, MISSING, math.nan,
    [1, [2, 3]],
    {'a': {'b': [1, {'c': None}]}},
    datetime.datetime(2020, 1, 1),
    re.compile('a+'),
    Point(1, 2),
    User(id=1, login='kolypto'),
    {1, 2},
])
def test_deep_equal_reflexive(value):
    assert deep_equal(value, value) == True


def test_deep_equal_scalars():
    # Numbers by value; zeroes are equal
    assert deep_equal(0.0, -0.0) == True
    assert deep_equal(1, 1.0) == True
    assert deep_equal(Decimal('1.5'), 1.5) == True
    assert deep_equal(1, 2) == False

    # Signalling NaNs refuse comparisons: not equal, but no error either
    assert deep_equal(Decimal('sNaN'), 1) == False
    assert deep_equal(1.5, Decimal('sNaN')) == False
    assert deep_equal(Decimal('sNaN'), Decimal('NaN')) == True

    # None and MISSING
    assert deep_equal(None, None) == True
    assert deep_equal(None, MISSING) == False
    assert deep_equal(MISSING, None) == False
    assert deep_equal(None, 0) == False
    assert deep_equal('', None) == False

    # Different categories
    assert deep_equal(1, '1') == False
    assert deep_equal(True, 1) == False
    assert deep_equal(0, False) == False
    assert deep_equal('a', ['a']) == False


def test_deep_equal_temporal():
    utc = datetime.timezone.utc
    plus2 = datetime.timezone(datetime.timedelta(hours=2))

    # Same instant
    assert deep_equal(
        datetime.datetime(2020, 1, 1, 12, 0, tzinfo=utc),
        datetime.datetime(2020, 1, 1, 14, 0, tzinfo=plus2),
    ) == True

    # Different instants
    assert deep_equal(
        datetime.datetime(2020, 1, 1, 12, 0, tzinfo=utc),
        datetime.datetime(2020, 1, 1, 12, 0, tzinfo=plus2),
    ) == False

    # Date is not a datetime
    assert deep_equal(datetime.date(2020, 1, 1), datetime.datetime(2020, 1, 1)) == False


def test_deep_equal_patterns():
    assert deep_equal(re.compile('a+', re.I), re.compile('a+', re.IGNORECASE)) == True
    assert deep_equal(re.compile('a+', re.I), re.compile('a+')) == False
    assert deep_equal(re.compile('a+'), re.compile('b+')) == False


def test_deep_equal_sequences():
    assert deep_equal([1, 2, 3], [1, 2, 3]) == True
    assert deep_equal([1, 2], [1, 2, 3]) == False
    assert deep_equal([1, 2, 3], [1, 3, 2]) == False
    assert deep_equal([[1], [2]], [[1], [2]]) == True

    # Lists and tuples are both sequences
    assert deep_equal([1, 2], (1, 2)) == True


def test_deep_equal_records():
    # Key order does not matter
    assert deep_equal({'a': 1, 'b': 2}, {'b': 2, 'a': 1}) == True

    # Key sets must be the same
    assert deep_equal({'a': 1}, {'a': 1, 'b': 2}) == False
    assert deep_equal({'a': 1, 'b': 2}, {'a': 1}) == False
    assert deep_equal({'a': 1, 'b': None}, {'a': 1, 'c': None}) == False

    # Nested
    assert deep_equal({'a': {'b': [1, 2]}}, {'a': {'b': [1, 2]}}) == True
    assert deep_equal({'a': {'b': [1, 2]}}, {'a': {'b': [1, 3]}}) == False

    # Dataclasses and pydantic models are records too
    assert deep_equal(Point(1, 2), {'x': 1, 'y': 2}) == True
    assert deep_equal(Point(1, 2), Point(1, 3)) == False
    assert deep_equal(User(id=1, login='kolypto'), {'id': 1, 'login': 'kolypto'}) == True


def test_deep_equal_matchers():
    # Either side
    assert deep_equal(5, any_of(int)) == True
    assert deep_equal(any_of(int), 5) == True
    assert deep_equal('5', any_of(int)) == False

    # Any depth
    assert deep_equal(
        {'user': {'id': 1, 'login': 'kolypto', 'roles': ['admin']}},
        {'user': {'id': anything(), 'login': string_containing('oly'), 'roles': [any_of(str)]}},
    ) == True
    assert deep_equal(
        {'user': {'id': None}},
        {'user': {'id': anything()}},
    ) == False


def test_deep_equal_other_objects():
    # Objects use their own ==
    assert deep_equal({1, 2}, {2, 1}) == True
    assert deep_equal({1, 2}, {1, 3}) == False
    assert deep_equal(b'a', b'a') == True

    # Objects with no __eq__ compare by identity
    class Thing:
        pass

    assert deep_equal(Thing(), Thing()) == False

    # Comparison errors mean "not equal"
    class Broken:
        def __eq__(self, other):
            raise RuntimeError('no comparisons')

    assert deep_equal(Broken(), Broken()) == False
