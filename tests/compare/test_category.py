import re
import datetime
from decimal import Decimal
from fractions import Fraction
from dataclasses import dataclass
from types import SimpleNamespace

import pytest
import pydantic as pd

from expecto import MISSING
from expecto.compare import Category, category_of, record_items, is_object, is_nan


@dataclass
class Point:
    x: int
    y: int


class User(pd.BaseModel):
    id: int
    login: str


@pytest.mark.parametrize(('value', 'expected'), [
    (None, Category.NONE),
    (MISSING, Category.NONE),
    (True, Category.BOOLEAN),
    (0, Category.NUMBER),
    (1.5, Category.NUMBER),
    (Decimal('1.5'), Category.NUMBER),
    (Fraction(1, 3), Category.NUMBER),
    ('a', Category.TEXT),
    (datetime.date(2020, 1, 1), Category.TEMPORAL),
    (datetime.datetime(2020, 1, 1), Category.TEMPORAL),
    (datetime.timedelta(seconds=1), Category.TEMPORAL),
    (re.compile('a'), Category.PATTERN),
    ([1], Category.SEQUENCE),
    ((1,), Category.SEQUENCE),
    ({'a': 1}, Category.RECORD),
    (Point(1, 2), Category.RECORD),
    (User(id=1, login='kolypto'), Category.RECORD),
    (len, Category.CALLABLE),
    (lambda: None, Category.CALLABLE),
    (Point, Category.CALLABLE),
    (b'bytes', Category.OTHER),
    ({1, 2}, Category.OTHER),
    (SimpleNamespace(a=1), Category.OTHER),
])
def test_category_of(value, expected):
    assert category_of(value) is expected


def test_record_items():
    assert record_items({'a': 1}) == {'a': 1}
    assert record_items(Point(1, 2)) == {'x': 1, 'y': 2}
    assert record_items(User(id=1, login='kolypto')) == {'id': 1, 'login': 'kolypto'}

    with pytest.raises(TypeError):
        record_items([1, 2])


def test_is_object():
    # Objects
    assert is_object({}) == True
    assert is_object([]) == True
    assert is_object(SimpleNamespace()) == True
    assert is_object(ValueError('x')) == True
    assert is_object(datetime.date(2020, 1, 1)) == True

    # Scalars
    assert is_object(None) == False
    assert is_object(MISSING) == False
    assert is_object(1) == False
    assert is_object('a') == False
    assert is_object(True) == False
    assert is_object(len) == False


def test_is_nan():
    assert is_nan(float('nan')) == True
    assert is_nan(Decimal('NaN')) == True
    assert is_nan(1.0) == False
    assert is_nan('nan') == False
    assert is_nan(None) == False
