""" Value categories: the runtime "kind" of a value, as the comparators see it """

from __future__ import annotations

import re
import math
import numbers
import datetime
import dataclasses
from enum import Enum
from decimal import Decimal
from collections import abc
from typing import Any

import pydantic as pd

from expecto.util.magic_symbol import MISSING
from expecto.util.singledispatch_lambda import singledispatch_lambda


class Category(Enum):
    """ The closed set of value categories """
    NONE = 'none'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    TEXT = 'text'
    TEMPORAL = 'temporal'
    PATTERN = 'pattern'
    SEQUENCE = 'sequence'
    RECORD = 'record'
    CALLABLE = 'callable'
    OTHER = 'other'


# Categories of values that are not "objects": they have no properties to look into
SCALAR_CATEGORIES = frozenset({
    Category.NONE, Category.BOOLEAN, Category.NUMBER, Category.TEXT, Category.CALLABLE,
})


@singledispatch_lambda().decorator
def category_of(value: Any) -> Category:
    """ Get the category of a value

    Checks run in the order of registration, so e.g. a dataclass is a RECORD before it is an OTHER.
    """
    return Category.OTHER


@category_of.register(lambda v: v is None or v is MISSING)
def category_of_none(value) -> Category:
    return Category.NONE


@category_of.register(lambda v: isinstance(v, bool))
def category_of_boolean(value: bool) -> Category:
    return Category.BOOLEAN


@category_of.register(lambda v: isinstance(v, numbers.Number))
def category_of_number(value: numbers.Number) -> Category:
    return Category.NUMBER


@category_of.register(lambda v: isinstance(v, str))
def category_of_text(value: str) -> Category:
    return Category.TEXT


@category_of.register(lambda v: isinstance(v, (datetime.date, datetime.time, datetime.timedelta)))
def category_of_temporal(value) -> Category:
    return Category.TEMPORAL


@category_of.register(lambda v: isinstance(v, re.Pattern))
def category_of_pattern(value: re.Pattern) -> Category:
    return Category.PATTERN


@category_of.register(lambda v: isinstance(v, abc.Sequence) and not isinstance(v, (bytes, bytearray)))
def category_of_sequence(value: abc.Sequence) -> Category:
    return Category.SEQUENCE


@category_of.register(lambda v: isinstance(v, abc.Mapping) or _is_dataclass_instance(v) or isinstance(v, pd.BaseModel))
def category_of_record(value) -> Category:
    return Category.RECORD


@category_of.register(callable)
def category_of_callable(value) -> Category:
    return Category.CALLABLE


def record_items(value: Any) -> dict:
    """ Get the fields of a RECORD value as a dict """
    if isinstance(value, abc.Mapping):
        return dict(value)
    elif isinstance(value, pd.BaseModel):
        return dict(value)
    elif _is_dataclass_instance(value):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    else:
        raise TypeError(f'Not a record: {type(value)}')


def is_object(value: Any) -> bool:
    """ Is the value an object that may have properties? (i.e. not a scalar and not None) """
    return category_of(value) not in SCALAR_CATEGORIES


def is_nan(value: Any) -> bool:
    """ Is the value a NaN: float or Decimal """
    if isinstance(value, float):
        return math.isnan(value)
    elif isinstance(value, Decimal):
        return value.is_nan()
    else:
        return False


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)
