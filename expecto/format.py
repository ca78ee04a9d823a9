""" Render values for failure messages

The output is meant for humans: it is short, and it is not parseable.
"""

from __future__ import annotations

import re
from collections import abc
from typing import Any

import pydantic_core

from .asymmetric import AsymmetricMatcher
from .util.magic_symbol import MISSING
from .compare.category import Category, category_of
from .settings import get_settings


def format_value(value: Any) -> str:
    """ Render a value for a failure message. Never fails.

    Example:
        format_value('a')  # -> '"a"'
        format_value([1, 2, 3, 4])  # -> '[1, 2, ... (4 items)]'
    """
    try:
        return _format(value)
    except Exception:
        return _type_tag(value)


def _format(value: Any) -> str:
    if value is MISSING:
        return 'MISSING'
    if value is None:
        return 'None'
    if isinstance(value, AsymmetricMatcher):
        return value.describe()
    if isinstance(value, BaseException):
        return f'[{type(value).__name__}: {value}]'
    if isinstance(value, type):
        return f'[Class: {value.__name__}]'

    category = category_of(value)
    if category is Category.TEXT:
        return f'"{value}"'
    elif category is Category.CALLABLE:
        return f'[Function: {getattr(value, "__name__", None) or "anonymous"}]'
    elif category is Category.PATTERN:
        return format_pattern(value)
    elif category is Category.SEQUENCE:
        return _format_sequence(value)
    elif category is Category.RECORD:
        return _format_record(value)
    elif category is Category.TEMPORAL:
        return value.isoformat() if hasattr(value, 'isoformat') else str(value)
    else:
        return repr(value)


def format_pattern(pattern: re.Pattern) -> str:
    """ Render a pattern as /source/flags """
    flags = ''.join(letter for flag, letter in _PATTERN_FLAGS if pattern.flags & flag)
    return f'/{pattern.pattern}/{flags}'


def _format_sequence(value: abc.Sequence) -> str:
    max_items = get_settings().MAX_SEQUENCE_ITEMS

    if len(value) == 0:
        return '[]'
    if len(value) <= max_items:
        return '[{}]'.format(', '.join(format_value(item) for item in value))
    head = ''.join(f'{format_value(item)}, ' for item in value[:min(2, max_items)])
    return f'[{head}... ({len(value)} items)]'


def _format_record(value: Any) -> str:
    max_length = get_settings().MAX_REPR_LENGTH

    try:
        text = pydantic_core.to_json(value, fallback=_json_fallback).decode()
    except (pydantic_core.PydanticSerializationError, ValueError, TypeError):
        return _type_tag(value)

    if len(text) > max_length:
        return text[:max_length - 3] + '...'
    return text


def _json_fallback(value: Any) -> Any:
    # Values JSON knows nothing about: render them the way messages do
    return format_value(value)


def _type_tag(value: Any) -> str:
    return f'<{type(value).__name__} object>'


_PATTERN_FLAGS = (
    (re.ASCII, 'a'),
    (re.IGNORECASE, 'i'),
    (re.MULTILINE, 'm'),
    (re.DOTALL, 's'),
    (re.VERBOSE, 'x'),
)
