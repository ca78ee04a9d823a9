""" Expectations about awaitables: what they resolve to, or what they reject with

Example:
    await expect(fetch_user(1)).resolves.to_match_object({'id': 1})
    await expect(fetch_user(-1)).rejects.to_throw(LookupError)

Every check awaits the value again: a coroutine can only be awaited once, so use one check per coroutine,
or wrap a Task/Future which can be awaited many times.
"""

from __future__ import annotations

import enum
import inspect
import logging
from collections import abc
from typing import Any

from .errors import ExpectationFailed, UsageError
from .expectation import Expectation, ErrorExpectation, error_matches, ensure_error_expectation
from .format import format_value


logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    """ What's expected of the awaitable """
    RESOLVES = 'resolves'
    REJECTS = 'rejects'


def _deferred_check(name: str) -> abc.Callable[..., abc.Coroutine]:
    """ Make an async version of `Expectation.<name>()` that runs on the settled value """
    check = getattr(Expectation, name)

    async def deferred_check(self: PromiseExpectation, *args, **kwargs):
        value = await self._settle()
        return check(self._expectation(value), *args, **kwargs)

    deferred_check.__name__ = name
    deferred_check.__doc__ = check.__doc__
    return deferred_check


class PromiseExpectation:
    """ An expectation about an awaitable

    Every check is a coroutine: it awaits the value, wraps the result with an `Expectation`, and runs the same check.
    In the `rejects` mode, the raised error becomes the value under test.
    """
    __slots__ = ('awaitable', 'mode', 'is_not')

    # The value to await
    awaitable: abc.Awaitable

    # Resolves or rejects?
    mode: Mode

    # Invert the result of the check?
    is_not: bool

    def __init__(self, awaitable: abc.Awaitable, mode: Mode, *, is_not: bool = False):
        self.awaitable = awaitable
        self.mode = mode
        self.is_not = is_not

    @property
    def not_(self) -> PromiseExpectation:
        """ Negate the check that follows. The mode stays """
        return PromiseExpectation(self.awaitable, self.mode, is_not=not self.is_not)

    def __repr__(self):
        return f'expect({format_value(self.awaitable)}).{self.mode.value}{".not_" if self.is_not else ""}'

    async def to_throw(self, expected: ErrorExpectation = None):
        """ Check the error the awaitable was rejected with

        In the `rejects` mode, the error itself is checked: it's not a function to call.
        In the `resolves` mode, the resolved value must be a function that raises.
        """
        if expected is not None:
            ensure_error_expectation(expected)

        value = await self._settle()
        expectation = self._expectation(value)

        if self.mode is Mode.RESOLVES:
            return expectation.to_throw(expected)

        expectation._assert(
            'to_throw',
            expected is None or error_matches(value, expected),
            lambda: f'expected rejected value {format_value(value)} {expectation._to} match {format_value(expected)}',
        )

    to_throw_error = to_throw

    # Every other check is the synchronous one, applied to the settled value
    to_be = _deferred_check('to_be')
    to_equal = _deferred_check('to_equal')
    to_strict_equal = _deferred_check('to_strict_equal')

    to_be_truthy = _deferred_check('to_be_truthy')
    to_be_falsy = _deferred_check('to_be_falsy')
    to_be_none = _deferred_check('to_be_none')
    to_be_undefined = _deferred_check('to_be_undefined')
    to_be_defined = _deferred_check('to_be_defined')
    to_be_nan = _deferred_check('to_be_nan')

    to_be_greater_than = _deferred_check('to_be_greater_than')
    to_be_greater_than_or_equal = _deferred_check('to_be_greater_than_or_equal')
    to_be_less_than = _deferred_check('to_be_less_than')
    to_be_less_than_or_equal = _deferred_check('to_be_less_than_or_equal')
    to_be_close_to = _deferred_check('to_be_close_to')

    to_contain = _deferred_check('to_contain')
    to_contain_equal = _deferred_check('to_contain_equal')
    to_match = _deferred_check('to_match')
    to_have_length = _deferred_check('to_have_length')

    to_have_property = _deferred_check('to_have_property')
    to_match_object = _deferred_check('to_match_object')
    to_be_instance_of = _deferred_check('to_be_instance_of')

    to_have_been_called = _deferred_check('to_have_been_called')
    to_have_been_called_times = _deferred_check('to_have_been_called_times')
    to_have_been_called_with = _deferred_check('to_have_been_called_with')
    to_have_been_last_called_with = _deferred_check('to_have_been_last_called_with')
    to_have_been_nth_called_with = _deferred_check('to_have_been_nth_called_with')
    to_have_returned = _deferred_check('to_have_returned')
    to_have_returned_times = _deferred_check('to_have_returned_times')
    to_have_returned_with = _deferred_check('to_have_returned_with')
    to_have_last_returned_with = _deferred_check('to_have_last_returned_with')

    async def _settle(self) -> Any:
        """ Await the value. In the `rejects` mode, return the error instead """
        if not inspect.isawaitable(self.awaitable):
            raise UsageError(
                f'{self.mode.value} requires an awaitable',
                f'Got {format_value(self.awaitable)}. Pass a coroutine, a Task or a Future',
                mode=self.mode.value,
            )

        if self.mode is Mode.RESOLVES:
            return await self.awaitable

        try:
            value = await self.awaitable
        except Exception as e:
            logger.debug('Awaitable rejected with %r', e)
            return e

        # Raised outside of the `try` so that it's never mistaken for a rejection
        raise ExpectationFailed(
            'expected awaitable to reject, but it resolved',
            matcher=self.mode.value,
            received=value,
            is_not=self.is_not,
        )

    def _expectation(self, value: Any) -> Expectation:
        return Expectation(value, is_not=self.is_not)

