""" Expectation: wrap a value, then check it

Example:
    expect(1 + 1).to_be(2)
    expect({'a': 1, 'b': 2}).to_match_object({'a': 1})
    expect(lambda: int('x')).to_throw(ValueError)
    expect([1, 2]).not_.to_contain(3)

Every check computes whether it passes, then inverts the result if the expectation is negated with `.not_`.
When the final result is negative, `ExpectationFailed` is raised.
The failure message is only rendered when the check fails.
"""

from __future__ import annotations

import re
import logging
import operator
from collections import abc
from typing import Any, Union, TYPE_CHECKING

from .errors import ExpectationFailed, UsageError
from .format import format_value
from .mock import CallHistoryProvider, CallRecord, call_history_of
from .util.magic_symbol import MISSING
from .compare import (
    Category, category_of, is_object, is_nan,
    deep_equal, same_value, same_value_zero,
    object_contains, array_contains_equal, get_property,
)
from .compare.contains import PropertyPath

if TYPE_CHECKING:
    from .deferred import PromiseExpectation


logger = logging.getLogger(__name__)

# What to_throw() can expect: a message fragment, a pattern, or an exception class
ErrorExpectation = Union[str, re.Pattern, type]


class Expectation:
    """ A value under test, and whether the next check is negated

    Expectations are immutable: `.not_` makes a new one.
    That's why a base expectation can be reused:

        e = expect(value)
        e.to_be_defined()
        e.not_.to_be_none()
    """
    __slots__ = ('received', 'is_not')

    # The value under test
    received: Any

    # Invert the result of the check?
    is_not: bool

    def __init__(self, received: Any, *, is_not: bool = False):
        self.received = received
        self.is_not = is_not

    @property
    def not_(self) -> Expectation:
        """ Negate the check that follows """
        return Expectation(self.received, is_not=not self.is_not)

    @property
    def resolves(self) -> PromiseExpectation:
        """ Await the value, then check the result """
        from .deferred import PromiseExpectation, Mode
        return PromiseExpectation(self.received, Mode.RESOLVES, is_not=self.is_not)

    @property
    def rejects(self) -> PromiseExpectation:
        """ Await the value, expect it to raise, then check the error """
        from .deferred import PromiseExpectation, Mode
        return PromiseExpectation(self.received, Mode.REJECTS, is_not=self.is_not)

    def __repr__(self):
        return f'expect({format_value(self.received)}){".not_" if self.is_not else ""}'

    # region Equality

    def to_be(self, expected: Any):
        """ Same value: identity for objects; value for numbers, strings and booleans """
        self._assert(
            'to_be',
            same_value(self.received, expected),
            lambda: f'expected {format_value(self.received)} {self._to} be {format_value(expected)}',
        )

    def to_equal(self, expected: Any):
        """ Deep equality. Matchers are allowed at any depth """
        self._assert(
            'to_equal',
            deep_equal(self.received, expected),
            lambda: f'expected {format_value(self.received)} {self._to} equal {format_value(expected)}',
        )

    def to_strict_equal(self, expected: Any):
        """ Deep equality; same as to_equal() """
        self.to_equal(expected)

    # endregion

    # region Truthiness

    def to_be_truthy(self):
        self._assert(
            'to_be_truthy',
            self.received is not MISSING and bool(self.received),
            lambda: f'expected {format_value(self.received)} {self._to} be truthy',
        )

    def to_be_falsy(self):
        self._assert(
            'to_be_falsy',
            self.received is MISSING or not self.received,
            lambda: f'expected {format_value(self.received)} {self._to} be falsy',
        )

    def to_be_none(self):
        self._assert(
            'to_be_none',
            self.received is None,
            lambda: f'expected {format_value(self.received)} {self._to} be None',
        )

    def to_be_undefined(self):
        """ The value is MISSING """
        self._assert(
            'to_be_undefined',
            self.received is MISSING,
            lambda: f'expected {format_value(self.received)} {self._to} be undefined',
        )

    def to_be_defined(self):
        """ The value is not MISSING. `None` is defined """
        self._assert(
            'to_be_defined',
            self.received is not MISSING,
            lambda: f'expected {format_value(self.received)} {self._to} be defined',
        )

    def to_be_nan(self):
        self._assert(
            'to_be_nan',
            is_nan(self.received),
            lambda: f'expected {format_value(self.received)} {self._to} be NaN',
        )

    # endregion

    # region Numbers

    def to_be_greater_than(self, expected):
        self._ensure_numbers('to_be_greater_than', expected)
        self._assert(
            'to_be_greater_than',
            _ordered(operator.gt, self.received, expected),
            lambda: f'expected {self.received} {self._to} be greater than {expected}',
        )

    def to_be_greater_than_or_equal(self, expected):
        self._ensure_numbers('to_be_greater_than_or_equal', expected)
        self._assert(
            'to_be_greater_than_or_equal',
            _ordered(operator.ge, self.received, expected),
            lambda: f'expected {self.received} {self._to} be greater than or equal to {expected}',
        )

    def to_be_less_than(self, expected):
        self._ensure_numbers('to_be_less_than', expected)
        self._assert(
            'to_be_less_than',
            _ordered(operator.lt, self.received, expected),
            lambda: f'expected {self.received} {self._to} be less than {expected}',
        )

    def to_be_less_than_or_equal(self, expected):
        self._ensure_numbers('to_be_less_than_or_equal', expected)
        self._assert(
            'to_be_less_than_or_equal',
            _ordered(operator.le, self.received, expected),
            lambda: f'expected {self.received} {self._to} be less than or equal to {expected}',
        )

    def to_be_close_to(self, expected, precision: int = 2):
        """ The difference is less than half a unit of the `precision`-th decimal digit

        Example:
            expect(0.1 + 0.2).to_be_close_to(0.3)
            expect(10.49).to_be_close_to(10, 0)
        """
        self._ensure_numbers('to_be_close_to', expected)
        self._assert(
            'to_be_close_to',
            _is_close(self.received, expected, precision),
            lambda: f'expected {self.received} {self._to} be close to {expected} (precision: {precision})',
        )

    # endregion

    # region Strings and sequences

    def to_contain(self, expected: Any):
        """ A substring of a string, or an item of a sequence (by same value, not deep equality) """
        category = category_of(self.received)
        if category is Category.TEXT:
            pass_ = isinstance(expected, str) and expected in self.received
        elif category is Category.SEQUENCE:
            pass_ = any(same_value_zero(item, expected) for item in self.received)
        else:
            pass_ = False

        self._assert(
            'to_contain',
            pass_,
            lambda: f'expected {format_value(self.received)} {self._to} contain {format_value(expected)}',
        )

    def to_contain_equal(self, expected: Any):
        """ An item of a sequence, by deep equality """
        if category_of(self.received) is not Category.SEQUENCE:
            raise UsageError(
                'to_contain_equal() requires a sequence',
                f'Got {format_value(self.received)}',
                matcher='to_contain_equal',
            )

        self._assert(
            'to_contain_equal',
            array_contains_equal(self.received, expected),
            lambda: f'expected {format_value(self.received)} {self._to} contain equal {format_value(expected)}',
        )

    def to_match(self, expected: Union[str, re.Pattern]):
        """ The pattern is found in the string. A str argument is compiled first

        Numbers and booleans are matched against their str(): `expect(123).to_match('12')` passes.
        Any other value that is not a string fails.
        """
        pattern = re.compile(expected) if isinstance(expected, str) else expected
        text = _as_text(self.received)
        self._assert(
            'to_match',
            text is not None and pattern.search(text) is not None,
            lambda: f'expected {format_value(self.received)} {self._to} match {format_value(pattern)}',
        )

    def to_have_length(self, expected: int):
        length = len(self.received) if isinstance(self.received, abc.Sized) else MISSING
        self._assert(
            'to_have_length',
            length is not MISSING and length == expected,
            lambda: f'expected {format_value(self.received)} {self._to} have length {expected}, got {format_value(length)}',
        )

    # endregion

    # region Objects

    def to_have_property(self, path: PropertyPath, value: Any = MISSING):
        """ The property exists; and, if a `value` is given, is deep equal to it

        Args:
            path: 'a.b.c', or a list of keys: ['a', 'b', 'c']
            value: The expected value. When MISSING, only the existence is checked.
        """
        exists, actual = get_property(self.received, path)
        path_str = path if isinstance(path, str) else '.'.join(str(key) for key in path)
        check_value = value is not MISSING

        self._assert(
            'to_have_property',
            exists and (not check_value or deep_equal(actual, value)),
            lambda: (
                f'expected {format_value(self.received)} {self._to} have property "{path_str}"'
                + (f' with value {format_value(value)}' if check_value else '')
                + ('' if exists else ' (not found)')
            ),
        )

    def to_match_object(self, expected: Any):
        """ Partial match: the object has at least the keys and values of `expected`

        A value that is not an object fails right away, even with `.not_`.
        """
        if category_of(expected) is not Category.RECORD:
            raise UsageError(
                'to_match_object() expects a record',
                'Pass a dict, a dataclass or a pydantic model',
                matcher='to_match_object',
            )

        if not is_object(self.received):
            self._fail('to_match_object', f'expected {format_value(self.received)} to be an object')

        self._assert(
            'to_match_object',
            object_contains(self.received, expected),
            lambda: f'expected {format_value(self.received)} {self._to} match object {format_value(expected)}',
        )

    def to_be_instance_of(self, expected: type):
        if not isinstance(expected, type):
            raise UsageError(
                'to_be_instance_of() expects a class',
                f'Got {format_value(expected)}',
                matcher='to_be_instance_of',
            )

        self._assert(
            'to_be_instance_of',
            isinstance(self.received, expected),
            lambda: f'expected {format_value(self.received)} {self._to} be instance of {expected.__name__}',
        )

    # endregion

    # region Errors

    def to_throw(self, expected: ErrorExpectation = None):
        """ Call the function with no arguments; expect it to raise

        Args:
            expected: What the error should be:
                a `str` the message contains, a pattern found in the message, or an exception class.
                When `None`, any error will do.
        """
        if not callable(self.received):
            raise UsageError(
                'to_throw() requires a function',
                f'Got {format_value(self.received)}. Wrap the code into a lambda',
                matcher='to_throw',
            )

        if expected is not None:
            ensure_error_expectation(expected)

        error = None
        try:
            self.received()
        except Exception as e:
            error = e

        threw = error is not None
        pass_ = threw and (expected is None or error_matches(error, expected))

        self._assert(
            'to_throw',
            pass_,
            lambda: (
                f'expected function {self._to} throw'
                + (f' {format_value(expected)}' if expected is not None else '')
                + (f', but it threw {format_value(error)}' if threw else ', but it did not throw')
            ),
        )

    to_throw_error = to_throw

    # endregion

    # region Call history

    def to_have_been_called(self):
        calls = self._calls()
        self._assert(
            'to_have_been_called',
            len(calls) > 0,
            lambda: (
                f'expected mock {self._to} have been called, but it was '
                + (f'called {len(calls)} times' if calls else 'not called')
            ),
        )

    def to_have_been_called_times(self, times: int):
        calls = self._calls()
        self._assert(
            'to_have_been_called_times',
            len(calls) == times,
            lambda: f'expected mock {self._to} have been called {times} times, got {len(calls)}',
        )

    def to_have_been_called_with(self, *args, **kwargs):
        calls = self._calls()
        self._assert(
            'to_have_been_called_with',
            any(_called_with(call, args, kwargs) for call in calls),
            lambda: f'expected mock {self._to} have been called with {_format_arguments(args, kwargs)}',
        )

    def to_have_been_last_called_with(self, *args, **kwargs):
        calls = self._calls()
        self._assert(
            'to_have_been_last_called_with',
            len(calls) > 0 and _called_with(calls[-1], args, kwargs),
            lambda: f'expected mock {self._to} have been last called with {_format_arguments(args, kwargs)}',
        )

    def to_have_been_nth_called_with(self, n: int, *args, **kwargs):
        """ The n-th call (1-based) was made with these arguments """
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise UsageError(
                'to_have_been_nth_called_with() expects a positive call number',
                f'Got {format_value(n)}. Calls are counted from 1',
                matcher='to_have_been_nth_called_with',
            )

        calls = self._calls()
        self._assert(
            'to_have_been_nth_called_with',
            n <= len(calls) and _called_with(calls[n - 1], args, kwargs),
            lambda: f'expected mock {self._to} have been called on call {n} with {_format_arguments(args, kwargs)}',
        )

    def to_have_returned(self):
        """ At least one call returned without raising """
        calls = self._calls(results=True)
        self._assert(
            'to_have_returned',
            any(call.returned for call in calls),
            lambda: f'expected mock {self._to} have returned',
        )

    def to_have_returned_times(self, times: int):
        calls = self._calls(results=True)
        returned = sum(1 for call in calls if call.returned)
        self._assert(
            'to_have_returned_times',
            returned == times,
            lambda: f'expected mock {self._to} have returned {times} times, got {returned}',
        )

    def to_have_returned_with(self, expected: Any):
        calls = self._calls(results=True)
        self._assert(
            'to_have_returned_with',
            any(call.returned and deep_equal(call.result, expected) for call in calls),
            lambda: f'expected mock {self._to} have returned with {format_value(expected)}',
        )

    def to_have_last_returned_with(self, expected: Any):
        calls = self._calls(results=True)
        self._assert(
            'to_have_last_returned_with',
            len(calls) > 0 and calls[-1].returned and deep_equal(calls[-1].result, expected),
            lambda: f'expected mock {self._to} have last returned with {format_value(expected)}',
        )

    # endregion

    # region Helpers

    @property
    def _to(self) -> str:
        return 'to not' if self.is_not else 'to'

    def _assert(self, matcher: str, pass_: bool, message: abc.Callable[[], str]):
        """ Fail unless `pass_` (inverted by `.not_`) holds. The message is only rendered on failure """
        final_pass = not pass_ if self.is_not else bool(pass_)
        if not final_pass:
            self._fail(matcher, message())

    def _fail(self, matcher: str, message: str):
        logger.debug('%s failed: %s', matcher, message)
        raise ExpectationFailed(message, matcher=matcher, received=self.received, is_not=self.is_not)

    def _ensure_numbers(self, matcher: str, expected: Any):
        for name, value in (('received', self.received), ('expected', expected)):
            if category_of(value) is not Category.NUMBER or isinstance(value, complex):
                raise UsageError(
                    f'{matcher}() requires numbers',
                    f'The {name} value is {format_value(value)}',
                    matcher=matcher,
                )

    def _calls(self, *, results: bool = False) -> abc.Sequence[CallRecord]:
        history: CallHistoryProvider = call_history_of(self.received)
        if results and not history.tracks_results:
            raise UsageError(
                'This mock does not record return values',
                'Use expecto.fn() to track results',
                received_type=type(self.received).__name__,
            )
        return history.calls

    # endregion


def expect(received: Any) -> Expectation:
    """ Wrap a value to check it

    Example:
        expect(1 + 1).to_be(2)
        expect({'a': 1}).to_equal({'a': any_of(int)})
        await expect(fetch()).resolves.to_match_object({'status': 'ok'})
    """
    return Expectation(received)


def error_matches(error: BaseException, expected: ErrorExpectation) -> bool:
    """ Does the error fit the expectation: a message fragment, a pattern, or an exception class? """
    ensure_error_expectation(expected)

    if isinstance(expected, str):
        return expected in str(error)
    elif isinstance(expected, re.Pattern):
        return expected.search(str(error)) is not None
    else:
        return isinstance(error, expected)


def ensure_error_expectation(expected: Any):
    """ Raise UsageError unless `expected` is something to_throw() can check an error against """
    if not isinstance(expected, (str, re.Pattern, type)):
        raise UsageError(
            'to_throw() expects a message, a pattern, or an exception class',
            f'Got {format_value(expected)}',
            matcher='to_throw',
        )


def _as_text(value: Any) -> Union[str, None]:
    category = category_of(value)
    if category is Category.TEXT:
        return value
    elif category in (Category.NUMBER, Category.BOOLEAN):
        return str(value)
    else:
        return None


def _ordered(compare: abc.Callable[[Any, Any], bool], a, b) -> bool:
    # NaN is neither greater nor less than anything
    if is_nan(a) or is_nan(b):
        return False
    return compare(a, b)


def _is_close(a, b, precision: int) -> bool:
    if is_nan(a) or is_nan(b):
        return False

    # Decimal does not mix with float or Fraction: compare those as floats
    try:
        difference = a - b
    except TypeError:
        difference = float(a) - float(b)
    except ArithmeticError:
        # Decimal infinities: inf - inf
        return False
    return abs(difference) < 10 ** -precision / 2


def _called_with(call: CallRecord, args: tuple, kwargs: dict) -> bool:
    return deep_equal(list(call.args), list(args)) and deep_equal(call.kwargs, kwargs)


def _format_arguments(args: tuple, kwargs: dict) -> str:
    if kwargs:
        return f'{format_value(list(args))} {format_value(kwargs)}'
    return format_value(list(args))
