""" Call history: what a tracked function was called with, and what it returned

The call-history checks (`to_have_been_called_with()` and friends) read from a `CallHistoryProvider`.
Two providers are available:

* `fn()`: a tracked function. Records arguments, results and raised errors.
* Any `unittest.mock` mock. Records arguments only; return-value checks are not available.

Example:
    double = fn(lambda x: x * 2)
    double(5)

    expect(double).to_have_been_called_with(5)
    expect(double).to_have_returned_with(10)
"""

from __future__ import annotations

import abc
import dataclasses
from collections import abc as cabc
from typing import Any, Optional
from unittest import mock

from .errors import UsageError


@dataclasses.dataclass(frozen=True)
class CallRecord:
    """ One completed call of a tracked function

    A call either returned a `result`, or raised an `error`: never both.
    """
    # Positional arguments
    args: tuple

    # Keyword arguments
    kwargs: dict = dataclasses.field(default_factory=dict)

    # The returned value. `None` if the call has raised
    result: Any = None

    # The raised exception. `None` if the call has returned
    error: Optional[BaseException] = None

    @property
    def returned(self) -> bool:
        """ Did the call return normally? """
        return self.error is None


class CallHistoryProvider(abc.ABC):
    """ Interface: an object that knows the calls made to it """

    # Are `result` and `error` recorded?
    tracks_results: bool = True

    @property
    @abc.abstractmethod
    def calls(self) -> cabc.Sequence[CallRecord]:
        """ Calls, in the order they were made """


class TrackedFunction(CallHistoryProvider):
    """ A callable that records every call made to it

    Calls the `implementation` (if any) and records the result or the raised error.
    Errors are re-raised: tracking does not change the behavior of the function.
    """
    tracks_results = True

    def __init__(self, implementation: cabc.Callable = None):
        self._implementation = implementation
        self._calls: list[CallRecord] = []
        self.__name__ = getattr(implementation, '__name__', 'fn')

    @property
    def calls(self) -> tuple[CallRecord, ...]:
        return tuple(self._calls)

    @property
    def call_count(self) -> int:
        return len(self._calls)

    def reset_calls(self):
        """ Forget all recorded calls """
        self._calls.clear()

    def mock_implementation(self, implementation: Optional[cabc.Callable]):
        """ Replace the implementation for subsequent calls """
        self._implementation = implementation

    def __call__(self, *args, **kwargs):
        try:
            result = self._implementation(*args, **kwargs) if self._implementation is not None else None
        except Exception as e:
            self._calls.append(CallRecord(args, kwargs, error=e))
            raise
        else:
            self._calls.append(CallRecord(args, kwargs, result=result))
            return result

    def __repr__(self):
        return f'<fn {self.__name__}: {len(self._calls)} calls>'


class MockCallHistory(CallHistoryProvider):
    """ Adapter: read the call history of a `unittest.mock` mock

    unittest.mock does not record return values, so only the arguments are available.
    """
    tracks_results = False

    def __init__(self, mock_object: mock.NonCallableMock):
        self._mock = mock_object

    @property
    def calls(self) -> tuple[CallRecord, ...]:
        return tuple(
            CallRecord(tuple(call.args), dict(call.kwargs))
            for call in self._mock.call_args_list
        )


def fn(implementation: cabc.Callable = None) -> TrackedFunction:
    """ Create a tracked function

    Args:
        implementation: The function to call. When not given, the tracked function returns `None`.
    """
    return TrackedFunction(implementation)


def call_history_of(value: Any) -> CallHistoryProvider:
    """ Get the call history of a tracked function

    Raises:
        UsageError: the value does not track its calls
    """
    if isinstance(value, CallHistoryProvider):
        return value
    elif isinstance(value, mock.NonCallableMock):
        return MockCallHistory(value)
    else:
        raise UsageError(
            'Expected a mock function created with expecto.fn() or unittest.mock',
            'Wrap the function with fn() to track its calls',
            received_type=type(value).__name__,
        )
