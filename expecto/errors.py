""" Errors raised by expectations

There are two sorts of errors:

* Failures: `ExpectationFailed`

    The expectation did not hold. This is an `AssertionError`, so every test runner reports it as a test failure.

* Usage errors: `UsageError`

    The check was applied to a value it cannot work with: e.g. `to_contain_equal()` on a number,
    or a call-history check on a plain function. This is a mistake in the test itself,
    so it is raised regardless of `.not_`.
"""

from typing import Any, Optional

from .util.magic_symbol import MISSING


class ExpectationFailed(AssertionError):
    """ An expectation did not hold

    Attributes:
        message: The human-readable description of the failure
        matcher: Name of the check that failed. Example: 'to_equal'
        received: The value under test
        is_not: Whether the check was negated
    """
    message: str
    matcher: Optional[str]
    received: Any
    is_not: bool

    def __init__(self, message: str, *, matcher: str = None, received: Any = MISSING, is_not: bool = False):
        super().__init__(message)
        self.message = message
        self.matcher = matcher
        self.received = received
        self.is_not = is_not


class UsageError(TypeError):
    """ A check was used with a value of the wrong shape

    Features:
    * `error`: negative message: what has gone wrong
    * `fixit`: positive message: what to do to fix it
    * `info`: structured context data

    Example:
        raise UsageError(
            'to_contain_equal() requires a sequence',
            'Pass a list or a tuple',
            matcher='to_contain_equal',
        )
    """

    # Message: what has gone wrong
    error: str

    # Message: how to fix it
    fixit: Optional[str]

    # Structured context info for the error
    info: dict

    def __init__(self, error: str, fixit: str = None, **info):
        super().__init__(error)
        self.error = error
        self.fixit = fixit
        self.info = info

    def __str__(self):
        if self.fixit:
            return f'{self.error}. {self.fixit}'
        return self.error
