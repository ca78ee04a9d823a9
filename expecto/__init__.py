""" Expectations for your tests: deep equality, partial matching, matchers, call history, awaitables

Example:
    from expecto import expect, any_of, fn

    def test_user():
        expect(get_user()).to_match_object({'id': any_of(int), 'login': 'kolypto'})
        expect(lambda: get_user(-1)).to_throw(LookupError)

    async def test_fetch():
        await expect(fetch_user(1)).resolves.to_have_property('login', 'kolypto')
"""

from .util.magic_symbol import MISSING
from .errors import ExpectationFailed, UsageError
from .asymmetric import AsymmetricMatcher
from .matchers import (
    anything, any_of,
    array_containing, object_containing,
    string_containing, string_matching,
)
from .mock import fn, CallRecord, CallHistoryProvider, TrackedFunction
from .expectation import Expectation, expect
from .deferred import PromiseExpectation, Mode
from .format import format_value


# Matchers are also available as `expect.anything()`, `expect.any(int)`, and so on
expect.anything = anything  # type: ignore[attr-defined]
expect.any = any_of  # type: ignore[attr-defined]
expect.array_containing = array_containing  # type: ignore[attr-defined]
expect.object_containing = object_containing  # type: ignore[attr-defined]
expect.string_containing = string_containing  # type: ignore[attr-defined]
expect.string_matching = string_matching  # type: ignore[attr-defined]
