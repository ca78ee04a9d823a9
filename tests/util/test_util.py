import pytest

from expecto.util.magic_symbol import MISSING, MagicSymbol
from expecto.util.lazy_init import lazy_init_threadsafe
from expecto.util.singledispatch_lambda import singledispatch_lambda


def test_magic_symbol():
    # The only way to use it
    assert MISSING is MISSING
    assert MISSING is not None
    assert repr(MISSING) == 'MISSING'

    # Can be a dict key
    assert {MISSING: 1}[MISSING] == 1

    # No other operator is allowed
    with pytest.raises(AssertionError):
        MISSING != 0

    with pytest.raises(AssertionError):
        str(MISSING)

    with pytest.raises(AssertionError):
        bool(MISSING)

    # Every symbol is unique
    assert MagicSymbol('MISSING') is not MISSING


def test_lazy_init_sync():
    """ Test @lazy_init_threadsafe """
    called_times = 0

    @lazy_init_threadsafe
    def create_object() -> dict:
        nonlocal called_times
        called_times += 1
        return {}

    # The same object is returned every time.
    # Because it's mutable, we can use it as storage
    o = create_object()
    o['a'] = 1
    o = create_object()
    o['b'] = 2
    assert o == {'a': 1, 'b': 2}

    # Initialized only once
    assert called_times == 1


def test_singledispatch_lambda():
    @singledispatch_lambda().decorator
    def kind(value, suffix=''):
        return 'other' + suffix

    @kind.register(lambda v: isinstance(v, str))
    def kind_text(value, suffix=''):
        return 'text' + suffix

    @kind.register(lambda v: isinstance(v, (str, bytes)))
    def kind_text_or_bytes(value, suffix=''):
        return 'bytes' + suffix

    # First matching check wins
    assert kind('a') == 'text'
    assert kind(b'a') == 'bytes'

    # Default
    assert kind(1) == 'other'

    # Arguments are passed through
    assert kind('a', suffix='!') == 'text!'

    # The implementation can be looked up without calling it
    assert kind.dispatch('a')('a') == 'text'
    assert kind.dispatch(1) is kind.dispatch(None)
