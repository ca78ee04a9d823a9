from __future__ import annotations

from collections import abc
from typing import Any, Optional


class singledispatch_lambda:
    """ singledispatch, where every implementation comes with a predicate that decides whether it applies

    Predicates are tried in the order of registration; the first one that gives `True` wins.
    When none does, the decorated function is called.
    Use it to dispatch on things `functools.singledispatch` can't handle:
    protocols, dataclasses, values that are "a mapping, but not this one".

    Example:
        @singledispatch_lambda().decorator
        def kind(value) -> str:
            return 'other'

        @kind.register(lambda v: isinstance(v, str))
        def kind_text(value) -> str:
            return 'text'
    """
    def __init__(self):
        self._fallback: Optional[abc.Callable] = None
        self._implementations: list[tuple[abc.Callable[[Any], bool], abc.Callable]] = []

    def decorator(self, fallback: abc.Callable) -> singledispatch_lambda:
        """ Use the decorated function when no predicate matches """
        self._fallback = fallback
        return self

    def register(self, predicate: abc.Callable[[Any], bool]):
        """ Register an implementation for values that `predicate` accepts """
        def decorator(implementation: abc.Callable) -> singledispatch_lambda:
            self._implementations.append((predicate, implementation))
            return self
        return decorator

    def dispatch(self, value: Any) -> abc.Callable:
        """ Pick the implementation for `value` """
        return next(
            (implementation for predicate, implementation in self._implementations if predicate(value)),
            self._fallback,
        )

    def __call__(self, value, *args, **kwargs):
        return self.dispatch(value)(value, *args, **kwargs)
