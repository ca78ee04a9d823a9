""" Postpone the initialization of an object until it's first used """

from __future__ import annotations

from functools import wraps
import threading
from typing import Optional, TypeVar
from collections import abc


def lazy_init_threadsafe(factory_function: abc.Callable[[], T]) -> abc.Callable[[], T]:
    """ Decorator to lazily initialize an object, in a thread-safe manner

    Importing the library should not read the environment: settings are loaded on first use.

    Example:

        @lazy_init_threadsafe
        def get_settings() -> Settings:
            return Settings()
    """
    # The initialized object
    created_object: Optional[T] = None

    # The lock we use to exclude race conditions
    lock = threading.Lock()

    @wraps(factory_function)
    def wrapper() -> T:
        nonlocal created_object

        # Double-checked: threads that waited on the lock must not re-initialize the object
        if created_object is None:
            with lock:
                if created_object is None:
                    created_object = factory_function()

        return created_object

    return wrapper


T = TypeVar('T')
