from abc import ABC, abstractmethod
from typing import Any, ClassVar


class AsymmetricMatcher(ABC):
    """ A predicate that stands in for a value inside a comparison

    Matchers can be nested at any depth, on either side of a comparison:
    the comparators check for a matcher before they look at the structure.

    Example:
        expect(user).to_equal({
            'id': any_of(int),
            'login': 'kolypto',
        })

    Because `__eq__` runs the predicate, a matcher works with a plain `assert` as well:

        assert user == {'id': any_of(int), 'login': 'kolypto'}
    """
    __slots__ = ()

    # Discriminator: the name of the factory that made this matcher. Example: 'expect.anything'
    type: ClassVar[str]

    @abstractmethod
    def matches(self, other: Any) -> bool:
        """ Test a candidate value """

    @abstractmethod
    def describe(self) -> str:
        """ Render the matcher for failure messages """

    def __eq__(self, other):
        return self.matches(other)

    def __ne__(self, other):
        return not self.matches(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return self.describe()
