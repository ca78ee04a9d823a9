class MagicSymbol:
    """ A named placeholder that only supports the `is` operator

    Any other use of the symbol (comparison, `bool()`, `str()`, arithmetic) raises an error:
    a symbol that leaked into a value has to be noticed, not silently compared.

    Example:
        ABSENT = MagicSymbol('ABSENT')

        def lookup(mapping, key):
            return mapping.get(key, ABSENT)

        if lookup({}, 'a') is ABSENT:
            ...
    """
    __slots__ = ('_name',)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self):
        return self._name

    def __hash__(self):
        return id(self)

    def useless(self, *args):
        raise AssertionError(
            f'The symbol `{self!r}` is used as a value. '
            f'It only supports the `is` operator: check for it with `value is {self!r}`.'
        )

    __lt__ = __le__ = __eq__ = __ne__ = __ge__ = __gt__ = useless  # type: ignore[assignment]
    __bool__ = __str__ = __int__ = useless  # type: ignore[assignment]
    __add__ = __sub__ = __mul__ = useless
    __and__ = __or__ = __rand__ = __ror__ = useless


# MISSING - the "absent" value.
#
# Tells apart two cases that `None` cannot:
#   1. a value is present, and it is `None`
#   2. there is no value at all
#
# Examples:
#   * a property lookup that found nothing returns MISSING
#   * expect(obj).to_have_property('a', value=MISSING) checks existence only
#   * expect(MISSING).to_be_undefined()
MISSING = MagicSymbol('MISSING')
