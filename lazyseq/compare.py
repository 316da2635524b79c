from numbers import Real
from .types import *


def _is_listy(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def generic_cmp(a: Any, b: Any) -> int:
    """
    three-way comparison that orders values of mixed types.
    numbers compare numerically, strings lexicographically, lists and tuples
    element-wise and then by length. none sorts before everything else.
    values of unrelated types fall back to comparing their string forms.
    """
    if isinstance(a, Itemized):
        a = a.value
    if isinstance(b, Itemized):
        b = b.value
    if a is b:
        return 0
    if a is None or b is None:
        return -1 if a is None else 1
    if isinstance(a, Real) and isinstance(b, Real):
        return (a > b) - (a < b)
    if isinstance(a, str) and isinstance(b, str):
        return (a > b) - (a < b)
    if _is_listy(a) and _is_listy(b):
        for left, right in zip(a, b):
            result = generic_cmp(left, right)
            if result:
                return result
        return (len(a) > len(b)) - (len(a) < len(b))
    if type(a) is type(b):
        try:
            return (a > b) - (a < b)
        except TypeError:
            pass
    return generic_cmp(stringify(a), stringify(b))


def stringify(value: Any) -> str:
    """string form of one element. nested lists render as space-separated items."""
    if isinstance(value, Itemized):
        return stringify(value.value)
    if isinstance(value, str):
        return value
    if _is_listy(value):
        return " ".join(stringify(v) for v in value)
    return str(value)
