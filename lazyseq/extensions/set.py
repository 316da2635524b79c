from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


class _SeenKeys:
    """remembers every key offered so far. add() reports whether the key was new."""

    def __init__(self, with_: Optional[Equivalence[Any]] = None):
        self._with = with_
        self._hashed: Set[Any] = set()
        self._unhashable: List[Any] = []

    def add(self, key: Any) -> bool:
        if self._with is not None:
            # a custom equivalence can't be hashed, so fall back to a linear scan
            if any(self._with(seen, key) for seen in self._unhashable):
                return False
            self._unhashable.append(key)
            return True
        try:
            if key in self._hashed:
                return False
            self._hashed.add(key)
            return True
        except TypeError:
            if key in self._unhashable:
                return False
            self._unhashable.append(key)
            return True


class SetAccessor(Generic[T]):
    """
    duplicate handling over a lazy stream.
    `as_` transforms each element before comparison (the original element is
    still what comes out) and `with_` replaces == as the equivalence test.
    """
    def __init__(self, sequence: 'LazySequence[T]'):
        self._sequence = sequence

    def unique(self, as_: Optional[Selector[T, Any]] = None,
               with_: Optional[Equivalence[Any]] = None) -> 'LazySequence[T]':
        """first occurrence of each element, in order. remembers every distinct key."""
        def unique_iter():
            seen = _SeenKeys(with_)
            for item in self._sequence:
                if seen.add(as_(item) if as_ else item):
                    yield item
        return self._sequence._derive(unique_iter)

    def repeated(self, as_: Optional[Selector[T, Any]] = None,
                 with_: Optional[Equivalence[Any]] = None) -> 'LazySequence[T]':
        """every occurrence of an element after its first one"""
        def repeated_iter():
            seen = _SeenKeys(with_)
            for item in self._sequence:
                if not seen.add(as_(item) if as_ else item):
                    yield item
        return self._sequence._derive(repeated_iter)

    def squish(self, as_: Optional[Selector[T, Any]] = None,
               with_: Optional[Equivalence[Any]] = None) -> 'LazySequence[T]':
        """drop elements equal to the one right before them. constant memory."""
        same = with_ or (lambda a, b: a == b)

        def squish_iter():
            has_previous, previous = False, None
            for item in self._sequence:
                current = as_(item) if as_ else item
                if not has_previous or not same(previous, current):
                    yield item
                has_previous, previous = True, current
        return self._sequence._derive(squish_iter)
