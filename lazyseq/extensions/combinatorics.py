from __future__ import annotations
import typing
from itertools import (
    chain,
    permutations as itertools_permutations,
    combinations as itertools_combinations,
    product as itertools_product,
)
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


class CombinatoricsAccessor(Generic[T]):
    def __init__(self, sequence: 'LazySequence[T]'):
        self._sequence = sequence

    def combinations(self, k: Union[int, range, None] = None) -> 'LazySequence[Tuple[T, ...]]':
        """
        k-element subsets in increasing index order. a range concatenates the
        enumerations for each size in it; no argument means every size 0..n.
        sizes below 0 or above n contribute nothing.
        """
        self._sequence._ensure_finite('take combinations of')

        def combinations_iter():
            data = self._sequence._indexable('take combinations of')
            n = len(data)
            sizes = range(n + 1) if k is None else (sorted(k) if isinstance(k, range) else (k,))
            return chain.from_iterable(itertools_combinations(data, r) for r in sizes if 0 <= r <= n)

        return self._sequence._derive(combinations_iter, infinite=False)

    def permutations(self, r: Optional[int] = None) -> 'LazySequence[Tuple[T, ...]]':
        """
        orderings in lexicographic index order. equal values at different
        positions are distinct, so duplicates produce duplicate permutations.
        """
        self._sequence._ensure_finite('permute')

        def permutations_iter():
            data = self._sequence._indexable('permute')
            r_val = len(data) if r is None else r
            if r_val < 0:
                return iter(())
            return itertools_permutations(data, r_val)

        return self._sequence._derive(permutations_iter, infinite=False)

    def cross(self, *others: Iterable[Any]) -> 'LazySequence[Tuple[Any, ...]]':
        """cartesian product with other iterables, in lexicographic order"""
        from ..factories import cross
        return cross(self._sequence, *others)
