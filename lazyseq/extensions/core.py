from __future__ import annotations
import typing
import inspect
import logging
from collections import deque
from functools import cmp_to_key
from collections.abc import Mapping
from itertools import chain, islice, takewhile, dropwhile

import numpy as np

from ..types import *
from ..match import Matcher, Projection, ANY_VALUE
from ..compare import generic_cmp
from ..config import get_config
from ..operators import Next, Last, invoke

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)

_INT64_BOUND = 2 ** 63


def _emit(result: Any) -> Iterator[Any]:
    """a returned slip is spliced into the output, anything else is one element"""
    if isinstance(result, Slip):
        yield from result
    else:
        yield result


def _is_flattenable(value: Any) -> bool:
    if isinstance(value, Slip):
        return True
    if isinstance(value, (Itemized, str, bytes, bytearray, dict)):
        return False
    return isinstance(value, Iterable) and not isinstance(value, Mapping)


def _flatten(items: Iterable[Any], depth: Optional[int]) -> Iterator[Any]:
    for value in items:
        if depth != 0 and _is_flattenable(value):
            yield from _flatten(value, None if depth is None else depth - 1)
        else:
            yield value


def _positional_arity(func: Callable) -> int:
    """number of required positional parameters, 1 when the signature is unknown"""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 1
    kinds = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(1 for p in signature.parameters.values()
               if p.kind in kinds and p.default is inspect.Parameter.empty)


def _numpy_sort_order(keys: List[Any]) -> Optional[List[int]]:
    """stable argsort for plain numeric keys; none when numpy can't be trusted with them"""
    if len(keys) < get_config().numpy_threshold:
        return None
    try:
        if all(type(k) is int for k in keys):
            if any(not -_INT64_BOUND <= k < _INT64_BOUND for k in keys):
                return None
            arr = np.array(keys, dtype=np.int64)
        elif all(type(k) is float for k in keys):
            arr = np.array(keys, dtype=np.float64)
            if np.isnan(arr).any():
                return None
        else:
            return None
        logger.debug(f"sort: numpy argsort over {len(keys)} keys")
        return np.argsort(arr, kind='stable').tolist()
    except (TypeError, ValueError, OverflowError):
        return None


class _CoreOperations(Generic[T]):
    # --- transformation ---

    def map(self: 'LazySequence[T]', func: Callable[..., U], batch: int = 1) -> 'LazySequence[U]':
        """
        apply func to each group of `batch` consecutive elements.
        a trailing group shorter than `batch` is dropped.
        func may return a slip to produce several elements, or raise
        next / last / redo to steer the loop.
        """
        if batch < 1:
            raise ValueError("map batch size must be at least 1")

        def map_iter():
            source = iter(self)
            while True:
                group = tuple(islice(source, batch))
                if len(group) < batch:
                    return
                try:
                    result = invoke(func, *group)
                except Next as signal:
                    if not signal.has_value:
                        continue
                    result = signal.value
                except Last as signal:
                    if signal.has_value:
                        yield from _emit(signal.value)
                    return
                yield from _emit(result)

        return self._derive(map_iter)

    def flat(self: 'LazySequence[T]', depth: Optional[int] = None) -> 'LazySequence[Any]':
        """inline nested non-itemized iterables, all the way down or `depth` levels"""
        return self._derive(lambda: _flatten(self, depth))

    def flatmap(self: 'LazySequence[T]', func: Callable[..., Any], batch: int = 1) -> 'LazySequence[Any]':
        """map, then flatten every non-itemized result"""
        return self.map(func, batch).flat()

    def produce(self: 'LazySequence[T]', func: Accumulator[T, T]) -> 'LazySequence[T]':
        """lazy running fold: yields each intermediate accumulator"""
        def produce_iter():
            source = iter(self)
            for acc in source:
                break
            else:
                return
            yield acc
            for value in source:
                try:
                    acc = invoke(func, acc, value)
                except Next as signal:
                    if signal.has_value:
                        acc = signal.value
                    continue
                except Last as signal:
                    if signal.has_value:
                        yield signal.value
                    return
                yield acc

        return self._derive(produce_iter)

    # --- filtering and lookup ---

    def grep(self: 'LazySequence[T]', matcher: Any, project: Union[Projection, str] = Projection.V) -> 'LazySequence[Any]':
        """elements that smart-match `matcher`, reported through `project`"""
        test = Matcher.of(matcher).compile()
        projection = Projection.parse(project)

        def grep_iter():
            for index, value in enumerate(self):
                if test(value):
                    yield from projection.expand(index, value)

        return self._derive(grep_iter)

    def first(self: 'LazySequence[T]', matcher: Any = ANY_VALUE, end: bool = False,
              project: Union[Projection, str] = Projection.V) -> Any:
        """
        the first (or with end=True, the last) element that smart-matches.
        returns NIL when nothing matches. indexes reported by the k / kv / p
        projections always count from the start.
        """
        test = Matcher.of(matcher).compile()
        projection = Projection.parse(project)
        if not end:
            for index, value in enumerate(self):
                if test(value):
                    return projection.single(index, value)
            return NIL
        data = self._indexable('search from the end of')
        for index in range(len(data) - 1, -1, -1):
            if test(data[index]):
                return projection.single(index, data[index])
        return NIL

    def take_while(self: 'LazySequence[T]', predicate: Predicate[T]) -> 'LazySequence[T]':
        """take elements while predicate is true"""
        return self._derive(lambda: takewhile(predicate, self), infinite=False)

    def skip_while(self: 'LazySequence[T]', predicate: Predicate[T]) -> 'LazySequence[T]':
        """skip elements while predicate is true"""
        return self._derive(lambda: dropwhile(predicate, self))

    # --- positional ---

    def head(self: 'LazySequence[T]', count: int = 1) -> 'LazySequence[T]':
        """the first `count` elements"""
        return self._derive(lambda: islice(self, max(count, 0)), infinite=False)

    def skip(self: 'LazySequence[T]', count: int = 1) -> 'LazySequence[T]':
        """everything after the first `count` elements"""
        return self._derive(lambda: islice(self, max(count, 0), None))

    def tail(self: 'LazySequence[T]', count: int = 1) -> 'LazySequence[T]':
        """the last `count` elements. needs a finite end."""
        self._ensure_finite('tail')
        return self._derive(lambda: iter(deque(self, maxlen=max(count, 0))), infinite=False)

    def reverse(self: 'LazySequence[T]') -> 'LazySequence[T]':
        """inverts the order of the elements in a sequence"""
        self._ensure_finite('reverse')
        return self._derive(lambda: reversed(self._get_data('reverse')), infinite=False)

    def kv(self: 'LazySequence[T]') -> 'LazySequence[Any]':
        """index and value, interleaved"""
        return self._derive(lambda: chain.from_iterable(enumerate(self)))

    def pairs(self: 'LazySequence[T]') -> 'LazySequence[IndexPair]':
        return self._derive(lambda: (IndexPair(i, v) for i, v in enumerate(self)))

    def keys(self: 'LazySequence[T]') -> 'LazySequence[int]':
        return self._derive(lambda: (i for i, _ in enumerate(self)))

    def append(self: 'LazySequence[T]', *elements: T) -> 'LazySequence[T]':
        """appends values to the end of the sequence"""
        return self._derive(lambda: chain(self, elements))

    def prepend(self: 'LazySequence[T]', *elements: T) -> 'LazySequence[T]':
        """adds values to the beginning of the sequence"""
        return self._derive(lambda: chain(elements, self))

    # --- ordering ---

    def sort(self: 'LazySequence[T]', by: Optional[Callable] = None, *,
             key: Optional[KeySelector[T, Any]] = None,
             cmp: Optional[Comparer[Any]] = None) -> 'LazySequence[T]':
        """
        stable sort. `by` taking two arguments is a comparator, otherwise it is
        a key function. `key` and `cmp` name the role explicitly. key functions
        run exactly once per element.
        """
        if by is not None:
            if key is not None or cmp is not None:
                raise ValueError("pass either by, key or cmp, not several")
            if _positional_arity(by) >= 2:
                cmp = by
            else:
                key = by
        if key is not None and cmp is not None:
            raise ValueError("key and cmp are mutually exclusive")
        self._ensure_finite('sort')

        def sort_iter():
            data = self._get_data('sort')
            keys = [key(x) for x in data] if key is not None else data
            order = _numpy_sort_order(keys) if cmp is None else None
            if order is None:
                compare = cmp or generic_cmp
                order = sorted(range(len(data)), key=cmp_to_key(lambda i, j: compare(keys[i], keys[j])))
            return (data[i] for i in order)

        return self._derive(sort_iter, infinite=False)
