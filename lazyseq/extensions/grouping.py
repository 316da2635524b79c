from __future__ import annotations
import typing
from collections import defaultdict, deque
from collections.abc import Mapping
from itertools import cycle
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

Window = Tuple[int, int]

_EXHAUSTED = object()


def _parse_window(entry: Union[int, Tuple[int, int]]) -> Window:
    """an int is a plain size; a (size, gap) pair skips gap elements, or overlaps when negative"""
    if isinstance(entry, int) and not isinstance(entry, bool):
        size, gap = entry, 0
    elif isinstance(entry, (tuple, list)) and len(entry) == 2:
        size, gap = entry
    else:
        raise ValueError(f"rotor window must be a size or a (size, gap) pair, got {entry!r}")
    if size < 1:
        raise ValueError(f"rotor window size must be at least 1, got {size}")
    if size + gap < 1:
        raise ValueError(f"rotor gap {gap} would stop a window of {size} from advancing")
    return size, gap


class GroupingAccessor(Generic[T]):
    def __init__(self, sequence: 'LazySequence[T]'):
        self._sequence = sequence

    def rotor(self, *windows: Union[int, Tuple[int, int]], partial: bool = False) -> 'LazySequence[List[T]]':
        """
        cut the sequence into consecutive sublists, cycling through the
        window specs. a trailing undersized group is kept only with partial=True.
        ex: rotor((2, -1)) over [1, 2, 3, 4] -> [1, 2], [2, 3], [3, 4]
        """
        if not windows:
            raise ValueError("rotor needs at least one window")
        specs = [_parse_window(w) for w in windows]

        def rotor_iter():
            source = iter(self._sequence)
            buffer: deque = deque()
            for size, gap in cycle(specs):
                while len(buffer) < size:
                    for value in source:
                        buffer.append(value)
                        break
                    else:
                        break
                if len(buffer) < size:
                    if partial and buffer:
                        yield list(buffer)
                    return
                yield list(buffer)
                if gap >= 0:
                    buffer.clear()
                    for _ in range(gap):
                        if next(source, _EXHAUSTED) is _EXHAUSTED:
                            return
                else:
                    for _ in range(size + gap):
                        buffer.popleft()

        return self._sequence._derive(rotor_iter)

    def batch(self, size: int) -> 'LazySequence[List[T]]':
        """consecutive groups of `size`; the last one may be shorter"""
        return self.rotor(size, partial=True)

    def classify(self, mapper: Union[Selector[T, K], Mapping],
                 as_: Optional[Selector[T, Any]] = None) -> Dict[K, List[Any]]:
        """
        group every element under mapper(element). a mapping can stand in for
        the function. keys and values keep first-seen order.
        """
        lookup = mapper.__getitem__ if isinstance(mapper, Mapping) else mapper
        groups = defaultdict(list)
        for item in self._sequence._get_data('classify'):
            groups[lookup(item)].append(as_(item) if as_ else item)
        return dict(groups)

    def categorize(self, mapper: Callable[[T], Iterable[K]],
                   as_: Optional[Selector[T, Any]] = None) -> Dict[K, List[Any]]:
        """like classify, but mapper returns any number of keys per element"""
        groups = defaultdict(list)
        for item in self._sequence._get_data('categorize'):
            value = as_(item) if as_ else item
            for category in mapper(item):
                groups[category].append(value)
        return dict(groups)
