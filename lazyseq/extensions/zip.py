from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


def _is_infinite(source: Any) -> bool:
    return bool(getattr(source, 'is_infinite', False))


def zip_iter(sources: List[Iterable[Any]], with_: Optional[Callable[..., Any]] = None) -> Iterator[Any]:
    """one element from every source per step, stopping at the shortest"""
    if not sources:
        return
    iterators = [iter(s) for s in sources]
    while True:
        row = []
        for it in iterators:
            for value in it:
                row.append(value)
                break
            else:
                return
        yield with_(*row) if with_ else tuple(row)


def roundrobin_iter(sources: List[Iterable[Any]], rounds: bool = False) -> Iterator[Any]:
    """one element from every live source per round until all are exhausted"""
    iterators = [iter(s) for s in sources]
    while iterators:
        row, alive = [], []
        for it in iterators:
            for value in it:
                row.append(value)
                alive.append(it)
                break
        iterators = alive
        if not row:
            return
        if rounds:
            yield tuple(row)
        else:
            yield from row


def zip_is_infinite(sources: List[Iterable[Any]]) -> bool:
    return bool(sources) and all(_is_infinite(s) for s in sources)


def roundrobin_is_infinite(sources: List[Iterable[Any]]) -> bool:
    return any(_is_infinite(s) for s in sources)


class ZipAccessor(Generic[T]):
    def __init__(self, sequence: 'LazySequence[T]'):
        self._sequence = sequence

    def zip(self, *others: Iterable[Any], with_: Optional[Callable[..., V]] = None) -> 'LazySequence[Any]':
        """zip with other iterables, stopping at the shortest"""
        from ..factories import from_iterable
        sources = [self._sequence, *(from_iterable(o) for o in others)]
        return self._sequence._derive(lambda: zip_iter(sources, with_), infinite=zip_is_infinite(sources))

    def roundrobin(self, *others: Iterable[Any], rounds: bool = False) -> 'LazySequence[Any]':
        """interleave with other iterables, carrying on past the shortest"""
        from ..factories import from_iterable
        sources = [self._sequence, *(from_iterable(o) for o in others)]
        return self._sequence._derive(lambda: roundrobin_iter(sources, rounds),
                                      infinite=roundrobin_is_infinite(sources))
