import typing
import logging
from collections.abc import Iterator as _Iterator, Sequence as _Indexable
from itertools import count as _count, product
from pathlib import Path
from .types import *
from .match import Matcher, ANY_VALUE
from .errors import InfiniteSequenceError
from .extensions.zip import zip_iter, roundrobin_iter, zip_is_infinite, roundrobin_is_infinite

if typing.TYPE_CHECKING:
    from .sequence import LazySequence

logger = logging.getLogger(__name__)


def from_iterable(data: Iterable[T]) -> 'LazySequence[T]':
    """
    create a sequence from an iterable. containers are restartable; a bare
    iterator (e.g. a generator object) can only be walked once.
    """
    from .sequence import LazySequence
    if isinstance(data, LazySequence):
        return data
    if isinstance(data, _Iterator):
        return LazySequence(lambda: data, restartable=False)
    return LazySequence(lambda: iter(data), source=data if isinstance(data, _Indexable) else None)

def from_range(start: int, count: int) -> 'LazySequence[int]':
    """create a sequence of `count` consecutive ints"""
    return from_iterable(range(start, start + max(count, 0)))

def from_function(iter_func: Callable[[], Iterable[T]], infinite: bool = False) -> 'LazySequence[T]':
    """create a restartable sequence from a zero-argument generator function"""
    from .sequence import LazySequence
    return LazySequence(iter_func, infinite=infinite)

def count_from(start: int = 0, step: int = 1) -> 'LazySequence[int]':
    """start, start + step, ... forever"""
    return from_function(lambda: _count(start, step), infinite=True)

def repeat(item: T, count: Optional[int] = None) -> 'LazySequence[T]':
    """create a sequence with a repeated item; endless without a count"""
    if count is None:
        def repeat_forever():
            while True:
                yield item
        return from_function(repeat_forever, infinite=True)
    return from_function(lambda: (item for _ in range(count)))

def empty() -> 'LazySequence[Any]':
    """create empty sequence"""
    return from_iterable(())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'LazySequence[T]':
    """call generator_func for each element; endless without a count"""
    if count is None:
        def generate_forever():
            while True:
                yield generator_func()
        return from_function(generate_forever, infinite=True)
    return from_function(lambda: (generator_func() for _ in range(count)))

def iterate(seed: T, step: Callable[[T], T], until: Any = None) -> 'LazySequence[T]':
    """
    seed, step(seed), step(step(seed)), ...
    with `until`, stops after the first value that smart-matches it.
    """
    stop = Matcher.of(until).compile() if until is not None else None

    def iterate_iter():
        value = seed
        while True:
            yield value
            if stop is not None and stop(value):
                return
            value = step(value)

    return from_function(iterate_iter, infinite=until is None)

def from_directory(path: Union[str, Path] = '.', test: Any = ANY_VALUE) -> 'LazySequence[Path]':
    """entries of a directory whose names smart-match `test`, listed on each pass"""
    root = Path(path)
    check = Matcher.of(test).compile()

    def listing():
        logger.debug(f"listing directory: {root}")
        for entry in root.iterdir():
            if check(entry.name):
                yield entry

    return from_function(listing)

# --- multi-sequence forms ---

def zip_(*sources: Iterable[Any], with_: Optional[Callable[..., Any]] = None) -> 'LazySequence[Any]':
    """zip any number of iterables, stopping at the shortest; no inputs gives nothing"""
    sources = [from_iterable(s) for s in sources]
    return from_function(lambda: zip_iter(sources, with_), infinite=zip_is_infinite(sources))

def roundrobin(*sources: Iterable[Any], rounds: bool = False) -> 'LazySequence[Any]':
    """interleave iterables until every one is exhausted"""
    sources = [from_iterable(s) for s in sources]
    return from_function(lambda: roundrobin_iter(sources, rounds), infinite=roundrobin_is_infinite(sources))

def cross(*sources: Iterable[Any]) -> 'LazySequence[Tuple[Any, ...]]':
    """cartesian product of finite iterables"""
    sources = [from_iterable(s) for s in sources]
    if any(getattr(s, 'is_infinite', False) for s in sources):
        raise InfiniteSequenceError('take the cross product of')
    return from_function(lambda: product(*sources))

# --- integer-count forms ---

def combinations(n: int, k: Union[int, range]) -> 'LazySequence[Tuple[int, ...]]':
    """k-subsets of range(n)"""
    return from_iterable(range(max(n, 0))).comb.combinations(k)

def permutations(n: int) -> 'LazySequence[Tuple[int, ...]]':
    """every ordering of range(n)"""
    return from_iterable(range(max(n, 0))).comb.permutations()

# --- aliases ---
seq = from_iterable
S = from_iterable
