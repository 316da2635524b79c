from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Equivalence = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]
IterFunc = Callable[[], Iterable[T]]


class Nil:
    """the absent-value marker returned when a lookup finds nothing"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nil"


NIL = Nil()


def is_nil(value: Any) -> bool:
    return value is NIL


class IndexPair(NamedTuple):
    """a (position, value) pair; position always counts from the start"""
    key: int
    value: Any


class Itemized(Generic[T]):
    """wraps a value so flattening treats it as a single opaque unit"""

    __slots__ = ('value',)

    def __init__(self, value: T):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Itemized) and self.value == other.value

    def __hash__(self) -> int:
        try:
            return hash(self.value)
        except TypeError:
            # unhashable payloads (lists) all land in one bucket per type
            return hash(type(self.value))

    def __repr__(self) -> str:
        return f"Itemized({self.value!r})"


class Slip(tuple):
    """a transparent container: spliced into its parent by map and flat"""

    def __repr__(self) -> str:
        return f"Slip{tuple.__repr__(self)}"


def item(value: T) -> Itemized[T]:
    return Itemized(value)


def slip(*values: Any) -> Slip:
    return Slip(values)


class ReplayCache(Generic[T]):
    """
    shares one upstream iterator between any number of readers.
    items are pulled on demand and kept, so every reader sees the same values
    and the upstream is only consumed once.
    """

    def __init__(self, iter_func: Callable[[], Iterable[T]]):
        self._source_func = iter_func
        self._cache: List[T] = []
        self._source_iterator: Optional[Iterator[T]] = None
        self._is_fully_enumerated = False

    def _get_iterator(self) -> Iterator[T]:
        if self._source_iterator is None:
            self._source_iterator = iter(self._source_func())
        return self._source_iterator

    def _pull(self) -> bool:
        """pull one more item into the cache. returns false once upstream is exhausted."""
        if self._is_fully_enumerated:
            return False
        try:
            self._cache.append(next(self._get_iterator()))
            return True
        except StopIteration:
            self._is_fully_enumerated = True
            self._source_iterator = None
            return False

    def replay(self) -> Iterator[T]:
        index = 0
        while True:
            if index < len(self._cache):
                yield self._cache[index]
                index += 1
            elif not self._pull():
                return

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    @property
    def is_complete(self) -> bool:
        return self._is_fully_enumerated
