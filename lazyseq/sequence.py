from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence as _Indexable
from itertools import islice
from .types import *
from .errors import InfiniteSequenceError, SequenceConsumedError

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.zip import ZipAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """pull elements one at a time"""
        pass

    @abstractmethod
    def _get_data(self, operation: str) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, iter_func: IterFunc[T], infinite: bool = False,
                 restartable: bool = True, source: Optional[_Indexable] = None):
        """init with a function that returns a fresh iterator when called"""
        self._iter_func = iter_func
        self._infinite = infinite
        self._restartable = restartable
        self._source = source
        self._consumed = False

    @property
    def is_infinite(self) -> bool:
        return self._infinite

    @property
    def is_restartable(self) -> bool:
        return self._restartable

    def __iter__(self) -> Iterator[T]:
        if not self._restartable:
            if self._consumed:
                raise SequenceConsumedError("this single-pass sequence has already been iterated")
            self._consumed = True
        return iter(self._iter_func())

    def _ensure_finite(self, operation: str) -> None:
        if self._infinite:
            logger.debug(f"refusing to {operation} an infinite sequence")
            raise InfiniteSequenceError(operation)

    def _get_data(self, operation: str = 'materialize') -> List[T]:
        """pull every element into a fresh list"""
        self._ensure_finite(operation)
        data = [value for value in self]
        logger.debug(f"{operation}: materialized {len(data)} elements")
        return data

    def _indexable(self, operation: str) -> _Indexable:
        """random-access view: the backing store if there is one, else a materialized list"""
        self._ensure_finite(operation)
        if self._source is not None:
            return self._source
        return self._get_data(operation)

    def _derive(self, iter_func: IterFunc[U], infinite: Optional[bool] = None) -> 'LazySequence[U]':
        """new lazy sequence over this one; inherits infiniteness unless told otherwise"""
        return LazySequence(iter_func, infinite=self._infinite if infinite is None else infinite)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            start, stop, step = index.start, index.stop, index.step
            if all(v is None or v >= 0 for v in (start, stop)) and (step is None or step > 0):
                return self._derive(lambda: islice(self, start, stop, step),
                                    infinite=self._infinite and stop is None)
            return LazySequence.of(self._get_data('slice')[index])
        if index < 0:
            return self._get_data('index from the end of')[index]
        if self._source is not None:
            return self._source[index]
        for value in islice(self, index, index + 1):
            return value
        raise IndexError("sequence index out of range")

    def __repr__(self) -> str:
        if self._infinite:
            return f"{type(self).__name__}(...)"
        if self._source is not None:
            return f"{type(self).__name__}({list(self._source)!r})"
        return f"{type(self).__name__}(<lazy>)"

# --- main sequence class ---

class LazySequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a lazy, pull-based sequence with linq-style accessors."""
    def __init__(self, iter_func: IterFunc[T], infinite: bool = False,
                 restartable: bool = True, source: Optional[_Indexable] = None):
        super().__init__(iter_func, infinite, restartable, source)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.comb = CombinatoricsAccessor(self)
        self.zip = ZipAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    @classmethod
    def of(cls, data: _Indexable) -> 'LazySequence':
        """sequence backed by an already materialized list, tuple or range"""
        return cls(lambda: iter(data), source=data)
