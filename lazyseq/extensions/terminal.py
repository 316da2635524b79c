from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..match import Matcher, ANY_VALUE
from ..compare import stringify
from ..errors import EmptySequenceError
from ..operators import Next, Last, NO_IDENTITY, identity_for, invoke

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


class TerminalAccessor(Generic[T]):
    def __init__(self, sequence: 'LazySequence[T]'):
        self._sequence = sequence

    def list(self) -> List[T]:
        """convert to list"""
        return self._sequence._get_data('list')

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._sequence._get_data('tuple'))

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence._get_data('array'))

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence._get_data('pandas'))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._sequence._get_data('df'))

    def count(self, matcher: Any = ANY_VALUE) -> int:
        """count elements that smart-match"""
        self._sequence._ensure_finite('count')
        test = Matcher.of(matcher).compile()
        return sum(1 for x in self._sequence if test(x))

    def any(self, matcher: Any = ANY_VALUE) -> bool:
        """check if any element smart-matches. stops at the first hit."""
        test = Matcher.of(matcher).compile()
        return any(test(x) for x in self._sequence)

    def all(self, matcher: Any) -> bool:
        """check if all elements smart-match. stops at the first miss."""
        test = Matcher.of(matcher).compile()
        return all(test(x) for x in self._sequence)

    def join(self, separator: str = '') -> str:
        """stringify each element as one unit and join them"""
        return separator.join(stringify(x) for x in self._sequence._get_data('join'))

    def reduce(self, func: Accumulator[T, T]) -> T:
        """
        left fold. a single element is returned as is. an empty sequence
        returns the operator's identity, or raises when it has none.
        func may raise next / last / redo to steer the fold.
        """
        self._sequence._ensure_finite('reduce')
        source = iter(self._sequence)
        for acc in source:
            break
        else:
            identity = identity_for(func)
            if identity is NO_IDENTITY:
                raise EmptySequenceError("cannot reduce an empty sequence with an operator that has no identity")
            return identity

        for value in source:
            try:
                acc = invoke(func, acc, value)
            except Next as signal:
                if signal.has_value:
                    acc = signal.value
            except Last as signal:
                return signal.value if signal.has_value else acc
        return acc
