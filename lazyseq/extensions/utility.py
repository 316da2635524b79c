from __future__ import annotations
import typing
import logging
import numpy as np
from ..types import *
from ..config import get_config

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)

WHATEVER = '*'

Count = Union[int, str, None]


def _rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed if seed is not None else get_config().default_seed)


class UtilityAccessor(Generic[T]):
    def __init__(self, sequence: 'LazySequence[T]'):
        self._sequence = sequence

    def pick(self, count: Count = None, seed: Optional[int] = None) -> Any:
        """
        random elements without replacement. no count returns one element
        (NIL when empty), an int returns up to that many, '*' returns all of
        them shuffled.
        """
        if count is None:
            data = self._sequence._indexable('pick from')
            if not len(data):
                return NIL
            return data[int(_rng(seed).integers(len(data)))]
        if count != WHATEVER and not isinstance(count, int):
            raise ValueError(f"pick count must be an int or '*', got {count!r}")
        self._sequence._ensure_finite('pick from')

        def pick_iter():
            data = self._sequence._indexable('pick from')
            order = _rng(seed).permutation(len(data))
            if count != WHATEVER:
                order = order[:max(count, 0)]
            return (data[int(i)] for i in order)

        return self._sequence._derive(pick_iter, infinite=False)

    def roll(self, count: Count = None, seed: Optional[int] = None) -> Any:
        """
        random elements with replacement. no count returns one element
        (NIL when empty), an int returns that many, '*' is an endless stream.
        """
        if count is None:
            data = self._sequence._indexable('roll over')
            if not len(data):
                return NIL
            return data[int(_rng(seed).integers(len(data)))]
        if count != WHATEVER and not isinstance(count, int):
            raise ValueError(f"roll count must be an int or '*', got {count!r}")
        self._sequence._ensure_finite('roll over')

        def roll_iter():
            data = self._sequence._indexable('roll over')
            if not len(data):
                return
            rng = _rng(seed)
            if count != WHATEVER:
                for i in rng.integers(len(data), size=max(count, 0)):
                    yield data[int(i)]
                return
            while True:
                yield data[int(rng.integers(len(data)))]

        return self._sequence._derive(roll_iter, infinite=count == WHATEVER)

    def cache(self) -> 'LazySequence[T]':
        """
        restartable view over this sequence. elements are pulled from the
        source at most once, on demand, and replayed for every later pass.
        works on single-pass and infinite sequences alike.
        """
        from ..sequence import LazySequence
        replay = ReplayCache(self._sequence.__iter__)
        logger.debug("cache: created replay buffer")
        return LazySequence(replay.replay, infinite=self._sequence.is_infinite)

    def peek(self, action: Callable[[T], Any]) -> 'LazySequence[T]':
        """
        run action on each element as it passes through, without changing it.
        example: .grep(...).util.peek(print).map(...)
        """
        def peek_iter():
            for item in self._sequence:
                action(item)
                yield item
        return self._sequence._derive(peek_iter)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the sequence into an external function.
        example: .util.pipe(my_custom_report, title='my data')
        """
        return func(self._sequence, *args, **kwargs)
