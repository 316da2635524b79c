from __future__ import annotations
import math
import operator
from dataclasses import dataclass
from .types import *
from .config import get_config
from .errors import ControlFlowError


class _NoIdentity:
    def __repr__(self) -> str:
        return "NO_IDENTITY"


NO_IDENTITY = _NoIdentity()

_IDENTITIES: Dict[Callable, Any] = {
    operator.add: 0,
    operator.mul: 1,
    operator.or_: 0,
    operator.xor: 0,
    operator.and_: -1,
    max: -math.inf,
    min: math.inf,
    math.gcd: 0,
    math.lcm: 1,
}


@dataclass(frozen=True)
class Operator:
    """a binary callable carrying the value reduce returns for empty input"""
    func: Callable[[Any, Any], Any]
    identity: Any = NO_IDENTITY
    name: str = ''

    def __call__(self, left, right):
        return self.func(left, right)

    @property
    def has_identity(self) -> bool:
        return self.identity is not NO_IDENTITY


def register_identity(func: Callable, identity: Any) -> None:
    """record the identity element of a plain binary callable"""
    _IDENTITIES[func] = identity


def identity_for(func: Callable) -> Any:
    if isinstance(func, Operator):
        return func.identity
    try:
        return _IDENTITIES.get(func, NO_IDENTITY)
    except TypeError:
        return NO_IDENTITY


# --- loop control signals ---

class ControlSignal(Exception):
    """raised from a callback to steer the loop that called it"""
    _EMPTY = object()

    def __init__(self, value: Any = _EMPTY):
        super().__init__()
        self._value = value

    @property
    def has_value(self) -> bool:
        return self._value is not ControlSignal._EMPTY

    @property
    def value(self) -> Any:
        return self._value if self.has_value else None


class Next(ControlSignal):
    """skip the current element, or replace its result with the given value"""


class Last(ControlSignal):
    """stop the loop, optionally after producing the given value"""


class Redo(ControlSignal):
    """run the callback again with the same arguments"""


def invoke(func: Callable[..., U], *args: Any) -> U:
    """call func, retrying on Redo up to the configured limit"""
    limit = get_config().redo_limit
    for _ in range(limit):
        try:
            return func(*args)
        except Redo:
            continue
    raise ControlFlowError(f"callback signalled redo {limit} times in a row")
