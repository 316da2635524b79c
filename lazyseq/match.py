from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from .types import *


class MatchKind(Enum):
    VALUE = 'value'
    TYPE = 'type'
    PATTERN = 'pattern'
    PREDICATE = 'predicate'


@dataclass(frozen=True)
class Matcher:
    """
    a generalized equality test between a candidate value and a target.
    the kind is fixed when the matcher is built, so each comparison runs
    exactly one strategy:
      VALUE      candidate == target
      TYPE       isinstance(candidate, target)
      PATTERN    target.search(str(candidate)) is not None
      PREDICATE  bool(target(candidate))
    """
    kind: MatchKind
    target: Any

    @classmethod
    def of(cls, matcher: Any) -> 'Matcher':
        """infer the kind from the shape of the matcher"""
        if isinstance(matcher, Matcher):
            return matcher
        if isinstance(matcher, type) or (
                isinstance(matcher, tuple) and matcher and all(isinstance(m, type) for m in matcher)):
            return cls(MatchKind.TYPE, matcher)
        if isinstance(matcher, re.Pattern):
            return cls(MatchKind.PATTERN, matcher)
        if callable(matcher):
            return cls(MatchKind.PREDICATE, matcher)
        return cls(MatchKind.VALUE, matcher)

    @classmethod
    def value(cls, target: Any) -> 'Matcher':
        return cls(MatchKind.VALUE, target)

    @classmethod
    def type(cls, target: Union[Type, Tuple[Type, ...]]) -> 'Matcher':
        return cls(MatchKind.TYPE, target)

    @classmethod
    def pattern(cls, target: Union[str, 're.Pattern']) -> 'Matcher':
        return cls(MatchKind.PATTERN, re.compile(target) if isinstance(target, str) else target)

    @classmethod
    def predicate(cls, target: Predicate[Any]) -> 'Matcher':
        return cls(MatchKind.PREDICATE, target)

    def compile(self) -> Predicate[Any]:
        """resolve to a single comparison function"""
        target = self.target
        if self.kind is MatchKind.TYPE:
            return lambda candidate: isinstance(candidate, target)
        if self.kind is MatchKind.PATTERN:
            return lambda candidate: target.search(str(candidate)) is not None
        if self.kind is MatchKind.PREDICATE:
            return lambda candidate: bool(target(candidate))
        return lambda candidate: candidate == target

    def matches(self, candidate: Any) -> bool:
        return self.compile()(candidate)


ANY_VALUE = Matcher(MatchKind.PREDICATE, lambda _: True)


class Projection(Enum):
    """which view of a match to report: value, index, both, or a pair"""
    V = 'v'
    K = 'k'
    KV = 'kv'
    P = 'p'

    @classmethod
    def parse(cls, value: Union['Projection', str]) -> 'Projection':
        if isinstance(value, Projection):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown projection '{value}', expected one of v, k, kv, p") from None

    def expand(self, index: int, value: Any) -> Iterator[Any]:
        """the elements a stream yields for one match (kv yields two)"""
        if self is Projection.V:
            yield value
        elif self is Projection.K:
            yield index
        elif self is Projection.KV:
            yield index
            yield value
        else:
            yield IndexPair(index, value)

    def single(self, index: int, value: Any) -> Any:
        """the result a lookup returns for one match"""
        if self is Projection.V:
            return value
        if self is Projection.K:
            return index
        if self is Projection.KV:
            return index, value
        return IndexPair(index, value)
