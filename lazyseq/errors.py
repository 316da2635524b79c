class SequenceError(Exception):
    """base class for every failure raised by lazyseq itself."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class EmptySequenceError(SequenceError, ValueError):
    """an operation needed at least one element and found none."""


class InfiniteSequenceError(SequenceError, ValueError):
    """an operation needed the whole input but the sequence never ends."""

    def __init__(self, operation: str):
        super().__init__(f"cannot {operation} an infinite sequence")
        self.operation = operation


class SequenceConsumedError(SequenceError, RuntimeError):
    """a single-pass sequence was iterated a second time."""


class ControlFlowError(SequenceError, RuntimeError):
    """a loop-control signal was used in a way that cannot terminate."""
