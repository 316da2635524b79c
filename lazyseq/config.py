from dataclasses import dataclass, replace, asdict
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceConfig:
    """runtime settings shared by every sequence"""
    numpy_threshold: int = 32        # min input size before sort hands off to numpy
    redo_limit: int = 1000           # max Redo signals per callback invocation
    default_seed: Optional[int] = None

    def __post_init__(self):
        if self.numpy_threshold < 0:
            raise ValueError("numpy_threshold must not be negative")
        if self.redo_limit < 1:
            raise ValueError("redo_limit must be at least 1")


_active = SequenceConfig()


def get_config() -> SequenceConfig:
    return _active


def configure(**overrides) -> SequenceConfig:
    """replace the active settings. unknown keys raise typeerror."""
    global _active
    _active = replace(_active, **overrides)
    logger.debug(f"config: {asdict(_active)}")
    return _active


def reset_config() -> SequenceConfig:
    global _active
    _active = SequenceConfig()
    return _active
