r"""
'    .__                                          
'    |  | _____  ________ ___.__. ______ ____  ______
'    |  | \__  \ \___   /<   |  |/  ___// __ \/ ____/
'    |  |__/ __ \_/    /  \___  |\___ \\  ___< <_|  |
'    |____(____  /_____ \ / ____/____  >\___  >__   |
'              \/      \/ \/         \/     \/   |__|
"""

# expose the main class
from .sequence import LazySequence

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    from_function,
    count_from,
    repeat,
    empty,
    generate,
    iterate,
    from_directory,
    zip_,
    roundrobin,
    cross,
    combinations,
    permutations,
    seq,
    S,
)

# expose supporting types
from .types import (
    Nil,
    NIL,
    is_nil,
    IndexPair,
    Itemized,
    Slip,
    item,
    slip,
    ReplayCache,
)
from .match import Matcher, MatchKind, Projection, ANY_VALUE
from .compare import generic_cmp, stringify
from .operators import Operator, NO_IDENTITY, register_identity, identity_for, Next, Last, Redo
from .errors import (
    SequenceError,
    EmptySequenceError,
    InfiniteSequenceError,
    SequenceConsumedError,
    ControlFlowError,
)
from .config import SequenceConfig, get_config, configure, reset_config
from .extensions.utility import WHATEVER

# define what `import *` does
__all__ = [
    "LazySequence",
    "from_iterable",
    "from_range",
    "from_function",
    "count_from",
    "repeat",
    "empty",
    "generate",
    "iterate",
    "from_directory",
    "zip_",
    "roundrobin",
    "cross",
    "combinations",
    "permutations",
    "seq",
    "S",
    "Nil",
    "NIL",
    "is_nil",
    "IndexPair",
    "Itemized",
    "Slip",
    "item",
    "slip",
    "ReplayCache",
    "Matcher",
    "MatchKind",
    "Projection",
    "ANY_VALUE",
    "generic_cmp",
    "stringify",
    "Operator",
    "NO_IDENTITY",
    "register_identity",
    "identity_for",
    "Next",
    "Last",
    "Redo",
    "SequenceError",
    "EmptySequenceError",
    "InfiniteSequenceError",
    "SequenceConsumedError",
    "ControlFlowError",
    "SequenceConfig",
    "get_config",
    "configure",
    "reset_config",
    "WHATEVER",
]
