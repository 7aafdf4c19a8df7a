"""Error keys for the built-in checks.

Each key names a catalog template. A negated check that fails looks up the
``not_`` variant of its key, so every key below has a ``not_`` twin in the
shipped locale files.
"""

BETWEEN = "between"
BLANK = "blank"
EMPTY = "empty"
EQUAL_TO = "equal_to"
FALSE = "false"
GREATER_OR_EQUAL_TO = "greater_or_equal_to"
GREATER_THAN = "greater_than"
IN_SLICE = "in_slice"
LENGTH = "length"
LENGTH_BETWEEN = "length_between"
LESS_OR_EQUAL_TO = "less_or_equal_to"
LESS_THAN = "less_than"
MATCHING_TO = "matching_to"
MAX_LENGTH = "max_length"
MIN_LENGTH = "min_length"
NEGATIVE = "negative"
NIL = "nil"
NUMBER_TYPE = "a_number_type"
PASSING = "passing"
POSITIVE = "positive"
TRUE = "true"
ZERO = "zero"

NEGATION_PREFIX = "not_"

BUILTIN_KEYS: tuple[str, ...] = (
    BETWEEN,
    BLANK,
    EMPTY,
    EQUAL_TO,
    FALSE,
    GREATER_OR_EQUAL_TO,
    GREATER_THAN,
    IN_SLICE,
    LENGTH,
    LENGTH_BETWEEN,
    LESS_OR_EQUAL_TO,
    LESS_THAN,
    MATCHING_TO,
    MAX_LENGTH,
    MIN_LENGTH,
    NEGATIVE,
    NIL,
    NUMBER_TYPE,
    PASSING,
    POSITIVE,
    TRUE,
    ZERO,
)


def negated_key(key: str) -> str:
    """Return the key used when a negated check fails."""
    return NEGATION_PREFIX + key
