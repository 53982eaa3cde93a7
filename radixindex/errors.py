"""Exceptions raised by RadixIndex.

Only precondition violations are errors. Looking up a word that was never
inserted, or removing a value that is not indexed, is a normal outcome and
yields an empty result or a no-op instead.
"""


class RadixIndexError(Exception):
    """Base class for all RadixIndex errors."""
    pass


class InvalidArgumentError(RadixIndexError, ValueError):
    """Raised when an operation is rejected because of a bad argument.

    Examples: a None or empty word, a prefix that is not a string, a None
    value. The tree is never modified when this is raised.
    """
    pass
