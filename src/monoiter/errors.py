"""
Exceptions raised by the monotonic cursors.

Every exception also derives from the builtin a caller would naturally
catch (ValueError, IndexError, ...), so code written against plain
Python containers keeps working.
"""


class MonotonicError(Exception):
    """Base class for all monoiter errors."""


class InvalidWindowSize(MonotonicError, ValueError):
    """Window size is zero, negative or larger than the sequence."""


class IncompatibleCursorComparison(MonotonicError, ValueError):
    """Cursors over different sequences or window sizes were compared."""


class InvalidOrdering(MonotonicError, TypeError):
    """Received something that is neither a direction nor a comparator."""


class InvalidPosition(MonotonicError, IndexError):
    """Cursor start position lies outside the traversable range."""


class CursorExhausted(MonotonicError, IndexError):
    """Advanced or dereferenced a cursor that already reached the end."""


class EmptyStack(MonotonicError, LookupError):
    """Peeked at the top of an empty monotonic stack."""
