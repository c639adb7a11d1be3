"""Exceptions raised when the built-in catalogue breaks its invariants.

Both are ``AssertionError`` subclasses: they signal a bug in the table
itself, never bad input from a caller.  Unknown codes are not errors at
all; ``lookup`` simply returns None for them.
"""


class CatalogueError(AssertionError):
    """Raise when the status code table is inconsistent."""


class UnclassifiedStatusCodeError(CatalogueError):
    """Raise when a catalogue code falls outside every standard class."""
