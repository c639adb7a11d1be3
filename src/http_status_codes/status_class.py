"""Status classes, the five families every HTTP status code belongs to.

A status code's first digit says what kind of answer the server gave:

    1xx  Informational    "got it, keep going"
    2xx  Successful       "done, here you are"
    3xx  Redirection      "look somewhere else"
    4xx  Client error     "your request was wrong"
    5xx  Server error     "I broke"

Each family is modelled as a **StatusClass**: a name plus an inclusive
``(lower, upper)`` range.  Classifying a code is ordinary interval
containment, tried against the standard classes in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from http_status_codes.status_code import HttpStatusCode


@dataclass(frozen=True)
class StatusClass:
    """A named, inclusive range of status codes.

    Attributes:
        name: Display name (e.g. "Server Error Responses").
        range: Inclusive ``(lower, upper)`` bounds (e.g. ``(500, 599)``).

    """

    name: str
    range: tuple[int, int]

    @property
    def lower(self) -> int:
        """Return the smallest code in this class."""
        return self.range[0]

    @property
    def upper(self) -> int:
        """Return the largest code in this class."""
        return self.range[1]

    def contains(self, code: int) -> bool:
        """Return True if *code* lies within this class's range."""
        return self.lower <= code <= self.upper

    def __contains__(self, code: object) -> bool:
        """Support ``code in status_class``."""
        return isinstance(code, int) and self.contains(code)

    def all_status_codes(self) -> tuple[HttpStatusCode, ...]:
        """Return every known status code that belongs to this class.

        Entries come back in catalogue order (ascending by code).
        Codes defined outside the built-in catalogue are never included.
        """
        from http_status_codes.status_code import known_status_codes  # noqa: PLC0415

        return tuple(entry for entry in known_status_codes() if self.contains(entry.code))

    def __str__(self) -> str:
        """Format as ``name (lower-upper)``."""
        return f"{self.name} ({self.lower}-{self.upper})"


# ---------------------------------------------------------------------------
# The standard classes
# ---------------------------------------------------------------------------

INFORMATIONAL_RESPONSES = StatusClass(name="Informational Responses", range=(100, 199))
"""The request was received and processing continues; a final answer follows."""

SUCCESSFUL_RESPONSES = StatusClass(name="Successful Responses", range=(200, 299))
"""The request was received, understood, and accepted."""

REDIRECTION_MESSAGES = StatusClass(name="Redirection Messages", range=(300, 399))
"""The client must take further action, usually following a new URL."""

CLIENT_ERROR_RESPONSES = StatusClass(name="Client Error Responses", range=(400, 499))
"""The request itself was at fault."""

SERVER_ERROR_RESPONSES = StatusClass(name="Server Error Responses", range=(500, 599))
"""The server failed to fulfil an apparently valid request."""

STANDARD_CLASSES: tuple[StatusClass, ...] = (
    INFORMATIONAL_RESPONSES,
    SUCCESSFUL_RESPONSES,
    REDIRECTION_MESSAGES,
    CLIENT_ERROR_RESPONSES,
    SERVER_ERROR_RESPONSES,
)
"""The standard classes in the order classification tries them."""


def classify(code: int) -> StatusClass | None:
    """Return the first standard class containing *code*, or None.

    Useful for user-defined status codes that want to derive their class
    the same way the built-in catalogue does.
    """
    for status_class in STANDARD_CLASSES:
        if status_class.contains(code):
            return status_class
    return None
