"""The capability every status code exposes.

Anything with a ``code``, a ``name`` and a ``status_class`` can stand in
for a built-in status code.  Callers can define private or vendor codes
(say, an internal ``599 Custom Timeout``) as plain dataclasses and hand
them to any code written against ``StatusCodeLike``, with no base class
to inherit from and no registration step.

Example::

    @dataclass(frozen=True)
    class VendorStatus:
        code: int
        name: str

        @property
        def status_class(self) -> StatusClass:
            return SERVER_ERROR_RESPONSES
"""

from typing import Protocol, runtime_checkable

from http_status_codes.status_class import StatusClass


@runtime_checkable
class StatusCodeLike(Protocol):
    """Interface shared by built-in and user-defined status codes."""

    @property
    def code(self) -> int:
        """Return the numeric status code."""
        ...

    @property
    def name(self) -> str:
        """Return the human-readable name of the code."""
        ...

    @property
    def status_class(self) -> StatusClass:
        """Return the class the code belongs to."""
        ...
