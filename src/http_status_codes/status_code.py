"""The built-in catalogue of HTTP status codes.

Every response a server sends starts with a status line such as
``HTTP/1.1 404 Not Found``.  The number tells software what happened;
the name tells humans.  This module is the lookup table between the two:

    >>> lookup(404)
    HttpStatusCode(code=404, name='Not Found')
    >>> lookup(404).status_class.name
    'Client Error Responses'
    >>> lookup(999) is None
    True

The table is fixed.  Codes that were never standardised are absent
(103, 509, ...), while 306 "Unused" is kept as a historical placeholder.
An entry's class is never stored; it is derived from the code by range
membership against the standard classes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from http_status_codes.errors import CatalogueError, UnclassifiedStatusCodeError
from http_status_codes.status_class import StatusClass, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpStatusCode:
    """One entry of the catalogue.

    Attributes:
        code: The numeric status code (e.g. 404).
        name: The canonical name (e.g. "Not Found").
        description: What the code means.  Deprecated and experimental
            codes start with ``DEPRECATED:`` or ``EXPERIMENTAL:``;
            WebDAV-only codes carry a ``(WebDAV)`` marker.  Not part of
            equality or hashing.

    """

    code: int
    name: str
    description: str = field(default="", compare=False, repr=False)

    @property
    def status_class(self) -> StatusClass:
        """Return the standard class this code belongs to."""
        return status_class_of(self)

    @classmethod
    def from_code(cls, code: int) -> HttpStatusCode | None:
        """Return the catalogue entry for *code*, or None if unknown."""
        return lookup(code)

    def __str__(self) -> str:
        """Format as ``code name``, the way a status line does."""
        return f"{self.code} {self.name}"


# ---------------------------------------------------------------------------
# 1xx: Informational Responses
# ---------------------------------------------------------------------------

CONTINUE = HttpStatusCode(
    100,
    "Continue",
    "The client should continue the request, or ignore this response if the "
    "request is already finished.",
)
SWITCHING_PROTOCOLS = HttpStatusCode(
    101,
    "Switching Protocols",
    "Sent in answer to an Upgrade request header; names the protocol the "
    "server is switching to.",
)
PROCESSING = HttpStatusCode(
    102,
    "Processing",
    "DEPRECATED: Used in WebDAV contexts when a request was received but no "
    "status was available yet.",
)
EARLY_HITS = HttpStatusCode(
    104,
    "Early Hits",
    "Used with the Link header so the user agent can start preloading "
    "resources while the server prepares a response.",
)

# ---------------------------------------------------------------------------
# 2xx: Successful Responses
# ---------------------------------------------------------------------------

OK = HttpStatusCode(
    200,
    "OK",
    "The request succeeded; what success means depends on the HTTP method.",
)
CREATED = HttpStatusCode(
    201,
    "Created",
    "The request succeeded and a new resource was created, typically after POST or PUT.",
)
ACCEPTED = HttpStatusCode(
    202,
    "Accepted",
    "The request was received but not yet acted upon.",
)
NON_AUTHORITATIVE_INFORMATION = HttpStatusCode(
    203,
    "Non-Authoritative Information",
    "The returned metadata comes from a local or third-party copy, not the origin server.",
)
NO_CONTENT = HttpStatusCode(
    204,
    "No Content",
    "There is no body to send, but the headers may be useful.",
)
RESET_CONTENT = HttpStatusCode(
    205,
    "Reset Content",
    "The user agent should reset the document that sent the request.",
)
PARTIAL_CONTENT = HttpStatusCode(
    206,
    "Partial Content",
    "Answers a range request with the requested part or parts of a resource.",
)
MULTI_STATUS = HttpStatusCode(
    207,
    "Multi-Status",
    "(WebDAV) Conveys status for multiple resources at once.",
)
ALREADY_REPORTED = HttpStatusCode(
    208,
    "Already Reported",
    "(WebDAV) Members of a binding were already listed earlier in the response.",
)
IM_USED = HttpStatusCode(
    226,
    "IM Used",
    "The response is the result of instance-manipulations applied to the current instance.",
)

# ---------------------------------------------------------------------------
# 3xx: Redirection Messages
# ---------------------------------------------------------------------------

MULTIPLE_CHOICES = HttpStatusCode(
    300,
    "Multiple Choices",
    "The request has more than one possible response and the client should choose one.",
)
MOVED_PERMANENTLY = HttpStatusCode(
    301,
    "Moved Permanently",
    "The resource URL changed permanently; the new URL is in the response.",
)
FOUND = HttpStatusCode(
    302,
    "Found",
    "The resource URL changed temporarily; keep using the same URL in future.",
)
SEE_OTHER = HttpStatusCode(
    303,
    "See Other",
    "Fetch the resource at another URI with a GET request.",
)
NOT_MODIFIED = HttpStatusCode(
    304,
    "Not Modified",
    "The cached version of the response is still valid.",
)
USE_PROXY = HttpStatusCode(
    305,
    "Use Proxy",
    "DEPRECATED: The response must be accessed through a proxy.",
)
UNUSED = HttpStatusCode(
    306,
    "Unused",
    "DEPRECATED: No longer used but reserved; defined by an earlier HTTP/1.1 draft.",
)
TEMPORARY_REDIRECT = HttpStatusCode(
    307,
    "Temporary Redirect",
    "Like 302 Found, but the client must not change the HTTP method.",
)
PERMANENT_REDIRECT = HttpStatusCode(
    308,
    "Permanent Redirect",
    "Like 301 Moved Permanently, but the client must not change the HTTP method.",
)

# ---------------------------------------------------------------------------
# 4xx: Client Error Responses
# ---------------------------------------------------------------------------

BAD_REQUEST = HttpStatusCode(
    400,
    "Bad Request",
    "The server will not process a request it considers malformed.",
)
UNAUTHORIZED = HttpStatusCode(
    401,
    "Unauthorized",
    "The client must authenticate itself to get the requested response.",
)
PAYMENT_REQUIRED = HttpStatusCode(
    402,
    "Payment Required",
    "Reserved for digital payment systems; rarely used.",
)
FORBIDDEN = HttpStatusCode(
    403,
    "Forbidden",
    "The client is known but lacks access rights to the content.",
)
NOT_FOUND = HttpStatusCode(
    404,
    "Not Found",
    "The server cannot find the requested resource.",
)
METHOD_NOT_ALLOWED = HttpStatusCode(
    405,
    "Method Not Allowed",
    "The method is known but not supported by the target resource.",
)
NOT_ACCEPTABLE = HttpStatusCode(
    406,
    "Not Acceptable",
    "No content matches the criteria given by the user agent.",
)
PROXY_AUTHENTICATION_REQUIRED = HttpStatusCode(
    407,
    "Proxy Authentication Required",
    "Like 401 Unauthorized, but authentication must be done by a proxy.",
)
REQUEST_TIMEOUT = HttpStatusCode(
    408,
    "Request Timeout",
    "The server wants to shut down an idle connection.",
)
CONFLICT = HttpStatusCode(
    409,
    "Conflict",
    "The request conflicts with the current state of the server.",
)
GONE = HttpStatusCode(
    410,
    "Gone",
    "The content was permanently deleted with no forwarding address.",
)
LENGTH_REQUIRED = HttpStatusCode(
    411,
    "Length Required",
    "The server requires a Content-Length header field.",
)
PRECONDITION_FAILED = HttpStatusCode(
    412,
    "Precondition Failed",
    "The server does not meet the preconditions in the request headers.",
)
CONTENT_TOO_LARGE = HttpStatusCode(
    413,
    "Content Too Large",
    "The request body exceeds limits defined by the server.",
)
URI_TOO_LONG = HttpStatusCode(
    414,
    "URI Too Long",
    "The requested URI is longer than the server is willing to interpret.",
)
UNSUPPORTED_MEDIA_TYPE = HttpStatusCode(
    415,
    "Unsupported Media Type",
    "The media format of the request data is not supported.",
)
RANGE_NOT_SATISFIABLE = HttpStatusCode(
    416,
    "Range Not Satisfiable",
    "The ranges in the Range header field cannot be fulfilled.",
)
EXPECTATION_FAILED = HttpStatusCode(
    417,
    "Expectation Failed",
    "The expectation in the Expect request header cannot be met.",
)
IM_A_TEAPOT = HttpStatusCode(
    418,
    "I'm a Teapot",
    "The server refuses to brew coffee with a teapot.",
)
MISDIRECTED_REQUEST = HttpStatusCode(
    421,
    "Misdirected Request",
    "The request went to a server unable to produce a response for it.",
)
UNPROCESSABLE_CONTENT = HttpStatusCode(
    422,
    "Unprocessable Content",
    "(WebDAV) The request was well-formed but has semantic errors.",
)
LOCKED = HttpStatusCode(
    423,
    "Locked",
    "(WebDAV) The resource being accessed is locked.",
)
FAILED_DEPENDENCY = HttpStatusCode(
    424,
    "Failed Dependency",
    "(WebDAV) The request failed because a previous request failed.",
)
TOO_EARLY = HttpStatusCode(
    425,
    "Too Early",
    "EXPERIMENTAL: The server will not risk processing a request that might be replayed.",
)
UPGRADE_REQUIRED = HttpStatusCode(
    426,
    "Upgrade Required",
    "The client must upgrade to a different protocol named in the Upgrade header.",
)
PRECONDITION_REQUIRED = HttpStatusCode(
    428,
    "Precondition Required",
    "The origin server requires the request to be conditional.",
)
TOO_MANY_REQUESTS = HttpStatusCode(
    429,
    "Too Many Requests",
    "The user sent too many requests in a given amount of time.",
)
REQUEST_HEADER_FIELDS_TOO_LARGE = HttpStatusCode(
    431,
    "Request Header Fields Too Large",
    "The request header fields are too large to process.",
)
UNAVAILABLE_FOR_LEGAL_REASONS = HttpStatusCode(
    451,
    "Unavailable For Legal Reasons",
    "The resource cannot legally be provided.",
)

# ---------------------------------------------------------------------------
# 5xx: Server Error Responses
# ---------------------------------------------------------------------------

INTERNAL_SERVER_ERROR = HttpStatusCode(
    500,
    "Internal Server Error",
    "The server hit a situation it does not know how to handle.",
)
NOT_IMPLEMENTED = HttpStatusCode(
    501,
    "Not Implemented",
    "The request method is not supported by the server.",
)
BAD_GATEWAY = HttpStatusCode(
    502,
    "Bad Gateway",
    "A gateway received an invalid response from upstream.",
)
SERVICE_UNAVAILABLE = HttpStatusCode(
    503,
    "Service Unavailable",
    "The server is not ready to handle the request, e.g. down for maintenance.",
)
GATEWAY_TIMEOUT = HttpStatusCode(
    504,
    "Gateway Timeout",
    "A gateway could not get a response from upstream in time.",
)
HTTP_VERSION_NOT_SUPPORTED = HttpStatusCode(
    505,
    "HTTP Version Not Supported",
    "The HTTP version used in the request is not supported.",
)
VARIANT_ALSO_NEGOTIATES = HttpStatusCode(
    506,
    "Variant Also Negotiates",
    "Content negotiation resulted in a circular reference.",
)
INSUFFICIENT_STORAGE = HttpStatusCode(
    507,
    "Insufficient Storage",
    "(WebDAV) The server cannot store the representation needed to complete the request.",
)
LOOP_DETECTED = HttpStatusCode(
    508,
    "Loop Detected",
    "(WebDAV) The server detected an infinite loop while processing the request.",
)
NOT_EXTENDED = HttpStatusCode(
    510,
    "Not Extended",
    "The HTTP extension the request declares is not supported.",
)
NETWORK_AUTHENTICATION_REQUIRED = HttpStatusCode(
    511,
    "Network Authentication Required",
    "The client must authenticate to gain network access.",
)


# Declaration order is catalogue order: ascending by code.
_KNOWN: tuple[HttpStatusCode, ...] = (
    CONTINUE,
    SWITCHING_PROTOCOLS,
    PROCESSING,
    EARLY_HITS,
    OK,
    CREATED,
    ACCEPTED,
    NON_AUTHORITATIVE_INFORMATION,
    NO_CONTENT,
    RESET_CONTENT,
    PARTIAL_CONTENT,
    MULTI_STATUS,
    ALREADY_REPORTED,
    IM_USED,
    MULTIPLE_CHOICES,
    MOVED_PERMANENTLY,
    FOUND,
    SEE_OTHER,
    NOT_MODIFIED,
    USE_PROXY,
    UNUSED,
    TEMPORARY_REDIRECT,
    PERMANENT_REDIRECT,
    BAD_REQUEST,
    UNAUTHORIZED,
    PAYMENT_REQUIRED,
    FORBIDDEN,
    NOT_FOUND,
    METHOD_NOT_ALLOWED,
    NOT_ACCEPTABLE,
    PROXY_AUTHENTICATION_REQUIRED,
    REQUEST_TIMEOUT,
    CONFLICT,
    GONE,
    LENGTH_REQUIRED,
    PRECONDITION_FAILED,
    CONTENT_TOO_LARGE,
    URI_TOO_LONG,
    UNSUPPORTED_MEDIA_TYPE,
    RANGE_NOT_SATISFIABLE,
    EXPECTATION_FAILED,
    IM_A_TEAPOT,
    MISDIRECTED_REQUEST,
    UNPROCESSABLE_CONTENT,
    LOCKED,
    FAILED_DEPENDENCY,
    TOO_EARLY,
    UPGRADE_REQUIRED,
    PRECONDITION_REQUIRED,
    TOO_MANY_REQUESTS,
    REQUEST_HEADER_FIELDS_TOO_LARGE,
    UNAVAILABLE_FOR_LEGAL_REASONS,
    INTERNAL_SERVER_ERROR,
    NOT_IMPLEMENTED,
    BAD_GATEWAY,
    SERVICE_UNAVAILABLE,
    GATEWAY_TIMEOUT,
    HTTP_VERSION_NOT_SUPPORTED,
    VARIANT_ALSO_NEGOTIATES,
    INSUFFICIENT_STORAGE,
    LOOP_DETECTED,
    NOT_EXTENDED,
    NETWORK_AUTHENTICATION_REQUIRED,
)

_BY_CODE: dict[int, HttpStatusCode] = {entry.code: entry for entry in _KNOWN}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def lookup(code: int) -> HttpStatusCode | None:
    """Return the catalogue entry for *code*, or None if it is not known.

    Never raises: any integer is a valid probe.
    """
    entry = _BY_CODE.get(code)
    if entry is None:
        logger.debug("Status code %s is not in the catalogue", code)
    return entry


def status_name(entry: HttpStatusCode) -> str:
    """Return the canonical name of a catalogue entry."""
    return entry.name


def status_class_of(entry: HttpStatusCode) -> StatusClass:
    """Return the standard class containing *entry*'s code.

    Classes are tried in ``STANDARD_CLASSES`` order and the first match
    wins.

    Raises:
        UnclassifiedStatusCodeError: If no standard class contains the code.

    """
    status_class = classify(entry.code)
    if status_class is None:
        msg = f"Status code {entry.code} ({entry.name}) is outside every standard class"
        raise UnclassifiedStatusCodeError(msg)
    return status_class


def known_status_codes() -> tuple[HttpStatusCode, ...]:
    """Return every catalogue entry in ascending code order."""
    return _KNOWN


def _check_catalogue(entries: tuple[HttpStatusCode, ...]) -> None:
    """Fail fast if the table breaks its own invariants.

    Raises:
        CatalogueError: On a duplicate code, an empty name, or an empty
            description.

    """
    seen: set[int] = set()
    for entry in entries:
        if entry.code in seen:
            msg = f"Duplicate status code in catalogue: {entry.code}"
            raise CatalogueError(msg)
        if not entry.name:
            msg = f"Status code {entry.code} has an empty name"
            raise CatalogueError(msg)
        seen.add(entry.code)
        status_class_of(entry)
        if not entry.description:
            msg = f"Status code {entry.code} has no description"
            raise CatalogueError(msg)


_check_catalogue(_KNOWN)
