"""HTTP status codes: a typed catalogue of codes, names, and classes.

Re-exports public symbols so callers can write::

    from http_status_codes import NOT_FOUND, lookup

    entry = lookup(404)
    if entry is not None:
        print(entry.name, entry.status_class.name)
"""

from http_status_codes.errors import CatalogueError, UnclassifiedStatusCodeError
from http_status_codes.protocol import StatusCodeLike
from http_status_codes.status_class import (
    CLIENT_ERROR_RESPONSES,
    INFORMATIONAL_RESPONSES,
    REDIRECTION_MESSAGES,
    SERVER_ERROR_RESPONSES,
    STANDARD_CLASSES,
    SUCCESSFUL_RESPONSES,
    StatusClass,
    classify,
)
from http_status_codes.status_code import (
    ACCEPTED,
    ALREADY_REPORTED,
    BAD_GATEWAY,
    BAD_REQUEST,
    CONFLICT,
    CONTENT_TOO_LARGE,
    CONTINUE,
    CREATED,
    EARLY_HITS,
    EXPECTATION_FAILED,
    FAILED_DEPENDENCY,
    FORBIDDEN,
    FOUND,
    GATEWAY_TIMEOUT,
    GONE,
    HTTP_VERSION_NOT_SUPPORTED,
    IM_A_TEAPOT,
    IM_USED,
    INSUFFICIENT_STORAGE,
    INTERNAL_SERVER_ERROR,
    LENGTH_REQUIRED,
    LOCKED,
    LOOP_DETECTED,
    METHOD_NOT_ALLOWED,
    MISDIRECTED_REQUEST,
    MOVED_PERMANENTLY,
    MULTIPLE_CHOICES,
    MULTI_STATUS,
    NETWORK_AUTHENTICATION_REQUIRED,
    NON_AUTHORITATIVE_INFORMATION,
    NOT_ACCEPTABLE,
    NOT_EXTENDED,
    NOT_FOUND,
    NOT_IMPLEMENTED,
    NOT_MODIFIED,
    NO_CONTENT,
    OK,
    PARTIAL_CONTENT,
    PAYMENT_REQUIRED,
    PERMANENT_REDIRECT,
    PRECONDITION_FAILED,
    PRECONDITION_REQUIRED,
    PROCESSING,
    PROXY_AUTHENTICATION_REQUIRED,
    RANGE_NOT_SATISFIABLE,
    REQUEST_HEADER_FIELDS_TOO_LARGE,
    REQUEST_TIMEOUT,
    RESET_CONTENT,
    SEE_OTHER,
    SERVICE_UNAVAILABLE,
    SWITCHING_PROTOCOLS,
    TEMPORARY_REDIRECT,
    TOO_EARLY,
    TOO_MANY_REQUESTS,
    UNAUTHORIZED,
    UNAVAILABLE_FOR_LEGAL_REASONS,
    UNPROCESSABLE_CONTENT,
    UNSUPPORTED_MEDIA_TYPE,
    UNUSED,
    UPGRADE_REQUIRED,
    URI_TOO_LONG,
    USE_PROXY,
    VARIANT_ALSO_NEGOTIATES,
    HttpStatusCode,
    known_status_codes,
    lookup,
    status_class_of,
    status_name,
)

__all__ = [
    "ACCEPTED",
    "ALREADY_REPORTED",
    "BAD_GATEWAY",
    "BAD_REQUEST",
    "CLIENT_ERROR_RESPONSES",
    "CONFLICT",
    "CONTENT_TOO_LARGE",
    "CONTINUE",
    "CREATED",
    "EARLY_HITS",
    "EXPECTATION_FAILED",
    "FAILED_DEPENDENCY",
    "FORBIDDEN",
    "FOUND",
    "GATEWAY_TIMEOUT",
    "GONE",
    "HTTP_VERSION_NOT_SUPPORTED",
    "IM_A_TEAPOT",
    "IM_USED",
    "INFORMATIONAL_RESPONSES",
    "INSUFFICIENT_STORAGE",
    "INTERNAL_SERVER_ERROR",
    "LENGTH_REQUIRED",
    "LOCKED",
    "LOOP_DETECTED",
    "METHOD_NOT_ALLOWED",
    "MISDIRECTED_REQUEST",
    "MOVED_PERMANENTLY",
    "MULTIPLE_CHOICES",
    "MULTI_STATUS",
    "NETWORK_AUTHENTICATION_REQUIRED",
    "NON_AUTHORITATIVE_INFORMATION",
    "NOT_ACCEPTABLE",
    "NOT_EXTENDED",
    "NOT_FOUND",
    "NOT_IMPLEMENTED",
    "NOT_MODIFIED",
    "NO_CONTENT",
    "OK",
    "PARTIAL_CONTENT",
    "PAYMENT_REQUIRED",
    "PERMANENT_REDIRECT",
    "PRECONDITION_FAILED",
    "PRECONDITION_REQUIRED",
    "PROCESSING",
    "PROXY_AUTHENTICATION_REQUIRED",
    "RANGE_NOT_SATISFIABLE",
    "REDIRECTION_MESSAGES",
    "REQUEST_HEADER_FIELDS_TOO_LARGE",
    "REQUEST_TIMEOUT",
    "RESET_CONTENT",
    "SEE_OTHER",
    "SERVER_ERROR_RESPONSES",
    "SERVICE_UNAVAILABLE",
    "STANDARD_CLASSES",
    "SUCCESSFUL_RESPONSES",
    "SWITCHING_PROTOCOLS",
    "TEMPORARY_REDIRECT",
    "TOO_EARLY",
    "TOO_MANY_REQUESTS",
    "UNAUTHORIZED",
    "UNAVAILABLE_FOR_LEGAL_REASONS",
    "UNPROCESSABLE_CONTENT",
    "UNSUPPORTED_MEDIA_TYPE",
    "UNUSED",
    "UPGRADE_REQUIRED",
    "URI_TOO_LONG",
    "USE_PROXY",
    "VARIANT_ALSO_NEGOTIATES",
    "CatalogueError",
    "HttpStatusCode",
    "StatusClass",
    "StatusCodeLike",
    "UnclassifiedStatusCodeError",
    "classify",
    "known_status_codes",
    "lookup",
    "status_class_of",
    "status_name",
]
