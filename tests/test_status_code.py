"""Tests for the built-in status code catalogue.

The catalogue is a phone book: look up a number, get a name and the
department (class) it belongs to.  Unlisted numbers come back empty
rather than ringing somebody at random.
"""

import dataclasses
import logging

import pytest

from http_status_codes import status_code
from http_status_codes.errors import CatalogueError, UnclassifiedStatusCodeError
from http_status_codes.status_class import (
    CLIENT_ERROR_RESPONSES,
    INFORMATIONAL_RESPONSES,
    REDIRECTION_MESSAGES,
    SERVER_ERROR_RESPONSES,
    STANDARD_CLASSES,
    SUCCESSFUL_RESPONSES,
)
from http_status_codes.status_code import (
    EARLY_HITS,
    IM_A_TEAPOT,
    NETWORK_AUTHENTICATION_REQUIRED,
    NOT_FOUND,
    OK,
    UNUSED,
    HttpStatusCode,
    known_status_codes,
    lookup,
    status_class_of,
    status_name,
)

# Magic-number constants for test assertions (PLR2004)
STATUS_OK = 200
STATUS_NOT_FOUND = 404
STATUS_TEAPOT = 418
STATUS_UNUSED = 306
CATALOGUE_SIZE = 63

_DEPRECATED = {102, 305, 306}
_EXPERIMENTAL = {425}
_WEBDAV = {207, 208, 422, 423, 424, 507, 508}

# The literal table: every code that must be present, with its name.
_CATALOGUE: dict[int, str] = {
    100: "Continue",
    101: "Switching Protocols",
    102: "Processing",
    104: "Early Hits",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    207: "Multi-Status",
    208: "Already Reported",
    226: "IM Used",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    306: "Unused",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Content Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a Teapot",
    421: "Misdirected Request",
    422: "Unprocessable Content",
    423: "Locked",
    424: "Failed Dependency",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    510: "Not Extended",
    511: "Network Authentication Required",
}


class TestHttpStatusCode:
    """Verify the entry value type."""

    def test_fields(self) -> None:
        """An entry stores its code and name."""
        assert OK.code == STATUS_OK
        assert OK.name == "OK"

    def test_is_frozen(self) -> None:
        """Entries are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            NOT_FOUND.name = "Missing"  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        """An equal code and name compare equal to the constant."""
        assert HttpStatusCode(404, "Not Found") == NOT_FOUND
        assert hash(HttpStatusCode(404, "Not Found")) == hash(NOT_FOUND)

    def test_str(self) -> None:
        """String form matches an HTTP status line's code and reason."""
        assert str(NOT_FOUND) == "404 Not Found"

    def test_from_code(self) -> None:
        """from_code() is lookup() as a constructor."""
        assert HttpStatusCode.from_code(STATUS_TEAPOT) is IM_A_TEAPOT
        assert HttpStatusCode.from_code(999) is None


class TestCatalogue:
    """Verify the fixed table of known codes."""

    def test_exact_contents(self) -> None:
        """The catalogue holds exactly the literal table, in order."""
        assert {e.code: e.name for e in known_status_codes()} == _CATALOGUE
        assert len(known_status_codes()) == CATALOGUE_SIZE

    def test_ascending_order(self) -> None:
        """Entries are declared in ascending code order."""
        codes = [e.code for e in known_status_codes()]
        assert codes == sorted(codes)

    def test_codes_are_unique(self) -> None:
        """No code appears twice."""
        codes = [e.code for e in known_status_codes()]
        assert len(codes) == len(set(codes))

    def test_names_are_non_empty(self) -> None:
        """Every entry has a name."""
        assert all(status_name(e) for e in known_status_codes())

    def test_restartable(self) -> None:
        """Enumerating twice yields the same sequence."""
        assert list(known_status_codes()) == list(known_status_codes())

    def test_constants_are_catalogue_members(self) -> None:
        """Module constants are the same objects lookup() returns."""
        for entry in (EARLY_HITS, OK, UNUSED, NOT_FOUND, IM_A_TEAPOT):
            assert lookup(entry.code) is entry

    @pytest.mark.parametrize("entry", known_status_codes(), ids=str)
    def test_round_trip(self, entry: HttpStatusCode) -> None:
        """constant -> code -> lookup gives the same name and class."""
        found = lookup(entry.code)
        assert found is not None
        assert found.name == entry.name
        assert found.status_class == entry.status_class

    @pytest.mark.parametrize("entry", known_status_codes(), ids=str)
    def test_exactly_one_class(self, entry: HttpStatusCode) -> None:
        """Each built-in code sits in exactly one standard class."""
        matches = [sc for sc in STANDARD_CLASSES if sc.contains(entry.code)]
        assert matches == [entry.status_class]


class TestLookup:
    """Verify lookup by integer code."""

    def test_ok(self) -> None:
        """200 is OK, a successful response."""
        entry = lookup(STATUS_OK)
        assert entry is not None
        assert entry.name == "OK"
        assert entry.status_class == SUCCESSFUL_RESPONSES
        assert entry.status_class.range == (200, 299)

    def test_not_found(self) -> None:
        """404 is Not Found, a client error."""
        entry = lookup(STATUS_NOT_FOUND)
        assert entry is not None
        assert entry.name == "Not Found"
        assert entry.status_class.name == "Client Error Responses"

    def test_teapot(self) -> None:
        """418 is the teapot."""
        entry = lookup(STATUS_TEAPOT)
        assert entry is not None
        assert entry.name == "I'm a Teapot"
        assert entry.status_class == CLIENT_ERROR_RESPONSES

    def test_unused_placeholder(self) -> None:
        """306 is kept as a historical placeholder in the 3xx class."""
        entry = lookup(STATUS_UNUSED)
        assert entry is UNUSED
        assert entry.name == "Unused"
        assert entry.status_class.name == "Redirection Messages"

    @pytest.mark.parametrize("code", [103, 209, 309, 419, 427, 509, 999, 0, -404, 600])
    def test_unknown_codes(self, code: int) -> None:
        """Codes missing from the table come back as None."""
        assert lookup(code) is None

    def test_miss_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """A miss leaves a DEBUG record; a hit leaves nothing."""
        with caplog.at_level(logging.DEBUG, logger="http_status_codes.status_code"):
            lookup(STATUS_OK)
            assert caplog.records == []
            lookup(999)
        assert [r.levelno for r in caplog.records] == [logging.DEBUG]
        assert "999" in caplog.records[0].getMessage()


class TestStatusClassOf:
    """Verify class derivation and the contract violation."""

    @pytest.mark.parametrize(
        ("entry", "expected"),
        [
            (EARLY_HITS, INFORMATIONAL_RESPONSES),
            (OK, SUCCESSFUL_RESPONSES),
            (UNUSED, REDIRECTION_MESSAGES),
            (IM_A_TEAPOT, CLIENT_ERROR_RESPONSES),
            (NETWORK_AUTHENTICATION_REQUIRED, SERVER_ERROR_RESPONSES),
        ],
        ids=str,
    )
    def test_function_and_property_agree(
        self,
        entry: HttpStatusCode,
        expected: object,
    ) -> None:
        """status_class_of() and .status_class return the same class."""
        assert status_class_of(entry) == expected
        assert entry.status_class == expected

    def test_unclassifiable_code_raises(self) -> None:
        """A code outside every class is a broken invariant, not a value."""
        stray = HttpStatusCode(700, "Stray")
        with pytest.raises(UnclassifiedStatusCodeError, match="700"):
            status_class_of(stray)
        with pytest.raises(AssertionError):
            _ = stray.status_class


class TestCatalogueCheck:
    """Verify the import-time self check on the table."""

    def test_builtin_table_passes(self) -> None:
        """The shipped catalogue satisfies its own invariants."""
        status_code._check_catalogue(known_status_codes())

    def test_duplicate_code(self) -> None:
        """Two entries with one code are rejected."""
        table = (OK, HttpStatusCode(200, "Also OK"))
        with pytest.raises(CatalogueError, match="Duplicate"):
            status_code._check_catalogue(table)

    def test_empty_name(self) -> None:
        """An entry without a name is rejected."""
        with pytest.raises(CatalogueError, match="empty name"):
            status_code._check_catalogue((HttpStatusCode(299, ""),))

    def test_unclassifiable_entry(self) -> None:
        """An entry no standard class covers is rejected."""
        with pytest.raises(UnclassifiedStatusCodeError):
            status_code._check_catalogue((HttpStatusCode(600, "Beyond"),))

    def test_missing_description(self) -> None:
        """A catalogue entry without a description is rejected."""
        with pytest.raises(CatalogueError, match="no description"):
            status_code._check_catalogue((HttpStatusCode(299, "Custom"),))


class TestDescriptions:
    """Verify every catalogue entry documents what it means."""

    @pytest.mark.parametrize("entry", known_status_codes(), ids=str)
    def test_every_entry_is_described(self, entry: HttpStatusCode) -> None:
        """Each built-in code carries a non-empty description."""
        assert entry.description.strip()

    def test_deprecated_codes_are_flagged(self) -> None:
        """102, 305 and 306 are marked DEPRECATED."""
        flagged = {e.code for e in known_status_codes() if e.description.startswith("DEPRECATED:")}
        assert flagged == _DEPRECATED

    def test_experimental_codes_are_flagged(self) -> None:
        """425 Too Early is marked EXPERIMENTAL."""
        flagged = {
            e.code for e in known_status_codes() if e.description.startswith("EXPERIMENTAL:")
        }
        assert flagged == _EXPERIMENTAL

    def test_webdav_codes_are_flagged(self) -> None:
        """WebDAV-only codes carry the (WebDAV) marker."""
        flagged = {e.code for e in known_status_codes() if "(WebDAV)" in e.description}
        assert flagged == _WEBDAV

    def test_description_is_not_part_of_identity(self) -> None:
        """Equality, hashing and repr ignore the description."""
        bare = HttpStatusCode(404, "Not Found")
        assert bare == NOT_FOUND
        assert hash(bare) == hash(NOT_FOUND)
        assert repr(NOT_FOUND) == "HttpStatusCode(code=404, name='Not Found')"

    def test_lookup_exposes_description(self) -> None:
        """lookup() returns the described entry."""
        entry = lookup(STATUS_TEAPOT)
        assert entry is not None
        assert "teapot" in entry.description
