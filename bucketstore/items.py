"""Ready-made item types for buckets."""

from typing import Any, NamedTuple, Optional
from urllib.parse import _UNSAFE_URL_BYTES_TO_REMOVE, quote, unquote

import httpx

from .errors import HashComputationError
from .hashing import content_hash


class Record:
    """Item identified by its key only; data is free to change."""

    def __init__(self, key: Any, data: Any = None) -> None:
        """Initialize the record."""
        self.key = key
        self.data = data

    def __eq__(self, other: object) -> bool:
        """Records are equal if their keys are."""
        if not isinstance(other, Record):
            return NotImplemented
        return self.key == other.key

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a short description of the record."""
        return f"Record({self.key!r})"

    def hash(self) -> str:
        """Return the content hash of the key."""
        return content_hash(self.key)


class InvalidURLError(Exception):
    """Raised when an invalid URL is encountered."""

    @classmethod
    def _check_str_not_empty(cls, url: httpx.URL, field: str) -> None:
        if (value := getattr(url, field)) == "":
            raise cls(field, value, "not empty")

    @classmethod
    def _check_in(cls, url: httpx.URL, field: str, expected: set[Any]) -> None:
        if (value := getattr(url, field)) not in expected:
            raise cls(field, value, f"in {expected!r}")

    @classmethod
    def check(cls, url: httpx.URL):
        """Check that the httpx URL can identify a page."""
        cls._check_in(url, "scheme", {"http", "https"})
        cls._check_str_not_empty(url, "host")
        cls._check_in(url, "port", {None, 80, 443})

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize the exception."""
        super().__init__(f"Invalid {field}: {value!r} expected {expected}")


class URL(NamedTuple):
    """Normalized URL of a page."""

    host: str
    path: str
    query: Optional[str]

    @classmethod
    def from_string(cls, url: str) -> "URL":
        """
        Create a normalized URL from a string.

        - Drop scheme, userinfo, port and fragment
        - Normalize percent-encoding of the path
        - Remove trailing slashes
        - Sort query parameters
        """
        for b in _UNSAFE_URL_BYTES_TO_REMOVE:
            url = url.replace(b, "")

        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise InvalidURLError("url", url, str(e)) from e
        InvalidURLError.check(parsed)

        query = parsed.query.decode()
        return cls(
            parsed.host,
            quote(unquote(parsed.path)).rstrip("/") or "/",
            "&".join(sorted(query.split("&"))) if query else None,
        )

    @property
    def target(self) -> str:
        """Target of the URL."""
        if self.query is None:
            return self.path
        return f"{self.path}?{self.query}"

    def __str__(self) -> str:
        """Convert the URL back to a string."""
        return f"https://{self.host}{self.target}"


def _identify(url: str) -> str:
    try:
        return str(URL.from_string(url))
    except InvalidURLError as e:
        raise HashComputationError(f"Cannot identify {url!r}: {e}") from e


class Page:
    """A page of a link graph, identified by its normalized URL."""

    def __init__(self, url: str, title: Optional[str] = None) -> None:
        """Initialize the page."""
        self.url = url
        self.title = title

    def __eq__(self, other: object) -> bool:
        """Pages are equal if their URLs normalize to the same one."""
        if not isinstance(other, Page):
            return NotImplemented
        try:
            return self.hash() == other.hash()
        except HashComputationError:
            return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a short description of the page."""
        return f"Page({self.url!r})"

    def hash(self) -> str:
        """Return the normalized URL."""
        return _identify(self.url)


class Link:
    """A link from one page to another."""

    def __init__(self, source: str, target: str) -> None:
        """Initialize the link."""
        self.source = source
        self.target = target

    def __eq__(self, other: object) -> bool:
        """Links are equal if both ends normalize to the same URLs."""
        if not isinstance(other, Link):
            return NotImplemented
        try:
            return self.hash() == other.hash()
        except HashComputationError:
            return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return a short description of the link."""
        return f"Link({self.source!r}, {self.target!r})"

    def hash(self) -> str:
        """Return the content hash of both normalized URLs."""
        return content_hash(_identify(self.source), _identify(self.target))
