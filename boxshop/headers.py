"""CGI response headers."""

from __future__ import annotations

from enum import Enum

CONTENT_TYPE = "Content-Type"
LOCATION = "Location"
SET_COOKIE = "Set-Cookie"
COOKIE = "Cookie"
HEADER_END = "\r\n"


class Status(Enum):
    """Response statuses a page can send."""

    OK = "200 OK"
    CREATED = "201 Created"
    ACCEPTED = "202 Accepted"
    FOUND = "302 Found"
    PERMANENT_REDIRECT = "308 Permanent Redirect"


class ContentValue(Enum):
    """Values that may go into the Content-Type header."""

    TEXT_HTML = "text/html"
    TEXT_PLAIN = "text/plain"
    CHARSET_UTF_8 = "charset=utf-8"


class Headers:
    """An ordered set of response headers, always led by a status line."""

    def __init__(self) -> None:
        self.status = Status.OK
        self._lines: list[str] = []

    def set_status(self, status: Status) -> None:
        """Replace the response status."""
        self.status = Status(status)

    def add_content_type(self, *args: ContentValue) -> None:
        """Add a Content-Type header made of the given values."""
        values = "; ".join(ContentValue(arg).value for arg in args)
        self._lines.append(f"{CONTENT_TYPE}: {values}")

    def add_location(self, url: str | None) -> None:
        """Add a Location header; a missing url adds nothing."""
        if url is not None:
            self._lines.append(f"{LOCATION}: {url}")

    def add_cookie(self, cookie: object | None) -> None:
        """Add a session cookie lasting one hour; a missing value adds nothing."""
        if cookie is not None:
            self._lines.append(f"{SET_COOKIE}: ID={cookie}; Max-Age=3600; HttpOnly")

    def render(self) -> str:
        """Return the header block, ending with the blank line."""
        lines = [f"Status:{self.status.value}", *self._lines]
        return "".join(line + HEADER_END for line in lines) + HEADER_END