"""Errors raised while parsing an HTTP URL."""

from __future__ import annotations

INVALID_URL = "Invalid url."
INVALID_PORT = "Invalid port. It must be between 1 and 65565."
INVALID_PROTOCOL = "Invalid protocol. It must be HTTP or HTTPS."
INVALID_DOCUMENT = (
    "Invalid document. Domain must only contain english letters, digits, '-', '.'."
)
INVALID_DOMAIN = "Invalid domain. Document mustn't contain spaces."


class UrlParsingError(ValueError):
    """A URL, or one of its parts, is malformed."""

    @classmethod
    def invalid_url(cls) -> "UrlParsingError":
        """The URL as a whole does not parse."""
        return cls(INVALID_URL)

    @classmethod
    def invalid_port(cls) -> "UrlParsingError":
        """The port is not a number in the allowed range."""
        return cls(INVALID_PORT)

    @classmethod
    def invalid_protocol(cls) -> "UrlParsingError":
        """The protocol is neither HTTP nor HTTPS."""
        return cls(INVALID_PROTOCOL)

    @classmethod
    def invalid_document(cls) -> "UrlParsingError":
        """The document part is malformed."""
        return cls(INVALID_DOCUMENT)

    @classmethod
    def invalid_domain(cls) -> "UrlParsingError":
        """The domain part is malformed."""
        return cls(INVALID_DOMAIN)