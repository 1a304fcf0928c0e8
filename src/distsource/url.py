"""Validated, immutable URL values."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Self

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")

# Schemes whose URLs must carry a host
_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

_FORBIDDEN_HOST_CHARS = frozenset(" \t\r\n<>^|\"\\{}")


class UrlParseError(ValueError):
    """Raised when a string is not a valid absolute URL."""


def _split_host(netloc: str) -> tuple[str, str | None]:
    """Split an authority into host and port, dropping any userinfo."""
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        host, bracket, rest = hostport.partition("]")
        if not bracket:
            return hostport, None
        host += bracket
        if not rest:
            return host, None
        if not rest.startswith(":"):
            # anything after an IPv6 literal other than a port is garbage
            return hostport, None
        return host, rest[1:]
    host, sep, port = hostport.partition(":")
    return host, port if sep else None


@dataclass(frozen=True)
class Url:
    """An absolute URL split into its components.

    Instances only come out of `Url.parse` or from copying a parsed URL, so
    turning one back into a string never needs to be checked again.
    ``query`` and ``fragment`` are ``None`` when absent and ``""`` when
    present but empty. ``netloc`` is ``None`` when the URL has no authority.
    """

    scheme: str
    netloc: str | None
    path: str
    query: str | None = None
    fragment: str | None = None

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an absolute URL.

        Raises:
            UrlParseError: If the string has no scheme, or has an invalid
                host or port.
        """
        value = text.strip()
        match = _SCHEME_RE.match(value)
        if match is None:
            raise UrlParseError(f"relative URL without a base: {text!r}")

        scheme = match.group(1).lower()
        rest = value[match.end() :]

        rest, sep, fragment = rest.partition("#")
        fragment_part = fragment if sep else None
        rest, sep, query = rest.partition("?")
        query_part = query if sep else None

        netloc: str | None = None
        path = rest
        if rest.startswith("//"):
            netloc, slash, tail = rest[2:].partition("/")
            path = slash + tail

        _validate_authority(text, scheme, netloc)
        return cls(scheme, netloc, path, query_part, fragment_part)

    @property
    def host(self) -> str | None:
        if self.netloc is None:
            return None
        return _split_host(self.netloc)[0]

    def with_fragment(self, fragment: str | None) -> Self:
        """Return a copy with the fragment replaced (``None`` removes it)."""
        return replace(self, fragment=fragment)

    def with_path(self, path: str) -> Self:
        return replace(self, path=path)

    def __str__(self) -> str:
        parts = [self.scheme, ":"]
        if self.netloc is not None:
            parts += ["//", self.netloc]
        parts.append(self.path)
        if self.query is not None:
            parts += ["?", self.query]
        if self.fragment is not None:
            parts += ["#", self.fragment]
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Url({str(self)!r})"


def _validate_authority(text: str, scheme: str, netloc: str | None) -> None:
    if scheme in _SPECIAL_SCHEMES and not netloc:
        raise UrlParseError(f"empty host: {text!r}")
    if netloc is None:
        return

    host, port = _split_host(netloc)
    if scheme in _SPECIAL_SCHEMES and not host:
        raise UrlParseError(f"empty host: {text!r}")
    if any(char in _FORBIDDEN_HOST_CHARS for char in host):
        raise UrlParseError(f"invalid domain character: {text!r}")
    if host.startswith("[") and not host.endswith("]"):
        raise UrlParseError(f"invalid IPv6 address: {text!r}")

    # An empty port (``host:``) is allowed
    if port:
        if not port.isdigit() or not port.isascii() or int(port) > 65535:
            raise UrlParseError(f"invalid port number: {text!r}")
