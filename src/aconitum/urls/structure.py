# topmark:header:start
#
#   project      : Aconitum
#   file         : structure.py
#   file_relpath : src/aconitum/urls/structure.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Structural URL splitting following the WHATWG URL Standard where it matters here.

`split_url` is stricter than ``urllib.parse.urlsplit``: input without a scheme,
special URLs (``http``, ``https``, ``ftp``, ``ws``, ``wss``) without a host,
invalid ports and forbidden host characters all raise
[`UrlParseError`][aconitum.urls.errors.UrlParseError]. Special URLs get a
lowercased (IDNA encoded) hostname, their default port dropped and an empty
path replaced by ``/``. Parsed parts are mutable so normalization can edit
them and re-serialize through `UrlParts.href`.

A single-letter scheme followed by a slash or backslash is read as a Windows
drive letter and rejected, so ``C:\\Users`` is never mistaken for a URL.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final
from urllib.parse import quote

from aconitum.urls.errors import UrlParseError

SPECIAL_SCHEMES: Final[dict[str, str]] = {
    "ftp": "21",
    "file": "",
    "http": "80",
    "https": "443",
    "ws": "80",
    "wss": "443",
}

_SCHEME_RE: Final[re.Pattern[str]] = re.compile(r"^([A-Za-z][A-Za-z0-9+\-.]*):")
_FORBIDDEN_HOST_RE: Final[re.Pattern[str]] = re.compile(r"[\x00-\x20#%/:<>?@\[\\\]^|]")
_TAB_OR_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"[\t\n\r]")
_C0_OR_SPACE: Final[str] = "".join(chr(c) for c in range(0x21))

# Everything printable except the WHATWG path percent-encode set
_PATH_SAFE: Final[str] = "!#$%&'()*+,-./:;=?@[\\]^_|~"
_QUERY_SAFE: Final[str] = "!$%&'()*+,-./:;=?@[\\]^_`{|}~"
_FRAGMENT_SAFE: Final[str] = "!#$%&'()*+,-./:;=?@[\\]^_{|}~"


@dataclass
class UrlParts:
    """Mutable components of a parsed URL."""

    scheme: str
    username: str = ""
    password: str = ""
    hostname: str = ""
    port: str = ""
    pathname: str = ""
    search: str = ""
    hash: str = ""
    has_authority: bool = False

    @property
    def special(self) -> bool:
        return self.scheme in SPECIAL_SCHEMES

    @property
    def protocol(self) -> str:
        return f"{self.scheme}:"

    @property
    def host(self) -> str:
        return f"{self.hostname}:{self.port}" if self.port else self.hostname

    @property
    def href(self) -> str:
        """Serialize the parts back into a URL string."""
        out = self.protocol
        if self.has_authority:
            out += "//"
            if self.username or self.password:
                out += self.username
                if self.password:
                    out += f":{self.password}"
                out += "@"
            out += self.host
        out += self.pathname
        if self.search:
            out += f"?{self.search}"
        if self.hash:
            out += f"#{self.hash}"
        return out

    def set_port(self, port: str) -> None:
        """Set the port, dropping it when it is the scheme's default."""
        self.port = "" if port == SPECIAL_SCHEMES.get(self.scheme) else port

    def set_pathname(self, pathname: str) -> None:
        """Set the path, percent-encoding it and keeping ``/`` for special URLs."""
        pathname = quote(pathname, safe=_PATH_SAFE)
        if self.special and not pathname.startswith("/"):
            pathname = "/" + pathname
        self.pathname = remove_dot_segments(pathname)


def remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments of an absolute path."""
    if not path.startswith("/"):
        return path
    segments = path[1:].split("/")
    out: list[str] = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        dots = segment.lower().replace("%2e", ".")
        if dots == "..":
            if out:
                out.pop()
            if last:
                out.append("")
        elif dots == ".":
            if last:
                out.append("")
        else:
            out.append(segment)
    return "/" + "/".join(out)


def _split_host_port(hostport: str, url: str) -> tuple[str, str]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise UrlParseError("Invalid URL.", url)
        hostname, rest = hostport[: end + 1], hostport[end + 1 :]
        if rest and not rest.startswith(":"):
            raise UrlParseError("Invalid URL.", url)
        return hostname, rest[1:]
    hostname, _, port = hostport.partition(":")
    return hostname, port


def _encode_hostname(hostname: str, url: str) -> str:
    hostname = hostname.lower()
    if hostname.isascii():
        return hostname
    try:
        return hostname.encode("idna").decode("ascii")
    except UnicodeError as exc:
        raise UrlParseError("Invalid URL.", url) from exc


def split_url(url: str) -> UrlParts:
    """Split an absolute URL into its components.

    Args:
        url (str): The URL to split. Leading/trailing C0 controls and spaces are
            ignored, as are tabs and newlines anywhere in the input.

    Returns:
        UrlParts: The parsed components.

    Raises:
        UrlParseError: If ``url`` is not an absolute URL.
    """
    text = _TAB_OR_NEWLINE_RE.sub("", url.strip(_C0_OR_SPACE))
    m = _SCHEME_RE.match(text)
    if m is None:
        raise UrlParseError("Invalid URL.", url)

    scheme = m.group(1).lower()
    rest = text[m.end() :]
    if len(scheme) == 1 and rest[:1] in ("/", "\\"):
        raise UrlParseError("Invalid URL.", url)

    rest, has_hash, fragment = rest.partition("#")
    rest, has_query, query = rest.partition("?")

    parts = UrlParts(scheme=scheme)
    if parts.special:
        rest = rest.replace("\\", "/")

    if scheme == "file" or (not parts.special and rest.startswith("//")):
        if rest.startswith("//"):
            authority, slash, path = rest[2:].partition("/")
            rest = slash + path
            parts.has_authority = True
        else:
            authority = ""
            parts.has_authority = scheme == "file"
    elif parts.special:
        authority, slash, path = rest.lstrip("/").partition("/")
        rest = slash + path
        parts.has_authority = True
    else:
        authority = ""

    if parts.has_authority:
        userinfo, at, hostport = authority.rpartition("@")
        if not at:
            userinfo, hostport = "", authority
        username, _, password = userinfo.partition(":")
        hostname, port = _split_host_port(hostport, url)

        if port and (not port.isdigit() or int(port) > 65535):
            raise UrlParseError("Invalid URL.", url)
        if not hostname.startswith("[") and _FORBIDDEN_HOST_RE.search(hostname):
            raise UrlParseError("Invalid URL.", url)
        if parts.special and scheme != "file" and not hostname:
            raise UrlParseError("Invalid URL.", url)

        parts.username = username
        parts.password = password
        parts.hostname = _encode_hostname(hostname, url) if parts.special else hostname
        parts.set_port(str(int(port)) if port else "")

    if parts.has_authority or parts.special:
        parts.set_pathname(rest)
    else:
        # Opaque path, e.g. ``mailto:someone@example.com``
        parts.pathname = rest

    if has_query:
        parts.search = quote(query, safe=_QUERY_SAFE)
    if has_hash:
        parts.hash = quote(fragment, safe=_FRAGMENT_SAFE)
    return parts
