# topmark:header:start
#
#   project      : Aconitum
#   file         : normalize_url.py
#   file_relpath : src/aconitum/urls/normalize_url.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Normalize URLs so equivalent spellings compare equal.

The normalization is opinionated and tuned for human-entered URLs: a missing
protocol is added, ``www.`` and default ports are dropped, tracking query
parameters are removed and the remaining ones sorted.

Examples:
    >>> normalize_url("sindresorhus.com")
    'http://sindresorhus.com'
    >>> normalize_url("//www.sindresorhus.com:80/../baz?b=bar&a=foo")
    'http://sindresorhus.com/baz?a=foo&b=bar'
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Final
from urllib.parse import parse_qsl, quote, unquote, urlencode

from aconitum.config.logging import get_logger
from aconitum.urls.errors import UrlOptionsError, UrlParseError
from aconitum.urls.structure import split_url

if TYPE_CHECKING:
    from aconitum.config.logging import AconitumLogger

logger: AconitumLogger = get_logger(__name__)

DATA_URL_DEFAULT_MIME_TYPE: Final[str] = "text/plain"
DATA_URL_DEFAULT_CHARSET: Final[str] = "us-ascii"

SUPPORTED_PROTOCOLS: Final[frozenset[str]] = frozenset({"http", "https", "file"})

ParameterFilter = str | re.Pattern[str]

_DATA_URL_RE: Final[re.Pattern[str]] = re.compile(
    r"^data:(?P<type>[^,]*?),(?P<data>[^#]*?)(?:#(?P<hash>.*))?$", re.DOTALL
)
_CUSTOM_PROTOCOL_RE: Final[re.Pattern[str]] = re.compile(r"^([a-zA-Z][a-zA-Z\d+\-]*)://")
_HAS_PROTOCOL_RE: Final[re.Pattern[str]] = re.compile(r"^(?:\w+:)?//")
_RELATIVE_URL_RE: Final[re.Pattern[str]] = re.compile(r"^\.*/")
_EMBEDDED_PROTOCOL_RE: Final[re.Pattern[str]] = re.compile(r"\b[a-z\d+\-.]{1,50}://")
_DUPLICATE_SLASHES_RE: Final[re.Pattern[str]] = re.compile(r"/{2,}")
_TEXT_FRAGMENT_RE: Final[re.Pattern[str]] = re.compile(r"#?:~:text.*?$", re.IGNORECASE)
_WWW_RE: Final[re.Pattern[str]] = re.compile(r"^www\.(?!www\.)[a-z\-\d]{1,63}\.[a-z.\-\d]{2,63}$")
_DIRECTORY_INDEX_RE: Final[re.Pattern[str]] = re.compile(r"^index\.[a-z]+$")
_PERCENT_OCTET_RE: Final[re.Pattern[str]] = re.compile(r"%([0-7][0-9A-Fa-f])")

# Octets kept encoded in paths, they carry meaning once decoded
_RESERVED: Final[str] = ";/?:@&=+$,#%"


def _default_removed_parameters() -> list[ParameterFilter]:
    return [re.compile(r"^utm_\w+", re.IGNORECASE)]


@dataclass(frozen=True)
class NormalizeOptions:
    """Options for [`normalize_url`][aconitum.urls.normalize_url.normalize_url].

    Attributes:
        default_protocol (str): Protocol prepended to URLs without one.
        normalize_protocol (bool): Turn protocol-relative URLs into absolute ones.
        force_http (bool): Rewrite ``https:`` to ``http:``.
        force_https (bool): Rewrite ``http:`` to ``https:``.
        strip_authentication (bool): Drop ``user:password@``.
        strip_hash (bool): Drop the fragment.
        strip_text_fragment (bool): Drop ``#:~:text=`` text fragments.
        strip_www (bool): Drop a leading ``www.`` label.
        remove_query_parameters (Sequence[ParameterFilter] | bool): Names or
            patterns of parameters to drop, or True to drop all of them.
        keep_query_parameters (Sequence[ParameterFilter] | None): Names or
            patterns of the only parameters to keep. Wins over removal.
        remove_trailing_slash (bool): Drop a trailing ``/`` from the path.
        remove_single_slash (bool): Drop a lone ``/`` path.
        remove_directory_index (Sequence[ParameterFilter] | bool): File names to
            drop from the end of the path, or True for ``index.*``.
        remove_explicit_port (bool): Drop any explicit port.
        sort_query_parameters (bool): Sort parameters by name.
        strip_protocol (bool): Drop ``http:``/``https:`` from the result.
    """

    default_protocol: str = "http"
    normalize_protocol: bool = True
    force_http: bool = False
    force_https: bool = False
    strip_authentication: bool = True
    strip_hash: bool = False
    strip_text_fragment: bool = True
    strip_www: bool = True
    remove_query_parameters: Sequence[ParameterFilter] | bool = field(
        default_factory=_default_removed_parameters
    )
    keep_query_parameters: Sequence[ParameterFilter] | None = None
    remove_trailing_slash: bool = True
    remove_single_slash: bool = True
    remove_directory_index: Sequence[ParameterFilter] | bool = False
    remove_explicit_port: bool = False
    sort_query_parameters: bool = True
    strip_protocol: bool = False

    @classmethod
    def check_names(cls, names: Iterable[str]) -> None:
        """Raise when ``names`` holds something that is not an option.

        Raises:
            UrlOptionsError: If an unknown name is found.
        """
        unknown = sorted(set(names) - {f.name for f in fields(cls)})
        if unknown:
            raise UrlOptionsError(f"Unknown normalize option(s): {', '.join(unknown)}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> NormalizeOptions:
        """Build options from a mapping of field names."""
        cls.check_names(mapping)
        return cls(**mapping)  # type: ignore[arg-type]


def _test_parameter(name: str, filters: Sequence[ParameterFilter] | None) -> bool:
    if not filters:
        return False
    return any(
        f.search(name) is not None if isinstance(f, re.Pattern) else f == name for f in filters
    )


def _has_custom_protocol(url: str) -> bool:
    m = _CUSTOM_PROTOCOL_RE.match(url)
    return m is not None and m.group(1).lower() not in SUPPORTED_PROTOCOLS


def _normalize_data_url(url: str, strip_hash: bool) -> str:
    m = _DATA_URL_RE.match(url)
    if m is None:
        raise UrlParseError(f"Invalid URL: {url}", url)

    media_type = m.group("type").split(";")
    data = m.group("data")
    hash_ = "" if strip_hash else (m.group("hash") or "")

    is_base64 = media_type[-1] == "base64"
    if is_base64:
        media_type.pop()

    mime_type = media_type.pop(0).lower() if media_type else ""
    attributes: list[str] = []
    for attribute in media_type:
        key, _, value = attribute.partition("=")
        key, value = key.strip(), value.strip()
        if key == "charset":
            value = value.lower()
            if value == DATA_URL_DEFAULT_CHARSET:
                continue
        attributes.append(f"{key}={value}" if value else key)
    attributes = [a for a in attributes if a]

    normalized = list(attributes)
    if is_base64:
        normalized.append("base64")
    if normalized or (mime_type and mime_type != DATA_URL_DEFAULT_MIME_TYPE):
        normalized.insert(0, mime_type)

    out = f"data:{';'.join(normalized)},{data.strip() if is_base64 else data}"
    return f"{out}#{hash_}" if hash_ else out


def _collapse_slashes(pathname: str) -> str:
    result = ""
    last = 0
    for m in _EMBEDDED_PROTOCOL_RE.finditer(pathname):
        result += _DUPLICATE_SLASHES_RE.sub("/", pathname[last : m.start()]) + m.group(0)
        last = m.end()
    return result + _DUPLICATE_SLASHES_RE.sub("/", pathname[last:])


def _decode_path_octets(pathname: str) -> str:
    def _decode(m: re.Match[str]) -> str:
        ch = chr(int(m.group(1), 16))
        return m.group(0) if ch in _RESERVED or not ch.isprintable() else ch

    return _PERCENT_OCTET_RE.sub(_decode, pathname)


def _normalize_query(search: str, opts: NormalizeOptions) -> str:
    pairs = parse_qsl(search, keep_blank_values=True)
    modified = False

    remove = opts.remove_query_parameters
    if not isinstance(remove, bool):
        kept = [(k, v) for k, v in pairs if not _test_parameter(k, remove)]
        modified = len(kept) != len(pairs)
        pairs = kept

    if remove is True and opts.keep_query_parameters is None:
        return ""

    if opts.keep_query_parameters:
        kept = [(k, v) for k, v in pairs if _test_parameter(k, opts.keep_query_parameters)]
        modified = modified or len(kept) != len(pairs)
        pairs = kept

    if opts.sort_query_parameters:
        serialized = urlencode(sorted(pairs, key=lambda kv: kv[0]))
        try:
            serialized = unquote(serialized, errors="strict")
        except UnicodeDecodeError:
            logger.debug("keeping query percent-encoded, not valid UTF-8: %r", serialized)
        return quote(serialized, safe="!$%&'()*+,-./:;=?@[\\]^_`{|}~")
    if modified:
        return urlencode(pairs)
    return search


def normalize_url(
    url: str,
    options: NormalizeOptions | Mapping[str, object] | None = None,
    **kwargs: object,
) -> str:
    """Normalize ``url``.

    Args:
        url (str): The URL to normalize. Surrounding whitespace is ignored.
        options (NormalizeOptions | Mapping[str, object] | None): Options, as an
            instance or a mapping of field names.
        **kwargs (object): Individual options, applied over ``options``.

    Returns:
        str: The normalized URL.

    Raises:
        UrlOptionsError: If ``force_http`` and ``force_https`` are both set, or an
            option name is unknown.
        UrlParseError: If ``url`` cannot be parsed, including relative URLs.
    """
    if options is None:
        opts = NormalizeOptions()
    elif isinstance(options, NormalizeOptions):
        opts = options
    else:
        opts = NormalizeOptions.from_mapping(options)
    if kwargs:
        NormalizeOptions.check_names(kwargs)
        opts = replace(opts, **kwargs)  # type: ignore[arg-type]

    if opts.force_http and opts.force_https:
        raise UrlOptionsError(
            "The `force_http` and `force_https` options can not be used together."
        )

    original = url
    url = url.strip()

    if url[:5].lower() == "data:":
        return _normalize_data_url(url, opts.strip_hash)
    if _has_custom_protocol(url):
        logger.trace("custom protocol, leaving untouched: %s", url)
        return url

    has_relative_protocol = url.startswith("//")
    if not has_relative_protocol and _RELATIVE_URL_RE.match(url):
        raise UrlParseError("Invalid URL.", original)

    default_protocol = opts.default_protocol.rstrip(":")
    if has_relative_protocol:
        url = f"{default_protocol}:{url}"
    elif not _HAS_PROTOCOL_RE.match(url):
        url = f"{default_protocol}://{url}"

    parts = split_url(url)

    if opts.force_http and parts.scheme == "https":
        parts.scheme = "http"
        parts.set_port(parts.port)
    if opts.force_https and parts.scheme == "http":
        parts.scheme = "https"
        parts.set_port(parts.port)

    if opts.strip_authentication:
        parts.username = ""
        parts.password = ""

    if opts.strip_hash:
        parts.hash = ""
    elif opts.strip_text_fragment and parts.hash:
        parts.hash = _TEXT_FRAGMENT_RE.sub("", f"#{parts.hash}").removeprefix("#")

    if parts.pathname:
        parts.set_pathname(_decode_path_octets(_collapse_slashes(parts.pathname)))

    directory_index = opts.remove_directory_index
    if directory_index is True:
        directory_index = [_DIRECTORY_INDEX_RE]
    if not isinstance(directory_index, bool) and directory_index:
        components = parts.pathname.split("/")
        if _test_parameter(components[-1], directory_index):
            parts.set_pathname("/".join(components[1:-1]) + "/")

    if parts.hostname:
        parts.hostname = parts.hostname.removesuffix(".")
        if opts.strip_www and _WWW_RE.match(parts.hostname):
            parts.hostname = parts.hostname.removeprefix("www.")

    parts.search = _normalize_query(parts.search, opts)

    if opts.remove_trailing_slash:
        parts.set_pathname(parts.pathname.removesuffix("/"))

    if opts.remove_explicit_port:
        parts.port = ""

    result = parts.href

    if (
        not opts.remove_single_slash
        and parts.pathname == "/"
        and not original.endswith("/")
        and not parts.hash
    ):
        result = result.removesuffix("/")

    if (
        (opts.remove_trailing_slash or parts.pathname == "/")
        and not parts.hash
        and opts.remove_single_slash
    ):
        result = result.removesuffix("/")

    if has_relative_protocol and not opts.normalize_protocol:
        result = re.sub(r"^http://", "//", result)

    if opts.strip_protocol:
        result = re.sub(r"^(?:https?:)?//", "", result)

    logger.trace("normalized %r to %r", original, result)
    return result
