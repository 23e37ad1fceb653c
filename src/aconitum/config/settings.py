# topmark:header:start
#
#   project      : Aconitum
#   file         : settings.py
#   file_relpath : src/aconitum/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Load user settings from TOML.

Runtime defaults are defined in code (`load_defaults_dict`, no I/O). Overrides
come from the nearest ``aconitum.toml`` or ``pyproject.toml`` with a
``[tool.aconitum]`` table, searching from the working directory upwards. When a
directory holds both, ``aconitum.toml`` wins.

Parsing is done with ``tomlkit``. Unreadable or invalid files are logged and
ignored, so a broken configuration never prevents the helpers from running.
Values of the wrong type are reported and replaced by their default.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from aconitum.config.keys import Toml
from aconitum.config.logging import get_logger
from aconitum.constants import (
    ACONITUM_TOML_NAME,
    MAX_URL_INPUT_LENGTH,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from aconitum.paths.traverse import traverse_path_up

if TYPE_CHECKING:
    from aconitum.config.logging import AconitumLogger

logger: AconitumLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_T = TypeVar("_T")


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-compatible dict.

    This function performs **no I/O**. The returned value is a new dict so
    callers can mutate it safely.
    """
    return {
        Toml.SECTION_WIDTH: {
            Toml.KEY_AMBIGUOUS_IS_NARROW: True,
            Toml.KEY_COUNT_ANSI_ESCAPE_CODES: False,
        },
        Toml.SECTION_WRAP: {
            Toml.KEY_WIDTH: 80,
            Toml.KEY_INDENT: "",
            Toml.KEY_TRIM: False,
            Toml.KEY_HARD_WRAP: False,
        },
        Toml.SECTION_URLS: {
            Toml.KEY_MAX_INPUT_LENGTH: MAX_URL_INPUT_LENGTH,
            Toml.KEY_DEFAULT_PROTOCOL: "http",
        },
        Toml.SECTION_TIME: {
            Toml.KEY_SECONDS_DECIMAL_DIGITS: 1,
            Toml.KEY_MILLISECONDS_DECIMAL_DIGITS: 0,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content, or an empty dict if the file cannot be
            read or parsed (the error is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data_any: Any = tomlkit.parse(text).unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _tool_table(pyproject: TomlTable) -> TomlTable | None:
    tool: Any = pyproject.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config(start: Path | None = None) -> tuple[Path | None, TomlTable]:
    """Find the nearest configuration file.

    Args:
        start (Path | None): Directory to start from, the working directory by default.

    Returns:
        tuple[Path | None, TomlTable]: The file found and its Aconitum table, or
            ``(None, {})`` if there is none.
    """
    for directory in traverse_path_up(start or Path.cwd()):
        base = Path(directory)

        candidate = base / ACONITUM_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate, load_toml_dict(candidate)

        candidate = base / PYPROJECT_TOML_NAME
        if candidate.is_file():
            table = _tool_table(load_toml_dict(candidate))
            if table is not None:
                logger.debug("Discovered [tool.%s] in %s", PYPROJECT_TOOL_SECTION, candidate)
                return candidate, table

    logger.debug("No configuration file found, using defaults")
    return None, {}


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value: Any = data.get(name, {})
    if isinstance(value, Mapping):
        return cast("Mapping[str, Any]", value)
    logger.warning("Ignoring [%s]: expected a table, got %s", name, type(value).__name__)
    return {}


def _typed(section: Mapping[str, Any], key: str, kind: type[_T], default: _T) -> _T:
    value: Any = section.get(key, default)
    # bool is an int subclass, never accept one for the other
    if isinstance(value, kind) and (kind is bool or not isinstance(value, bool)):
        return value
    logger.warning(
        "Ignoring %s = %r: expected %s, using default %r", key, value, kind.__name__, default
    )
    return default


@dataclass(frozen=True)
class WidthSettings:
    ambiguous_is_narrow: bool = True
    count_ansi_escape_codes: bool = False


@dataclass(frozen=True)
class WrapSettings:
    width: int = 80
    indent: str = ""
    trim: bool = False
    hard_wrap: bool = False


@dataclass(frozen=True)
class UrlSettings:
    max_input_length: int = MAX_URL_INPUT_LENGTH
    default_protocol: str = "http"


@dataclass(frozen=True)
class TimeSettings:
    seconds_decimal_digits: int = 1
    milliseconds_decimal_digits: int = 0


@dataclass(frozen=True)
class Settings:
    """Effective user settings.

    Attributes:
        width (WidthSettings): Defaults for string width measurement.
        wrap (WrapSettings): Defaults for ANSI-aware wrapping.
        urls (UrlSettings): Defaults for URL parsing and normalization.
        time (TimeSettings): Defaults for duration formatting.
        source (Path | None): File the settings were read from, if any.
    """

    width: WidthSettings = field(default_factory=WidthSettings)
    wrap: WrapSettings = field(default_factory=WrapSettings)
    urls: UrlSettings = field(default_factory=UrlSettings)
    time: TimeSettings = field(default_factory=TimeSettings)
    source: Path | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: Path | None = None) -> Settings:
        """Build settings from a TOML table, falling back to defaults per key.

        Args:
            data (Mapping[str, Any]): Table shaped like `load_defaults_dict`.
            source (Path | None): File the table was read from.

        Returns:
            Settings: The validated settings.
        """
        defaults = load_defaults_dict()
        known = set(defaults)
        for name in data:
            if name not in known:
                logger.warning("Ignoring unknown config section [%s]", name)

        width = _section(data, Toml.SECTION_WIDTH)
        wrap = _section(data, Toml.SECTION_WRAP)
        urls = _section(data, Toml.SECTION_URLS)
        time = _section(data, Toml.SECTION_TIME)
        d_width = defaults[Toml.SECTION_WIDTH]
        d_wrap = defaults[Toml.SECTION_WRAP]
        d_urls = defaults[Toml.SECTION_URLS]
        d_time = defaults[Toml.SECTION_TIME]

        return cls(
            width=WidthSettings(
                ambiguous_is_narrow=_typed(
                    width, Toml.KEY_AMBIGUOUS_IS_NARROW, bool, d_width[Toml.KEY_AMBIGUOUS_IS_NARROW]
                ),
                count_ansi_escape_codes=_typed(
                    width,
                    Toml.KEY_COUNT_ANSI_ESCAPE_CODES,
                    bool,
                    d_width[Toml.KEY_COUNT_ANSI_ESCAPE_CODES],
                ),
            ),
            wrap=WrapSettings(
                width=_typed(wrap, Toml.KEY_WIDTH, int, d_wrap[Toml.KEY_WIDTH]),
                indent=_typed(wrap, Toml.KEY_INDENT, str, d_wrap[Toml.KEY_INDENT]),
                trim=_typed(wrap, Toml.KEY_TRIM, bool, d_wrap[Toml.KEY_TRIM]),
                hard_wrap=_typed(wrap, Toml.KEY_HARD_WRAP, bool, d_wrap[Toml.KEY_HARD_WRAP]),
            ),
            urls=UrlSettings(
                max_input_length=_typed(
                    urls, Toml.KEY_MAX_INPUT_LENGTH, int, d_urls[Toml.KEY_MAX_INPUT_LENGTH]
                ),
                default_protocol=_typed(
                    urls, Toml.KEY_DEFAULT_PROTOCOL, str, d_urls[Toml.KEY_DEFAULT_PROTOCOL]
                ),
            ),
            time=TimeSettings(
                seconds_decimal_digits=_typed(
                    time,
                    Toml.KEY_SECONDS_DECIMAL_DIGITS,
                    int,
                    d_time[Toml.KEY_SECONDS_DECIMAL_DIGITS],
                ),
                milliseconds_decimal_digits=_typed(
                    time,
                    Toml.KEY_MILLISECONDS_DECIMAL_DIGITS,
                    int,
                    d_time[Toml.KEY_MILLISECONDS_DECIMAL_DIGITS],
                ),
            ),
            source=source,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML table shaped like `load_defaults_dict`."""
        return {
            Toml.SECTION_WIDTH: {
                Toml.KEY_AMBIGUOUS_IS_NARROW: self.width.ambiguous_is_narrow,
                Toml.KEY_COUNT_ANSI_ESCAPE_CODES: self.width.count_ansi_escape_codes,
            },
            Toml.SECTION_WRAP: {
                Toml.KEY_WIDTH: self.wrap.width,
                Toml.KEY_INDENT: self.wrap.indent,
                Toml.KEY_TRIM: self.wrap.trim,
                Toml.KEY_HARD_WRAP: self.wrap.hard_wrap,
            },
            Toml.SECTION_URLS: {
                Toml.KEY_MAX_INPUT_LENGTH: self.urls.max_input_length,
                Toml.KEY_DEFAULT_PROTOCOL: self.urls.default_protocol,
            },
            Toml.SECTION_TIME: {
                Toml.KEY_SECONDS_DECIMAL_DIGITS: self.time.seconds_decimal_digits,
                Toml.KEY_MILLISECONDS_DECIMAL_DIGITS: self.time.milliseconds_decimal_digits,
            },
        }


def load_settings(start: Path | None = None, config_file: Path | None = None) -> Settings:
    """Return the effective settings.

    Args:
        start (Path | None): Directory to start discovery from.
        config_file (Path | None): Explicit TOML file; skips discovery. A
            ``pyproject.toml`` is read from its ``[tool.aconitum]`` table.

    Returns:
        Settings: Defaults overridden by the configuration file, if any.
    """
    if config_file is not None:
        data = load_toml_dict(config_file)
        if config_file.name == PYPROJECT_TOML_NAME:
            data = _tool_table(data) or {}
        return Settings.from_mapping(data, source=config_file)

    source, data = discover_config(start)
    return Settings.from_mapping(data, source=source)


def to_toml(table: TomlTable, *, for_pyproject: bool = False) -> str:
    """Render a settings table as TOML text.

    Args:
        table (TomlTable): The table to render.
        for_pyproject (bool): Nest the output under ``[tool.aconitum]``.

    Returns:
        str: The TOML document.
    """
    if for_pyproject:
        table = {"tool": {PYPROJECT_TOOL_SECTION: table}}
    return cast("str", cast("Any", tomlkit).dumps(table))
