# topmark:header:start
#
#   project      : Aconitum
#   file         : parse_url.py
#   file_relpath : src/aconitum/cli/commands/parse_url.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `parse-url` command.

Splits an HTTP(S), SSH or scp-like URL into its components. The longest
accepted input comes from the ``[urls]`` settings.
"""

from __future__ import annotations

from dataclasses import asdict

import click

from aconitum.cli.cmd_common import get_console, get_settings
from aconitum.cli.errors import AconitumInputError
from aconitum.cli.options import OutputFormat, output_format_option
from aconitum.urls.errors import UrlParseError
from aconitum.urls.parse_url import parse_url

_FIELDS = (
    "protocols",
    "protocol",
    "port",
    "resource",
    "host",
    "user",
    "password",
    "pathname",
    "hash",
    "search",
    "href",
)


@click.command(
    name="parse-url",
    help="Print the components of URL.",
)
@click.argument("url")
@click.option("--normalize", is_flag=True, help="Normalize the URL before parsing it.")
@output_format_option
@click.pass_context
def parse_url_command(
    ctx: click.Context,
    url: str,
    *,
    normalize: bool,
    output_format: OutputFormat,
) -> None:
    console = get_console(ctx)
    settings = get_settings(ctx).urls
    try:
        parsed = parse_url(url, normalize, max_input_length=settings.max_input_length)
    except UrlParseError as exc:
        raise AconitumInputError(f"{exc}: {url!r}") from exc

    data = asdict(parsed)
    if output_format == OutputFormat.JSON:
        console.emit_json(data)
        return
    for key in _FIELDS:
        console.field(key, data[key] or None, label_width=10)
