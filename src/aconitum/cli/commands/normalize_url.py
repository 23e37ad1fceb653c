# topmark:header:start
#
#   project      : Aconitum
#   file         : normalize_url.py
#   file_relpath : src/aconitum/cli/commands/normalize_url.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `normalize-url` command."""

from __future__ import annotations

import click

from aconitum.cli.cmd_common import get_console, get_settings
from aconitum.cli.errors import AconitumInputError, AconitumUsageError
from aconitum.urls.errors import UrlOptionsError, UrlParseError
from aconitum.urls.normalize_url import normalize_url


@click.command(
    name="normalize-url",
    help=(
        "Print URL in canonical form, "
        "e.g. 'HTTP://www.Example.com:80/a/../b/' -> 'http://example.com/b'."
    ),
)
@click.argument("url")
@click.option("--strip-www/--keep-www", default=True, show_default=True, help="Drop 'www.'.")
@click.option("--strip-hash", is_flag=True, help="Drop the fragment.")
@click.option("--strip-protocol", is_flag=True, help="Drop 'http:' / 'https:'.")
@click.option("--force-https", is_flag=True, help="Rewrite http: to https:.")
@click.option("--force-http", is_flag=True, help="Rewrite https: to http:.")
@click.option(
    "--keep-trailing-slash",
    is_flag=True,
    help="Keep a trailing '/' on the path.",
)
@click.option(
    "--no-sort-query",
    is_flag=True,
    help="Keep query parameters in their original order.",
)
@click.option(
    "--default-protocol",
    default=None,
    help="Protocol for URLs without one. Defaults to [urls] settings.",
)
@click.pass_context
def normalize_url_command(
    ctx: click.Context,
    url: str,
    *,
    strip_www: bool,
    strip_hash: bool,
    strip_protocol: bool,
    force_https: bool,
    force_http: bool,
    keep_trailing_slash: bool,
    no_sort_query: bool,
    default_protocol: str | None,
) -> None:
    console = get_console(ctx)
    settings = get_settings(ctx).urls
    try:
        normalized = normalize_url(
            url,
            default_protocol=default_protocol or settings.default_protocol,
            strip_www=strip_www,
            strip_hash=strip_hash,
            strip_protocol=strip_protocol,
            force_https=force_https,
            force_http=force_http,
            remove_trailing_slash=not keep_trailing_slash,
            sort_query_parameters=not no_sort_query,
        )
    except UrlOptionsError as exc:
        raise AconitumUsageError(str(exc)) from exc
    except UrlParseError as exc:
        raise AconitumInputError(f"{exc}: {url!r}") from exc
    console.print(normalized)
