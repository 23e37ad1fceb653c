# topmark:header:start
#
#   project      : Aconitum
#   file         : git_url.py
#   file_relpath : src/aconitum/cli/commands/git_url.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Aconitum `git-url` command.

Parses a git remote (HTTPS, SSH, scp-like or GitHub ``owner/repo`` shorthand)
and prints its repository coordinates, or renders it in another form with
``--to``.
"""

from __future__ import annotations

from dataclasses import asdict

import click

from aconitum.cli.cmd_common import get_console
from aconitum.cli.errors import AconitumInputError
from aconitum.cli.options import OutputFormat, output_format_option
from aconitum.git.errors import GitUrlError
from aconitum.git.git_url_parse import git_url_parse

# Rendered in this order by the default format
_SUMMARY_FIELDS = (
    "source",
    "owner",
    "name",
    "full_name",
    "organization",
    "ref",
    "filepathtype",
    "filepath",
    "commit",
    "protocol",
    "resource",
    "port",
    "user",
    "git_suffix",
)

TARGET_FORMS = ("ssh", "git+ssh", "ssh+git", "ftp", "ftps", "http", "https", "git+https")


@click.command(
    name="git-url",
    help="Parse a git remote URL and print its owner, name, ref and path.",
)
@click.argument("url")
@output_format_option
@click.option(
    "--to",
    "target",
    type=click.Choice(TARGET_FORMS, case_sensitive=False),
    default=None,
    help="Print the remote rewritten in this form instead of its fields.",
)
@click.option(
    "--ref",
    "refs",
    multiple=True,
    help="Known branch or tag name; helps resolve refs containing '/'. Repeatable.",
)
@click.pass_context
def git_url_command(
    ctx: click.Context,
    url: str,
    *,
    output_format: OutputFormat,
    target: str | None,
    refs: tuple[str, ...],
) -> None:
    console = get_console(ctx)
    try:
        info = git_url_parse(url, list(refs) or None)
    except GitUrlError as exc:
        raise AconitumInputError(str(exc)) from exc

    if target is not None:
        rendered = info.to_string(target.lower())
        if output_format == OutputFormat.JSON:
            console.emit_json({"url": rendered}, indent=None)
        else:
            console.print(rendered)
        return

    if output_format == OutputFormat.JSON:
        console.emit_json(asdict(info))
        return

    data = asdict(info)
    for key in _SUMMARY_FIELDS:
        value = data[key]
        if value in ("", None, False):
            continue
        console.field(key, value, label_width=13)
