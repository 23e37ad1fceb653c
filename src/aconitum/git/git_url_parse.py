# topmark:header:start
#
#   project      : Aconitum
#   file         : git_url_parse.py
#   file_relpath : src/aconitum/git/git_url_parse.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Parse git remote URLs into owner, repository name, ref and file path.

Besides the GitHub/GitLab/Gitea/Bitbucket path layout this understands
CloudForge, Visual Studio Team Services, Azure DevOps and Bitbucket Server
remotes, and renders a parsed remote back into any of the common transport
forms with [`stringify`][aconitum.git.git_url_parse.stringify].
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Final
from urllib.parse import quote, unquote

from aconitum.config.logging import get_logger
from aconitum.git.errors import GitUrlError
from aconitum.git.git_up import GitUp, git_up
from aconitum.urls.errors import UrlParseError

if TYPE_CHECKING:
    from aconitum.config.logging import AconitumLogger

logger: AconitumLogger = get_logger(__name__)

SHORTHAND_REPO_RE: Final[re.Pattern[str]] = re.compile(
    r"^([a-z\d-]{1,39})/([-.\w]{1,100})$", re.IGNORECASE
)
BITBUCKET_SERVER_RE: Final[re.Pattern[str]] = re.compile(
    r"(projects|users)/(.*?)/repos/(.*?)((/.*$)|$)"
)

# Path markers that end the ``owner/name`` part in the default layout, by priority
_PATH_MARKERS: Final[tuple[str, ...]] = (
    "blob",
    "issues",
    "tree",
    "commit",
    "src",
    "raw",
    "edit",
)
_FILEPATH_TYPES: Final[frozenset[str]] = frozenset({"raw", "src", "blob", "tree", "edit"})


@dataclass
class GitUrl(GitUp):
    """A parsed git remote with its repository coordinates.

    Attributes:
        source (str): Git hosting service, e.g. ``github.com`` or ``bitbucket-server``.
        git_suffix (bool): The path ended with ``.git``.
        name (str): Repository name.
        owner (str): Repository owner (user, group or project).
        organization (str): Organization, where the service has one.
        ref (str): Branch, tag or commit named in the URL.
        filepathtype (str): ``blob``, ``tree``, ``raw``, ``src``, ``edit`` or ``browse``.
        filepath (str): File path inside the repository.
        full_name (str): ``owner/name`` in the layout of the service.
        commit (str): Commit named in a ``commit``/``commits`` URL.
    """

    source: str = ""
    git_suffix: bool = False
    name: str = ""
    owner: str = ""
    organization: str = ""
    ref: str = ""
    filepathtype: str = ""
    filepath: str = ""
    full_name: str = ""
    commit: str = ""

    def to_string(self, type: str | None = None) -> str:  # noqa: A002
        """Render this remote, see [`stringify`][aconitum.git.git_url_parse.stringify]."""
        return stringify(self, type)

    def __str__(self) -> str:
        return self.to_string()


def _index_from(splits: Sequence[str], item: str, start: int) -> int:
    try:
        return splits.index(item, start)
    except ValueError:
        return -1


def _longest_matching_ref(rest: str, refs: Sequence[str]) -> str:
    """Return the longest ref that ``rest`` (``<ref>/<filepath>``) starts with."""
    return max(
        (ref for ref in refs if ref and (rest == ref or rest.startswith(f"{ref}/"))),
        key=len,
        default="",
    )


def _parse_visualstudio(info: GitUrl) -> None:
    splits = info.name.split("/")
    if info.resource == "vs-ssh.visualstudio.com":
        if len(splits) == 4:
            info.organization, info.owner, info.name = splits[1], splits[2], splits[3]
            info.full_name = f"{splits[2]}/{splits[3]}"
        return
    _parse_collection_path(info, splits)


def _parse_azure(info: GitUrl) -> None:
    splits = info.name.split("/")
    if info.resource == "ssh.dev.azure.com":
        if len(splits) == 4:
            info.organization, info.owner, info.name = splits[1], splits[2], splits[3]
        return

    if len(splits) == 5:
        info.organization, info.owner, info.name = splits[0], splits[1], splits[4]
        info.full_name = f"_git/{info.name}"
    else:
        _parse_collection_path(info, splits)

    if info.query.get("path"):
        info.filepath = info.query["path"].lstrip("/")
    if info.query.get("version"):
        info.ref = info.query["version"].removeprefix("GB")


def _parse_collection_path(info: GitUrl, splits: list[str]) -> None:
    """Handle ``[collection/]project/_git/repo`` paths of VSTS and Azure DevOps."""
    if len(splits) == 2:
        info.owner = info.name = splits[1]
        info.full_name = f"_git/{info.name}"
    elif len(splits) == 3:
        info.name = splits[2]
        if splits[0] == "DefaultCollection":
            info.owner = splits[2]
            info.organization = splits[0]
            info.full_name = f"{info.organization}/_git/{info.name}"
        else:
            info.owner = splits[0]
            info.full_name = f"{info.owner}/_git/{info.name}"
    elif len(splits) == 4:
        info.organization, info.owner, info.name = splits[0], splits[1], splits[3]
        info.full_name = f"{info.organization}/{info.owner}/_git/{info.name}"


def _parse_default(info: GitUrl) -> None:
    splits = info.name.split("/")
    name_index = len(splits) - 1

    if len(splits) >= 2:
        dash_index = _index_from(splits, "-", 2)
        markers = {marker: _index_from(splits, marker, 2) for marker in _PATH_MARKERS}

        if dash_index > 0:
            name_index = dash_index - 1
        elif markers["blob"] > 0 and markers["tree"] > 0:
            name_index = min(markers["blob"], markers["tree"]) - 1
        else:
            name_index = next(
                (idx - 1 for idx in markers.values() if idx > 0),
                name_index,
            )

        info.owner = "/".join(splits[:name_index])
        info.name = splits[name_index]
        if markers["commit"] > 0 and markers["issues"] < 0 and len(splits) > name_index + 2:
            info.commit = splits[name_index + 2]

    info.ref = ""
    info.filepathtype = ""
    info.filepath = ""

    offset = name_index + 1 if splits[name_index + 1 : name_index + 2] == ["-"] else name_index
    if len(splits) > offset + 2 and splits[offset + 1] in _FILEPATH_TYPES:
        info.filepathtype = splits[offset + 1]
        info.ref = splits[offset + 2]
        if len(splits) > offset + 3:
            info.filepath = "/".join(splits[offset + 3 :])

    info.organization = info.owner


def _parse_bitbucket_server(info: GitUrl, m: re.Match[str]) -> None:
    info.source = "bitbucket-server"
    info.owner = f"~{m.group(2)}" if m.group(1) == "users" else m.group(2)
    info.organization = info.owner
    info.name = m.group(3)

    splits = m.group(4).split("/")
    if len(splits) > 1:
        if splits[1] in ("raw", "browse"):
            info.filepathtype = splits[1]
            if len(splits) > 2:
                info.filepath = "/".join(splits[2:])
        elif splits[1] == "commits" and len(splits) > 2:
            info.commit = splits[2]

    info.full_name = f"{info.owner}/{info.name}"
    info.ref = info.query.get("at", "")


def git_url_parse(url: str, refs: Sequence[str] | None = None) -> GitUrl:
    """Parse a git remote URL.

    Args:
        url (str): The remote URL, or a GitHub ``user/repo`` shorthand.
        refs (Sequence[str] | None): Known ref names. Used to resolve refs that
            contain ``/`` in ``blob``/``tree`` URLs; the longest match wins.

    Returns:
        GitUrl: The parsed remote.

    Raises:
        GitUrlError: If the arguments have the wrong type or ``url`` cannot be parsed.

    Examples:
        >>> url = "https://github.com/IonicaBizau/git-url-parse/blob/master/test/index.js"
        >>> info = git_url_parse(url)
        >>> (info.owner, info.name, info.ref, info.filepath)
        ('IonicaBizau', 'git-url-parse', 'master', 'test/index.js')
    """
    if not isinstance(url, str):
        raise GitUrlError("The url must be a string.")
    refs = list(refs or ())
    if not all(isinstance(ref, str) for ref in refs):
        raise GitUrlError("The refs should contain only strings.")

    if SHORTHAND_REPO_RE.match(url):
        url = f"https://github.com/{url}"

    try:
        info = GitUrl(**asdict(git_up(url)))
    except UrlParseError as exc:
        raise GitUrlError(f"Unable to parse git URL {url!r}: {exc}") from exc

    source_parts = info.resource.split(".")
    info.source = ".".join(source_parts[1:]) if len(source_parts) > 2 else info.resource
    info.git_suffix = info.pathname.endswith(".git")
    info.name = re.sub(r"(^/)|(/$)", "", unquote(info.pathname or info.href)).removesuffix(".git")
    info.owner = unquote(info.user)

    logger.trace("git_url_parse(%r): source=%s", url, info.source)
    if info.source == "git.cloudforge.com":
        info.owner = info.user
        info.organization = source_parts[0]
        info.source = "cloudforge.com"
    elif info.source == "visualstudio.com":
        _parse_visualstudio(info)
    elif info.source in ("dev.azure.com", "azure.com"):
        _parse_azure(info)
    else:
        _parse_default(info)

    if not info.full_name:
        info.full_name = "/".join(part for part in (info.owner, info.name) if part)

    if info.owner.startswith("scm/"):
        info.source = "bitbucket-server"
        info.owner = info.owner.replace("scm/", "", 1)
        info.organization = info.owner
        info.full_name = f"{info.owner}/{info.name}"

    m = BITBUCKET_SERVER_RE.search(info.pathname)
    if m is not None:
        _parse_bitbucket_server(info, m)

    # Bitbucket Server carries the ref in the query, not in the path.
    if (
        refs
        and info.ref
        and info.filepathtype in _FILEPATH_TYPES
        and info.source != "bitbucket-server"
    ):
        rest = f"{info.ref}/{info.filepath}" if info.filepath else info.ref
        ref = _longest_matching_ref(rest, refs)
        if ref:
            info.ref = ref
            info.filepath = rest[len(ref) + 1 :]

    return info


def _build_token(obj: GitUrl) -> str:
    if obj.source == "bitbucket.org":
        return f"x-token-auth:{obj.token}@"
    return f"{obj.token}@"


def _build_path(obj: GitUrl) -> str:
    if obj.source == "bitbucket-server":
        return f"scm/{obj.full_name}"
    return "/".join(quote(part, safe="!'()*~") for part in obj.full_name.split("/"))


def stringify(obj: GitUrl, type: str | None = None) -> str:  # noqa: A002
    """Render a parsed remote as a URL.

    Args:
        obj (GitUrl): The parsed remote.
        type (str | None): Target form: ``ssh``, ``git+ssh``, ``ssh+git``,
            ``ftp``, ``ftps``, ``http``, ``https`` or ``git+https``. Defaults to
            the protocols of ``obj``. Unknown forms give ``obj.href``.

    Returns:
        str: The rendered URL.

    Examples:
        >>> stringify(git_url_parse("git@github.com:owner/repo.git"), "https")
        'https://github.com/owner/repo.git'
    """
    if type is None:
        type = "+".join(obj.protocols) if obj.protocols else obj.protocol  # noqa: A001
    port = f":{obj.port}" if obj.port else ""
    user = obj.user or "git"
    suffix = ".git" if obj.git_suffix else ""

    if type == "ssh":
        if port:
            return f"ssh://{user}@{obj.resource}{port}/{obj.full_name}{suffix}"
        return f"{user}@{obj.resource}:{obj.full_name}{suffix}"
    if type in ("git+ssh", "ssh+git", "ftp", "ftps"):
        return f"{type}://{user}@{obj.resource}{port}/{obj.full_name}{suffix}"
    if type in ("http", "https", "git+https"):
        if obj.token:
            auth = _build_token(obj)
        elif obj.user and not {"http", "https"}.isdisjoint(obj.protocols):
            auth = f"{obj.user}@"
        else:
            auth = ""
        return f"{type}://{auth}{obj.resource}{port}/{_build_path(obj)}{suffix}"
    return obj.href
