# topmark:header:start
#
#   project      : Aconitum
#   file         : github_urls.py
#   file_relpath : src/aconitum/git/github_urls.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Build prefilled "new issue" and "new release" GitHub URLs."""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlencode

from aconitum.git.errors import GitUrlError


def _repo_url(repo_url: str | None, user: str | None, repo: str | None) -> str:
    if repo_url:
        return repo_url.removesuffix("/")
    if user and repo:
        return f"https://github.com/{user}/{repo}"
    raise GitUrlError(
        "You need to specify either the `repo_url` option or both the `user` and `repo` options"
    )


def _join(value: str | Sequence[str]) -> str:
    return value if isinstance(value, str) else ",".join(value)


def _with_query(url: str, params: list[tuple[str, str]]) -> str:
    return f"{url}?{urlencode(params, safe='*')}" if params else url


def new_github_issue_url(
    *,
    repo_url: str | None = None,
    user: str | None = None,
    repo: str | None = None,
    title: str | None = None,
    body: str | None = None,
    labels: str | Sequence[str] | None = None,
    template: str | None = None,
    milestone: str | int | None = None,
    assignee: str | None = None,
    projects: str | Sequence[str] | None = None,
    type: str | None = None,  # noqa: A002
) -> str:
    """Return the URL of a prefilled GitHub "new issue" form.

    Args:
        repo_url (str | None): Repository URL, e.g. ``https://github.com/owner/repo``.
        user (str | None): Repository owner, used with ``repo`` when ``repo_url`` is unset.
        repo (str | None): Repository name.
        title (str | None): Issue title.
        body (str | None): Issue body.
        labels (str | Sequence[str] | None): Labels to apply.
        template (str | None): Issue template file name.
        milestone (str | int | None): Milestone name or number.
        assignee (str | None): User to assign.
        projects (str | Sequence[str] | None): Projects to add the issue to.
        type (str | None): Issue type.

    Returns:
        str: The form URL.

    Raises:
        GitUrlError: If no repository is given.

    Examples:
        >>> new_github_issue_url(user="sindresorhus", repo="new-github-issue-url", title="Bug")
        'https://github.com/sindresorhus/new-github-issue-url/issues/new?title=Bug'
    """
    url = f"{_repo_url(repo_url, user, repo)}/issues/new"

    params: list[tuple[str, str]] = []
    if labels:
        params.append(("labels", _join(labels)))
    if projects:
        params.append(("projects", _join(projects)))
    for name, value in (
        ("template", template),
        ("title", title),
        ("body", body),
        ("milestone", milestone),
        ("assignee", assignee),
        ("type", type),
    ):
        if value is not None:
            params.append((name, str(value)))
    return _with_query(url, params)


def new_github_release_url(
    *,
    repo_url: str | None = None,
    user: str | None = None,
    repo: str | None = None,
    tag: str | None = None,
    target: str | None = None,
    title: str | None = None,
    body: str | None = None,
    is_prerelease: bool | None = None,
) -> str:
    """Return the URL of a prefilled GitHub "new release" form.

    Raises:
        GitUrlError: If no repository is given.

    Examples:
        >>> new_github_release_url(user="sindresorhus", repo="np", tag="v1.0.0", is_prerelease=True)
        'https://github.com/sindresorhus/np/releases/new?tag=v1.0.0&prerelease=true'
    """
    url = f"{_repo_url(repo_url, user, repo)}/releases/new"

    params = [
        (name, value)
        for name, value in (("tag", tag), ("target", target), ("title", title), ("body", body))
        if value is not None
    ]
    if is_prerelease is not None:
        params.append(("prerelease", "true" if is_prerelease else "false"))
    return _with_query(url, params)
