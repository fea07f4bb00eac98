################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""
Turning repository names into project names, and project names into workspace
names.
"""
import re
import typing as t
from urllib.parse import unquote_plus

from .. import exceptions

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")
_PROJECT_NAME_SLUG = re.compile(r"[^a-zA-Z0-9-]")


def sanitize_project_name(project_name: str) -> str:
    """Decodes a repository name and replaces spaces with hyphens.

    Decoding follows query-string rules: ``%XX`` escapes are decoded and ``+``
    becomes a space.

    Raises:
        wscreate.exceptions.ProjectNameDecodeError: when ``project_name`` contains a
            ``%`` that isn't followed by two hex digits, or escapes that don't
            decode to valid UTF-8.
    """
    if _MALFORMED_ESCAPE.search(project_name) is not None:
        raise exceptions.ProjectNameDecodeError(project_name)

    try:
        decoded = unquote_plus(project_name, errors="strict")
    except UnicodeDecodeError as e:
        raise exceptions.ProjectNameDecodeError(
            project_name, f"'{project_name}' doesn't decode to valid UTF-8"
        ) from e
    return decoded.replace(" ", "-")


def get_project_name_from_repo(repo_url: str) -> str:
    """Derives a slug from the last path segment of a repository URL.

    Example: ``https://host/Org/My_Repo.git`` -> ``my-repo``.
    """
    base = repo_url.rstrip("/").split("/")[-1].lower()
    if base.endswith(".git"):
        base = base[: -len(".git")]
    return _PROJECT_NAME_SLUG.sub("-", base)


def get_suggested_workspace_name(
    first_project_name: str, existing_workspace_names: t.Iterable[str]
) -> str:
    """Returns ``first_project_name``, numbered if the name is already taken.

    Numbering starts at 2 and the first free name wins, e.g. with ``demo`` and
    ``demo2`` taken the suggestion is ``demo3``.
    """
    taken = set(existing_workspace_names)
    if first_project_name not in taken:
        return first_project_name

    i = 2
    while f"{first_project_name}{i}" in taken:
        i += 1
    return f"{first_project_name}{i}"
