"""Backend discovery and construction.

Walks up from a start directory to the nearest ``.git`` or ``.hg`` marker
and builds the matching ``VersionControl`` implementation.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import RepositoryNotFoundError, VercoError
from .base import Entry, Outcome, VersionControl
from .git import GitBackend
from .hg import HgBackend

BACKENDS: dict[str, type[GitBackend] | type[HgBackend]] = {
    GitBackend.name: GitBackend,
    HgBackend.name: HgBackend,
}
_MARKERS: tuple[tuple[str, str], ...] = (
    (".git", GitBackend.name),
    (".hg", HgBackend.name),
)


def find_repository(start: Path, preferred: str | None = None) -> tuple[Path, str]:
    """Return ``(repo_root, backend_name)`` for the closest enclosing repository.

    ``preferred`` breaks the tie when one directory holds several markers.
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        found = [name for marker, name in _MARKERS if (candidate / marker).exists()]
        if not found:
            continue
        if preferred in found:
            return candidate, preferred
        return candidate, found[0]
    raise RepositoryNotFoundError(f"no git or hg repository found at or above {current}")


def create_backend(name: str, repo_root: Path) -> VersionControl:
    try:
        backend_cls = BACKENDS[name]
    except KeyError:
        raise VercoError(f"unknown backend: {name}") from None
    return backend_cls(repo_root)


__all__ = [
    "BACKENDS",
    "Entry",
    "GitBackend",
    "HgBackend",
    "Outcome",
    "VersionControl",
    "create_backend",
    "find_repository",
]
