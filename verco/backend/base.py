"""Backend capability contract and the value types it exchanges.

The session only ever talks to a backend through ``VersionControl``. Any
object providing these methods satisfies it structurally. Operations return
their output text on success and raise ``BackendError`` carrying the failure
text otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass
class Entry:
    """One working-copy file offered for a selective commit.

    ``source`` is the previous path of a rename or copy, empty otherwise.
    """

    path: str
    included: bool
    status: str = ""
    source: str = ""


@dataclass(frozen=True)
class Outcome:
    """Normalized result of one backend call."""

    ok: bool
    text: str

    @classmethod
    def success(cls, text: str) -> Outcome:
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, text: str) -> Outcome:
        return cls(ok=False, text=text)


class VersionControl(Protocol):
    """Operations the terminal session can invoke on a repository."""

    def version(self) -> str: ...

    def status(self) -> str: ...

    def log(self) -> str: ...

    def changes(self, revision: str) -> str: ...

    def diff(self, revision: str) -> str: ...

    def commit_all(self, message: str) -> str: ...

    def get_files_to_commit(self) -> list[Entry]:
        """Return changed files in listing order with default inclusion set."""
        ...

    def commit_selected(self, message: str, entries: Sequence[Entry]) -> str:
        """Commit only the entries whose ``included`` flag is set."""
        ...

    def revert(self) -> str: ...

    def update(self, target: str) -> str: ...

    def merge(self, target: str) -> str: ...

    def conflicts(self) -> str: ...

    def take_local(self) -> str: ...

    def take_other(self) -> str: ...

    def fetch(self) -> str: ...

    def pull(self) -> str: ...

    def push(self) -> str: ...

    def create_tag(self, name: str) -> str: ...

    def list_branches(self) -> str: ...

    def create_branch(self, name: str) -> str: ...

    def close_branch(self, name: str) -> str: ...
