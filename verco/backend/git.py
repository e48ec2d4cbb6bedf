"""Git implementation of the ``VersionControl`` contract."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..errors import BackendError
from .base import Entry
from .process import join_outputs, run_command

LOG_LIMIT = 20


def _iter_porcelain_records(output: str) -> list[tuple[str, str, str]]:
    records: list[tuple[str, str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        source = ""
        # Renamed/copied records carry the source path as the next token.
        if "R" in status or "C" in status:
            source = tokens[index] if index < len(tokens) else ""
            index += 1
        records.append((status, token[3:], source))
    return records


def parse_porcelain_status(output: str) -> list[Entry]:
    """Turn ``git status --porcelain=v1 -z`` output into commit candidates.

    Untracked files start excluded; everything else starts included.
    Renames are listed under their new path and remember the old one.
    """
    return [
        Entry(path=path, included=status != "??", status=status.strip(), source=source)
        for status, path, source in _iter_porcelain_records(output)
    ]


class GitBackend:
    name = "git"

    def __init__(self, repo_root: Path, executable: str = "git") -> None:
        self.repo_root = repo_root
        self.executable = executable

    def _git(self, *args: str) -> str:
        return run_command(self.executable, self.repo_root, list(args))

    def version(self) -> str:
        return self._git("--version")

    def status(self) -> str:
        return self._git("status")

    def log(self) -> str:
        return self._git("log", "--all", "--decorate", "--oneline", "--graph", f"-{LOG_LIMIT}")

    def changes(self, revision: str) -> str:
        if not revision:
            return self._git("diff", "--name-status")
        return self._git("diff", "--name-status", revision)

    def diff(self, revision: str) -> str:
        if not revision:
            return self._git("diff")
        return self._git("diff", revision)

    def commit_all(self, message: str) -> str:
        added = self._git("add", "--all")
        committed = self._git("commit", "-m", message)
        return join_outputs(added, committed)

    def get_files_to_commit(self) -> list[Entry]:
        return parse_porcelain_status(self._git("status", "--porcelain=v1", "-z", "--untracked-files=all"))

    def commit_selected(self, message: str, entries: Sequence[Entry]) -> str:
        included = [entry for entry in entries if entry.included]
        if not included:
            raise BackendError("no files selected")
        paths = [entry.path for entry in included]
        # The old side of a rename is gone from the index, so only commit sees it.
        sources = [entry.source for entry in included if entry.source]
        added = self._git("add", "--all", "--", *paths)
        committed = self._git("commit", "-m", message, "--", *paths, *sources)
        return join_outputs(added, committed)

    def revert(self) -> str:
        reset = self._git("reset", "--hard")
        cleaned = self._git("clean", "-d", "--force")
        return join_outputs(reset, cleaned)

    def update(self, target: str) -> str:
        return self._git("checkout", target)

    def merge(self, target: str) -> str:
        return self._git("merge", target)

    def conflicts(self) -> str:
        return self._git("diff", "--name-only", "--diff-filter=U")

    def take_local(self) -> str:
        return self._git("checkout", "--ours", "--", ".")

    def take_other(self) -> str:
        return self._git("checkout", "--theirs", "--", ".")

    def fetch(self) -> str:
        return self._git("fetch", "--all")

    def pull(self) -> str:
        return self._git("pull", "--all")

    def push(self) -> str:
        return self._git("push")

    def create_tag(self, name: str) -> str:
        return self._git("tag", "--force", name)

    def list_branches(self) -> str:
        return self._git("branch", "--all", "--list")

    def create_branch(self, name: str) -> str:
        return self._git("checkout", "-b", name)

    def close_branch(self, name: str) -> str:
        return self._git("branch", "--delete", name)
