"""Mercurial implementation of the ``VersionControl`` contract."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..errors import BackendError
from .base import Entry
from .process import join_outputs, run_command

LOG_LIMIT = 20


def parse_hg_status(output: str) -> list[Entry]:
    """Turn ``hg status`` output into commit candidates.

    Unknown (``?``) files start excluded; everything else starts included.
    """
    entries: list[Entry] = []
    for line in output.splitlines():
        if len(line) < 3:
            continue
        status = line[0]
        entries.append(Entry(path=line[2:], included=status != "?", status=status))
    return entries


class HgBackend:
    name = "hg"

    def __init__(self, repo_root: Path, executable: str = "hg") -> None:
        self.repo_root = repo_root
        self.executable = executable

    def _hg(self, *args: str) -> str:
        return run_command(self.executable, self.repo_root, list(args))

    def version(self) -> str:
        return self._hg("--version", "--quiet")

    def status(self) -> str:
        summary = self._hg("summary")
        status = self._hg("status")
        return join_outputs(summary, status)

    def log(self) -> str:
        return self._hg("log", "--graph", "--limit", str(LOG_LIMIT))

    def changes(self, revision: str) -> str:
        if not revision:
            return self._hg("status")
        return self._hg("status", "--change", revision)

    def diff(self, revision: str) -> str:
        if not revision:
            return self._hg("diff")
        return self._hg("diff", "--change", revision)

    def commit_all(self, message: str) -> str:
        return self._hg("commit", "--addremove", "-m", message)

    def get_files_to_commit(self) -> list[Entry]:
        return parse_hg_status(self._hg("status"))

    def commit_selected(self, message: str, entries: Sequence[Entry]) -> str:
        paths = [entry.path for entry in entries if entry.included]
        if not paths:
            raise BackendError("no files selected")
        return self._hg("commit", "--addremove", "-m", message, "--", *paths)

    def revert(self) -> str:
        reverted = self._hg("revert", "--all", "--no-backup")
        purged = self._hg("purge", "--config", "extensions.purge=")
        return join_outputs(reverted, purged)

    def update(self, target: str) -> str:
        return self._hg("update", target)

    def merge(self, target: str) -> str:
        return self._hg("merge", target)

    def conflicts(self) -> str:
        return self._hg("resolve", "--list")

    def take_local(self) -> str:
        return self._hg("resolve", "--all", "--tool", "internal:local")

    def take_other(self) -> str:
        return self._hg("resolve", "--all", "--tool", "internal:other")

    def fetch(self) -> str:
        return self._hg("pull")

    def pull(self) -> str:
        return self._hg("pull", "--update")

    def push(self) -> str:
        return self._hg("push", "--new-branch")

    def create_tag(self, name: str) -> str:
        return self._hg("tag", "--force", name)

    def list_branches(self) -> str:
        return self._hg("branches")

    def create_branch(self, name: str) -> str:
        return self._hg("branch", name)

    def close_branch(self, name: str) -> str:
        updated = self._hg("update", name)
        closed = self._hg("commit", "--close-branch", "-m", f"closed branch {name}")
        return join_outputs(updated, closed)
