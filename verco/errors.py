"""Exception hierarchy shared across verco layers.

Only ``VercoError`` subclasses cross layer boundaries. Raw ``OSError`` and
``subprocess`` failures are wrapped where they happen so the CLI can report
a clean one-line message.
"""

from __future__ import annotations


class VercoError(Exception):
    """Base exception for all verco errors."""


class BackendError(VercoError):
    """A version-control command failed; the message is its output verbatim."""


class BackendUnavailableError(BackendError):
    """Raised when the backend cannot report its own version at startup."""


class ExplorerLaunchError(VercoError):
    """Raised when the OS file browser cannot be started."""


class RepositoryNotFoundError(VercoError):
    """Raised when no supported repository encloses the start path."""
