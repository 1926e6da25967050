"""Exception types raised outside the service layer.

Expected query outcomes (unknown names, missing options) are reported as
failed :class:`~projdeps.services.result.ServiceResult` values, never
raised. These exceptions cover the two conditions that abort an
invocation before any query runs.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid command-line configuration (bad ``--path``, flag without a value)."""


class CollaboratorError(Exception):
    """Scanning the source tree or reading a project file failed."""


class ProjectFileError(CollaboratorError):
    """A project file could not be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason
