"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults baked here, projdeps.toml only contains
overrides. Without any file the scanner looks for ``*.csproj``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScanConfig(BaseModel):
    """[scan] section.

    Attributes:
        patterns: Glob patterns (matched against file names) selecting
            project files anywhere below the scan root.
        skip_dirs: Directory names never descended into.
    """

    model_config = {"frozen": True}

    patterns: list[str] = Field(default_factory=lambda: ["*.csproj"])
    skip_dirs: list[str] = Field(default_factory=lambda: [".git"])
