"""Node classification enums."""

from __future__ import annotations

from enum import StrEnum


class NodeKind(StrEnum):
    """Kind of build unit a graph node represents."""

    PROJECT = "project"
    PACKAGE = "package"
