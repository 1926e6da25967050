"""UnitRecord — one build unit's declared references.

Produced by the project-file parser, consumed by the graph builder.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class UnitRecord(BaseModel):
    """Dependency declarations of a single project file.

    Attributes:
        identifier: Logical project name (declared assembly name, or the
            file stem when none is declared).
        project_refs: Identifiers of referenced projects, in file order.
        package_refs: Identifiers of referenced packages, in file order.
        source: File the record was parsed from, if any.
    """

    model_config = {"frozen": True}

    identifier: str
    project_refs: tuple[str, ...] = Field(default_factory=tuple)
    package_refs: tuple[str, ...] = Field(default_factory=tuple)
    source: str | None = None
