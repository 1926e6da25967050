"""BaseService — common foundation for projdeps services.

Every service receives a :class:`GraphEngine` at construction time and
reaches the graph through ``self._graph``, which triggers the lazy scan
and build on first use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from projdeps.domain.graph import DependencyGraph
    from projdeps.infrastructure.graph.engine import GraphEngine


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def tree(self) -> ServiceResult:
                for node in self._graph.projects():
                    ...
    """

    def __init__(self, engine: GraphEngine) -> None:
        self._engine = engine

    @property
    def _graph(self) -> DependencyGraph:
        return self._engine.graph
