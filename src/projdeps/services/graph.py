"""GraphService — the five dependency queries.

Each method resolves the identifiers it is given (case-insensitively),
runs one traversal from :mod:`projdeps.domain.traversal`, and wraps the
outcome in a :class:`ServiceResult`. Unknown identifiers produce a
``NOT_FOUND`` failure; the graph is never modified.
"""

from __future__ import annotations

import logging
from typing import Any

from projdeps.domain.traversal import (
    collect_closure,
    find_paths,
    render_filtered_tree,
    render_tree,
)
from projdeps.services.base import BaseService
from projdeps.services.result import NOT_FOUND, ServiceResult

logger = logging.getLogger(__name__)


class GraphService(BaseService):
    """Answers dependency questions over the scanned graph."""

    # ------------------------------------------------------------------
    # tree / entry: indented dependency trees
    # ------------------------------------------------------------------

    def tree(self) -> ServiceResult:
        """Print the dependency tree of every project, one root at a time."""
        g = self._graph
        roots = g.projects()
        lines: list[str] = []
        for root in roots:
            lines.extend(render_tree(g, root))

        return ServiceResult(
            ok=True,
            op="tree",
            data={"roots": [r.name for r in roots], "lines": lines},
        )

    def entry(self, project: str) -> ServiceResult:
        """Print the dependency tree of a single project."""
        g = self._graph
        root = g.get(project)
        if root is None:
            return ServiceResult.failure(
                "entry", NOT_FOUND, f"Project '{project}' not found.", name=project
            )

        return ServiceResult(
            ok=True,
            op="entry",
            data={"roots": [root.name], "lines": list(render_tree(g, root))},
        )

    # ------------------------------------------------------------------
    # entry_simple: flat transitive closure
    # ------------------------------------------------------------------

    def entry_simple(self, project: str) -> ServiceResult:
        """List every project and package *project* depends on, directly or not."""
        g = self._graph
        root = g.get(project)
        if root is None:
            return ServiceResult.failure(
                "entry_simple", NOT_FOUND, f"Project '{project}' not found.", name=project
            )

        closure = collect_closure(g, root)
        return ServiceResult(
            ok=True,
            op="entry_simple",
            data={
                "source": root.name,
                "projects": closure.projects,
                "packages": closure.packages,
            },
        )

    # ------------------------------------------------------------------
    # depends_on: ancestor-filtered trees
    # ------------------------------------------------------------------

    def depends_on(self, target: str) -> ServiceResult:
        """Print, for every project that reaches *target*, the branches leading to it."""
        g = self._graph
        target_node = g.get(target)
        if target_node is None:
            return ServiceResult.failure(
                "depends_on", NOT_FOUND, f"Target '{target}' not found.", name=target
            )

        roots = [root for root in g.projects() if g.can_reach(root, target_node)]
        lines: list[str] = []
        for root in roots:
            lines.extend(render_filtered_tree(g, root, target_node))

        logger.debug("%d projects depend on %s", len(roots), target_node.name)
        return ServiceResult(
            ok=True,
            op="depends_on",
            data={
                "target": target_node.name,
                "roots": [r.name for r in roots],
                "lines": lines,
            },
        )

    # ------------------------------------------------------------------
    # path: all simple paths
    # ------------------------------------------------------------------

    def path(self, source: str, target: str) -> ServiceResult:
        """Enumerate every simple dependency path from *source* to *target*."""
        g = self._graph
        source_node = g.get(source)
        if source_node is None:
            return ServiceResult.failure(
                "path", NOT_FOUND, f"Source '{source}' not found.", name=source
            )
        target_node = g.get(target)
        if target_node is None:
            return ServiceResult.failure(
                "path", NOT_FOUND, f"Target '{target}' not found.", name=target
            )

        paths = list(find_paths(g, source_node, target_node))
        data: dict[str, Any] = {
            "source": source,
            "target": target,
            "count": len(paths),
            "paths": paths,
        }
        return ServiceResult(ok=True, op="path", data=data)
