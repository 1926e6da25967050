"""Two-pass dependency graph construction from parsed unit records.

1. Node pass: one project node per record identifier (first casing wins),
   so references to projects listed later in the input still resolve.
2. Edge pass: project references resolve against existing nodes only and
   are dropped when unknown; package references create package nodes on
   first sight.

No cycle detection is performed and unresolved references are not errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from projdeps.domain.graph import DependencyGraph
from projdeps.domain.records import UnitRecord
from projdeps.domain.types import NodeKind

logger = logging.getLogger(__name__)


def build_graph(records: Iterable[UnitRecord]) -> DependencyGraph:
    """Build and freeze a :class:`DependencyGraph` from *records*.

    Records sharing an identifier (case-insensitively) collapse into a
    single project node; the edges of every such record attach to it.
    """
    units = list(records)
    graph = DependencyGraph()

    for unit in units:
        graph.add_node(unit.identifier, NodeKind.PROJECT)

    for unit in units:
        source = graph.get(unit.identifier)
        assert source is not None

        for ref in unit.project_refs:
            target = graph.get(ref)
            if target is None:
                logger.debug("Unresolved project reference %s -> %s", unit.identifier, ref)
                continue
            graph.add_edge(source, target)

        for ref in unit.package_refs:
            target = graph.add_node(ref, NodeKind.PACKAGE)
            graph.add_edge(source, target)

    logger.debug(
        "Built dependency graph: %d nodes, %d edges from %d units",
        len(graph),
        graph.edge_count,
        len(units),
    )
    return graph.freeze()
