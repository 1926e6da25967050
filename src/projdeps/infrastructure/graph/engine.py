"""GraphEngine — lazy-built dependency graph for one scan root.

Rebuilt per invocation, no cross-invocation cache. Commands that fail
option validation never scan the file system.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from projdeps.infrastructure.graph.builder import build_graph
from projdeps.infrastructure.scanner import scan_units

if TYPE_CHECKING:
    from pathlib import Path

    from projdeps.config.models import ScanConfig
    from projdeps.domain.graph import DependencyGraph

logger = logging.getLogger(__name__)


class GraphEngine:
    """Scans *root* and builds the graph on first access."""

    def __init__(self, root: Path, scan: ScanConfig) -> None:
        self.root = root
        self._scan = scan
        self._graph: DependencyGraph | None = None

    @property
    def graph(self) -> DependencyGraph:
        """Return the graph, scanning and building it on first access."""
        if self._graph is None:
            logger.debug("Scanning %s for %s", self.root, ", ".join(self._scan.patterns))
            self._graph = build_graph(scan_units(self.root, self._scan))
        return self._graph
