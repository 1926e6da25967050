"""Read-only traversals over a :class:`DependencyGraph`.

All walks use an explicit stack of frames instead of recursion, so long
reference chains never approach the interpreter's recursion limit. Each
call owns its own path set and stack; the graph itself is never touched.

* :func:`render_tree` — indented pre-order tree, cycles printed once then cut.
* :func:`render_filtered_tree` — only branches that reach a target, cycles skipped.
* :func:`collect_closure` — transitive dependencies split by kind.
* :func:`find_paths` — every simple path between two nodes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from projdeps.domain.graph import DependencyGraph, Node, sort_key

INDENT = "  "

# visit(node, depth) -> (line to emit or None, children to descend or None)
type _Visit = Callable[[Node, int], tuple[str | None, Iterator[Node] | None]]


@dataclass(slots=True)
class _Frame:
    node: Node
    depth: int
    children: Iterator[Node]


def _depth_first(root: Node, visit: _Visit, path: set[str]) -> Iterator[str]:
    """Drive a pre-order walk, keeping *path* equal to the keys on the stack.

    A node joins *path* only when *visit* returns children for it, and
    leaves it once those children are exhausted.
    """
    stack: list[_Frame] = []
    pending: tuple[Node, int] | None = (root, 0)
    while pending is not None or stack:
        if pending is not None:
            node, depth = pending
            pending = None
            line, children = visit(node, depth)
            if line is not None:
                yield line
            if children is not None:
                path.add(node.key)
                stack.append(_Frame(node, depth, children))
            continue

        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            stack.pop()
            path.discard(frame.node.key)
        else:
            pending = (child, frame.depth + 1)


def render_tree(graph: DependencyGraph, root: Node) -> Iterator[str]:
    """Yield the dependency tree below *root*, two spaces per level.

    A node is printed before the cycle check, so a node that repeats on the
    current path shows up once more and its subtree is cut there.
    """
    path: set[str] = set()

    def visit(node: Node, depth: int) -> tuple[str | None, Iterator[Node] | None]:
        line = INDENT * depth + node.name
        if node.key in path:
            return line, None
        return line, iter(graph.sorted_dependencies(node))

    return _depth_first(root, visit, path)


def render_filtered_tree(graph: DependencyGraph, root: Node, target: Node) -> Iterator[str]:
    """Yield the subtree of *root* restricted to branches that reach *target*.

    Unlike :func:`render_tree`, a node already on the current path is
    skipped silently, before anything is printed.
    """
    path: set[str] = set()

    def visit(node: Node, depth: int) -> tuple[str | None, Iterator[Node] | None]:
        if node.key in path:
            return None, None
        children = (
            child
            for child in graph.sorted_dependencies(node)
            if graph.can_reach(child, target)
        )
        return INDENT * depth + node.name, children

    return _depth_first(root, visit, path)


@dataclass(frozen=True, slots=True)
class Closure:
    """Transitive dependencies of a root, excluding the root itself."""

    projects: list[str]
    packages: list[str]


def collect_closure(graph: DependencyGraph, root: Node) -> Closure:
    """Collect every node reachable from *root*, partitioned by kind.

    The visited set is seeded with the root, so a cycle back to it never
    adds the root to its own closure.
    """
    visited: set[str] = {root.key}
    projects: dict[str, str] = {}
    packages: dict[str, str] = {}

    # Reversed pushes keep the pop order equal to sorted child order.
    stack = list(reversed(graph.sorted_dependencies(root)))
    while stack:
        node = stack.pop()
        if node.key in visited:
            continue
        visited.add(node.key)
        bucket = projects if node.is_project else packages
        bucket.setdefault(node.key, node.name)
        stack.extend(reversed(graph.sorted_dependencies(node)))

    return Closure(
        projects=sorted(projects.values(), key=sort_key),
        packages=sorted(packages.values(), key=sort_key),
    )


def find_paths(graph: DependencyGraph, source: Node, target: Node) -> Iterator[list[str]]:
    """Yield every simple path from *source* to *target* as a list of names.

    Edges are followed in the order they were added to the graph, not
    sorted. A path stops at the first arrival at *target*; reaching the
    target through a parallel edge yields the same path again.
    """
    on_path: set[str] = set()
    names: list[str] = []
    stack: list[_Frame] = []
    pending: Node | None = source
    while pending is not None or stack:
        if pending is not None:
            node, pending = pending, None
            if node.key in on_path:
                continue
            on_path.add(node.key)
            names.append(node.name)
            if node.key == target.key:
                yield list(names)
                children: Iterator[Node] = iter(())
            else:
                children = iter(graph.dependencies(node))
            stack.append(_Frame(node, len(names) - 1, children))
            continue

        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            stack.pop()
            names.pop()
            on_path.discard(frame.node.key)
        else:
            pending = child
