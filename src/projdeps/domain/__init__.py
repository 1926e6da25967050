"""Domain layer — node types, the dependency graph, and traversals.

This layer depends only on stdlib, pydantic, and networkx.
It must never import from services, infrastructure, commands, or config.
"""
