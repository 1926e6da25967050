"""Infrastructure layer — file scanning, project-file parsing, graph build.

May import from domain and config. Must never import from services,
commands, or output.
"""
