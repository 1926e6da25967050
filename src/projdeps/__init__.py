"""projdeps — project and package dependency graph queries."""

__version__ = "0.1.0"
