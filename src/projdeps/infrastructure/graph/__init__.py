"""Graph construction and the per-invocation graph engine."""
