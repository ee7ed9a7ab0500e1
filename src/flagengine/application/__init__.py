"""Application layer – feature flag use cases and the cached repository."""
