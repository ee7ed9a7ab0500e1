"""In-memory adapter – process-local flag store."""
from flagengine.adapters.memory.repository import InMemoryFeatureFlagRepository

__all__ = ["InMemoryFeatureFlagRepository"]
