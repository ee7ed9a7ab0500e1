"""Testing fakes – doubles for kernel and application ports."""
from flagengine.testing.fakes.clock import FakeClock
from flagengine.testing.fakes.repository import SpyFeatureFlagRepository

__all__ = ["FakeClock", "SpyFeatureFlagRepository"]
