"""Testing support – fakes for the flag repository port and the clock."""

from flagengine.testing.fakes import FakeClock, SpyFeatureFlagRepository

__all__ = ["FakeClock", "SpyFeatureFlagRepository"]
