"""
flagengine – Feature flag evaluation service.

Import path convention::

    from flagengine.application.feature_flags import FeatureFlag, FeatureFlagService
    from flagengine.application.cache import CachedFeatureFlagRepository
    from flagengine.adapters.fastapi import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
