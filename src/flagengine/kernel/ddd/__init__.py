"""DDD building blocks – public re-export surface."""

from flagengine.kernel.ddd.unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
