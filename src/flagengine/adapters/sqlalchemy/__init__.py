"""SQLAlchemy adapter – ORM rows, session factory, UoW and flag repository."""
from flagengine.adapters.sqlalchemy.models import Base, FlagRow, OverrideRow
from flagengine.adapters.sqlalchemy.repository import SqlAlchemyFeatureFlagRepository
from flagengine.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from flagengine.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork

__all__ = [
    "Base",
    "FlagRow",
    "OverrideRow",
    "SqlAlchemyFeatureFlagRepository",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
]
