"""Adapters – storage (memory, SQLAlchemy) and HTTP (FastAPI) integrations."""
