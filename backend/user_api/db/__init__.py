"""Database Metadata: SQLAlchemy declarative Base shared by ORM models and alembic."""
