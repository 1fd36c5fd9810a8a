"""
Database engine and table definitions for the customer store.

Customers are stored as documents: scalar identity fields plus the
address as a JSON column, so the same schema works on PostgreSQL
and on SQLite.
"""

import logging

from sqlalchemy import JSON, Column, DateTime, MetaData, String, Table, create_engine
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

metadata = MetaData()

customers_table = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(120), nullable=False),
    Column("tax_id", String(14), nullable=False),
    Column("address", JSON, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the customer store."""
    return create_engine(database_url, pool_pre_ping=True)


def ensure_schema(engine: Engine) -> None:
    """Create the customers table if it does not exist yet."""
    metadata.create_all(engine, checkfirst=True)
    logger.debug("Customer schema ensured on %s", engine.url.get_backend_name())
