"""
Dependency injection for the customers bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the customers context.
"""

import logging
from functools import lru_cache

import httpx
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.application.customers.create_customer import CreateCustomerUseCase
from app.core.config import settings
from app.domain.customers.errors import CustomerPersistenceError
from app.infrastructure.customers.address_lookup_adapter import (
    HttpAddressLookupAdapter,
    build_address_lookup_client,
)
from app.infrastructure.customers.customer_repository import (
    SqlCustomerRepositoryAdapter,
)
from app.infrastructure.customers.database import build_engine, ensure_schema

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_database_engine() -> Engine:
    """Build the customer store engine once and make sure the table exists.

    Failures are not cached: the next request tries again.

    Raises:
        CustomerPersistenceError: If the store cannot be reached or the
            schema cannot be created.
    """
    engine = None
    try:
        engine = build_engine(settings.get_database_url())
        ensure_schema(engine)
    except SQLAlchemyError as exc:
        if engine is not None:
            engine.dispose()
        logger.error("Customer store unavailable: %s", type(exc).__name__)
        raise CustomerPersistenceError(type(exc).__name__) from exc
    return engine


@lru_cache(maxsize=1)
def get_address_lookup_client() -> httpx.Client:
    """Build the zip code API client once per process."""
    return build_address_lookup_client(settings)


def close_resources() -> None:
    """Close the shared HTTP client and dispose the engine, if built."""
    if get_address_lookup_client.cache_info().currsize:
        get_address_lookup_client().close()
        get_address_lookup_client.cache_clear()
    if get_database_engine.cache_info().currsize:
        get_database_engine().dispose()
        get_database_engine.cache_clear()
    logger.info("Customer adapters released.")


def get_create_customer_use_case() -> CreateCustomerUseCase:
    """Build CreateCustomerUseCase with its infrastructure dependencies."""
    return CreateCustomerUseCase(
        address_lookup=HttpAddressLookupAdapter(client=get_address_lookup_client()),
        customer_persistence=SqlCustomerRepositoryAdapter(
            engine=get_database_engine()
        ),
    )
