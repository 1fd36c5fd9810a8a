"""
Adapter: Customer repository.

Implements CustomerPersistencePort.
Writes customer documents to the SQL store through SQLAlchemy.
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.domain.customers.entities import Customer
from app.domain.customers.errors import CustomerPersistenceError
from app.domain.customers.ports import CustomerPersistencePort
from app.infrastructure.customers.database import customers_table
from app.infrastructure.customers.entities import to_customer_entity

logger = logging.getLogger(__name__)


class SqlCustomerRepositoryAdapter(CustomerPersistencePort):
    """Persists customers to the customers table.

    The generated record id stays in the store; it is not written
    back into the domain customer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, customer: Customer) -> None:
        """Insert a customer as a new document.

        Args:
            customer: A customer with its address attached.

        Raises:
            CustomerPersistenceError: If the insert fails.
        """
        entity = to_customer_entity(customer)

        try:
            with self._engine.begin() as conn:
                conn.execute(
                    customers_table.insert().values(
                        id=entity.id,
                        name=entity.name,
                        tax_id=entity.tax_id,
                        address=entity.address,
                        created_at=entity.created_at,
                    )
                )
        except SQLAlchemyError as exc:
            logger.error("Customer insert failed: %s", type(exc).__name__)
            raise CustomerPersistenceError(type(exc).__name__) from exc

        logger.debug("Saved customer id=%s.", entity.id)
