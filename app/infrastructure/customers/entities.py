"""
Storage records for the customers bounded context.

CustomerEntity mirrors the domain Customer plus storage-only fields.
It is built fresh for every save and discarded after the write.
"""

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from app.domain.customers.entities import Customer
from app.domain.customers.errors import MissingAddressError


@dataclass(frozen=True)
class CustomerEntity:
    """A customer document as written to the store."""

    id: str
    name: str
    tax_id: str
    address: dict[str, Any]
    created_at: datetime


def to_customer_entity(customer: Customer) -> CustomerEntity:
    """Copy a domain customer into a new storage record.

    Args:
        customer: A customer with its address attached.

    Returns:
        A CustomerEntity with a freshly generated id.

    Raises:
        MissingAddressError: If the customer has no address.
    """
    if customer.address is None:
        raise MissingAddressError()

    return CustomerEntity(
        id=str(uuid4()),
        name=customer.name,
        tax_id=customer.tax_id,
        address=asdict(customer.address),
        created_at=datetime.now(timezone.utc),
    )
