"""
Request-to-domain mapping for the customers API.

The zip code is not part of the Customer; the router passes it to
the use case separately.
"""

from app.domain.customers.entities import Customer
from app.interfaces.customers.schemas import CreateCustomerRequest


def to_customer(request: CreateCustomerRequest) -> Customer:
    """Build an address-less domain Customer from a validated request."""
    return Customer(name=request.name, tax_id=request.tax_id)
