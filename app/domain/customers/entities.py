"""
Domain entities for the customers bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Address:
    """A postal address resolved from a zip code.

    Immutable once built. Owned by a single Customer after attachment.
    """

    city: str
    region: str
    street: str = ""
    neighborhood: str = ""
    zip_code: str = ""


@dataclass
class Customer:
    """A person being onboarded.

    Built without an address by the request handler. The address is
    attached exactly once, by the create customer use case, before the
    customer is handed to persistence.
    """

    name: str
    tax_id: str
    address: Optional[Address] = None
