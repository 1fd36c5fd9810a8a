"""
Port interfaces (ABCs) for the customers bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.customers.entities import Address, Customer


class AddressLookupPort(ABC):
    """Port for resolving a postal address from a zip code."""

    @abstractmethod
    def find_by_zip_code(self, zip_code: str) -> Address:
        """Return the address registered for a zip code.

        Raises:
            AddressNotFoundError: If the zip code is unknown.
            AddressLookupError: If the lookup service is unavailable.
        """
        raise NotImplementedError


class CustomerPersistencePort(ABC):
    """Port for storing customers."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a customer that already carries an address.

        Raises:
            CustomerPersistenceError: If the storage write fails.
        """
        raise NotImplementedError
