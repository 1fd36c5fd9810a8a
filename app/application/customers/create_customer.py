"""
Use case: Create a customer with a resolved postal address.

Input: a Customer without an address, and an already validated zip code.
Output: None.
Side effects: One address lookup call, then one persistence write.
Failure cases: AddressNotFoundError, AddressLookupError,
    CustomerPersistenceError. All are propagated unchanged.
"""

import logging

from app.domain.customers.entities import Customer
from app.domain.customers.ports import AddressLookupPort, CustomerPersistencePort

logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    """Orchestrates customer creation.

    Looks the address up first, attaches it to the customer, and only
    then hands the customer to persistence. There is no retry and no
    compensation: a failed save discards the resolved address.
    """

    def __init__(
        self,
        address_lookup: AddressLookupPort,
        customer_persistence: CustomerPersistencePort,
    ) -> None:
        self._address_lookup = address_lookup
        self._customer_persistence = customer_persistence

    def create(self, customer: Customer, zip_code: str) -> None:
        """Run the create customer use case.

        Args:
            customer: The customer to onboard. Its address is overwritten.
            zip_code: Postal code used to resolve the address.

        Raises:
            AddressNotFoundError: If the zip code is unknown.
            AddressLookupError: If the lookup service fails.
            CustomerPersistenceError: If the storage write fails.
        """
        logger.info("Creating customer for zip_code=%s", zip_code)

        address = self._address_lookup.find_by_zip_code(zip_code)
        customer.address = address
        self._customer_persistence.save(customer)

        logger.info("Customer created for zip_code=%s", zip_code)
