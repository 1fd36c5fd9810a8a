"""
Domain-specific errors for the customers bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CustomerDomainError(Exception):
    """Base error for all customer domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class AddressNotFoundError(CustomerDomainError):
    """Raised when no address is known for a zip code."""

    def __init__(self, zip_code: str) -> None:
        super().__init__(f"Address not found for zip code: {zip_code}")
        self.zip_code = zip_code


class AddressLookupError(CustomerDomainError):
    """Raised when the address lookup service cannot answer."""

    def __init__(self, zip_code: str, reason: str) -> None:
        super().__init__(f"Address lookup failed for zip code {zip_code}: {reason}")
        self.zip_code = zip_code
        self.reason = reason


class CustomerPersistenceError(CustomerDomainError):
    """Raised when the customer record cannot be written."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Customer persistence failed: {reason}")
        self.reason = reason


class MissingAddressError(CustomerDomainError):
    """Raised when a customer without an address reaches persistence."""

    def __init__(self) -> None:
        super().__init__("Customer has no address attached")
