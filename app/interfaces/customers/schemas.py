"""
Pydantic schemas for customer API request/response validation.

These schemas enforce input validation and define the API contract.
All fields use strict typing with constraints.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field

NAME_MAX_LEN = 120
TAX_ID_PATTERN = r"^[0-9]{1,14}$"
ZIP_CODE_PATTERN = r"^[0-9]{5}(-?[0-9]{3,4})?$"


class CreateCustomerRequest(BaseModel):
    """Request schema for the create customer endpoint.

    Attributes:
        name: Full name of the customer.
        tax_id: Tax identifier, digits only (1-14 chars).
        zip_code: Postal code, e.g. 90210, 90210-1234 or 01001-000.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(
        ..., min_length=1, max_length=NAME_MAX_LEN, description="Customer full name"
    )
    tax_id: str = Field(
        ..., pattern=TAX_ID_PATTERN, description="Tax identifier, digits only"
    )
    zip_code: str = Field(
        ..., pattern=ZIP_CODE_PATTERN, description="Postal code of the customer"
    )


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
