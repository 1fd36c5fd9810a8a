"""
FastAPI router for the customers bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from app.application.customers.create_customer import CreateCustomerUseCase
from app.core.config import settings
from app.interfaces.customers.dependencies import get_create_customer_use_case
from app.interfaces.customers.mappers import to_customer
from app.interfaces.customers.schemas import CreateCustomerRequest, ErrorResponse
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Create a customer",
    description=(
        "Resolve the customer's address from the zip code and store the "
        "customer. Responds with an empty body on success."
    ),
)
@limiter.limit(settings.rate_limit_default)
def create_customer(
    request: Request,
    customer_request: CreateCustomerRequest,
    use_case: CreateCustomerUseCase = Depends(get_create_customer_use_case),
) -> Response:
    """Create a customer from the request body."""
    customer = to_customer(customer_request)
    use_case.create(customer, customer_request.zip_code)
    return Response(status_code=status.HTTP_200_OK)
