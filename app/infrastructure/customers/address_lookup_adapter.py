"""
Adapter: Address lookup over HTTP.

Implements AddressLookupPort against a ViaCEP-style zip code API:

    GET {base_url}/{zip digits}/json/

    200 {"cep": "01001-000", "logradouro": "Praça da Sé",
         "bairro": "Sé", "localidade": "São Paulo", "uf": "SP"}
    200 {"erro": true}              unknown zip code
    400                             zip code rejected by the service
"""

import logging

import httpx

from app.core.config import Settings
from app.domain.customers.entities import Address
from app.domain.customers.errors import AddressLookupError, AddressNotFoundError
from app.domain.customers.ports import AddressLookupPort

logger = logging.getLogger(__name__)

NOT_FOUND_STATUSES = (400, 404)


def build_address_lookup_client(settings: Settings) -> httpx.Client:
    """Build the shared HTTP client for the zip code API."""
    return httpx.Client(
        base_url=settings.address_lookup_base_url,
        timeout=settings.address_lookup_timeout_seconds,
        headers={"Accept": "application/json"},
    )


class HttpAddressLookupAdapter(AddressLookupPort):
    """Resolves addresses by calling the zip code API.

    The client is owned by the caller and must already carry the
    API base URL and timeout.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def find_by_zip_code(self, zip_code: str) -> Address:
        digits = zip_code.replace("-", "")

        try:
            response = self._client.get(f"/{digits}/json/")
        except httpx.HTTPError as exc:
            logger.warning("Zip code API unreachable: %s", type(exc).__name__)
            raise AddressLookupError(zip_code, type(exc).__name__) from exc

        if response.status_code in NOT_FOUND_STATUSES:
            raise AddressNotFoundError(zip_code)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("Zip code API returned HTTP %d", response.status_code)
            raise AddressLookupError(
                zip_code, f"HTTP {response.status_code}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise AddressLookupError(zip_code, "malformed response body") from exc

        if not isinstance(payload, dict):
            raise AddressLookupError(zip_code, "malformed response body")

        # the API answers 200 with {"erro": true} (or "true") for unknown codes
        if payload.get("erro") in (True, "true"):
            raise AddressNotFoundError(zip_code)

        city = payload.get("localidade")
        region = payload.get("uf")
        if not city or not region:
            raise AddressLookupError(zip_code, "response is missing city or region")

        return Address(
            city=city,
            region=region,
            street=payload.get("logradouro") or "",
            neighborhood=payload.get("bairro") or "",
            zip_code=payload.get("cep") or zip_code,
        )
