"""
Tests for the customers API endpoints.

Tests FastAPI routes with the use case wired to fake ports.
Validates request validation, response shape, and error mapping.
"""

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from app.application.customers.create_customer import CreateCustomerUseCase
from app.core.config import settings
from app.domain.customers.entities import Address, Customer
from app.domain.customers.errors import (
    AddressLookupError,
    AddressNotFoundError,
    CustomerPersistenceError,
    MissingAddressError,
)
from app.domain.customers.ports import AddressLookupPort, CustomerPersistencePort
from app.infrastructure.customers.database import build_engine, customers_table
from app.interfaces.customers import dependencies
from app.interfaces.customers.dependencies import (
    get_address_lookup_client,
    get_create_customer_use_case,
    get_database_engine,
)
from app.main import app
from app.shared.security.headers import SECURE_HEADERS
from app.shared.security.rate_limiting import limiter

CUSTOMERS_URL = "/api/v1/customers"
VALID_BODY = {"name": "Alice", "tax_id": "123", "zip_code": "90210"}


class StubAddressLookup(AddressLookupPort):
    def __init__(self) -> None:
        self.error: Exception | None = None
        self.calls: list[str] = []

    def find_by_zip_code(self, zip_code: str) -> Address:
        self.calls.append(zip_code)
        if self.error is not None:
            raise self.error
        return Address(city="Beverly Hills", region="CA", zip_code=zip_code)


class StubCustomerPersistence(CustomerPersistencePort):
    def __init__(self) -> None:
        self.error: Exception | None = None
        self.saved: list[Customer] = []

    def save(self, customer: Customer) -> None:
        if self.error is not None:
            raise self.error
        self.saved.append(customer)


@pytest.fixture
def lookup() -> StubAddressLookup:
    return StubAddressLookup()


@pytest.fixture
def persistence() -> StubCustomerPersistence:
    return StubCustomerPersistence()


@pytest.fixture
def client(lookup, persistence):
    app.dependency_overrides[get_create_customer_use_case] = (
        lambda: CreateCustomerUseCase(lookup, persistence)
    )
    limiter.reset()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    limiter.reset()


class TestCreateCustomerEndpoint:
    """Tests for POST /api/v1/customers."""

    def test_valid_request_returns_empty_200(self, client, lookup, persistence) -> None:
        response = client.post(CUSTOMERS_URL, json=VALID_BODY)

        assert response.status_code == 200
        assert response.content == b""
        assert lookup.calls == ["90210"]
        assert len(persistence.saved) == 1
        saved = persistence.saved[0]
        assert (saved.name, saved.tax_id) == ("Alice", "123")
        assert saved.address.city == "Beverly Hills"
        assert saved.address.region == "CA"

    @pytest.mark.parametrize("zip_code", ["90210-1234", "01001-000", "01001000"])
    def test_accepts_zip_code_variants(self, client, lookup, zip_code) -> None:
        response = client.post(CUSTOMERS_URL, json={**VALID_BODY, "zip_code": zip_code})

        assert response.status_code == 200
        assert lookup.calls == [zip_code]

    def test_name_is_stripped(self, client, persistence) -> None:
        client.post(CUSTOMERS_URL, json={**VALID_BODY, "name": "  Alice  "})

        assert persistence.saved[0].name == "Alice"

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "Alice", "tax_id": "123"},
            {"name": "Alice", "zip_code": "90210"},
            {"tax_id": "123", "zip_code": "90210"},
            {**VALID_BODY, "zip_code": "ABCDE"},
            {**VALID_BODY, "zip_code": "902"},
            {**VALID_BODY, "zip_code": ""},
            {**VALID_BODY, "tax_id": "12a"},
            {**VALID_BODY, "tax_id": ""},
            {**VALID_BODY, "name": "   "},
            {**VALID_BODY, "name": "x" * 121},
            {**VALID_BODY, "nickname": "Al"},
        ],
    )
    def test_malformed_request_rejected_before_use_case(
        self, client, lookup, persistence, body
    ) -> None:
        response = client.post(CUSTOMERS_URL, json=body)

        assert response.status_code == 422
        assert response.json()["error"] == "Invalid request"
        assert lookup.calls == []
        assert persistence.saved == []

    def test_validation_detail_does_not_echo_input(self, client) -> None:
        response = client.post(CUSTOMERS_URL, json={**VALID_BODY, "tax_id": "SECRET99"})

        assert "zip_code" not in response.json()["detail"]
        assert "tax_id" in response.json()["detail"]
        assert "SECRET99" not in response.text

    def test_unknown_zip_code_returns_404(self, client, lookup, persistence) -> None:
        lookup.error = AddressNotFoundError("00000")

        response = client.post(CUSTOMERS_URL, json={**VALID_BODY, "zip_code": "00000"})

        assert response.status_code == 404
        assert response.json() == {"error": "Address not found"}
        assert persistence.saved == []

    def test_lookup_failure_returns_502(self, client, lookup, persistence) -> None:
        lookup.error = AddressLookupError("90210", "ConnectTimeout")

        response = client.post(CUSTOMERS_URL, json=VALID_BODY)

        assert response.status_code == 502
        assert response.json() == {"error": "Address lookup failed"}
        assert persistence.saved == []

    def test_persistence_failure_returns_503(self, client, lookup, persistence) -> None:
        persistence.error = CustomerPersistenceError("OperationalError")

        response = client.post(CUSTOMERS_URL, json=VALID_BODY)

        assert response.status_code == 503
        assert response.json() == {"error": "Customer could not be saved"}
        assert lookup.calls == ["90210"]

    def test_other_domain_errors_return_500(self, client, persistence) -> None:
        persistence.error = MissingAddressError()

        response = client.post(CUSTOMERS_URL, json=VALID_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unexpected_errors_return_500_without_internals(
        self, client, persistence
    ) -> None:
        persistence.error = RuntimeError("db password is hunter2")

        response = client.post(CUSTOMERS_URL, json=VALID_BODY)

        assert response.status_code == 500
        assert "hunter2" not in response.text


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health_returns_version(self, client) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": settings.version}


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client) -> None:
        response = client.get("/api/v1/health")

        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_error_responses(self, client) -> None:
        response = client.post(CUSTOMERS_URL, json={})

        assert response.status_code == 422
        assert response.headers["X-Frame-Options"] == "DENY"


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, client) -> None:
        statuses = [
            client.post(CUSTOMERS_URL, json=VALID_BODY).status_code
            for _ in range(100)
        ]

        assert 429 in statuses
        first_limited = statuses.index(429)
        assert set(statuses[:first_limited]) == {200}

        response = client.post(CUSTOMERS_URL, json=VALID_BODY)
        assert response.status_code == 429
        assert response.json()["error"] == "Rate limit exceeded"


@pytest.fixture
def zip_api_paths(monkeypatch) -> list[str]:
    """Serve the zip code API from a MockTransport; returns requested paths."""
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json={"localidade": "Beverly Hills", "uf": "CA"})

    monkeypatch.setattr(
        dependencies,
        "build_address_lookup_client",
        lambda _settings: httpx.Client(
            base_url="https://zip.test/ws", transport=httpx.MockTransport(handler)
        ),
    )
    return paths


@pytest.fixture
def use_database(monkeypatch):
    """Point the composition root at a given database URL with empty caches."""
    dependencies.close_resources()
    limiter.reset()

    def _use(database_url: str) -> None:
        monkeypatch.setattr(settings, "database_url", database_url)

    yield _use
    dependencies.close_resources()
    limiter.reset()


class TestCompositionRoot:
    """End-to-end tests through the real adapter wiring."""

    def test_creates_customer_through_real_adapters(
        self, tmp_path, zip_api_paths, use_database
    ) -> None:
        database_url = f"sqlite:///{tmp_path / 'customers.db'}"
        use_database(database_url)

        with TestClient(app) as client:
            response = client.post(CUSTOMERS_URL, json=VALID_BODY)

            assert response.status_code == 200
            assert response.content == b""
            assert get_database_engine.cache_info().currsize == 1
            assert get_address_lookup_client.cache_info().currsize == 1

        assert get_database_engine.cache_info().currsize == 0
        assert get_address_lookup_client.cache_info().currsize == 0
        assert zip_api_paths == ["/ws/90210/json/"]

        engine = build_engine(database_url)
        with engine.connect() as conn:
            rows = conn.execute(select(customers_table)).mappings().all()
        engine.dispose()

        assert len(rows) == 1
        assert rows[0]["name"] == "Alice"
        assert rows[0]["tax_id"] == "123"
        assert rows[0]["address"]["city"] == "Beverly Hills"
        assert rows[0]["address"]["region"] == "CA"

    def test_unreachable_store_returns_503(
        self, tmp_path, zip_api_paths, use_database
    ) -> None:
        use_database(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'customers.db'}")

        with TestClient(app, raise_server_exceptions=False) as client:
            first = client.post(CUSTOMERS_URL, json=VALID_BODY)
            second = client.post(CUSTOMERS_URL, json=VALID_BODY)

            assert get_database_engine.cache_info().currsize == 0

        assert first.status_code == 503
        assert first.json() == {"error": "Customer could not be saved"}
        assert second.status_code == 503
        assert zip_api_paths == []
