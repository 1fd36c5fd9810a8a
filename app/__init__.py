"""
Customer Onboarding — customer creation with zip code address lookup.

Application package root. This is a small service using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - customers: Customer creation, address lookup, customer storage.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases (orchestration).
    - infrastructure: Adapters (SQL store, zip code API) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
