"""
SampleWeb: Forecast API built around typed operation results.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - weather: Placeholder forecast lookup by postal code.

Layers:
    - domain: Result type, entities, errors, domain services.
    - application: Use cases, DTOs, request validation.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (result translation, security, logging).
"""
