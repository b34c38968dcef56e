"""
Dynamo Users — CRUD HTTP service for a single user resource.

Application package root. Hexagonal architecture (ports & adapters):

Layers:
    - domain: User entity, input rules, repository port (ABC), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: DynamoDB client, record mapper and repository adapter.
    - interfaces: FastAPI routers, Pydantic schemas, static index page.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
