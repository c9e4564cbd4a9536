"""Services Layer — the two resource services.

Invariants:
    - Services depend on repository Protocols, never on SQLAlchemy
    - Services raise TodoApiError subclasses; HTTP mapping happens in api/

Design Decisions:
    - One class per entity type, constructed once per app in the lifespan
"""
