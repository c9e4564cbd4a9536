"""Todo API Package — ownership-scoped todo and identity services.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Two ASGI apps (main_identity, main_todo) share one package: separate
      deployments, shared error taxonomy and store plumbing
"""
