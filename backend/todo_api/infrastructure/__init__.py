"""Infrastructure Layer — database plumbing, repositories, logging.

Invariants:
    - Only this layer imports SQLAlchemy engines/sessions
    - Repositories implement the Protocols in core/repository_protocols.py
"""
