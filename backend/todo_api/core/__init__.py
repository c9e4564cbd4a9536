"""Core Layer — domain types, error taxonomy, credential hashing, store contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO: hashing is CPU-only, persistence is reached through Protocols

Design Decisions:
    - Functional core separated from imperative shell
"""
