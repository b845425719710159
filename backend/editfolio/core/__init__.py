"""Core Layer — domain types, errors and contracts. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure (credential hashing is the one salted, non-deterministic exception)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
