"""Infrastructure Layer — persistence adapters, token adapter and cross-cutting concerns.

Invariants:
    - Adapters implement the Protocols in core/repository_protocols.py
    - All database failures mapped to core errors before leaving this layer

Design Decisions:
    - One adapter per protocol; the use case never sees SQLAlchemy types
"""
