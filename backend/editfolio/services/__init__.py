"""Services Layer — use cases orchestrating entities, repositories and adapters.

Invariants:
    - Use cases depend on core Protocols, never on concrete adapters
    - Multi-entity writes that must be atomic run inside one repository transaction

Design Decisions:
    - One use-case class per aggregate (UserUseCase owns User + Manager)
"""
