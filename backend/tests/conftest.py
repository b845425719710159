"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or use a real signing secret
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("JWT_SECRET", "test-only-signing-secret")
os.environ.setdefault("LOG_FORMAT", "text")
