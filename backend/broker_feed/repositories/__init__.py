"""
Repositories package — data-access layer.

Each repository file handles all DB operations for one domain entity.
Repositories do NOT handle HTTP concerns or business logic.

Convention:
    - One file per aggregate root (e.g., broker_documents.py)
    - All functions accept `AsyncSession` as the first argument
    - Use `flush()` internally; callers own commit/rollback
"""
