"""Session history persistence."""

from boxlax_tracker.storage.records import SessionRecord, ShotRecord
from boxlax_tracker.storage.repository import (
    InMemorySessionRepository,
    SessionRepository,
    SQLiteSessionRepository,
)

__all__ = [
    "SessionRecord",
    "ShotRecord",
    "InMemorySessionRepository",
    "SessionRepository",
    "SQLiteSessionRepository",
]
