"""Persistence for finished game sessions."""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from pydantic import ValidationError

from boxlax_tracker.storage.records import SessionRecord
from boxlax_tracker.tracking.models import GameSession

logger = logging.getLogger(__name__)

_SESSIONS_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS game_sessions (
      session_id TEXT PRIMARY KEY,
      position INTEGER NOT NULL,
      opponent TEXT,
      finalized_at REAL NOT NULL,
      payload_json TEXT NOT NULL,
      saved_at TEXT NOT NULL
    );
    """,
    "CREATE INDEX IF NOT EXISTS idx_sessions_position ON game_sessions(position);",
)


def _unique_by_id(sessions: Iterable[GameSession]) -> List[GameSession]:
    """Keep the first session for each id, preserving order."""

    seen = set()
    unique: List[GameSession] = []
    for session in sessions:
        if session.id in seen:
            logger.warning("dropping duplicate session %s", session.id)
            continue
        seen.add(session.id)
        unique.append(session)
    return unique


class SessionRepository(ABC):
    """Stores the ordered list of finished sessions (most recent first)."""

    @abstractmethod
    def load_all(self) -> List[GameSession]:
        """Return every stored session; an unreadable store yields ``[]``."""

    @abstractmethod
    def save_all(self, sessions: Sequence[GameSession]) -> None:
        """Replace the stored list with ``sessions``, keeping their order.

        Ids are unique in the store; a repeated id keeps its first entry.
        """

    def add(self, session: GameSession) -> List[GameSession]:
        """Put ``session`` at the top of the history and persist it."""

        sessions = [existing for existing in self.load_all() if existing.id != session.id]
        sessions.insert(0, session)
        self.save_all(sessions)
        return sessions

    def get(self, session_id: str) -> Optional[GameSession]:
        for session in self.load_all():
            if session.id == session_id:
                return session
        return None


class InMemorySessionRepository(SessionRepository):
    """Keeps serialised sessions in memory; useful for tests and dry runs."""

    def __init__(self, sessions: Iterable[GameSession] = ()) -> None:
        self._payloads: List[str] = []
        self.save_all(list(sessions))

    def load_all(self) -> List[GameSession]:
        try:
            return [SessionRecord.model_validate_json(payload).to_session() for payload in self._payloads]
        except ValidationError as exc:
            logger.warning("stored sessions could not be parsed: %s", exc)
            return []

    def save_all(self, sessions: Sequence[GameSession]) -> None:
        self._payloads = [
            SessionRecord.from_session(session).model_dump_json() for session in _unique_by_id(sessions)
        ]


class SQLiteSessionRepository(SessionRepository):
    """Sessions stored as validated JSON documents in a SQLite table."""

    def __init__(self, db_path: Union[str, Path]) -> None:
        self._db_path = Path(db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(self._db_path)
        connection.row_factory = sqlite3.Row
        try:
            for statement in _SESSIONS_SCHEMA:
                connection.execute(statement)
            yield connection
        finally:
            connection.close()

    def load_all(self) -> List[GameSession]:
        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT session_id, payload_json FROM game_sessions ORDER BY position ASC"
                ).fetchall()
        except (sqlite3.Error, OSError) as exc:
            logger.warning("could not read session history from %s: %s", self._db_path, exc)
            return []

        sessions: List[GameSession] = []
        for row in rows:
            try:
                sessions.append(SessionRecord.model_validate_json(row["payload_json"]).to_session())
            except (ValidationError, ValueError) as exc:
                logger.warning("session %s could not be parsed; starting with empty history: %s", row["session_id"], exc)
                return []
        return sessions

    def save_all(self, sessions: Sequence[GameSession]) -> None:
        saved_at = datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
        records = [SessionRecord.from_session(session) for session in _unique_by_id(sessions)]
        with self._connect() as conn:
            with conn:
                conn.execute("DELETE FROM game_sessions")
                conn.executemany(
                    """
                    INSERT INTO game_sessions (
                      session_id, position, opponent, finalized_at, payload_json, saved_at
                    ) VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            record.id,
                            position,
                            record.metadata.opponent,
                            record.timestamp,
                            record.model_dump_json(),
                            saved_at,
                        )
                        for position, record in enumerate(records)
                    ],
                )
        logger.info("saved %s sessions to %s", len(records), self._db_path)
