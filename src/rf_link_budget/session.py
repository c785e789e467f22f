"""File-backed sessions keyed by an opaque identifier.

Each session is persisted as ``<directory>/<identifier>.json`` holding the data
mapping and the last-accessed timestamp. Records are rewritten after every
access; there is no locking, so overlapping requests for the same identifier
may race.
"""

from __future__ import annotations

import logging
import os
import re
import time
import uuid
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from .models import SessionRecord

DEFAULT_EXPIRY_SECONDS = 3600.0

# Identifiers become file names, so only a conservative alphabet is accepted.
_IDENTIFIER = re.compile(r"[A-Za-z0-9_-]{1,128}")


def generate_session_id() -> str:
    return str(uuid.uuid4())


def is_valid_identifier(identifier: str) -> bool:
    return bool(_IDENTIFIER.fullmatch(identifier))


class Session:
    """A single client's state plus its persistence hook."""

    def __init__(
        self,
        store: SessionStore,
        identifier: str,
        data: dict[str, str] | None = None,
        last_accessed: float | None = None,
    ) -> None:
        self._store = store
        self._id = identifier
        self.data: dict[str, str] = dict(data or {})
        self.last_accessed = store.now() if last_accessed is None else last_accessed

    @property
    def id(self) -> str:
        return self._id

    def set(self, key: str, value: str) -> None:
        """Store ``value``, refresh the access time and persist immediately."""

        self.data[key] = value
        self.last_accessed = self._store.now()
        self.save()

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the stored value or ``default``.

        A hit also refreshes the access time and persists, so reading a
        session extends its lifetime.
        """

        if key not in self.data:
            return default
        self.last_accessed = self._store.now()
        self.save()
        return self.data[key]

    def is_expired(self) -> bool:
        return self._store.now() - self.last_accessed > self._store.expiry_seconds

    def save(self) -> None:
        self._store.save(self)

    def to_record(self) -> SessionRecord:
        return SessionRecord(data=dict(self.data), last_accessed=self.last_accessed)


class SessionStore:
    """Create, load and persist sessions under a storage root."""

    def __init__(
        self,
        directory: str | Path,
        expiry_seconds: float = DEFAULT_EXPIRY_SECONDS,
        id_factory: Callable[[], str] = generate_session_id,
        clock: Callable[[], float] = time.time,
        logger: logging.Logger | None = None,
    ) -> None:
        self._directory = Path(directory)
        self._expiry_seconds = expiry_seconds
        self._id_factory = id_factory
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def expiry_seconds(self) -> float:
        return self._expiry_seconds

    def now(self) -> float:
        return self._clock()

    def path_for(self, identifier: str) -> Path:
        return self._directory / f"{identifier}.json"

    def ensure_directory(self) -> None:
        self._directory.mkdir(mode=0o700, parents=True, exist_ok=True)

    def open(self, identifier: str | None = None) -> Session:
        """Return the session for ``identifier``, or a new one when it is absent.

        A missing or unreadable record yields a fresh session that keeps the
        supplied identifier. An expired record keeps its identifier and
        timestamp but loses its data. Identifiers that are not safe file names
        are treated as absent.
        """

        self.ensure_directory()
        if not identifier or not is_valid_identifier(identifier):
            session = Session(self, self._id_factory())
            self._logger.debug("session_created", extra={"session_id": session.id})
            return session

        record = self._load(identifier)
        if record is None:
            return Session(self, identifier)
        data = record.data
        if self.now() - record.last_accessed > self._expiry_seconds:
            data = {}
        return Session(self, identifier, data=data, last_accessed=record.last_accessed)

    def save(self, session: Session) -> None:
        self.ensure_directory()
        payload = session.to_record().model_dump_json()
        fd = os.open(self.path_for(session.id), os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)

    def _load(self, identifier: str) -> SessionRecord | None:
        path = self.path_for(identifier)
        if not path.exists():
            return None
        try:
            return SessionRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            self._logger.warning("session_load_failed", extra={"session_id": identifier, "error": str(exc)})
            return None
