"""Flat-file JSON datastore holding every user, board, and task.

The whole document is read on each access and rewritten in full on each
save. There is no caching layer: callers own the loaded `Document` for the
duration of one request.

Writers go through `JsonDatastore.transaction()`, which serializes the
load-mutate-save sequence per file path inside this process. Multiple
processes sharing one file are not coordinated.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from taskboard.core.config import settings
from taskboard.core.logging import get_logger
from taskboard.models.boards import Board
from taskboard.models.document import Document
from taskboard.models.tasks import Task
from taskboard.models.users import User

if TYPE_CHECKING:
    from collections.abc import Iterator

    from taskboard.models.base import StoredModel

logger = get_logger(__name__)
RECORD_MODELS: dict[str, type[StoredModel]] = {"users": User, "boards": Board, "tasks": Task}

_locks_guard = threading.Lock()
_locks: dict[Path, threading.Lock] = {}


class StorageUnavailableError(RuntimeError):
    """Raised when the datastore file cannot be read for an update or written."""


def _lock_for(path: Path) -> threading.Lock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = threading.Lock()
            _locks[path] = lock
        return lock


def _counts(doc: Document) -> str:
    return f"users={len(doc.users)} boards={len(doc.boards)} tasks={len(doc.tasks)}"


def parse_document(text: str) -> Document | None:
    """Parse raw file contents, returning `None` when they are not a JSON object.

    Collections that are present but not lists are replaced by empty lists.
    A record that fails validation is set aside on the document and written
    back unchanged on the next save; it never invalidates its neighbours.
    """
    try:
        raw = json.loads(text)
    except ValueError:
        return None
    if not isinstance(raw, dict):
        return None
    doc = Document()
    for key, model in RECORD_MODELS.items():
        records = raw.get(key)
        if not isinstance(records, list):
            continue
        valid = []
        for index, record in enumerate(records):
            try:
                valid.append(model.model_validate(record))
            except ValidationError as exc:
                logger.warning(
                    "store.load.record_unreadable collection=%s index=%s errors=%s",
                    key,
                    index,
                    exc.error_count(),
                )
                doc.keep_unreadable(key, record)
        setattr(doc, key, valid)
    return doc


class JsonDatastore:
    """Load and persist the single JSON document at `path`."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).resolve()
        self._lock = _lock_for(self.path)

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._write(Document())
        logger.info("store.file.created path=%s", self.path)

    def _write(self, doc: Document) -> None:
        text = json.dumps(doc.to_storage(), indent=2)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _read(self) -> Document:
        self._ensure_file()
        text = self.path.read_text(encoding="utf-8")
        doc = parse_document(text)
        if doc is None:
            logger.warning("store.load.recovered path=%s reason=unparsable", self.path)
            return Document()
        logger.debug("store.load path=%s %s", self.path, _counts(doc))
        return doc

    def load(self) -> Document:
        """Read the document, recovering an empty one when the file is unusable."""
        try:
            return self._read()
        except OSError:
            logger.exception("store.load.failed path=%s", self.path)
            return Document()

    def save(self, doc: Document) -> None:
        """Overwrite the file with `doc` in full."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write(doc)
        except OSError as exc:
            logger.exception("store.save.failed path=%s", self.path)
            raise StorageUnavailableError(str(self.path)) from exc
        logger.debug("store.save path=%s %s", self.path, _counts(doc))

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield the current document and save it if the block succeeds.

        A file that cannot be read raises `StorageUnavailableError` here
        rather than being replaced by an empty document.
        """
        with self._lock:
            try:
                doc = self._read()
            except OSError as exc:
                logger.exception("store.load.failed path=%s", self.path)
                raise StorageUnavailableError(str(self.path)) from exc
            yield doc
            self.save(doc)

    def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self.load().users if u.username == username), None)

    def get_boards_by_user_id(self, user_id: str) -> list[Board]:
        return [b for b in self.load().boards if b.user_id == user_id]

    def get_tasks_by_board_id(self, board_id: str) -> list[Task]:
        return [t for t in self.load().tasks if t.board_id == board_id]


@lru_cache(maxsize=1)
def _default_datastore() -> JsonDatastore:
    return JsonDatastore(settings.data_file)


def get_datastore() -> JsonDatastore:
    """FastAPI dependency returning the configured datastore."""
    return _default_datastore()
