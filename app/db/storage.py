import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError
from app.core.config import settings
from app.models.person_model import Person

logger = logging.getLogger(__name__)

class StorageError(Exception):
    """The person collection could not be read or written."""

class PersonRepository(Protocol):
    # Held across a whole load-validate-save sequence (single writer).
    # Services run these sequences on the threadpool, off the event loop.
    lock: threading.RLock

    def load(self) -> list[Person]: ...

    def save(self, persons: list[Person]) -> None: ...

class InMemoryRepository:
    def __init__(self, persons: list[Person] | None = None):
        self.lock = threading.RLock()
        self._persons = [p.model_copy(deep=True) for p in persons or []]

    def load(self) -> list[Person]:
        return [p.model_copy(deep=True) for p in self._persons]

    def save(self, persons: list[Person]) -> None:
        self._persons = [p.model_copy(deep=True) for p in persons]

class JsonFileRepository:
    """Whole collection stored as ``{"persons": [...]}`` in one JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.lock = threading.RLock()

    def load(self) -> list[Person]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error("Error reading family data from %s: %s", self.path, e)
            raise StorageError(f"Cannot read {self.path}") from e
        try:
            data = json.loads(raw)
            records = data.get("persons", [])
            if not isinstance(records, list):
                raise TypeError(f"'persons' must be a list, got {type(records).__name__}")
            return [Person.model_validate(p) for p in records]
        except (ValueError, TypeError, AttributeError, ValidationError) as e:
            logger.error("Malformed family data in %s: %s", self.path, e)
            raise StorageError(f"Malformed data in {self.path}") from e

    def save(self, persons: list[Person]) -> None:
        payload = {"persons": [p.model_dump(mode="json", exclude_none=True) for p in persons]}
        tmp = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target then swap, so readers never see a partial file
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".family-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Error writing family data to %s: %s", self.path, e)
            if tmp and os.path.exists(tmp):
                os.unlink(tmp)
            raise StorageError(f"Cannot write {self.path}") from e

class Store:
    repo: PersonRepository | None = None

store = Store()

async def connect_to_store():
    repo = JsonFileRepository(settings.DATA_FILE)
    logger.info("Using family data file %s", repo.path)
    store.repo = repo
    return repo

async def close_store():
    store.repo = None
