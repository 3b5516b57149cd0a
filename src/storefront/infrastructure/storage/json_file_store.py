"""Flat JSON file holding an array of records."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, TypeVar

import filelock

from storefront.domain.exceptions import StorageError
from storefront.infrastructure.config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Records = list[dict[str, Any]]


class JsonFileStore:
    """
    A JSON array of objects persisted in a single file.

    Reads are lenient: a missing, empty or corrupt file reads as an empty
    collection. Writes replace the file atomically. ``update`` runs a
    read-modify-write cycle under an inter-process file lock so concurrent
    writers cannot drop each other's records.
    """

    def __init__(self, path: Path, lock_timeout: float = 10.0):
        self.path = Path(path)
        self.lock = filelock.FileLock(str(self.path) + ".lock", timeout=lock_timeout)

    def read(self) -> Records:
        """Read all records."""
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            if not raw.strip():
                return []
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read {self.path.name}: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"{self.path.name} does not hold a JSON array, ignoring it")
            return []
        return [record for record in data if isinstance(record, dict)]

    def write(self, records: Records) -> None:
        """Replace the file contents with ``records``."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Failed to write {self.path.name}: {e}")
            raise StorageError(f"Unable to write {self.path.name}") from e

    def update(self, mutate: Callable[[Records], T]) -> T:
        """
        Apply ``mutate`` to the records and persist the result atomically.

        Args:
            mutate: Callback receiving the current records list; it changes
                the list in place and may return a value

        Returns:
            Whatever ``mutate`` returned
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.lock:
                records = self.read()
                result = mutate(records)
                self.write(records)
                return result
        except filelock.Timeout as e:
            logger.error(f"Failed to acquire lock for {self.path.name}")
            raise StorageError(f"Timed out waiting for {self.path.name}") from e
        except OSError as e:
            logger.error(f"Failed to prepare {self.path.parent}: {e}")
            raise StorageError(f"Unable to write {self.path.name}") from e

    def append(self, record: dict[str, Any]) -> None:
        """Append one record."""
        self.update(lambda records: records.append(record))
