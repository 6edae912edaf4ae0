"""Durable store: the whole prompt collection as one JSON document."""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from .errors import PromptLibError

logger = logging.getLogger(__name__)


class Store(Protocol):
    def load(self, path: Path) -> list[dict]: ...

    def save(self, path: Path, collection: list[dict]) -> None: ...

    def exists(self, path: Path) -> bool: ...


class JsonFileStore:
    """Reads and writes a JSON array of records. Every call hits the disk."""

    def load(self, path: Path) -> list[dict]:
        """Return the records stored at path.

        A missing file is the normal first-run state and yields an empty list.

        Raises:
            StorageError: The file exists but cannot be read or is not a JSON
                array of objects.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("%s not found, starting with an empty collection", path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise PromptLibError.storage_read(path, str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PromptLibError.storage_read(path, str(e)) from e

        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise PromptLibError.storage_read(path, "expected a JSON array of objects")

        logger.debug("Loaded %d records from %s", len(data), path)
        return data

    def save(self, path: Path, collection: list[dict]) -> None:
        """Replace the document at path with collection.

        Writes to a temp file in the same directory and renames it over the
        target, so readers see either the old or the new document.

        Raises:
            StorageError: The directory or file cannot be written.
        """
        path = Path(path)
        temp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_name = temp_file.name
                json.dump(collection, temp_file, indent=2, ensure_ascii=False)
                temp_file.write("\n")
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_name, path)
        except (OSError, TypeError, ValueError) as e:
            if temp_name is not None:
                Path(temp_name).unlink(missing_ok=True)
            raise PromptLibError.storage_write(path, str(e)) from e

        logger.debug("Saved %d records to %s", len(collection), path)

    def exists(self, path: Path) -> bool:
        try:
            return Path(path).exists()
        except OSError:
            return False


class MemoryStore:
    """In-process store with the same contract as JsonFileStore."""

    def __init__(self, documents: dict[Path, list[dict]] | None = None):
        self.documents: dict[Path, list[dict]] = {
            Path(p): copy.deepcopy(c) for p, c in (documents or {}).items()
        }
        self.save_count = 0

    def load(self, path: Path) -> list[dict]:
        return copy.deepcopy(self.documents.get(Path(path), []))

    def save(self, path: Path, collection: list[dict]) -> None:
        self.documents[Path(path)] = copy.deepcopy(collection)
        self.save_count += 1

    def exists(self, path: Path) -> bool:
        return Path(path) in self.documents
