"""
Local Store Module

File-backed key/value storage standing in for browser local storage. Each key
is one document in the storage directory: JSON for single values, JSON Lines
for ordered record sequences.

Example Usage:
    from career_roadmap.utils.local_store import LocalStore

    store = LocalStore(storage_dir="storage")

    store.write_json("courses_v1", [{"id": "c1", "title": "Intro to ML"}])
    courses = store.read_json("courses_v1", default=[])

    store.write_records("career_logs_u-42", entries)
    records = store.read_records("career_logs_u-42")
"""

import json
from pathlib import Path
from typing import Any, Sequence
from urllib.parse import quote

import jsonlines
from pydantic import BaseModel


class LocalStore:
    """Keyed JSON documents in a single directory."""

    def __init__(self, storage_dir: str = "storage"):
        """
        Initialize LocalStore.

        Args:
            storage_dir: Directory path for stored documents (default: "storage")
        """
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def safe_key(key: str) -> str:
        """Percent-encode a key (may embed a user id) into a file stem.

        Distinct keys always map to distinct stems.
        """
        return quote(key, safe="")

    def _path(self, key: str, suffix: str) -> Path:
        return self.storage_dir / f"{self.safe_key(key)}{suffix}"

    def read_json(self, key: str, default: Any = None) -> Any:
        """
        Read a JSON document.

        Args:
            key: Storage key (e.g., "courses_v1")
            default: Value returned when the key is absent

        Returns:
            Parsed JSON value, or default if absent

        Raises:
            IOError: If the document is corrupted or cannot be read
        """
        path = self._path(key, ".json")
        if not path.exists():
            return default

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise IOError(f"Corrupted document {path}: {e}") from e
        except OSError as e:
            raise IOError(f"Failed to read document {path}: {e}") from e

    def write_json(self, key: str, value: Any) -> None:
        """
        Write a JSON document, replacing any previous value.

        Raises:
            IOError: If the document cannot be written
        """
        path = self._path(key, ".json")
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(value, f, indent=2, default=str)
        except Exception as e:
            raise IOError(f"Failed to write document {key}: {e}") from e

    def read_records(self, key: str) -> list[Any]:
        """
        Read an ordered JSON Lines record sequence.

        Args:
            key: Storage key (e.g., "career_logs_u-42")

        Returns:
            Records in file order. Empty list if the key is absent.

        Raises:
            IOError: If the file is corrupted or cannot be read
        """
        path = self._path(key, ".jsonl")
        if not path.exists():
            return []

        try:
            with jsonlines.open(path) as reader:
                return list(reader)
        except jsonlines.InvalidLineError as e:
            raise IOError(f"Corrupted record file {path}: {e}") from e
        except Exception as e:
            raise IOError(f"Failed to read record file {path}: {e}") from e

    def write_records(self, key: str, records: Sequence[BaseModel]) -> None:
        """
        Rewrite a JSON Lines record sequence.

        Args:
            key: Storage key
            records: Pydantic models, written in order

        Raises:
            IOError: If the file cannot be written
        """
        path = self._path(key, ".jsonl")
        try:
            with jsonlines.open(path, mode="w") as writer:
                for record in records:
                    writer.write(record.model_dump(mode="json"))
        except Exception as e:
            raise IOError(f"Failed to write records for {key}: {e}") from e
