"""File-backed KeyValueStore: one JSON object mapping keys to string values.

Survives process restarts. Writes go to a sibling temp file and are moved into
place with os.replace, so a reader sees either the old file or the new one.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from contactbook.application.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"cannot read {self._path}: {e}") from e
        if not raw.strip():
            return {}
        try:
            obj = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"{self._path} is not valid JSON: {e}") from e
        if not isinstance(obj, dict):
            raise PersistenceError(f"{self._path} must hold a JSON object")
        return obj

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise PersistenceError(f"value under '{key}' is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("KeyValueStore values must be strings.")
        obj = self._load()
        obj[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(obj, fh)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Write to %s failed: %s", self._path, e)
            raise PersistenceError(f"cannot write {self._path}: {e}") from e
