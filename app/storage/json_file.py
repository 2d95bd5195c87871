import json
import logging
import os
import threading
from typing import Dict, List, Optional

from app.schemas.strings import StringRecord
from app.storage.base import DuplicateRecordError

logger = logging.getLogger(__name__)

# Shared by every store instance in the process; reads and writes of the
# file happen under it.
_lock = threading.Lock()


class JsonFileStore:
    """
    String store that keeps the whole catalog as a JSON list in one file.

    A missing, empty or unreadable file is treated as an empty catalog.
    """

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> List[Dict]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
            rows = json.loads(content or "[]")
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}, starting from an empty catalog: {e}")
            return []
        if not isinstance(rows, list):
            logger.warning(f"{self.path} does not hold a list, starting from an empty catalog")
            return []
        return rows

    def _write(self, rows: List[Dict]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2, ensure_ascii=False)

    def insert(self, record: StringRecord) -> None:
        with _lock:
            rows = self._read()
            if any(row.get("id") == record.id for row in rows):
                raise DuplicateRecordError(record.id)
            rows.append(record.model_dump(mode="json"))
            self._write(rows)

    def find_by_id(self, record_id: str) -> Optional[StringRecord]:
        with _lock:
            rows = self._read()
        for row in rows:
            if row.get("id") == record_id:
                return StringRecord.model_validate(row)
        return None

    def find_by_value(self, value: str) -> Optional[StringRecord]:
        with _lock:
            rows = self._read()
        for row in rows:
            if row.get("value") == value:
                return StringRecord.model_validate(row)
        return None

    def all(self) -> List[StringRecord]:
        with _lock:
            rows = self._read()
        return [StringRecord.model_validate(row) for row in rows]

    def remove_by_value(self, value: str) -> bool:
        with _lock:
            rows = self._read()
            kept = [row for row in rows if row.get("value") != value]
            if len(kept) == len(rows):
                return False
            self._write(kept)
        return True
