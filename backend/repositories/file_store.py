"""
File-based implementation of ItemBackend.
Keeps every item in a single JSON array file under the data directory.
"""

import json
import logging
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class FileBackend:
    """Flat-file persistence: the whole item list, rewritten on every save."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        if not self.path.exists():
            logger.info("Creating empty items file at %s", self.path)
            self._write([])

    def _write(self, data: list) -> None:
        with self._lock:
            tmp = self.path.with_suffix(".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            tmp.replace(self.path)

    def load(self) -> list[dict]:
        with open(self.path, "r", encoding="utf-8") as f:
            raw = f.read()
        data = json.loads(raw or "[]")
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array, ignoring it", self.path)
            return []
        return data

    def save(self, items: list[dict]) -> None:
        self._write(items)

    def close(self) -> None:
        pass
