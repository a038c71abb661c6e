"""Key-value storage backends.

The task store only needs `load(key)` and `save(key, value)` with string
values. Any object with those two methods can be injected; the backends here
cover tests (memory), a single-user data file (JSON) and SQL databases
(see `tasktrack.storage.database`).
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Storage capability injected into the task store."""

    def load(self, key: str) -> Optional[str]:
        ...

    def save(self, key: str, value: str) -> None:
        ...


class MemoryKeyValueStore:
    """Dict-backed store; contents are lost with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileKeyValueStore:
    """All keys in one JSON object file.

    Writes go to a temp file in the same directory and are moved into place
    with `os.replace`, so a crash mid-write never leaves a truncated file.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except ValueError:
                logger.warning(f"Data file {self.path} is not valid JSON; treating as empty")
                return {}
        if not isinstance(data, dict):
            logger.warning(f"Data file {self.path} does not hold a JSON object; treating as empty")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def load(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def save(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug(f"Saved key {key} to {self.path} ({len(value)} chars)")
