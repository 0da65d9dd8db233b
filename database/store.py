"""Key-value stores backing the round history.

A store maps string keys to string values and replaces a value as a whole on
every write, so readers never observe a partially written collection.
"""

import errno
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from database.exceptions import CapacityError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal persistent key-value slot, modelled on browser localStorage."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


def _check_quota(quota_bytes: Optional[int], used: int, key: str, value: str) -> None:
    if not quota_bytes:
        return
    needed = used + len(value.encode("utf-8"))
    if needed > quota_bytes:
        raise CapacityError(
            f"Writing '{key}' needs {needed} bytes, store quota is {quota_bytes}"
        )


class MemoryStore:
    """In-process store. Used by tests and ephemeral sessions."""

    def __init__(self, quota_bytes: Optional[int] = None):
        self._data: Dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        used = sum(len(v.encode("utf-8")) for k, v in self._data.items() if k != key)
        _check_quota(self._quota_bytes, used, key, value)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileStore:
    """One file per key inside a directory.

    Writes go to a temporary file in the same directory and are moved into
    place with os.replace, which is atomic on POSIX and Windows.
    """

    SUFFIX = ".json"

    def __init__(self, directory: Union[str, Path], quota_bytes: Optional[int] = None):
        self.directory = Path(directory)
        self._quota_bytes = quota_bytes

    def _path(self, key: str) -> Path:
        safe = "".join(c if c.isalnum() or c in "-_." else "_" for c in key)
        return self.directory / f"{safe}{self.SUFFIX}"

    def _used_bytes(self, excluding: Path) -> int:
        if not self.directory.exists():
            return 0
        return sum(
            p.stat().st_size
            for p in self.directory.glob(f"*{self.SUFFIX}")
            if p != excluding
        )

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        _check_quota(self._quota_bytes, self._used_bytes(path), key, value)
        self.directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-", suffix=self.SUFFIX)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except OSError as exc:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            if exc.errno in (errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)):
                raise CapacityError(f"No space left writing '{key}'") from exc
            raise
        logger.debug("Wrote %d bytes to %s", len(value), path)

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
