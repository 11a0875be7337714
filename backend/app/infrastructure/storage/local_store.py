"""Local fallback storage — a JSON snapshot holding the 'umkms' and 'users' collections.

File layout::

    {
      "umkms": [{"id": "1", "name": "...", ..., "created_at": "<ISO-8601>"}, ...],
      "users": [{"id": "u1", "role": "admin", "rw": "05"}, ...]
    }

Collections are kept in memory and written through after every mutating
call. Only one process should use a given file; the last writer wins.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

UMKM_KEY = "umkms"
USER_KEY = "users"


class LocalSnapshotStore:
    """Infrastructure adapter for the JSON snapshot file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self.umkms: list[dict[str, Any]] = []
        self.users: list[dict[str, Any]] = []
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """(Re)read both collections; a missing file means an empty store."""
        if not self._path.exists():
            self.umkms, self.users = [], []
            logger.info("No snapshot at %s — starting with an empty local store", self._path)
            return

        raw = self._path.read_text(encoding="utf-8")
        data = json.loads(raw) if raw.strip() else {}
        self.umkms = list(data.get(UMKM_KEY, []))
        self.users = list(data.get(USER_KEY, []))
        logger.info(
            "Loaded local snapshot %s (%d umkms, %d users)",
            self._path,
            len(self.umkms),
            len(self.users),
        )

    def save(self) -> None:
        """Write both collections back to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {UMKM_KEY: self.umkms, USER_KEY: self.users}

        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        tmp_path.replace(self._path)

        logger.debug(
            "Saved local snapshot %s (%d umkms, %d users)",
            self._path,
            len(self.umkms),
            len(self.users),
        )
