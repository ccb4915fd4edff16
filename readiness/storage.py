from __future__ import annotations

"""Persisted form slot.

A single named JSON document holds the whole form state between sessions.
Reads fail open: a missing, unreadable or malformed slot is reported as "no
saved state" so a corrupted file can never break the form. Writes overwrite
the whole document.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import StorageError

logger = logging.getLogger(__name__)


class LocalStateStorage:
    """JSON file backed storage slot."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
            data = json.loads(text)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Discarding unreadable saved form state at %s: %s", self.path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Discarding saved form state at %s: expected an object, got %s", self.path, type(data).__name__)
            return None
        return data

    def write(self, state: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(state, f, ensure_ascii=False, indent=2)
                os.replace(tmp, self.path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except OSError as exc:
            logger.error("Failed to save form state to %s: %s", self.path, exc)
            raise StorageError(f"Failed to save form state: {exc}") from exc

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass


class MemoryStateStorage:
    """In-process slot with the same contract, used by tests and the CLI."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._payload: Optional[str] = json.dumps(initial) if initial is not None else None
        self.writes = 0

    def read(self) -> Optional[Dict[str, Any]]:
        if self._payload is None:
            return None
        try:
            data = json.loads(self._payload)
        except json.JSONDecodeError:
            return None
        return data if isinstance(data, dict) else None

    def write(self, state: Dict[str, Any]) -> None:
        self._payload = json.dumps(state, ensure_ascii=False)
        self.writes += 1

    def clear(self) -> None:
        self._payload = None


__all__ = ["LocalStateStorage", "MemoryStateStorage"]
