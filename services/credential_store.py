# /services/credential_store.py
# Persists the API key typed into the UI so it is prefilled on the next visit.
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

API_KEY = "apiKey"


class CredentialStore:
    """A single string kept under a fixed key in a small JSON key-value file."""

    def __init__(self, path: str | Path, key: str = API_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable credential store %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> Optional[str]:
        value = self._load().get(self.key)
        return value if isinstance(value, str) else None

    def set(self, value: str) -> None:
        data = self._load()
        data[self.key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")
