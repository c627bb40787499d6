"""Key/value persistence for score and opinion collections.

Values are stored as serialized JSON strings under fixed keys, the same
shape browser local storage uses, in a single JSON file on disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .models import Opinion, StudentScore

SCORES_KEY = "student_scores"
OPINIONS_KEY = "opinions"

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when stored data cannot be read back."""


class LocalStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Unable to read {self.path.name}: {exc}") from exc
        if not isinstance(raw, dict):
            raise StorageError(f"{self.path.name} must hold an object of key -> value")
        return {str(k): str(v) for k, v in raw.items()}

    def _write(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)

    def clear(self) -> None:
        if self.path.exists():
            self._write({})

    def keys(self) -> List[str]:
        return list(self._read().keys())


def _load_records(store: LocalStore, key: str) -> List[dict]:
    saved = store.get_item(key)
    if not saved:
        return []
    try:
        records = json.loads(saved)
    except json.JSONDecodeError as exc:
        raise StorageError(f"Stored '{key}' is not valid JSON") from exc
    if not isinstance(records, list):
        raise StorageError(f"Stored '{key}' must be a list")
    return records


def load_scores(store: LocalStore) -> List[StudentScore]:
    try:
        return [StudentScore.from_dict(item) for item in _load_records(store, SCORES_KEY)]
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Invalid score record: {exc}") from exc


def save_scores(store: LocalStore, scores: Iterable[StudentScore]) -> None:
    store.set_item(SCORES_KEY, json.dumps([s.to_dict() for s in scores]))


def append_scores(store: LocalStore, new_scores: Iterable[StudentScore]) -> List[StudentScore]:
    updated = load_scores(store) + list(new_scores)
    save_scores(store, updated)
    return updated


def load_opinions(store: LocalStore) -> List[Opinion]:
    try:
        return [Opinion.from_dict(item) for item in _load_records(store, OPINIONS_KEY)]
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Invalid opinion record: {exc}") from exc


def save_opinions(store: LocalStore, opinions: Iterable[Opinion]) -> None:
    store.set_item(OPINIONS_KEY, json.dumps([o.to_dict() for o in opinions]))


def append_opinion(store: LocalStore, opinion: Opinion) -> List[Opinion]:
    updated = load_opinions(store) + [opinion]
    save_opinions(store, updated)
    return updated


def clear_all(store: LocalStore) -> None:
    try:
        store.remove_item(SCORES_KEY)
        store.remove_item(OPINIONS_KEY)
    except StorageError as exc:
        # an unreadable file cannot be edited key by key, so reset it
        logger.error(f"Resetting unreadable store: {exc}")
        store.clear()
    logger.info("Cleared stored scores and opinions in %s", store.path)
