"""JSON-on-disk record store for datasets, model metrics and training jobs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional
from uuid import uuid4

from . import settings
from .utils.logging import get_logger

logger = get_logger(__name__)


class RecordStore:
    """Keeps one collection of records in memory, mirrored to one file per record.

    Writes go through a temporary file that is then renamed over the target,
    so a crash never leaves a half-written record behind. Unreadable files are
    skipped with a warning when the store loads.
    """

    def __init__(self, collection: str, storage_dir: Optional[Path] = None) -> None:
        self.collection = collection
        self._lock = Lock()
        base_dir = Path(storage_dir) if storage_dir is not None else settings.STORAGE_DIR
        self._storage_dir = base_dir / collection
        self._storage_dir.mkdir(parents=True, exist_ok=True)
        self._store: Dict[str, Dict[str, Any]] = {}
        self._load_existing_records()

    def _record_path(self, record_id: str) -> Path:
        return self._storage_dir / f"{record_id}.json"

    def _load_existing_records(self) -> None:
        for json_path in self._storage_dir.glob("*.json"):
            try:
                with json_path.open("r", encoding="utf-8") as handle:
                    record = json.load(handle)
                if not isinstance(record, dict):
                    raise ValueError("record is not a JSON object")
            except (OSError, ValueError) as exc:
                logger.warning("Skipping unreadable %s record: %s (%s)", self.collection, json_path, exc)
                continue
            self._store[json_path.stem] = record

    def _write_record(self, record_id: str, record: Dict[str, Any]) -> None:
        json_path = self._record_path(record_id)
        tmp_path = json_path.with_suffix(".json.tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as handle:
                json.dump(record, handle, ensure_ascii=False, indent=2, default=str)
            tmp_path.replace(json_path)
        except OSError:
            logger.exception("Failed to write %s record: %s", self.collection, json_path)
            try:
                tmp_path.unlink()
            except OSError:
                logger.debug("Temporary record file could not be removed: %s", tmp_path)
            raise

    def save(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Store ``payload`` under a new id and return the stored record."""
        record_id = uuid4().hex
        record = {
            "_id": record_id,
            **payload,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        with self._lock:
            self._write_record(record_id, record)
            self._store[record_id] = record
        return dict(record)

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._store.get(record_id)
            return dict(record) if record is not None else None

    def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Merge ``changes`` into an existing record; ``None`` if it does not exist."""
        with self._lock:
            record = self._store.get(record_id)
            if record is None:
                return None
            updated = {**record, **changes, "_id": record_id}
            self._write_record(record_id, updated)
            self._store[record_id] = updated
            return dict(updated)

    def list(self) -> List[Dict[str, Any]]:
        """All records, newest first."""
        with self._lock:
            records = [dict(record) for record in self._store.values()]
        records.sort(key=lambda record: record.get("timestamp") or "", reverse=True)
        return records


_stores: Dict[str, RecordStore] = {}
_stores_lock = Lock()


def get_store(collection: str) -> RecordStore:
    """Process-wide store for ``collection``, created on first use."""
    with _stores_lock:
        store = _stores.get(collection)
        if store is None:
            store = RecordStore(collection)
            _stores[collection] = store
        return store


def get_dataset_store() -> RecordStore:
    return get_store("datasets")


def get_metrics_store() -> RecordStore:
    return get_store("metrics")


def get_job_store() -> RecordStore:
    return get_store("jobs")
