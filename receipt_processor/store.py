"""
In-memory receipt store.

Holds every submitted receipt together with the points computed at
submission time.  Entries live for the lifetime of the process and are never
updated or removed.
"""
from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass

from receipt_processor.schemas import Receipt
from receipt_processor.scoring import calculate_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredReceipt:
    receipt: Receipt
    points: int


class ReceiptStore:
    """Thread-safe mapping of receipt id -> (receipt, points)."""

    def __init__(self) -> None:
        self._entries: dict[str, StoredReceipt] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def submit(self, receipt: Receipt) -> str:
        """Score ``receipt``, store it under a fresh id and return the id."""
        points = calculate_points(receipt)
        receipt_id = str(uuid.uuid4())
        with self._lock:
            self._entries[receipt_id] = StoredReceipt(receipt=receipt, points=points)
        return receipt_id

    def get_points(self, receipt_id: str) -> int | None:
        with self._lock:
            entry = self._entries.get(receipt_id)
        return entry.points if entry is not None else None

    def list_all(self) -> dict[str, Receipt]:
        """Snapshot of every stored receipt, in submission order."""
        with self._lock:
            return {rid: entry.receipt for rid, entry in self._entries.items()}


_store = ReceiptStore()


def get_store() -> ReceiptStore:
    """Receipt store dependency"""
    return _store
