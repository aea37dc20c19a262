from __future__ import annotations

import threading
import uuid
from typing import Dict

from common.points_engine.errors import ReceiptNotFoundError
from common.points_engine.models import Receipt


class ReceiptStore:
    """In-memory receipts keyed by a generated id.

    A single lock guards the mapping so concurrent inserts never race lookups or
    listings. Entries live for the lifetime of the process; there is no update or
    delete.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._receipts: Dict[str, Receipt] = {}

    def insert(self, receipt: Receipt) -> str:
        with self._lock:
            receipt_id = str(uuid.uuid4())
            while receipt_id in self._receipts:
                receipt_id = str(uuid.uuid4())
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def list(self) -> list[tuple[str, Receipt]]:
        with self._lock:
            return list(self._receipts.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts
