"""In-memory registry of submitted receipts.

The registry is an owned object handed to whoever serves requests; there is no
module-level store. All state lives in process memory and is lost on restart.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from receipt_points.domain.identifiers import allocate_receipt_id, new_receipt_id
from receipt_points.domain.receipt import Receipt
from receipt_points.runtime.logging import get_logger

logger = get_logger(__name__)


class ReceiptNotFoundError(LookupError):
    """Raised when no receipt was registered under the requested id."""

    def __init__(self, receipt_id: str) -> None:
        super().__init__(f"No receipt found for id {receipt_id}")
        self.receipt_id = receipt_id


class ReceiptRegistry:
    """Thread-safe map of receipt ids to submitted receipts.

    A single lock guards every operation, so the uniqueness check in
    ``register`` and the insert that follows it run as one unit.
    """

    def __init__(self, id_factory: Callable[[], str] = new_receipt_id) -> None:
        self._receipts: dict[str, Receipt] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory

    def register(self, receipt: Receipt) -> str:
        """Allocate a fresh id, store the receipt under it, and return the id."""
        with self._lock:
            receipt_id = allocate_receipt_id(self._receipts, id_factory=self._id_factory)
            self._receipts[receipt_id] = receipt
        logger.debug("Registered receipt %s from %r", receipt_id, receipt.retailer)
        return receipt_id

    def insert(self, receipt_id: str, receipt: Receipt) -> None:
        """Store a receipt under ``receipt_id``, replacing any existing entry."""
        with self._lock:
            self._receipts[receipt_id] = receipt

    def lookup(self, receipt_id: str) -> Receipt:
        """
        Return the receipt stored under ``receipt_id``.

        Raises:
            ReceiptNotFoundError: If the id was never registered.
        """
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
