"""Receipt identifier allocation."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Container

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    """Return a random UUID4 in canonical textual form."""
    return str(uuid.uuid4())


def allocate_receipt_id(
    existing: Container[str],
    id_factory: Callable[[], str] = new_receipt_id,
) -> str:
    """
    Return an identifier that is not already in ``existing``.

    The identifier is not reserved; callers must insert it under the same lock
    they held while checking ``existing``.

    Args:
        existing: Already allocated identifiers.
        id_factory: Source of candidate identifiers.

    Returns:
        A fresh identifier.
    """
    receipt_id = id_factory()
    while receipt_id in existing:
        logger.warning("Receipt id collision on %s, regenerating", receipt_id)
        receipt_id = id_factory()
    return receipt_id
