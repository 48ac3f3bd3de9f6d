"""Delivered status check."""
import logging
from typing import Any, Optional

from delivery_alerts.services.orders.constants import DELIVERED_STATUS, STATUS_KEY

logger = logging.getLogger(__name__)


def is_delivered(item: Any, log: Optional[logging.Logger] = None) -> bool:
    """
    Return True if the item's status is "Delivered", ignoring case.

    Anything that cannot be read as a status (missing or misnamed key,
    non-string value, an item that is not a mapping) counts as not delivered.
    The problem is logged and never raised.
    """
    log = log or logger
    try:
        return item[STATUS_KEY].lower() == DELIVERED_STATUS.lower()
    except (KeyError, TypeError, AttributeError) as e:
        log.warning(f"Error in is_delivered(): unreadable status on item {item!r}: {e!r}")
        return False
