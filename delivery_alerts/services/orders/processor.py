"""Per-order delivered item processing."""
import copy
import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from delivery_alerts.services.orders.constants import (
    ITEMS_KEY,
    NOTIFICATION_COUNT_KEY,
)
from delivery_alerts.services.orders.delivered import is_delivered
from delivery_alerts.services.orders.models import Item, Order
from delivery_alerts.services.orders.notifier import AlertNotifier
from delivery_alerts.services.orders.results import (
    ErrorKind,
    MalformedDataError,
    StepResult,
)
from delivery_alerts.services.orders.updater import order_id_of

logger = logging.getLogger(__name__)


class OrderProcessor:
    """Alerts on delivered items and bumps their notification counters."""

    def __init__(self, notifier: AlertNotifier, log: Optional[logging.Logger] = None):
        self.notifier = notifier
        self.log = log or logger
        self.reset_alert_counts()

    def reset_alert_counts(self) -> None:
        """Zero the alert counters, once per run."""
        self.alerts_sent = 0
        self.alerts_failed = 0

    async def process_order(self, order: Any) -> StepResult:
        """
        Process one order.

        Every delivered item gets an alert, then its ``deliveryNotification``
        counter goes up by one. Other items are left alone. The alert is
        awaited before the counter changes, and a failed alert does not stop
        the increment.

        Items are processed on a copy of the item list, which replaces the
        order's list only once every item went through. If the order is
        malformed, the original order is returned untouched and the error is
        logged. Alerts already sent for earlier items are not taken back.

        Returns:
            StepResult whose ``value`` is the order to write back.
        """
        try:
            items = await self._process_items(order)
        except Exception as e:
            self.log.error(f"Error in process_order(): OrderId {order_id_of(order)}: {e}")
            return StepResult.failure(ErrorKind.MALFORMED_DATA, value=order, detail=str(e))

        order[ITEMS_KEY] = items
        return StepResult.success(order)

    async def process_orders(self, orders: Sequence[Any]) -> List[Any]:
        """Process orders in sequence, collecting the order to write back for each."""
        processed = []
        for order in orders:
            result = await self.process_order(order)
            processed.append(result.value)
        return processed

    async def _process_items(self, order: Any) -> List[Any]:
        try:
            parsed = Order.model_validate(order)
        except ValidationError as e:
            raise MalformedDataError(f"unreadable order: {e}") from e

        items = copy.deepcopy(order[ITEMS_KEY])
        for position, item in enumerate(items):
            if not is_delivered(item, self.log):
                continue

            delivered = self._read_item(item, position)
            if parsed.order_id is None:
                raise MalformedDataError("delivered item on an order without an identifier")
            result = await self.notifier.notify(delivered, parsed.order_id)
            if result.ok:
                self.alerts_sent += 1
            else:
                self.alerts_failed += 1

            item[NOTIFICATION_COUNT_KEY] = delivered.notification_count + 1
        return items

    @staticmethod
    def _read_item(item: Dict[str, Any], position: int) -> Item:
        try:
            return Item.model_validate(item)
        except ValidationError as e:
            raise MalformedDataError(f"unreadable item at position {position}: {e}") from e
