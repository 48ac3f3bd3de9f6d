"""Batched write-back of processed orders."""
import logging
from typing import Any, Optional, Sequence

import httpx

from delivery_alerts.services.orders.constants import ORDER_ID_KEY
from delivery_alerts.services.orders.results import ErrorKind, StepResult

logger = logging.getLogger(__name__)


def order_id_of(order: Any) -> Any:
    """Return the order's identifier, or None if the record has none."""
    if isinstance(order, dict):
        return order.get(ORDER_ID_KEY)
    return None


class OrderUpdater:
    """Posts every processed order to the update API in one call."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        update_api_url: str,
        log: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.update_api_url = update_api_url
        self.log = log or logger

    async def post_updated_orders(self, orders: Sequence[Any]) -> StepResult:
        """
        Post the whole batch as one JSON array.

        One log record is written per order, whether the post succeeded or
        not. Failures are logged, never raised.
        """
        orders = list(orders)
        try:
            response = await self.client.post(self.update_api_url, json=orders)
        except Exception as e:
            self.log.error(f"Error in post_updated_orders(): {e!r}")
            self._log_failed(orders)
            return StepResult.failure(ErrorKind.TRANSPORT, detail=str(e))

        if not response.is_success:
            self._log_failed(orders)
            return StepResult.failure(
                ErrorKind.TRANSPORT,
                detail=f"update API returned {response.status_code}",
            )

        for order in orders:
            self.log.info(
                f"Updated order sent for processing: OrderId {order_id_of(order)}"
            )
        return StepResult.success(len(orders))

    def _log_failed(self, orders: Sequence[Any]) -> None:
        for order in orders:
            self.log.warning(
                f"Failed to send updated order for processing: OrderId {order_id_of(order)}"
            )
