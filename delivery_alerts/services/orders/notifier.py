"""Delivered item alerts."""
import logging
from typing import Optional, Union

import httpx

from delivery_alerts.services.orders.constants import ALERT_MESSAGE_TEMPLATE
from delivery_alerts.services.orders.models import AlertPayload, Item
from delivery_alerts.services.orders.results import ErrorKind, StepResult

logger = logging.getLogger(__name__)


def build_alert_message(item: Item, order_id: Union[int, str]) -> str:
    """Build the alert text for a delivered item.

    The count is the item's value before it is incremented.
    """
    return ALERT_MESSAGE_TEMPLATE.format(
        order_id=order_id,
        description=item.description,
        count=item.notification_count,
    )


class AlertNotifier:
    """Sends one alert per delivered item to the alert API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        alert_api_url: str,
        log: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.alert_api_url = alert_api_url
        self.log = log or logger

    async def notify(self, item: Item, order_id: Union[int, str]) -> StepResult:
        """
        Post an alert for a delivered item.

        Args:
            item: The delivered item, read before its counter is incremented
            order_id: Identifier of the order the item belongs to

        Returns:
            StepResult with ``ok`` False on a non-success status or a
            transport error. Failures are logged, never raised.
        """
        payload = AlertPayload(message=build_alert_message(item, order_id))
        try:
            response = await self.client.post(
                self.alert_api_url, json=payload.model_dump()
            )
        except Exception as e:
            self.log.error(f"Error in notify(): {e!r}")
            return StepResult.failure(ErrorKind.TRANSPORT, detail=str(e))

        if response.is_success:
            self.log.info(f"Alert sent for delivered item: {item.description}")
            return StepResult.success(payload.message)

        self.log.warning(f"Failed to send alert for delivered item: {item.description}")
        return StepResult.failure(
            ErrorKind.TRANSPORT,
            value=payload.message,
            detail=f"alert API returned {response.status_code}",
        )
