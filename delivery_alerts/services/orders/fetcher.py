"""Orders retrieval."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from delivery_alerts.services.orders.results import (
    DeliveryAlertsError,
    ErrorKind,
    MalformedDataError,
    StepResult,
    TransportError,
)

logger = logging.getLogger(__name__)


class OrderFetcher:
    """Retrieves the current order set from the orders API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        orders_api_url: str,
        log: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.orders_api_url = orders_api_url
        self.log = log or logger

    async def fetch(self) -> StepResult:
        """
        Fetch orders, reporting why the result is empty when it is.

        Returns:
            StepResult whose ``value`` is always a list of order records.
            ``kind`` is TRANSPORT or MALFORMED_DATA on failure, EMPTY_RESULT
            (with ``ok`` True) when the API legitimately has no orders.
        """
        try:
            orders = await self._get_orders()
        except DeliveryAlertsError as e:
            self.log.error(f"Error in fetch_orders(): {e}")
            return StepResult.failure(e.kind, value=[], detail=str(e))
        except Exception as e:
            self.log.error(f"Error in fetch_orders(): {e!r}")
            return StepResult.failure(ErrorKind.TRANSPORT, value=[], detail=str(e))

        if not orders:
            # Low or zero order counts are worth knowing about
            self.log.info("Zero orders found in fetch_orders().")
            return StepResult.notice(ErrorKind.EMPTY_RESULT, value=[])

        self.log.info(f"Fetched {len(orders)} orders")
        return StepResult.success(orders)

    async def fetch_orders(self) -> List[Dict[str, Any]]:
        """Fetch orders; an empty list on any failure."""
        result = await self.fetch()
        return result.value

    async def _get_orders(self) -> List[Any]:
        try:
            response = await self.client.get(self.orders_api_url)
        except httpx.HTTPError as e:
            raise TransportError(f"GET {self.orders_api_url} failed: {e!r}") from e

        if not response.is_success:
            raise TransportError(
                f"GET {self.orders_api_url} returned {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedDataError(f"orders response is not JSON: {e}") from e

        if not isinstance(data, list):
            raise MalformedDataError(
                f"orders response is a {type(data).__name__}, expected a list"
            )
        return data
