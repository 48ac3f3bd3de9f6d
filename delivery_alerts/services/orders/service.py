"""Delivery alert run orchestration."""
import logging
from typing import Optional

from delivery_alerts.services.orders.fetcher import OrderFetcher
from delivery_alerts.services.orders.models import RunSummary
from delivery_alerts.services.orders.processor import OrderProcessor
from delivery_alerts.services.orders.updater import OrderUpdater

logger = logging.getLogger(__name__)


class OrderAlertService:
    """Runs fetch, per-order processing and the batched update once."""

    def __init__(
        self,
        fetcher: OrderFetcher,
        processor: OrderProcessor,
        updater: OrderUpdater,
        log: Optional[logging.Logger] = None,
    ):
        self.fetcher = fetcher
        self.processor = processor
        self.updater = updater
        self.log = log or logger

    async def run(self) -> RunSummary:
        """
        Process every fetched order and post the results in one batch.

        Orders are handled in the order they were fetched. The update is
        skipped when there is nothing to post. Nothing is raised; problems
        are in the log and in the returned summary.
        """
        self.log.info("Start of App")
        summary = RunSummary()
        self.processor.reset_alert_counts()

        fetched = await self.fetcher.fetch()
        orders = fetched.value
        summary.orders_fetched = len(orders)
        summary.fetch_kind = fetched.kind

        updated_orders = []
        for order in orders:
            result = await self.processor.process_order(order)
            updated_orders.append(result.value)
            if result.ok:
                summary.orders_processed += 1
            else:
                summary.orders_failed += 1

        summary.alerts_sent = self.processor.alerts_sent
        summary.alerts_failed = self.processor.alerts_failed

        if updated_orders:
            posted = await self.updater.post_updated_orders(updated_orders)
            summary.update_attempted = True
            summary.update_succeeded = posted.ok

        self.log.info("End of App")
        return summary
