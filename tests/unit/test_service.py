"""Unit tests for a full delivery alert run."""
import pytest
from unittest.mock import AsyncMock

from delivery_alerts.services.orders.results import ErrorKind, StepResult
from delivery_alerts.services.orders.service import OrderAlertService


class TestOrderAlertService:
    """Test OrderAlertService.run."""

    @pytest.mark.asyncio
    async def test_run_updates_all_orders(self, service, orders_api):
        """Test one batch update carries every order with updated counters."""
        summary = await service.run()

        updates = orders_api.updates()
        assert len(updates) == 1
        batch = updates[0]
        assert [o["OrderId"] for o in batch] == [1, 2]
        assert [i["deliveryNotification"] for i in batch[0]["Items"]] == [0, 1]
        assert [i["deliveryNotification"] for i in batch[1]["Items"]] == [1, 1]

        assert summary.orders_fetched == 2
        assert summary.orders_processed == 2
        assert summary.orders_failed == 0
        assert summary.alerts_sent == 3
        assert summary.update_attempted is True
        assert summary.update_succeeded is True

    @pytest.mark.asyncio
    async def test_alert_counts_cover_one_run(self, service, orders_api):
        """Test a second run on the same service reports only its own alerts."""
        first = await service.run()
        second = await service.run()

        assert first.alerts_sent == 3
        assert second.alerts_sent == 3
        assert second.alerts_failed == 0
        assert len(orders_api.alerts()) == 6

    @pytest.mark.asyncio
    async def test_update_follows_all_alerts(self, service, orders_api, test_settings):
        """Test the batch post is the last request of the run."""
        await service.run()

        urls = [str(r.url) for r in orders_api.requests]
        assert urls[0] == test_settings.orders_api_url
        assert urls[-1] == test_settings.update_api_url
        assert urls.count(test_settings.alert_api_url) == 3

    @pytest.mark.asyncio
    async def test_mixed_delivered_and_undelivered(self, service, orders_api, caplog):
        """Test one all-delivered and one undelivered order produce two submission records."""
        orders_api._orders = [
            {
                "OrderId": 1,
                "Items": [{"Status": "Delivered", "Description": "Bed", "deliveryNotification": 0}],
            },
            {
                "OrderId": 2,
                "Items": [{"Status": "Packed", "Description": "Chair", "deliveryNotification": 5}],
            },
        ]

        await service.run()

        batch = orders_api.updates()[0]
        assert batch[0]["Items"][0]["deliveryNotification"] == 1
        assert batch[1]["Items"][0]["deliveryNotification"] == 5
        sent = [m for m in caplog.messages if m.startswith("Updated order sent")]
        assert sent == [
            "Updated order sent for processing: OrderId 1",
            "Updated order sent for processing: OrderId 2",
        ]

    @pytest.mark.asyncio
    async def test_failed_update_logs_each_order(self, service, orders_api, test_settings, caplog):
        """Test a failing update produces one failure record per order."""
        orders_api.fail(test_settings.update_api_url, status_code=500)

        summary = await service.run()

        assert summary.update_attempted is True
        assert summary.update_succeeded is False
        failed = [m for m in caplog.messages if m.startswith("Failed to send updated order")]
        assert len(failed) == 2

    @pytest.mark.asyncio
    async def test_zero_orders_skips_update(self, service, orders_api):
        """Test the updater is not called when there are no orders."""
        orders_api._orders = []

        summary = await service.run()

        assert orders_api.updates() == []
        assert summary.update_attempted is False
        assert summary.fetch_kind == ErrorKind.EMPTY_RESULT

    @pytest.mark.asyncio
    async def test_unreachable_source_skips_update(self, service, orders_api, test_settings):
        """Test a failed fetch completes the run without an update."""
        orders_api.raise_on(test_settings.orders_api_url)

        summary = await service.run()

        assert orders_api.updates() == []
        assert summary.orders_fetched == 0
        assert summary.fetch_kind == ErrorKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_malformed_order_is_posted_unmodified(self, service, orders_api):
        """Test a malformed order does not stop the run and is written back as fetched."""
        orders_api._orders = [
            {"OrderId": 1, "Items": {"Status": "Delivered"}},
            {
                "OrderId": 2,
                "Items": [{"Status": "Delivered", "Description": "Bed", "deliveryNotification": 0}],
            },
        ]

        summary = await service.run()

        batch = orders_api.updates()[0]
        assert batch[0] == {"OrderId": 1, "Items": {"Status": "Delivered"}}
        assert batch[1]["Items"][0]["deliveryNotification"] == 1
        assert summary.orders_failed == 1
        assert summary.orders_processed == 1

    @pytest.mark.asyncio
    async def test_run_logs_start_and_end(self, service, caplog):
        """Test the run is bracketed by start and end records."""
        await service.run()

        assert caplog.messages[0] == "Start of App"
        assert caplog.messages[-1] == "End of App"

    @pytest.mark.asyncio
    async def test_updater_not_called_for_empty_fetch(self, processor):
        """Test the updater is never invoked with an empty batch."""
        fetcher = AsyncMock()
        fetcher.fetch = AsyncMock(return_value=StepResult.notice(ErrorKind.EMPTY_RESULT, value=[]))
        updater = AsyncMock()

        service = OrderAlertService(fetcher=fetcher, processor=processor, updater=updater)
        await service.run()

        updater.post_updated_orders.assert_not_called()
