"""Collaborator wiring."""
from typing import Optional

import httpx

from delivery_alerts.core.config import Settings, settings as default_settings
from delivery_alerts.services.orders.fetcher import OrderFetcher
from delivery_alerts.services.orders.notifier import AlertNotifier
from delivery_alerts.services.orders.processor import OrderProcessor
from delivery_alerts.services.orders.service import OrderAlertService
from delivery_alerts.services.orders.updater import OrderUpdater
from delivery_alerts.services.transport.in_memory_api import InMemoryOrdersApi


def get_http_client(config: Optional[Settings] = None) -> httpx.AsyncClient:
    """Get the HTTP client, live or backed by the in-memory orders API."""
    config = config or default_settings
    if config.use_in_memory_api:
        return InMemoryOrdersApi.from_settings(config).client()
    return httpx.AsyncClient(timeout=config.request_timeout)


def get_order_alert_service(
    client: httpx.AsyncClient, config: Optional[Settings] = None
) -> OrderAlertService:
    """Get order alert service instance."""
    config = config or default_settings
    notifier = AlertNotifier(client, config.alert_api_url)
    return OrderAlertService(
        fetcher=OrderFetcher(client, config.orders_api_url),
        processor=OrderProcessor(notifier),
        updater=OrderUpdater(client, config.update_api_url),
    )
