"""Shared test fixtures and configuration."""
import copy
import logging
import pytest
from pathlib import Path

from delivery_alerts.core.config import Settings
from delivery_alerts.services.orders.fetcher import OrderFetcher
from delivery_alerts.services.orders.notifier import AlertNotifier
from delivery_alerts.services.orders.processor import OrderProcessor
from delivery_alerts.services.orders.service import OrderAlertService
from delivery_alerts.services.orders.updater import OrderUpdater
from delivery_alerts.services.transport.in_memory_api import InMemoryOrdersApi


ORDERS_URL = "https://orders.test/orders"
ALERTS_URL = "https://alerts.test/alerts"
UPDATE_URL = "https://update.test/update"


@pytest.fixture
def test_settings(tmp_path):
    """Override settings for testing."""
    return Settings(
        orders_api_url=ORDERS_URL,
        alert_api_url=ALERTS_URL,
        update_api_url=UPDATE_URL,
        log_file=str(tmp_path / "Log.txt"),
        use_in_memory_api=True,
    )


@pytest.fixture
def test_orders_path():
    """Return path to test orders YAML file."""
    return Path(__file__).parent / "fixtures" / "test_orders.yaml"


@pytest.fixture
def sample_orders():
    """Two orders: one partly delivered, one fully delivered."""
    return [
        {
            "OrderId": 1,
            "Items": [
                {"Status": "Ready_to_Deliver", "Description": "LHZ 300 Kit", "deliveryNotification": 0},
                {"Status": "Delivered", "Description": "X-Ray machine", "deliveryNotification": 0},
            ],
        },
        {
            "OrderId": 2,
            "Items": [
                {"Status": "Delivered", "Description": "X-Ray computer", "deliveryNotification": 0},
                {"Status": "Delivered", "Description": "New Chairs", "deliveryNotification": 0},
            ],
        },
    ]


@pytest.fixture
def orders_api(test_settings, sample_orders):
    """In-memory orders API seeded with the sample orders."""
    return InMemoryOrdersApi.from_settings(
        test_settings, orders=copy.deepcopy(sample_orders)
    )


@pytest.fixture
async def http_client(orders_api):
    """AsyncClient talking to the in-memory orders API."""
    client = orders_api.client()
    yield client
    await client.aclose()


@pytest.fixture
def notifier(http_client):
    return AlertNotifier(http_client, ALERTS_URL)


@pytest.fixture
def fetcher(http_client):
    return OrderFetcher(http_client, ORDERS_URL)


@pytest.fixture
def processor(notifier):
    return OrderProcessor(notifier)


@pytest.fixture
def updater(http_client):
    return OrderUpdater(http_client, UPDATE_URL)


@pytest.fixture
def service(fetcher, processor, updater):
    """Create OrderAlertService wired to the in-memory orders API."""
    return OrderAlertService(fetcher=fetcher, processor=processor, updater=updater)


@pytest.fixture(autouse=True)
def capture_info_logs(caplog):
    """Capture pipeline log records at INFO and above."""
    caplog.set_level(logging.INFO, logger="delivery_alerts")
    yield caplog
