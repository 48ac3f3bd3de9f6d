"""In-memory orders API served through httpx.MockTransport."""
import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import yaml

from delivery_alerts.core.config import Settings

DEFAULT_ORDERS: List[Dict[str, Any]] = [
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


class InMemoryOrdersApi:
    """Stand-in for the orders, alert and update APIs.

    Serves seed orders on the orders URL, accepts alerts and updates, and
    records every request it receives. Any endpoint can be made to answer
    with an error status, or to raise a transport error.
    """

    def __init__(
        self,
        orders_api_url: str,
        alert_api_url: str,
        update_api_url: str,
        orders: Optional[List[Any]] = None,
        orders_file: Optional[str] = None,
    ):
        self.orders_api_url = orders_api_url
        self.alert_api_url = alert_api_url
        self.update_api_url = update_api_url
        self.orders_file = Path(orders_file) if orders_file else None
        self._orders = orders
        self.requests: List[httpx.Request] = []
        self._failures: Dict[str, int] = {}
        self._errors: Dict[str, Exception] = {}

    @classmethod
    def from_settings(cls, config: Settings, **kwargs: Any) -> "InMemoryOrdersApi":
        return cls(
            orders_api_url=config.orders_api_url,
            alert_api_url=config.alert_api_url,
            update_api_url=config.update_api_url,
            orders_file=config.seed_orders_file,
            **kwargs,
        )

    def _load_orders(self) -> List[Any]:
        """Load seed orders from YAML file."""
        if self._orders is None:
            if self.orders_file is None or not self.orders_file.exists():
                # Default orders if no file is configured
                self._orders = copy.deepcopy(DEFAULT_ORDERS)
            else:
                with open(self.orders_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                    self._orders = data.get("orders", [])
        return self._orders

    def fail(self, url: str, status_code: int = 500) -> None:
        """Answer every request to ``url`` with ``status_code``."""
        self._failures[url] = status_code

    def raise_on(self, url: str, error: Optional[Exception] = None) -> None:
        """Raise a transport error for every request to ``url``."""
        self._errors[url] = error or httpx.ConnectError("connection refused")

    def requests_to(self, url: str) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url) == url]

    def alerts(self) -> List[Dict[str, Any]]:
        """Decoded bodies of every alert received."""
        return [json.loads(r.content) for r in self.requests_to(self.alert_api_url)]

    def updates(self) -> List[Any]:
        """Decoded bodies of every update received."""
        return [json.loads(r.content) for r in self.requests_to(self.update_api_url)]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)

        if url in self._errors:
            error = self._errors[url]
            if isinstance(error, httpx.RequestError):
                error.request = request
            raise error
        if url in self._failures:
            return httpx.Response(self._failures[url])

        if url == self.orders_api_url and request.method == "GET":
            return httpx.Response(200, json=self._load_orders())
        if url in (self.alert_api_url, self.update_api_url) and request.method == "POST":
            return httpx.Response(200, json={})
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        """Return an AsyncClient wired to this API."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self))
