"""Order models."""
from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from delivery_alerts.services.orders.constants import (
    DESCRIPTION_KEY,
    ITEMS_KEY,
    NOTIFICATION_COUNT_KEY,
    ORDER_ID_KEY,
    STATUS_KEY,
)
from delivery_alerts.services.orders.results import ErrorKind


class Item(BaseModel):
    """Typed view of an order item as sent by the orders API."""

    model_config = ConfigDict(extra="allow")

    status: str = Field(alias=STATUS_KEY)
    description: str = Field(default="", alias=DESCRIPTION_KEY)
    notification_count: int = Field(alias=NOTIFICATION_COUNT_KEY, ge=0, strict=True)


class Order(BaseModel):
    """Typed view of an order.

    Items stay untyped here; each one is inspected on its own so a single bad
    item does not make the whole order unreadable.
    """

    model_config = ConfigDict(extra="allow")

    # Only needed once an alert has to name the order
    order_id: Optional[Union[int, str]] = Field(default=None, alias=ORDER_ID_KEY)
    items: List[Any] = Field(alias=ITEMS_KEY)


class AlertPayload(BaseModel):
    """Body posted to the alert API."""

    message: str


class RunSummary(BaseModel):
    """What happened during one run."""

    orders_fetched: int = 0
    orders_processed: int = 0
    orders_failed: int = 0
    alerts_sent: int = 0
    alerts_failed: int = 0
    update_attempted: bool = False
    update_succeeded: bool = False
    fetch_kind: Optional[ErrorKind] = None
