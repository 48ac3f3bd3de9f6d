"""Delivery alerts entry point."""
import asyncio
import logging
import sys
from typing import Optional

from delivery_alerts.core.config import Settings, settings as default_settings
from delivery_alerts.core.dependencies import get_http_client, get_order_alert_service
from delivery_alerts.core.logging import setup_logging

logger = logging.getLogger(__name__)


async def run(config: Optional[Settings] = None) -> int:
    """Run one pass over the orders. Always returns 0."""
    config = config or default_settings
    async with get_http_client(config) as client:
        service = get_order_alert_service(client, config)
        summary = await service.run()
    logger.info(f"Run summary: {summary.model_dump_json()}")
    return 0


def main() -> int:
    setup_logging()
    return asyncio.run(run())


if __name__ == "__main__":
    sys.exit(main())
