"""
PumpPortal SDK – Python SDK for the PumpPortal trading and data API.

Provides:
  - Unified façade                     (client.py → PumpPortalClient)
  - API key / endpoint configuration   (auth.py   → PumpPortalAuth)
  - Typed Pydantic v2 models           (types.py)
  - Synchronous REST client            (rest.py   → PumpPortalRestClient)
  - Async REST client                  (rest.py   → AsyncPumpPortalRestClient)
  - Async data-feed WebSocket client   (ws.py     → PumpPortalWebSocketClient)

Quickstart
----------
    import asyncio
    from pumpportal_sdk import PumpPortalClient, EventCategory

    async def main() -> None:
        async with PumpPortalClient() as client:
            client.on_message(print)
            await client.subscribe(EventCategory.NEW_TOKEN)
            await client.ws.run_forever()

    asyncio.run(main())
"""

from .types import (
    # Feed
    EventCategory,
    ControlMessage,
    # Trading
    TradeAction,
    Pool,
    TradeRequest,
    LocalTradeRequest,
    # Wallet
    WalletCredential,
)
from .auth import PumpPortalAuth
from .rest import PumpPortalRestClient, AsyncPumpPortalRestClient, PumpPortalAPIError
from .ws import PumpPortalWebSocketClient, make_ws_client
from .client import PumpPortalClient

__all__ = [
    # Feed
    "EventCategory",
    "ControlMessage",
    # Trading
    "TradeAction",
    "Pool",
    "TradeRequest",
    "LocalTradeRequest",
    # Wallet
    "WalletCredential",
    # Auth
    "PumpPortalAuth",
    # REST
    "PumpPortalRestClient",
    "AsyncPumpPortalRestClient",
    "PumpPortalAPIError",
    # WebSocket
    "PumpPortalWebSocketClient",
    "make_ws_client",
    # Unified façade
    "PumpPortalClient",
]

__version__ = "0.1.0"
