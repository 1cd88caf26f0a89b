"""
client.py – Unified PumpPortalClient façade.

Single entry point that owns both the async REST client and the WebSocket
client, wired to a shared PumpPortalAuth so the API key and URLs are
configured once.

Usage
-----
    import asyncio
    from pumpportal_sdk import PumpPortalClient, EventCategory, TradeRequest

    async def main() -> None:
        async with PumpPortalClient(api_key="...") as client:
            client.on_message(print)
            await client.subscribe(EventCategory.NEW_TOKEN)

            await client.submit_trade(TradeRequest(
                action="buy", mint="...", amount=0.1, denominated_in_sol=True,
                slippage=10, priority_fee=0.0005,
            ))

            await client.ws.run_forever()

    asyncio.run(main())
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from solders.transaction import VersionedTransaction

from .auth import DEFAULT_BASE_URL, DEFAULT_WS_URL, PumpPortalAuth
from .rest import AsyncPumpPortalRestClient
from .types import LocalTradeRequest, TradeRequest, WalletCredential
from .ws import CategoryLike, MessageHandler, PumpPortalWebSocketClient


class PumpPortalClient:
    """
    Unified façade for the PumpPortal SDK.

    Parameters
    ----------
    api_key      : PumpPortal API key, needed only for submit_trade
    base_url     : REST base URL
    ws_url       : Data feed WebSocket URL
    rest_timeout : HTTP timeout in seconds for REST requests (None: no timeout)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        ws_url: str = DEFAULT_WS_URL,
        rest_timeout: Optional[float] = None,
    ) -> None:
        self._auth = PumpPortalAuth(api_key=api_key, base_url=base_url, ws_url=ws_url)
        self.rest  = AsyncPumpPortalRestClient(auth=self._auth, timeout=rest_timeout)
        self.ws    = PumpPortalWebSocketClient(auth=self._auth)

    # ------------------------------------------------------------------
    # Async context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "PumpPortalClient":
        await self.ws.connect()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the REST session and the WebSocket connection."""
        await self.rest.close()
        await self.ws.close()

    @property
    def auth(self) -> PumpPortalAuth:
        return self._auth

    # ------------------------------------------------------------------
    # Feed passthroughs
    # ------------------------------------------------------------------

    def on_message(self, handler: Optional[MessageHandler]) -> None:
        self.ws.on_message(handler)

    async def subscribe(self, category: CategoryLike, keys: Iterable[str] = ()) -> None:
        await self.ws.subscribe(category, keys)

    async def unsubscribe(self, category: CategoryLike, keys: Iterable[str] = ()) -> None:
        await self.ws.unsubscribe(category, keys)

    # ------------------------------------------------------------------
    # Trading passthroughs
    # ------------------------------------------------------------------

    async def submit_trade(self, request: TradeRequest) -> Any:
        return await self.rest.submit_trade(request)

    async def fetch_local_transaction(self, request: LocalTradeRequest) -> VersionedTransaction:
        return await self.rest.fetch_local_transaction(request)

    async def create_wallet(self) -> WalletCredential:
        return await self.rest.create_wallet()
