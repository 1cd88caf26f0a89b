"""
ws.py – Async WebSocket client for the PumpPortal data feed.

PumpPortal's feed takes JSON control frames:
  {"method": "subscribeNewToken",      "keys": []}
  {"method": "unsubscribeAccountTrade", "keys": ["<account>", ...]}

and pushes event frames whose schema belongs to the service; they are
handed to the registered handler as text, unparsed.

This client:
1. Opens one connection (no retry, no reconnect).
2. Tracks which event categories are subscribed so duplicate
   subscribe / unsubscribe calls are dropped locally.
3. Sends control frames only while the connection is open; otherwise
   the frame is logged and dropped (never queued).
4. Delivers every inbound frame to a single handler; registering a new
   handler replaces the previous one.
5. Logs connection errors instead of raising them.

Usage
-----
    from pumpportal_sdk import PumpPortalWebSocketClient, EventCategory

    def on_event(raw: str) -> None:
        print(raw)

    async with PumpPortalWebSocketClient() as ws:
        ws.on_message(on_event)
        await ws.subscribe(EventCategory.NEW_TOKEN)
        await ws.subscribe(EventCategory.TOKEN_TRADE, ["<mint>"])
        await ws.run_forever()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Iterable
from typing import Any, Optional, Union

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK, WebSocketException
from websockets.protocol import State

from .auth import PumpPortalAuth
from .types import ControlMessage, EventCategory

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

# Handler: receives each inbound frame as text; may be sync or async
MessageHandler = Callable[[str], Any]

CategoryLike = Union[EventCategory, str]


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_PING_INTERVAL_S = 20
_PONG_TIMEOUT_S  = 10


# ---------------------------------------------------------------------------
# WebSocket client
# ---------------------------------------------------------------------------

class PumpPortalWebSocketClient:
    """
    Async WebSocket client for the PumpPortal data feed.

    Parameters
    ----------
    auth : PumpPortalAuth supplying the feed URL (defaults are used if omitted)
    """

    def __init__(self, auth: Optional[PumpPortalAuth] = None) -> None:
        self._auth          = auth or PumpPortalAuth()
        self._subscribed:   set[EventCategory]        = set()
        self._handler:      Optional[MessageHandler]  = None
        self._ws:           Optional[Any]             = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "PumpPortalWebSocketClient":
        await self.connect()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._ws is not None and self._ws.state is State.OPEN

    @property
    def subscriptions(self) -> frozenset[EventCategory]:
        return frozenset(self._subscribed)

    async def connect(self) -> None:
        """Open the feed connection once.  Failures are logged, not raised."""
        if self.is_open:
            return

        url = self._auth.ws_url
        logger.debug("Connecting to PumpPortal WebSocket at %s", url)
        try:
            self._ws = await websockets.connect(
                url,
                ping_interval=_PING_INTERVAL_S,
                ping_timeout=_PONG_TIMEOUT_S,
            )
        except (OSError, asyncio.TimeoutError, WebSocketException) as exc:
            logger.error("WebSocket error: %r", exc)
            self._ws = None
            return
        logger.info("Connected to PumpPortal")

    def on_message(self, handler: Optional[MessageHandler]) -> None:
        """Register the handler for inbound frames, replacing any previous one."""
        self._handler = handler

    async def subscribe(self, category: CategoryLike, keys: Iterable[str] = ()) -> None:
        """
        Subscribe to an event category.

        Parameters
        ----------
        category : EventCategory, its value ("token-trade") or its
                   subscribe verb ("subscribeTokenTrade")
        keys     : Accounts or token mints scoping the subscription
        """
        category = EventCategory.coerce(category)
        if category in self._subscribed:
            logger.info("You are already subscribed to %s", category.value)
            return

        # Record before the await so an overlapping call sees it
        self._subscribed.add(category)
        await self._send(ControlMessage(method=category.subscribe_method, keys=list(keys)))
        logger.info("Subscribing to %s", category.value)

    async def unsubscribe(self, category: CategoryLike, keys: Iterable[str] = ()) -> None:
        """Unsubscribe from an event category previously subscribed to."""
        category = EventCategory.coerce(category)
        if category not in self._subscribed:
            logger.info("You are not subscribed to %s", category.value)
            return

        self._subscribed.discard(category)
        await self._send(ControlMessage(method=category.unsubscribe_method, keys=list(keys)))
        logger.info("Unsubscribing from %s", category.value)

    async def run_forever(self) -> None:
        """
        Deliver inbound frames to the handler until the connection closes.

        Connects first if needed.  Returns when the server or close() ends
        the connection; errors are logged and never raised.
        """
        if self._ws is None:
            await self.connect()
        ws = self._ws
        if ws is None:
            return

        try:
            async for raw in ws:
                await self._dispatch(raw)
        except ConnectionClosedOK:
            pass
        except ConnectionClosed as exc:
            logger.error("WebSocket error: %s", exc)
        except (OSError, asyncio.TimeoutError, WebSocketException) as exc:
            logger.error("WebSocket error: %r", exc)
        logger.info("Connection closed")

    async def close(self) -> None:
        """Close the connection.  The subscription set is left as is."""
        if self._ws is not None and self._ws.state is not State.CLOSED:
            await self._ws.close()
        logger.info("WebSocket connection closed")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _send(self, message: ControlMessage) -> None:
        if not self.is_open:
            logger.info("WebSocket is not open")
            return

        assert self._ws is not None
        try:
            await self._ws.send(message.model_dump_json())
        except ConnectionClosed as exc:
            logger.warning("WebSocket closed while sending %s: %s", message.method, exc)

    async def _dispatch(self, raw: Union[str, bytes]) -> None:
        """Forward one inbound frame to the current handler, if any."""
        handler = self._handler
        if handler is None:
            return

        text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        try:
            result = handler(text)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Unhandled exception in PumpPortal message handler")


# ---------------------------------------------------------------------------
# Convenience factory
# ---------------------------------------------------------------------------

def make_ws_client(
    auth: Optional[PumpPortalAuth] = None,
    *,
    on_message: Optional[MessageHandler] = None,
) -> PumpPortalWebSocketClient:
    """Factory function to create a PumpPortalWebSocketClient with an optional handler."""
    client = PumpPortalWebSocketClient(auth)
    client.on_message(on_message)
    return client
