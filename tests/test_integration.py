"""
tests/test_integration.py – Integration smoke tests against pumpportal.fun.

These tests make real network calls.  They are skipped unless pytest is
run with the --integration flag; the local-transaction test additionally
needs a wallet public key and a token mint.

HOW TO RUN
----------
    export PUMPPORTAL_PUBLIC_KEY="..."   # wallet that would sign the trade
    export PUMPPORTAL_MINT="..."         # any token tradable on pump.fun

    pytest tests/test_integration.py -v --integration

WHAT THESE TESTS VERIFY
-----------------------
  1. WS new tokens  – the feed connects and delivers at least one frame
  2. Local trade    – trade-local returns a deserialisable transaction

create_wallet is deliberately not exercised: every call mints a new
wallet and API key on the service.
"""

from __future__ import annotations

import asyncio
import os
import time

import pytest
from solders.transaction import VersionedTransaction

from pumpportal_sdk import EventCategory, LocalTradeRequest, PumpPortalClient

PUBLIC_KEY = os.environ.get("PUMPPORTAL_PUBLIC_KEY", "")
MINT       = os.environ.get("PUMPPORTAL_MINT",       "")

_LOCAL_TRADE_CONFIGURED = bool(PUBLIC_KEY and MINT)


@pytest.mark.integration
async def test_ws_new_token_stream() -> None:
    """WebSocket: connects and delivers at least one new-token frame within 30 s."""
    received: list[str] = []

    async with PumpPortalClient() as client:
        assert client.ws.is_open, "Could not connect to the PumpPortal feed"
        client.on_message(received.append)
        await client.subscribe(EventCategory.NEW_TOKEN)

        ws_task = asyncio.create_task(client.ws.run_forever())
        deadline = time.perf_counter() + 30.0
        while not received and time.perf_counter() < deadline:
            await asyncio.sleep(0.1)

        await client.unsubscribe(EventCategory.NEW_TOKEN)
        ws_task.cancel()
        try:
            await ws_task
        except asyncio.CancelledError:
            pass

    assert received, "No frame received from the feed within 30 s"


@pytest.mark.integration
@pytest.mark.skipif(not _LOCAL_TRADE_CONFIGURED, reason="PUMPPORTAL_PUBLIC_KEY / PUMPPORTAL_MINT not set")
async def test_fetch_local_transaction() -> None:
    """REST: trade-local returns an unsigned transaction for the given signer."""
    request = LocalTradeRequest(
        public_key=PUBLIC_KEY,
        action="buy",
        mint=MINT,
        amount=0.001,
        denominated_in_sol=True,
        slippage=10,
        priority_fee=0.00001,
        pool="pump",
    )
    async with PumpPortalClient() as client:
        tx = await client.fetch_local_transaction(request)

    assert isinstance(tx, VersionedTransaction)
    assert str(tx.message.account_keys[0]) == PUBLIC_KEY
