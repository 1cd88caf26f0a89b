"""
examples/quickstart.py – End-to-end demo of the PumpPortal SDK.

Walks through:
  1. Stream new-token and token-trade events over the data feed
  2. Build an unsigned local transaction for a wallet you sign with yourself
  3. Optionally submit a server-executed trade with an API key

HOW TO RUN
----------
    export PUMPPORTAL_API_KEY="..."       # optional: enables step 3
    export PUMPPORTAL_PUBLIC_KEY="..."    # optional: enables step 2
    export PUMPPORTAL_MINT="..."          # token used by steps 2 and 3
    python examples/quickstart.py

    Step 3 spends real SOL.  It only runs when PUMPPORTAL_TRADE=1.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os

from pumpportal_sdk import (
    EventCategory,
    LocalTradeRequest,
    PumpPortalAPIError,
    PumpPortalClient,
    TradeRequest,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s – %(message)s",
)
logger = logging.getLogger("quickstart")

# ---------------------------------------------------------------------------
# Config – read from environment variables
# ---------------------------------------------------------------------------

API_KEY    = os.environ.get("PUMPPORTAL_API_KEY")
PUBLIC_KEY = os.environ.get("PUMPPORTAL_PUBLIC_KEY")
MINT       = os.environ.get("PUMPPORTAL_MINT")
TRADE      = os.environ.get("PUMPPORTAL_TRADE") == "1"

STREAM_SECONDS = 15


# ---------------------------------------------------------------------------
# Part 1 – data feed
# ---------------------------------------------------------------------------

def on_event(raw: str) -> None:
    try:
        event = json.loads(raw)
    except json.JSONDecodeError:
        logger.info("[feed ]  %s", raw)
        return
    logger.info(
        "[feed ]  %s  mint=%s  %s",
        event.get("txType", event.get("message", "?")),
        event.get("mint", "–"),
        event.get("name", ""),
    )


async def feed_demo(client: PumpPortalClient) -> None:
    logger.info("=== Feed demo (runs for %d s) ===", STREAM_SECONDS)

    client.on_message(on_event)
    await client.subscribe(EventCategory.NEW_TOKEN)
    if MINT:
        await client.subscribe(EventCategory.TOKEN_TRADE, [MINT])

    try:
        await asyncio.wait_for(client.ws.run_forever(), timeout=STREAM_SECONDS)
    except asyncio.TimeoutError:
        pass

    await client.unsubscribe(EventCategory.NEW_TOKEN)
    if MINT:
        await client.unsubscribe(EventCategory.TOKEN_TRADE, [MINT])


# ---------------------------------------------------------------------------
# Part 2 – trading
# ---------------------------------------------------------------------------

async def local_trade_demo(client: PumpPortalClient) -> None:
    logger.info("=== Local transaction demo ===")
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
    try:
        tx = await client.fetch_local_transaction(request)
    except PumpPortalAPIError as exc:
        logger.warning("trade-local rejected the request: %s", exc)
        return
    logger.info(
        "Unsigned transaction: %d instructions, fee payer %s – sign it and send it to your RPC",
        len(tx.message.instructions),
        tx.message.account_keys[0],
    )


async def server_trade_demo(client: PumpPortalClient) -> None:
    logger.info("=== Server-executed trade ===")
    result = await client.submit_trade(TradeRequest(
        action="buy",
        mint=MINT,
        amount=0.001,
        denominated_in_sol=True,
        slippage=10,
        priority_fee=0.00001,
    ))
    if result.get("errors"):
        logger.warning("Trade failed: %s", result["errors"])
    else:
        logger.info("Trade sent – signature %s", result.get("signature"))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

async def main() -> None:
    async with PumpPortalClient(api_key=API_KEY) as client:
        if PUBLIC_KEY and MINT:
            await local_trade_demo(client)
        if TRADE and API_KEY and MINT:
            await server_trade_demo(client)
        await feed_demo(client)


if __name__ == "__main__":
    asyncio.run(main())
