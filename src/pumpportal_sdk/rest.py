"""
rest.py – REST clients (sync and async) for PumpPortal trading.

Three operations, each a single request with no retry:

  submit_trade            POST /api/trade?api-key=...   → JSON, as returned
  fetch_local_transaction POST /api/trade-local          → VersionedTransaction
  create_wallet           GET  /api/create-wallet        → WalletCredential

fetch_local_transaction and create_wallet raise PumpPortalAPIError on
non-2xx responses.  submit_trade returns whatever JSON the service sent,
error payloads included.  Transport and decode failures are logged once
and re-raised unchanged.

Usage – sync
------------
    from pumpportal_sdk import PumpPortalRestClient, PumpPortalAuth, TradeRequest

    client = PumpPortalRestClient(auth=PumpPortalAuth(api_key="..."))
    result = client.submit_trade(TradeRequest(
        action="buy", mint="...", amount=0.1, denominated_in_sol=True,
        slippage=10, priority_fee=0.0005,
    ))

Usage – async
-------------
    async with AsyncPumpPortalRestClient(auth=auth) as client:
        tx = await client.fetch_local_transaction(local_request)
"""

from __future__ import annotations

import json as jsonlib
import logging
from typing import Any, Optional

import aiohttp
import requests
from solders.transaction import VersionedTransaction

from .auth import PumpPortalAuth
from .types import LocalTradeRequest, TradeRequest, WalletCredential

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class PumpPortalAPIError(Exception):
    """Raised when PumpPortal answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        body: str = "",
        method: str = "",
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.reason      = reason
        self.body        = body
        self.method      = method.upper()
        self.url         = url
        location = f" {self.method} {self.url}" if url else ""
        super().__init__(f"PumpPortal API error [{status_code} {reason}]{location}")


# ---------------------------------------------------------------------------
# Serialisation helpers (shared by sync and async clients)
# ---------------------------------------------------------------------------

def _trade_to_dict(request: TradeRequest) -> dict:
    """Serialise a TradeRequest to the JSON body expected by /api/trade."""
    return {
        "action":           request.action.value,
        "mint":             request.mint,
        "amount":           request.amount,
        "denominatedInSol": request.denominated_in_sol,
        "slippage":         request.slippage,
        "priorityFee":      request.priority_fee,
        "pool":             request.pool.value,
        "skipPreflight":    request.skip_preflight,
    }


def _local_trade_to_dict(request: LocalTradeRequest) -> dict:
    """Serialise a LocalTradeRequest to the JSON body expected by /api/trade-local."""
    body: dict = {
        "publicKey":        request.public_key,
        "action":           request.action.value,
        "mint":             request.mint,
        "amount":           request.amount,
        "denominatedInSol": request.denominated_in_sol,
        "slippage":         request.slippage,
        "priorityFee":      request.priority_fee,
    }
    if request.pool is not None:
        body["pool"] = request.pool.value
    return body


def _check_status(status: int, reason: str, content: bytes, method: str, url: str) -> None:
    if status < 400:
        return
    body = content.decode("utf-8", errors="replace")
    logger.error("%s %s failed: %d %s", method.upper(), url, status, reason)
    raise PumpPortalAPIError(status, reason, body, method=method, url=url)


def _decode_json(content: bytes, method: str, url: str) -> Any:
    try:
        return jsonlib.loads(content)
    except ValueError:
        logger.error("Non-JSON response from %s %s: %r", method.upper(), url, content[:200])
        raise


def _parse_transaction(content: bytes, url: str) -> VersionedTransaction:
    """Deserialise the unsigned transaction bytes returned by /api/trade-local."""
    try:
        return VersionedTransaction.from_bytes(content)
    except Exception:
        logger.error("Could not deserialise %d-byte transaction from %s", len(content), url)
        raise


def _parse_wallet(raw: Any) -> WalletCredential:
    return WalletCredential.model_validate(raw)


# ---------------------------------------------------------------------------
# Synchronous client
# ---------------------------------------------------------------------------

class PumpPortalRestClient:
    """
    Synchronous REST client for PumpPortal.

    Parameters
    ----------
    auth    : PumpPortalAuth with the API key and base URL
    timeout : HTTP timeout in seconds; None leaves requests' default (no timeout)
    """

    def __init__(self, auth: PumpPortalAuth, timeout: Optional[float] = None) -> None:
        self._auth    = auth
        self._timeout = timeout
        self._session: Optional[requests.Session] = None

    def __enter__(self) -> "PumpPortalRestClient":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    # ------------------------------------------------------------------
    # Internal request helper
    # ------------------------------------------------------------------

    def _send(
        self,
        method: str,
        url: str,
        *,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> tuple[int, str, bytes]:
        """Send one request and return (status, reason, body bytes)."""
        if self._session is None:
            self._session = requests.Session()

        logger.debug("%s %s  body=%s", method.upper(), url, json)
        try:
            resp = self._session.request(method, url, json=json, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method.upper(), url, exc)
            raise
        return resp.status_code, resp.reason or "", resp.content

    # ------------------------------------------------------------------
    # Trading
    # ------------------------------------------------------------------

    def submit_trade(self, request: TradeRequest) -> Any:
        """Have PumpPortal execute a trade with the API key's wallet."""
        params = self._auth.api_key_params()
        url    = self._auth.trade_url
        status, reason, content = self._send("POST", url, json=_trade_to_dict(request), params=params)
        if status >= 400:
            logger.warning("Trade request returned %d %s", status, reason)
        return _decode_json(content, "POST", url)

    def fetch_local_transaction(self, request: LocalTradeRequest) -> VersionedTransaction:
        """Fetch an unsigned transaction for the caller to sign and send."""
        url = self._auth.trade_local_url
        status, reason, content = self._send("POST", url, json=_local_trade_to_dict(request))
        _check_status(status, reason, content, "POST", url)
        return _parse_transaction(content, url)

    def create_wallet(self) -> WalletCredential:
        """Create a new wallet and linked API key."""
        url = self._auth.create_wallet_url
        status, reason, content = self._send("GET", url)
        _check_status(status, reason, content, "GET", url)
        return _parse_wallet(_decode_json(content, "GET", url))


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------

class AsyncPumpPortalRestClient:
    """
    Async REST client for PumpPortal (aiohttp-based).

    Usage
    -----
        async with AsyncPumpPortalRestClient(auth=auth) as client:
            wallet = await client.create_wallet()
    """

    def __init__(self, auth: PumpPortalAuth, timeout: Optional[float] = None) -> None:
        self._auth    = auth
        self._timeout = timeout
        self._session: Any = None   # aiohttp.ClientSession, created on first use

    async def __aenter__(self) -> "AsyncPumpPortalRestClient":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    # ------------------------------------------------------------------
    # Internal async request helper
    # ------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        url: str,
        *,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> tuple[int, str, bytes]:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()

        kwargs: dict[str, Any] = {}
        if self._timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self._timeout)

        logger.debug("%s %s  body=%s", method.upper(), url, json)
        try:
            async with self._session.request(method, url, json=json, params=params, **kwargs) as resp:
                return resp.status, resp.reason or "", await resp.read()
        except aiohttp.ClientError as exc:
            logger.error("%s %s failed: %s", method.upper(), url, exc)
            raise

    # ------------------------------------------------------------------
    # Trading
    # ------------------------------------------------------------------

    async def submit_trade(self, request: TradeRequest) -> Any:
        params = self._auth.api_key_params()
        url    = self._auth.trade_url
        status, reason, content = await self._send("POST", url, json=_trade_to_dict(request), params=params)
        if status >= 400:
            logger.warning("Trade request returned %d %s", status, reason)
        return _decode_json(content, "POST", url)

    async def fetch_local_transaction(self, request: LocalTradeRequest) -> VersionedTransaction:
        url = self._auth.trade_local_url
        status, reason, content = await self._send("POST", url, json=_local_trade_to_dict(request))
        _check_status(status, reason, content, "POST", url)
        return _parse_transaction(content, url)

    async def create_wallet(self) -> WalletCredential:
        url = self._auth.create_wallet_url
        status, reason, content = await self._send("GET", url)
        _check_status(status, reason, content, "GET", url)
        return _parse_wallet(_decode_json(content, "GET", url))
