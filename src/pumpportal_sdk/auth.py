"""
auth.py – API key and endpoint configuration for PumpPortal.

PumpPortal has no session handshake: the API key travels as the
``api-key`` query parameter on the trade endpoint, and the data feed and
the local-transaction / wallet endpoints are public.  PumpPortalAuth
simply holds the key and the base URLs so the REST and WebSocket
clients are configured in one place.

Usage
-----
    from pumpportal_sdk import PumpPortalAuth

    auth = PumpPortalAuth(api_key="my_api_key")
    auth.trade_url            # https://pumpportal.fun/api/trade
    auth.api_key_params()     # {"api-key": "my_api_key"}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

DEFAULT_BASE_URL = "https://pumpportal.fun"
DEFAULT_WS_URL   = "wss://pumpportal.fun/api/data"

_TRADE_PATH         = "/api/trade"
_TRADE_LOCAL_PATH   = "/api/trade-local"
_CREATE_WALLET_PATH = "/api/create-wallet"

# Query parameter carrying the API key
_API_KEY_PARAM = "api-key"


@dataclass
class PumpPortalAuth:
    """
    Holds the PumpPortal API key and endpoint URLs.

    Parameters
    ----------
    api_key  : PumpPortal API key (as returned by create_wallet); only
               needed for server-executed trades
    base_url : REST base URL
    ws_url   : Data feed WebSocket URL
    """

    api_key:  Optional[str] = None
    base_url: str           = DEFAULT_BASE_URL
    ws_url:   str           = DEFAULT_WS_URL

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    def __repr__(self) -> str:
        masked = "***" if self.api_key else None
        return f"PumpPortalAuth(api_key={masked!r}, base_url={self.base_url!r}, ws_url={self.ws_url!r})"

    # ------------------------------------------------------------------
    # URL properties
    # ------------------------------------------------------------------

    @property
    def trade_url(self) -> str:
        return self.base_url + _TRADE_PATH

    @property
    def trade_local_url(self) -> str:
        return self.base_url + _TRADE_LOCAL_PATH

    @property
    def create_wallet_url(self) -> str:
        return self.base_url + _CREATE_WALLET_PATH

    # ------------------------------------------------------------------
    # API key
    # ------------------------------------------------------------------

    def api_key_params(self) -> dict[str, str]:
        """Query parameters authenticating a trade request."""
        if not self.api_key:
            raise ValueError("An api_key is required for server-executed trades")
        return {_API_KEY_PARAM: self.api_key}
