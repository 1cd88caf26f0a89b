"""
types.py – Pydantic v2 models for the PumpPortal API schema.

Field names are snake_case on the Python side; the camelCase wire names
used by PumpPortal are produced by the serialisation helpers in rest.py
(requests) or by field aliases (responses).

Validation
----------
Models are validated on construction.  Only the structure is checked
(known action / pool, field types); amounts and slippage are forwarded
as given and left for the remote service to judge.

    req = TradeRequest(action="buy", mint="...", amount=0.1,
                       denominated_in_sol=True, slippage=10, priority_fee=0.0005)
    cred = WalletCredential.model_validate(raw)
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Feed topics
# ---------------------------------------------------------------------------

@unique
class EventCategory(str, Enum):
    """A subscribable topic on the PumpPortal data feed."""
    NEW_TOKEN         = "new-token"
    TOKEN_TRADE       = "token-trade"
    ACCOUNT_TRADE     = "account-trade"
    RAYDIUM_LIQUIDITY = "raydium-liquidity"

    @property
    def subscribe_method(self) -> str:
        return _METHODS[self][0]

    @property
    def unsubscribe_method(self) -> str:
        return _METHODS[self][1]

    @classmethod
    def coerce(cls, value: Union["EventCategory", str]) -> "EventCategory":
        """
        Accept a category, its string value ("new-token") or its
        subscribe verb ("subscribeNewToken").
        """
        if isinstance(value, cls):
            return value
        for category, (subscribe, _) in _METHODS.items():
            if value == category.value or value == subscribe:
                return category
        raise ValueError(f"Unknown PumpPortal event category: {value!r}")


# category → (subscribe verb, unsubscribe verb)
_METHODS: dict[EventCategory, tuple[str, str]] = {
    EventCategory.NEW_TOKEN:         ("subscribeNewToken",         "unsubscribeNewToken"),
    EventCategory.TOKEN_TRADE:       ("subscribeTokenTrade",       "unsubscribeTokenTrade"),
    EventCategory.ACCOUNT_TRADE:     ("subscribeAccountTrade",     "unsubscribeAccountTrade"),
    EventCategory.RAYDIUM_LIQUIDITY: ("subscribeRaydiumLiquidity", "unsubscribeRaydiumLiquidity"),
}


# ---------------------------------------------------------------------------
# Trading enumerations
# ---------------------------------------------------------------------------

@unique
class TradeAction(str, Enum):
    BUY  = "buy"
    SELL = "sell"


@unique
class Pool(str, Enum):
    PUMP    = "pump"
    RAYDIUM = "raydium"
    AUTO    = "auto"


# Either a plain number or a percentage of the held balance, e.g. "100%"
Amount = Union[int, float, str]


def _validate_amount(v: Amount) -> Amount:
    if isinstance(v, str) and not v.strip():
        raise ValueError("amount must be a number or a non-empty percentage string")
    return v


def _validate_non_empty(v: str, field: str) -> str:
    if not v or not v.strip():
        raise ValueError(f"{field} must be a non-empty string")
    return v


# ---------------------------------------------------------------------------
# Feed control frames
# ---------------------------------------------------------------------------

class ControlMessage(BaseModel):
    """Outbound subscribe / unsubscribe frame sent over the data feed."""
    method: str
    keys:   list[str] = []


# ---------------------------------------------------------------------------
# Trade requests
# ---------------------------------------------------------------------------

class TradeRequest(BaseModel):
    """
    A trade executed by PumpPortal on behalf of the API key's wallet.

    action             : buy or sell
    mint               : token contract address
    amount             : SOL or token amount, or a percentage string ("100%")
    denominated_in_sol : True if amount is SOL, False if it is tokens
    slippage           : percent slippage allowed
    priority_fee       : priority fee in SOL
    pool               : exchange to trade on (default pump)
    skip_preflight     : skip simulation before sending (default True)
    """
    action:             TradeAction
    mint:               str
    amount:             Amount
    denominated_in_sol: bool
    slippage:           float
    priority_fee:       float
    pool:               Pool = Pool.PUMP
    skip_preflight:     bool = True

    @field_validator("mint")
    @classmethod
    def validate_mint(cls, v: str) -> str:
        return _validate_non_empty(v, "mint")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Amount) -> Amount:
        return _validate_amount(v)


class LocalTradeRequest(BaseModel):
    """
    A trade built by PumpPortal but signed and sent by the caller.

    Keyed by the signer's public key instead of an API key.  pool is
    only sent when set; the service picks its own default otherwise.
    """
    public_key:         str
    action:             TradeAction
    mint:               str
    amount:             Amount
    denominated_in_sol: bool
    slippage:           float
    priority_fee:       float
    pool:               Optional[Pool] = None

    @field_validator("public_key", "mint")
    @classmethod
    def validate_address(cls, v: str, info) -> str:
        return _validate_non_empty(v, info.field_name)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Amount) -> Amount:
        return _validate_amount(v)


# ---------------------------------------------------------------------------
# Wallet
# ---------------------------------------------------------------------------

class WalletCredential(BaseModel):
    """
    Credentials returned by /api/create-wallet.

    The SDK never stores these; keep privateKey somewhere safe.
    Dump with by_alias=True to get the wire names back.
    """
    api_key:           str = Field(alias="apiKey")
    wallet_public_key: str = Field(alias="walletPublicKey")
    private_key:       str = Field(alias="privateKey", repr=False)

    model_config = ConfigDict(populate_by_name=True)
