# Order and fill lifecycle records
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from pydantic import ConfigDict, Field, field_validator

from tradetypes.utils.exceptions import get_error_code
from .base import CanonicalBaseModel, omit_empty_field
from .enums import PutOrCall
from .raw_data import RawPayload


class Account(CanonicalBaseModel):
    """Brokerage account; immutable once constructed"""
    model_config = ConfigDict(frozen=True)

    id: str
    broker: str
    description: str = ""

    def __str__(self) -> str:
        return f"{self.broker}:{self.id} - {self.description}"


class Execution(CanonicalBaseModel):
    """One fill event against an order.

    The option fields are only populated for fills against an option.
    ``realized_pnl`` is only meaningful for closing fills.
    """
    execution_id: str = Field(..., alias="id")
    option_type: Optional[PutOrCall] = omit_empty_field(None, alias="type")
    strike: float = omit_empty_field(0.0)
    expiration: str = omit_empty_field("")
    multiplier: int = omit_empty_field(0)

    exchange: str = ""
    size: int = 0
    price: float = 0.0
    commissions: float = 0.0
    realized_pnl: float = omit_empty_field(0.0)

    time: Optional[datetime] = None
    raw_data: RawPayload = omit_empty_field(None)

    @field_validator("option_type", mode="before")
    @classmethod
    def _blank_option_type(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Trade(CanonicalBaseModel):
    """Order-level aggregate owning its executions.

    ``size`` and ``price`` are the order's requested/average values; fills
    may not add up to ``size`` until the order is complete. Appending fills
    as they arrive is the caller's responsibility.
    """
    account: str = ""
    broker: str = ""
    order_id: str = Field(..., alias="id")
    symbol: str = ""

    size: int = 0
    price: float = 0.0

    executions: List[Execution] = Field(default_factory=list)

    time: Optional[datetime] = None
    raw_data: RawPayload = omit_empty_field(None)

    @property
    def filled_size(self) -> int:
        return sum(execution.size for execution in self.executions)


@dataclass
class ConnectionStatus:
    """Broker session state as reported by an adapter"""
    connected: bool
    error: Optional[BaseException] = None

    @property
    def error_code(self) -> Optional[int]:
        if self.error is None:
            return None
        return get_error_code(self.error)
