# Point-in-time pricing snapshots for equities and options
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, SerializationInfo, model_validator

from .base import CanonicalBaseModel, omit_empty_field
from .enums import PutOrCall
from .instruments import Option


class Quote(CanonicalBaseModel):
    """Market state for one instrument at ``time``.

    No field is required; a missing value is the zero value and is left out
    of the encoded form. The ``option_*`` aggregates only apply to
    underlyings with listed options.
    """
    high: float = omit_empty_field(0.0)
    low: float = omit_empty_field(0.0)
    open: float = omit_empty_field(0.0)
    close: float = omit_empty_field(0.0)
    mark: float = omit_empty_field(0.0)
    volume: int = omit_empty_field(0)

    bid: float = omit_empty_field(0.0)
    bid_size: int = omit_empty_field(0)
    bid_exch: str = omit_empty_field("")

    ask: float = omit_empty_field(0.0)
    ask_size: int = omit_empty_field(0)
    ask_exch: str = omit_empty_field("")

    last_time: Optional[datetime] = omit_empty_field(None)
    last: float = omit_empty_field(0.0)
    last_size: int = omit_empty_field(0)
    last_exch: str = omit_empty_field("")

    option_historical_volatility: float = omit_empty_field(0.0, alias="option_hv")
    option_implied_volatility: float = omit_empty_field(0.0, alias="option_iv")
    option_call_open_int: int = omit_empty_field(0)
    option_call_volume: int = omit_empty_field(0, alias="option_call_vol")
    option_put_open_int: int = omit_empty_field(0)
    option_put_volume: int = omit_empty_field(0, alias="option_put_vol")

    # TODO: add `shortable: Tristate` once brokers report it consistently
    avg_vol: float = omit_empty_field(0.0, description="Not supported by all brokers")

    time: Optional[datetime] = None
    incomplete: bool = omit_empty_field(False, description="Partial data, e.g. feed still updating")


# Names and wire aliases that belong to the embedded quote of an OptionQuote
QUOTE_KEYS = frozenset(
    list(Quote.model_fields)
    + [field.alias for field in Quote.model_fields.values() if field.alias]
)


class OptionQuote(CanonicalBaseModel):
    """A Quote for one option contract, plus its identity and Greeks.

    Composition rather than inheritance: the market state lives in ``quote``.
    Quote fields can be read directly (``oq.bid``) and are accepted flat at
    construction; the encoded form is flat as well.
    """
    model_config = ConfigDict(protected_namespaces=())

    quote: Quote = Field(default_factory=Quote)

    strike: float
    underlying: str
    expiration: str
    type: PutOrCall
    min_price_delta: float = 0.0
    full_symbol: str = Field("", description="The full symbol for the option")
    open_interest: int = 0

    model_price: float = 0.0
    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0
    rho: float = Field(0.0, description="Not always supported")

    @model_validator(mode="before")
    @classmethod
    def _nest_quote_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            quote = {k: v for k, v in data.items() if k in QUOTE_KEYS}
            if quote and "quote" in data:
                raise ValueError(
                    f"quote fields given both nested and flat: {sorted(quote)}"
                )
            if quote:
                data = {k: v for k, v in data.items() if k not in QUOTE_KEYS}
                data["quote"] = quote
        return data

    def _post_serialize(self, data: Dict[str, Any], info: SerializationInfo) -> Dict[str, Any]:
        quote = data.pop("quote", None)
        if isinstance(quote, dict):
            return {**quote, **data}
        return data

    def __getattr__(self, item: str) -> Any:
        if item in Quote.model_fields:
            return getattr(self.quote, item)
        return super().__getattr__(item)

    @property
    def option(self) -> Option:
        """Identity of the contract this quote prices"""
        return Option(
            underlying=self.underlying,
            strike=self.strike,
            expiration=self.expiration,
            type=self.type,
        )
