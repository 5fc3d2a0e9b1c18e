# Instrument identity and descriptive metadata, single and multi-leg
from typing import List, Set

from pydantic import ConfigDict, Field, field_serializer

from .base import CanonicalBaseModel, omit_empty_field
from .enums import PutOrCall
from .vendor import VendorSpecific


class SymbolDetails(CanonicalBaseModel):
    """Descriptive metadata for any tradable symbol, equity or option"""
    symbol: str
    description: str = ""
    vendor: VendorSpecific = Field(default_factory=VendorSpecific)


class Option(CanonicalBaseModel):
    """Canonical identity of a single option contract.

    Pure identity: no pricing, no position. Frozen so it can be used as a
    dict key or set member.
    """
    model_config = ConfigDict(frozen=True)

    underlying: str
    strike: float
    expiration: str = Field(..., description="Expiration date, YYYY-MM-DD")
    type: PutOrCall


class OptionCombo(CanonicalBaseModel):
    """Ordered multi-leg strategy (e.g. a vertical spread).

    Leg order matters to consumers; ratios and sides are not carried here.
    """
    legs: List[Option] = Field(default_factory=list)


class OptionChain(CanonicalBaseModel):
    """Strikes x expirations listed for an underlying.

    Strikes and expirations are kept sorted ascending by convention only.
    """
    underlying: str
    multiplier: str = omit_empty_field("")
    exchanges: Set[str] = omit_empty_field(default_factory=set)
    strikes: List[float] = Field(default_factory=list)
    expirations: List[str] = Field(default_factory=list)

    @field_serializer("exchanges")
    def _sorted_exchanges(self, exchanges: Set[str]) -> List[str]:
        return sorted(exchanges)
