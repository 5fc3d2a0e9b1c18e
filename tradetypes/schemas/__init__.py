"""
Canonical, broker-agnostic data model.

Adapters build these from broker responses; strategy engines, UIs and
persistence read them structurally.
"""

from .base import CanonicalBaseModel, omit_empty_field
from .enums import PutOrCall, SymbolType, Tristate
from .instruments import Option, OptionChain, OptionCombo, SymbolDetails
from .market_data import OptionQuote, Quote
from .raw_data import RawData, RawDataKind
from .trading import Account, ConnectionStatus, Execution, Trade
from .vendor import VendorSpecific

__all__ = [
    "Account",
    "CanonicalBaseModel",
    "ConnectionStatus",
    "Execution",
    "Option",
    "OptionChain",
    "OptionCombo",
    "OptionQuote",
    "PutOrCall",
    "Quote",
    "RawData",
    "RawDataKind",
    "SymbolDetails",
    "SymbolType",
    "Trade",
    "Tristate",
    "VendorSpecific",
    "omit_empty_field",
]
