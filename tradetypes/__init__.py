"""
tradetypes: canonical data model shared by broker integrations.

Instruments, quotes, trades, executions, accounts and error signaling in
one normalized representation, with a sideband for vendor-specific fields.
"""

from tradetypes.schemas import (
    Account,
    ConnectionStatus,
    Execution,
    Option,
    OptionChain,
    OptionCombo,
    OptionQuote,
    PutOrCall,
    Quote,
    RawData,
    RawDataKind,
    SymbolDetails,
    SymbolType,
    Trade,
    Tristate,
    VendorSpecific,
)
from tradetypes.utils.exceptions import (
    ERR_DISCONNECTED,
    ERR_SYMBOL_NOT_FOUND,
    BrokerDisconnectedError,
    ErrorWithCode,
    ModelValidationError,
    SymbolNotFoundError,
    TradeTypesError,
    error_code_or_default,
    get_error_code,
    is_error,
    is_retryable,
)

__version__ = "0.1.0"

__all__ = [
    "Account",
    "BrokerDisconnectedError",
    "ConnectionStatus",
    "ERR_DISCONNECTED",
    "ERR_SYMBOL_NOT_FOUND",
    "ErrorWithCode",
    "ModelValidationError",
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
    "SymbolNotFoundError",
    "SymbolType",
    "Trade",
    "TradeTypesError",
    "Tristate",
    "VendorSpecific",
    "error_code_or_default",
    "get_error_code",
    "is_error",
    "is_retryable",
]
