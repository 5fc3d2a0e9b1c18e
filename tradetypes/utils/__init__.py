"""
Error taxonomy plus helpers for adapters (symbology, boundary checks).

Only the exceptions are re-exported here; ``option_symbols`` and
``validation`` depend on the schemas and are imported explicitly.
"""

from .exceptions import (
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

__all__ = [
    "ERR_DISCONNECTED",
    "ERR_SYMBOL_NOT_FOUND",
    "BrokerDisconnectedError",
    "ErrorWithCode",
    "ModelValidationError",
    "SymbolNotFoundError",
    "TradeTypesError",
    "error_code_or_default",
    "get_error_code",
    "is_error",
    "is_retryable",
]
