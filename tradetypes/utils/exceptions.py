# Failure values shared by broker adapters and their consumers.
#
# Some failures carry an HTTP-style status code, most don't. This layer never
# retries or recovers; it only defines what upstream policy inspects.

from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict, Iterator, Optional, Type, Union

from tradetypes.config.settings import get_settings


class TradeTypesError(Exception):
    """Base exception for all tradetypes errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)


class ErrorWithCode(TradeTypesError):
    """Failure paired with a status code (404 for "not found", ...).

    ``error`` may be an exception, which becomes the ``__cause__``, or a
    plain message.
    """

    def __init__(self, error: Union[BaseException, str], code: int,
                 details: Optional[Dict[str, Any]] = None):
        message = str(error)
        super().__init__(message, details)
        self.code = int(code)
        if isinstance(error, BaseException):
            self.error: Optional[BaseException] = error
            self.__cause__ = error
        else:
            self.error = None

    @property
    def status_phrase(self) -> str:
        try:
            return HTTPStatus(self.code).phrase
        except ValueError:
            return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code})"


class SymbolNotFoundError(ErrorWithCode):
    """Instrument lookup failed because the identifier is unknown"""

    def __init__(self, message: str = "symbol not found", symbol: Optional[str] = None, **kwargs):
        super().__init__(message, HTTPStatus.NOT_FOUND, **kwargs)
        self.symbol = symbol


class BrokerDisconnectedError(TradeTypesError):
    """Broker session absent or dropped; retry at a higher layer"""
    retryable = True

    def __init__(self, message: str = "broker disconnected", broker: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.broker = broker


class ModelValidationError(ErrorWithCode):
    """Adapter-boundary validation rejected a record"""

    def __init__(self, message: str, issues: Optional[list] = None, **kwargs):
        super().__init__(message, HTTPStatus.UNPROCESSABLE_ENTITY, **kwargs)
        self.issues = issues or []


_RETRYABLE_CODES = frozenset({
    HTTPStatus.BAD_GATEWAY,
    HTTPStatus.SERVICE_UNAVAILABLE,
    HTTPStatus.GATEWAY_TIMEOUT,
})

# Process-wide sentinels, compared by identity
ERR_SYMBOL_NOT_FOUND = SymbolNotFoundError()
ERR_DISCONNECTED = BrokerDisconnectedError()


def _cause_chain(err: BaseException) -> Iterator[BaseException]:
    seen = set()
    current: Optional[BaseException] = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        # Sentinels are shared, so a cause set by `raise SENTINEL from e` is
        # left over from some other failure
        if current is ERR_SYMBOL_NOT_FOUND or current is ERR_DISCONNECTED:
            return
        current = current.__cause__


def get_error_code(err: BaseException) -> Optional[int]:
    """Return the status code carried by ``err`` or its causes, else None."""
    for current in _cause_chain(err):
        if isinstance(current, ErrorWithCode):
            return current.code
    return None


def error_code_or_default(err: BaseException, default: Optional[int] = None) -> int:
    """Status code for ``err``, falling back to the configured default policy."""
    code = get_error_code(err)
    if code is not None:
        return code
    if default is None:
        default = get_settings().errors.default_status_code
    return default


def is_error(err: BaseException, target: Union[BaseException, Type[BaseException]]) -> bool:
    """True when ``err`` or one of its causes is ``target``.

    ``target`` is either a sentinel instance (identity match) or an exception
    class (isinstance match).
    """
    for current in _cause_chain(err):
        if isinstance(target, type):
            if isinstance(current, target):
                return True
        elif current is target:
            return True
    return False


def is_retryable(err: BaseException) -> bool:
    """Connectivity failures and upstream-unavailable codes are retryable."""
    for current in _cause_chain(err):
        if getattr(current, "retryable", False):
            return True
    return get_error_code(err) in _RETRYABLE_CODES
