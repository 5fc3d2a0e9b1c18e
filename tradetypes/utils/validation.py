"""
Adapter-boundary checks for canonical records.

The models themselves stay permissive; adapters call ``validate_record``
after normalizing a vendor payload. Issues are logged as warnings and only
raised (as ModelValidationError) in strict mode.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from tradetypes.config.settings import Settings, get_settings
from tradetypes.logging import bind_broker_context, get_logger
from tradetypes.schemas.instruments import Option, OptionChain
from tradetypes.schemas.market_data import OptionQuote
from tradetypes.schemas.trading import Trade
from tradetypes.schemas.vendor import VendorSpecific
from .exceptions import ModelValidationError
from .option_symbols import parse_expiration

logger = get_logger("tradetypes.utils.validation", component="validation")


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a record"""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def _is_iso_date(value: str) -> bool:
    try:
        parse_expiration(value)
    except ValueError:
        return False
    return True


def check_vendor_specific(vendor: VendorSpecific, settings: Settings) -> List[ValidationIssue]:
    return [
        ValidationIssue(f"keys[{key}]", "listed in keys but missing from data")
        for key in vendor.missing_keys()
    ]


def _check_option_identity(underlying: str, strike: float, expiration: str,
                           settings: Settings) -> List[ValidationIssue]:
    issues = []
    if not underlying.strip():
        issues.append(ValidationIssue("underlying", "must not be empty"))
    if strike <= 0:
        issues.append(ValidationIssue("strike", f"must be positive, got {strike}"))
    elif settings.validation.max_strike is not None and strike > settings.validation.max_strike:
        issues.append(ValidationIssue("strike", f"exceeds max_strike {settings.validation.max_strike}"))
    if not expiration:
        issues.append(ValidationIssue("expiration", "must not be empty"))
    elif not _is_iso_date(expiration):
        issues.append(ValidationIssue("expiration", f"not YYYY-MM-DD: {expiration!r}"))
    return issues


def check_option(option: Option, settings: Settings) -> List[ValidationIssue]:
    return _check_option_identity(option.underlying, option.strike, option.expiration, settings)


def check_option_quote(quote: OptionQuote, settings: Settings) -> List[ValidationIssue]:
    return _check_option_identity(quote.underlying, quote.strike, quote.expiration, settings)


def check_option_chain(chain: OptionChain, settings: Settings) -> List[ValidationIssue]:
    issues = []
    if not chain.underlying.strip():
        issues.append(ValidationIssue("underlying", "must not be empty"))
    if chain.strikes != sorted(set(chain.strikes)):
        issues.append(ValidationIssue("strikes", "expected unique and sorted ascending"))
    if chain.expirations != sorted(set(chain.expirations)):
        issues.append(ValidationIssue("expirations", "expected unique and sorted ascending"))
    for expiration in chain.expirations:
        if not _is_iso_date(expiration):
            issues.append(ValidationIssue("expirations", f"not YYYY-MM-DD: {expiration!r}"))
    return issues


def check_trade(trade: Trade, settings: Settings) -> List[ValidationIssue]:
    """Partial fills are valid; overfills and empty fills are not."""
    issues = []
    for i, execution in enumerate(trade.executions):
        if execution.size <= 0:
            issues.append(ValidationIssue(f"executions[{i}].size", f"must be positive, got {execution.size}"))
    if trade.filled_size > trade.size:
        issues.append(ValidationIssue(
            "executions",
            f"filled size {trade.filled_size} exceeds order size {trade.size}",
        ))
    return issues


_CHECKS: Dict[Type[Any], Callable[[Any, Settings], List[ValidationIssue]]] = {
    VendorSpecific: check_vendor_specific,
    Option: check_option,
    OptionQuote: check_option_quote,
    OptionChain: check_option_chain,
    Trade: check_trade,
}


def validate_record(record: Any, settings: Optional[Settings] = None,
                    strict: Optional[bool] = None) -> List[ValidationIssue]:
    """
    Run the boundary checks registered for the record's type.

    Args:
        record: A canonical model instance
        settings: Settings to use; process settings when omitted
        strict: Override ``settings.validation.strict``

    Returns:
        Issues found (empty when the record is clean or has no checks)

    Raises:
        ModelValidationError: In strict mode, when any issue is found
    """
    settings = settings or get_settings()
    check = _CHECKS.get(type(record))
    if check is None:
        return []

    issues = check(record, settings)
    record_type = type(record).__name__
    log = logger
    broker = getattr(record, "broker", "")
    if broker:
        log = bind_broker_context(logger, broker, getattr(record, "account", None))
    for issue in issues:
        log.warning("Record failed boundary check", record_type=record_type,
                    field=issue.field, issue=issue.message)

    if strict is None:
        strict = settings.validation.strict
    if issues and strict:
        raise ModelValidationError(
            f"{record_type} failed validation: " + "; ".join(str(i) for i in issues),
            issues=issues,
            details={"record_type": record_type},
        )
    return issues
