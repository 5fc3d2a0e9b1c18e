"""
Option symbology and chain helpers.

OCC symbols are 21 characters: root padded to 6, expiration as YYMMDD,
P or C, and the strike times 1000 zero-padded to 8 digits, e.g.
``IWM   251103P00247000``. Many brokers drop the root padding; both forms
are accepted when parsing.
"""

import re
from datetime import date, datetime
from typing import Iterable, Iterator, Tuple

from tradetypes.logging import get_logger
from tradetypes.schemas.enums import PutOrCall, SymbolType
from tradetypes.schemas.instruments import Option, OptionChain

logger = get_logger("tradetypes.utils.option_symbols")

OCC_ROOT_WIDTH = 6
OCC_STRIKE_SCALE = 1000
OCC_MAX_STRIKE = 99_999_999 / OCC_STRIKE_SCALE

_OCC_RE = re.compile(
    r"^(?P<root>[A-Z0-9.]{1,6})\s*(?P<date>\d{6})(?P<type>[CP])(?P<strike>\d{8})$"
)
_EXPIRATION_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_expiration(value: str) -> date:
    """Parse a canonical YYYY-MM-DD expiration.

    Compact (``20250117``) and week-date forms are rejected even where
    ``date.fromisoformat`` accepts them.
    """
    if not isinstance(value, str) or not _EXPIRATION_RE.match(value):
        raise ValueError(f"Expiration is not YYYY-MM-DD: {value!r}")
    return date.fromisoformat(value)


def build_occ_symbol(option: Option, padded: bool = True) -> str:
    """
    Build the OCC symbol for an option.

    Args:
        option: Option identity; expiration must be YYYY-MM-DD
        padded: Pad the root to 6 characters (canonical 21-char form)

    Returns:
        OCC symbol, e.g. ``AAPL  250117C00150000``

    Raises:
        ValueError: If the expiration is not ISO formatted or the strike
            does not fit the 8-digit field
    """
    expiration = parse_expiration(option.expiration)

    if option.strike <= 0 or option.strike > OCC_MAX_STRIKE:
        raise ValueError(f"Strike out of OCC range: {option.strike}")

    root = option.underlying.strip().upper()
    if padded:
        root = root.ljust(OCC_ROOT_WIDTH)
    strike = int(round(option.strike * OCC_STRIKE_SCALE))
    return f"{root}{expiration.strftime('%y%m%d')}{option.type.occ_code}{strike:08d}"


def parse_occ_symbol(symbol: str) -> Option:
    """Parse an OCC symbol (padded or not) into an Option.

    Raises:
        ValueError: If the symbol is not OCC shaped or its date is invalid
    """
    match = _OCC_RE.match(symbol.strip().upper())
    if not match:
        raise ValueError(f"Not an OCC option symbol: {symbol!r}")

    try:
        expiration = datetime.strptime(match.group("date"), "%y%m%d").date()
    except ValueError as e:
        raise ValueError(f"Invalid expiration in OCC symbol: {symbol!r}") from e

    return Option(
        underlying=match.group("root"),
        strike=int(match.group("strike")) / OCC_STRIKE_SCALE,
        expiration=expiration.isoformat(),
        type=PutOrCall(match.group("type")),
    )


def classify_symbol(symbol: str) -> SymbolType:
    """Interpret a bare symbol string: OCC-shaped means option."""
    if _OCC_RE.match(symbol.strip().upper()):
        return SymbolType.OPTION
    return SymbolType.EQUITY


def iter_strike_expirations(chain: OptionChain) -> Iterator[Tuple[float, str]]:
    """Cross join of expirations x strikes, expiration-major."""
    for expiration in chain.expirations:
        for strike in chain.strikes:
            yield strike, expiration


def expand_chain(chain: OptionChain,
                 types: Iterable[PutOrCall] = (PutOrCall.PUT, PutOrCall.CALL)) -> Iterator[Option]:
    """Yield every contract identity the chain describes.

    Computed on demand; the chain itself only stores the two sequences.
    """
    types = tuple(types)
    count = 0
    for strike, expiration in iter_strike_expirations(chain):
        for option_type in types:
            count += 1
            yield Option(
                underlying=chain.underlying,
                strike=strike,
                expiration=expiration,
                type=option_type,
            )
    logger.debug("Expanded option chain", underlying=chain.underlying, contracts=count)
