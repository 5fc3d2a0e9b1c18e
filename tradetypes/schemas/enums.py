# Enumerations shared by the instrument, market data and trading models
from enum import Enum
from typing import Optional


class PutOrCall(str, Enum):
    PUT = "PUT"
    CALL = "CALL"

    @classmethod
    def _missing_(cls, value):
        # Brokers report "put", "Call", "P", "C"
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized in ("P", "PUT"):
                return cls.PUT
            if normalized in ("C", "CALL"):
                return cls.CALL
        return None

    @property
    def occ_code(self) -> str:
        """Single letter used in OCC option symbols."""
        return self.value[0]


class SymbolType(str, Enum):
    """How a bare symbol string should be interpreted"""
    EQUITY = "Equity"
    OPTION = "Option"


class Tristate(str, Enum):
    """Broker-reported capability that may be unknown (e.g. shortability).

    Not wired to any field yet; MAYBE must stay distinguishable from NO.
    """
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"

    @classmethod
    def from_optional(cls, value: Optional[bool]) -> "Tristate":
        if value is None:
            return cls.MAYBE
        return cls.YES if value else cls.NO

    @property
    def is_known(self) -> bool:
        return self is not Tristate.MAYBE
