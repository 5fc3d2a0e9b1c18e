# Sideband for broker fields with no canonical equivalent
from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import Field

from .base import CanonicalBaseModel


class VendorSpecific(CanonicalBaseModel):
    """Information that isn't common to the supported brokers and isn't vital,
    but might be interesting to show when it's present.

    ``data`` holds the values; ``keys`` only defines the preferred display
    order. A key listed in ``keys`` may be missing from ``data`` and must be
    treated as absent.
    """
    data: Dict[str, str] = Field(default_factory=dict)
    keys: List[str] = Field(default_factory=list, description="Preferred order to print the keys")

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.data.get(key, default)

    def ordered_items(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) in display order, skipping keys without data."""
        for key in self.keys:
            if key in self.data:
                yield key, self.data[key]

    def missing_keys(self) -> List[str]:
        return [key for key in self.keys if key not in self.data]
