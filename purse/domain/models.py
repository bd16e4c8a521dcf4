"""Domain type definitions for purse.

- BaseUnits: Signed amount counted in nickels (the smallest coin)
- Purse: The four coin denominations a character carries
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, NewType

# All arithmetic happens on a single nickel count to keep conversions lossless
BaseUnits = NewType("BaseUnits", int)

# Weight of each coin in nickels, highest denomination first
DENOMINATIONS: dict[str, int] = {
    "gold": 1000,
    "silver": 100,
    "copper": 10,
    "nickel": 1,
}


@dataclass(frozen=True)
class Purse:
    """Immutable coin record.

    Fields may hold any integer while a character is being edited; a
    canonical purse keeps silver, copper and nickel in [0, 9].
    """

    gold: int = 0
    silver: int = 0
    copper: int = 0
    nickel: int = 0

    @classmethod
    def zero(cls) -> "Purse":
        return cls()

    @classmethod
    def from_mapping(cls, money: Mapping[str, Any]) -> "Purse":
        """Build a purse from a partial mapping.

        Args:
            money: Mapping with any of gold/silver/copper/nickel.

        Returns:
            Purse with missing or None fields set to 0.
        """
        return cls(**{name: int(money.get(name) or 0) for name in DENOMINATIONS})

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
