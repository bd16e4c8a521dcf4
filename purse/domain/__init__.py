"""Domain models and coin arithmetic for purse.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
"""

from purse.domain.coins import (
    format_purse,
    from_base_unit,
    is_canonical,
    needs_optimization,
    optimize_money,
    to_base_unit,
)
from purse.domain.models import DENOMINATIONS, BaseUnits, Purse

__all__ = [
    "BaseUnits",
    "DENOMINATIONS",
    "Purse",
    "format_purse",
    "from_base_unit",
    "is_canonical",
    "needs_optimization",
    "optimize_money",
    "to_base_unit",
]
