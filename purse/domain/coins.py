"""Pure functions for coin normalization.

This module contains the functional core for purse arithmetic:
- No I/O operations (no database, no console, no files)
- No side effects
- Total over the integers, nothing here can fail

All totals are in nickels (BaseUnits type).
"""

from collections.abc import Mapping
from typing import Any

from purse.domain.models import DENOMINATIONS, BaseUnits, Purse

MoneyLike = Purse | Mapping[str, Any]


def _as_purse(money: MoneyLike) -> Purse:
    if isinstance(money, Purse):
        return money
    return Purse.from_mapping(money)


def to_base_unit(money: MoneyLike) -> BaseUnits:
    """Collapse a purse into a single nickel count.

    Args:
        money: Purse or partial mapping of coin counts.

    Returns:
        Total value in nickels. May be negative.
    """
    purse = _as_purse(money)
    return BaseUnits(
        purse.gold * DENOMINATIONS["gold"]
        + purse.silver * DENOMINATIONS["silver"]
        + purse.copper * DENOMINATIONS["copper"]
        + purse.nickel * DENOMINATIONS["nickel"]
    )


def from_base_unit(total: int) -> Purse:
    """Spread a nickel count over the largest coins possible.

    Floor division is used throughout, so for a negative total gold carries
    the sign while silver, copper and nickel stay in [0, 9].

    Args:
        total: Value in nickels.

    Returns:
        Canonical purse with the same value.
    """
    gold, remaining = divmod(int(total), DENOMINATIONS["gold"])
    silver, remaining = divmod(remaining, DENOMINATIONS["silver"])
    copper, nickel = divmod(remaining, DENOMINATIONS["copper"])
    return Purse(gold=gold, silver=silver, copper=copper, nickel=nickel)


def optimize_money(money: MoneyLike) -> Purse:
    """Return the canonical form of a purse. Applying it twice changes nothing."""
    return from_base_unit(to_base_unit(money))


def needs_optimization(money: MoneyLike) -> bool:
    """Check whether a purse has overflowing or negative coin counts.

    Args:
        money: Purse or partial mapping of coin counts.

    Returns:
        True if nickel, copper or silver is 10 or more, or any field is negative.
    """
    purse = _as_purse(money)
    if purse.nickel >= 10 or purse.copper >= 10 or purse.silver >= 10:
        return True
    if purse.nickel < 0 or purse.copper < 0 or purse.silver < 0 or purse.gold < 0:
        return True
    return False


def is_canonical(money: MoneyLike) -> bool:
    return not needs_optimization(money)


def format_purse(money: MoneyLike) -> str:
    """Format a purse for display (e.g., "2G 2S 0C 3N")."""
    purse = _as_purse(money)
    return f"{purse.gold}G {purse.silver}S {purse.copper}C {purse.nickel}N"
