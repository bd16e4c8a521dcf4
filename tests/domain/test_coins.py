"""Tests for purse.domain.coins pure functions."""

import pytest

from purse.domain.coins import (
    format_purse,
    from_base_unit,
    is_canonical,
    needs_optimization,
    optimize_money,
    to_base_unit,
)
from purse.domain.models import Purse


class TestToBaseUnit:
    """Tests for to_base_unit."""

    def test_weights_each_denomination(self) -> None:
        """Should weight gold 1000, silver 100, copper 10, nickel 1."""
        assert to_base_unit(Purse(gold=1, silver=2, copper=3, nickel=4)) == 1234

    def test_missing_fields_count_as_zero(self) -> None:
        """Should treat absent and None fields as 0."""
        assert to_base_unit({"silver": 3}) == 300
        assert to_base_unit({"gold": None, "nickel": 7}) == 7

    def test_negative_fields(self) -> None:
        """Should sum negative fields without complaint."""
        assert to_base_unit(Purse(gold=1, nickel=-5)) == 995
        assert to_base_unit(Purse(copper=-2)) == -20

    def test_empty_purse(self) -> None:
        """Should return zero for an empty purse."""
        assert to_base_unit(Purse.zero()) == 0
        assert to_base_unit({}) == 0


class TestFromBaseUnit:
    """Tests for from_base_unit."""

    def test_spreads_over_largest_coins(self) -> None:
        """Should fill gold first, then silver, copper and nickel."""
        assert from_base_unit(1234) == Purse(gold=1, silver=2, copper=3, nickel=4)

    def test_large_totals_stay_in_gold(self) -> None:
        """Should put all overflow into gold (no higher coin exists)."""
        assert from_base_unit(98_765_432) == Purse(gold=98_765, silver=4, copper=3, nickel=2)

    def test_negative_total_uses_floor_division(self) -> None:
        """Should let gold carry the sign and keep lower digits in [0, 9]."""
        assert from_base_unit(-5) == Purse(gold=-1, silver=9, copper=9, nickel=5)
        assert from_base_unit(-1000) == Purse(gold=-1, silver=0, copper=0, nickel=0)

    @pytest.mark.parametrize("total", [-1_000_001, -1001, -999, -5, -1, 0, 1, 9, 10, 999, 1000, 123_456_789])
    def test_round_trip(self, total: int) -> None:
        """Should convert back to the same total."""
        assert to_base_unit(from_base_unit(total)) == total

    def test_canonical_range_for_non_negative_totals(self) -> None:
        """Should keep silver, copper and nickel in [0, 9] and gold non-negative."""
        for total in range(0, 25_000, 37):
            purse = from_base_unit(total)
            assert purse.gold >= 0
            assert 0 <= purse.silver <= 9
            assert 0 <= purse.copper <= 9
            assert 0 <= purse.nickel <= 9


class TestOptimizeMoney:
    """Tests for optimize_money."""

    def test_nickel_overflow(self) -> None:
        """Should exchange 23 nickel into 2 copper and 3 nickel."""
        assert optimize_money(Purse(nickel=23)) == Purse(gold=0, silver=0, copper=2, nickel=3)

    def test_silver_overflow(self) -> None:
        """Should exchange 12 silver into 1 gold and 2 silver."""
        assert optimize_money(Purse(gold=1, silver=12)) == Purse(gold=2, silver=2, copper=0, nickel=0)

    def test_negative_digit_borrows_from_higher_coin(self) -> None:
        """Should break a higher coin to cover a negative lower one."""
        assert optimize_money(Purse(gold=1, nickel=-5)) == Purse(gold=0, silver=9, copper=9, nickel=5)

    def test_idempotent(self) -> None:
        """Should not change an already optimized purse."""
        samples = [
            Purse(nickel=23),
            Purse(gold=1, silver=12),
            Purse(gold=3, silver=-4, copper=55, nickel=1001),
            Purse(gold=-1, silver=25),
        ]
        for purse in samples:
            once = optimize_money(purse)
            assert optimize_money(once) == once

    def test_accepts_partial_mapping(self) -> None:
        """Should accept a mapping with missing fields."""
        assert optimize_money({"copper": 15}) == Purse(silver=1, copper=5)


class TestNeedsOptimization:
    """Tests for needs_optimization."""

    def test_overflowing_nickel(self) -> None:
        """Should flag ten or more nickel."""
        assert needs_optimization(Purse(nickel=10)) is True

    def test_overflowing_copper_and_silver(self) -> None:
        """Should flag ten or more copper or silver."""
        assert needs_optimization(Purse(copper=10)) is True
        assert needs_optimization(Purse(silver=11)) is True

    def test_large_gold_is_fine(self) -> None:
        """Should never flag gold for being large."""
        assert needs_optimization(Purse(gold=1, silver=0, copper=0, nickel=0)) is False
        assert needs_optimization(Purse(gold=50_000)) is False

    def test_negative_fields(self) -> None:
        """Should flag any negative field, gold included."""
        assert needs_optimization(Purse(copper=-1)) is True
        assert needs_optimization(Purse(gold=-1, silver=5)) is True

    def test_missing_fields(self) -> None:
        """Should treat missing fields as 0."""
        assert needs_optimization({}) is False
        assert needs_optimization({"nickel": 12}) is True

    def test_is_canonical(self) -> None:
        """Should be the negation of needs_optimization."""
        assert is_canonical(Purse(gold=2, silver=9, copper=9, nickel=9)) is True
        assert is_canonical(Purse(nickel=10)) is False


class TestPurse:
    """Tests for the Purse model and formatting."""

    def test_from_mapping_truncates_to_int(self) -> None:
        """Should coerce numeric values to int."""
        assert Purse.from_mapping({"gold": 2.0, "silver": "3"}) == Purse(gold=2, silver=3)

    def test_as_dict(self) -> None:
        """Should expose all four fields."""
        assert Purse(gold=1, nickel=4).as_dict() == {"gold": 1, "silver": 0, "copper": 0, "nickel": 4}

    def test_format_purse(self) -> None:
        """Should show each coin with its initial."""
        assert format_purse(Purse(gold=2, silver=2, copper=0, nickel=3)) == "2G 2S 0C 3N"
