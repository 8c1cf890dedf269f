"""Unit tests for credit scoring logic"""

import pytest
from gig_lending.domain.scoring import (
    calculate_credit_score,
    monthly_income_bonus,
    total_income_bonus,
)


def test_monthly_income_tiers():
    """Test descending monthly-income tiers, first match wins"""
    assert monthly_income_bonus(4_000) == 200
    assert monthly_income_bonus(3_001) == 200
    assert monthly_income_bonus(3_000) == 150  # Must exceed the threshold
    assert monthly_income_bonus(2_001) == 150
    assert monthly_income_bonus(2_000) == 100
    assert monthly_income_bonus(1_001) == 100
    assert monthly_income_bonus(1_000) == 50
    assert monthly_income_bonus(0) == 50


def test_total_income_tiers():
    """Test total-income bonus, zero below the lowest tier"""
    assert total_income_bonus(60_000) == 100
    assert total_income_bonus(50_000) == 50  # Not above 50k
    assert total_income_bonus(25_001) == 50
    assert total_income_bonus(25_000) == 0
    assert total_income_bonus(0) == 0


def test_score_two_platform_worker():
    """Test total=50_000, monthly=4_000, uber + doordash"""
    # 300 base + 200 monthly + 2*25 platforms + 50 (50k is above 25k, not above 50k)
    assert calculate_credit_score(50_000, 4_000, 2) == 600


def test_score_high_and_low_earners():
    """Test high earner outscores low earner"""
    high = calculate_credit_score(60_000, 5_000, 3)  # 300 + 200 + 75 + 100
    low = calculate_credit_score(15_000, 1_250, 1)  # 300 + 100 + 25 + 0

    assert high == 675
    assert low == 425
    assert high > low


def test_score_capped_at_850():
    """Test platform term is uncapped but the final score is"""
    assert calculate_credit_score(60_000, 5_000, 10) == 850
    assert calculate_credit_score(60_000, 5_000, 40) == 850
    assert calculate_credit_score(60_000, 5_000, 9) == 825


def test_score_floor_is_base_plus_minimum_bonus():
    """Test a worker with no income and no platforms"""
    assert calculate_credit_score(0, 0, 0) == 350


def test_score_with_ledger_unit_scale():
    """Test thresholds scale to 7-decimal sub-units"""
    scale = 10_000_000
    assert calculate_credit_score(50_000 * scale, 4_000 * scale, 2, unit_scale=scale) == 600
    # Unscaled thresholds would treat 4000 sub-units as a tiny income
    assert calculate_credit_score(50_000, 4_000, 2, unit_scale=scale) == 400


@pytest.mark.parametrize("platforms", range(0, 12))
def test_score_in_range_and_monotonic(platforms):
    """Test score stays in [300, 850] and never drops as income or platforms grow"""
    monthly_incomes = [0, 1_000, 1_001, 2_000, 2_001, 3_000, 3_001, 10_000]
    totals = [0, 25_000, 25_001, 50_000, 50_001]

    for total in totals:
        scores = [calculate_credit_score(total, monthly, platforms) for monthly in monthly_incomes]
        assert all(300 <= s <= 850 for s in scores)
        assert scores == sorted(scores)

        for monthly in monthly_incomes:
            assert calculate_credit_score(total, monthly, platforms + 1) >= calculate_credit_score(
                total, monthly, platforms
            )
