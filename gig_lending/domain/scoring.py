"""Credit scoring engine - derives a 300-850 score from self-reported gig income"""

from gig_lending.domain.constants import (
    BASE_CREDIT_SCORE,
    MAX_CREDIT_SCORE,
    MONTHLY_INCOME_FLOOR_BONUS,
    MONTHLY_INCOME_TIERS,
    PLATFORM_BONUS,
    TOTAL_INCOME_TIERS,
)


def monthly_income_bonus(avg_monthly_income: int, unit_scale: int = 1) -> int:
    """Bonus for the highest monthly-income tier strictly exceeded"""
    for threshold, bonus in MONTHLY_INCOME_TIERS:
        if avg_monthly_income > threshold * unit_scale:
            return bonus
    return MONTHLY_INCOME_FLOOR_BONUS


def total_income_bonus(total_income: int, unit_scale: int = 1) -> int:
    """Bonus for the highest total-income tier strictly exceeded, else 0"""
    for threshold, bonus in TOTAL_INCOME_TIERS:
        if total_income > threshold * unit_scale:
            return bonus
    return 0


def calculate_credit_score(
    total_income: int,
    avg_monthly_income: int,
    platform_count: int,
    unit_scale: int = 1,
) -> int:
    """
    Calculate credit score from reported income and platform diversity.

    Scoring:
    - Base: 300
    - Monthly income: >3000 +200, >2000 +150, >1000 +100, otherwise +50
    - Platforms: +25 per platform worked on
    - Total income: >50000 +100, >25000 +50
    - Capped at 850

    Thresholds are whole currency units; unit_scale converts them into the
    ledger's smallest denomination (10_000_000 for 7-decimal assets).

    Example:
        total=50000, monthly=4000, 2 platforms
        300 + 200 + 50 + 50 = 600  (50000 exceeds 25000 but not 50000)
    """
    score = BASE_CREDIT_SCORE
    score += monthly_income_bonus(avg_monthly_income, unit_scale)
    score += PLATFORM_BONUS * platform_count
    score += total_income_bonus(total_income, unit_scale)

    return min(score, MAX_CREDIT_SCORE)
