"""Interest rate resolution from credit score tiers"""

from typing import Mapping

from gig_lending.domain.constants import DEFAULT_INTEREST_RATES


def rate_tier(credit_score: int) -> int:
    """Score threshold of the tier a credit score falls into"""
    if credit_score >= 800:
        return 800
    elif credit_score >= 700:
        return 700
    elif credit_score >= 600:
        return 600
    elif credit_score >= 500:
        return 500
    elif credit_score >= 400:
        return 400
    else:
        return 300


def resolve_interest_rate(credit_score: int, rates: Mapping[int, int]) -> int:
    """
    Map a credit score to an annual rate in basis points.

    Score bands (defaults):
    - 800+:      800 bps (8%)
    - 700-799:  1000 bps
    - 600-699:  1200 bps
    - 500-599:  1500 bps
    - 400-499:  2000 bps
    - below 400: 2500 bps (25%)

    Each tier falls back to its default rate when the stored table lacks
    it, so an empty table behaves exactly like the default one.
    """
    tier = rate_tier(credit_score)
    return rates.get(tier, DEFAULT_INTEREST_RATES[tier])
