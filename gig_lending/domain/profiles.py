"""Credit profile construction"""

from typing import Iterable

from gig_lending.domain.constants import INITIAL_PAYMENT_HISTORY, INITIAL_VERIFICATION_LEVEL
from gig_lending.domain.models import CreditProfile
from gig_lending.domain.scoring import calculate_credit_score


def build_credit_profile(
    user: str,
    total_income: int,
    avg_monthly_income: int,
    gig_platforms: Iterable[str],
    now: int,
    unit_scale: int = 1,
) -> CreditProfile:
    """
    Build a fresh profile that fully replaces any existing one.

    Payment history and verification level are reset to their initial
    values on every update; nothing is merged from a previous profile.
    """
    platforms = tuple(gig_platforms)
    return CreditProfile(
        user=user,
        total_income=total_income,
        avg_monthly_income=avg_monthly_income,
        payment_history=INITIAL_PAYMENT_HISTORY,
        gig_platforms=platforms,
        verification_level=INITIAL_VERIFICATION_LEVEL,
        credit_score=calculate_credit_score(total_income, avg_monthly_income, len(platforms), unit_scale),
        last_updated=now,
    )
