"""Worst-case temporary score drop for profiles not yet enrolled"""

from fico_projector.domain.models import ProfileInput, WeightSet
from fico_projector.utils.rounding import clamp, round_half_up

MIN_IMPACT_PENALTY = 20
MAX_IMPACT_PENALTY = 150


def estimate_impact(profile: ProfileInput, weights: WeightSet) -> int:
    """
    Estimate the temporary FICO drop after enrolling accounts in the program.

    Components:
    - Utilization: enrolled accounts are assumed to go to 100% during
      negotiation, so the lower the current bucket the larger the jump
    - Severity: higher scores have further to fall (zero below 500)
    - Anchors: each positive account cushions 10 points, a file older than
      10 years cushions 15

    The raw drop is rounded half up, then clamped to [20, 150].
    """
    utilization_factor = max(0, (100 - profile.utilization_percent) / 10)
    drop = utilization_factor * 5 * (weights.utilization * 2)

    severity_factor = max(0, (profile.fico_score - 500) / 20)
    drop += severity_factor * 5

    drop -= profile.positive_accounts * 10
    if profile.oldest_account_age_years > 10:
        drop -= 15

    return clamp(round_half_up(drop), MIN_IMPACT_PENALTY, MAX_IMPACT_PENALTY)
