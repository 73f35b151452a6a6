"""Score projection engine - core business logic for recovery simulations"""

from typing import Tuple
from fico_projector.domain.impact import estimate_impact
from fico_projector.domain.models import (
    PreEnrollment,
    ProfileInput,
    ProjectionResult,
    ProgressTracker,
    Scenario,
    WeightSet,
)
from fico_projector.domain.weights import derive_weights
from fico_projector.utils.rounding import round_half_up, round_half_up_to

FICO_FLOOR = 300
FICO_CEILING = 850

BASELINE_MONTHS = 36
MIN_RECOVERY_MONTHS = 12

SECURED_CARD_GAIN = 30
CREDIT_BUILDER_GAIN = 25
AUTHORIZED_USER_GAIN = 10

SETTLEMENT_SAVINGS_RATE = 0.55
POST_PROGRAM_ANNUAL_RATE = 0.05
POST_DTI_CAP_PERCENT = 50


def resolve_baseline(scenario: Scenario, profile: ProfileInput, impact_penalty: int) -> Tuple[int, int, int]:
    """
    Select the starting point of the recovery curve.

    Returns: (low_point_score, recovery_months, impact_penalty)
    """
    if isinstance(scenario, ProgressTracker):
        # Already in the program: the current score is the low point, no new shock
        recovery_months = max(MIN_RECOVERY_MONTHS, profile.program_timeline_months - scenario.months_in_program)
        return profile.fico_score, recovery_months, 0

    low_point = max(FICO_FLOOR, profile.fico_score - impact_penalty)
    return low_point, profile.program_timeline_months, impact_penalty


def calculate_tool_gain(profile: ProfileInput) -> int:
    """Points credited to credit-building products the user plans to use"""
    gain = 0
    if profile.secured_card:
        gain += SECURED_CARD_GAIN
    if profile.credit_builder:
        gain += CREDIT_BUILDER_GAIN
    if profile.authorized_user:
        gain += AUTHORIZED_USER_GAIN
    return gain


def calculate_potential_gain(profile: ProfileInput, weights: WeightSet, recovery_months: int) -> float:
    """
    Uncapped score gain over the recovery period.

    Components:
    - Utilization: enrolled debt settles to ~0% utilization (weight * 250)
    - Payment history: on-time payments on other accounts (weight * 150),
      scaled to a 36-month baseline
    - Account age: accounts keep aging (weight * 50), same scaling
    - Credit-building tools: flat points per tool
    """
    time_scale = recovery_months / BASELINE_MONTHS

    gain = weights.utilization * 250
    gain += weights.payment_history * 150 * time_scale
    gain += weights.account_age * 50 * time_scale
    gain += calculate_tool_gain(profile)
    return gain


def calculate_financials(profile: ProfileInput) -> Tuple[float, float, float, float]:
    """
    Settlement savings and post-program debt-to-income.

    Returns: (debt_savings, post_program_debt, monthly_post_debt_payment, post_dti_percent)
    """
    debt_savings = profile.total_debt * SETTLEMENT_SAVINGS_RATE
    post_program_debt = profile.total_debt - debt_savings
    monthly_payment = post_program_debt * POST_PROGRAM_ANNUAL_RATE / 12

    if profile.monthly_income > 0:
        post_dti = min(POST_DTI_CAP_PERCENT, monthly_payment / profile.monthly_income * 100)
    else:
        post_dti = 0

    return debt_savings, post_program_debt, monthly_payment, round_half_up_to(post_dti, 1)


def project(profile: ProfileInput, weights: WeightSet, impact_penalty: int) -> ProjectionResult:
    """
    Turn weights and the temporary impact into a projected score and milestones.

    The 300 floor on the low point and the 850 ceiling on the projection are
    the only score clamps. Milestones interpolate between the realized low
    point and the capped projection.
    """
    initial_score = profile.fico_score
    low_point, recovery_months, impact_penalty = resolve_baseline(profile.scenario, profile, impact_penalty)

    potential_gain = calculate_potential_gain(profile, weights, recovery_months)
    projected_score = min(FICO_CEILING, round_half_up(low_point + potential_gain))

    realized_gain = projected_score - low_point
    stabilization_score = min(initial_score, low_point + round_half_up(realized_gain * 0.15))
    recovery_score = low_point + round_half_up(realized_gain * 0.65)

    debt_savings, post_program_debt, monthly_payment, post_dti = calculate_financials(profile)

    return ProjectionResult(
        initial_score=initial_score,
        low_point_score=low_point,
        projected_score=projected_score,
        score_gain=projected_score - initial_score,
        recovery_months=recovery_months,
        impact_penalty=impact_penalty,
        milestone_dip_score=low_point,
        milestone_stabilization_score=stabilization_score,
        milestone_recovery_score=recovery_score,
        post_dti_percent=post_dti,
        debt_savings=debt_savings,
        post_program_debt=post_program_debt,
        monthly_post_debt_payment=monthly_payment,
        weights=weights,
    )


def simulate(profile: ProfileInput) -> ProjectionResult:
    """
    Main entry point: derive weights, estimate impact, and project.

    The impact estimate only applies before enrollment.
    """
    weights = derive_weights(profile)
    impact_penalty = estimate_impact(profile, weights) if isinstance(profile.scenario, PreEnrollment) else 0
    return project(profile, weights, impact_penalty)
