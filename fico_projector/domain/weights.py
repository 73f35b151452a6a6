"""Adaptive FICO factor weights - personalizes component importance to a profile"""

import logging
from dataclasses import replace
from typing import Callable, Tuple
from fico_projector.domain.models import ProfileInput, WeightSet

BASE_WEIGHTS = WeightSet(
    payment_history=0.35,
    utilization=0.30,
    account_age=0.15,
    credit_mix=0.10,
    new_credit=0.10,
)

HIGH_SCORE_TIER = 740
LOW_SCORE_TIER = 580
DTI_RISK_THRESHOLD = 0.45
LOW_OVERALL_UTILIZATION_PERCENT = 30
YOUNG_FILE_YEARS = 4
SEASONED_FILE_YEARS = 10

WeightAdjustment = Callable[[WeightSet, ProfileInput], WeightSet]


def adjust_for_score_tier(weights: WeightSet, profile: ProfileInput) -> WeightSet:
    """
    Re-center weights on the score tier.

    - 740+: utilization and age dominate, a clean history is assumed
    - 580 and below: payment history dominates, new credit is riskier
    """
    if profile.fico_score >= HIGH_SCORE_TIER:
        return replace(weights, payment_history=0.25, utilization=0.40, account_age=0.20)
    if profile.fico_score <= LOW_SCORE_TIER:
        return replace(weights, payment_history=0.45, utilization=0.25, new_credit=0.15)
    return weights


def debt_to_income(profile: ProfileInput) -> float:
    """Annualized DTI; zero income is treated as maximal risk (1.0)"""
    if profile.monthly_income > 0:
        return profile.total_debt / (profile.monthly_income * 12)
    return 1.0


def adjust_for_debt_to_income(weights: WeightSet, profile: ProfileInput) -> WeightSet:
    """High DTI shifts importance from payment history toward utilization"""
    if debt_to_income(profile) > DTI_RISK_THRESHOLD:
        return replace(
            weights,
            utilization=min(0.45, weights.utilization + 0.05),
            payment_history=max(0.25, weights.payment_history - 0.05),
        )
    return weights


def adjust_for_overall_utilization(weights: WeightSet, profile: ProfileInput) -> WeightSet:
    """Low utilization across all cards means the enrolled debt matters less"""
    # A credit limit of 0 means the user did not provide one
    if profile.total_credit_limit > 0:
        overall_utilization = profile.total_debt / profile.total_credit_limit * 100
        if overall_utilization < LOW_OVERALL_UTILIZATION_PERCENT:
            return replace(weights, utilization=max(0.20, weights.utilization - 0.05))
    return weights


def adjust_for_positive_accounts(weights: WeightSet, profile: ProfileInput) -> WeightSet:
    """Accounts in good standing anchor payment history and diversify the mix"""
    if profile.positive_accounts > 0:
        return replace(
            weights,
            payment_history=max(0.30, weights.payment_history - 0.05),
            credit_mix=min(0.20, weights.credit_mix + 0.05),
        )
    return weights


def adjust_for_account_age(weights: WeightSet, profile: ProfileInput) -> WeightSet:
    """Young files lean on new credit, seasoned files on account age"""
    if profile.oldest_account_age_years < YOUNG_FILE_YEARS:
        return replace(
            weights,
            account_age=max(0.05, weights.account_age - 0.05),
            new_credit=min(0.20, weights.new_credit + 0.05),
        )
    if profile.oldest_account_age_years > SEASONED_FILE_YEARS:
        return replace(weights, account_age=min(0.25, weights.account_age + 0.05))
    return weights


# Applied left to right; each step sees the output of the previous one
ADJUSTMENT_STEPS: Tuple[WeightAdjustment, ...] = (
    adjust_for_score_tier,
    adjust_for_debt_to_income,
    adjust_for_overall_utilization,
    adjust_for_positive_accounts,
    adjust_for_account_age,
)


def normalize_weights(weights: WeightSet) -> WeightSet:
    """
    Scale weights so they sum to 1, rounded to 4 decimal places.

    Rounding each weight independently can leave the sum off by up to 0.001.
    """
    total = weights.total()
    return WeightSet(
        payment_history=round(weights.payment_history / total, 4),
        utilization=round(weights.utilization / total, 4),
        account_age=round(weights.account_age / total, 4),
        credit_mix=round(weights.credit_mix / total, 4),
        new_credit=round(weights.new_credit / total, 4),
    )


def derive_weights(profile: ProfileInput) -> WeightSet:
    """
    Main entry point: derive normalized factor weights for a profile.

    Reads fico_score, total_debt, monthly_income, positive_accounts,
    oldest_account_age_years and total_credit_limit. Pure function.
    """
    weights = BASE_WEIGHTS
    for step in ADJUSTMENT_STEPS:
        weights = step(weights, profile)

    normalized = normalize_weights(weights)
    logging.debug("Factor weights derived", extra={"weights": normalized.as_dict()})
    return normalized
