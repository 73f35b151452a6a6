"""Unit tests for the score projection engine"""

import pytest
from fico_projector.domain.models import PreEnrollment, ProgressTracker, ScenarioType
from fico_projector.domain.projection import (
    calculate_financials,
    calculate_tool_gain,
    project,
    resolve_baseline,
    simulate,
)
from fico_projector.domain.weights import derive_weights


def test_simulate_pre_enrollment_worked_example(pre_enrollment_profile):
    """Test complete pre-enrollment flow against the reference numbers"""
    result = simulate(pre_enrollment_profile)

    assert result.initial_score == 650
    assert result.impact_penalty == 37
    assert result.low_point_score == 613
    # 613 + 75 + 45 + 7.5 + 55 = 795.5 → 796
    assert result.projected_score == 796
    assert result.score_gain == 146
    assert result.recovery_months == 36
    assert result.recovery_time == "36 months"
    assert result.debt_savings == pytest.approx(11000)
    assert result.post_program_debt == pytest.approx(9000)
    assert result.monthly_post_debt_payment == pytest.approx(37.5)
    assert result.post_dti_percent == 0.9
    assert result.milestone_dip_score == 613
    assert result.milestone_stabilization_score == 640
    assert result.milestone_recovery_score == 732


def test_simulate_progress_tracker_worked_example(progress_tracker_profile):
    """Test progress tracker uses the current score as the low point"""
    result = simulate(progress_tracker_profile)

    assert result.impact_penalty == 0
    assert result.low_point_score == 650
    assert result.recovery_months == 24
    # 650 + 75 + 30 + 5 + 55 = 815
    assert result.projected_score == 815
    assert result.score_gain == 165
    # 650 + round(24.75) = 675, capped at the starting score
    assert result.milestone_stabilization_score == 650
    assert result.milestone_recovery_score == 757


def test_resolve_baseline_pre_enrollment(pre_enrollment_profile):
    """Test low point subtracts the penalty and keeps the program timeline"""
    assert resolve_baseline(PreEnrollment(), pre_enrollment_profile, 37) == (613, 36, 37)


def test_resolve_baseline_floor(make_profile):
    """Test low point never goes below 300"""
    profile = make_profile(fico_score=330)
    assert resolve_baseline(PreEnrollment(), profile, 150) == (300, 36, 150)


def test_resolve_baseline_minimum_recovery_months(make_profile):
    """Test recovery period is at least 12 months late in the program"""
    profile = make_profile(program_timeline_months=24)
    low_point, recovery_months, penalty = resolve_baseline(ProgressTracker(months_in_program=20), profile, 50)

    assert low_point == 650
    assert recovery_months == 12
    assert penalty == 0


def test_project_ignores_penalty_for_progress_tracker(progress_tracker_profile):
    """Test a penalty passed for an enrolled profile is discarded"""
    weights = derive_weights(progress_tracker_profile)
    result = project(progress_tracker_profile, weights, 99)

    assert result.impact_penalty == 0
    assert result.low_point_score == 650


def test_project_caps_at_850(make_profile):
    """Test projected score never exceeds 850"""
    profile = make_profile(
        fico_score=820,
        scenario_type=ScenarioType.PROGRESS_TRACKER,
        months_in_program=1,
        authorized_user=True,
    )
    result = simulate(profile)

    assert result.projected_score == 850
    assert result.score_gain == 30
    # Milestones interpolate over the realized 30 points, not the uncapped gain
    assert result.milestone_recovery_score == 820 + 20


def test_project_floor_at_300(make_profile):
    """Test low point floor with a near-minimum score"""
    profile = make_profile(fico_score=310)
    result = project(profile, derive_weights(profile), 150)

    assert result.low_point_score == 300
    assert result.milestone_dip_score == 300
    assert result.impact_penalty == 150


def test_calculate_tool_gain(make_profile):
    """Test tool points are additive"""
    assert calculate_tool_gain(make_profile(secured_card=False, credit_builder=False, authorized_user=False)) == 0
    assert calculate_tool_gain(make_profile(secured_card=True, credit_builder=False, authorized_user=False)) == 30
    assert calculate_tool_gain(make_profile(secured_card=True, credit_builder=True, authorized_user=True)) == 65


def test_calculate_financials_zero_income(make_profile):
    """Test zero income reports 0% DTI instead of dividing by zero"""
    savings, remaining, payment, post_dti = calculate_financials(make_profile(monthly_income=0))

    assert savings == pytest.approx(11000)
    assert remaining == pytest.approx(9000)
    assert payment == pytest.approx(37.5)
    assert post_dti == 0


def test_calculate_financials_dti_cap(make_profile):
    """Test post-program DTI is capped at 50%"""
    *_, post_dti = calculate_financials(make_profile(total_debt=500000, monthly_income=100))
    assert post_dti == 50


def test_simulate_zero_income(make_profile):
    """Test zero income runs end to end"""
    result = simulate(make_profile(monthly_income=0))

    assert result.post_dti_percent == 0
    # DTI fallback raised utilization from 0.30 to 0.35 before normalization
    assert result.weights.utilization > 0.30


def test_simulate_is_deterministic(pre_enrollment_profile):
    """Test identical input produces identical output"""
    assert simulate(pre_enrollment_profile) == simulate(pre_enrollment_profile)


@pytest.mark.parametrize("scenario_type", list(ScenarioType))
@pytest.mark.parametrize("fico_score", [300, 450, 580, 650, 740, 850])
@pytest.mark.parametrize("utilization_percent", [30, 70, 100])
@pytest.mark.parametrize("program_timeline_months", [12, 36, 60])
@pytest.mark.parametrize("tools", [False, True])
def test_simulate_score_invariants(make_profile, scenario_type, fico_score, utilization_percent, program_timeline_months, tools):
    """Test score bounds and milestone ordering across the input space"""
    profile = make_profile(
        scenario_type=scenario_type,
        fico_score=fico_score,
        utilization_percent=utilization_percent,
        program_timeline_months=program_timeline_months,
        months_in_program=6,
        secured_card=tools,
        credit_builder=tools,
        authorized_user=tools,
    )
    result = simulate(profile)

    assert result.low_point_score >= 300
    assert result.projected_score <= 850
    assert result.projected_score >= result.low_point_score
    assert result.low_point_score <= result.milestone_stabilization_score <= result.milestone_recovery_score
    assert result.milestone_recovery_score <= result.projected_score
    assert result.milestone_stabilization_score <= result.initial_score
    if scenario_type == ScenarioType.PRE_ENROLLMENT:
        assert 20 <= result.impact_penalty <= 150
    else:
        assert result.impact_penalty == 0


def test_result_to_dict(pre_enrollment_profile):
    """Test serialized result nests weights and adds the display label"""
    data = simulate(pre_enrollment_profile).to_dict()

    assert data["projected_score"] == 796
    assert data["recovery_time"] == "36 months"
    assert set(data["weights"]) == {"payment_history", "utilization", "account_age", "credit_mix", "new_credit"}
