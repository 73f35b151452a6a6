"""Chart timeline generation for the score recovery journey"""

from typing import List
from fico_projector.domain.models import ProjectionResult, TimelinePoint
from fico_projector.utils.rounding import round_half_up

# Fraction of the recovery period at which each milestone is drawn
DIP_FRACTION = 0.10
STABILIZATION_FRACTION = 0.25
RECOVERY_FRACTION = 0.75


def generate_score_timeline(result: ProjectionResult) -> List[TimelinePoint]:
    """
    Build the five chart points from start to projected score.

    Points: Start (month 0), Dip (10%), Stabilization (25%), Recovery (75%),
    Projected (100% of recovery_months).

    chart_position places each score on a 0-100 scale where the dip is 0 and
    the projected score is 100. When there is no realized gain every point
    except the dip sits at 100.

    Example:
        recovery_months=36, dip=613, projected=796
        → Dip at 3.6 mo ("4 mo"), Stabilization at 9 mo, Recovery at 27 mo
    """
    months = result.recovery_months
    dip = result.milestone_dip_score
    realized_gain = result.projected_score - dip

    milestones = [
        ("Start", 0.0, result.initial_score),
        ("Dip", months * DIP_FRACTION, dip),
        ("Stabilization", months * STABILIZATION_FRACTION, result.milestone_stabilization_score),
        ("Recovery", months * RECOVERY_FRACTION, result.milestone_recovery_score),
        ("Projected", float(months), result.projected_score),
    ]

    points = []
    for label, month, score in milestones:
        if realized_gain > 0:
            position = (score - dip) / realized_gain * 100
        else:
            position = 0.0 if label == "Dip" else 100.0

        points.append(
            TimelinePoint(
                label=label,
                month=month,
                month_label=f"{round_half_up(month)} mo",
                score=score,
                chart_position=position,
            )
        )

    return points
