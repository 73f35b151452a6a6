"""Domain models - pure Python dataclasses representing business entities"""

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union


class ScenarioType(str, Enum):
    """Where the consumer stands relative to the debt-resolution program"""

    PRE_ENROLLMENT = "pre-enrollment"
    PROGRESS_TRACKER = "progress-tracker"


@dataclass(frozen=True)
class PreEnrollment:
    """Not yet enrolled: a worst-case temporary drop is modeled"""


@dataclass(frozen=True)
class ProgressTracker:
    """Already enrolled: the current score is the baseline"""

    months_in_program: int


Scenario = Union[PreEnrollment, ProgressTracker]

DEFAULT_PROGRAM_TIMELINE_MONTHS = 36


def _to_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _to_int(value: Any) -> int:
    return int(_to_float(value))


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "on"}
    return bool(value)


def _to_scenario_type(value: Any) -> ScenarioType:
    if isinstance(value, ScenarioType):
        return value
    try:
        return ScenarioType(str(value).strip().lower())
    except ValueError:
        return ScenarioType.PRE_ENROLLMENT


@dataclass(frozen=True)
class ProfileInput:
    """Consumer profile submitted for a projection (validated upstream)"""

    fico_score: int
    total_debt: float
    monthly_income: float
    utilization_percent: int
    accounts_enrolling: int
    positive_accounts: int
    oldest_account_age_years: int
    total_credit_limit: float
    scenario_type: ScenarioType = ScenarioType.PRE_ENROLLMENT
    months_in_program: int = 0
    program_timeline_months: int = DEFAULT_PROGRAM_TIMELINE_MONTHS
    secured_card: bool = False
    credit_builder: bool = False
    authorized_user: bool = False

    @property
    def scenario(self) -> Scenario:
        if self.scenario_type == ScenarioType.PROGRESS_TRACKER:
            return ProgressTracker(months_in_program=self.months_in_program)
        return PreEnrollment()

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ProfileInput":
        """
        Build a profile from loosely typed form data.

        Missing or non-numeric values become 0 so the engine always produces
        a number. A zero or missing program timeline falls back to 36 months.
        """
        return cls(
            fico_score=_to_int(raw.get("fico_score")),
            total_debt=_to_float(raw.get("total_debt")),
            monthly_income=_to_float(raw.get("monthly_income")),
            utilization_percent=_to_int(raw.get("utilization_percent")),
            accounts_enrolling=_to_int(raw.get("accounts_enrolling")),
            positive_accounts=_to_int(raw.get("positive_accounts")),
            oldest_account_age_years=_to_int(raw.get("oldest_account_age_years")),
            total_credit_limit=_to_float(raw.get("total_credit_limit")),
            scenario_type=_to_scenario_type(raw.get("scenario_type")),
            months_in_program=_to_int(raw.get("months_in_program")),
            program_timeline_months=(
                _to_int(raw.get("program_timeline_months")) or DEFAULT_PROGRAM_TIMELINE_MONTHS
            ),
            secured_card=_to_bool(raw.get("secured_card")),
            credit_builder=_to_bool(raw.get("credit_builder")),
            authorized_user=_to_bool(raw.get("authorized_user")),
        )


@dataclass(frozen=True)
class WeightSet:
    """Relative importance of the five FICO components for one profile"""

    payment_history: float
    utilization: float
    account_age: float
    credit_mix: float
    new_credit: float

    def total(self) -> float:
        return (
            self.payment_history
            + self.utilization
            + self.account_age
            + self.credit_mix
            + self.new_credit
        )

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionResult:
    """Output of a simulation, handed unchanged to rendering and storage"""

    initial_score: int
    low_point_score: int
    projected_score: int
    score_gain: int
    recovery_months: int
    impact_penalty: int
    milestone_dip_score: int
    milestone_stabilization_score: int
    milestone_recovery_score: int
    post_dti_percent: float
    debt_savings: float
    post_program_debt: float
    monthly_post_debt_payment: float
    weights: WeightSet

    @property
    def recovery_time(self) -> str:
        return f"{self.recovery_months} months"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["recovery_time"] = self.recovery_time
        return data


@dataclass(frozen=True)
class TimelinePoint:
    """Single point on the score recovery chart"""

    label: str
    month: float
    month_label: str
    score: int
    chart_position: float
