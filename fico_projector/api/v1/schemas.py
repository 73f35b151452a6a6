"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import List, Literal, Optional
from fico_projector.domain.models import ScenarioType


class SimulationRequest(BaseModel):
    """Request body for POST /v1/simulations"""

    # Financial snapshot
    fico_score: int = Field(..., ge=300, le=850, description="Current FICO score")
    total_debt: float = Field(..., gt=1000, description="Total debt enrolled for resolution ($)")
    accounts_enrolling: int = Field(..., ge=1, description="Number of accounts being enrolled")
    monthly_income: float = Field(..., gt=0, description="Gross monthly income ($)")
    utilization_percent: Literal[30, 50, 70, 90, 100] = Field(..., description="Utilization bucket of enrolled accounts")
    positive_accounts: int = Field(..., ge=0, description="Accounts in good standing not being enrolled")
    oldest_account_age_years: int = Field(..., ge=0, description="Age of oldest account in years")
    total_credit_limit: float = Field(0, ge=0, description="Total credit limit across all cards (0 if unknown)")

    # Program and timeline
    scenario_type: ScenarioType = ScenarioType.PRE_ENROLLMENT
    months_in_program: int = Field(0, ge=0, description="Months already in the program (progress tracker)")
    program_timeline_months: Literal[12, 24, 36, 48, 60] = 36

    # Credit-building tools
    secured_card: bool = False
    credit_builder: bool = False
    authorized_user: bool = False

    # Saving results
    user_id: Optional[str] = Field(None, min_length=1, description="User identifier; results are stored when set")
    first_name: Optional[str] = None
    email: Optional[EmailStr] = None

    @model_validator(mode="after")
    def check_months_in_program(self) -> "SimulationRequest":
        if self.scenario_type == ScenarioType.PROGRESS_TRACKER and self.months_in_program <= 0:
            raise ValueError("months_in_program must be greater than 0 for the progress tracker")
        return self


class WeightsSchema(BaseModel):
    """Personalized FICO factor weights"""

    payment_history: float
    utilization: float
    account_age: float
    credit_mix: float
    new_credit: float


class TimelinePointSchema(BaseModel):
    """Single point on the score recovery chart"""

    label: str
    month: float
    month_label: str
    score: int
    chart_position: float


class ProjectionSchema(BaseModel):
    """Projected scores and financial KPIs"""

    initial_score: int
    low_point_score: int
    projected_score: int
    score_gain: int
    recovery_months: int
    recovery_time: str
    impact_penalty: int
    milestone_dip_score: int
    milestone_stabilization_score: int
    milestone_recovery_score: int
    post_dti_percent: float
    debt_savings: float
    post_program_debt: float
    monthly_post_debt_payment: float
    weights: WeightsSchema


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulations"""

    simulation_id: Optional[str] = None
    projection: ProjectionSchema
    timeline: List[TimelinePointSchema]


class SimulationRecordResponse(BaseModel):
    """Response for GET /v1/simulations/{simulation_id}"""

    simulation_id: str
    user_id: str
    scenario_type: str
    input: dict
    results: dict
    created_at: str


class HistoryItem(BaseModel):
    """Single simulation in history"""

    simulation_id: str
    scenario_type: str
    initial_score: int
    projected_score: int
    score_gain: int
    created_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/simulations/history"""

    user_id: str
    simulations: List[HistoryItem]
