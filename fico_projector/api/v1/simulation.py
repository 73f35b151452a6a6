"""POST /v1/simulations - FICO recovery projection endpoint"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fico_projector.api.v1.schemas import (
    ProjectionSchema,
    SimulationRequest,
    SimulationResponse,
    TimelinePointSchema,
)
from fico_projector.api.dependencies import get_request_id
from fico_projector.infrastructure.database.session import get_db
from fico_projector.infrastructure.database.repositories import SimulationRepository
from fico_projector.domain.models import ProfileInput
from fico_projector.domain.projection import simulate
from fico_projector.domain.timeline import generate_score_timeline
from fico_projector.domain.exceptions import SimulationStoreError
from fico_projector.infrastructure.observability.metrics import record_simulation, simulation_save_failures_counter
from fico_projector.infrastructure.observability.logging import log_simulation

router = APIRouter()


@router.post("/simulations", response_model=SimulationResponse)
def create_simulation(
    request_body: SimulationRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Project a FICO score through a debt-resolution program.

    Flow:
    1. Build the engine profile from the validated request
    2. Run the simulation (weights, impact, projection)
    3. Build the chart timeline
    4. Store input + results if a user id was given (best effort)
    5. Return projection and timeline
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        # 1-3. Run the engine
        profile = ProfileInput.from_raw(request_body.model_dump())
        result = simulate(profile)
        timeline = generate_score_timeline(result)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # 4. Best-effort save: a storage failure never withholds the result
    simulation_id = None
    if request_body.user_id:
        try:
            repo = SimulationRepository(db)
            db_simulation = repo.create_simulation(
                user_id=request_body.user_id,
                scenario_type=profile.scenario_type.value,
                input_data=request_body.model_dump(mode="json", exclude={"user_id"}),
                result=result,
            )
            db.commit()
            simulation_id = str(db_simulation.id)
        except (SimulationStoreError, SQLAlchemyError) as e:
            db.rollback()
            simulation_save_failures_counter.inc()
            logging.warning(f"Simulation not saved: {e}", extra={"request_id": request_id})

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_simulation(profile.scenario_type.value, result.score_gain, result.impact_penalty)
    log_simulation(
        request_id,
        request_body.user_id,
        profile.scenario_type.value,
        result.initial_score,
        result.projected_score,
        result.impact_penalty,
        simulation_id is not None,
        duration_ms,
    )

    return SimulationResponse(
        simulation_id=simulation_id,
        projection=ProjectionSchema(**result.to_dict()),
        timeline=[TimelinePointSchema(**asdict(point)) for point in timeline],
    )
