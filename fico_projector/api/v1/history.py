"""GET /v1/simulations/history and /v1/simulations/{simulation_id} - Stored simulations"""

import uuid
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fico_projector.api.v1.schemas import HistoryItem, HistoryResponse, SimulationRecordResponse
from fico_projector.config import settings
from fico_projector.domain.exceptions import SimulationNotFoundError
from fico_projector.infrastructure.database.session import get_db
from fico_projector.infrastructure.database.repositories import SimulationRepository

router = APIRouter()


@router.get("/simulations/history", response_model=HistoryResponse)
def get_simulation_history(
    user_id: str = Query(..., description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent simulations for a user.

    Returns:
        Newest first, with starting and projected scores
    """
    repo = SimulationRepository(db)
    simulations = repo.get_simulations_by_user(user_id, limit=settings.history_limit)

    history_items = [
        HistoryItem(
            simulation_id=str(s.id),
            scenario_type=s.scenario_type,
            initial_score=s.results["initial_score"],
            projected_score=s.results["projected_score"],
            score_gain=s.results["score_gain"],
            created_at=s.created_at.isoformat(),
        )
        for s in simulations
    ]

    return HistoryResponse(user_id=user_id, simulations=history_items)


@router.get("/simulations/{simulation_id}", response_model=SimulationRecordResponse)
def get_simulation(simulation_id: str, db: Session = Depends(get_db)):
    """Retrieve a stored simulation document (input and results)"""
    try:
        simulation_uuid = uuid.UUID(simulation_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid simulation ID format")

    repo = SimulationRepository(db)
    try:
        simulation = repo.get_simulation_by_id(simulation_uuid)
    except SimulationNotFoundError:
        raise HTTPException(status_code=404, detail="Simulation not found")

    return SimulationRecordResponse(
        simulation_id=str(simulation.id),
        user_id=simulation.user_id,
        scenario_type=simulation.scenario_type,
        input=simulation.input,
        results=simulation.results,
        created_at=simulation.created_at.isoformat(),
    )
