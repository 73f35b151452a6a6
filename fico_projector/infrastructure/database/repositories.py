"""Data access layer for stored simulations"""

import uuid
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from fico_projector.infrastructure.database.models import Simulation
from fico_projector.domain.exceptions import SimulationNotFoundError, SimulationStoreError
from fico_projector.domain.models import ProjectionResult


class SimulationRepository:
    """Repository for simulation input/result documents"""

    def __init__(self, db: Session):
        self.db = db

    def create_simulation(
        self,
        user_id: str,
        scenario_type: str,
        input_data: Dict[str, Any],
        result: ProjectionResult,
    ) -> Simulation:
        """
        Persist a simulation document.

        Raises:
            SimulationStoreError: On any database failure
        """
        db_simulation = Simulation(
            user_id=user_id,
            scenario_type=scenario_type,
            input=input_data,
            results=result.to_dict(),
        )
        try:
            self.db.add(db_simulation)
            self.db.flush()  # Get ID without committing
        except SQLAlchemyError as e:
            raise SimulationStoreError(f"Could not store simulation: {e}") from e
        return db_simulation

    def get_simulations_by_user(self, user_id: str, limit: int = 10) -> List[Simulation]:
        """Fetch recent simulations for a user"""
        return (
            self.db.query(Simulation)
            .filter(Simulation.user_id == user_id)
            .order_by(Simulation.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_simulation_by_id(self, simulation_id: uuid.UUID) -> Simulation:
        """
        Fetch a single simulation.

        Raises:
            SimulationNotFoundError: If no simulation has this id
        """
        simulation: Optional[Simulation] = (
            self.db.query(Simulation)
            .filter(Simulation.id == simulation_id)
            .first()
        )
        if simulation is None:
            raise SimulationNotFoundError(f"Simulation {simulation_id} not found")
        return simulation
