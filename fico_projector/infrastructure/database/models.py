"""SQLAlchemy ORM models for stored simulations"""

import uuid
from sqlalchemy import Column, DateTime, JSON, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Simulation(Base):
    """Profile input and projection result captured at simulation time"""

    __tablename__ = "simulation"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    scenario_type = Column(Text, nullable=False)
    input = Column(JSON, nullable=False)
    results = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
