"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class SimulationStoreError(DomainException):
    """Simulation could not be written to the database"""

    pass


class SimulationNotFoundError(DomainException):
    """No stored simulation matches the requested id"""

    pass
