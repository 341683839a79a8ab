"""Domain-specific exceptions

The calculators never raise; these are only used around stored scenarios.
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ScenarioNotFoundError(DomainException):
    """No stored scenario matches the requested id"""

    pass


class InvalidScenarioIdError(DomainException):
    """Scenario id is not a well-formed UUID"""

    pass
