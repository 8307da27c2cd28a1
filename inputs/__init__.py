"""
Inputs — turning caller-supplied records into validated SimulationParameters.
"""

from .request import ParameterOverrides, ProfileSnapshot, build_parameters
from .validators import (
    InvalidParameterError,
    ValidationResult,
    require_valid,
    validate_parameters,
)

__all__ = [
    "ParameterOverrides",
    "ProfileSnapshot",
    "build_parameters",
    "InvalidParameterError",
    "ValidationResult",
    "require_valid",
    "validate_parameters",
]
