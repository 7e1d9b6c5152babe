"""
Domain models and value objects.

Contains protocol configuration and public parameters of the N-1-R ZKP.
"""

from src.core.domain.protocol_params import (
    InvalidPublicParameters,
    ProtocolConfig,
    PublicParameters,
    validate_public_base,
)

__all__ = [
    # Exceptions
    "InvalidPublicParameters",
    # Models
    "ProtocolConfig",
    "PublicParameters",
    # Validation
    "validate_public_base",
]
