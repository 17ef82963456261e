"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``ai_udf.base.models_parts``.
"""

from .models_parts.bounded_output import BoundedOutput
from .models_parts.invocation_request import InvocationRequest
from .models_parts.provider_result import ProviderResult
from .models_parts.transport_outcome import TransportOutcome

__all__ = [
    "BoundedOutput",
    "InvocationRequest",
    "ProviderResult",
    "TransportOutcome",
]
