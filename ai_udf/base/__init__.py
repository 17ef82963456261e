"""
ai_udf base package

Provider-agnostic contracts, DTOs, error taxonomy and transport used by the
provider adapters and the result adapter. The provider factory lives in
``ai_udf.base.factory`` and is imported from there to keep this package free
of adapter imports.
"""

from .errors import ErrorCode, ProviderError
from .models import BoundedOutput, InvocationRequest, ProviderResult, TransportOutcome

__all__ = [
    "BoundedOutput",
    "ErrorCode",
    "InvocationRequest",
    "ProviderError",
    "ProviderResult",
    "TransportOutcome",
]
