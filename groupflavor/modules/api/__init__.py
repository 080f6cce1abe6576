"""
API Module - Black Box Interface

Purpose: Data contracts between the group orchestrator and flavor plugins
Interface: Instance models, allocation, RPC request/response shapes
Hidden: Wire aliases, null handling

The API module only describes data - it contains no flavor logic.
"""

from .models import (
    AllocationMethod,
    DrainRequest,
    DrainResponse,
    HealthyRequest,
    HealthyResponse,
    ImplementsResponse,
    InstanceDescription,
    InstanceSpec,
    InterfaceSpec,
    PrepareRequest,
    PrepareResponse,
    ValidateRequest,
    ValidateResponse,
)

__all__ = [
    "AllocationMethod",
    "InstanceSpec",
    "InstanceDescription",
    "InterfaceSpec",
    "ValidateRequest",
    "ValidateResponse",
    "PrepareRequest",
    "PrepareResponse",
    "HealthyRequest",
    "HealthyResponse",
    "DrainRequest",
    "DrainResponse",
    "ImplementsResponse",
]
