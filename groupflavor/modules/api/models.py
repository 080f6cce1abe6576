"""
groupflavor shared data models.

These models define the structure of all data passed between the group
orchestrator and a flavor plugin. Field names on the wire are capitalized
(``Init``, ``Tags``, ``LogicalID``); Python code uses snake_case names.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Instance Models


class AllocationMethod(BaseModel):
    """How a group allocates its members: by size (cattle) or by logical IDs (pets)."""

    model_config = ConfigDict(populate_by_name=True)

    size: int = Field(default=0, alias="Size", ge=0, description="Number of fungible instances")
    logical_ids: List[str] = Field(
        default_factory=list,
        alias="LogicalIDs",
        description="Stable identities, one per instance",
    )


class InstanceSpec(BaseModel):
    """Descriptor for an instance that is about to be provisioned."""

    model_config = ConfigDict(populate_by_name=True)

    properties: Optional[Any] = Field(
        None, alias="Properties", description="Opaque instance plugin properties"
    )
    tags: Optional[Dict[str, str]] = Field(None, alias="Tags", description="Instance tags")
    init: str = Field(default="", alias="Init", description="Bootstrap script")
    logical_id: Optional[str] = Field(None, alias="LogicalID")
    attachments: List[str] = Field(default_factory=list, alias="Attachments")

    @field_validator("init", mode="before")
    @classmethod
    def null_init_is_empty(cls, v):
        """A null Init means no script."""
        return "" if v is None else v


class InstanceDescription(BaseModel):
    """Read-only view of a live instance."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default="", alias="ID", description="Provisioner instance ID")
    logical_id: Optional[str] = Field(None, alias="LogicalID")
    tags: Dict[str, str] = Field(default_factory=dict, alias="Tags")


class InterfaceSpec(BaseModel):
    """Name and version of an RPC interface a plugin implements."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Name")
    version: str = Field(..., alias="Version")


# Request Models (RPC Input)


class ValidateRequest(BaseModel):
    """Request to validate flavor properties."""

    model_config = ConfigDict(populate_by_name=True)

    properties: Optional[Any] = Field(None, alias="Properties")
    allocation: AllocationMethod = Field(default_factory=AllocationMethod, alias="Allocation")


class PrepareRequest(BaseModel):
    """Request to customize an instance spec before provisioning."""

    model_config = ConfigDict(populate_by_name=True)

    properties: Optional[Any] = Field(None, alias="Properties")
    spec: InstanceSpec = Field(..., alias="Spec")
    allocation: AllocationMethod = Field(default_factory=AllocationMethod, alias="Allocation")


class HealthyRequest(BaseModel):
    """Request for the health of a live instance."""

    model_config = ConfigDict(populate_by_name=True)

    properties: Optional[Any] = Field(None, alias="Properties")
    instance: InstanceDescription = Field(default_factory=InstanceDescription, alias="Instance")


class DrainRequest(BaseModel):
    """Request to drain a live instance before termination."""

    model_config = ConfigDict(populate_by_name=True)

    properties: Optional[Any] = Field(None, alias="Properties")
    instance: InstanceDescription = Field(default_factory=InstanceDescription, alias="Instance")


# Response Models (RPC Output)


class ImplementsResponse(BaseModel):
    """Interfaces served by this plugin process."""

    model_config = ConfigDict(populate_by_name=True)

    apis: List[InterfaceSpec] = Field(..., alias="APIs")


class ValidateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = Field(..., alias="OK")


class PrepareResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    spec: InstanceSpec = Field(..., alias="Spec")


class HealthyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    health: int = Field(..., alias="Health", description="0 unknown, 1 healthy, 2 unhealthy")


class DrainResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = Field(..., alias="OK")
