"""Flavor plugin interfaces following Black Box Design principles."""
from enum import Enum
from typing import Any, Protocol

from ..api.models import AllocationMethod, InstanceDescription, InstanceSpec, InterfaceSpec

# RPC interface served by every flavor plugin process
FLAVOR_INTERFACE = InterfaceSpec(name="Flavor", version="0.1.0")


class Health(int, Enum):
    """Health of a live instance as reported by a flavor."""

    UNKNOWN = 0
    HEALTHY = 1
    UNHEALTHY = 2


class FlavorPlugin(Protocol):
    """
    Protocol for flavor plugins - allows swappable implementations.

    ``properties`` is the opaque flavor section of a group spec: a
    ``RawProperties``, a JSON document (``str`` or ``bytes``), or an
    already-parsed JSON value.
    Implementations must not keep state between calls.
    """

    def validate(self, properties: Any, allocation: AllocationMethod) -> None:
        """
        Check the flavor properties of a group spec.

        Raises:
            ConfigDecodeError: If the properties do not fit the flavor's schema
        """
        ...

    def prepare(
        self, properties: Any, spec: InstanceSpec, allocation: AllocationMethod
    ) -> InstanceSpec:
        """
        Customize an instance spec before it is provisioned.

        Returns:
            A new InstanceSpec; the caller's spec is left untouched

        Raises:
            ConfigDecodeError: If the properties do not fit the flavor's schema
        """
        ...

    def healthy(self, properties: Any, instance: InstanceDescription) -> Health:
        """Report the health of a live instance."""
        ...

    def drain(self, properties: Any, instance: InstanceDescription) -> None:
        """Prepare a live instance for termination."""
        ...
