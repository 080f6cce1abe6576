"""
Vanilla flavor plugin.

The vanilla flavor treats instances as identical cattle even when the group
allocates them by logical ID: every instance gets the same Init fragments
and the same tags, so the allocation method never changes what happens.

Flavor properties:

    {
      "Init": ["<script fragment>", ...],
      "Tags": {"<key>": "<value>", ...}
    }
"""

import logging
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator

from ..api.models import AllocationMethod, InstanceDescription, InstanceSpec
from .errors import ConfigDecodeError
from .interfaces import FlavorPlugin, Health
from .properties import as_properties

logger = logging.getLogger("groupflavor.flavor")

_CANONICAL_KEYS = {"init": "Init", "tags": "Tags"}


class VanillaSpec(BaseModel):
    """Decoded flavor section of a group spec."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    init: Tuple[StrictStr, ...] = Field(default=(), alias="Init")
    tags: Dict[StrictStr, StrictStr] = Field(default_factory=dict, alias="Tags")

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data):
        """Match Init and Tags regardless of key case; the last spelling wins."""
        if not isinstance(data, dict):
            return data
        matched = {}
        for key, value in data.items():
            canonical = _CANONICAL_KEYS.get(key.lower(), key) if isinstance(key, str) else key
            matched[canonical] = value
        return matched

    @field_validator("init", "tags", mode="before")
    @classmethod
    def null_as_empty(cls, v, info):
        """Treat explicit nulls like absent fields."""
        if v is None:
            return () if info.field_name == "init" else {}
        return v


class VanillaFlavor:
    """
    Stateless flavor that appends Init fragments and merges tags.

    A single shared instance serves every caller; there are no fields, so
    concurrent calls need no coordination.
    """

    __slots__ = ()

    def validate(self, properties: Any, allocation: AllocationMethod) -> None:
        """Succeed iff the properties decode into VanillaSpec."""
        self._decode(properties)

    def healthy(self, properties: Any, instance: InstanceDescription) -> Health:
        """No health probe is defined; every instance is reported healthy."""
        return Health.HEALTHY

    def drain(self, properties: Any, instance: InstanceDescription) -> None:
        """Nothing to drain."""
        return None

    def prepare(
        self, properties: Any, spec: InstanceSpec, allocation: AllocationMethod
    ) -> InstanceSpec:
        """
        Append the flavor's Init fragments and merge its tags into a copy of spec.

        The existing Init (when non-empty) comes first, followed by each
        fragment in declared order, joined with newlines. Flavor tags
        overwrite instance tags with the same key.

        Not idempotent: preparing an already prepared spec appends the
        fragments again. Call once per instance.

        Raises:
            ConfigDecodeError: With ``spec`` attached, unchanged
        """
        try:
            flavor_spec = self._decode(properties)
        except ConfigDecodeError as e:
            e.spec = spec
            raise

        lines = []
        if spec.init != "":
            lines.append(spec.init)
        lines.extend(flavor_spec.init)

        prepared = spec.model_copy(deep=True)
        prepared.init = "\n".join(lines)

        for key, value in flavor_spec.tags.items():
            if prepared.tags is None:
                prepared.tags = {}
            prepared.tags[key] = value

        logger.debug(
            f"Prepared instance spec (logical ID: {prepared.logical_id}, "
            f"init fragments: {len(flavor_spec.init)}, tags: {len(flavor_spec.tags)})"
        )
        return prepared

    @staticmethod
    def _decode(properties: Any) -> VanillaSpec:
        try:
            return as_properties(properties).decode(VanillaSpec)
        except ConfigDecodeError as e:
            logger.warning(f"Invalid vanilla flavor properties: {e}")
            raise


_plugin = VanillaFlavor()


def new_plugin() -> FlavorPlugin:
    """Get the shared vanilla flavor plugin."""
    return _plugin
