"""
Flavor Module - Black Box Interface

Purpose: Give generic instances their behavioral identity (Init script, tags)
Interface: validate(), prepare(), healthy(), drain()
Hidden: Property schemas, decoding, script assembly

Any flavor that satisfies FlavorPlugin can replace the vanilla one without
affecting the transport or the orchestrator.
"""

from .errors import ConfigDecodeError
from .interfaces import FLAVOR_INTERFACE, FlavorPlugin, Health
from .properties import RawProperties, as_properties
from .vanilla import VanillaFlavor, VanillaSpec, new_plugin

__all__ = [
    "ConfigDecodeError",
    "FLAVOR_INTERFACE",
    "FlavorPlugin",
    "Health",
    "RawProperties",
    "as_properties",
    "VanillaFlavor",
    "VanillaSpec",
    "new_plugin",
]
