"""
groupflavor - Vanilla Flavor Plugin

A flavor plugin for a group-management layer that provisions fleets of
compute instances. The flavor gives an otherwise generic instance its
bootstrap script and its tags.

Architecture:
- Each module is self-contained with clear interfaces
- The plugin is stateless; every call decodes its configuration fresh
- The HTTP layer only orchestrates, it contains no flavor logic

Modules:
- api: Shared data models (instance specs, allocation, wire shapes)
- flavor: Flavor plugin interface and the vanilla implementation
"""

__version__ = "0.1.0"
