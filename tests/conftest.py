"""
Shared pytest fixtures for groupflavor tests.

This module provides common fixtures including:
- The shared vanilla flavor plugin
- Instance specs, descriptions and allocation methods
- FastAPI test client wired to a plugin process
"""

import os
import sys
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from groupflavor.config.provider import PluginConfig
from groupflavor.main import create_app
from groupflavor.modules.api import AllocationMethod, InstanceDescription, InstanceSpec
from groupflavor.modules.flavor import new_plugin


# =============================================================================
# Plugin Fixtures
# =============================================================================


@pytest.fixture
def plugin():
    """The shared vanilla flavor plugin."""
    return new_plugin()


@pytest.fixture
def cattle():
    """Allocation of three fungible instances."""
    return AllocationMethod(size=3)


@pytest.fixture
def pets():
    """Allocation by stable logical IDs."""
    return AllocationMethod(logical_ids=["10.0.0.1", "10.0.0.2"])


@pytest.fixture
def blank_spec():
    """Instance spec with no Init script and no tags."""
    return InstanceSpec()


@pytest.fixture
def worker_spec():
    """Instance spec as an instance plugin might hand it over."""
    return InstanceSpec(
        properties={"instance_type": "t2.micro"},
        tags={"env": "prod", "owner": "platform"},
        init="#!/bin/sh",
        logical_id="worker-1",
    )


@pytest.fixture
def instance():
    """A live instance."""
    return InstanceDescription(id="i-0123456789", logical_id="worker-1", tags={"env": "prod"})


@pytest.fixture
def web_properties() -> Dict[str, Any]:
    """Flavor properties for a web tier."""
    return {
        "Init": ["apt-get update", "apt-get install -y nginx"],
        "Tags": {"role": "web", "env": "staging"},
    }


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def plugin_config():
    """Plugin process configuration for tests."""
    return PluginConfig(
        name="flavor-test",
        host="127.0.0.1",
        port=9090,
        log_level="DEBUG",
        debug=False,
    )


@pytest.fixture
def test_app(plugin_config):
    """Create test app fixture."""
    return create_app(plugin_config)


@pytest.fixture
def client(test_app):
    """Create test client fixture."""
    return TestClient(test_app)
