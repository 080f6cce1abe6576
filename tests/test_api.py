"""
Tests for the flavor plugin RPC endpoints.

These tests use FastAPI TestClient against an app built with a fixed
plugin configuration, and dependency overrides where a mock plugin is needed.
"""

from unittest.mock import MagicMock

import pytest

from groupflavor.main import get_plugin
from groupflavor.modules.flavor import ConfigDecodeError, Health, RawProperties


# =============================================================================
# Discovery / Liveness
# =============================================================================


class TestDiscovery:
    """Tests for plugin discovery and liveness."""

    def test_implements(self, client):
        """Test that the process advertises the Flavor interface."""
        response = client.post("/Plugin.Implements")
        assert response.status_code == 200
        assert response.json() == {"APIs": [{"Name": "Flavor", "Version": "0.1.0"}]}

    def test_healthz(self, client):
        """Test the liveness endpoint reports the configured name."""
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "name": "flavor-test"}


# =============================================================================
# Flavor.Validate
# =============================================================================


class TestValidateEndpoint:
    """Tests for POST /Flavor.Validate."""

    def test_valid_properties(self, client):
        """Test that well-formed properties are accepted."""
        response = client.post(
            "/Flavor.Validate",
            json={
                "Properties": {"Init": ["echo hi"], "Tags": {"env": "dev"}},
                "Allocation": {"Size": 2},
            },
        )
        assert response.status_code == 200
        assert response.json() == {"OK": True}

    def test_missing_properties(self, client):
        """Test that absent properties are valid."""
        response = client.post("/Flavor.Validate", json={})
        assert response.status_code == 200
        assert response.json() == {"OK": True}

    def test_invalid_properties(self, client):
        """Test that malformed properties are a 400 with the decode error."""
        response = client.post(
            "/Flavor.Validate",
            json={"Properties": {"Init": "echo hi"}, "Allocation": {"Size": 1}},
        )
        assert response.status_code == 400
        assert "Init" in response.json()["error"]

    def test_malformed_envelope(self, client):
        """Test that a bad request envelope is rejected by FastAPI."""
        response = client.post("/Flavor.Validate", json={"Allocation": {"Size": -1}})
        assert response.status_code == 422


# =============================================================================
# Flavor.Prepare
# =============================================================================


class TestPrepareEndpoint:
    """Tests for POST /Flavor.Prepare."""

    def test_prepare(self, client):
        """Test that the prepared spec comes back with wire names."""
        response = client.post(
            "/Flavor.Prepare",
            json={
                "Properties": {"Init": ["a", "b"], "Tags": {"env": "staging", "role": "web"}},
                "Spec": {
                    "Properties": {"instance_type": "t2.micro"},
                    "Init": "x",
                    "Tags": {"env": "prod"},
                    "LogicalID": "web-1",
                },
                "Allocation": {"LogicalIDs": ["web-1"]},
            },
        )
        assert response.status_code == 200
        spec = response.json()["Spec"]
        assert spec["Init"] == "x\na\nb"
        assert spec["Tags"] == {"env": "staging", "role": "web"}
        assert spec["LogicalID"] == "web-1"
        assert spec["Properties"] == {"instance_type": "t2.micro"}

    def test_prepare_creates_tags(self, client):
        """Test that a spec without tags gets the flavor tags."""
        response = client.post(
            "/Flavor.Prepare",
            json={"Properties": {"Tags": {"k": "v"}}, "Spec": {}},
        )
        assert response.status_code == 200
        assert response.json()["Spec"]["Tags"] == {"k": "v"}
        assert response.json()["Spec"]["Init"] == ""

    def test_prepare_invalid_properties(self, client):
        """Test that nothing is prepared from malformed properties."""
        response = client.post(
            "/Flavor.Prepare",
            json={"Properties": {"Tags": {"port": 80}}, "Spec": {"Init": "x"}},
        )
        assert response.status_code == 400
        assert "error" in response.json()
        assert "Spec" not in response.json()

    def test_prepare_requires_spec(self, client):
        """Test that a prepare request without a spec is rejected."""
        response = client.post("/Flavor.Prepare", json={"Properties": {}})
        assert response.status_code == 422


# =============================================================================
# Flavor.Healthy / Flavor.Drain
# =============================================================================


class TestHealthyAndDrainEndpoints:
    """Tests for POST /Flavor.Healthy and POST /Flavor.Drain."""

    def test_healthy(self, client):
        """Test that instances are reported healthy."""
        response = client.post(
            "/Flavor.Healthy",
            json={"Properties": {"Init": ["a"]}, "Instance": {"ID": "i-1"}},
        )
        assert response.status_code == 200
        assert response.json() == {"Health": 1}

    @pytest.mark.parametrize(
        "body",
        [{"Properties": {}}, {"Instance": {"ID": ""}}, {"Instance": {}}, {}],
    )
    def test_healthy_any_instance(self, client, body):
        """Test that instance content never changes the health answer."""
        response = client.post("/Flavor.Healthy", json=body)
        assert response.status_code == 200
        assert response.json() == {"Health": 1}

    @pytest.mark.parametrize(
        "body",
        [{"Properties": {}}, {"Instance": {"ID": ""}}, {"Instance": {}}, {}],
    )
    def test_drain_any_instance(self, client, body):
        """Test that drain succeeds whatever instance it is given."""
        response = client.post("/Flavor.Drain", json=body)
        assert response.status_code == 200
        assert response.json() == {"OK": True}

    def test_drain(self, client):
        """Test that drain always succeeds."""
        response = client.post(
            "/Flavor.Drain",
            json={"Instance": {"ID": "i-1", "Tags": {"env": "prod"}}},
        )
        assert response.status_code == 200
        assert response.json() == {"OK": True}


# =============================================================================
# Plugin injection
# =============================================================================


class TestPluginInjection:
    """Tests that endpoints delegate to the injected plugin."""

    @pytest.fixture
    def mock_plugin(self, test_app):
        plugin = MagicMock()
        test_app.dependency_overrides[get_plugin] = lambda: plugin
        yield plugin
        test_app.dependency_overrides.clear()

    def test_properties_are_wrapped(self, client, mock_plugin):
        """Test that the plugin receives raw properties."""
        mock_plugin.healthy.return_value = Health.UNHEALTHY

        response = client.post(
            "/Flavor.Healthy",
            json={"Properties": {"Init": ["a"]}, "Instance": {"ID": "i-1"}},
        )

        assert response.json() == {"Health": 2}
        properties, instance = mock_plugin.healthy.call_args.args
        assert properties == RawProperties.of({"Init": ["a"]})
        assert instance.id == "i-1"

    def test_decode_error_from_plugin(self, client, mock_plugin):
        """Test that plugin decode errors map to 400."""
        mock_plugin.validate.side_effect = ConfigDecodeError("bad properties")

        response = client.post("/Flavor.Validate", json={"Properties": {}})

        assert response.status_code == 400
        assert response.json() == {"error": "bad properties"}
