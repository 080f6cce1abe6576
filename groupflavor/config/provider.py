"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Protocol

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PluginConfig:
    """Plugin process configuration."""
    name: str
    host: str
    port: int
    log_level: str
    debug: bool


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""
    
    def get_plugin_config(self) -> PluginConfig:
        """Get plugin process configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""
    
    def get_plugin_config(self) -> PluginConfig:
        """Get plugin process configuration from environment variables."""
        port_env = os.getenv("API_PORT", "8080")
        try:
            port = int(port_env)
        except ValueError:
            raise ValueError(f"API_PORT must be an integer, got {port_env!r}") from None

        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return PluginConfig(
            name=os.getenv("FLAVOR_PLUGIN_NAME", "flavor-vanilla"),
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=port,
            log_level=log_level,
            debug=os.getenv("DEBUG", "false").lower() == "true",
        )
