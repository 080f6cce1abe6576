#!/usr/bin/env python3
"""
groupflavor - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Wires the flavor plugin into the RPC endpoints
3. Runs the API server

All flavor logic is in the modules, following black box principles.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from groupflavor import __version__
from groupflavor.config.provider import ConfigProvider, EnvConfigProvider, PluginConfig
from groupflavor.logging_config import configure_logging, get_logging_config
from groupflavor.modules.api import (
    DrainRequest,
    DrainResponse,
    HealthyRequest,
    HealthyResponse,
    ImplementsResponse,
    PrepareRequest,
    PrepareResponse,
    ValidateRequest,
    ValidateResponse,
)
from groupflavor.modules.flavor import (
    FLAVOR_INTERFACE,
    ConfigDecodeError,
    FlavorPlugin,
    RawProperties,
    new_plugin,
)

logger = logging.getLogger("groupflavor.api")


def get_plugin() -> FlavorPlugin:
    """Dependency providing the flavor plugin served by this process."""
    return new_plugin()


def create_app(config: Optional[PluginConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Plugin configuration; read from the environment when omitted

    Returns:
        Configured FastAPI app
    """
    if config is None:
        config_provider: ConfigProvider = EnvConfigProvider()
        config = config_provider.get_plugin_config()

    app = FastAPI(
        title="groupflavor",
        description="Vanilla flavor plugin for instance groups",
        version=__version__,
        debug=config.debug,
    )
    app.state.config = config

    # Plugin Endpoints

    @app.post("/Plugin.Implements", response_model=ImplementsResponse)
    def implements():
        """Advertise the RPC interfaces this process serves."""
        return ImplementsResponse(apis=[FLAVOR_INTERFACE])

    @app.post("/Flavor.Validate", response_model=ValidateResponse)
    def validate(request: ValidateRequest, plugin: FlavorPlugin = Depends(get_plugin)):
        """
        Validate the flavor section of a group spec.

        Returns:
            200: Properties are valid
            400: Properties do not decode
        """
        plugin.validate(RawProperties.of(request.properties), request.allocation)
        return ValidateResponse(ok=True)

    @app.post("/Flavor.Prepare", response_model=PrepareResponse)
    def prepare(request: PrepareRequest, plugin: FlavorPlugin = Depends(get_plugin)):
        """
        Customize an instance spec before provisioning.

        Returns:
            200: Prepared spec
            400: Properties do not decode; nothing must be provisioned
        """
        spec = plugin.prepare(
            RawProperties.of(request.properties), request.spec, request.allocation
        )
        return PrepareResponse(spec=spec)

    @app.post("/Flavor.Healthy", response_model=HealthyResponse)
    def healthy(request: HealthyRequest, plugin: FlavorPlugin = Depends(get_plugin)):
        """Report the health of a live instance."""
        health = plugin.healthy(RawProperties.of(request.properties), request.instance)
        return HealthyResponse(health=int(health))

    @app.post("/Flavor.Drain", response_model=DrainResponse)
    def drain(request: DrainRequest, plugin: FlavorPlugin = Depends(get_plugin)):
        """Drain a live instance before termination."""
        plugin.drain(RawProperties.of(request.properties), request.instance)
        return DrainResponse(ok=True)

    # Health/Monitoring Endpoints

    @app.get("/healthz")
    def healthz():
        """
        Minimal liveness endpoint for the plugin process.

        Returns:
            200: Service is running
        """
        return {"status": "ok", "name": config.name}

    # Error handlers

    @app.exception_handler(ConfigDecodeError)
    async def config_decode_error_handler(request: Request, exc: ConfigDecodeError):
        """Handle flavor properties that do not decode."""
        logger.error(f"Rejected {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    return app


app = create_app()


def run() -> None:
    """Run the plugin server with uvicorn."""
    config = EnvConfigProvider().get_plugin_config()
    configure_logging(config.log_level)
    logger.info(f"Starting flavor plugin {config.name} on {config.host}:{config.port}")
    # Use dict config for logging, not file path
    uvicorn.run(
        "groupflavor.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        reload=config.debug,
        log_config=get_logging_config(config.log_level),
    )


if __name__ == "__main__":
    run()
