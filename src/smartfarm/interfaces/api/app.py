"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from smartfarm.config import Settings
from smartfarm.domain.entities import OriginPolicy
from smartfarm.interfaces.api.errors import register_error_handlers
from smartfarm.interfaces.api.middleware.cors import CORSMiddleware
from smartfarm.interfaces.api.resources.health import HealthResource


def create_app(
    policy: OriginPolicy,
    settings: Settings,
    health_resource: HealthResource,
) -> App:
    """Create Falcon ASGI app with CORS first in the pipeline, then routes."""
    app = falcon.asgi.App(middleware=[CORSMiddleware(policy)])
    register_error_handlers(app, policy, settings)

    prefix = settings.api_prefix.strip("/")
    base = f"/{prefix}" if prefix else ""
    app.add_route(f"{base}/health", health_resource)
    app.add_route(f"{base}/health/ready", health_resource, suffix="ready")
    return app
