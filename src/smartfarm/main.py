"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from smartfarm import __version__
from smartfarm.config import Settings, get_settings
from smartfarm.domain.entities import OriginPolicy
from smartfarm.interfaces.api.app import create_app
from smartfarm.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)8s %(name)s %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_smartfarm_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()

    # Parsed once; every request shares this immutable policy.
    policy = OriginPolicy.from_setting(settings.cors_origin)
    logger.info("CORS: %s", policy.describe())
    logger.info("CORS_ORIGIN env: %s", settings.cors_origin or "not set")

    health_resource = HealthResource(
        policy,
        service_name=settings.service_name,
        environment=settings.environment,
    )
    return create_app(policy, settings, health_resource)


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_smartfarm_app(settings)
    logger.info(
        "Smart Farm backend running on http://localhost:%d%s (%s)",
        settings.port,
        settings.api_prefix,
        settings.environment,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Smart Farm backend v%s", __version__)
    run_server()


if __name__ == "__main__":
    main()
