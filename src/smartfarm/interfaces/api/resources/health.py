"""Health check endpoints."""

from datetime import UTC, datetime

import falcon
import falcon.asgi

from smartfarm.domain.entities import OriginPolicy
from smartfarm.domain.value_objects import OriginMode


class HealthResource:
    """Liveness and readiness endpoints."""

    def __init__(
        self, policy: OriginPolicy, service_name: str, environment: str
    ) -> None:
        self._policy = policy
        self._service_name = service_name
        self._environment = environment

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health - liveness."""
        resp.media = {
            "status": "ok",
            "service": self._service_name,
            "environment": self._environment,
            "timestamp": datetime.now(UTC).isoformat(),
        }
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health/ready - readiness, with the active CORS policy."""
        origins = (
            []
            if self._policy.mode is OriginMode.ALLOW_ALL
            else sorted(self._policy.allowed_origins)
        )
        resp.media = {
            "status": "ready",
            "cors": {"mode": str(self._policy.mode), "origins": origins},
        }
        resp.status = falcon.HTTP_200
