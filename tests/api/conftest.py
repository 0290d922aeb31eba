"""Fixtures for API tests."""

import falcon
import falcon.asgi
import pytest
from falcon.testing import TestClient

from smartfarm.domain.exceptions import Conflict, NotFound, ValidationError
from smartfarm.main import create_smartfarm_app


class SensorResource:
    """Stand-in business resource for exercising the pipeline."""

    def __init__(self) -> None:
        self.calls = 0

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, sensor_id: str) -> None:
        self.calls += 1
        if sensor_id == "missing":
            raise NotFound("Sensor", sensor_id)
        if sensor_id == "bad":
            raise ValidationError("sensor_id must be numeric")
        if sensor_id == "occupied":
            raise Conflict("sensor slot already assigned")
        if sensor_id == "boom":
            raise RuntimeError("sensor bus offline")
        if sensor_id == "teapot":
            raise falcon.HTTPBadRequest(title="Bad reading", description="Reading out of range")
        resp.media = {"id": sensor_id, "temperature": 21.5}


class FailingReadingResource:
    """Drops the CORS headers set by the middleware, then fails."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, kind: str) -> None:
        resp.delete_header("Access-Control-Allow-Origin")
        resp.delete_header("Access-Control-Allow-Credentials")
        resp.set_header("Vary", "X-Origin-Token")
        if kind == "domain":
            raise NotFound("Reading", "latest")
        if kind == "http":
            raise falcon.HTTPBadRequest(title="Bad reading")
        raise RuntimeError("reading decoder crashed")


@pytest.fixture
def sensor_resource() -> SensorResource:
    return SensorResource()


@pytest.fixture
def make_client(make_settings, sensor_resource):
    """Build a client for the full app with the given settings overrides."""

    def _make(**overrides) -> TestClient:
        app = create_smartfarm_app(make_settings(**overrides))
        app.add_route("/api/v1/sensors/{sensor_id}", sensor_resource)
        app.add_route("/api/v1/readings/{kind}", FailingReadingResource())
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    """Client with CORS_ORIGIN unset."""
    return make_client()
