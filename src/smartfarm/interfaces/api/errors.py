"""Error translation - turns exceptions into JSON error responses.

Error handlers run outside the normal middleware ordering, so each handler
re-applies the CORS headers before writing status and body. Without that a
browser would hide the error response from the frontend entirely.
"""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

import falcon
import falcon.asgi

from smartfarm.config import Settings
from smartfarm.domain.entities import OriginPolicy
from smartfarm.domain.exceptions import SmartFarmError
from smartfarm.interfaces.api.middleware.cors import apply_cors_headers

logger = logging.getLogger(__name__)


def _error_body(
    req: falcon.asgi.Request, status_code: int, error: dict[str, Any]
) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "timestamp": datetime.now(UTC).isoformat(),
        "path": req.path,
        "method": req.method,
        "error": error,
    }


def register_error_handlers(
    app: falcon.asgi.App, policy: OriginPolicy, settings: Settings
) -> None:
    """Register handlers for domain errors, HTTP errors and anything else."""

    async def handle_domain_error(req, resp, ex: SmartFarmError, params):
        apply_cors_headers(req, resp, policy)
        status_code = ex.status_code
        logger.warning("%s %s - %s", req.method, req.path, ex)
        resp.status = falcon.code_to_http_status(status_code)
        resp.media = _error_body(req, status_code, {"message": str(ex)})

    async def handle_http_error(req, resp, ex: falcon.HTTPError, params):
        apply_cors_headers(req, resp, policy)
        status_code = falcon.http_status_to_code(ex.status)
        logger.warning("%s %s - %s", req.method, req.path, ex.title)
        if ex.headers:
            resp.set_headers(ex.headers)
        resp.status = ex.status
        resp.media = _error_body(req, status_code, ex.to_dict())

    async def handle_unexpected(req, resp, ex: Exception, params):
        apply_cors_headers(req, resp, policy)
        logger.error("%s %s - %s", req.method, req.path, ex, exc_info=ex)
        error: dict[str, Any] = {"message": "Internal server error"}
        if not settings.is_production:
            error["stack"] = "".join(traceback.format_exception(ex))
        resp.status = falcon.HTTP_500
        resp.media = _error_body(req, 500, error)

    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(falcon.HTTPError, handle_http_error)
    app.add_error_handler(SmartFarmError, handle_domain_error)
