"""CORS middleware - adds Access-Control-* headers and answers OPTIONS preflight."""

import logging

import falcon
import falcon.asgi

from smartfarm.application.use_cases.cors.resolve_origin import resolve_origin
from smartfarm.domain.entities import CorsDecision, OriginPolicy

logger = logging.getLogger(__name__)


def apply_cors_headers(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, policy: OriginPolicy
) -> CorsDecision:
    """Resolve the request origin and write the resulting headers to ``resp``.

    Shared by the middleware and the error handlers, so error responses carry
    the same headers as successful ones. Safe to call more than once.
    """
    origin = req.get_header("Origin")
    decision = resolve_origin(origin, policy)
    for name, value in decision.headers().items():
        resp.set_header(name, value)
    if origin:
        vary = resp.get_header("Vary")
        if not vary:
            resp.set_header("Vary", "Origin")
        elif "origin" not in {v.strip().lower() for v in vary.split(",")}:
            resp.append_header("Vary", "Origin")
    if not decision.allow:
        logger.debug("CORS: origin %s not allowed (%s %s)", origin, req.method, req.path)
    return decision


class CORSMiddleware:
    """Middleware that adds CORS headers and handles OPTIONS preflight."""

    def __init__(self, policy: OriginPolicy) -> None:
        self._policy = policy

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Set CORS headers before routing; complete preflight with 204."""
        apply_cors_headers(req, resp, self._policy)
        if req.method == "OPTIONS":
            resp.status = falcon.HTTP_204
            resp.text = None
            resp.complete = True
