"""Resolve origin use case - decide CORS headers for a request origin."""

from smartfarm.domain.entities import CorsDecision, OriginPolicy
from smartfarm.domain.value_objects import OriginMode


def resolve_origin(origin: str | None, policy: OriginPolicy) -> CorsDecision:
    """Decide whether ``origin`` is granted under ``policy``.

    Pure: the same ``(origin, policy)`` pair always yields an equal decision.
    A denied origin is not an error; the decision simply carries no headers
    and the browser enforces the block.
    """
    if not origin:
        # Same-origin or non-browser client: nothing to echo.
        return CorsDecision(allow=True)

    if policy.mode is OriginMode.ALLOW_ALL:
        # Echo the caller; a literal "*" is invalid with credentials.
        return CorsDecision(allow=True, echoed_origin=origin)

    if policy.permits(origin):
        return CorsDecision(allow=True, echoed_origin=origin)
    return CorsDecision(allow=False)
