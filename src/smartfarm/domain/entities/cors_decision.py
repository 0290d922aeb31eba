"""CORS decision - per-request outcome of origin authorization."""

from dataclasses import dataclass

ALLOWED_METHODS: tuple[str, ...] = (
    "GET",
    "HEAD",
    "PUT",
    "PATCH",
    "POST",
    "DELETE",
    "OPTIONS",
)
ALLOWED_HEADERS: tuple[str, ...] = (
    "Content-Type",
    "Authorization",
    "X-CSRF-Token",
    "Accept",
    "Origin",
    "X-Requested-With",
)
MAX_AGE_SECONDS = 86400


@dataclass(frozen=True)
class CorsDecision:
    """Whether an origin is granted, and the origin to echo back."""

    allow: bool
    echoed_origin: str | None = None
    allow_credentials: bool = True
    allowed_methods: tuple[str, ...] = ALLOWED_METHODS
    allowed_headers: tuple[str, ...] = ALLOWED_HEADERS
    max_age_seconds: int = MAX_AGE_SECONDS

    def headers(self) -> dict[str, str]:
        """Response headers to emit. Empty for a denied origin."""
        if not self.allow:
            return {}
        headers: dict[str, str] = {}
        if self.echoed_origin:
            headers["Access-Control-Allow-Origin"] = self.echoed_origin
        if self.allow_credentials:
            headers["Access-Control-Allow-Credentials"] = "true"
        headers["Access-Control-Allow-Methods"] = ",".join(self.allowed_methods)
        headers["Access-Control-Allow-Headers"] = ", ".join(self.allowed_headers)
        headers["Access-Control-Max-Age"] = str(self.max_age_seconds)
        return headers
