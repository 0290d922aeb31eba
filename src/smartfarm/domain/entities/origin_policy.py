"""Origin policy - which browser origins may call the API."""

from dataclasses import dataclass, field

from smartfarm.domain.value_objects import OriginMode

WILDCARD = "*"

# Production frontend plus the local Angular dev server.
DEFAULT_ORIGINS: frozenset[str] = frozenset(
    {
        "https://feedin.up.railway.app",
        "http://localhost:4200",
        "http://127.0.0.1:4200",
    }
)


@dataclass(frozen=True)
class OriginPolicy:
    """Process-wide origin policy, built once at startup.

    In ``ALLOW_LIST`` mode the effective allow-set is the union of the static
    defaults and the configured origins. Configured origins never replace the
    defaults.
    """

    mode: OriginMode
    static_allow_list: frozenset[str] = DEFAULT_ORIGINS
    configured_allow_list: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_setting(
        cls,
        value: str | None,
        defaults: frozenset[str] = DEFAULT_ORIGINS,
    ) -> "OriginPolicy":
        """Parse the ``CORS_ORIGIN`` value (``*`` or comma-separated origins)."""
        raw = (value or "").strip()
        if raw == WILDCARD:
            return cls(mode=OriginMode.ALLOW_ALL, static_allow_list=defaults)
        configured = frozenset(o.strip() for o in raw.split(",") if o.strip())
        return cls(
            mode=OriginMode.ALLOW_LIST,
            static_allow_list=defaults,
            configured_allow_list=configured,
        )

    @property
    def allowed_origins(self) -> frozenset[str]:
        """Effective allow-set for ``ALLOW_LIST`` mode."""
        return self.static_allow_list | self.configured_allow_list

    def permits(self, origin: str) -> bool:
        if self.mode is OriginMode.ALLOW_ALL:
            return True
        return origin in self.allowed_origins

    def describe(self) -> str:
        """One-line summary for startup logs."""
        if self.mode is OriginMode.ALLOW_ALL:
            return "allowing all origins (echoed) with credentials support"
        return "allowing origins: " + ", ".join(sorted(self.allowed_origins))
