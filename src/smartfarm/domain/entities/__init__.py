"""Domain entities."""

from smartfarm.domain.entities.cors_decision import CorsDecision
from smartfarm.domain.entities.origin_policy import DEFAULT_ORIGINS, OriginPolicy

__all__ = [
    "DEFAULT_ORIGINS",
    "CorsDecision",
    "OriginPolicy",
]
