"""Domain value objects."""

from smartfarm.domain.value_objects.origin_mode import OriginMode

__all__ = [
    "OriginMode",
]
