"""Origin policy operating modes."""

from enum import StrEnum


class OriginMode(StrEnum):
    """How cross-origin requests are authorized."""

    ALLOW_ALL = "allow_all"
    ALLOW_LIST = "allow_list"
