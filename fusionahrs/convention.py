"""Earth axes conventions."""

from enum import IntEnum


class Convention(IntEnum):
    """Earth axes convention."""

    NWU = 0
    """North-West-Up."""
    ENU = 1
    """East-North-Up."""
    NED = 2
    """North-East-Down."""