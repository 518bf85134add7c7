"""
Permissions component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from channel_sidebar.domain.entities import PermissionAction


class PermissionConfigPort(Protocol):
    """
    Read-only license and restriction policy snapshot.

    ``channel_sidebar.rules.models.Rules`` implements this port.
    """

    def is_licensed(self) -> bool: ...

    def restriction_level(self, action: PermissionAction | str, channel_type: str) -> str:
        """One of the RestrictionLevel values; unknown values are unrestricted."""
        ...
