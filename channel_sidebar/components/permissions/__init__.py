"""
Permissions component - Who may create, manage or delete a channel.
"""

from .component import (
    RESTRICTED_CHANNEL_TYPES,
    can_create,
    can_delete,
    can_manage,
    permission_matrix,
)
from .models import PermissionDecision
from .ports import PermissionConfigPort

__all__ = [
    # Entry points
    "can_create",
    "can_manage",
    "can_delete",
    "permission_matrix",
    "RESTRICTED_CHANNEL_TYPES",
    # Output models
    "PermissionDecision",
    # Ports
    "PermissionConfigPort",
]
