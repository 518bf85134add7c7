from dataclasses import dataclass

from channel_sidebar.domain.entities import PermissionAction


@dataclass(frozen=True)
class PermissionDecision:
    action: PermissionAction
    channel_type: str
    allowed: bool
