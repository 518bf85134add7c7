"""
Permissions component - Channel create/manage/delete gating.

Unlicensed deployments are never restricted. Licensed deployments read a
restriction level per action and channel type; only open and private
channels are subject to it.
"""

from __future__ import annotations

from channel_sidebar.domain.entities import (
    Channel,
    ChannelType,
    PermissionAction,
    RestrictionLevel,
)

from .models import PermissionDecision
from .ports import PermissionConfigPort

RESTRICTED_CHANNEL_TYPES = (ChannelType.OPEN.value, ChannelType.PRIVATE.value)


def _is_allowed(
    action: PermissionAction,
    channel_type: ChannelType | str,
    is_team_admin: bool,
    is_system_admin: bool,
    config: PermissionConfigPort,
) -> bool:
    if isinstance(channel_type, ChannelType):
        channel_type = channel_type.value

    if not config.is_licensed():
        return True

    if channel_type not in RESTRICTED_CHANNEL_TYPES:
        return True

    level = config.restriction_level(action, channel_type)
    if level == RestrictionLevel.SYSTEM_ADMIN_REQUIRED and not is_system_admin:
        return False
    if level == RestrictionLevel.TEAM_ADMIN_REQUIRED and not is_team_admin:
        return False
    return True


def can_create(
    channel_type: ChannelType | str,
    is_team_admin: bool,
    is_system_admin: bool,
    *,
    config: PermissionConfigPort,
) -> bool:
    """Whether the create option is offered for channels of ``channel_type``."""
    return _is_allowed(
        PermissionAction.CREATE,
        channel_type,
        is_team_admin,
        is_system_admin,
        config,
    )


def can_manage(
    channel: Channel,
    is_team_admin: bool,
    is_system_admin: bool,
    *,
    config: PermissionConfigPort,
) -> bool:
    return _is_allowed(
        PermissionAction.MANAGE, channel.type, is_team_admin, is_system_admin, config
    )


def can_delete(
    channel: Channel,
    is_team_admin: bool,
    is_system_admin: bool,
    *,
    config: PermissionConfigPort,
) -> bool:
    return _is_allowed(
        PermissionAction.DELETE, channel.type, is_team_admin, is_system_admin, config
    )


def permission_matrix(
    is_team_admin: bool,
    is_system_admin: bool,
    *,
    config: PermissionConfigPort,
) -> tuple[PermissionDecision, ...]:
    """Every action on every restricted channel type for one user."""
    return tuple(
        PermissionDecision(
            action=action,
            channel_type=channel_type,
            allowed=_is_allowed(action, channel_type, is_team_admin, is_system_admin, config),
        )
        for action in PermissionAction
        for channel_type in RESTRICTED_CHANNEL_TYPES
    )
