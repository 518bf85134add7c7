"""
Direct channel enrichment.

Direct channels carry no useful display name of their own. They get the
teammate's name, id and presence attached here. Input channels are never
modified; a new value is returned.
"""

from __future__ import annotations

import logging

from channel_sidebar.domain.channel_names import get_user_id_from_channel_name
from channel_sidebar.domain.entities import Channel, ChannelType, PresenceStatus

from .models import EnrichResult, SidebarIssue
from .ports import IdentityPort

logger = logging.getLogger(__name__)

UNKNOWN_USER_DISPLAY_NAME = "Someone"


def enrich_channel(
    channel: Channel,
    current_user_id: str,
    identity: IdentityPort,
) -> EnrichResult:
    if channel.type != ChannelType.DIRECT:
        return EnrichResult(channel=channel.model_copy())

    teammate_id = get_user_id_from_channel_name(channel.name, current_user_id)
    if teammate_id is None:
        logger.warning(
            "Direct channel %r (id=%s) has no teammate for user %s; leaving it unenriched",
            channel.name,
            channel.id,
            current_user_id,
        )
        return EnrichResult(
            channel=channel.model_copy(update={"teammate_id": None, "status": None}),
            issue=SidebarIssue(
                code="malformed_direct_name",
                message=f"Cannot resolve the teammate of direct channel {channel.name!r}",
                channel_name=channel.name,
            ),
        )

    display_name = identity.display_name(teammate_id) or UNKNOWN_USER_DISPLAY_NAME
    status = identity.presence_status(teammate_id) or PresenceStatus.OFFLINE.value

    return EnrichResult(
        channel=channel.model_copy(
            update={
                "display_name": display_name,
                "teammate_id": teammate_id,
                "status": status,
            }
        )
    )


def complete_direct_channel_info(
    channel: Channel,
    current_user_id: str,
    identity: IdentityPort,
) -> Channel:
    """Enriched copy of ``channel``; anomalies are only logged."""
    return enrich_channel(channel, current_user_id, identity).channel
