"""
Placeholder direct channels.

A user can mark a teammate as visible in the direct messages section
before the two of them ever exchanged a message. No channel exists yet in
that case, so a placeholder is fabricated for display only.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from channel_sidebar.domain.channel_names import (
    get_direct_channel_name,
    get_user_id_from_channel_name,
)
from channel_sidebar.domain.entities import Channel, ChannelType


def create_fake_channel(user_id: str, other_user_id: str) -> Channel:
    return Channel(
        name=get_direct_channel_name(user_id, other_user_id),
        type=ChannelType.DIRECT.value,
        last_post_at=0,
        total_msg_count=0,
        fake=True,
    )


def synthesize_missing_direct_channels(
    existing_channels: Sequence[Channel],
    visible_partners: Iterable[str],
    current_user_id: str,
) -> list[Channel]:
    """Placeholders for every visible partner without a direct channel."""
    covered = {
        get_user_id_from_channel_name(channel.name, current_user_id)
        for channel in existing_channels
        if channel.type == ChannelType.DIRECT
    }

    return [
        create_fake_channel(current_user_id, partner)
        for partner in sorted(visible_partners)
        if partner != current_user_id and partner not in covered
    ]
