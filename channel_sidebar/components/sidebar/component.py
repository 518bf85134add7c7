"""
Sidebar component - Categorized channel list.

Builds the sidebar sections from the channels a user belongs to:
missing direct channels are synthesized, direct channels are enriched
with teammate data, everything is sorted once and then split into
sections.

Functional Core - reads ports, never writes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from channel_sidebar.domain.entities import Channel, ChannelType

from ._enrich import enrich_channel
from ._sort import sort_channels
from ._synthesize import synthesize_missing_direct_channels
from .models import DisplayableChannelList
from .ports import IdentityPort, LocalePort, PreferencePort, TeamPort

logger = logging.getLogger(__name__)

# --- Predicates ---


def is_favorite_channel(channel: Channel, preferences: PreferencePort) -> bool:
    # Placeholder channels have no id and cannot be favorited yet.
    if channel.id is None:
        return False
    return preferences.is_favorite(channel.id)


def is_open_channel(channel: Channel) -> bool:
    return channel.type == ChannelType.OPEN


def is_private_channel(channel: Channel) -> bool:
    return channel.type == ChannelType.PRIVATE


def is_direct_channel(channel: Channel) -> bool:
    return channel.type == ChannelType.DIRECT


def is_direct_channel_visible(channel: Channel, preferences: PreferencePort) -> bool:
    """Visibility of an enriched direct channel, keyed by its teammate."""
    if channel.teammate_id is None:
        return False
    return preferences.is_direct_visible(channel.teammate_id)


# --- Entry Point ---


def build_display_list(
    channels: Sequence[Channel],
    *,
    identity: IdentityPort,
    preferences: PreferencePort,
    teams: TeamPort,
    locale: LocalePort,
) -> DisplayableChannelList:
    """
    Sorted sidebar sections for the current user.

    Every section keeps the relative order of one global sort, so sections
    are views over the same ordering rather than independently sorted lists.
    """
    current_user_id = identity.current_user_id()
    current_team_id = teams.current_team_id()
    locale_tag = locale.current_locale()

    missing = synthesize_missing_direct_channels(
        channels, preferences.visible_direct_partners(), current_user_id
    )
    results = [
        enrich_channel(channel, current_user_id, identity) for channel in [*channels, *missing]
    ]
    ordered = sort_channels((result.channel for result in results), locale_tag)

    favorites: list[Channel] = []
    public: list[Channel] = []
    private: list[Channel] = []
    direct: list[Channel] = []
    direct_non_team: list[Channel] = []

    for channel in ordered:
        if is_favorite_channel(channel, preferences):
            favorites.append(channel)
        elif is_open_channel(channel):
            public.append(channel)
        elif is_private_channel(channel):
            private.append(channel)
        elif is_direct_channel(channel):
            if channel.teammate_id is None:
                # Unresolved teammate: membership unknown, still shown.
                direct_non_team.append(channel)
            elif is_direct_channel_visible(channel, preferences):
                if teams.is_active_member(current_team_id, channel.teammate_id):
                    direct.append(channel)
                else:
                    direct_non_team.append(channel)

    logger.debug(
        "Sidebar for user %s: %d favorite, %d public, %d private, %d direct, "
        "%d direct outside team (%d synthesized)",
        current_user_id,
        len(favorites),
        len(public),
        len(private),
        len(direct),
        len(direct_non_team),
        len(missing),
    )

    return DisplayableChannelList(
        favorite_channels=tuple(favorites),
        public_channels=tuple(public),
        private_channels=tuple(private),
        direct_channels=tuple(direct),
        direct_non_team_channels=tuple(direct_non_team),
        issues=tuple(result.issue for result in results if result.issue is not None),
    )
