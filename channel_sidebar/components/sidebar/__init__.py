"""
Sidebar component - Categorized, sorted channel list for the sidebar.

Synthesizes placeholder direct channels, enriches direct channels with
teammate data and splits everything into favorite, public, private,
direct and direct-outside-team sections.
"""

from ._enrich import UNKNOWN_USER_DISPLAY_NAME, complete_direct_channel_info, enrich_channel
from ._sort import collation_key, compare_channels, sort_channels, sort_key, type_rank
from ._synthesize import create_fake_channel, synthesize_missing_direct_channels
from .component import (
    build_display_list,
    is_direct_channel,
    is_direct_channel_visible,
    is_favorite_channel,
    is_open_channel,
    is_private_channel,
)
from .models import DisplayableChannelList, EnrichResult, SidebarIssue
from .ports import IdentityPort, LocalePort, PreferencePort, TeamPort

__all__ = [
    # Entry point
    "build_display_list",
    # Stages
    "synthesize_missing_direct_channels",
    "create_fake_channel",
    "enrich_channel",
    "complete_direct_channel_info",
    "sort_channels",
    "sort_key",
    "compare_channels",
    "collation_key",
    "type_rank",
    # Predicates
    "is_favorite_channel",
    "is_open_channel",
    "is_private_channel",
    "is_direct_channel",
    "is_direct_channel_visible",
    # Models
    "DisplayableChannelList",
    "EnrichResult",
    "SidebarIssue",
    "UNKNOWN_USER_DISPLAY_NAME",
    # Ports
    "IdentityPort",
    "LocalePort",
    "PreferencePort",
    "TeamPort",
]
