"""
Sidebar component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from channel_sidebar.domain.entities import Channel

# --- Issues ---


@dataclass(frozen=True)
class SidebarIssue:
    """Non-fatal anomaly found while building the sidebar."""

    code: str
    message: str
    channel_name: str | None = None


# --- Intermediate Models ---


@dataclass(frozen=True)
class EnrichResult:
    channel: Channel
    issue: SidebarIssue | None = None


# --- Output Models ---


@dataclass(frozen=True)
class DisplayableChannelList:
    """
    Sidebar sections, each in display order.

    A channel appears in at most one section. Favorites take precedence
    over the type-based sections.
    """

    favorite_channels: tuple[Channel, ...] = ()
    public_channels: tuple[Channel, ...] = ()
    private_channels: tuple[Channel, ...] = ()
    direct_channels: tuple[Channel, ...] = ()
    direct_non_team_channels: tuple[Channel, ...] = ()
    issues: tuple[SidebarIssue, ...] = field(default=())

    def sections(self) -> dict[str, tuple[Channel, ...]]:
        return {
            "favorite_channels": self.favorite_channels,
            "public_channels": self.public_channels,
            "private_channels": self.private_channels,
            "direct_channels": self.direct_channels,
            "direct_non_team_channels": self.direct_non_team_channels,
        }
