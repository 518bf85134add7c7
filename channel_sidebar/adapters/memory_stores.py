"""
In-memory read-only stores.

Implement the sidebar ports over plain dictionaries. Used by the CLI
(populated from a workspace snapshot) and by tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from channel_sidebar.domain.entities import TeammateNameDisplay, UserProfile


@dataclass
class InMemoryIdentityStore:
    """Implements IdentityPort."""

    current_id: str
    profiles: dict[str, UserProfile] = field(default_factory=dict)
    statuses: dict[str, str] = field(default_factory=dict)
    teammate_name_display: TeammateNameDisplay = "username"

    def current_user_id(self) -> str:
        return self.current_id

    def display_name(self, user_id: str) -> str | None:
        profile = self.profiles.get(user_id)
        if profile is None:
            return None
        return profile.display_name(self.teammate_name_display)

    def presence_status(self, user_id: str) -> str | None:
        return self.statuses.get(user_id)


@dataclass
class InMemoryPreferenceStore:
    """Implements PreferencePort."""

    favorite_channel_ids: set[str] = field(default_factory=set)
    # teammate id -> shown in the direct messages section
    direct_channel_show: dict[str, bool] = field(default_factory=dict)

    def is_favorite(self, channel_id: str) -> bool:
        return channel_id in self.favorite_channel_ids

    def is_direct_visible(self, user_id: str) -> bool:
        return self.direct_channel_show.get(user_id, False)

    def visible_direct_partners(self) -> set[str]:
        return {user_id for user_id, shown in self.direct_channel_show.items() if shown}


@dataclass
class InMemoryTeamStore:
    """Implements TeamPort."""

    current_id: str
    active_members: dict[str, set[str]] = field(default_factory=dict)

    def current_team_id(self) -> str:
        return self.current_id

    def is_active_member(self, team_id: str, user_id: str) -> bool:
        return user_id in self.active_members.get(team_id, set())


@dataclass
class FixedLocale:
    """Implements LocalePort."""

    locale: str = "en"

    def current_locale(self) -> str:
        return self.locale
