"""
Sidebar component - Port interfaces.

All ports are read-only snapshots; nothing in the component writes back.
"""

from __future__ import annotations

from typing import Protocol


class IdentityPort(Protocol):
    """User identity and presence lookups."""

    def current_user_id(self) -> str:
        """Id of the user the sidebar is built for."""
        ...

    def display_name(self, user_id: str) -> str | None:
        """Human label for a user, None if the user is unknown."""
        ...

    def presence_status(self, user_id: str) -> str | None:
        """Presence of a user, None if no presence record exists."""
        ...


class PreferencePort(Protocol):
    """Favorite and direct-channel visibility preferences of the current user."""

    def is_favorite(self, channel_id: str) -> bool: ...

    def is_direct_visible(self, user_id: str) -> bool: ...

    def visible_direct_partners(self) -> set[str]: ...


class TeamPort(Protocol):
    def current_team_id(self) -> str: ...

    def is_active_member(self, team_id: str, user_id: str) -> bool: ...


class LocalePort(Protocol):
    def current_locale(self) -> str: ...
