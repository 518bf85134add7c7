"""
Workspace snapshot loading.

A snapshot is a YAML document holding everything the sidebar needs for
one user: channels, user profiles, presence, preferences and team
membership. It is validated with pydantic and turned into in-memory stores.

Example::

    current_user_id: u1
    current_team_id: t1
    channels:
      - {id: c1, name: town-square, display_name: Town Square, type: O}
      - {id: c2, name: u1__u2, type: D}
    users:
      - {id: u2, username: alice, first_name: Alice}
    statuses: {u2: online}
    preferences:
      favorite_channels: [c1]
      direct_channel_show: {u2: true, u3: true}
    team_members:
      t1: [u1, u2]
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from channel_sidebar.domain.entities import Channel, UserProfile
from channel_sidebar.rules.loader import DocumentValidationError, read_yaml_document
from channel_sidebar.rules.models import DisplayRules

from .memory_stores import (
    FixedLocale,
    InMemoryIdentityStore,
    InMemoryPreferenceStore,
    InMemoryTeamStore,
)


class SnapshotPreferences(BaseModel):
    favorite_channels: list[str] = Field(default_factory=list)
    direct_channel_show: dict[str, bool] = Field(default_factory=dict)


class WorkspaceSnapshot(BaseModel):
    current_user_id: str
    current_team_id: str
    locale: str | None = None
    channels: list[Channel] = Field(default_factory=list)
    users: list[UserProfile] = Field(default_factory=list)
    statuses: dict[str, str] = Field(default_factory=dict)
    preferences: SnapshotPreferences = Field(default_factory=SnapshotPreferences)
    team_members: dict[str, list[str]] = Field(default_factory=dict)


@dataclass(frozen=True)
class WorkspaceStores:
    identity: InMemoryIdentityStore
    preferences: InMemoryPreferenceStore
    teams: InMemoryTeamStore
    locale: FixedLocale


def load_snapshot(path: Path) -> WorkspaceSnapshot:
    data = read_yaml_document(path)
    try:
        return WorkspaceSnapshot.model_validate(data)
    except ValidationError as e:
        raise DocumentValidationError(path, e) from e


def build_stores(
    snapshot: WorkspaceSnapshot,
    display: DisplayRules | None = None,
    locale: str | None = None,
) -> WorkspaceStores:
    """
    Wrap a snapshot in in-memory stores.

    Locale precedence: explicit ``locale``, then the snapshot's, then the
    rules default.
    """
    display = display or DisplayRules()

    return WorkspaceStores(
        identity=InMemoryIdentityStore(
            current_id=snapshot.current_user_id,
            profiles={user.id: user for user in snapshot.users},
            statuses=dict(snapshot.statuses),
            teammate_name_display=display.teammate_name_display,
        ),
        preferences=InMemoryPreferenceStore(
            favorite_channel_ids=set(snapshot.preferences.favorite_channels),
            direct_channel_show=dict(snapshot.preferences.direct_channel_show),
        ),
        teams=InMemoryTeamStore(
            current_id=snapshot.current_team_id,
            active_members={
                team_id: set(members) for team_id, members in snapshot.team_members.items()
            },
        ),
        locale=FixedLocale(locale or snapshot.locale or display.default_locale),
    )
