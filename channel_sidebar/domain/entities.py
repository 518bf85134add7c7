from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

# --- Enums / Literals ---


class ChannelType(str, Enum):
    OPEN = "O"
    PRIVATE = "P"
    DIRECT = "D"


class PresenceStatus(str, Enum):
    ONLINE = "online"
    AWAY = "away"
    DND = "dnd"
    OFFLINE = "offline"


class RestrictionLevel(str, Enum):
    UNRESTRICTED = "all"
    TEAM_ADMIN_REQUIRED = "team_admin"
    SYSTEM_ADMIN_REQUIRED = "system_admin"


class PermissionAction(str, Enum):
    CREATE = "create"
    MANAGE = "manage"
    DELETE = "delete"


TeammateNameDisplay = Literal["username", "nickname_full_name", "full_name"]

# --- Channels ---


class Channel(BaseModel):
    """
    A channel record as seen by the sidebar.

    ``type`` stays a plain string so records carrying channel types this
    package does not know about still validate.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    name: str
    display_name: str = ""
    type: str
    teammate_id: str | None = None
    status: str | None = None
    fake: bool = False
    last_post_at: int = 0
    total_msg_count: int = 0

    @field_validator("display_name", mode="before")
    @classmethod
    def default_display_name(cls, v: str | None) -> str:
        return "" if v is None else v

    @field_validator("type", mode="before")
    @classmethod
    def plain_type(cls, v: object) -> object:
        return v.value if isinstance(v, Enum) else v


# --- Users ---


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    username: str
    first_name: str = ""
    last_name: str = ""
    nickname: str = ""

    @property
    def full_name(self) -> str:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name or self.last_name

    def display_name(self, name_format: TeammateNameDisplay = "username") -> str:
        """Name shown for this user, falling back to the username when blank."""
        if name_format == "nickname_full_name":
            name = self.nickname or self.full_name
        elif name_format == "full_name":
            name = self.full_name
        else:
            name = ""

        if not name.strip():
            name = self.username
        return name
