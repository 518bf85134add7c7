from pydantic import BaseModel, Field

from channel_sidebar.domain.entities import (
    ChannelType,
    PermissionAction,
    RestrictionLevel,
    TeammateNameDisplay,
)

UNRESTRICTED = RestrictionLevel.UNRESTRICTED.value


class LicenseRules(BaseModel):
    is_licensed: bool = False


class ChannelRestrictionRules(BaseModel):
    # Plain strings: values outside RestrictionLevel are tolerated and
    # behave as unrestricted.
    restrict_public_channel_creation: str = UNRESTRICTED
    restrict_private_channel_creation: str = UNRESTRICTED
    restrict_public_channel_management: str = UNRESTRICTED
    restrict_private_channel_management: str = UNRESTRICTED
    restrict_public_channel_deletion: str = UNRESTRICTED
    restrict_private_channel_deletion: str = UNRESTRICTED


class DisplayRules(BaseModel):
    default_locale: str = "en"
    teammate_name_display: TeammateNameDisplay = "username"


_RESTRICTION_FIELDS: dict[tuple[PermissionAction, ChannelType], str] = {
    (PermissionAction.CREATE, ChannelType.OPEN): "restrict_public_channel_creation",
    (PermissionAction.CREATE, ChannelType.PRIVATE): "restrict_private_channel_creation",
    (PermissionAction.MANAGE, ChannelType.OPEN): "restrict_public_channel_management",
    (PermissionAction.MANAGE, ChannelType.PRIVATE): "restrict_private_channel_management",
    (PermissionAction.DELETE, ChannelType.OPEN): "restrict_public_channel_deletion",
    (PermissionAction.DELETE, ChannelType.PRIVATE): "restrict_private_channel_deletion",
}


class Rules(BaseModel):
    license: LicenseRules = Field(default_factory=LicenseRules)
    channel_restrictions: ChannelRestrictionRules = Field(
        default_factory=ChannelRestrictionRules
    )
    display: DisplayRules = Field(default_factory=DisplayRules)

    def is_licensed(self) -> bool:
        return self.license.is_licensed

    def restriction_level(self, action: PermissionAction | str, channel_type: str) -> str:
        """
        Restriction configured for ``action`` on channels of ``channel_type``.

        Channel types without a policy entry (direct channels, unknown
        types) are always unrestricted.
        """
        try:
            key = (PermissionAction(action), ChannelType(channel_type))
        except ValueError:
            return UNRESTRICTED

        field_name = _RESTRICTION_FIELDS.get(key)
        if field_name is None:
            return UNRESTRICTED
        return getattr(self.channel_restrictions, field_name)

    def unknown_restriction_values(self) -> dict[str, str]:
        known = {level.value for level in RestrictionLevel}
        return {
            name: value
            for name, value in self.channel_restrictions.model_dump().items()
            if value not in known
        }
