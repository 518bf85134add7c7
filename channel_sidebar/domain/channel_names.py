"""
Direct channel naming.

A direct conversation between two users is named after the pair of user
ids, smaller id first, joined by a double underscore. The same two users
always produce the same name regardless of who is asking.
"""

from __future__ import annotations

DIRECT_NAME_SEPARATOR = "__"


def get_direct_channel_name(user_id: str, other_user_id: str) -> str:
    """Build the canonical direct channel name for a pair of users."""
    if user_id > other_user_id:
        return f"{other_user_id}{DIRECT_NAME_SEPARATOR}{user_id}"
    return f"{user_id}{DIRECT_NAME_SEPARATOR}{other_user_id}"


def split_direct_channel_name(name: str) -> tuple[str, str] | None:
    """
    Decompose a direct channel name into its two user ids.

    Returns None when the name is not made of exactly two non-empty ids.
    """
    parts = name.split(DIRECT_NAME_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def get_user_id_from_channel_name(name: str, current_user_id: str) -> str | None:
    """
    Return the other participant of a direct channel.

    None when the name is malformed, does not include ``current_user_id``,
    or pairs the current user with themself.
    """
    ids = split_direct_channel_name(name)
    if ids is None:
        return None

    first, second = ids
    if first == current_user_id and second != current_user_id:
        return second
    if second == current_user_id and first != current_user_id:
        return first
    return None
