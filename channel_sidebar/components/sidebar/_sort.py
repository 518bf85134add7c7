"""
Channel ordering.

Channels are ordered by type (open, private, direct, then anything else),
then by display name, then by name. Names are compared with a
locale-aware natural collation:

- accents and case are ignored at first, then accents break ties, then case
  (lowercase first);
- runs of digits compare by numeric value ("Channel 2" < "Channel 10");
- separators sort before numbers, numbers before letters.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable
from typing import Any

from channel_sidebar.domain.entities import Channel, ChannelType

_TYPE_RANK = {
    ChannelType.OPEN.value: 0,
    ChannelType.PRIVATE.value: 1,
    ChannelType.DIRECT.value: 2,
}
UNKNOWN_TYPE_RANK = len(_TYPE_RANK)

# Element classes inside a collation key
_SEPARATOR = 0
_NUMBER = 1
_LETTER = 2

_TOKEN = re.compile(r"(\d+)|(.)", re.DOTALL)

# Languages whose case mapping keeps dotted and dotless i apart
_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})


def type_rank(channel_type: str) -> int:
    return _TYPE_RANK.get(channel_type, UNKNOWN_TYPE_RANK)


def _language(locale: str) -> str:
    return locale.replace("_", "-").split("-")[0].lower()


def _fold_case(value: str, locale: str) -> str:
    if _language(locale) in _DOTTED_I_LANGUAGES:
        value = value.replace("I", "ı").replace("İ", "i")
    return value.casefold()


def _number_key(digits: str) -> tuple[int, str]:
    """Numeric order of a digit run of any length, without ``int()``."""
    ascii_digits = "".join(str(unicodedata.decimal(c)) for c in digits)
    stripped = ascii_digits.lstrip("0") or "0"
    return (len(stripped), stripped)


def _elements(text: str) -> tuple[tuple[int, Any], ...]:
    elements: list[tuple[int, Any]] = []
    for match in _TOKEN.finditer(text):
        digits, char = match.groups()
        if digits is not None:
            elements.append((_NUMBER, _number_key(digits)))
        elif char.isalpha():
            elements.append((_LETTER, char))
        else:
            elements.append((_SEPARATOR, char))
    return tuple(elements)


def collation_key(value: str, locale: str) -> tuple[Any, ...]:
    """Sort key for ``value`` under ``locale``. Equal keys mean equal strings."""
    decomposed = unicodedata.normalize("NFKD", _fold_case(value, locale))
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (_elements(base), _elements(decomposed), value.swapcase(), value)


def sort_key(channel: Channel, locale: str) -> tuple[Any, ...]:
    return (
        type_rank(channel.type),
        collation_key(channel.display_name, locale),
        collation_key(channel.name, locale),
    )


def compare_channels(a: Channel, b: Channel, locale: str) -> int:
    """cmp-style comparison: negative, zero or positive."""
    key_a = sort_key(a, locale)
    key_b = sort_key(b, locale)
    return (key_a > key_b) - (key_a < key_b)


def sort_channels(channels: Iterable[Channel], locale: str) -> list[Channel]:
    return sorted(channels, key=lambda channel: sort_key(channel, locale))
