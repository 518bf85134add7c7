import itertools
import random
from unittest.mock import MagicMock

import pytest

from channel_sidebar.adapters.memory_stores import (
    FixedLocale,
    InMemoryIdentityStore,
    InMemoryPreferenceStore,
    InMemoryTeamStore,
)
from channel_sidebar.components.permissions import can_create, can_delete, can_manage
from channel_sidebar.components.sidebar import build_display_list, sort_key
from channel_sidebar.domain.channel_names import get_direct_channel_name
from channel_sidebar.domain.entities import Channel, UserProfile

ME = "me"
WORDS = ["Town Square", "Off-Topic", "Channel 2", "Channel 10", "ÉQUIPE", "equipe", "ops", "Ops"]


def random_world(seed: int):
    rng = random.Random(seed)
    users = [f"user{i}" for i in range(12)]

    channels = []
    for i in range(rng.randint(0, 15)):
        channels.append(
            Channel(
                id=f"c{i}",
                name=f"chan-{rng.randint(0, 30)}",
                display_name=rng.choice(WORDS),
                type=rng.choice(["O", "P", "X"]),
            )
        )
    for i, user_id in enumerate(rng.sample(users, rng.randint(0, len(users)))):
        channels.append(
            Channel(id=f"d{i}", name=get_direct_channel_name(ME, user_id), type="D")
        )
    channels.append(Channel(id="bad", name="not-a-pair", type="D"))

    all_ids = [c.id for c in channels if c.id]
    stores = dict(
        identity=InMemoryIdentityStore(
            current_id=ME,
            profiles={
                u: UserProfile(id=u, username=rng.choice(WORDS).lower())
                for u in users
                if rng.random() < 0.8
            },
            statuses={
                u: rng.choice(["online", "away", "dnd"]) for u in users if rng.random() < 0.5
            },
        ),
        preferences=InMemoryPreferenceStore(
            favorite_channel_ids={c for c in all_ids if rng.random() < 0.2},
            direct_channel_show={u: rng.random() < 0.7 for u in users},
        ),
        teams=InMemoryTeamStore(
            current_id="t1", active_members={"t1": {u for u in users if rng.random() < 0.6}}
        ),
        locale=FixedLocale(rng.choice(["en", "fr-FR", "tr"])),
    )
    return channels, stores


SEEDS = range(25)


# --- I1: Idempotence ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I1_idempotent(seed):
    """Same inputs and stores give the same sections."""
    channels, stores = random_world(seed)

    assert build_display_list(channels, **stores) == build_display_list(channels, **stores)


# --- I2: Partition ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I2_partition(seed):
    """Every channel is in one section at most, and only where it belongs."""
    channels, stores = random_world(seed)
    prefs = stores["preferences"]
    teams = stores["teams"]

    result = build_display_list(channels, **stores)
    sections = result.sections()
    shown = [c.id or c.name for section in sections.values() for c in section]
    assert len(shown) == len(set(shown))

    for channel in channels:
        favorite = prefs.is_favorite(channel.id)
        placed = [
            key for key, section in sections.items() if channel.id in {c.id for c in section}
        ]
        if favorite:
            assert placed == ["favorite_channels"]
        elif channel.type == "O":
            assert placed == ["public_channels"]
        elif channel.type == "P":
            assert placed == ["private_channels"]
        elif channel.id == "bad":
            assert placed == ["direct_non_team_channels"]
        elif channel.type == "D":
            teammate = channel.name.replace(ME, "").strip("_")
            if not prefs.is_direct_visible(teammate):
                assert placed == []
            elif teams.is_active_member("t1", teammate):
                assert placed == ["direct_channels"]
            else:
                assert placed == ["direct_non_team_channels"]
        else:
            assert placed == []


# --- I3: Synthesis ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I3_every_visible_partner_shown_once(seed):
    """Every visible partner has exactly one direct entry, real or placeholder."""
    channels, stores = random_world(seed)
    prefs = stores["preferences"]

    result = build_display_list(channels, **stores)
    direct = [
        *result.direct_channels,
        *result.direct_non_team_channels,
        *(c for c in result.favorite_channels if c.type == "D"),
    ]
    teammates = [c.teammate_id for c in direct]

    assert len(teammates) == len(set(teammates))
    assert prefs.visible_direct_partners() <= set(teammates)
    assert all(t != ME for t in teammates)
    assert all(c.id is not None for c in direct if not c.fake)


# --- I4: Ordering ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I4_sections_sorted(seed):
    """Every section is in comparator order."""
    channels, stores = random_world(seed)
    locale = stores["locale"].current_locale()

    result = build_display_list(channels, **stores)

    for section in result.sections().values():
        keys = [sort_key(c, locale) for c in section]
        assert keys == sorted(keys)


# --- I5: Malformed names ---
@pytest.mark.parametrize("seed", SEEDS)
def test_I5_malformed_reported(seed):
    channels, stores = random_world(seed)

    result = build_display_list(channels, **stores)

    assert [issue.channel_name for issue in result.issues] == ["not-a-pair"]


# --- I6: Unlicensed ---
@pytest.mark.parametrize(
    "channel_type,team_admin,system_admin",
    list(itertools.product(["O", "P", "D", "X"], [False, True], [False, True])),
)
def test_I6_unlicensed_permits_everything(channel_type, team_admin, system_admin):
    config = MagicMock()
    config.is_licensed.return_value = False
    config.restriction_level.return_value = "system_admin"
    channel = Channel(id="c", name="c", type=channel_type)

    assert can_create(channel_type, team_admin, system_admin, config=config)
    assert can_manage(channel, team_admin, system_admin, config=config)
    assert can_delete(channel, team_admin, system_admin, config=config)
    config.restriction_level.assert_not_called()
