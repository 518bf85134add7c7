from pathlib import Path

import pytest
import yaml

PROJECT_ROOT = Path(__file__).parent.parent

SNAPSHOT = {
    "current_user_id": "u1",
    "current_team_id": "t1",
    "channels": [
        {"id": "c1", "name": "town-square", "display_name": "Town Square", "type": "O"},
        {"id": "c2", "name": "channel-10", "display_name": "Channel 10", "type": "O"},
        {"id": "c3", "name": "channel-2", "display_name": "Channel 2", "type": "O"},
        {"id": "p1", "name": "secrets", "display_name": "Secrets", "type": "P"},
        {"id": "d1", "name": "u1__u2", "display_name": None, "type": "D", "total_msg_count": 4},
        {"id": "d2", "name": "u1__u3", "type": "D"},
    ],
    "users": [
        {"id": "u2", "username": "alice", "first_name": "Alice", "last_name": "Archer"},
        {"id": "u3", "username": "bob", "nickname": "Bobby"},
        {"id": "u4", "username": "dave"},
    ],
    "statuses": {"u2": "online"},
    "preferences": {
        "favorite_channels": ["p1"],
        "direct_channel_show": {"u2": True, "u3": True, "u4": True},
    },
    "team_members": {"t1": ["u1", "u2", "u4"]},
}


def write_yaml(path: Path, data: object) -> Path:
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return path


@pytest.fixture
def project_rules_path() -> Path:
    """The rules file shipped at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    return write_yaml(tmp_path / "workspace.yaml", SNAPSHOT)


@pytest.fixture
def licensed_rules_path(tmp_path: Path) -> Path:
    return write_yaml(
        tmp_path / "rules.yaml",
        {
            "license": {"is_licensed": True},
            "channel_restrictions": {
                "restrict_public_channel_creation": "system_admin",
                "restrict_private_channel_deletion": "team_admin",
            },
            "display": {"teammate_name_display": "full_name"},
        },
    )
