import argparse
import logging
import sys
from pathlib import Path

from channel_sidebar.adapters.snapshot import build_stores, load_snapshot
from channel_sidebar.components.permissions import permission_matrix
from channel_sidebar.components.sidebar import build_display_list
from channel_sidebar.domain.entities import Channel
from channel_sidebar.rules.loader import load_rules
from channel_sidebar.rules.models import Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

SECTION_TITLES = {
    "favorite_channels": "Favorites",
    "public_channels": "Channels",
    "private_channels": "Private Groups",
    "direct_channels": "Direct Messages",
    "direct_non_team_channels": "Direct Messages (outside team)",
}


def get_rules(path: Path) -> Rules:
    if not path.exists():
        logger.warning(f"Rules file {path} not found, using defaults.")
        return Rules()

    try:
        return load_rules(path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def format_channel(channel: Channel) -> str:
    line = channel.display_name or channel.name
    if channel.status is not None:
        line += f" [{channel.status}]"
    if channel.fake:
        line += " (new)"
    return line


def handle_sidebar(rules: Rules, args: argparse.Namespace) -> None:
    try:
        snapshot = load_snapshot(Path(args.snapshot))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    stores = build_stores(snapshot, rules.display, args.locale)
    result = build_display_list(
        snapshot.channels,
        identity=stores.identity,
        preferences=stores.preferences,
        teams=stores.teams,
        locale=stores.locale,
    )

    for key, channels in result.sections().items():
        print(f"{SECTION_TITLES[key]}:")
        for channel in channels:
            print(f"  {format_channel(channel)}")

    for issue in result.issues:
        logger.warning(f"{issue.code}: {issue.message}")


def handle_permissions(rules: Rules, args: argparse.Namespace) -> None:
    decisions = permission_matrix(args.team_admin, args.system_admin, config=rules)
    print(f"Licensed: {rules.is_licensed()}")
    for decision in decisions:
        verdict = "allowed" if decision.allowed else "denied"
        print(f"  {decision.action.value:<7} {decision.channel_type}: {verdict}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Channel Sidebar CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # sidebar
    sidebar_parser = subparsers.add_parser("sidebar", help="Print the sidebar sections")
    sidebar_parser.add_argument("--snapshot", required=True, help="Workspace snapshot YAML")
    sidebar_parser.add_argument("--locale", help="Override the locale used for sorting")

    # permissions
    permissions_parser = subparsers.add_parser(
        "permissions", help="Print create/manage/delete permissions"
    )
    permissions_parser.add_argument("--team-admin", action="store_true", help="User is team admin")
    permissions_parser.add_argument(
        "--system-admin", action="store_true", help="User is system admin"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level)

    rules = get_rules(Path(args.rules))

    if args.command == "sidebar":
        handle_sidebar(rules, args)
    elif args.command == "permissions":
        handle_permissions(rules, args)


if __name__ == "__main__":
    main()
