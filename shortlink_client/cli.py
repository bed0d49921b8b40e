from __future__ import annotations

import argparse
from dataclasses import asdict, is_dataclass
import getpass
import json
import sys
from typing import Any, Sequence, TextIO

from shortlink_client.auth import SessionInvalidated
from shortlink_client.config import AppSettings, ConfigurationError
from shortlink_client.logging_utils import configure_logging
from shortlink_client.results import CallResult
from shortlink_client.services import ShortlinkService
from shortlink_client.session_store import SessionStoreError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shortlink", description="Command-line client for the link shortener API.")
    parser.add_argument("--log-level", default=None, help="Override SHORTLINK_LOG_LEVEL")
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Sign in and store the session token")
    login.add_argument("email")
    login.add_argument("--password", help="Password (prompted when omitted)")

    commands.add_parser("logout", help="Forget the stored session")
    commands.add_parser("whoami", help="Show the signed-in user's profile")

    links = commands.add_parser("links", help="List your links")
    links.add_argument("--search")
    links.add_argument("--folder", type=int, dest="folder_id")
    links.add_argument("--tag", type=int, dest="tag_id")
    links.add_argument("--limit", type=int)

    shorten = commands.add_parser("shorten", help="Create a short link")
    shorten.add_argument("url")
    shorten.add_argument("--alias", dest="custom_alias")
    shorten.add_argument("--folder", type=int, dest="folder_id")
    shorten.add_argument("--notes")

    stats = commands.add_parser("stats", help="Show click statistics for one link")
    stats.add_argument("link_id", type=int)
    stats.add_argument("--days", type=int)

    dashboard = commands.add_parser("dashboard", help="Show links, folders, tags and totals")
    dashboard.add_argument("--days", type=int)

    return parser


def main(
    argv: Sequence[str] | None = None,
    service: ShortlinkService | None = None,
    out: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout

    if service is None:
        try:
            settings = AppSettings.from_env()
        except ConfigurationError as exc:
            print(f"Configuration error: {exc}", file=sys.stderr)
            return 2
        configure_logging(args.log_level or settings.log_level)
        service = ShortlinkService.create(settings)

    def show_login_hint(event: SessionInvalidated) -> None:
        print(
            f"Your session has ended. Run 'shortlink login <email>' to sign in again ({event.login_path}).",
            file=sys.stderr,
        )

    unsubscribe = service.on_session_invalidated(show_login_hint)
    try:
        return _run(args, service, out)
    except SessionStoreError as exc:
        print(f"Session storage error: {exc}", file=sys.stderr)
        return 1
    finally:
        unsubscribe()
        service.close()


def _run(args: argparse.Namespace, service: ShortlinkService, out: TextIO) -> int:
    if args.command == "login":
        password = args.password or getpass.getpass("Password: ")
        result = service.sign_in(args.email, password)
        if result.ok and result.data is not None:
            print(f"Signed in as {result.data.email}", file=out)
            if not result.data.email_verified:
                print("Your email address is not verified yet.", file=out)
            return 0
        return _emit(result, out)

    if args.command == "logout":
        service.sign_out()
        print("Signed out", file=out)
        return 0

    if args.command == "whoami":
        return _emit(service.auth.get_profile(), out)

    if args.command == "links":
        result = service.links.list(
            folder_id=args.folder_id,
            tag_id=args.tag_id,
            search=args.search,
            limit=args.limit,
        )
        return _emit(result, out)

    if args.command == "shorten":
        result = service.links.create(
            args.url,
            custom_alias=args.custom_alias,
            folder_id=args.folder_id,
            notes=args.notes,
        )
        return _emit(result, out)

    if args.command == "stats":
        return _emit(service.analytics.link_stats(args.link_id, days=args.days), out)

    if args.command == "dashboard":
        snapshot = service.load_dashboard(days=args.days)
        document = {
            "links": _plain(snapshot.links.data),
            "folders": _plain(snapshot.folders.data),
            "tags": _plain(snapshot.tags.data),
            "stats": _plain(snapshot.stats.data),
        }
        if snapshot.errors:
            document["errors"] = snapshot.errors
        print(json.dumps(document, indent=2), file=out)
        return 1 if snapshot.errors else 0

    raise ValueError(f"Unknown command: {args.command}")


def _emit(result: CallResult[Any], out: TextIO) -> int:
    if not result.ok:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1
    print(json.dumps(_plain(result.data), indent=2), file=out)
    return 0


def _plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def run() -> None:
    sys.exit(main())
