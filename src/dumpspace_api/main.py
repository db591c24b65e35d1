"""Command line lookups against a game's Dumpspace layout."""

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import NoReturn

from .application import DumpspaceAPI
from .application.dumpspace_api import load_catalog
from .domain.services import GameCatalog
from .errors import DumpspaceError
from .infrastructure.config import Config
from .infrastructure.document_source import (
    DirectoryDocumentSource,
    DocumentSource,
    HttpDocumentSource,
)
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Resolve member offsets, class sizes, enum names and global "
        "offsets from Dumpspace layout dumps",
        epilog="""
Examples:
  # Member offset and class size by game hash
  dumpspace-lookup 6b77eceb --member UWorld.OwningGameInstance --size UWorld

  # Enum value name and global offset by display name
  dumpspace-lookup Fortnite --by-name --enum EFortRarity=4 --offset OFFSET_GWORLD

  # Offline, from a local mirror of the Games/ directory
  dumpspace-lookup 6b77eceb --documents-dir mirror/Games --member AActor.RootComponent

  # List the catalog
  dumpspace-lookup --list-games
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "game",
        nargs="?",
        help="Game hash as shown in the dumpspace URL (or display name with --by-name)",
    )
    parser.add_argument(
        "--by-name",
        action="store_true",
        help="Treat GAME as a display name instead of a hash",
    )
    parser.add_argument(
        "--member",
        action="append",
        default=[],
        metavar="TYPE.MEMBER",
        help="Print the layout of a member (repeatable)",
    )
    parser.add_argument(
        "--size",
        action="append",
        default=[],
        metavar="TYPE",
        help="Print the size of a class or struct (repeatable)",
    )
    parser.add_argument(
        "--enum",
        action="append",
        default=[],
        metavar="ENUM=VALUE",
        help="Print the name of an enum value (repeatable)",
    )
    parser.add_argument(
        "--offset",
        action="append",
        default=[],
        metavar="NAME",
        help="Print a global offset such as OFFSET_GWORLD (repeatable)",
    )
    parser.add_argument(
        "--documents-dir",
        type=Path,
        help="Read documents from a local mirror instead of the web service",
    )
    parser.add_argument(
        "--base-url",
        help="Root URL of the document service",
    )
    parser.add_argument(
        "--list-games",
        action="store_true",
        help="List the games in the catalog and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def create_source(config: Config) -> DocumentSource:
    """Build the document source selected by the configuration."""
    if config.documents_dir is not None:
        return DirectoryDocumentSource(config.documents_dir)
    return HttpDocumentSource(config.base_url, timeout=config.timeout, verify_tls=config.verify_tls)


def list_games(catalog: GameCatalog) -> None:
    for game in sorted(catalog.games, key=lambda g: g.name.lower()):
        uploaded = datetime.fromtimestamp(game.uploaded, tz=timezone.utc).strftime("%Y-%m-%d")
        print(f"{game.hash}  {game.name}  ({game.engine}/{game.location}, uploaded {uploaded})")


def run_queries(api: DumpspaceAPI, args: argparse.Namespace) -> int:
    """Print one line per query and return how many names were not found."""
    missing = 0

    for query in args.member:
        type_name, _, member_name = query.partition(".")
        info = api.member_offset(type_name, member_name)
        if info is None:
            print(f"{type_name}::{member_name}: not found")
            missing += 1
        elif info.is_bitfield:
            print(
                f"{type_name}::{member_name}: offset 0x{info.offset:x}, size {info.size}, "
                f"bit {info.bit_offset}"
            )
        else:
            print(f"{type_name}::{member_name}: offset 0x{info.offset:x}, size {info.size}")

    for type_name in args.size:
        size = api.type_size(type_name)
        if size is None:
            print(f"sizeof({type_name}): not found")
            missing += 1
        else:
            print(f"sizeof({type_name}): 0x{size:x} ({size})")

    for query in args.enum:
        enum_name, _, value_str = query.partition("=")
        try:
            value = int(value_str, 0)
        except ValueError:
            print(f"{query}: invalid enum value")
            missing += 1
            continue
        name = api.enum_value_name(enum_name, value)
        if name is None:
            print(f"{enum_name}({value}): not found")
            missing += 1
        else:
            print(f"{enum_name}({value}): {name}")

    for offset_name in args.offset:
        offset = api.global_offset(offset_name)
        if offset is None:
            print(f"{offset_name}: not found")
            missing += 1
        else:
            print(f"{offset_name}: 0x{offset:x}")

    return missing


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for layout lookups."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            base_url=args.base_url,
            documents_dir=args.documents_dir,
            verbose=args.verbose,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    if not args.list_games and not args.game:
        logger.error("Must provide a game hash or name, or --list-games")
        sys.exit(1)

    source = create_source(config)
    try:
        catalog = load_catalog(source, config.catalog_name)
        if args.list_games:
            list_games(catalog)
            sys.exit(0)

        if args.by_name:
            api = DumpspaceAPI.from_game_name(args.game, source, catalog)
        else:
            api = DumpspaceAPI.from_game_hash(args.game, source, catalog)

        api.download_content()
    except DumpspaceError as e:
        logger.error(str(e))
        sys.exit(1)
    finally:
        if isinstance(source, HttpDocumentSource):
            source.close()

    logger.info(f"Loaded layout: {api.tables!r}")
    missing = run_queries(api, args)
    sys.exit(0 if missing == 0 else 1)


if __name__ == "__main__":
    main()
