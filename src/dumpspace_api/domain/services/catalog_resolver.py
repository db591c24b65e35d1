#!/usr/bin/env python3

"""Game catalog parsing and target selection."""

from typing import Any

from ...errors import CatalogMissError, SchemaError
from ...infrastructure.logging import get_logger
from ..models.layout import DocumentKind, Game, GameTarget, Uploader
from .parsing.document_loader import decode_json
from .parsing.records import expect_int, expect_list, expect_object

logger = get_logger(__name__)

_GAME_FIELDS = ("hash", "name", "engine", "location")


class GameCatalog:
    """The list of dumped games published as ``GameList.json``."""

    def __init__(self, games: list[Game]):
        self.games = games

    @classmethod
    def from_json(cls, text: str, document: str = f"{DocumentKind.GAME_LIST}.json") -> "GameCatalog":
        """Parse the catalog document.

        Args:
            text: Catalog JSON text
            document: Document name used in error messages

        Raises:
            SchemaError: If the catalog does not have the expected shape
        """
        root = expect_object(decode_json(text, document), document, "document root")
        entries = expect_list(root.get("games"), document, "games")
        games = [cls._parse_game(entry, index, document) for index, entry in enumerate(entries)]

        logger.debug(f"Catalog lists {len(games)} games")
        return cls(games)

    @staticmethod
    def _parse_game(entry: Any, index: int, document: str) -> Game:
        where = f"games[{index}]"
        entry = expect_object(entry, document, where)

        for key in _GAME_FIELDS:
            if not isinstance(entry.get(key), str):
                raise SchemaError(document, f"{where}: '{key}' must be a string")

        uploader = expect_object(entry.get("uploader"), document, f"{where}.uploader")
        return Game(
            hash=entry["hash"],
            name=entry["name"],
            engine=entry["engine"],
            location=entry["location"],
            uploaded=expect_int(entry.get("uploaded"), document, f"{where}.uploaded"),
            uploader=Uploader(
                name=str(uploader.get("name", "")),
                link=str(uploader.get("link", "")),
            ),
        )

    def get_game_by_hash(self, game_hash: str) -> Game | None:
        """Return the game with the given identifier, or None."""
        return next((game for game in self.games if game.hash == game_hash), None)

    def get_game_by_name(self, name: str) -> Game | None:
        """Return the game with the given display name, or None."""
        return next((game for game in self.games if game.name == name), None)

    def resolve_by_hash(self, game_hash: str) -> GameTarget:
        """Resolve a game identifier to its target.

        Raises:
            CatalogMissError: If no game has this identifier
        """
        game = self.get_game_by_hash(game_hash)
        if game is None:
            raise CatalogMissError("hash", game_hash)
        logger.info(f"Resolved {game_hash} to {game.name} ({game.engine}/{game.location})")
        return game.target

    def resolve_by_name(self, name: str) -> GameTarget:
        """Resolve a game display name to its target.

        Raises:
            CatalogMissError: If no game has this name
        """
        game = self.get_game_by_name(name)
        if game is None:
            raise CatalogMissError("name", name)
        logger.info(f"Resolved {name!r} to {game.engine}/{game.location}")
        return game.target

    def __len__(self) -> int:
        return len(self.games)
