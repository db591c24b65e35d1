#!/usr/bin/env python3

"""Layout lookups for one dumped game.

Example::

    with HttpDocumentSource("https://dumpspace.spuckwaffel.com/Games") as source:
        api = DumpspaceAPI.from_game_hash("6b77eceb", source)
        api.download_content()
        api.member_offset("UWorld", "OwningGameInstance")
        api.enum_value_name("EFortRarity", 4)
        api.type_size("AActor")
        api.global_offset("OFFSET_GWORLD")
"""

from ..domain.models.layout import DocumentKind, GameTarget, MemberOffset
from ..domain.repositories import LayoutTables, LayoutTablesBuilder
from ..domain.services import ClassLayoutParser, EnumParser, GameCatalog, OffsetsParser
from ..errors import LayoutNotReadyError
from ..infrastructure.config import DEFAULT_CONFIG
from ..infrastructure.document_source import DocumentSource
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)

# Fetch order; FunctionsInfo is published but not decoded
LAYOUT_DOCUMENTS = (
    DocumentKind.CLASSES_INFO,
    DocumentKind.STRUCTS_INFO,
    DocumentKind.ENUMS_INFO,
    DocumentKind.OFFSETS_INFO,
)


def load_catalog(
    source: DocumentSource, catalog_name: str = str(DEFAULT_CONFIG["CATALOG_NAME"])
) -> GameCatalog:
    """Fetch and parse the game catalog from a document source."""
    return GameCatalog.from_json(source.fetch(catalog_name), catalog_name)


class DumpspaceAPI:
    """Owns the layout tables of one game target.

    Construct it for a target, call download_content() once, then query.
    Queries before a successful download raise LayoutNotReadyError; a failed
    download leaves no tables behind.
    """

    def __init__(self, target: GameTarget, source: DocumentSource):
        """
        Args:
            target: Engine and location of the game
            source: Where documents are fetched from
        """
        self.target = target
        self.source = source
        self.class_parser = ClassLayoutParser()
        self.enum_parser = EnumParser()
        self.offsets_parser = OffsetsParser()
        self._tables: LayoutTables | None = None

    @classmethod
    def from_game_hash(
        cls,
        game_hash: str,
        source: DocumentSource,
        catalog: GameCatalog | None = None,
        catalog_name: str = str(DEFAULT_CONFIG["CATALOG_NAME"]),
    ) -> "DumpspaceAPI":
        """Create an API for the game with this catalog identifier.

        Without a catalog, it is fetched from source as catalog_name.

        Raises:
            CatalogMissError: If the identifier is not listed
        """
        if catalog is None:
            catalog = load_catalog(source, catalog_name)
        return cls(catalog.resolve_by_hash(game_hash), source)

    @classmethod
    def from_game_name(
        cls,
        name: str,
        source: DocumentSource,
        catalog: GameCatalog | None = None,
        catalog_name: str = str(DEFAULT_CONFIG["CATALOG_NAME"]),
    ) -> "DumpspaceAPI":
        """Create an API for the game with this display name.

        Without a catalog, it is fetched from source as catalog_name.

        Raises:
            CatalogMissError: If the name is not listed
        """
        if catalog is None:
            catalog = load_catalog(source, catalog_name)
        return cls(catalog.resolve_by_name(name), source)

    @property
    def engine(self) -> str:
        return self.target.engine

    @property
    def location(self) -> str:
        return self.target.location

    @property
    def is_ready(self) -> bool:
        return self._tables is not None

    @property
    def tables(self) -> LayoutTables:
        """The published tables.

        Raises:
            LayoutNotReadyError: If download_content() has not succeeded
        """
        if self._tables is None:
            raise LayoutNotReadyError(
                f"Layout for {self.engine}/{self.location} has not been downloaded"
            )
        return self._tables

    @log_timing
    def download_content(self) -> LayoutTables:
        """Fetch and parse every layout document, then publish the tables.

        Returns:
            The published LayoutTables

        Raises:
            TransportError: If a document cannot be retrieved
            SchemaError: If a document does not match its schema
        """
        tracker = ProgressTracker(logger)
        builder = LayoutTablesBuilder()

        with tracker.track_operation(f"download {self.engine}/{self.location}"):
            for kind in LAYOUT_DOCUMENTS:
                name = self.target.document_name(kind)
                with tracker.track_document(name):
                    tracker.count_record(self._ingest(kind, name, builder))

        self._tables = builder.build()
        tracker.report_summary()
        return self._tables

    def _ingest(self, kind: DocumentKind, name: str, builder: LayoutTablesBuilder) -> int:
        text = self.source.fetch(name)

        if kind in (DocumentKind.CLASSES_INFO, DocumentKind.STRUCTS_INFO):
            layout = self.class_parser.parse(text, name)
            builder.add_class_layout(layout)
            return len(layout.members) + len(layout.type_sizes)
        if kind is DocumentKind.ENUMS_INFO:
            enums = self.enum_parser.parse(text, name)
            builder.add_enums(enums)
            return len(enums.values)
        if kind is DocumentKind.OFFSETS_INFO:
            offsets = self.offsets_parser.parse(text, name)
            builder.add_offsets(offsets)
            return len(offsets.offsets)

        raise ValueError(f"No parser for {kind}")

    def member_offset(self, type_name: str, member_name: str) -> MemberOffset | None:
        return self.tables.member_offset(type_name, member_name)

    def member_offset_exact(self, type_name: str, member_name: str) -> MemberOffset | None:
        return self.tables.member_offset_exact(type_name, member_name)

    def member_offset_or_fail(self, type_name: str, member_name: str) -> int:
        return self.tables.member_offset_or_fail(type_name, member_name)

    def type_size(self, type_name: str) -> int | None:
        return self.tables.type_size(type_name)

    def enum_value_name(self, enum_name: str, value: int) -> str | None:
        return self.tables.enum_value_name(enum_name, value)

    def global_offset(self, name: str) -> int | None:
        return self.tables.global_offset(name)
