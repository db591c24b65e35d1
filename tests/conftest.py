"""Pytest configuration and shared fixtures."""

import copy
import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dumpspace_api.domain.models.layout import GameTarget
from dumpspace_api.errors import TransportError

GAME_HASH = "6b77eceb"
TARGET = GameTarget(engine="Unreal-Engine-5", location="Fortnite")

CATALOG = {
    "games": [
        {
            "hash": GAME_HASH,
            "name": "Fortnite",
            "engine": "Unreal-Engine-5",
            "location": "Fortnite",
            "uploaded": 1718035200,
            "uploader": {"name": "Spuckwaffel", "link": "https://github.com/Spuckwaffel"},
        },
        {
            "hash": "1a2b3c4d",
            "name": "Example Game",
            "engine": "Unreal-Engine-4",
            "location": "ExampleGame",
            "uploaded": 1700000000,
            "uploader": {"name": "someone", "link": ""},
        },
    ]
}

CLASSES_V2 = {
    "updated_at": "1718035200",
    "version": 10202,
    "data": [
        {
            "AExample": [
                {"__InheritInfo": ["AActor", "UObject"]},
                {"__MDKClassSize": 0x40},
                {"RootComponent": ["USceneComponent", 0x8, 8, 0]},
                {"Flags1": ["uint8", 0x10, 4, 0, 2]},
                {"Flags2": ["uint8", 0x10, 4, 0, 3]},
            ]
        },
        {
            "UWorld": [
                {"__MDKClassSize": 2536},
                {"OwningGameInstance": ["UGameInstance", 0x228, 8, 0]},
            ]
        },
    ],
}

STRUCTS_V2 = {
    "updated_at": "1718035200",
    "version": 10202,
    "data": [
        {
            "FVector": [
                {"__MDKClassSize": 24},
                {"X": ["double", 0, 8, 0]},
                {"Y": ["double", 8, 8, 0]},
                {"Z": ["double", 16, 8, 0]},
            ]
        },
    ],
}

CLASSES_V1 = {
    "updated_at": "1600000000",
    "version": 10201,
    "data": [
        {
            "AOldActor": [
                {"__MDKClassSize": 0x230},
                {"Health": ["float", 0x220, 4]},
                {"bHidden : 1": ["uint8", 0x58, 1, 4]},
            ]
        },
    ],
}

ENUMS = {
    "updated_at": "1718035200",
    "version": 10202,
    "data": [
        {"EColor": [[{"Red": 0}, {"Green": 1}, {"Blue": 2}], "uint8"]},
        {"EDelta": [[{"EDelta__Back": -1}, {"EDelta__None": 0}, {"EDelta__Forward": 1}], "int8"]},
    ],
}

OFFSETS = {
    "credit": {"dumped_by": "someone", "link": ""},
    "updated_at": "1718035200",
    "version": 10202,
    "data": [["OFFSET_X", 1000], ["OFFSET_GWORLD", 0x14942840]],
}


class InMemoryDocumentSource:
    """Document source backed by a dict of name -> text."""

    def __init__(self, documents: dict[str, str]):
        self.documents = documents
        self.fetched: list[str] = []

    def fetch(self, name: str) -> str:
        self.fetched.append(name)
        if name not in self.documents:
            raise TransportError(name, "request failed with status 404")
        return self.documents[name]


def layout_documents(
    classes: dict[str, Any] | None = None,
    structs: dict[str, Any] | None = None,
    enums: dict[str, Any] | None = None,
    offsets: dict[str, Any] | None = None,
) -> dict[str, str]:
    """Remote document tree for TARGET, with the defaults above."""
    base = f"{TARGET.engine}/{TARGET.location}"
    return {
        "GameList.json": json.dumps(CATALOG),
        f"{base}/ClassesInfo.json.gz": json.dumps(classes if classes is not None else CLASSES_V2),
        f"{base}/StructsInfo.json.gz": json.dumps(structs if structs is not None else STRUCTS_V2),
        f"{base}/EnumsInfo.json.gz": json.dumps(enums if enums is not None else ENUMS),
        f"{base}/OffsetsInfo.json.gz": json.dumps(offsets if offsets is not None else OFFSETS),
    }


@pytest.fixture
def classes_v2() -> dict[str, Any]:
    return copy.deepcopy(CLASSES_V2)


@pytest.fixture
def classes_v1() -> dict[str, Any]:
    return copy.deepcopy(CLASSES_V1)


@pytest.fixture
def structs_v2() -> dict[str, Any]:
    return copy.deepcopy(STRUCTS_V2)


@pytest.fixture
def enums_document() -> dict[str, Any]:
    return copy.deepcopy(ENUMS)


@pytest.fixture
def offsets_document() -> dict[str, Any]:
    return copy.deepcopy(OFFSETS)


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    return copy.deepcopy(CATALOG)


@pytest.fixture
def target() -> GameTarget:
    return TARGET


@pytest.fixture
def game_hash() -> str:
    return GAME_HASH


@pytest.fixture
def make_source() -> Callable[..., InMemoryDocumentSource]:
    """
    Factory for in-memory sources.

    Keyword arguments replace the default classes/structs/enums/offsets
    documents; ``drop`` removes document names from the tree.
    """

    def factory(drop: tuple[str, ...] = (), **documents: dict[str, Any]) -> InMemoryDocumentSource:
        tree = layout_documents(**documents)
        for name in drop:
            tree.pop(name)
        return InMemoryDocumentSource(tree)

    return factory


@pytest.fixture
def document_source(make_source: Callable[..., InMemoryDocumentSource]) -> InMemoryDocumentSource:
    """Source serving the default fixture documents."""
    return make_source()
