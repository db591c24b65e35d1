#!/usr/bin/env python3

"""Catalog entries and the target they address."""

from dataclasses import dataclass

from .document_kind import DocumentKind


@dataclass(frozen=True)
class GameTarget:
    """Engine and deployment location of one dumped game."""

    engine: str
    location: str

    def document_name(self, kind: DocumentKind) -> str:
        """Relative name of a layout document, e.g. ``Unreal-Engine-5/Fortnite/ClassesInfo.json.gz``."""
        if not kind.is_layout:
            raise ValueError(f"{kind} is not addressed by a game target")
        return f"{self.engine}/{self.location}/{kind}.json.gz"


@dataclass(frozen=True)
class Uploader:
    """Who uploaded a dump."""

    name: str
    link: str


@dataclass(frozen=True)
class Game:
    """One row of the game catalog."""

    hash: str
    name: str
    engine: str
    location: str
    uploaded: int  # unix timestamp
    uploader: Uploader

    @property
    def target(self) -> GameTarget:
        return GameTarget(engine=self.engine, location=self.location)
