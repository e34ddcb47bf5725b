"""Data models for Music Catalog Importer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class SongImportStatus(Enum):
    """Outcome of importing a single song."""
    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"


@dataclass
class AlbumFolderInfo:
    """Artist and album parsed from an "<artist> - <album>" folder name."""
    folder_path: str
    artist: str
    album: str


@dataclass
class SongTags:
    """Tag fields the catalog consumes from an audio file."""
    track_number: int = 0
    performers: List[str] = field(default_factory=list)
    genre: Optional[str] = None
    duration: float = 0.0  # seconds
    bitrate: int = 0  # kbps


@dataclass
class SongFile:
    """An audio file in the album folder, titled after its filename."""
    file_path: str
    title: str
    tags: SongTags = field(default_factory=SongTags)


@dataclass
class SongImportResult:
    """Result of inserting a song and linking its performers."""
    status: SongImportStatus
    song_id: int
    links_inserted: int = 0

    @property
    def inserted(self) -> bool:
        return self.status == SongImportStatus.INSERTED


@dataclass
class ImportStats:
    """Statistics for an import run."""
    total_files: int = 0
    songs_inserted: int = 0
    songs_skipped: int = 0
    links_inserted: int = 0
    malformed_files: List[str] = field(default_factory=list)
