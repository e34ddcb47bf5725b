"""Get-or-insert operations for artists, albums, and songs.

Every function takes the open CatalogDB as its first argument. Each lookup
and insert is a separate statement; nothing here guards against a second
importer writing to the same catalog at the same time.
"""

import logging
from datetime import date
from typing import List, Optional

from music_importer.catalog_db import CatalogDB
from music_importer.models import SongImportResult, SongImportStatus
from music_importer.utils import simplify

logger = logging.getLogger("music_importer")


def get_or_insert_artist(db: CatalogDB, artist_name: str) -> int:
    """Return the id of the artist with this exact name, inserting it if absent."""
    artist_id = db.fetch_id(
        "SELECT ArtistID FROM artists WHERE Name = ?", (artist_name,)
    )
    if artist_id is not None:
        return artist_id

    artist_id = db.insert("INSERT INTO artists (Name) VALUES (?)", (artist_name,))
    logger.debug(f"Inserted artist {artist_name!r} as {artist_id}")
    return artist_id


def get_or_insert_album(db: CatalogDB, album_title: str, artist_id: int,
                        release_date: Optional[date]) -> int:
    """
    Return the id of the album with this title by this artist, inserting it if absent.

    Args:
        db: Open catalog
        album_title: Album title as written in the folder name
        artist_id: Owning artist
        release_date: Release date, or None when unknown (stored as NULL)

    Returns:
        Album id
    """
    album_id = db.fetch_id(
        "SELECT AlbumID FROM albums WHERE Title = ? AND ArtistID = ?",
        (album_title, artist_id),
    )
    if album_id is not None:
        return album_id

    album_id = db.insert(
        "INSERT INTO albums (Title, ArtistID, ReleaseDate) VALUES (?, ?, ?)",
        (album_title, artist_id,
         release_date.isoformat() if release_date is not None else None),
    )
    logger.debug(f"Inserted album {album_title!r} (artist {artist_id}) as {album_id}")
    return album_id


def insert_song_and_links(db: CatalogDB, song_title: str, album_id: int,
                          performers: List[str], genre: Optional[str],
                          track_number: int, duration: float,
                          bitrate: int) -> SongImportResult:
    """
    Insert a song and link it to its performers, unless it already exists.

    An existing (title, album) song is left untouched: no update and no new
    performer links. Duration is truncated to whole seconds.

    Args:
        db: Open catalog
        song_title: Song title (filename without extension)
        album_id: Owning album
        performers: Performer names as read from tags
        genre: Primary genre, or None
        track_number: Track number
        duration: Duration in seconds
        bitrate: Average bitrate in kbps

    Returns:
        SongImportResult with status, song id, and number of links inserted
    """
    song_id = db.fetch_id(
        "SELECT SongID FROM songs WHERE Title = ? AND AlbumID = ?",
        (song_title, album_id),
    )
    if song_id is not None:
        return SongImportResult(SongImportStatus.ALREADY_EXISTS, song_id)

    song_id = db.insert(
        "INSERT INTO songs (Title, AlbumID, Genre, TrackNumber, Duration, Bitrate) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        (song_title, album_id, genre, track_number, int(duration), bitrate),
    )

    links = 0
    for performer in performers:
        artist_id = get_or_insert_artist(db, simplify(performer))
        db.insert(
            "INSERT INTO song_artists (SongID, ArtistID) VALUES (?, ?)",
            (song_id, artist_id),
        )
        links += 1

    return SongImportResult(SongImportStatus.INSERTED, song_id, links)
