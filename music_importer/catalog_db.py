"""SQLite connection wrapper for the music catalog."""

import sqlite3
from typing import Optional, Sequence

SCHEMA = {
    "artists": [
        "ArtistID INTEGER PRIMARY KEY AUTOINCREMENT",
        "Name TEXT NOT NULL UNIQUE",
    ],
    "albums": [
        "AlbumID INTEGER PRIMARY KEY AUTOINCREMENT",
        "Title TEXT NOT NULL",
        "ArtistID INTEGER NOT NULL REFERENCES artists (ArtistID)",
        "ReleaseDate TEXT",
        "UNIQUE (Title, ArtistID)",
    ],
    "songs": [
        "SongID INTEGER PRIMARY KEY AUTOINCREMENT",
        "Title TEXT NOT NULL",
        "AlbumID INTEGER NOT NULL REFERENCES albums (AlbumID)",
        "Genre TEXT",
        "TrackNumber INTEGER",
        "Duration INTEGER",
        "Bitrate INTEGER",
        "UNIQUE (Title, AlbumID)",
    ],
    "song_artists": [
        "SongID INTEGER NOT NULL REFERENCES songs (SongID)",
        "ArtistID INTEGER NOT NULL REFERENCES artists (ArtistID)",
    ],
}


class CatalogConnectionError(Exception):
    """Raised when the catalog database cannot be opened."""


class CatalogDB:
    """One open catalog connection, held for the whole import run."""

    def __init__(self, conn_string: Optional[str]):
        if not conn_string:
            raise CatalogConnectionError("No connection string configured")

        try:
            self._db = sqlite3.connect(
                conn_string, uri=conn_string.startswith("file:")
            )
        except sqlite3.Error as e:
            raise CatalogConnectionError(
                f"Cannot open catalog {conn_string!r}: {e}"
            ) from e

        try:
            self._db.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as e:
            self._db.close()
            raise CatalogConnectionError(
                f"Cannot open catalog {conn_string!r}: {e}"
            ) from e
        self._cursor = self._db.cursor()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def create_table(self, table_name, columns):
        self._cursor.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {table_name} (
                {', '.join(columns)}
            )
            """
        )
        self._db.commit()

    def create_schema(self):
        for table_name, columns in SCHEMA.items():
            self.create_table(table_name, columns)

    def fetch_id(self, query: str, params: Sequence) -> Optional[int]:
        """Run a single-column lookup and return the first value, if any."""
        row = self._cursor.execute(query, params).fetchone()
        return row[0] if row is not None else None

    def insert(self, query: str, params: Sequence) -> int:
        """Run an INSERT, commit, and return the generated row id."""
        self._cursor.execute(query, params)
        self._db.commit()
        return self._cursor.lastrowid

    def count(self, table_name):
        return self._cursor.execute(
            f"""
            SELECT COUNT(*) FROM {table_name}
            """
        ).fetchone()[0]

    def close(self):
        self._cursor.close()
        self._db.close()
