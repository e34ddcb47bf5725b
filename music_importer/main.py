#!/usr/bin/env python3
"""
Music Catalog Importer - import an "<artist> - <album>" folder into the catalog.

Usage:
    python -m music_importer "/path/to/Artist - Album" [options]
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from mutagen import MutagenError

from music_importer.catalog import (
    get_or_insert_album, get_or_insert_artist, insert_song_and_links
)
from music_importer.catalog_db import CatalogConnectionError, CatalogDB
from music_importer.config import (
    eprint, get_conn_string_instructions, load_config, setup_logging,
    validate_config
)
from music_importer.folder_manager import FolderManager, FolderNameFormatError
from music_importer.interactive import InteractivePrompts
from music_importer.models import AlbumFolderInfo, ImportStats
from music_importer.tag_reader import TagReader
from music_importer.utils import ReleaseDateError, parse_release_date

logger = logging.getLogger("music_importer")


class CatalogImporter:
    """Imports one album folder through an open catalog connection."""

    def __init__(self, db: CatalogDB, prompts: InteractivePrompts,
                 tag_reader: Optional[TagReader] = None,
                 folder_manager: Optional[FolderManager] = None):
        """
        Initialize importer.

        Args:
            db: Open catalog, used for every lookup and insert
            prompts: Console notices handler
            tag_reader: Tag reader (defaults to TagReader())
            folder_manager: Folder helper (defaults to FolderManager())
        """
        self.db = db
        self.prompts = prompts
        self.tag_reader = tag_reader or TagReader()
        self.folder_manager = folder_manager or FolderManager()
        self.stats = ImportStats()

    def import_album(self, info: AlbumFolderInfo,
                     release_date: Optional[date]) -> ImportStats:
        """
        Resolve the album's artist and album rows, then import every song.

        Args:
            info: Parsed folder name
            release_date: Album release date, or None when unknown

        Returns:
            Statistics for this run
        """
        artist_id = get_or_insert_artist(self.db, info.artist)
        album_id = get_or_insert_album(self.db, info.album, artist_id, release_date)
        logger.info(f"Importing {info.folder_path} as album {album_id} "
                    f"(artist {artist_id})")

        for file_path in self.folder_manager.list_audio_files(info.folder_path):
            self.stats.total_files += 1
            self._import_file(str(file_path), album_id)

        return self.stats

    def _import_file(self, file_path: str, album_id: int) -> None:
        """Read one audio file and insert it as a song of album_id."""
        try:
            song = self.tag_reader.read_song(file_path)
        except MutagenError as e:
            self.stats.malformed_files.append(file_path)
            eprint(f"Malformed file (skipping): {Path(file_path).name} - {e}")
            return

        tags = song.tags
        result = insert_song_and_links(
            self.db, song.title, album_id, tags.performers, tags.genre,
            tags.track_number, tags.duration, tags.bitrate
        )
        self.prompts.show_song_result(song.title, album_id, result)

        if result.inserted:
            self.stats.songs_inserted += 1
            self.stats.links_inserted += result.links_inserted
        else:
            self.stats.songs_skipped += 1


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        description="Import an '<artist> - <album>' music folder into the "
                    "artist/album/song catalog.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for folder and release date
  python -m music_importer

  # Import a folder, prompting only for the release date
  python -m music_importer "/music/周杰倫 - 范特西"

  # Fully non-interactive
  python -m music_importer "/music/周杰倫 - 范特西" --release-date 2001-09-14

  # Use a specific catalog database
  python -m music_importer "/music/Artist - Album" --conn-string catalog.db
"""
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Album folder named '<artist> - <album>' (prompted if omitted)"
    )

    parser.add_argument(
        "--release-date", "-d",
        help="Album release date as yyyy-MM-dd (prompted if omitted)"
    )

    # Configuration
    parser.add_argument(
        "--conn-string",
        help="Catalog database (overrides CONN_STRING and appsettings.json)"
    )

    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: ./.env)"
    )

    parser.add_argument(
        "--settings-file",
        default="appsettings.json",
        help="Path to JSON settings file (default: ./appsettings.json)"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    # Verbosity
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress per-song notices"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    parser.add_argument(
        "--log-file",
        help="Also write debug logging to this file"
    )

    return parser


def run(args: argparse.Namespace, prompts: InteractivePrompts) -> ImportStats:
    """
    Run one import: parse the folder name and date, connect, import.

    Exits with status 1 on a malformed folder name, a missing folder, or a
    catalog connection failure.
    """
    folder_manager = FolderManager()
    folder_path = args.path or prompts.ask_folder_path()

    try:
        info = folder_manager.parse_folder_name(folder_path)
    except FolderNameFormatError as e:
        eprint(f"Error: {e}")
        sys.exit(1)

    raw_date = args.release_date
    if raw_date is None:
        raw_date = prompts.ask_release_date()

    release_date = None
    try:
        release_date = parse_release_date(raw_date)
    except ReleaseDateError as e:
        logger.debug(str(e))
        prompts.show_invalid_release_date(raw_date)

    prompts.show_album_info(info, release_date)

    if not Path(folder_path).is_dir():
        eprint(f"Error: Folder not found: {folder_path}")
        sys.exit(1)

    config = load_config(args.env_file, args.settings_file)
    if args.conn_string:
        config["conn_string"] = args.conn_string

    missing = validate_config(config)
    if missing:
        eprint(f"\nMissing required settings: {', '.join(missing)}")
        eprint(get_conn_string_instructions())
        sys.exit(1)

    try:
        db = CatalogDB(config["conn_string"])
    except CatalogConnectionError as e:
        eprint(f"Error: {e}")
        sys.exit(1)

    with db:
        db.create_schema()
        importer = CatalogImporter(db, prompts, folder_manager=folder_manager)
        stats = importer.import_album(info, release_date)

    prompts.show_summary(stats)
    return stats


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    prompts = InteractivePrompts(no_color=args.no_color, quiet=args.quiet)

    try:
        run(args, prompts)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()
