"""Interactive user prompts and console notices."""

from datetime import date
from pathlib import Path
from typing import Optional

from music_importer.models import AlbumFolderInfo, ImportStats, SongImportResult
from music_importer.utils import format_release_date


class InteractivePrompts:
    """Handles user interaction and import notices."""

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "red": "\033[91m",
        "cyan": "\033[96m",
        "dim": "\033[2m",
    }

    def __init__(self, no_color: bool = False, quiet: bool = False):
        """
        Initialize interactive prompts.

        Args:
            no_color: Disable colored output
            quiet: Suppress per-song notices
        """
        self.no_color = no_color
        self.quiet = quiet

        if no_color:
            self.COLORS = {k: "" for k in self.COLORS}

    def _c(self, color: str, text: str) -> str:
        """Apply color to text."""
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def print(self, *args, **kwargs):
        """Print unless quiet mode."""
        if not self.quiet:
            print(*args, **kwargs)

    def ask_folder_path(self) -> str:
        """Ask for the album folder to import."""
        while True:
            value = input(self._c("bold", "Music folder path: ")).strip()
            if value:
                return value
            print(self._c("red", "Please enter a folder path."))

    def ask_release_date(self) -> str:
        """Ask for the album release date, returned exactly as typed."""
        return input(self._c("bold", "Album release date (e.g. 2023-01-01): "))

    def show_invalid_release_date(self, value: str) -> None:
        """Report a release date that failed strict parsing."""
        print(self._c("red", f"Invalid release date format: {value!r} "
                             "(expected yyyy-MM-dd)"))
        print(self._c("yellow", "Continuing with an unknown release date."))

    def show_album_info(self, info: AlbumFolderInfo,
                        release_date: Optional[date]) -> None:
        """Display the parsed artist, album, and release date."""
        print(f"Artist: {self._c('cyan', info.artist)}, "
              f"Album: {self._c('cyan', info.album)}, "
              f"Release Date: {format_release_date(release_date)}")

    def show_song_result(self, title: str, album_id: int,
                         result: SongImportResult) -> None:
        """Report whether a song was inserted or already in the catalog."""
        if result.inserted:
            self.print(f"Title: {title} AlbumID: {album_id} "
                       f"{self._c('green', 'done.')}")
        else:
            self.print(f"Title: {title} AlbumID: {album_id} "
                       f"{self._c('dim', 'already exists.')}")

    def show_summary(self, stats: ImportStats) -> None:
        """Display final import summary."""
        print(f"\n{self._c('bold', '=' * 60)}")
        print(f"{self._c('bold', 'Import Summary')}")
        print("=" * 60)

        print(f"Files found:         {stats.total_files}")
        print(f"Songs inserted:      {self._c('green', str(stats.songs_inserted))}")
        print(f"Songs skipped:       {stats.songs_skipped}")
        print(f"Performer links:     {stats.links_inserted}")

        if stats.malformed_files:
            print(f"\n{self._c('yellow', f'Malformed files ({len(stats.malformed_files)}):')}")
            for malformed in stats.malformed_files[:10]:  # Limit displayed files
                print(f"  - {Path(malformed).name}")
            if len(stats.malformed_files) > 10:
                print(f"  ... and {len(stats.malformed_files) - 10} more")
