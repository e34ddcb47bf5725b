"""Folder management: album folder name parsing and audio file discovery."""

from pathlib import Path
from typing import List

from music_importer.models import AlbumFolderInfo
from music_importer.tag_reader import TagReader
from music_importer.utils import simplify


class FolderNameFormatError(ValueError):
    """Raised when a folder name is not "<artist> - <album>"."""


class FolderManager:
    """Parses album folder names and lists the audio files inside them."""

    NAME_SEPARATOR = "-"

    def parse_folder_name(self, folder_path: str) -> AlbumFolderInfo:
        """
        Parse "<artist> - <album>" from the last segment of a folder path.

        The artist is normalized to Simplified Chinese; the album title is
        kept as written.

        Args:
            folder_path: Path to album folder

        Returns:
            AlbumFolderInfo with artist and album

        Raises:
            FolderNameFormatError: If the name does not split into exactly
                two parts on '-'
        """
        folder_name = Path(folder_path).name
        parts = folder_name.split(self.NAME_SEPARATOR)
        if len(parts) != 2:
            raise FolderNameFormatError(
                f"Folder name must be '<artist> - <album>': {folder_name!r}"
            )

        return AlbumFolderInfo(
            folder_path=folder_path,
            artist=simplify(parts[0].strip()),
            album=parts[1].strip(),
        )

    def list_audio_files(self, folder_path: str) -> List[Path]:
        """
        List supported audio files directly inside a folder.

        Subfolders are not searched. Files are sorted by name.

        Args:
            folder_path: Path to album folder

        Returns:
            Sorted list of audio file paths

        Raises:
            NotADirectoryError: If folder_path is not an existing directory
        """
        folder = Path(folder_path)
        if not folder.is_dir():
            raise NotADirectoryError(f"Not a folder: {folder_path}")

        return sorted(
            (p for p in folder.iterdir()
             if p.is_file() and TagReader.is_supported(str(p))),
            key=lambda p: p.name,
        )
