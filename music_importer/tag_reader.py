"""Audio tag reader using mutagen for cross-format support."""

from pathlib import Path
from typing import List, Optional

from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4

from music_importer.models import SongFile, SongTags


class TagReader:
    """Reads the catalog-relevant tags from MP3, FLAC, and M4A files."""

    # Suffix match is case-sensitive: "SONG.MP3" is not imported
    SUPPORTED_EXTENSIONS = (".mp3", ".m4a", ".flac")

    # MP4/M4A tag mapping (different from ID3)
    MP4_TAGS = {
        "artist": "\xa9ART",
        "track": "trkn",  # tuple: (track_num, total)
        "genre": "\xa9gen",
    }

    @classmethod
    def is_supported(cls, file_path: str) -> bool:
        """Check if file format is supported."""
        return file_path.endswith(cls.SUPPORTED_EXTENSIONS)

    def read_song(self, file_path: str) -> SongFile:
        """
        Read a song file. The title is the filename without its extension.

        Args:
            file_path: Path to audio file

        Returns:
            SongFile with tags
        """
        return SongFile(
            file_path=file_path,
            title=Path(file_path).stem,
            tags=self.read_tags(file_path),
        )

    def read_tags(self, file_path: str) -> SongTags:
        """
        Read tags from an audio file.

        Args:
            file_path: Path to audio file

        Returns:
            SongTags with the file's current tags

        Raises:
            ValueError: If the extension is not supported
            mutagen.MutagenError: If the file cannot be parsed
        """
        if file_path.endswith(".mp3"):
            return self._read_mp3_tags(file_path)
        elif file_path.endswith(".flac"):
            return self._read_flac_tags(file_path)
        elif file_path.endswith(".m4a"):
            return self._read_m4a_tags(file_path)
        raise ValueError(f"Unsupported format: {Path(file_path).name}")

    def _read_mp3_tags(self, file_path: str) -> SongTags:
        """Read ID3v2 tags from MP3 file."""
        audio = MP3(file_path)
        tags = audio.tags or {}

        track_num, _ = self._parse_track_disc(
            str(tags.get("TRCK", [""])[0]) if tags.get("TRCK") else ""
        )
        performers = list(tags["TPE1"].text) if tags.get("TPE1") else []
        genres = tags["TCON"].genres if tags.get("TCON") else []

        return SongTags(
            track_number=track_num or 0,
            performers=self._clean_list(performers),
            genre=self._first(genres),
            duration=audio.info.length,
            bitrate=self._kbps(audio.info),
        )

    def _read_flac_tags(self, file_path: str) -> SongTags:
        """Read Vorbis comments from FLAC file."""
        audio = FLAC(file_path)

        track_num, _ = self._parse_track_disc(
            audio.get("tracknumber", [""])[0]
        )

        return SongTags(
            track_number=track_num or 0,
            performers=self._clean_list(audio.get("artist", [])),
            genre=self._first(audio.get("genre", [])),
            duration=audio.info.length,
            bitrate=self._kbps(audio.info),
        )

    def _read_m4a_tags(self, file_path: str) -> SongTags:
        """Read MP4 tags from M4A file."""
        audio = MP4(file_path)
        tags = audio.tags or {}

        track_info = tags.get(self.MP4_TAGS["track"], [(None, None)])[0]
        track_num = track_info[0] if track_info and track_info[0] else 0

        return SongTags(
            track_number=track_num,
            performers=self._clean_list(tags.get(self.MP4_TAGS["artist"], [])),
            genre=self._first(tags.get(self.MP4_TAGS["genre"], [])),
            duration=audio.info.length,
            bitrate=self._kbps(audio.info),
        )

    def _clean_list(self, values) -> List[str]:
        """Stringify tag values, keeping order."""
        return [str(v) for v in values]

    def _first(self, values) -> Optional[str]:
        """First non-empty value of a multi-value tag."""
        for value in values:
            if value:
                return str(value)
        return None

    def _kbps(self, info) -> int:
        """Average bitrate in kbps (mutagen reports bits per second)."""
        return int(getattr(info, "bitrate", 0) or 0) // 1000

    def _parse_track_disc(self, value: str) -> tuple:
        """
        Parse track/disc string like '3/12' or '3'.

        Returns:
            (number, total) tuple
        """
        if not value:
            return None, None

        parts = value.split("/")
        try:
            num = int(parts[0]) if parts[0].strip() else None
            total = int(parts[1]) if len(parts) > 1 and parts[1].strip() else None
            return num, total
        except ValueError:
            return None, None
