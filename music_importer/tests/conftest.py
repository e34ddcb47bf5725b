"""Shared test fixtures for music_importer tests."""

from pathlib import Path

import pytest

from music_importer.catalog_db import CatalogDB
from music_importer.interactive import InteractivePrompts
from music_importer.models import AlbumFolderInfo, SongFile, SongTags


@pytest.fixture
def catalog_db():
    """In-memory catalog with the schema created."""
    db = CatalogDB(":memory:")
    db.create_schema()
    yield db
    db.close()


@pytest.fixture
def prompts():
    """Uncolored, non-quiet prompts."""
    return InteractivePrompts(no_color=True)


@pytest.fixture
def sample_tags():
    """Tags for a two-performer track."""
    return SongTags(
        track_number=3,
        performers=["张三", "李四"],
        genre="Mandopop",
        duration=215.9,
        bitrate=320,
    )


@pytest.fixture
def album_folder(tmp_path):
    """An "<artist> - <album>" folder with three audio files and some noise."""
    folder = tmp_path / "張學友 - 吻別"
    folder.mkdir()
    for name in ["01 吻別.mp3", "02 只想一生跟你走.flac", "03 藍雨.m4a",
                 "cover.jpg", "notes.txt", "04 LOUD.MP3"]:
        (folder / name).write_bytes(b"")
    (folder / "bonus").mkdir()
    (folder / "bonus" / "05 hidden.mp3").write_bytes(b"")
    return folder


@pytest.fixture
def album_info(album_folder):
    """Parsed folder info matching album_folder."""
    return AlbumFolderInfo(
        folder_path=str(album_folder), artist="张学友", album="吻別"
    )


@pytest.fixture
def fake_tag_reader(sample_tags):
    """Stand-in for TagReader returning sample_tags for every file."""

    class FakeTagReader:
        def __init__(self):
            self.read_paths = []

        def read_song(self, file_path):
            self.read_paths.append(file_path)
            return SongFile(
                file_path=file_path,
                title=Path(file_path).stem,
                tags=sample_tags,
            )

    return FakeTagReader()
