"""
Music Catalog Importer - load an album folder into an artist/album/song catalog.

This package provides tools to:
- Parse "<artist> - <album>" folder names
- Read tags from MP3, FLAC, and M4A files
- Get-or-insert artists, albums, and songs in a SQLite catalog
- Link each song to its performing artists
"""

__version__ = "1.0.0"
