"""Utility functions for Music Catalog Importer."""

import re
from datetime import date, datetime

import zhconv

RELEASE_DATE_FORMAT = "%Y-%m-%d"
RELEASE_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class ReleaseDateError(ValueError):
    """Raised when a release date is not a valid yyyy-MM-dd date."""


def simplify(text: str) -> str:
    """Convert Traditional Chinese characters to Simplified."""
    return zhconv.convert(text, "zh-hans")


def traditionalize(text: str) -> str:
    """Convert Simplified Chinese characters to Traditional."""
    return zhconv.convert(text, "zh-hant")


def parse_release_date(value: str) -> date:
    """Parse a release date in strict yyyy-MM-dd form.

    strptime alone accepts unpadded fields like "2023-1-5", so the shape is
    checked first.

    Args:
        value: Date string as typed by the user

    Returns:
        Parsed date

    Raises:
        ReleaseDateError: If the string is not exactly yyyy-MM-dd or is not a
            real calendar date
    """
    if value is None or not RELEASE_DATE_PATTERN.fullmatch(value):
        raise ReleaseDateError(f"Release date must be yyyy-MM-dd: {value!r}")
    try:
        return datetime.strptime(value, RELEASE_DATE_FORMAT).date()
    except ValueError as e:
        raise ReleaseDateError(f"Invalid release date {value!r}: {e}") from e


def format_release_date(value) -> str:
    """Format a release date for display, or '(unknown)' when unset."""
    if value is None:
        return "(unknown)"
    return value.strftime(RELEASE_DATE_FORMAT)
