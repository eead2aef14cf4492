"""Input validation utilities."""

import re

MAX_SEARCH_LENGTH = 200
MAX_FILENAME_LENGTH = 255

# Anything that is not ASCII alphanumeric, collapsed to "_" in storage keys
_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9]")


def sanitize_search(search: str | None, max_length: int = MAX_SEARCH_LENGTH) -> str | None:
    """Sanitize search input.

    Args:
        search: Raw search string
        max_length: Maximum allowed length

    Returns:
        Sanitized search string or None
    """
    if search is None:
        return None

    search = search[:max_length]

    # SQLAlchemy parameterizes the query, this only strips statement separators
    search = search.replace(";", "").replace("--", "")

    return search.strip() or None


def sanitize_key_segment(value: str) -> str:
    """Turn a display name into a storage key segment.

    Every character outside ``[a-zA-Z0-9]`` becomes ``_`` and the result is
    lowercased, e.g. ``"Acme Ltd."`` becomes ``"acme_ltd_"``.
    """
    return _UNSAFE_KEY_CHARS.sub("_", value).lower()


def sanitize_filename(filename: str | None, default: str = "document.pdf") -> str:
    """Strip directory components and control characters from an uploaded filename."""
    if not filename:
        return default
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    name = "".join(ch for ch in name if ch.isprintable()).strip()
    if not name or name in {".", ".."}:
        return default
    return name[:MAX_FILENAME_LENGTH]
