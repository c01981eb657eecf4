"""
Content Accessor Module

Reads recipe and documentation files on demand and derives the small bits of
metadata the catalog needs from raw markdown: the title and a search preview.
No markdown parsing happens here; content is returned exactly as stored.
"""

import re
from pathlib import Path

from ..exceptions import NotFoundError, ReadFailureError

# First level-1 heading; tolerate CRLF line endings
TITLE_PATTERN = re.compile(r"^# (.+?)\r?$", re.MULTILINE)

DEFAULT_PREVIEW_LENGTH = 100


def read_content(path: Path) -> str:
    """Read the raw text of an artifact.

    Args:
        path: File to read

    Returns:
        File content decoded as UTF-8; undecodable bytes become U+FFFD

    Raises:
        NotFoundError: The file does not exist
        ReadFailureError: The file exists but could not be read
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        raise NotFoundError(f"File '{path}' not found") from e
    except OSError as e:
        raise ReadFailureError(f"Failed to read '{path}': {e}") from e


def extract_title(content: str, fallback: str) -> str:
    """Return the text of the first ``# `` heading, or ``fallback``."""
    match = TITLE_PATTERN.search(content)
    return match.group(1) if match else fallback


def make_preview(content: str, keyword: str, limit: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Return the first line containing ``keyword``, trimmed and capped at ``limit``.

    Matching is case-insensitive. Returns an empty string when no line
    contains the keyword (e.g. the match was on the file name only).
    """
    needle = keyword.lower()
    for line in content.split("\n"):
        if needle in line.lower():
            return line.strip()[:limit]
    return ""
