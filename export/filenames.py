"""
Export filename helpers.

Report names come from user-facing labels ("New York", "Palm Beach, FL")
and are turned into file stems that stay inside the export directory.
"""

import os
import re
from datetime import date
from typing import Optional

from core.exceptions import SecurityError

MAX_FILENAME_LENGTH = 255
FALLBACK_STEM = 'export'

# Applied in order to the basename of the requested name
_STEM_RULES = (
    (re.compile(r'[\x00-\x1f\x7f]'), ''),       # control characters
    (re.compile(r'\s+'), '_'),                 # whitespace
    (re.compile(r'\.{2,}'), ''),               # '..' and longer dot runs
    (re.compile(r'[^a-zA-Z0-9._-]'), '_'),     # anything outside the safe set
    (re.compile(r'_+'), '_'),
)


def secure_filename(filename: str) -> str:
    """
    Sanitize a report name so it cannot escape the export directory.

    Directory parts are dropped, unsafe characters become underscores and
    an empty result falls back to 'export'. Names longer than 255
    characters are cut, keeping any extension.

    Raises:
        SecurityError: If the name is not a string
    """
    if not isinstance(filename, str):
        raise SecurityError(
            f"Export name must be a string, got {type(filename).__name__}",
            security_check='filename_type', input_value=repr(filename)
        )

    stem = os.path.basename(filename.replace('\\', '/'))
    for pattern, replacement in _STEM_RULES:
        stem = pattern.sub(replacement, stem)
    stem = stem.strip('_.') or FALLBACK_STEM

    if len(stem) > MAX_FILENAME_LENGTH:
        name, ext = os.path.splitext(stem)
        stem = name[:MAX_FILENAME_LENGTH - len(ext)] + ext if ext else stem[:MAX_FILENAME_LENGTH]
    return stem


def dated_export_filename(prefix: str, on: Optional[date] = None) -> str:
    """
    Build ``<prefix>_YYYY-MM-DD`` (no extension) for a dated export.

    Args:
        prefix: Report name such as a state name or 'watchlist'
        on: Date to stamp (defaults to today)
    """
    stamp = (on or date.today()).isoformat()
    return secure_filename(f"{prefix}_{stamp}")
