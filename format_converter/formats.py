from __future__ import annotations

import os
from typing import Optional

from .errors import UnsupportedFormatError

JSON = "json"
CSV = "csv"
XML = "xml"

FORMATS = (JSON, CSV, XML)

# Extensions the upload widget accepts; only FORMATS switch the input format.
UPLOAD_EXTENSIONS = [".json", ".csv", ".xml", ".txt"]


def normalize_format(fmt) -> str:
    """Return the canonical lower-case format name or raise UnsupportedFormatError."""
    name = str(fmt or "").strip().lower()
    if name not in FORMATS:
        raise UnsupportedFormatError(fmt)
    return name


def format_label(fmt: str) -> str:
    return str(fmt).upper()


def detect_format(filename: Optional[str]) -> Optional[str]:
    """Infer a format from a file name's extension.

    Returns None for unknown extensions (including `.txt`) so callers keep
    whatever format was selected before.
    """
    if not filename:
        return None
    ext = os.path.splitext(str(filename))[1].lstrip('.').lower()
    return ext if ext in FORMATS else None
