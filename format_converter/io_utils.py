from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from typing import Optional

from .errors import UploadError
from .formats import detect_format
from .options import DEFAULT_OPTIONS, ConversionOptions

DOWNLOAD_DIR = os.path.join(tempfile.gettempdir(), "format_converter")


@dataclass(frozen=True)
class UploadedText:
    text: str
    filename: str
    detected_format: Optional[str]


def _decode(content) -> str:
    if isinstance(content, bytes):
        try:
            return content.decode('utf-8-sig')
        except UnicodeDecodeError as exc:
            raise UploadError("File is not valid UTF-8 text.") from exc
    return content.lstrip('\ufeff')


def read_upload(file_obj) -> UploadedText:
    """Read an uploaded file, a file-like object or a path into text.

    The format is inferred from the file name's extension when it has one.
    """
    if file_obj is None:
        raise UploadError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        text = _decode(file_obj.read())
        filename = getattr(file_obj, 'name', None) or ''
    else:
        if isinstance(file_obj, (str, os.PathLike)):
            path = file_obj
        else:
            path = file_obj.name
        filename = getattr(file_obj, 'orig_name', None) or str(path)
        try:
            with open(path, 'rb') as f:
                text = _decode(f.read())
        except OSError as exc:
            raise UploadError(f"Could not read file: {exc}") from exc

    filename = os.path.basename(str(filename))
    return UploadedText(text=text, filename=filename, detected_format=detect_format(filename))


def download_filename(fmt: str, options: Optional[ConversionOptions] = None) -> str:
    options = options or DEFAULT_OPTIONS
    return f"{options.download_stem}.{fmt}"


def write_download(text: str, fmt: str, options: Optional[ConversionOptions] = None) -> str:
    """Write output text to `<stem>.<fmt>` under DOWNLOAD_DIR and return the path.

    The file is overwritten on every download; Gradio copies returned files
    into its own cache before serving them.
    """
    os.makedirs(DOWNLOAD_DIR, exist_ok=True)
    path = os.path.join(DOWNLOAD_DIR, download_filename(fmt, options))
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(text)
    return path
