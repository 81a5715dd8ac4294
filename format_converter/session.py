"""Conversion orchestration over an explicit per-session state.

Every operation takes a `ConverterState` and returns a new one; nothing is
kept at module level, so one state value is one browser session.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConversionError
from .formats import CSV, JSON, format_label, normalize_format
from .io_utils import UploadedText, download_filename, write_download
from .options import DEFAULT_OPTIONS, ConversionOptions
from .parsers import parse
from .serializers import serialize

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter some data to convert"
GENERIC_FAILURE_MESSAGE = "Conversion failed"


@dataclass(frozen=True)
class Notice:
    message: str
    severity: str = "error"

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


@dataclass(frozen=True)
class ConverterState:
    input_text: str = ""
    output_text: str = ""
    input_format: str = JSON
    output_format: str = CSV
    notice: Optional[Notice] = None
    is_converting: bool = False


@dataclass(frozen=True)
class ConversionResult:
    state: ConverterState
    succeeded: bool
    # Confirmation text for a toast; None unless the conversion succeeded.
    toast: Optional[str] = None


@dataclass(frozen=True)
class DownloadResult:
    path: Optional[str]
    title: str
    message: str

    @property
    def ok(self) -> bool:
        return self.path is not None


def convert_button_label(input_format: str, output_format: str) -> str:
    return f"Convert {format_label(input_format)} to {format_label(output_format)}"


def can_convert(state: ConverterState) -> bool:
    return bool(state.input_text and state.input_text.strip()) and not state.is_converting


def run_conversion(text: str, input_format: str, output_format: str, options: Optional[ConversionOptions] = None) -> str:
    """Parse `text` as `input_format` and serialize it as `output_format`."""
    value = parse(text, input_format)
    return serialize(value, output_format, options or DEFAULT_OPTIONS)


def convert(state: ConverterState, options: Optional[ConversionOptions] = None) -> ConversionResult:
    """Run one conversion and return the resulting state.

    Blank input leaves the output untouched and sets a warning. Any failure
    clears the output and records an error notice; nothing is raised.
    """
    if not state.input_text or not state.input_text.strip():
        logger.info("Conversion skipped: empty input")
        warned = replace(state, notice=Notice(EMPTY_INPUT_MESSAGE, "warning"), is_converting=False)
        return ConversionResult(state=warned, succeeded=False)

    converting = replace(state, notice=None, is_converting=True)
    try:
        output = run_conversion(converting.input_text, converting.input_format, converting.output_format, options)
    except ConversionError as exc:
        logger.warning(
            "Conversion %s -> %s failed: %s", state.input_format, state.output_format, exc.message
        )
        failed = replace(converting, output_text="", notice=Notice(exc.message, exc.severity), is_converting=False)
        return ConversionResult(state=failed, succeeded=False)
    except Exception:
        logger.exception("Unexpected error converting %s -> %s", state.input_format, state.output_format)
        failed = replace(converting, output_text="", notice=Notice(GENERIC_FAILURE_MESSAGE), is_converting=False)
        return ConversionResult(state=failed, succeeded=False)

    logger.info(
        "Converted %s -> %s (%d chars in, %d chars out)",
        state.input_format, state.output_format, len(state.input_text), len(output),
    )
    done = replace(converting, output_text=output, is_converting=False)
    toast = (
        f"Successfully converted {format_label(state.input_format)} "
        f"to {format_label(state.output_format)}"
    )
    return ConversionResult(state=done, succeeded=True, toast=toast)


def load_upload(state: ConverterState, upload: UploadedText) -> ConverterState:
    """Put uploaded text into the input; switch input format on a known extension."""
    input_format = upload.detected_format or state.input_format
    logger.info("Loaded upload %r (%d chars, format %s)", upload.filename, len(upload.text), input_format)
    return replace(state, input_text=upload.text, input_format=input_format)


def prepare_download(state: ConverterState, options: Optional[ConversionOptions] = None) -> DownloadResult:
    if not state.output_text:
        return DownloadResult(path=None, title="No data to download", message="Please convert some data first")

    fmt = normalize_format(state.output_format)
    path = write_download(state.output_text, fmt, options)
    name = download_filename(fmt, options)
    logger.info("Prepared download %s", path)
    return DownloadResult(path=path, title="Download started", message=f"File saved as {name}")
