from __future__ import annotations

import logging
from typing import Optional

import gradio as gr

from .errors import UploadError
from .formats import format_label
from .io_utils import read_upload
from .session import (
    ConverterState,
    Notice,
    can_convert,
    convert,
    convert_button_label,
    load_upload,
    prepare_download,
)

logger = logging.getLogger(__name__)


def render_notice(notice: Optional[Notice]) -> str:
    if notice is None:
        return ""
    prefix = "Error" if notice.is_error else "Warning"
    return f"**{prefix}:** {notice.message}"


def input_placeholder(input_format: str) -> str:
    return f"Enter your {format_label(input_format)} data here or upload a file..."


def update_convert_button(input_text, input_format, output_format):
    state = ConverterState(input_text=input_text or "")
    return gr.update(value=convert_button_label(input_format, output_format), interactive=can_convert(state))


def handle_input_format_change(input_format, input_text, output_format):
    return gr.update(placeholder=input_placeholder(input_format)), update_convert_button(
        input_text, input_format, output_format
    )


def mark_converting():
    return gr.update(value="Converting...", interactive=False)


def handle_convert(input_text, output_text, input_format, output_format):
    state = ConverterState(
        input_text=input_text or "",
        output_text=output_text or "",
        input_format=input_format,
        output_format=output_format,
    )
    result = convert(state)
    if result.toast:
        gr.Info(f"Conversion successful! {result.toast}")
    return result.state.output_text, render_notice(result.state.notice)


def handle_file_upload(file_obj, input_text, input_format):
    """Load an uploaded file into the input box.

    Returns (input text, input format, notice markdown). On a read failure
    the input is left as it was.
    """
    if file_obj is None:
        return input_text, input_format, ""

    try:
        upload = read_upload(file_obj)
    except UploadError as exc:
        logger.warning("Upload failed: %s", exc)
        return input_text, input_format, render_notice(Notice(f"Error reading file: {exc}"))

    state = load_upload(ConverterState(input_text=input_text or "", input_format=input_format), upload)
    return state.input_text, state.input_format, ""


def handle_download(output_text, output_format):
    try:
        result = prepare_download(ConverterState(output_text=output_text or "", output_format=output_format))
    except Exception as exc:
        logger.exception("Download failed")
        gr.Warning(f"Error writing download: {str(exc)}")
        return None

    if not result.ok:
        gr.Warning(f"{result.title}. {result.message}")
        return None

    gr.Info(f"{result.title}. {result.message}")
    return result.path
