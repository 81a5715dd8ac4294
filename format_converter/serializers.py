from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Mapping, Optional
from xml.sax.saxutils import escape

from .errors import CSVShapeError
from .formats import CSV, JSON, XML, normalize_format
from .options import DEFAULT_OPTIONS, ConversionOptions
from .values import Value, scalar_text


def to_json(value: Value, options: Optional[ConversionOptions] = None) -> str:
    options = options or DEFAULT_OPTIONS
    return json.dumps(value, indent=options.json_indent, ensure_ascii=False)


def _csv_cell(value: Any, options: ConversionOptions) -> str:
    text = scalar_text(value) if value else ""
    if options.escape_markup:
        text = text.replace('"', '""')
    return f'"{text}"'


def to_csv(value: Value, options: Optional[ConversionOptions] = None) -> str:
    """Serialize a list of dicts as CSV.

    The header is taken from the first row only; later rows are read
    through that header and any extra keys are dropped.
    """
    options = options or DEFAULT_OPTIONS
    if not isinstance(value, list):
        raise CSVShapeError("CSV output requires array data")
    if not value:
        return ""
    if not all(isinstance(row, Mapping) for row in value):
        raise CSVShapeError("CSV output requires an array of objects")

    headers = list(value[0].keys())
    lines: List[str] = [",".join(headers)]
    for row in value:
        lines.append(",".join(_csv_cell(row.get(h), options) for h in headers))
    return "\n".join(lines)


def _xml_body(value: Any, options: ConversionOptions) -> str:
    if isinstance(value, list):
        tag = options.xml_item_tag
        return "\n".join(f"<{tag}>{_xml_body(item, options)}</{tag}>" for item in value)

    if isinstance(value, Mapping):
        return "\n".join(f"<{key}>{_xml_body(child, options)}</{key}>" for key, child in value.items())

    text = scalar_text(value)
    return escape(text) if options.escape_markup else text


def to_xml(value: Value, options: Optional[ConversionOptions] = None) -> str:
    options = options or DEFAULT_OPTIONS
    root = options.xml_root_tag
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<{root}>\n{_xml_body(value, options)}\n</{root}>'


SERIALIZERS: Dict[str, Callable[..., str]] = {
    JSON: to_json,
    CSV: to_csv,
    XML: to_xml,
}


def serialize(value: Value, fmt: str, options: Optional[ConversionOptions] = None) -> str:
    return SERIALIZERS[normalize_format(fmt)](value, options)
