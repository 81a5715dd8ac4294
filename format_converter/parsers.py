from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, List, Optional

from .errors import ParseError, RowLengthError
from .formats import CSV, JSON, XML, normalize_format
from .values import Value


def _reject_constant(name):
    raise ValueError(f"Unsupported JSON constant: {name}")


def parse_json(text: str) -> Value:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ParseError("Invalid JSON format. Please check your syntax.") from exc
    except RecursionError as exc:
        raise ParseError("JSON document is nested too deeply to convert") from exc


def _split_csv_line(line: str) -> List[str]:
    return [cell.strip().replace('"', '') for cell in line.split(',')]


def parse_csv(text: str) -> List[Dict[str, str]]:
    """Parse comma-separated text into a list of header -> cell dicts.

    Cells are split on every comma; quotes are stripped, never interpreted.
    """
    if not text or not text.strip():
        raise ParseError("CSV data is empty")

    lines = text.strip().split('\n')
    headers = _split_csv_line(lines[0])

    rows: List[Dict[str, str]] = []
    for i, line in enumerate(lines[1:], start=2):
        values = _split_csv_line(line)
        if len(values) != len(headers):
            raise RowLengthError(row=i, expected=len(headers), actual=len(values))
        rows.append(dict(zip(headers, values)))
    return rows


def _qualified_name(tag: str, prefixes: Dict[str, str]) -> str:
    """Turn ElementTree's `{uri}local` back into the `prefix:local` the document used.

    Elements in the default namespace keep their bare local name.
    """
    if not tag.startswith('{'):
        return tag
    uri, local = tag[1:].split('}', 1)
    prefix = prefixes.get(uri)
    return f"{prefix}:{local}" if prefix else local


def element_to_value(element: ET.Element, prefixes: Optional[Dict[str, str]] = None) -> Value:
    """Recursively convert an element: leaves to text, containers to dicts.

    Repeated child tags collapse into a list in document order.
    """
    prefixes = prefixes or {}
    children = list(element)
    if not children:
        return ''.join(element.itertext())

    result: Dict[str, Any] = {}
    for child in children:
        tag = _qualified_name(child.tag, prefixes)
        child_data = element_to_value(child, prefixes)

        if tag in result:
            # Converted elements are never lists, so a list here means "repeated".
            if isinstance(result[tag], list):
                result[tag].append(child_data)
            else:
                result[tag] = [result[tag], child_data]
        else:
            result[tag] = child_data
    return result


def parse_xml(text: str) -> Value:
    parser = ET.XMLPullParser(events=("start-ns", "end"))
    try:
        parser.feed(text)
        parser.close()
    except ET.ParseError as exc:
        raise ParseError(f"Invalid XML format: {exc}") from exc

    # uri -> first prefix declared for it; "" is the default namespace.
    prefixes: Dict[str, str] = {}
    root = None
    for event, item in parser.read_events():
        if event == "start-ns":
            prefix, uri = item
            prefixes.setdefault(uri, prefix)
        else:
            root = item

    try:
        return element_to_value(root, prefixes)
    except RecursionError as exc:
        raise ParseError("XML document is nested too deeply to convert") from exc


PARSERS: Dict[str, Callable[[str], Value]] = {
    JSON: parse_json,
    CSV: parse_csv,
    XML: parse_xml,
}


def parse(text: str, fmt: str) -> Value:
    return PARSERS[normalize_format(fmt)](text)
