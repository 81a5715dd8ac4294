from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionOptions:
    """Knobs for serialization and download naming."""

    json_indent: int = 2
    xml_root_tag: str = "root"
    xml_item_tag: str = "item"
    download_stem: str = "converted"
    # False reproduces raw output with no quote/markup escaping.
    escape_markup: bool = True


DEFAULT_OPTIONS = ConversionOptions()
