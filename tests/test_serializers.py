"""Tests for JSON, CSV and XML serialization."""

import json

import pytest

from format_converter.errors import CSVShapeError
from format_converter.options import ConversionOptions
from format_converter.parsers import parse_csv, parse_json, parse_xml
from format_converter.serializers import serialize, to_csv, to_json, to_xml

DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
RAW = ConversionOptions(escape_markup=False)


class TestToJSON:
    def test_two_space_indent(self):
        assert to_json({"a": [1, 2]}) == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_non_ascii_kept(self):
        assert to_json({"city": "Zürich"}) == '{\n  "city": "Zürich"\n}'

    @pytest.mark.parametrize(
        "text",
        [
            '{"z": 1, "a": {"y": [1, 2.5, -3e2], "b": null}, "m": true}',
            '[{"name": "Zoë", "city": "Zürich"}, {"name": "李", "tags": []}]',
            '{"outer": {"inner": {"deep": [false, {"k": "v"}]}}, "empty": {}}',
            '"just a string"',
        ],
    )
    def test_parsed_document_survives_json_output(self, text):
        """Parsing the pretty-printed output gives back the same value in the same key order."""
        value = parse_json(text)
        again = parse_json(to_json(value))
        assert again == value
        assert json.dumps(again) == json.dumps(value)

    def test_round_trip_preserves_structure(self):
        value = {"rows": [{"a": "1"}, {"a": None, "b": [True, 2.5]}], "meta": {}}
        assert json.loads(to_json(value)) == value


class TestToCSV:
    def test_header_and_quoted_cells(self):
        assert to_csv([{"a": "1", "b": "2"}]) == 'a,b\n"1","2"'

    def test_empty_list_is_empty_string(self):
        assert to_csv([]) == ""

    @pytest.mark.parametrize("value", [{"a": "1"}, "text", 5, None])
    def test_non_list_rejected(self, value):
        with pytest.raises(CSVShapeError, match="CSV output requires array data"):
            to_csv(value)

    def test_shape_error_is_type_error(self):
        with pytest.raises(TypeError):
            to_csv({"a": "1"})

    def test_rows_must_be_objects(self):
        with pytest.raises(CSVShapeError):
            to_csv(["a", "b"])

    def test_header_from_first_row_only(self):
        assert to_csv([{"a": "1"}, {"a": "2", "b": "3"}]) == 'a\n"1"\n"2"'

    def test_missing_and_falsy_cells_are_empty(self):
        rows = [{"a": "1", "b": "2"}, {"a": None}, {"a": 0, "b": ""}]
        assert to_csv(rows) == 'a,b\n"1","2"\n"",""\n"",""'

    def test_scalars_use_json_spelling(self):
        assert to_csv([{"n": 3, "ok": True, "x": 1.5}]) == 'n,ok,x\n"3","true","1.5"'

    def test_whole_number_float_cell(self):
        assert to_csv([{"n": 4.0, "big": 1e21}]) == 'n,big\n"4","1e+21"'

    def test_nested_cell_rendered_as_json(self):
        assert to_csv([{"tags": ["x", "y"]}]) == 'tags\n"[""x"", ""y""]"'

    def test_embedded_quotes_doubled(self):
        assert to_csv([{"a": 'say "hi"'}]) == 'a\n"say ""hi"""'

    def test_embedded_quotes_raw_when_escaping_disabled(self):
        assert to_csv([{"a": 'say "hi"'}], RAW) == 'a\n"say "hi""'

    def test_csv_round_trip(self, sample_records):
        assert parse_csv(to_csv(sample_records)) == sample_records


class TestToXML:
    def test_object_wrapped_in_root(self):
        assert to_xml({"a": "1"}) == f"{DECLARATION}\n<root>\n<a>1</a>\n</root>"

    def test_list_rendered_as_items(self):
        expected = f"{DECLARATION}\n<root>\n<item><a>1</a></item>\n<item><a>2</a></item>\n</root>"
        assert to_xml([{"a": "1"}, {"a": "2"}]) == expected

    def test_nested_list_inside_object(self):
        assert to_xml({"a": ["1", "2"]}) == f"{DECLARATION}\n<root>\n<a><item>1</item>\n<item>2</item></a>\n</root>"

    def test_scalars_coerced_to_text(self):
        body = to_xml({"n": 1, "t": True, "z": None})
        assert "<n>1</n>\n<t>true</t>\n<z>null</z>" in body

    def test_whole_number_floats_drop_fraction(self):
        body = to_xml({"n": 1.0, "x": 2.5, "i": 3})
        assert "<n>1</n>\n<x>2.5</x>\n<i>3</i>" in body

    def test_reserved_characters_escaped(self):
        assert "<a>x &lt; y &amp; z</a>" in to_xml({"a": "x < y & z"})

    def test_reserved_characters_raw_when_escaping_disabled(self):
        assert "<a>x < y & z</a>" in to_xml({"a": "x < y & z"}, RAW)

    def test_custom_tags(self):
        options = ConversionOptions(xml_root_tag="data", xml_item_tag="row")
        assert to_xml(["1"], options) == f"{DECLARATION}\n<data>\n<row>1</row>\n</data>"

    def test_records_survive_xml_round_trip(self, sample_records):
        assert parse_xml(to_xml(sample_records)) == {"item": sample_records}


class TestSerializeDispatch:
    def test_dispatch_by_name(self):
        assert serialize([{"a": "1"}], "csv") == 'a\n"1"'
        assert serialize("x", "XML").endswith("<root>\nx\n</root>")
