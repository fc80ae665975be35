"""Tests for the station plot renderer."""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from conftest import NS, find_id, ids_in, parse_svg
from data.decoder import DecodeError
from models.plot_data import PlotData
from visualization.station_plot import raw_metar_to_svg, render


def text_fields(root) -> dict:
    """Map each text field's first css class to its displayed text."""
    group = find_id(root, "text")
    return {
        t.get("class").split()[0]: (t.text or "")
        for t in group.findall("svg:text", NS)
    }


class TestDocumentFrame:
    def test_root_attributes(self, kxyz_plot):
        root = parse_svg(render(kxyz_plot, "12em", "50%"))
        assert root.tag == "{http://www.w3.org/2000/svg}svg"
        assert root.get("width") == "12em"
        assert root.get("height") == "50%"
        assert root.get("viewBox") == "0 0 500 500"

    def test_document_order(self, gusty_plot):
        root = parse_svg(render(gusty_plot, "100", "100"))
        children = [c.get("id") or c.tag.split("}")[1] for c in root]
        assert children == ["style", "gustBarb", "windBarb", "wx", "text"]

    def test_text_fields_preserve_space(self, kxyz_plot):
        document = render(kxyz_plot, "100", "100")
        assert document.count('xml:space="preserve"') == 5

    def test_stylesheet_font_size(self, kxyz_plot):
        root = parse_svg(render(kxyz_plot, "100", "100"))
        style = root.find("svg:style", NS)
        assert "font-size: 47.5px" in style.text

    def test_idempotent(self, gusty_plot):
        assert render(gusty_plot, "1in", "1in") == render(gusty_plot, "1in", "1in")


class TestEndToEndScenario:
    def test_text_values(self, kxyz_plot):
        root = parse_svg(render(kxyz_plot, "100px", "100px"))
        assert text_fields(root) == {
            "vis": "10",
            "tmp": "22",
            "dew": "15",
            "sta": "KXYZ",
            "alt": "",
        }

    def test_text_positions(self, kxyz_plot):
        root = parse_svg(render(kxyz_plot, "100px", "100px"))
        positions = {
            t.get("class").split()[0]: (t.get("x"), t.get("y"))
            for t in find_id(root, "text").findall("svg:text", NS)
        }
        assert positions == {
            "vis": ("80", "260"),
            "tmp": ("160", "220"),
            "dew": ("160", "315"),
            "sta": ("270", "315"),
            "alt": ("270", "220"),
        }

    def test_wind_barb(self, kxyz_plot):
        root = parse_svg(render(kxyz_plot, "100px", "100px"))
        wind = find_id(root, "windBarb")
        assert wind.get("transform") == "rotate(270, 250, 250)"
        assert ids_in(wind) == ["windBarb", "ws-barb-1-long"]
        assert find_id(root, "gustBarb") is None
        assert find_id(root, "calm") is None


class TestAbsentFields:
    def test_all_absent_renders_empty_plot(self):
        document = render(PlotData(), "100", "100")
        root = parse_svg(document)
        assert set(text_fields(root).values()) == {""}
        assert find_id(root, "calm-marker") is not None
        assert find_id(root, "windBarb") is None
        for placeholder in ("None", "nan", "NaN", "undefined"):
            assert placeholder not in document

    def test_zero_temperature_is_shown(self):
        root = parse_svg(render(PlotData(temperature=0, dew_point=-1), "1", "1"))
        fields = text_fields(root)
        assert fields["tmp"] == "0"
        assert fields["dew"] == "-1"

    def test_altimeter_field_stays_blank(self):
        root = parse_svg(render(PlotData(pressure=132), "1", "1"))
        assert text_fields(root)["alt"] == ""


class TestGust:
    def test_gust_drawn_under_same_rotation(self, gusty_plot):
        root = parse_svg(render(gusty_plot, "1", "1"))
        gust = find_id(root, "gustBarb")
        wind = find_id(root, "windBarb")
        assert gust.get("transform") == wind.get("transform") == "rotate(90, 250, 250)"
        assert ids_in(gust) == [
            "gustBarb", "gs-barb-1-long", "gs-barb-2-long", "gs-barb-3-short",
        ]
        assert ids_in(wind) == ["windBarb", "ws-barb-1-long", "ws-barb-2-short"]

    def test_gust_has_no_staff(self, gusty_plot):
        root = parse_svg(render(gusty_plot, "1", "1"))
        gust = find_id(root, "gustBarb")
        assert all(child.get("id") for child in gust)

    def test_calm_suppresses_gust(self):
        root = parse_svg(render(PlotData(wind_speed=0, gust_speed=15), "1", "1"))
        assert find_id(root, "gustBarb") is None
        assert find_id(root, "calm") is not None


class TestWeatherGlyphs:
    def test_glyph_group_present(self, gusty_plot):
        root = parse_svg(render(gusty_plot, "1", "1"))
        wx = find_id(root, "wx")
        assert [t.get("id") for t in wx] == ["wx-1-SN"]

    def test_no_codes_gives_empty_group(self, kxyz_plot):
        root = parse_svg(render(kxyz_plot, "1", "1"))
        assert len(find_id(root, "wx")) == 0


class TestRawMetarToSvg:
    def test_renders_decoded_report(self):
        document = raw_metar_to_svg(
            "METAR KXYZ 191853Z 27012G25KT 10SM -RA BR FEW040 22/15 Q1013",
            "200px",
            "200px",
        )
        root = parse_svg(document)
        assert text_fields(root)["sta"] == "KXYZ"
        assert find_id(root, "gustBarb") is not None
        assert [t.get("id") for t in find_id(root, "wx")] == ["wx-1-RA", "wx-2-BR"]

    def test_decode_error_produces_no_document(self):
        with pytest.raises(DecodeError):
            raw_metar_to_svg("THIS IS NOT A METAR", "1", "1")
