"""Tests for SVG serialization."""

import math
import re
import xml.etree.ElementTree as ET

import pytest

from radialscore.config import RenderConfig
from radialscore.models import Note
from radialscore.renderer.svg import render_svg, write_svg

SVG = "{http://www.w3.org/2000/svg}"


def _piano_notes():
    return [
        Note(track=1, track_name="piano", start_tick=0, length=100, pitch=60),
        Note(track=1, track_name="piano", start_tick=100, length=200, pitch=72),
    ]


def test_document_structure():
    root = ET.fromstring(render_svg(_piano_notes()))
    assert root.tag == f"{SVG}svg"
    assert root.get("viewBox") == "-105 -105 210 210"

    circles = root.findall(f"{SVG}g/{SVG}circle")
    assert len(circles) == 2
    for circle in circles:
        assert set(circle.keys()) == {"cx", "cy", "r", "fill", "style"}
        assert circle.get("style") == "mix-blend-mode: multiply;"


def test_piano_scenario_radii():
    root = ET.fromstring(render_svg(_piano_notes()))
    low, high = root.findall(f"{SVG}g/{SVG}circle")
    assert math.hypot(float(low.get("cx")), float(low.get("cy"))) == 25
    assert math.hypot(float(high.get("cx")), float(high.get("cy"))) == pytest.approx(100, abs=0.1)


def test_first_circle_line():
    config = RenderConfig(low_color="#000000", high_color="#ffffff")
    text = render_svg(_piano_notes(), config)
    assert '<circle cx="0.0" cy="-25.0" r="2.83" fill="#000000" style="mix-blend-mode: multiply;" />' in text


def test_empty_input_is_valid_empty_document():
    text = render_svg([])
    root = ET.fromstring(text)
    assert root.findall(f".//{SVG}circle") == []
    assert root.find(f"{SVG}g") is not None


def test_degenerate_input_has_no_nan():
    notes = [Note(track=0, track_name="", start_tick=0, length=0, pitch=60)] * 3
    text = render_svg(notes)
    assert not re.search(r"nan|inf", text, re.IGNORECASE)


def test_rendering_twice_is_byte_identical():
    notes = [
        Note(track=i % 3, track_name="", start_tick=i * 11, length=1 + i % 7, pitch=30 + i % 50)
        for i in range(300)
    ]
    assert render_svg(notes) == render_svg(list(notes))


def test_custom_view_box():
    config = RenderConfig(view_half_extent=120, plot_radius=110)
    assert 'viewBox="-120 -120 240 240"' in render_svg([], config)


def test_write_svg_utf8(tmp_path):
    out = write_svg(_piano_notes(), tmp_path / "plot.svg")
    assert out.read_bytes().decode("utf-8") == render_svg(_piano_notes())
