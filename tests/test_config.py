"""Tests for diagram configuration."""

import pytest

from bus_diagram.layout.config import DiagramConfig, SpacingMode
from bus_diagram.parser.model import FontSpec


def test_defaults_are_valid():
    config = DiagramConfig()
    assert config.canvas_width == 500
    assert config.spacing_mode is SpacingMode.FIXED
    assert config.max_label_width < config.canvas_width
    assert config.items_top == config.header_height + config.first_item_offset


@pytest.mark.parametrize("name", ["canvas_width", "header_height", "stop_spacing",
                                  "circle_radius", "line_height", "max_label_width"])
def test_non_positive_geometry_rejected(name):
    with pytest.raises(ValueError, match=name):
        DiagramConfig(**{name: 0})


def test_footer_and_frame_may_be_zero():
    config = DiagramConfig(footer_height=0, frame_width=0)
    assert config.footer_height == 0


def test_negative_footer_rejected():
    with pytest.raises(ValueError, match="footer_height"):
        DiagramConfig(footer_height=-1)


def test_label_width_must_be_below_canvas_width():
    with pytest.raises(ValueError, match="max_label_width"):
        DiagramConfig(canvas_width=300, max_label_width=300)


@pytest.mark.parametrize("scale", [0.0, -0.5, 1.5])
def test_min_scale_range(scale):
    with pytest.raises(ValueError, match="min_horizontal_scale"):
        DiagramConfig(min_horizontal_scale=scale)


def test_font_size_must_be_positive():
    with pytest.raises(ValueError, match="font size"):
        DiagramConfig(font_primary=FontSpec("sans-serif", 0))


def test_with_overrides_ignores_none():
    config = DiagramConfig().with_overrides(stop_spacing=40.0, canvas_height=None)
    assert config.stop_spacing == 40.0
    assert config.canvas_height is None


def test_with_overrides_validates():
    with pytest.raises(ValueError):
        DiagramConfig().with_overrides(canvas_width=200)


def test_with_overrides_unknown_option():
    with pytest.raises(ValueError, match="Unknown config option"):
        DiagramConfig().with_overrides(colour="#fff")


def test_font_spec_families():
    spec = FontSpec("'Noto Sans TC', \"DejaVu Sans\" , sans-serif", 12)
    assert spec.families() == ["Noto Sans TC", "DejaVu Sans", "sans-serif"]
