"""Tests for diagram layout geometry."""

import pytest

from bus_diagram.layout.config import DiagramConfig
from bus_diagram.layout.constants import FARE_TEXT_X, ROUTE_TEXT_X
from bus_diagram.layout.engine import TextRole, VerticalAnchor, compute_diagram_layout
from bus_diagram.parser.model import ItemKind, RouteItem


class _CharMeasurer:
    def measure(self, text, font):
        return len(text) * 10.0


def _stop(name, secondary="", stop_id=""):
    return RouteItem(ItemKind.STOP, name, secondary, stop_id)


def _waypoint(name, secondary=""):
    return RouteItem(ItemKind.WAYPOINT, name, secondary)


def _labels(layout):
    return [t for t in layout.texts
            if t.role in (TextRole.PRIMARY, TextRole.SECONDARY, TextRole.WAYPOINT)]


def test_two_stops_fixed_spacing():
    config = DiagramConfig(stop_spacing=60.0)
    layout = compute_diagram_layout([_stop("A"), _stop("B")], config, _CharMeasurer())
    start = config.items_top

    assert [(m.x, m.y) for m in layout.markers] == [
        (config.line_x, start),
        (config.line_x, start + 60.0),
    ]
    assert layout.line is not None
    assert (layout.line.x, layout.line.y1, layout.line.y2) == (config.line_x, start, start + 60.0)


def test_empty_items_draw_frame_only():
    layout = compute_diagram_layout([], DiagramConfig(), _CharMeasurer(), route="1A")
    assert layout.line is None
    assert layout.markers == []
    assert _labels(layout) == []
    assert layout.header.height == DiagramConfig().header_height
    assert [t.text for t in layout.texts] == ["1A"]


def test_single_item_draws_frame_only():
    layout = compute_diagram_layout([_stop("A")], DiagramConfig(), _CharMeasurer())
    assert layout.line is None
    assert layout.markers == []
    assert _labels(layout) == []


def test_waypoints_have_no_marker_but_keep_spacing():
    config = DiagramConfig(stop_spacing=50.0)
    items = [_stop("A"), _waypoint("Nathan Rd"), _stop("B")]
    layout = compute_diagram_layout(items, config, _CharMeasurer())

    assert layout.item_ys == [config.items_top + 50.0 * i for i in range(3)]
    assert [m.y for m in layout.markers] == [layout.item_ys[0], layout.item_ys[2]]
    waypoint_labels = [t for t in layout.texts if t.role is TextRole.WAYPOINT]
    assert [t.text for t in waypoint_labels] == ["Nathan Rd"]


def test_stops_are_numbered_skipping_waypoints():
    items = [_stop("A"), _waypoint("W"), _stop("B")]
    layout = compute_diagram_layout(items, DiagramConfig(), _CharMeasurer())
    assert [t.text for t in _labels(layout)] == ["1. A", "W", "2. B"]


def test_numbering_can_be_disabled():
    items = [_stop("A"), _stop("B")]
    layout = compute_diagram_layout(items, DiagramConfig(number_stops=False), _CharMeasurer())
    assert [t.text for t in _labels(layout)] == ["A", "B"]


def test_missing_name_falls_back_to_stop_id():
    items = [_stop("", stop_id="18492910339410B1"), _stop("B")]
    layout = compute_diagram_layout(items, DiagramConfig(number_stops=False), _CharMeasurer())
    assert _labels(layout)[0].text == "18492910339410B1"


def test_two_line_label_is_centered_on_item():
    config = DiagramConfig(max_label_width=100.0, line_height=20.0, number_stops=False)
    items = [_stop("PRIMARY!", "SECND"), _stop("B")]
    layout = compute_diagram_layout(items, config, _CharMeasurer())

    first, second = _labels(layout)[:2]
    y = layout.item_ys[0]
    assert (first.role, second.role) == (TextRole.PRIMARY, TextRole.SECONDARY)
    assert first.y == pytest.approx(y - 10.0)
    assert second.y == pytest.approx(y + 10.0)
    assert (first.y + second.y) / 2 == pytest.approx(y)
    assert first.anchor is VerticalAnchor.MIDDLE


def test_single_line_label_sits_on_item():
    config = DiagramConfig(number_stops=False)
    layout = compute_diagram_layout([_stop("A"), _stop("B")], config, _CharMeasurer())
    assert [t.y for t in _labels(layout)] == layout.item_ys
    assert all(t.x == config.text_x for t in _labels(layout))


def test_compressed_label_carries_scale():
    config = DiagramConfig(max_label_width=100.0, min_horizontal_scale=0.5, number_stops=False)
    items = [_stop("P" * 20, "S" * 4), _stop("B")]
    layout = compute_diagram_layout(items, config, _CharMeasurer())
    first, second = _labels(layout)[:2]
    assert first.horizontal_scale == pytest.approx(0.5)
    assert second.horizontal_scale == pytest.approx(0.5)


def test_header_route_and_fare():
    layout = compute_diagram_layout([], DiagramConfig(), _CharMeasurer(), route="1A", fare="6.4")
    route, fare = layout.texts
    assert route.role is TextRole.ROUTE
    assert route.anchor is VerticalAnchor.BASELINE
    assert route.x == ROUTE_TEXT_X
    assert fare.text == "全程收費: $6.4"
    assert fare.x == FARE_TEXT_X


def test_long_route_number_pushes_fare_right():
    layout = compute_diagram_layout(
        [], DiagramConfig(), _CharMeasurer(), route="N123456789012", fare="10"
    )
    fare = layout.texts[1]
    # 13 characters at 10px from x=20, plus the gap
    assert fare.x == pytest.approx(ROUTE_TEXT_X + 130.0 + 20.0)
    assert fare.x > FARE_TEXT_X


def test_footer_band_and_text():
    config = DiagramConfig(footer_height=40.0)
    layout = compute_diagram_layout(
        [_stop("A"), _stop("B")], config, _CharMeasurer(), footer="往 觀塘"
    )
    assert layout.footer is not None
    assert layout.footer.y == layout.height - 40.0
    footer = [t for t in layout.texts if t.role is TextRole.FOOTER]
    assert [t.text for t in footer] == ["往 觀塘"]
    assert footer[0].y == pytest.approx(layout.height - 20.0)


def test_no_footer_by_default():
    layout = compute_diagram_layout([], DiagramConfig(), _CharMeasurer(), footer="往 觀塘")
    assert layout.footer is None
    assert all(t.role is not TextRole.FOOTER for t in layout.texts)


def test_layout_is_repeatable():
    items = [_stop("A", "Alpha"), _waypoint("W"), _stop("B", "Beta")]
    a = compute_diagram_layout(items, DiagramConfig(), _CharMeasurer(), route="2")
    b = compute_diagram_layout(items, DiagramConfig(), _CharMeasurer(), route="2")
    assert a == b
