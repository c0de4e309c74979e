"""Tests for the stop-list parser."""

from pathlib import Path

import pytest

from bus_diagram.errors import StopListError
from bus_diagram.parser import format_stop_list, parse_stop_list
from bus_diagram.parser.model import ItemKind, RouteDiagram, RouteItem

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def test_parse_directives():
    diagram = parse_stop_list(
        "# route: 1a\n"
        "# fare: 6.4\n"
        "# Destination: 中秀茂坪\n"
        "A\n"
        "B\n"
    )
    assert diagram.route == "1a"
    assert diagram.fare == "6.4"
    assert diagram.destination == "中秀茂坪"
    assert [i.primary_name for i in diagram.items] == ["A", "B"]


def test_comments_and_blank_lines_ignored():
    diagram = parse_stop_list("# just a note\n\n  A  \n\n# another\nB\n")
    assert [i.primary_name for i in diagram.items] == ["A", "B"]
    assert diagram.route == ""


def test_bilingual_stop():
    diagram = parse_stop_list("九龍塘站 | Kowloon Tong Stn\n")
    item = diagram.items[0]
    assert item.kind is ItemKind.STOP
    assert item.primary_name == "九龍塘站"
    assert item.secondary_name == "Kowloon Tong Stn"


def test_waypoint_prefix():
    diagram = parse_stop_list("A\n~ 彌敦道 | Nathan Road\nB\n")
    kinds = [i.kind for i in diagram.items]
    assert kinds == [ItemKind.STOP, ItemKind.WAYPOINT, ItemKind.STOP]
    assert diagram.items[1].primary_name == "彌敦道"
    assert diagram.stop_count == 2
    assert diagram.waypoint_count == 1


def test_stop_id_field():
    diagram = parse_stop_list("| | 18492910339410B1\n")
    item = diagram.items[0]
    assert item.primary_name == ""
    assert item.stop_id == "18492910339410B1"
    assert item.display_name == "18492910339410B1"


def test_too_many_fields():
    with pytest.raises(StopListError) as exc_info:
        parse_stop_list("A\nB | b | id | extra\n")
    assert exc_info.value.line_number == 2


def test_item_without_name_or_id():
    with pytest.raises(StopListError, match="line 1"):
        parse_stop_list("| English only\n")


def test_stop_list_error_is_value_error():
    with pytest.raises(ValueError):
        parse_stop_list("~\n")


def test_format_round_trip():
    diagram = RouteDiagram(
        route="1A",
        fare="6.4",
        destination="中秀茂坪",
        items=[
            RouteItem(ItemKind.STOP, "尖沙咀碼頭", "Star Ferry", "ABC123"),
            RouteItem(ItemKind.WAYPOINT, "彌敦道", "Nathan Road"),
            RouteItem(ItemKind.STOP, "九龍公園"),
            RouteItem(ItemKind.STOP, "", "", "FFFF0001"),
        ],
    )
    text = format_stop_list(diagram)
    assert text.startswith("# route: 1A\n")
    assert "~ 彌敦道 | Nathan Road\n" in text
    assert parse_stop_list(text) == diagram


def test_format_without_header():
    text = format_stop_list(RouteDiagram(items=[RouteItem(ItemKind.STOP, "A")]))
    assert text == "A\n"


def test_example_stop_list():
    diagram = parse_stop_list((EXAMPLES_DIR / "route_1A.txt").read_text(encoding="utf-8"))
    assert diagram.route == "1A"
    assert diagram.items[0].secondary_name == "Star Ferry"
    assert diagram.waypoint_count == 2
    assert diagram.stop_count == 11


def test_format_escapes_special_names():
    diagram = RouteDiagram(items=[
        RouteItem(ItemKind.STOP, "#3 Pier", "Pier 3"),
        RouteItem(ItemKind.STOP, "~Bay"),
        RouteItem(ItemKind.STOP, "A | Jordan | Austin"),
        RouteItem(ItemKind.WAYPOINT, "~Road", "East|West"),
        RouteItem(ItemKind.STOP, "C:\\Depot", "", "ID|1"),
    ])
    text = format_stop_list(diagram)
    assert text.splitlines()[0] == "\\#3 Pier | Pier 3"
    assert parse_stop_list(text) == diagram


def test_escaped_characters_in_hand_written_list():
    diagram = parse_stop_list("\\#1 | No. 1\n~ \\~Lane\nX \\| Y | Z\n")
    assert len(diagram.items) == 3
    assert diagram.items[0].primary_name == "#1"
    assert diagram.items[0].kind is ItemKind.STOP
    assert diagram.items[1].kind is ItemKind.WAYPOINT
    assert diagram.items[1].primary_name == "~Lane"
    assert diagram.items[2].primary_name == "X | Y"
    assert diagram.items[2].secondary_name == "Z"
