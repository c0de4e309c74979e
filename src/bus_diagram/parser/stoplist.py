"""Parser and writer for plain-text stop lists.

Uses a simple line-by-line format so stop lists can be edited by hand:

    # route: 1A
    # fare: 6.4
    # destination: 中秀茂坪
    尖沙咀碼頭 | Star Ferry
    ~ 彌敦道 | Nathan Road
    九龍塘站 | Kowloon Tong Stn | 2C8A0E2B5E8E7C4B

A leading ``~`` marks a waypoint (a street the route passes along, with no
stop). The optional third field keeps the raw stop identifier.

A backslash makes the next character literal, so names may contain ``|``
(``\\|``) or begin with ``#`` or ``~`` (``\\#``, ``\\~``). The writer adds
these escapes itself.
"""

from __future__ import annotations

import re

from bus_diagram.errors import StopListError
from bus_diagram.parser.model import ItemKind, RouteDiagram, RouteItem

WAYPOINT_PREFIX = "~"
COMMENT_PREFIX = "#"
FIELD_SEPARATOR = "|"
ESCAPE = "\\"

_DIRECTIVE_RE = re.compile(r"^#\s*(route|fare|destination)\s*:\s*(.*)$", re.IGNORECASE)


def parse_stop_list(text: str) -> RouteDiagram:
    """Parse a stop list into a RouteDiagram."""
    diagram = RouteDiagram()

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith(COMMENT_PREFIX):
            m = _DIRECTIVE_RE.match(stripped)
            if m:
                setattr(diagram, m.group(1).lower(), m.group(2).strip())
            continue

        diagram.items.append(_parse_item(stripped, line_number))

    return diagram


def _split_fields(text: str) -> list[str]:
    """Split on unescaped separators and drop the escape characters."""
    fields: list[str] = []
    current: list[str] = []
    chars = iter(text)
    for ch in chars:
        if ch == ESCAPE:
            current.append(next(chars, ESCAPE))
        elif ch == FIELD_SEPARATOR:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    fields.append("".join(current).strip())
    return fields


def _parse_item(stripped: str, line_number: int) -> RouteItem:
    kind = ItemKind.STOP
    if stripped.startswith(WAYPOINT_PREFIX):
        kind = ItemKind.WAYPOINT
        stripped = stripped[len(WAYPOINT_PREFIX):].strip()

    fields = _split_fields(stripped)
    if len(fields) > 3:
        raise StopListError(
            f"expected at most 3 '|'-separated fields, got {len(fields)}",
            line_number,
        )
    fields += [""] * (3 - len(fields))
    primary, secondary, stop_id = fields

    if not primary and not stop_id:
        raise StopListError("item has neither a name nor a stop id", line_number)

    return RouteItem(
        kind=kind,
        primary_name=primary,
        secondary_name=secondary,
        stop_id=stop_id,
    )


def _escape_field(value: str, leading: bool = False) -> str:
    value = value.replace(ESCAPE, ESCAPE * 2).replace(FIELD_SEPARATOR, ESCAPE + FIELD_SEPARATOR)
    # Only the start of a line is special for these
    if leading and value.startswith((COMMENT_PREFIX, WAYPOINT_PREFIX)):
        value = ESCAPE + value
    return value


def format_stop_list(diagram: RouteDiagram) -> str:
    """Write a RouteDiagram back to stop-list text."""
    out_lines: list[str] = []
    for key in ("route", "fare", "destination"):
        value = getattr(diagram, key)
        if value:
            out_lines.append(f"# {key}: {value}")

    if out_lines:
        out_lines.append("")

    for item in diagram.items:
        fields = [item.primary_name, item.secondary_name]
        if item.stop_id:
            fields.append(item.stop_id)
        # Drop trailing empty fields
        while len(fields) > 1 and not fields[-1]:
            fields.pop()
        escaped = [_escape_field(f, leading=(i == 0)) for i, f in enumerate(fields)]
        text = f" {FIELD_SEPARATOR} ".join(escaped)
        if item.kind is ItemKind.WAYPOINT:
            text = f"{WAYPOINT_PREFIX} {text}"
        out_lines.append(text)

    return "\n".join(out_lines) + "\n"
