"""Client for the KMB open-data transit API.

API documentation: https://data.etabus.gov.hk/

Only the three endpoints needed to build a stop list are wrapped. The stop
dictionary is returned to the caller and passed back in explicitly; the
client keeps no route state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from bus_diagram.parser.model import ItemKind, RouteItem

logger = logging.getLogger(__name__)

KMB_BASE_URL = "https://data.etabus.gov.hk/v1/transport/kmb"
DEFAULT_TIMEOUT = 20.0

# stop id -> (Chinese name, English name)
StopNames = dict[str, tuple[str, str]]


@dataclass(frozen=True)
class RouteVariant:
    """One direction/service of a route, as listed by the route endpoint."""

    route: str
    bound: str
    service_type: str
    orig_tc: str = ""
    dest_tc: str = ""
    orig_en: str = ""
    dest_en: str = ""

    @property
    def direction(self) -> str:
        """Direction segment used by the route-stop endpoint."""
        return "outbound" if self.bound == "O" else "inbound"

    @property
    def is_main_service(self) -> bool:
        return self.service_type == "1"


class KmbClient:
    """Thin synchronous wrapper over the KMB endpoints using requests."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = KMB_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _get_data(self, path: str) -> list[dict[str, Any]]:
        """GET an endpoint and return its ``data`` list."""
        url = f"{self._base_url}/{path}"
        logger.debug("GET %s", url)
        response = self._session.get(url, timeout=self._timeout)
        response.raise_for_status()
        payload = response.json()
        data = payload.get("data") if isinstance(payload, dict) else None
        if not data:
            logger.info("No data returned from %s", url)
            return []
        return data

    def fetch_stop_names(self) -> StopNames:
        """Download the full stop dictionary."""
        names: StopNames = {}
        for stop in self._get_data("stop"):
            stop_id = stop.get("stop")
            if not stop_id:
                continue
            names[stop_id] = (stop.get("name_tc") or "", stop.get("name_en") or "")
        logger.info("Loaded %d stop names", len(names))
        return names

    def find_route_variants(self, route: str) -> list[RouteVariant]:
        """Return every direction/service variant of a route number."""
        route = route.strip().upper()
        if not route:
            raise ValueError("Route number must not be empty")

        variants = []
        for entry in self._get_data("route"):
            if entry.get("route") != route:
                continue
            variants.append(RouteVariant(
                route=route,
                bound=str(entry.get("bound", "")),
                service_type=str(entry.get("service_type", "")),
                orig_tc=entry.get("orig_tc") or "",
                dest_tc=entry.get("dest_tc") or "",
                orig_en=entry.get("orig_en") or "",
                dest_en=entry.get("dest_en") or "",
            ))
        return variants

    def fetch_route_items(
        self,
        route: str,
        direction: str,
        service_type: str,
        stop_names: StopNames,
    ) -> list[RouteItem]:
        """Fetch the ordered stops of one route variant.

        Stops missing from stop_names keep their raw id as the primary name.
        """
        route = route.strip().upper()
        data = self._get_data(f"route-stop/{route}/{direction}/{service_type}")
        ordered = sorted(data, key=lambda entry: int(entry.get("seq", 0)))

        items = []
        for entry in ordered:
            stop_id = str(entry.get("stop", ""))
            name_tc, name_en = stop_names.get(stop_id, ("", ""))
            if not name_tc:
                logger.warning("No name for stop %s on route %s", stop_id, route)
            items.append(RouteItem(
                kind=ItemKind.STOP,
                primary_name=name_tc or stop_id,
                secondary_name=name_en,
                stop_id=stop_id,
            ))
        return items
