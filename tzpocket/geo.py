"""Nearest-zone lookup from geographic coordinates."""

from __future__ import annotations

import logging
import math

from .zones import ZoneTable

LOG = logging.getLogger(__name__)

__all__ = ["GeoApproximator"]


class GeoApproximator:
    """Pick the table row closest to a coordinate by Manhattan distance.

    Coordinates are compared as integers scaled by ``scale`` (``10000`` keeps
    the four decimal places stored in the table). The index is built on the
    first lookup. Ties go to the earlier row in table order.
    """

    def __init__(self, table: ZoneTable, *, scale: int = 10000) -> None:
        if scale < 1:
            raise ValueError("scale must be a positive integer")
        self._table = table
        self._scale = scale
        self._index: list[tuple[int, int, int]] | None = None

    @property
    def index(self) -> list[tuple[int, int, int]]:
        if self._index is None:
            self._index = [
                (position, round(record.latitude * self._scale), round(record.longitude * self._scale))
                for position, record in enumerate(self._table)
            ]
            LOG.debug("Built geo index with %d entries", len(self._index))
        return self._index

    def approximate(self, latitude: float, longitude: float) -> str:
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise ValueError("Coordinates must be finite numbers")
        if not -90.0 <= latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {latitude}")
        if not -180.0 <= longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {longitude}")
        lat = round(latitude * self._scale)
        lon = round(longitude * self._scale)
        best_position = -1
        best_distance = math.inf
        for position, row_lat, row_lon in self.index:
            distance = abs(row_lat - lat) + abs(row_lon - lon)
            if distance < best_distance:
                best_distance = distance
                best_position = position
        if best_position < 0:
            raise LookupError("Zone table is empty")
        return self._table[best_position].zone_id
