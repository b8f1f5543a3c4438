"""Logistics hub lookup for route endpoints."""

import json
import logging
from typing import Dict, List, Optional, Tuple

import requests
from rtree import index

from .config import DEFAULT_HUBS, DEFAULT_NUM_CANDIDATES
from .exceptions import ValidationError
from .geo_utils import distance_between
from .interfaces import GeoPoint, Hub
from .preprocessing import parse_coordinates

logger = logging.getLogger(__name__)


class HubNetwork:
    """Class to load and query named logistics hubs."""

    def __init__(self):
        """Initialize an empty hub network."""
        self.hubs: List[Hub] = []
        self.hub_idx: Optional[index.Index] = None

    def load_data(self, url: str = None) -> None:
        """Load hubs from a JSON URL, or the built-in table.

        Args:
            url: URL returning a JSON list of {name, lat, lng, type} objects.
                If None, the built-in Indian hub table is used.
        """
        if not url:
            logger.debug("No URL provided, using built-in hub table")
            self._process_records(DEFAULT_HUBS)
            self._build_index()
            return

        logger.info(f"Loading hub data from {url}")

        try:
            response = requests.get(url)
            response.raise_for_status()
            data = json.loads(response.content)
        except (requests.RequestException, json.JSONDecodeError) as e:
            logger.error(f"Failed to load hub data: {str(e)}")
            raise

        self._process_records(data)
        self._build_index()
        logger.info(f"Successfully loaded {len(self.hubs)} hubs")

    def _process_records(self, records: List[Dict]) -> None:
        """Convert raw hub records into Hub objects."""
        if not isinstance(records, list):
            raise ValidationError('hubs', type(records).__name__, "Hub data must be a list of objects")

        hubs = []
        for i, record in enumerate(records):
            try:
                point = GeoPoint(record['lat'], record['lng'], record['name'])
            except (KeyError, TypeError) as e:
                raise ValidationError(f'hubs[{i}]', record, f"Malformed hub record at index {i}") from e
            hubs.append(Hub(point=point, hub_type=record.get('type', '')))

        self.hubs = hubs
        logger.debug(f"Processed {len(self.hubs)} hub records")

    def _build_index(self) -> None:
        """Build the spatial index over hub positions."""
        idx = index.Index()
        for i, hub in enumerate(self.hubs):
            lon, lat = hub.point.as_lonlat()
            idx.insert(i, (lon, lat, lon, lat))
        self.hub_idx = idx

    def get_hub(self, name: str) -> Hub:
        """Find a hub by name, case-insensitively."""
        key = name.strip().lower()
        for hub in self.hubs:
            if hub.name.lower() == key:
                return hub
        raise ValidationError('hub', name, f"Unknown hub {name!r}")

    def find_nearest(self, lat: float, lon: float,
                     num_candidates: int = DEFAULT_NUM_CANDIDATES) -> Optional[Tuple[Hub, float]]:
        """Find the hub closest to a coordinate.

        Candidates come from the planar spatial index and are re-ranked
        by great-circle distance.

        Returns:
            (hub, distance_km), or None when no hubs are loaded
        """
        if self.hub_idx is None or not self.hubs:
            return None

        query = GeoPoint(lat, lon)
        candidate_indices = list(self.hub_idx.nearest((lon, lat, lon, lat), num_candidates))

        best = None
        min_distance = float('inf')
        for i in candidate_indices:
            distance = distance_between(query, self.hubs[i].point)
            if distance < min_distance:
                min_distance = distance
                best = self.hubs[i]

        logger.debug(f"Nearest hub to ({lat}, {lon}) is {best.name} at {min_distance:.1f} km")
        return best, min_distance

    def resolve(self, text: str) -> GeoPoint:
        """Resolve a hub name or coordinate text to a GeoPoint."""
        try:
            return self.get_hub(text).point
        except ValidationError:
            return parse_coordinates(text)
