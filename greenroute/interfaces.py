"""Type definitions and interfaces for route sustainability estimation."""

import math
from typing import Any, Dict, Tuple
from dataclasses import dataclass, field

from shapely.geometry import LineString, Point, mapping


@dataclass(frozen=True)
class GeoPoint:
    """A labelled geographic coordinate in decimal degrees."""
    latitude: float
    longitude: float
    label: str = ""

    def __post_init__(self):
        from .preprocessing import validate_coordinates
        validate_coordinates(self.latitude, self.longitude)

    def as_lonlat(self) -> Tuple[float, float]:
        """Return the point in GeoJSON (lon, lat) order."""
        return (self.longitude, self.latitude)

    def __str__(self) -> str:
        name = self.label or "point"
        return f"{name} ({self.latitude:.4f}, {self.longitude:.4f})"


@dataclass(frozen=True)
class Emissions:
    """Emissions attributed to a route."""
    carbon_kg: float
    energy_kwh: float
    water_liters: float

    def get(self, metric: str) -> float:
        """Look up a metric by its short name (carbon, energy, water)."""
        return {
            'carbon': self.carbon_kg,
            'energy': self.energy_kwh,
            'water': self.water_liters,
        }[metric]


@dataclass(frozen=True)
class RouteMetrics:
    """Metrics computed for one ordered path and transport mode."""
    path: Tuple[GeoPoint, ...]
    mode: str
    distance_km: float
    transit_time_hours: float
    emissions: Emissions
    fuel_liters: float
    cost: float
    risk_score: float

    @property
    def transit_days(self) -> int:
        """Whole days in transit, rounded up."""
        return math.ceil(self.transit_time_hours / 24)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': [
                {'label': p.label, 'latitude': p.latitude, 'longitude': p.longitude}
                for p in self.path
            ],
            'mode': self.mode,
            'distance_km': self.distance_km,
            'transit_time_hours': self.transit_time_hours,
            'transit_days': self.transit_days,
            'emissions': {
                'carbon_kg': self.emissions.carbon_kg,
                'energy_kwh': self.emissions.energy_kwh,
                'water_liters': self.emissions.water_liters,
            },
            'fuel_liters': self.fuel_liters,
            'cost': self.cost,
            'risk_score': self.risk_score,
        }

    def to_geojson(self) -> Dict[str, Any]:
        """Return the route as a GeoJSON Feature with metrics as properties."""
        coords = [p.as_lonlat() for p in self.path]
        if len(coords) >= 2:
            geometry = mapping(LineString(coords))
        elif coords:
            geometry = mapping(Point(coords[0]))
        else:
            geometry = None

        properties = self.to_dict()
        del properties['path']
        properties['labels'] = [p.label for p in self.path]
        return {
            'type': 'Feature',
            'geometry': geometry,
            'properties': properties,
        }


@dataclass(frozen=True)
class RouteComparison:
    """The as-entered route alongside its reordered counterpart."""
    original: RouteMetrics
    optimized: RouteMetrics

    @property
    def is_reordered(self) -> bool:
        return self.original.path != self.optimized.path

    def to_dict(self) -> Dict[str, Any]:
        return {
            'original': self.original.to_dict(),
            'optimized': self.optimized.to_dict(),
        }


@dataclass(frozen=True)
class SustainabilityScore:
    """Percent reductions of the optimized route relative to the original."""
    carbon: float
    energy: float
    water: float
    overall: float
    ratings: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'carbon': self.carbon,
            'energy': self.energy,
            'water': self.water,
            'overall': self.overall,
            'ratings': dict(self.ratings),
        }


@dataclass(frozen=True)
class Hub:
    """A named logistics hub."""
    point: GeoPoint
    hub_type: str = ""

    @property
    def name(self) -> str:
        return self.point.label


@dataclass
class Package:
    """A package line in a container load plan (metres)."""
    length: float
    width: float
    height: float
    quantity: int = 1


@dataclass
class Container:
    """Container inner dimensions in metres."""
    length: float = 12.0
    width: float = 2.4
    height: float = 2.6


@dataclass
class User:
    """A registered dashboard user. Only the password hash is stored."""
    email: str
    password_hash: str
    company_name: str = ""

    def public_view(self) -> Dict[str, str]:
        return {'email': self.email, 'company_name': self.company_name}
