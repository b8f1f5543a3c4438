"""Distance, emissions and cost estimation for routes."""

import math
import logging
from typing import Optional, Sequence, Union

from . import config
from .geo_utils import route_distance
from .interfaces import Emissions, GeoPoint, RouteMetrics
from .transport_modes import ModeProfile, TransportMode, get_mode_profile

logger = logging.getLogger(__name__)

WEATHER_RISK = {'severe': 3, 'moderate': 1, 'clear': 0}
TERRAIN_RISK = {'mountainous': 2, 'hilly': 1, 'flat': 0}


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def distance_risk_score(distance_km: float) -> int:
    """Risk on a 0-10 scale growing 1.5 points per 1000 km."""
    return min(_round_half_up(distance_km / 1000 * config.RISK_PER_1000_KM), config.MAX_RISK_SCORE)


def estimate(points: Sequence[GeoPoint],
             mode: Union[str, ModeProfile] = TransportMode.TRUCK) -> RouteMetrics:
    """Estimate transit, emissions and cost for travelling the points in order.

    Args:
        points: Ordered path (start, waypoints..., end)
        mode: Transport mode name or profile

    Returns:
        RouteMetrics computed fresh from the path
    """
    profile = get_mode_profile(mode)
    distance = route_distance(points)

    carbon = distance * profile.co2_kg_per_km
    fuel = distance * profile.fuel_l_per_km
    cost = distance * profile.base_cost_per_km + fuel * profile.fuel_price_per_l

    metrics = RouteMetrics(
        path=tuple(points),
        mode=profile.name,
        distance_km=distance,
        transit_time_hours=distance / profile.average_speed_kmh,
        emissions=Emissions(
            carbon_kg=carbon,
            energy_kwh=carbon * config.ENERGY_KWH_PER_KG_CO2,
            water_liters=carbon * config.WATER_L_PER_KG_CO2,
        ),
        fuel_liters=fuel,
        cost=cost,
        risk_score=distance_risk_score(distance),
    )
    logger.debug(f"Estimated {len(points)}-point {profile.name} route: "
                 f"{distance:.1f} km, {carbon:.1f} kg CO2")
    return metrics


def environmental_impact_score(points: Sequence[GeoPoint],
                               mode: Union[str, ModeProfile] = TransportMode.TRUCK) -> int:
    """Score a route out of 100, deducting for emissions and fuel burned.

    10 points are deducted per 1000 kg CO2 and 5 points per 100 L fuel.
    """
    metrics = estimate(points, mode)
    score = 100.0
    score -= (metrics.emissions.carbon_kg / 1000) * 10
    score -= (metrics.fuel_liters / 100) * 5
    return max(0, min(100, _round_half_up(score)))


def assess_risk(points: Sequence[GeoPoint],
                weather: Optional[str] = None,
                terrain: Optional[str] = None) -> int:
    """Contextual risk score (0-10) from distance, weather and terrain."""
    score = config.BASE_CONTEXT_RISK

    distance = route_distance(points)
    if distance > 5000:
        score += 2
    elif distance > 2000:
        score += 1

    if weather is not None:
        key = weather.lower()
        if key not in WEATHER_RISK:
            logger.warning(f"Unknown weather condition '{weather}', ignoring")
        score += WEATHER_RISK.get(key, 0)

    if terrain is not None:
        key = terrain.lower()
        if key not in TERRAIN_RISK:
            logger.warning(f"Unknown terrain '{terrain}', ignoring")
        score += TERRAIN_RISK.get(key, 0)

    return min(score, config.MAX_RISK_SCORE)
