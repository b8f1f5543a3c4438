"""Original-versus-reordered route comparison and sustainability scoring."""

import logging
from typing import List, Sequence, Union

from . import config
from .estimator import estimate
from .exceptions import UndefinedImprovement
from .geo_utils import distance_between
from .interfaces import GeoPoint, RouteComparison, SustainabilityScore
from .transport_modes import ModeProfile, TransportMode

logger = logging.getLogger(__name__)

SCORED_METRICS = ('carbon', 'energy', 'water')


def optimize_waypoints(start: GeoPoint, waypoints: Sequence[GeoPoint]) -> List[GeoPoint]:
    """Order waypoints by ascending distance from the start.

    This is a greedy single-key sort, not a shortest-path solver: the result
    can be longer than the input order when waypoints are not radial from
    the start. Equal distances keep their input order.
    """
    return sorted(waypoints, key=lambda wp: distance_between(start, wp))


def compare(start: GeoPoint,
            waypoints: Sequence[GeoPoint],
            end: GeoPoint,
            mode: Union[str, ModeProfile] = TransportMode.TRUCK) -> RouteComparison:
    """Estimate the as-entered route and the start-distance-sorted route."""
    waypoints = list(waypoints)
    original_path = [start, *waypoints, end]
    optimized_path = [start, *optimize_waypoints(start, waypoints), end]

    comparison = RouteComparison(
        original=estimate(original_path, mode),
        optimized=estimate(optimized_path, mode),
    )
    logger.info(f"Compared routes: original {comparison.original.distance_km:.1f} km, "
                f"optimized {comparison.optimized.distance_km:.1f} km")
    return comparison


def reduction_percent(original: float, optimized: float, metric: str = "value") -> float:
    """Relative decrease from original to optimized, as a percentage of original.

    Raises:
        UndefinedImprovement: if the original value is zero.
    """
    if original == 0:
        raise UndefinedImprovement(metric)
    return (original - optimized) / original * 100


def rate_reduction(percent: float) -> str:
    """Bucket a reduction percentage into high / moderate / low."""
    if percent > config.HIGH_REDUCTION_THRESHOLD:
        return 'high'
    if percent > config.MODERATE_REDUCTION_THRESHOLD:
        return 'moderate'
    return 'low'


def sustainability_score(comparison: RouteComparison) -> SustainabilityScore:
    """Per-metric emission reductions and their arithmetic mean."""
    reductions = {}
    for metric in SCORED_METRICS:
        reductions[metric] = reduction_percent(
            comparison.original.emissions.get(metric),
            comparison.optimized.emissions.get(metric),
            metric,
        )

    overall = sum(reductions.values()) / len(reductions)
    return SustainabilityScore(
        carbon=reductions['carbon'],
        energy=reductions['energy'],
        water=reductions['water'],
        overall=overall,
        ratings={metric: rate_reduction(value) for metric, value in reductions.items()},
    )


def optimization_score(comparison: RouteComparison) -> float:
    """Weighted distance (60%) and emissions (40%) improvement, 2 decimals."""
    distance_improvement = reduction_percent(
        comparison.original.distance_km, comparison.optimized.distance_km, 'distance')
    emissions_improvement = reduction_percent(
        comparison.original.emissions.carbon_kg, comparison.optimized.emissions.carbon_kg, 'carbon')

    score = (distance_improvement * config.DISTANCE_IMPROVEMENT_WEIGHT +
             emissions_improvement * config.EMISSIONS_IMPROVEMENT_WEIGHT)
    return round(score, 2)
