"""Map visualization for route comparisons."""

import os
import logging
from typing import List

import folium

from .geo_utils import calculate_heading, distance_between
from .interfaces import RouteComparison, RouteMetrics

logger = logging.getLogger(__name__)

ROUTE_STYLES = {
    'original': {'color': 'red', 'label': 'Original'},
    'optimized': {'color': 'green', 'label': 'Optimized'},
}


def _leg_summary(route: RouteMetrics) -> List[str]:
    legs = []
    for a, b in zip(route.path, route.path[1:]):
        legs.append(f"{a.label or 'point'} → {b.label or 'point'}: "
                    f"{distance_between(a, b):.0f} km @ {calculate_heading(a, b):.0f}°")
    return legs


def _add_route(m: folium.Map, route: RouteMetrics, kind: str) -> None:
    style = ROUTE_STYLES[kind]
    coordinates = [(p.latitude, p.longitude) for p in route.path]

    popup = (f"{style['label']} route: {route.distance_km:.0f} km, "
             f"{route.emissions.carbon_kg:.0f} kg CO2<br>" + "<br>".join(_leg_summary(route)))
    folium.PolyLine(
        coordinates,
        weight=3,
        color=style['color'],
        opacity=0.8,
        popup=popup,
    ).add_to(m)

    # Waypoint markers (start and end are drawn separately)
    for i, coord in enumerate(coordinates[1:-1], start=1):
        folium.CircleMarker(
            location=coord,
            radius=4,
            popup=f"{style['label']} Waypoint {i}: {route.path[i].label}",
            color=style['color'],
            fill=True,
        ).add_to(m)


def create_comparison_map(comparison: RouteComparison, filename: str = "route_comparison.html") -> str:
    """Create an interactive map of the original and optimized routes.

    Args:
        comparison: RouteComparison to draw
        filename: Name of the output HTML file

    Returns:
        Path to the generated HTML file
    """
    start = comparison.original.path[0]
    end = comparison.original.path[-1]
    m = folium.Map(location=[start.latitude, start.longitude], zoom_start=5)

    folium.Marker(
        [start.latitude, start.longitude],
        popup=f"Start: {start.label}",
        icon=folium.Icon(color='blue', icon='info-sign')
    ).add_to(m)

    _add_route(m, comparison.original, 'original')
    _add_route(m, comparison.optimized, 'optimized')

    if end != start:
        folium.Marker(
            [end.latitude, end.longitude],
            popup=f"End: {end.label}",
            icon=folium.Icon(color='darkred', icon='info-sign')
        ).add_to(m)

    output_path = os.path.abspath(filename)
    m.save(output_path)
    logger.info(f"Saved route comparison map to {output_path}")
    return output_path
