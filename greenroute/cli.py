"""Command-line interface for greenroute.

Usage:
    greenroute compare --start Delhi --end Chennai --waypoint Nagpur --waypoint Hyderabad
    greenroute estimate Delhi "19.0760,72.8777" --mode ship
    greenroute hubs --near "21.0,79.0"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import config
from .comparison import compare, optimization_score, sustainability_score
from .estimator import estimate
from .exceptions import GreenRouteError, UndefinedImprovement
from .hubs import HubNetwork
from .interfaces import RouteMetrics
from .preprocessing import parse_coordinates
from .transport_modes import MODE_PROFILES, TransportMode

logger = logging.getLogger(__name__)


def print_header(title: str) -> None:
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_metrics(title: str, route: RouteMetrics) -> None:
    print(f"\n{title}")
    print(f"  Path:         {' → '.join(p.label or str(p) for p in route.path)}")
    print(f"  Distance:     {route.distance_km:,.0f} km")
    print(f"  Transit time: {route.transit_time_hours:,.1f} hours ({route.transit_days} days)")
    print(f"  Carbon:       {route.emissions.carbon_kg:,.0f} kg CO2")
    print(f"  Energy:       {route.emissions.energy_kwh:,.0f} kWh")
    print(f"  Water:        {route.emissions.water_liters:,.0f} liters")
    print(f"  Fuel:         {route.fuel_liters:,.0f} liters")
    print(f"  Cost:         ${route.cost:,.0f}")
    print(f"  Risk score:   {route.risk_score}/10")


def load_network() -> HubNetwork:
    network = HubNetwork()
    network.load_data(config.HUBS_URL)
    return network


def cmd_compare(args) -> None:
    network = load_network()
    start = network.resolve(args.start)
    end = network.resolve(args.end)
    waypoints = [network.resolve(w) for w in args.waypoint]

    comparison = compare(start, waypoints, end, args.mode)

    try:
        score = sustainability_score(comparison)
        opt_score = optimization_score(comparison)
    except UndefinedImprovement as e:
        logger.warning(str(e))
        score, opt_score = None, None

    if args.json:
        payload = comparison.to_dict()
        payload['sustainability'] = score.to_dict() if score else None
        payload['optimization_score'] = opt_score
        print(json.dumps(payload, indent=2))
    else:
        print_header("Route Comparison")
        print_metrics("Original route", comparison.original)
        print_metrics("Optimized route", comparison.optimized)
        if score:
            print("\nSustainability impact")
            for metric in ('carbon', 'energy', 'water'):
                print(f"  {metric.capitalize():<7} reduction: {getattr(score, metric):.1f}% "
                      f"({score.ratings[metric]})")
            print(f"  Overall score: {score.overall:.1f}%")
            print(f"  Optimization score: {opt_score:.2f}")
        else:
            print("\n❌ Improvement is undefined for a zero-length route.")

    if args.map:
        from .visualization import create_comparison_map
        path = create_comparison_map(comparison, args.map)
        print(f"\n✅ Map saved to {path}")


def cmd_estimate(args) -> None:
    network = load_network()
    points = [network.resolve(p) for p in args.points]
    route = estimate(points, args.mode)
    if args.json:
        print(json.dumps(route.to_dict(), indent=2))
    else:
        print_metrics(f"{route.mode.capitalize()} route", route)


def cmd_hubs(args) -> None:
    network = load_network()
    if args.near:
        point = parse_coordinates(args.near)
        result = network.find_nearest(point.latitude, point.longitude)
        if result is None:
            print("❌ No hubs loaded.")
            return
        hub, distance = result
        print(f"✅ Nearest hub: {hub.name} ({hub.hub_type}) at {distance:.1f} km")
        return

    print_header("Logistics Hubs")
    for hub in network.hubs:
        print(f"  {hub.name:<14} {hub.hub_type:<20} "
              f"{hub.point.latitude:>9.4f} {hub.point.longitude:>9.4f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='greenroute',
        description='Supply-chain route sustainability estimator'
    )
    parser.add_argument('--log-level', default=config.LOG_LEVEL, help='Logging level')
    subparsers = parser.add_subparsers(dest='command', required=True)

    modes = sorted(MODE_PROFILES)

    compare_parser = subparsers.add_parser('compare', help='Compare original and reordered routes')
    compare_parser.add_argument('--start', required=True, help='Hub name or "lat,lon"')
    compare_parser.add_argument('--end', required=True, help='Hub name or "lat,lon"')
    compare_parser.add_argument('--waypoint', action='append', default=[],
                                help='Intermediate stop (repeatable)')
    compare_parser.add_argument('--mode', choices=modes, default=TransportMode.TRUCK)
    compare_parser.add_argument('--map', help='Write a comparison map to this HTML file')
    compare_parser.add_argument('--json', action='store_true', help='Print JSON output')
    compare_parser.set_defaults(func=cmd_compare)

    estimate_parser = subparsers.add_parser('estimate', help='Estimate a single route')
    estimate_parser.add_argument('points', nargs='+', help='Hub names or "lat,lon" in travel order')
    estimate_parser.add_argument('--mode', choices=modes, default=TransportMode.TRUCK)
    estimate_parser.add_argument('--json', action='store_true', help='Print JSON output')
    estimate_parser.set_defaults(func=cmd_estimate)

    hubs_parser = subparsers.add_parser('hubs', help='List hubs or find the nearest one')
    hubs_parser.add_argument('--near', help='"lat,lon" to find the closest hub to')
    hubs_parser.set_defaults(func=cmd_hubs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        args.func(args)
    except GreenRouteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
