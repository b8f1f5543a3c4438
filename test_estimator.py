import unittest

from greenroute.estimator import (
    assess_risk, distance_risk_score, environmental_impact_score, estimate
)
from greenroute.exceptions import ValidationError
from greenroute.geo_utils import route_distance
from greenroute.interfaces import GeoPoint
from greenroute.transport_modes import TransportMode, get_mode_profile

DELHI = GeoPoint(28.6139, 77.2090, 'Delhi')
MUMBAI = GeoPoint(19.0760, 72.8777, 'Mumbai')
CHENNAI = GeoPoint(13.0827, 80.2707, 'Chennai')
LONDON = GeoPoint(51.5074, -0.1278, 'London')


class TestEstimate(unittest.TestCase):
    def test_delhi_to_mumbai_truck(self):
        route = estimate([DELHI, MUMBAI], TransportMode.TRUCK)
        self.assertGreaterEqual(route.transit_time_hours, 19.05)
        self.assertLessEqual(route.transit_time_hours, 19.2)
        self.assertGreaterEqual(route.emissions.carbon_kg, 1053)
        self.assertLessEqual(route.emissions.carbon_kg, 1059)
        self.assertEqual(route.transit_days, 1)
        self.assertEqual(route.risk_score, 2)
        self.assertEqual(route.mode, 'truck')
        self.assertEqual(route.path, (DELHI, MUMBAI))

    def test_derived_fields(self):
        route = estimate([DELHI, MUMBAI, CHENNAI], 'truck')
        d = route.distance_km
        self.assertAlmostEqual(route.emissions.energy_kwh, route.emissions.carbon_kg * 3.2)
        self.assertAlmostEqual(route.emissions.water_liters, route.emissions.carbon_kg * 0.8)
        self.assertAlmostEqual(route.fuel_liters, d * 0.35)
        self.assertAlmostEqual(route.cost, d * 1.5 + d * 0.35 * 1.2)

    def test_ship_mode(self):
        route = estimate([DELHI, MUMBAI], TransportMode.SHIP)
        d = route.distance_km
        self.assertAlmostEqual(route.transit_time_hours, d / 40)
        self.assertAlmostEqual(route.emissions.carbon_kg, d * 0.04)
        self.assertAlmostEqual(route.fuel_liters, d * 0.12)
        self.assertAlmostEqual(route.cost, d * 0.8 + d * 0.12 * 0.8)

    def test_mode_accepts_profile_and_case(self):
        by_profile = estimate([DELHI, MUMBAI], get_mode_profile('truck'))
        by_name = estimate([DELHI, MUMBAI], 'TRUCK')
        self.assertEqual(by_profile, by_name)

    def test_unknown_mode(self):
        with self.assertRaises(ValidationError) as ctx:
            estimate([DELHI, MUMBAI], 'rail')
        self.assertEqual(ctx.exception.field, 'mode')

    def test_empty_route_is_all_zero(self):
        route = estimate([], 'truck')
        self.assertEqual(route.distance_km, 0)
        self.assertEqual(route.transit_time_hours, 0)
        self.assertEqual(route.emissions.carbon_kg, 0)
        self.assertEqual(route.cost, 0)
        self.assertEqual(route.risk_score, 0)
        self.assertEqual(route.transit_days, 0)

    def test_monotonic_in_distance(self):
        short = estimate([DELHI, MUMBAI], 'truck')
        longer = estimate([DELHI, MUMBAI, CHENNAI], 'truck')
        self.assertLess(short.distance_km, longer.distance_km)
        for attr in ('transit_time_hours', 'fuel_liters', 'cost', 'risk_score'):
            self.assertLessEqual(getattr(short, attr), getattr(longer, attr))
        self.assertLess(short.emissions.carbon_kg, longer.emissions.carbon_kg)

    def test_risk_score_capped(self):
        route = estimate([DELHI, LONDON, MUMBAI], 'ship')
        self.assertEqual(route.risk_score, 10)

    def test_to_geojson(self):
        feature = estimate([DELHI, MUMBAI], 'truck').to_geojson()
        self.assertEqual(feature['type'], 'Feature')
        self.assertEqual(feature['geometry']['type'], 'LineString')
        self.assertEqual(tuple(feature['geometry']['coordinates'][0]), (77.2090, 28.6139))
        self.assertEqual(feature['properties']['labels'], ['Delhi', 'Mumbai'])
        self.assertNotIn('path', feature['properties'])

    def test_to_geojson_single_point(self):
        feature = estimate([DELHI], 'truck').to_geojson()
        self.assertEqual(feature['geometry']['type'], 'Point')


class TestDistanceRiskScore(unittest.TestCase):
    def test_rounds_half_up(self):
        self.assertEqual(distance_risk_score(0), 0)
        self.assertEqual(distance_risk_score(1000), 2)   # 1.5
        self.assertEqual(distance_risk_score(3000), 5)   # 4.5
        self.assertEqual(distance_risk_score(2500), 4)   # 3.75

    def test_capped_at_ten(self):
        self.assertEqual(distance_risk_score(6700), 10)
        self.assertEqual(distance_risk_score(50000), 10)


class TestEnvironmentalImpactScore(unittest.TestCase):
    def test_delhi_to_mumbai(self):
        self.assertEqual(environmental_impact_score([DELHI, MUMBAI], 'truck'), 69)

    def test_no_distance_scores_full_marks(self):
        self.assertEqual(environmental_impact_score([DELHI], 'truck'), 100)

    def test_clamped_to_zero(self):
        self.assertEqual(environmental_impact_score([DELHI, LONDON, DELHI], 'truck'), 0)


class TestAssessRisk(unittest.TestCase):
    def test_base_score(self):
        self.assertEqual(assess_risk([DELHI, MUMBAI]), 5)

    def test_weather_and_terrain(self):
        self.assertEqual(assess_risk([DELHI, MUMBAI], weather='moderate', terrain='hilly'), 7)
        self.assertEqual(assess_risk([DELHI, MUMBAI], weather='Severe', terrain='mountainous'), 10)

    def test_distance_bands(self):
        self.assertEqual(assess_risk([DELHI, MUMBAI, DELHI]), 6)
        self.assertGreater(route_distance([DELHI, LONDON]), 5000)
        self.assertEqual(assess_risk([DELHI, LONDON]), 7)

    def test_capped_at_ten(self):
        self.assertEqual(assess_risk([DELHI, LONDON], weather='severe', terrain='mountainous'), 10)

    def test_unknown_condition_logs_warning(self):
        with self.assertLogs('greenroute.estimator', level='WARNING'):
            score = assess_risk([DELHI, MUMBAI], weather='volcanic')
        self.assertEqual(score, 5)


if __name__ == '__main__':
    unittest.main()
