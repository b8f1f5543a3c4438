"""Configuration constants for supply-chain route estimation."""

import os

from dotenv import load_dotenv

load_dotenv()

# Geography
EARTH_RADIUS_KM = 6371

# Truck
TRUCK_SPEED_KMH = 60
TRUCK_CO2_KG_PER_KM = 0.92
TRUCK_FUEL_L_PER_KM = 0.35
TRUCK_BASE_COST_PER_KM = 1.5
TRUCK_FUEL_PRICE_PER_L = 1.2

# Ship
SHIP_SPEED_KMH = 40
SHIP_CO2_KG_PER_KM = 0.04
SHIP_FUEL_L_PER_KM = 0.12
SHIP_BASE_COST_PER_KM = 0.8
SHIP_FUEL_PRICE_PER_L = 0.8

# Derived emissions (multiples of carbon, not measured)
ENERGY_KWH_PER_KG_CO2 = 3.2
WATER_L_PER_KG_CO2 = 0.8

# Risk
RISK_PER_1000_KM = 1.5
MAX_RISK_SCORE = 10
BASE_CONTEXT_RISK = 5

# Sustainability rating thresholds (percent reduction)
HIGH_REDUCTION_THRESHOLD = 25.0
MODERATE_REDUCTION_THRESHOLD = 10.0

# Optimization score weights
DISTANCE_IMPROVEMENT_WEIGHT = 0.6
EMISSIONS_IMPROVEMENT_WEIGHT = 0.4

# Major Indian logistics hubs: name -> (lat, lng, type)
DEFAULT_HUBS = [
    {'name': 'Delhi', 'lat': 28.6139, 'lng': 77.2090, 'type': 'Major Hub'},
    {'name': 'Mumbai', 'lat': 19.0760, 'lng': 72.8777, 'type': 'Major Hub'},
    {'name': 'Chennai', 'lat': 13.0827, 'lng': 80.2707, 'type': 'Major Hub'},
    {'name': 'Kolkata', 'lat': 22.5726, 'lng': 88.3639, 'type': 'Major Hub'},
    {'name': 'Hyderabad', 'lat': 17.3850, 'lng': 78.4867, 'type': 'Regional Hub'},
    {'name': 'Bangalore', 'lat': 12.9716, 'lng': 77.5946, 'type': 'Regional Hub'},
    {'name': 'Ahmedabad', 'lat': 23.0225, 'lng': 72.5714, 'type': 'Regional Hub'},
    {'name': 'Lucknow', 'lat': 26.8467, 'lng': 80.9462, 'type': 'Regional Hub'},
    {'name': 'Bhubaneswar', 'lat': 20.2961, 'lng': 85.8245, 'type': 'Distribution Center'},
    {'name': 'Nagpur', 'lat': 21.1458, 'lng': 79.0882, 'type': 'Distribution Center'},
    {'name': 'Ludhiana', 'lat': 30.9010, 'lng': 75.8573, 'type': 'Manufacturing Hub'},
    {'name': 'Vadodara', 'lat': 22.3072, 'lng': 73.1812, 'type': 'Manufacturing Hub'},
]
DEFAULT_NUM_CANDIDATES = 5

# Environment overrides (.env is honoured)
LOG_LEVEL = os.getenv('GREENROUTE_LOG_LEVEL', 'INFO')
HUBS_URL = os.getenv('GREENROUTE_HUBS_URL')
DEFAULT_DATASET = os.getenv('GREENROUTE_DATASET')
