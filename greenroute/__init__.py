"""Supply-chain route sustainability estimation package."""

from .interfaces import GeoPoint, Emissions, RouteMetrics, RouteComparison, SustainabilityScore, Hub
from .transport_modes import TransportMode, ModeProfile, get_mode_profile
from .exceptions import GreenRouteError, ValidationError, UndefinedImprovement, AuthenticationError
from .geo_utils import distance_between, route_distance, calculate_heading
from .estimator import estimate, environmental_impact_score, assess_risk
from .comparison import compare, optimize_waypoints, reduction_percent, sustainability_score, optimization_score
from .hubs import HubNetwork
from .data_store import DatasetStore
from .auth import AuthService, InMemoryUserRepository, PBKDF2Hasher
from .calculator import FootprintInputs, calculate_footprint, loading_efficiency

__all__ = [
    'GeoPoint', 'Emissions', 'RouteMetrics', 'RouteComparison', 'SustainabilityScore', 'Hub',
    'TransportMode', 'ModeProfile', 'get_mode_profile',
    'GreenRouteError', 'ValidationError', 'UndefinedImprovement', 'AuthenticationError',
    'distance_between', 'route_distance', 'calculate_heading',
    'estimate', 'environmental_impact_score', 'assess_risk',
    'compare', 'optimize_waypoints', 'reduction_percent', 'sustainability_score', 'optimization_score',
    'HubNetwork', 'DatasetStore',
    'AuthService', 'InMemoryUserRepository', 'PBKDF2Hasher',
    'FootprintInputs', 'calculate_footprint', 'loading_efficiency',
]
