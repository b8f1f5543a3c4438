"""Transport mode definitions for route estimation."""

from dataclasses import dataclass
from typing import Dict, Union

from . import config
from .exceptions import ValidationError


class TransportMode:
    """Constants for transport modes."""
    TRUCK = "truck"
    SHIP = "ship"


@dataclass(frozen=True)
class ModeProfile:
    """Fixed per-kilometre constants for a transport mode."""
    name: str
    average_speed_kmh: float
    co2_kg_per_km: float
    fuel_l_per_km: float
    base_cost_per_km: float
    fuel_price_per_l: float


MODE_PROFILES: Dict[str, ModeProfile] = {
    TransportMode.TRUCK: ModeProfile(
        name=TransportMode.TRUCK,
        average_speed_kmh=config.TRUCK_SPEED_KMH,
        co2_kg_per_km=config.TRUCK_CO2_KG_PER_KM,
        fuel_l_per_km=config.TRUCK_FUEL_L_PER_KM,
        base_cost_per_km=config.TRUCK_BASE_COST_PER_KM,
        fuel_price_per_l=config.TRUCK_FUEL_PRICE_PER_L,
    ),
    TransportMode.SHIP: ModeProfile(
        name=TransportMode.SHIP,
        average_speed_kmh=config.SHIP_SPEED_KMH,
        co2_kg_per_km=config.SHIP_CO2_KG_PER_KM,
        fuel_l_per_km=config.SHIP_FUEL_L_PER_KM,
        base_cost_per_km=config.SHIP_BASE_COST_PER_KM,
        fuel_price_per_l=config.SHIP_FUEL_PRICE_PER_L,
    ),
}


def get_mode_profile(mode: Union[str, ModeProfile]) -> ModeProfile:
    """Resolve a mode name (case-insensitive) or profile to a ModeProfile."""
    if isinstance(mode, ModeProfile):
        return mode
    key = str(mode).strip().lower()
    if key not in MODE_PROFILES:
        raise ValidationError(
            'mode', mode,
            f"Unknown transport mode {mode!r}; expected one of {sorted(MODE_PROFILES)}"
        )
    return MODE_PROFILES[key]
