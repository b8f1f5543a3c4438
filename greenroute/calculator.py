"""Supply-chain carbon footprint and container loading calculators."""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Sequence

from .exceptions import ValidationError
from .interfaces import Container, Package

logger = logging.getLogger(__name__)

# kg CO2e per unit
EMISSION_FACTORS = {
    'road': 0.1,        # per ton-km
    'air': 0.5,
    'ocean': 0.015,
    'rail': 0.03,
    'electricity': 0.5,  # per kWh
    'natural_gas': 2.1,  # per m3
    'fuel_oil': 2.7,     # per litre
    'materials': 3.0,    # per kg
    'packaging': 2.0,
    'waste': 0.5,
    'space': 0.1,        # per m2
    'water': 0.3,        # per m3
}


@dataclass
class FootprintInputs:
    """Activity data for a footprint calculation. Missing values count as zero."""
    road_freight_tkm: float = 0.0
    air_freight_tkm: float = 0.0
    ocean_freight_tkm: float = 0.0
    rail_freight_tkm: float = 0.0
    electricity_kwh: float = 0.0
    natural_gas_m3: float = 0.0
    fuel_oil_l: float = 0.0
    raw_materials_kg: float = 0.0
    packaging_kg: float = 0.0
    waste_kg: float = 0.0
    office_space_m2: float = 0.0
    warehouse_space_m2: float = 0.0
    manufacturing_space_m2: float = 0.0
    water_m3: float = 0.0

    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f.name, value, f"{f.name} must be a number")
            if value < 0:
                raise ValidationError(f.name, value, f"{f.name} must not be negative")


@dataclass
class FootprintResult:
    """Total footprint in kg CO2e with a per-category breakdown."""
    total: float
    breakdown: Dict[str, float]
    intensity: float


def calculate_footprint(inputs: FootprintInputs) -> FootprintResult:
    """Calculate the carbon footprint across transport, energy, materials, facilities and water."""
    inputs.validate()
    f = EMISSION_FACTORS

    transport = (inputs.road_freight_tkm * f['road'] +
                 inputs.air_freight_tkm * f['air'] +
                 inputs.ocean_freight_tkm * f['ocean'] +
                 inputs.rail_freight_tkm * f['rail'])
    energy = (inputs.electricity_kwh * f['electricity'] +
              inputs.natural_gas_m3 * f['natural_gas'] +
              inputs.fuel_oil_l * f['fuel_oil'])
    materials = (inputs.raw_materials_kg * f['materials'] +
                 inputs.packaging_kg * f['packaging'] +
                 inputs.waste_kg * f['waste'])
    facilities = (inputs.office_space_m2 +
                  inputs.warehouse_space_m2 +
                  inputs.manufacturing_space_m2) * f['space']
    water = inputs.water_m3 * f['water']

    breakdown = {
        'Transportation': transport,
        'Energy': energy,
        'Materials': materials,
        'Facilities': facilities,
        'Water': water,
    }
    total = sum(breakdown.values())
    # Intensity per kg of raw material; no materials means per-unit
    intensity = total / (inputs.raw_materials_kg or 1)

    logger.debug(f"Footprint total {total:.2f} kg CO2e")
    return FootprintResult(total=total, breakdown=breakdown, intensity=intensity)


def loading_efficiency(container: Container, packages: Sequence[Package]) -> float:
    """Percentage of container volume occupied by the packages."""
    container_volume = container.length * container.width * container.height
    if container_volume <= 0:
        raise ValidationError('container', container, "Container volume must be positive")

    package_volume = sum(p.length * p.width * p.height * p.quantity for p in packages)
    return package_volume / container_volume * 100
