"""Vehicle import data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

CSV_HEADER = ["Car Registration", "Make", "Model", "Colour", "Fuel"]


@dataclass(frozen=True)
class VehicleRecord:
    """A vehicle as first seen in the import, keyed by registration."""

    registration: str
    make: str
    model: str
    colour: str
    fuel: str

    def as_row(self) -> List[str]:
        """Return the record in export column order."""
        return [self.registration, self.make, self.model, self.colour, self.fuel]

    def as_dict(self) -> Dict[str, str]:
        return {
            "car_registration": self.registration,
            "make": self.make,
            "model": self.model,
            "colour": self.colour,
            "fuel": self.fuel,
        }


@dataclass
class ImportResult:
    """Outcome of a single import pass."""

    records: Dict[str, VehicleRecord] = field(default_factory=dict)
    valid_records: List[VehicleRecord] = field(default_factory=list)
    invalid_registrations: List[str] = field(default_factory=list)
    fuel_types: List[str] = field(default_factory=list)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_registrations)

    @property
    def by_fuel(self) -> Dict[str, List[VehicleRecord]]:
        """Stored records grouped by fuel, both in first-seen order."""
        return {
            fuel: [record for record in self.records.values() if record.fuel == fuel]
            for fuel in self.fuel_types
        }

    def summary(self) -> Dict[str, Any]:
        """Return the caller-facing summary of the import."""
        return {
            "vehicles_valid_registrations": [r.as_dict() for r in self.valid_records],
            "vehicles_invalid_registration_count": self.invalid_count,
        }
