"""Vehicle CSV import, deduplication and per-fuel export."""

from recordcheck.vehicles.models import CSV_HEADER, ImportResult, VehicleRecord
from recordcheck.vehicles.importer import import_vehicles, normalize_fuel, is_valid_registration
from recordcheck.vehicles.csvio import export_by_fuel, import_and_export, read_vehicle_rows

__all__ = [
    "CSV_HEADER",
    "ImportResult",
    "VehicleRecord",
    "import_vehicles",
    "normalize_fuel",
    "is_valid_registration",
    "export_by_fuel",
    "import_and_export",
    "read_vehicle_rows",
]
