"""Vehicle import: dedup by registration, fuel normalization, registration validation."""

import logging
import re
from typing import Iterable, Sequence

from recordcheck.vehicles.models import ImportResult, VehicleRecord

logger = logging.getLogger(__name__)

# Known misspellings in the source data, keyed by their lower-cased form
FUEL_ALIASES = {
    "deisel": "diesel",
    "desel": "diesel",
    "petral": "petrol",
}

# Two letters, two digits, a space, three letters (e.g. "AB12 CDE")
REGISTRATION_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2} [A-Z]{3}")

REQUIRED_FIELDS = 5


def normalize_fuel(fuel: str) -> str:
    """Lower-case a fuel value and fold known misspellings. Unknown values pass through."""
    fuel_lower = fuel.lower()
    return FUEL_ALIASES.get(fuel_lower, fuel_lower)


def is_valid_registration(registration: str) -> bool:
    """Check a registration against the two-letters, two-digits, space, three-letters format."""
    return REGISTRATION_PATTERN.fullmatch(registration) is not None


def import_vehicles(rows: Iterable[Sequence[str]]) -> ImportResult:
    """
    Import vehicle rows in a single pass.

    The first row seen for a registration wins; later rows with the same
    registration are skipped without validation.

    Args:
        rows: Rows of (registration, make, model, colour, fuel, ...) with
            the header already removed

    Returns:
        ImportResult with the stored records, valid records, invalid
        registrations and fuel types, all in first-seen order

    Raises:
        ValueError: If a row has fewer than five fields
    """
    result = ImportResult()
    seen_fuels = set()
    duplicates = 0

    for row_number, row in enumerate(rows, start=1):
        if len(row) < REQUIRED_FIELDS:
            raise ValueError(
                f"Row {row_number} has {len(row)} fields, expected at least {REQUIRED_FIELDS}"
            )

        registration, make, model, colour, raw_fuel = row[:REQUIRED_FIELDS]

        if registration in result.records:
            duplicates += 1
            logger.debug(f"Row {row_number}: duplicate registration {registration!r} skipped")
            continue

        record = VehicleRecord(
            registration=registration,
            make=make,
            model=model,
            colour=colour,
            fuel=normalize_fuel(raw_fuel),
        )
        result.records[registration] = record

        if record.fuel not in seen_fuels:
            seen_fuels.add(record.fuel)
            result.fuel_types.append(record.fuel)

        if is_valid_registration(registration):
            result.valid_records.append(record)
        else:
            result.invalid_registrations.append(registration)
            logger.debug(f"Row {row_number}: invalid registration {registration!r}")

    logger.info(
        f"Imported {len(result.records)} vehicles "
        f"({len(result.valid_records)} valid, {result.invalid_count} invalid, "
        f"{duplicates} duplicates skipped)"
    )
    return result
