"""CSV reading and per-fuel export for vehicle imports."""

import csv
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Union

from recordcheck.config import Config
from recordcheck.vehicles.importer import import_vehicles
from recordcheck.vehicles.models import CSV_HEADER, ImportResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Path separators and NUL are not allowed in export file names
_UNSAFE_FILENAME_CHARS = re.compile(r"[/\\\x00]")


def read_vehicle_rows(csv_path: PathLike) -> Iterator[List[str]]:
    """Yield data rows from a vehicle CSV, skipping the header row and empty lines."""
    with open(csv_path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        header = next(reader, None)
        if header is None:
            logger.warning(f"CSV file {csv_path} is empty")
            return
        for row in reader:
            if not row:
                continue
            yield row


def export_filename(fuel: str, extension: str = "csv") -> str:
    """Return the export file name for a fuel type, with path separators replaced by "_"."""
    safe_fuel = _UNSAFE_FILENAME_CHARS.sub("_", fuel.lower())
    return f"vehicles_{safe_fuel}.{extension}"


def _export_targets(
    fuels: Iterable[str], export_path: Path, extension: str
) -> Dict[str, Path]:
    """Map each fuel to its export file, rejecting names that collide or leave export_path."""
    root = export_path.resolve()
    targets: Dict[str, Path] = {}
    claimed: Dict[Path, str] = {}

    for fuel in fuels:
        target = export_path / export_filename(fuel, extension)
        resolved = target.resolve()
        if resolved.parent != root:
            raise ValueError(f"Export file for fuel {fuel!r} resolves outside {export_path}")
        if resolved in claimed:
            raise ValueError(
                f"Fuel types {claimed[resolved]!r} and {fuel!r} map to the same export file {target.name}"
            )
        claimed[resolved] = fuel
        targets[fuel] = target

    return targets


def export_by_fuel(
    result: ImportResult,
    export_dir: PathLike,
    extension: str = "csv",
    dry_run: bool = False,
) -> Dict[str, Path]:
    """
    Write one CSV per fuel type seen in the import.

    All target paths are checked before any file is written.

    Args:
        result: Import result to export
        export_dir: Directory to write into (created if missing)
        extension: File extension without the leading dot
        dry_run: If True, log the files that would be written and write nothing

    Returns:
        Mapping of fuel type to the path of its export file

    Raises:
        ValueError: If two fuel types share a file name or a name escapes export_dir
    """
    export_path = Path(export_dir)
    partitions = result.by_fuel
    targets = _export_targets(partitions, export_path, extension)

    if not dry_run:
        export_path.mkdir(parents=True, exist_ok=True)

    for fuel, records in partitions.items():
        target = targets[fuel]

        if dry_run:
            logger.info(f"[DRY-RUN] Would write {len(records)} vehicles to {target}")
            continue

        with open(target, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(CSV_HEADER)
            writer.writerows(record.as_row() for record in records)
        logger.info(f"Exported {len(records)} {fuel} vehicles to {target}")

    return targets


def import_and_export(csv_path: PathLike, config: Config) -> Dict[str, Any]:
    """Import a vehicle CSV, export it by fuel type and return the summary."""
    logger.info(f"Importing vehicles from {csv_path}...")
    result = import_vehicles(read_vehicle_rows(csv_path))
    export_by_fuel(
        result,
        config.export_dir,
        extension=config.export_extension,
        dry_run=config.dry_run,
    )
    return result.summary()
