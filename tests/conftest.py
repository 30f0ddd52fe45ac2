"""Shared fixtures and helpers for recordcheck tests."""

import pytest
import sqlalchemy as sa


VEHICLE_HEADER = ["Car Registration", "Make", "Model", "Colour", "Fuel"]


def make_ranges_db(path, ranges, table="ip_ranges"):
    """Create a SQLite database at path with a `range` column and return its URL."""
    url = f"sqlite:///{path}"
    engine = sa.create_engine(url)
    metadata = sa.MetaData()
    ranges_table = sa.Table(
        table,
        metadata,
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("range", sa.String(64)),
    )
    metadata.create_all(engine)
    if ranges:
        with engine.begin() as conn:
            conn.execute(ranges_table.insert(), [{"range": r} for r in ranges])
    engine.dispose()
    return url


def write_vehicle_csv(path, rows, header=VEHICLE_HEADER):
    """Write a vehicle CSV with a header row."""
    lines = [",".join(header)] + [",".join(row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_rows():
    return [
        ("AB12 CDE", "Ford", "Focus", "Red", "Petrol"),
        ("AB12 CDE", "Ford", "Focus", "Red", "diesel"),
        ("ZZ99 ZZZ", "Audi", "A4", "Blue", "deisel"),
    ]


@pytest.fixture
def ranges_db(tmp_path):
    return make_ranges_db(
        tmp_path / "ranges.db",
        ["192.168.1.0-192.168.1.255", "10.0.0.0/8", "8.8.8.8"],
    )
