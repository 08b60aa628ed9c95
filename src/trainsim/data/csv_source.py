"""Acceleration profiles loaded from CSV files."""

import csv
from pathlib import Path

from trainsim.core.errors import AccelerationSourceError
from trainsim.summation.lookup import InterpolateLookup


def resolve_path(path: Path | str) -> Path:
    """Resolve a relative path against the current working directory."""
    path = Path(path)
    if not path.is_absolute():
        return Path.cwd() / path
    return path


def _column_index(header: list[str], column: str) -> int:
    for index, name in enumerate(header):
        if name == column:
            return index
    raise AccelerationSourceError(f"failed to find the desired csv column: {column}")


def load_csv_profile(path: Path | str, column: str | None = None) -> InterpolateLookup:
    """Load one acceleration sample per row, one row per second.

    Args:
        path: CSV file to read.
        column: Header name of the column holding acceleration. When omitted
            the file has no header row and the first field is used.

    Returns:
        Lookup table of the samples in file order.

    Raises:
        AccelerationSourceError: If the file cannot be read, the column is
            missing, any entry is not a float, or there are no samples.
    """
    path = resolve_path(path)
    samples = InterpolateLookup()

    try:
        with open(path, newline="") as f:
            reader = csv.reader(f)

            data_index = 0
            if column is not None:
                header = next(reader, None)
                if header is None:
                    raise AccelerationSourceError("failed to retrieve csv headers")
                data_index = _column_index(header, column)

            for entry, record in enumerate(reader, start=1):
                if not record:
                    continue
                if data_index >= len(record):
                    raise AccelerationSourceError(
                        f"failed to retrieve csv entry column. {entry}"
                    )
                try:
                    samples.push(float(record[data_index]))
                except ValueError as e:
                    raise AccelerationSourceError(
                        f"failed to convert csv entry into float. {entry}"
                    ) from e
    except OSError as e:
        raise AccelerationSourceError(f"failed to load csv file: {path}") from e
    except csv.Error as e:
        raise AccelerationSourceError(f"failed to retrieve csv entry: {e}") from e

    if len(samples) == 0:
        raise AccelerationSourceError(f"no acceleration samples in {path}")

    return samples
