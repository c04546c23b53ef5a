"""
CSV Utilities

Reads the product CSV into row dictionaries.
Handles large field sizes (long Body (HTML) cells) and a leading BOM.
"""

import csv
from pathlib import Path
from typing import Dict, Iterator, List


def configure_csv(field_size_limit: int = 10 * 1024 * 1024) -> None:
    """
    Configure CSV module for large fields.

    Args:
        field_size_limit: Maximum field size in bytes (default: 10MB)
    """
    csv.field_size_limit(field_size_limit)


def read_csv(file_path: str | Path, encoding: str = 'utf-8-sig') -> Iterator[Dict[str, str]]:
    """
    Read CSV file and yield rows as dictionaries.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8, BOM stripped if present)

    Yields:
        Dictionary for each row with column names as keys
    """
    configure_csv()

    with open(file_path, 'r', encoding=encoding, newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            yield row


def load_rows(file_path: str | Path) -> List[Dict[str, str]]:
    """
    Load every data row of a CSV file into memory, in file order.

    Args:
        file_path: Path to CSV file

    Returns:
        List of row dictionaries (empty for a header-only file)
    """
    return list(read_csv(file_path))


# Initialize CSV configuration on module import
configure_csv()
