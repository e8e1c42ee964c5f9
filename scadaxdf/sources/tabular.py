"""Reads signal tables from CSV and Excel files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

import pandas as pd

from jade.exceptions import InvalidParameter
from scadaxdf.common import STATION_COLUMNS
from scadaxdf.enums import TabularFormat
from scadaxdf.exceptions import InvalidTabularInput


logger = logging.getLogger(__name__)


@dataclass
class TabularData:
    """Header names and string rows of one input table."""

    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def header_map(self) -> Dict[str, int]:
        return {name: i for i, name in enumerate(self.headers)}


def read_table(filename):
    """Read a signal table.

    Parameters
    ----------
    filename : str | Path
        .csv or .xlsx file; the first row holds the headers.

    Returns
    -------
    TabularData

    Raises
    ------
    InvalidTabularInput
        Raised if the format is not supported, the file cannot be parsed or it
        has no data row.

    """
    path = Path(filename)
    extension = path.suffix.lower()
    try:
        if extension == TabularFormat.CSV.value:
            df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
        elif extension == TabularFormat.XLSX.value:
            df = pd.read_excel(path, sheet_name=0, dtype=str, engine="openpyxl")
        else:
            supported = ", ".join(x.value for x in TabularFormat)
            raise InvalidTabularInput(f"unsupported file format {extension!r} (use {supported})")
    except (OSError, ValueError, pd.errors.ParserError) as exc:
        raise InvalidTabularInput(f"could not read {path}: {exc}") from exc

    if df.empty:
        raise InvalidTabularInput(f"{path} must contain a header and at least one data row")

    df = df.fillna("")
    headers = [str(x).strip() for x in df.columns]
    rows = [[str(x).strip() for x in values] for values in df.itertuples(index=False, name=None)]
    logger.info("Read %s rows and %s columns from %s", len(rows), len(headers), path)
    return TabularData(headers=headers, rows=rows)


def parse_station_path(path):
    """Split a station path into its parts.

    Parameters
    ----------
    path : str
        EMPRESA/REGION/B1/B2/B3

    Returns
    -------
    tuple
        (empresa, region, b1, b2, b3)

    """
    if not path:
        raise InvalidParameter("station path is empty")
    parts = path.split("/")
    if len(parts) != 5:
        raise InvalidParameter(
            f"station path {path!r} must have 5 parts EMPRESA/REGION/B1/B2/B3, found {len(parts)}"
        )
    return tuple(parts)


def add_station_columns(table, empresa, region, aor):
    """Return a copy of table with the EMPRESA, REGION and AOR columns set.

    Missing columns are prepended; existing ones are overwritten.
    """
    values = dict(zip(STATION_COLUMNS, (empresa, region, aor)))
    missing = [x for x in STATION_COLUMNS if x not in table.headers]
    header_map = table.header_map
    rows = []
    for row in table.rows:
        row = list(row)
        for name in STATION_COLUMNS:
            if name in header_map and header_map[name] < len(row):
                row[header_map[name]] = values[name]
        rows.append([values[x] for x in missing] + row)

    return TabularData(headers=missing + list(table.headers), rows=rows)
