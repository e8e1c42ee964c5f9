"""Row access over a header map."""

from typing import Dict, List, Optional

from scadaxdf.common import network_path
from scadaxdf.exceptions import MissingColumnsError


def validate_columns(header_map: Dict[str, int], required_columns: List[str]):
    """Check that every required column is present in header_map.

    Raises
    ------
    MissingColumnsError
        Lists all missing columns, not only the first.

    """
    missing = [x for x in required_columns if x not in header_map]
    if missing:
        raise MissingColumnsError(missing)


class Row:
    """Typed accessor for one input row.

    ``get`` returns None for a column that is absent from the header map or
    beyond the end of a short row. Defaulting is left to the caller.

    """

    def __init__(self, fields: List[str], header_map: Dict[str, int]):
        self._fields = fields
        self._header_map = header_map

    def __repr__(self):
        return f"Row({self._fields!r})"

    def get(self, column: str) -> Optional[str]:
        index = self._header_map.get(column)
        if index is None or index >= len(self._fields):
            return None
        value = self._fields[index]
        return "" if value is None else str(value).strip()

    def value(self, column: str) -> str:
        """Return the column value or an empty string."""
        value = self.get(column)
        return "" if value is None else value

    def get_or_default(self, column: str, default: str) -> str:
        """Return the column value, or default if it is absent or empty."""
        value = self.get(column)
        return value if value else default

    @property
    def element(self) -> str:
        return self.value("ELEMENT")

    @property
    def info(self) -> str:
        return self.value("INFO")

    @property
    def station_path(self) -> str:
        """Network-model path of the station this row belongs to."""
        return network_path(
            self.value("EMPRESA"),
            self.value("REGION"),
            self.value("B1"),
            self.value("B2"),
            self.value("B3"),
        )


def make_rows(rows: List[List[str]], header_map: Dict[str, int]) -> List[Row]:
    return [Row(x, header_map) for x in rows]
