"""Enums for the scadaxdf package."""

import enum


class ElementKind(enum.Enum):
    """Variants an element template can take."""
    ANALOG = "Analog"
    DISCRETE = "Discrete"
    BREAKER = "Breaker"
    IFS_POINT = "IfsPoint"


class DocumentKind(enum.Enum):
    """Defines the documents generated for one station."""
    ADDRESSING = "ifs"
    NETWORK_MODEL = "imm"


class TabularFormat(enum.Enum):
    """Supported input table formats, keyed by file extension."""
    CSV = ".csv"
    XLSX = ".xlsx"


def get_enum_from_value(cls, value):
    """Gets the enum for the given value."""
    for enum_ in cls:
        if enum_.value == value:
            return enum_
    raise Exception("Unknown value: {} {}".format(cls, value))
