"""Builds the addressing-document points, one per input row."""

import logging

from scadaxdf.common import (
    BREAKER_SENTINEL,
    CONTROLLABLE_POINT_TYPE,
    MV_MOMENT_INFO,
)
from scadaxdf.models.elements import IfsPoint, IfsPointLink


logger = logging.getLogger(__name__)

DEFAULT_ADDRESS = "0"
MONITOR_TYPE = "0"
DEFAULT_SELECT_BEFORE = "0"
CONTROL_TYPE_CONTROLLABLE = "45"
CONTROL_TYPE_DEFAULT = "0"
SUFFIX_CONTROLLABLE = "MC"
SUFFIX_DEFAULT = "M"


def get_display_name(element, info):
    """Return the name used for an element in both documents.

    MvMoment points replace underscores in the element code with spaces.
    """
    if info == MV_MOMENT_INFO:
        return element.replace("_", " ")
    return element


def is_breaker_shaped(element, registry):
    """Return True if the element code refers to a breaker."""
    return element == BREAKER_SENTINEL or registry.is_breaker(element)


def get_point_suffix(point_type):
    if point_type == CONTROLLABLE_POINT_TYPE:
        return SUFFIX_CONTROLLABLE
    return SUFFIX_DEFAULT


def get_control_type(point_type):
    if point_type == CONTROLLABLE_POINT_TYPE:
        return CONTROL_TYPE_CONTROLLABLE
    return CONTROL_TYPE_DEFAULT


def build_ifs_point(row, registry):
    """Create the addressing point for a row.

    Parameters
    ----------
    row : Row
        Row with a non-empty ELEMENT value
    registry : TemplateRegistry

    Returns
    -------
    IfsPoint

    """
    element = row.element
    info = row.info
    point_type = row.value("TYPE")
    display_name = get_display_name(element, info)

    if is_breaker_shaped(element, registry):
        name_part = f"{display_name}_{display_name}"
        path_part = f"{display_name}/{display_name}"
    else:
        name_part = display_name
        path_part = display_name

    b1, b2, b3 = row.value("B1"), row.value("B2"), row.value("B3")
    name = "_".join((b1, b2, b3, name_part, info, get_point_suffix(point_type)))
    path_b = "/".join((row.station_path, path_part, info))

    point = IfsPoint(
        name=name,
        mon_addr_high=row.get_or_default("MHB", DEFAULT_ADDRESS),
        mon_addr_low=row.get_or_default("MLB", DEFAULT_ADDRESS),
        mon_addr_middle=row.get_or_default("MMB", DEFAULT_ADDRESS),
        mon_type=MONITOR_TYPE,
        con_addr_high=row.get_or_default("CHB", DEFAULT_ADDRESS),
        con_addr_low=row.get_or_default("CLB", DEFAULT_ADDRESS),
        con_addr_middle=row.get_or_default("CMB", DEFAULT_ADDRESS),
        con_type=get_control_type(point_type),
        select_before=row.get_or_default("SBO", DEFAULT_SELECT_BEFORE),
        link=IfsPointLink(path_b=path_b),
    )
    logger.debug("Built point %s -> %s", name, path_b)
    return point
