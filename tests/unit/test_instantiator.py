from scadaxdf.models.elements import Analog, Breaker, Discrete
from scadaxdf.xdf.instantiator import instantiate_element
from scadaxdf.xdf.rows import Row
from tests.common import make_header_map, make_row


def _row(element, info="MvMoment", point_type="AI"):
    return Row(make_row(element, info, point_type), make_header_map())


def test_analog(registry):
    element = instantiate_element(_row("I_S"), registry, "I S")
    assert isinstance(element, Analog)
    assert element.name == "I S"
    assert element.area_of_responsibility_id == "R1"
    assert element.unit_of_measure == "A"


def test_discrete(registry):
    element = instantiate_element(_row("ALARM", "Stat", "SP"), registry, "ALARM")
    assert isinstance(element, Discrete)
    assert element.area_of_responsibility_id == "R1"


def test_breaker_cascades_to_discrete(registry):
    element = instantiate_element(_row("CB", "Stat", "SP_SC"), registry, "CB")
    assert isinstance(element, Breaker)
    assert element.area_of_responsibility_id == "R1"
    assert element.discrete.name == "CB"
    assert element.discrete.area_of_responsibility_id == "R1"
    assert registry.lookup("CB").element.discrete.area_of_responsibility_id == ""


def test_does_not_change_registry(registry):
    instantiate_element(_row("P"), registry, "renamed")
    stored = registry.lookup("P").element
    assert stored.name == "P"
    assert stored.area_of_responsibility_id == ""


def test_unknown_code(registry):
    warnings = []
    assert instantiate_element(_row("UNKNOWN_CODE"), registry, "UNKNOWN_CODE", warnings=warnings) is None
    assert len(warnings) == 1
    assert "UNKNOWN_CODE" in warnings[0]


def test_ifs_point_template(registry):
    warnings = []
    assert instantiate_element(_row("RTU_POINT"), registry, "RTU_POINT", warnings=warnings) is None
    assert len(warnings) == 1
