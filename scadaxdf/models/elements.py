"""Element models rendered into XDF documents.

Templates are loaded as an :class:`ElementTemplate`, a tagged union over the
``Analog``, ``Discrete``, ``Breaker`` and ``IfsPoint`` variants. ``clone`` copies
every nested record of a variant, so instantiating a template never shares
state with the stored, read-only definition.
"""

from typing import ClassVar, List, Optional, Union

from lxml import etree
from pydantic import ConfigDict, Field, PrivateAttr

from scadaxdf.enums import ElementKind, get_enum_from_value
from scadaxdf.exceptions import TemplateParseError
from scadaxdf.models.base import ScadaXdfBaseModel


class XdfElementModel(ScadaXdfBaseModel):
    """Base model for anything written as an XDF element.

    String fields become attributes, named by their alias, in declaration
    order. Nested records are appended as child elements by ``children``.
    Records held by a template registry are made read-only with ``freeze``;
    ``clone`` always returns a writable copy.
    """

    TAG: ClassVar[str] = ""

    _read_only: bool = PrivateAttr(default=False)

    def __setattr__(self, name, value):
        if not name.startswith("_") and getattr(self, "_read_only", False):
            raise TypeError(f"{type(self).__name__} is read-only; modify a copy returned by clone()")
        super().__setattr__(name, value)

    def attributes(self) -> dict:
        attrs = {}
        for name, field in type(self).model_fields.items():
            if field.annotation is str:
                attrs[field.alias or name] = getattr(self, name)
        return attrs

    def children(self) -> list:
        return []

    def to_element(self):
        """Return the lxml element for this record."""
        element = etree.Element(self.TAG)
        for key, value in self.attributes().items():
            element.set(key, value)
        for child in self.children():
            element.append(child.to_element())
        return element

    def freeze(self):
        """Make this record and every nested record read-only."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, list):
                # Assignment validation would convert the tuple back to a list.
                object.__setattr__(self, name, tuple(value))
        for child in self.children():
            child.freeze()
        self._read_only = True

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    def clone(self):
        """Return an independent, writable copy of this record."""
        copy = self.model_copy(update=self._clone_nested())
        copy._read_only = False
        return copy

    def _clone_nested(self) -> dict:
        return {}


class AnalogValue(XdfElementModel):
    TAG: ClassVar[str] = "AnalogValue"

    name: str = Field(default="", alias="Name")
    archive: str = Field(default="", alias="Archive")
    info_name: str = Field(default="", alias="InfoName")


class AnalogInfo(XdfElementModel):
    TAG: ClassVar[str] = "AnalogInfo"

    name: str = Field(default="", alias="Name")
    value: str = Field(default="", alias="Value")
    info_name: str = Field(default="", alias="InfoName")


class Analog(XdfElementModel):
    """Analog measurement"""

    TAG: ClassVar[str] = ElementKind.ANALOG.value

    name: str = Field(default="", alias="Name")
    unit_of_measure: str = Field(default="", alias="UnitOfMeasure")
    weighting_se: str = Field(default="", alias="WeightingSE")
    multiplier: str = Field(default="", alias="Multiplier")
    element_type: str = Field(default="", alias="ElementType")
    phases: str = Field(default="", alias="Phases")
    element_name: str = Field(default="", alias="ElementName")
    measurement_type: str = Field(default="", alias="MeasurementType")
    area_of_responsibility_id: str = Field(default="", alias="AreaOfResponsibilityId")
    analog_value: Optional[AnalogValue] = Field(default=None, alias="AnalogValue")
    analog_info: Optional[AnalogInfo] = Field(default=None, alias="AnalogInfo")

    def children(self):
        return [x for x in (self.analog_value, self.analog_info) if x is not None]

    def _clone_nested(self):
        return {
            "analog_value": None if self.analog_value is None else self.analog_value.clone(),
            "analog_info": None if self.analog_info is None else self.analog_info.clone(),
        }


class DiscreteValue(XdfElementModel):
    TAG: ClassVar[str] = "DiscreteValue"

    name: str = Field(default="", alias="Name")
    info_name: str = Field(default="", alias="InfoName")


class DiscreteInfo(XdfElementModel):
    TAG: ClassVar[str] = "DiscreteInfo"

    name: str = Field(default="", alias="Name")
    value: str = Field(default="", alias="Value")
    info_name: str = Field(default="", alias="InfoName")


class Discrete(XdfElementModel):
    """Discrete state"""

    TAG: ClassVar[str] = ElementKind.DISCRETE.value

    name: str = Field(default="", alias="Name")
    element_type: str = Field(default="", alias="ElementType")
    element_name: str = Field(default="", alias="ElementName")
    measurement_type: str = Field(default="", alias="MeasurementType")
    area_of_responsibility_id: str = Field(default="", alias="AreaOfResponsibilityId")
    discrete_value: Optional[DiscreteValue] = Field(default=None, alias="DiscreteValue")
    discrete_info: Optional[DiscreteInfo] = Field(default=None, alias="DiscreteInfo")

    def children(self):
        return [x for x in (self.discrete_value, self.discrete_info) if x is not None]

    def _clone_nested(self):
        return {
            "discrete_value": None if self.discrete_value is None else self.discrete_value.clone(),
            "discrete_info": None if self.discrete_info is None else self.discrete_info.clone(),
        }


class Terminal(XdfElementModel):
    """Breaker terminal as defined in a template"""

    TAG: ClassVar[str] = "Terminal"

    name: str = Field(default="", alias="Name")
    equip_end: str = Field(default="", alias="EquipEnd")


class Breaker(XdfElementModel):
    """Breaker with its terminals and embedded state"""

    TAG: ClassVar[str] = ElementKind.BREAKER.value

    name: str = Field(default="", alias="Name")
    flow_breaker_flag: str = Field(default="", alias="FlowBreakerFlag")
    volt_mag_limit_ca: str = Field(default="", alias="VoltMagLimitCA")
    dms_flag: str = Field(default="", alias="DMSFlag")
    area_of_responsibility_id: str = Field(default="", alias="AreaOfResponsibilityId")
    terminals: List[Terminal] = Field(default_factory=list, alias="Terminals")
    discrete: Optional[Discrete] = Field(default=None, alias="Discrete")

    def children(self):
        children = list(self.terminals)
        if self.discrete is not None:
            children.append(self.discrete)
        return children

    def _clone_nested(self):
        return {
            "terminals": [x.clone() for x in self.terminals],
            "discrete": None if self.discrete is None else self.discrete.clone(),
        }


class IfsPointLink(XdfElementModel):
    """Cross-reference from an addressing point to its network-model element"""

    TAG: ClassVar[str] = "Link_IfsPointLinksToInfo"

    path_b: str = Field(default="", alias="PathB")


class IfsPoint(XdfElementModel):
    """Monitoring/control point of the addressing document"""

    TAG: ClassVar[str] = ElementKind.IFS_POINT.value

    name: str = Field(default="", alias="Name")
    mon_addr_high: str = Field(default="", alias="MonAddrHigh")
    mon_addr_low: str = Field(default="", alias="MonAddrLow")
    mon_addr_middle: str = Field(default="", alias="MonAddrMiddle")
    mon_type: str = Field(default="", alias="MonType")
    con_addr_high: str = Field(default="", alias="ConAddrHigh")
    con_addr_low: str = Field(default="", alias="ConAddrLow")
    con_addr_middle: str = Field(default="", alias="ConAddrMiddle")
    con_type: str = Field(default="", alias="ConType")
    select_before: str = Field(default="", alias="SelectBefore")
    link: Optional[IfsPointLink] = Field(default=None, alias="Link_IfsPointLinksToInfo")

    def children(self):
        return [] if self.link is None else [self.link]

    def _clone_nested(self):
        return {"link": None if self.link is None else self.link.clone()}


class TerminalMeasurementLink(XdfElementModel):
    """Link from a breaker terminal to a measurement element"""

    TAG: ClassVar[str] = "Link_TerminalMeasuredByMeasurement"

    path_b: str = Field(default="", alias="PathB")


class LinkedTerminal(XdfElementModel):
    """Breaker terminal carrying its measurement links"""

    TAG: ClassVar[str] = "Terminal"

    name: str = Field(default="", alias="Name")
    links: List[TerminalMeasurementLink] = Field(default_factory=list)

    def children(self):
        return list(self.links)

    def _clone_nested(self):
        return {"links": [x.clone() for x in self.links]}


TemplateElement = Union[Analog, Discrete, Breaker, IfsPoint]

VARIANTS = {
    ElementKind.ANALOG: Analog,
    ElementKind.DISCRETE: Discrete,
    ElementKind.BREAKER: Breaker,
    ElementKind.IFS_POINT: IfsPoint,
}


class ElementTemplate(ScadaXdfBaseModel):
    """Element definition keyed by its element code.

    Exactly one variant is held in ``element``. A registry freezes the
    element; ``clone`` returns a template holding a writable copy.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    element: TemplateElement

    @property
    def kind(self) -> ElementKind:
        return get_enum_from_value(ElementKind, self.element.TAG)

    @classmethod
    def from_definition(cls, code: str, definition: dict):
        """Build a template from its definition, e.g. ``{"Analog": {...}}``.

        Raises
        ------
        TemplateParseError
            Raised if the definition does not hold exactly one variant.

        """
        if not isinstance(definition, dict):
            raise TemplateParseError(f"template {code!r} must be a mapping, got {type(definition).__name__}")

        kinds = [x for x in ElementKind if definition.get(x.value) is not None]
        if len(kinds) != 1:
            found = ", ".join(x.value for x in kinds) or "none"
            raise TemplateParseError(
                f"template {code!r} must define exactly one of "
                f"{', '.join(x.value for x in ElementKind)}; found {found}"
            )

        kind = kinds[0]
        element = VARIANTS[kind].model_validate(definition[kind.value])
        return cls(code=code, element=element)

    def clone(self):
        """Return a copy whose element shares no state with this template."""
        return self.model_copy(update={"element": self.element.clone()})
