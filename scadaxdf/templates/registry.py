"""Registry of element templates keyed by element code."""

import logging
from types import MappingProxyType

from pydantic import ValidationError

from jade.utils.utils import load_data
from scadaxdf.enums import ElementKind
from scadaxdf.exceptions import EmptyTemplateRegistry, TemplateParseError
from scadaxdf.models.elements import ElementTemplate


logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Read-only store of element templates.

    Load once per run and pass the instance to the generator. Lookups return
    the stored template, whose element is read-only; callers that modify an
    element must work on the copy returned by :meth:`instantiate`.

    """

    def __init__(self, templates):
        if not templates:
            raise EmptyTemplateRegistry("the template registry is empty")
        for template in templates.values():
            template.element.freeze()
        self._templates = MappingProxyType(dict(templates))

    @classmethod
    def from_dict(cls, data):
        """Build a registry from a mapping of element code to definition.

        Parameters
        ----------
        data : dict
            e.g. ``{"I_S": {"Analog": {...}}, "CB": {"Breaker": {...}}}``

        Returns
        -------
        TemplateRegistry

        Raises
        ------
        EmptyTemplateRegistry
            Raised if data defines no templates.
        TemplateParseError
            Raised if data or one of its definitions is invalid.

        """
        if not isinstance(data, dict):
            raise TemplateParseError(f"templates must be a mapping, got {type(data).__name__}")
        if not data:
            raise EmptyTemplateRegistry("the template source does not define any element")

        templates = {}
        for code, definition in data.items():
            try:
                templates[code] = ElementTemplate.from_definition(code, definition)
            except ValidationError as exc:
                raise TemplateParseError(f"invalid template {code!r}: {exc}") from exc

        return cls(templates)

    @classmethod
    def from_file(cls, filename):
        """Load the registry from a JSON or TOML file."""
        try:
            data = load_data(str(filename))
        except (OSError, ValueError) as exc:
            raise TemplateParseError(f"could not load templates from {filename}: {exc}") from exc

        registry = cls.from_dict(data)
        logger.info("Loaded %s element templates from %s", len(registry), filename)
        return registry

    def __contains__(self, code):
        return code in self._templates

    def __len__(self):
        return len(self._templates)

    def __iter__(self):
        return iter(self._templates)

    def lookup(self, code):
        """Return the template for code or None if it is not defined."""
        return self._templates.get(code)

    def is_breaker(self, code):
        """Return True if code is defined as a Breaker template."""
        template = self.lookup(code)
        return template is not None and template.kind == ElementKind.BREAKER

    @staticmethod
    def instantiate(template):
        """Return a copy of template that shares no mutable state with it.

        Parameters
        ----------
        template : ElementTemplate

        Returns
        -------
        ElementTemplate

        """
        return template.clone()

    def stats(self):
        """Return the number of templates per variant."""
        stats = {"total": len(self._templates)}
        for kind in ElementKind:
            stats[kind.name.lower()] = 0
        for template in self._templates.values():
            stats[template.kind.name.lower()] += 1
        return stats

    def validate(self):
        """Return warnings for templates with incomplete definitions."""
        warnings = []
        for code, template in self._templates.items():
            if not template.element.name:
                warnings.append(f"template {code!r} ({template.kind.value}) has no Name")
        return warnings
