from .registry import TemplateRegistry
