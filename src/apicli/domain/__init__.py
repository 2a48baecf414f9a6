"""Domain entities."""

from .entities import ApiDescriptor, RequestDescriptor, TemplateValue

__all__ = ["ApiDescriptor", "RequestDescriptor", "TemplateValue"]
