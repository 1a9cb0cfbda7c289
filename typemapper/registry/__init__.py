from .adapters import AdapterRegistry
from .object_converters import ObjectConverterRegistry

__all__ = [
    "AdapterRegistry",
    "ObjectConverterRegistry",
]
