from .cache import NOT_FOUND
from .cache import ConverterCache
from .cache import Found
from .config import AccessMode
from .config import MapperConfig
from .converters.adapter import ConverterAdapter
from .converters.enum_converter import EnumConverter
from .interfaces import Adapter
from .interfaces import AdapterKey
from .interfaces import Converter
from .interfaces import ObjectConverter
from .log_config import configure_logging
from .registry.adapters import AdapterRegistry
from .registry.object_converters import ObjectConverterRegistry

__all__ = [
    "AccessMode",
    "Adapter",
    "AdapterKey",
    "AdapterRegistry",
    "Converter",
    "ConverterAdapter",
    "ConverterCache",
    "EnumConverter",
    "Found",
    "MapperConfig",
    "NOT_FOUND",
    "ObjectConverter",
    "ObjectConverterRegistry",
    "configure_logging",
]
