from .adapter import ConverterAdapter
from .enum_converter import EnumConverter

__all__ = [
    "ConverterAdapter",
    "EnumConverter",
]
