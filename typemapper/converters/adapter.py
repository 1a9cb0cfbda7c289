from typing import Any

from typemapper.interfaces import Adapter
from typemapper.interfaces import Converter


class ConverterAdapter(Adapter):
    """
    Exposes a string Converter through the Adapter interface.
    """

    def __init__(self, converter: Converter[Any]) -> None:
        self._converter = converter

    @property
    def converter(self) -> Converter[Any]:
        return self._converter

    def to_representation(self, value: Any) -> str:
        return self._converter.to_string(value)

    def from_representation(self, value: Any) -> Any:
        return self._converter.from_string(value)

    def __repr__(self) -> str:
        return f"ConverterAdapter({self._converter!r})"
