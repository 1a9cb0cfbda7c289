from enum import Enum
from typing import Dict
from typing import Type
from typing import TypeVar

from typemapper.interfaces import Converter

E = TypeVar("E", bound=Enum)


class EnumConverter(Converter[E]):
    """
    Enum member ↔ constant name converter.
    """

    def __init__(self, enum_type: Type[E]) -> None:
        self._enum_type = enum_type
        # aliases resolve to their canonical member, as with enum_type[name]
        self._members: Dict[str, E] = dict(enum_type.__members__)

    @property
    def enum_type(self) -> Type[E]:
        return self._enum_type

    def to_string(self, instance: E) -> str:
        if not isinstance(instance, self._enum_type):
            raise TypeError(
                f"Expected {self._enum_type.__name__}, got {type(instance)}"
            )
        return instance.name

    def from_string(self, text: str) -> E:
        try:
            return self._members[text]
        except KeyError:
            raise ValueError(
                f"{text!r} is not a valid {self._enum_type.__name__} constant"
            ) from None

    def __repr__(self) -> str:
        return f"EnumConverter({self._enum_type.__name__})"
