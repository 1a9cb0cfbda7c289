from typing import Any
from typing import Dict
from typing import ItemsView
from typing import Iterator
from typing import Mapping
from typing import Optional

from typemapper.interfaces import ObjectConverter
from typemapper.log_config import logger


class ObjectConverterRegistry:
    """
    ObjectConverters keyed by the class (or interface) they were declared for.
    Populated once at construction and never mutated afterwards, so it can be
    iterated by any number of threads.
    """

    def __init__(
        self, converters: Optional[Mapping[type, ObjectConverter[Any]]] = None
    ) -> None:
        self._map: Dict[type, ObjectConverter[Any]] = {}
        for declared_type, converter in (converters or {}).items():
            if not isinstance(declared_type, type):
                msg = f"ObjectConverter key must be a class, got {declared_type!r}"
                logger.error(msg)
                raise TypeError(msg)
            self._map[declared_type] = converter

    def get(self, declared_type: type) -> Optional[ObjectConverter[Any]]:
        return self._map.get(declared_type)

    def items(self) -> ItemsView[type, ObjectConverter[Any]]:
        return self._map.items()

    def __iter__(self) -> Iterator[type]:
        return iter(self._map)

    def __contains__(self, declared_type: object) -> bool:
        return declared_type in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"ObjectConverterRegistry({len(self._map)} converters)"
