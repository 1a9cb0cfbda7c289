import codecs
import functools
from enum import Enum
from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import PrivateAttr
from pydantic import field_validator

from typemapper import hierarchy
from typemapper.cache import NOT_FOUND
from typemapper.cache import ConverterCache
from typemapper.cache import Found
from typemapper.cache import Resolution
from typemapper.converters.adapter import ConverterAdapter
from typemapper.converters.enum_converter import EnumConverter
from typemapper.interfaces import Adapter
from typemapper.interfaces import AdapterKey
from typemapper.interfaces import ObjectConverter
from typemapper.log_config import logger
from typemapper.registry.adapters import AdapterRegistry
from typemapper.registry.object_converters import ObjectConverterRegistry

# cmp-style comparator: negative, zero or positive
AttributeOrder = Callable[[str, str], int]


class AccessMode(str, Enum):
    """How the hosting mapper reads and writes attribute values."""

    FIELD = "field"
    METHOD = "method"
    STRICT_METHOD = "strict-method"
    FIELD_AND_METHOD = "field-and-method"


class MapperConfig(BaseModel):
    """
    Runtime configuration shared by every (de)serialization call of a mapper.

    Flags and registries are fixed at construction. Converter resolutions are
    memoized in a private, thread-safe cache owned by the instance.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    version: int = -1
    close: bool = False
    skip_null: bool = True
    skip_empty_array: bool = False
    treat_byte_array_as_base64: bool = False
    treat_byte_array_as_base64_url: bool = False
    read_attribute_before_write: bool = False
    access_mode: AccessMode = AccessMode.FIELD
    encoding: str = "utf-8"
    attribute_order: Optional[AttributeOrder] = None
    adapters: AdapterRegistry = Field(default_factory=AdapterRegistry)
    object_converters: ObjectConverterRegistry = Field(
        default_factory=ObjectConverterRegistry
    )

    _converter_cache: ConverterCache = PrivateAttr(default_factory=ConverterCache)

    @field_validator("encoding")
    @classmethod
    def _normalize_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError:
            raise ValueError(f"Unknown encoding '{value}'") from None

    @field_validator("adapters", mode="before")
    @classmethod
    def _wrap_adapters(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return AdapterRegistry(value)
        return value

    @field_validator("object_converters", mode="before")
    @classmethod
    def _wrap_object_converters(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return ObjectConverterRegistry(value)
        return value

    def find_adapter(self, tp: Any) -> Optional[Adapter]:
        """
        Adapter converting `tp` to its string form, or None.

        Enum classes without a registered adapter get one synthesized on
        demand and stored under AdapterKey(str, tp).
        """
        adapter = self.adapters.get(AdapterKey(tp, str))
        if adapter is not None:
            return adapter
        # Enum, IntEnum and other member-less bases have nothing to convert
        if isinstance(tp, type) and issubclass(tp, Enum) and tp.__members__:
            return self.adapters.compute_if_absent(
                AdapterKey(str, tp), lambda: _enum_adapter(tp)
            )
        return None

    def find_object_converter(
        self, cls: Optional[type]
    ) -> Optional[ObjectConverter[Any]]:
        """
        Search for an ObjectConverter for the given class.

        A converter registered on `cls` itself always wins. Otherwise the
        hierarchy is walked from `cls` upwards: at each level the class is
        checked first, then the interfaces it declares in declaration order,
        then its superclass. When several declared interfaces have a
        converter the first one declared is taken. Ancestors that chain never
        reaches, such as those behind a mixin listed first, are tried last in
        MRO order.

        The outcome, including a miss, is cached per class.

        Raises:
            ValueError: if `cls` is None
            TypeError: if `cls` is not a class
        """
        if cls is None:
            raise ValueError("type must not be None")
        if not isinstance(cls, type):
            msg = f"Expected a class, got {cls!r}"
            logger.error(msg)
            raise TypeError(msg)

        resolution = self._converter_cache.get_or_compute(cls, self._resolve)
        if isinstance(resolution, Found):
            return resolution.converter
        return None

    def _resolve(self, cls: type) -> Resolution:
        # membership instead of issubclass(): plain Protocols reject class checks
        lineage = hierarchy.ancestors(cls)
        inherited = set(lineage)
        candidates: Dict[type, ObjectConverter[Any]] = {}
        scanned = 0
        for declared_type, converter in self.object_converters.items():
            scanned += 1
            if declared_type is cls:
                logger.debug(
                    "Exact object converter match for '%s'", cls.__qualname__
                )
                return Found(converter)
            if declared_type in inherited:
                candidates[declared_type] = converter
        logger.debug(
            "Scanned %d object converters for '%s' (%d candidates)",
            scanned,
            cls.__qualname__,
            len(candidates),
        )
        if not candidates:
            return NOT_FOUND

        for current, interfaces in hierarchy.walk(cls):
            converter = candidates.get(current)
            if converter is not None:
                return Found(converter)
            for interface in interfaces:
                converter = candidates.get(interface)
                if converter is not None:
                    return Found(converter)

        # ancestors hidden behind a mixin listed first
        for ancestor in lineage:
            converter = candidates.get(ancestor)
            if converter is not None:
                logger.debug(
                    "Resolved '%s' through its MRO via '%s'",
                    cls.__qualname__,
                    ancestor.__qualname__,
                )
                return Found(converter)
        return NOT_FOUND

    def cached_types(self) -> int:
        return len(self._converter_cache)

    def sort_attributes(self, names: Iterable[str]) -> List[str]:
        if self.attribute_order is None:
            return list(names)
        return sorted(names, key=functools.cmp_to_key(self.attribute_order))

    def model_copy(
        self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False
    ) -> "MapperConfig":
        copied = super().model_copy(update=update, deep=deep)
        # resolutions depend on the registries, a copy starts empty
        copied._converter_cache = ConverterCache()
        return copied


def _enum_adapter(enum_type: type) -> Adapter:
    logger.debug("Synthesized enum adapter for '%s'", enum_type.__qualname__)
    return ConverterAdapter(EnumConverter(enum_type))
