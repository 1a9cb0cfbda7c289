from typing import Any
from typing import Dict
from typing import Generic
from typing import NamedTuple
from typing import Protocol
from typing import TypeVar
from typing import runtime_checkable

# Domain value type handled by a converter
T = TypeVar("T")


class AdapterKey(NamedTuple):
    """
    Identifies an exact-match adapter by its (from_type, to_type) pair.
    Order matters: AdapterKey(A, B) and AdapterKey(B, A) are distinct keys.
    """

    from_type: Any
    to_type: Any

    def __repr__(self) -> str:
        return (
            f"AdapterKey({_type_name(self.from_type)} -> "
            f"{_type_name(self.to_type)})"
        )


@runtime_checkable
class Converter(Protocol, Generic[T]):
    """Converts a domain value to and from its string form."""

    def to_string(self, instance: T) -> str: ...

    def from_string(self, text: str) -> T: ...


@runtime_checkable
class Adapter(Protocol):
    """
    Bidirectional transformation between a domain value and its
    string-shaped representation. Implementations must be stateless.
    """

    def to_representation(self, value: Any) -> Any: ...

    def from_representation(self, value: Any) -> Any: ...


@runtime_checkable
class ObjectConverter(Protocol, Generic[T]):
    """
    Converts a domain value to and from a structured (dict-shaped)
    representation. May be registered on an interface or a base class.
    """

    def to_object(self, instance: T) -> Dict[str, Any]: ...

    def from_object(self, data: Dict[str, Any], target_type: Any) -> T: ...


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", repr(tp))
