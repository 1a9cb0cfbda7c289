import abc
import enum
from typing import Any
from typing import Dict
from typing import Protocol


class Color(enum.Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


class Size(enum.IntEnum):
    SMALL = 1
    LARGE = 2


class Named(abc.ABC):
    pass


class Printable(abc.ABC):
    pass


class Base:
    pass


class Child(Base, Named, Printable):
    pass


class GrandChild(Child):
    pass


class Unrelated:
    pass


class DictConverter:
    """ObjectConverter that tags its output with a label, for identification."""

    def __init__(self, label: str) -> None:
        self.label = label

    def to_object(self, instance: Any) -> Dict[str, Any]:
        return {"label": self.label, **vars(instance)}

    def from_object(self, data: Dict[str, Any], target_type: Any) -> Any:
        obj = target_type.__new__(target_type)
        obj.__dict__.update({k: v for k, v in data.items() if k != "label"})
        return obj

    def __repr__(self) -> str:
        return f"DictConverter({self.label!r})"


class Jsonable(Protocol):
    def to_json(self) -> str: ...


class JsonDocument(Jsonable):
    def to_json(self) -> str:
        return "{}"


class Mixin:
    pass


class Middle(Base):
    pass


class MixinFirst(Mixin, Middle):
    pass
