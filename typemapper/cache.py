import threading
from dataclasses import dataclass
from typing import Any
from typing import Callable
from typing import Dict
from typing import Optional
from typing import Union

from typemapper.interfaces import ObjectConverter


@dataclass(frozen=True)
class Found:
    converter: ObjectConverter[Any]


class NotFound:
    """Resolution already attempted and nothing matched."""

    _instance: Optional["NotFound"] = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

Resolution = Union[Found, NotFound]


class ConverterCache:
    """
    Memoizes object converter resolutions per runtime type.

    Hits are lock-free dict reads. Misses are computed and stored under a
    lock, so concurrent callers for the same type all observe one outcome.
    Entries are never removed.
    """

    def __init__(self) -> None:
        self._entries: Dict[type, Resolution] = {}
        self._lock = threading.Lock()

    def get(self, cls: type) -> Optional[Resolution]:
        return self._entries.get(cls)

    def get_or_compute(
        self, cls: type, compute: Callable[[type], Resolution]
    ) -> Resolution:
        entry = self._entries.get(cls)
        if entry is not None:
            return entry
        with self._lock:
            entry = self._entries.get(cls)
            if entry is None:
                entry = compute(cls)
                self._entries[cls] = entry
        return entry

    def __getstate__(self) -> Dict[str, Any]:
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()

    def __contains__(self, cls: object) -> bool:
        return cls in self._entries

    def __len__(self) -> int:
        return len(self._entries)
