import threading
from typing import Any
from typing import Callable
from typing import Dict
from typing import ItemsView
from typing import Mapping
from typing import Optional

from typemapper.interfaces import Adapter
from typemapper.interfaces import AdapterKey
from typemapper.log_config import logger


class AdapterRegistry:
    """
    Adapters keyed by AdapterKey.
    Read-mostly: lookups are plain dict reads, the only writes are
    insert-if-absent calls which are atomic per key.
    """

    def __init__(self, adapters: Optional[Mapping[AdapterKey, Adapter]] = None):
        self._map: Dict[AdapterKey, Adapter] = dict(adapters or {})
        self._lock = threading.Lock()

    def get(self, key: AdapterKey) -> Optional[Adapter]:
        return self._map.get(key)

    def put_if_absent(self, key: AdapterKey, adapter: Adapter) -> Adapter:
        """
        Register `adapter` unless `key` already has one.
        Returns whichever adapter ends up registered.
        """
        return self.compute_if_absent(key, lambda: adapter)

    def compute_if_absent(
        self, key: AdapterKey, factory: Callable[[], Adapter]
    ) -> Adapter:
        existing = self._map.get(key)
        if existing is not None:
            return existing
        with self._lock:
            existing = self._map.get(key)
            if existing is not None:
                return existing
            adapter = factory()
            self._map[key] = adapter
        logger.debug("Registered adapter %r for %r", adapter, key)
        return adapter

    def __getstate__(self) -> Dict[str, Any]:
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()

    def items(self) -> ItemsView[AdapterKey, Adapter]:
        return self._map.items()

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"AdapterRegistry({len(self._map)} adapters)"
