import enum
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from typemapper.interfaces import AdapterKey
from typemapper.registry.object_converters import ObjectConverterRegistry

from tests.sample_types import Base
from tests.sample_types import Child
from tests.sample_types import DictConverter
from tests.sample_types import GrandChild
from tests.sample_types import Unrelated


class Direction(enum.Enum):
    NORTH = 1
    SOUTH = 2


class SlowRegistry(ObjectConverterRegistry):
    """Widens the race window by pausing every scan until all threads arrive."""

    def __init__(self, converters, parties):
        super().__init__(converters)
        self.scans = 0
        self._barrier = threading.Barrier(parties, timeout=0.2)

    def items(self):
        self.scans += 1
        try:
            self._barrier.wait()
        except threading.BrokenBarrierError:
            pass
        return super().items()


@pytest.mark.parametrize("workers", [2, 8, 32])
def test_concurrent_enum_adapter_synthesis(config, workers):
    barrier = threading.Barrier(workers)

    def resolve(_):
        barrier.wait()
        return config.find_adapter(Direction)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        adapters = list(pool.map(resolve, range(workers)))

    assert len({id(a) for a in adapters}) == 1
    assert config.adapters.get(AdapterKey(str, Direction)) is adapters[0]
    assert len(config.adapters) == 1


@pytest.mark.parametrize("workers", [2, 8])
def test_concurrent_converter_resolution_scans_once(make_config, workers):
    base_conv = DictConverter("base")
    registry = SlowRegistry({Base: base_conv}, parties=workers)
    cfg = make_config(object_converters=registry)
    start = threading.Barrier(workers)

    def resolve(_):
        start.wait()
        return cfg.find_object_converter(Child)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(resolve, range(workers)))

    assert all(r is base_conv for r in results)
    assert registry.scans == 1
    assert cfg.cached_types() == 1


def test_concurrent_mixed_types(make_config):
    base_conv = DictConverter("base")
    cfg = make_config(object_converters={Base: base_conv})
    types = [Base, Child, GrandChild, Unrelated] * 25

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(cfg.find_object_converter, types))

    for cls, result in zip(types, results):
        expected = None if cls is Unrelated else base_conv
        assert result is expected
    assert cfg.cached_types() == 4
