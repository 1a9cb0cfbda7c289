from typing import Any

import pytest

from typemapper.config import MapperConfig


@pytest.fixture
def make_config():
    def _make(**kwargs: Any) -> MapperConfig:
        return MapperConfig(**kwargs)

    return _make


@pytest.fixture
def config():
    return MapperConfig()
