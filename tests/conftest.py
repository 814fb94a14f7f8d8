from typing import Iterator

import pytest

from warehouse_shelving.enterprise.config.settings import AppSettings, get_settings
from warehouse_shelving.persistence import InMemoryWarehouseRepository
from warehouse_shelving.services import WarehouseService


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def repository() -> InMemoryWarehouseRepository:
    return InMemoryWarehouseRepository()


@pytest.fixture
def service(repository: InMemoryWarehouseRepository) -> WarehouseService:
    return WarehouseService(repository, AppSettings())
