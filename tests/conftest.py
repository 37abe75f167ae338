import pytest
from django.core.cache import caches


@pytest.fixture(autouse=True)
def clear_metadata_cache():
    caches["default"].clear()
    yield
    caches["default"].clear()
