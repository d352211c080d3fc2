import pytest

from modelschema_py.registry.default_registry import DEFAULT_REGISTRY, SchemaRegistry


@pytest.fixture
def registry():
    """A fresh registry for tests that pass ``registry=`` explicitly."""
    return SchemaRegistry()


@pytest.fixture(autouse=True)
def _isolate_default_registry():
    saved = DEFAULT_REGISTRY.snapshot()
    DEFAULT_REGISTRY.clear()
    yield
    DEFAULT_REGISTRY.restore(saved)
