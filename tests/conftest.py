"""
Shared test fixtures for the TAL page strategy layer.
"""
import os
import pytest

from tal.core.device_facade import DeviceFacade
from tal.core.errors import StrategyNotFoundError
from tal.strategies.resolver import StrategyResolver
from tal.strategies.store import PageStrategyStore, FilesystemPageStrategyStore

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


class FakePageStrategyStore(PageStrategyStore):
    """A page strategy store with fixed answers that records every lookup."""
    def __init__(self, elements=None):
        self._elements = dict(elements or {})
        self.calls = []

    def get_page_strategy_element(self, strategy_name, element_name):
        self.calls.append((strategy_name, element_name))
        key = (strategy_name, element_name)
        if key not in self._elements:
            raise StrategyNotFoundError(strategy_name, element_name)
        return self._elements[key]

    @property
    def name(self):
        return "fake"


@pytest.fixture
def fixtures_dir():
    """Return the root directory of the test fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def fake_store():
    """Return a fake store knowing one custom strategy and a partial default strategy."""
    return FakePageStrategyStore({
        ("html5", "doctype"): "<!DOCTYPE html>",
        ("html5", "mimetype"): "text/html",
        ("default", "doctype"): "<!DOCTYPE default>",
        ("default", "rootelement"): "<html>",
    })


@pytest.fixture
def strategy_store():
    """Return a filesystem store over the fixture page strategies."""
    return FilesystemPageStrategyStore(os.path.join(FIXTURES_DIR, "pagestrategy"))


@pytest.fixture
def framework(strategy_store):
    """Return a device facade over the fixture device configs and page strategies."""
    return DeviceFacade(FIXTURES_DIR, store=strategy_store)


@pytest.fixture
def resolver(fake_store):
    """Return a resolver over the fake store."""
    return StrategyResolver(fake_store)
