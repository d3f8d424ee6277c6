"""
Tests for page strategy resolution with fallback to the default strategy.
"""
import logging

import pytest

from tal.strategies.resolver import StrategyResolver, DEFAULT_PAGE_STRATEGY

RESOLVER_LOGGER = "tal.strategies.resolver"


def test_primary_strategy_hit(resolver, fake_store):
    """An element present in the requested strategy is returned without a fallback."""
    assert resolver.resolve("html5", "doctype") == "<!DOCTYPE html>"
    assert fake_store.calls == [("html5", "doctype")]

def test_fallback_to_default_strategy(resolver, fake_store):
    """A missing element is looked up in the default strategy."""
    assert resolver.resolve("html5", "rootelement") == "<html>"
    assert fake_store.calls == [("html5", "rootelement"), ("default", "rootelement")]

def test_unknown_strategy_falls_back(resolver):
    assert resolver.resolve("maple", "doctype") == "<!DOCTYPE default>"

def test_empty_strategy_name_falls_back(resolver):
    assert resolver.resolve("", "doctype") == "<!DOCTYPE default>"

def test_double_miss_returns_empty_string(resolver, fake_store):
    assert resolver.resolve("html5", "body") == ""
    assert fake_store.calls == [("html5", "body"), ("default", "body")]

def test_double_miss_is_logged(resolver, caplog):
    with caplog.at_level(logging.WARNING, logger=RESOLVER_LOGGER):
        resolver.resolve("maple", "header")
    assert "unresolved" in caplog.text
    assert "maple" in caplog.text
    assert "header" in caplog.text

def test_fallback_is_logged_at_debug(resolver, caplog):
    with caplog.at_level(logging.DEBUG, logger=RESOLVER_LOGGER):
        resolver.resolve("maple", "doctype")
    assert "Falling back" in caplog.text

def test_primary_hit_logs_nothing(resolver, caplog):
    with caplog.at_level(logging.DEBUG, logger=RESOLVER_LOGGER):
        resolver.resolve("html5", "mimetype")
    assert caplog.text == ""

def test_lookup_distinguishes_unresolved(resolver):
    assert resolver.lookup("html5", "body") is None
    assert resolver.lookup("html5", "rootelement") == "<html>"

def test_results_are_not_cached(resolver, fake_store):
    resolver.resolve("html5", "doctype")
    resolver.resolve("html5", "doctype")
    assert fake_store.calls == [("html5", "doctype"), ("html5", "doctype")]

def test_custom_default_strategy(fake_store):
    resolver = StrategyResolver(fake_store, default_strategy="html5")
    assert resolver.resolve("maple", "mimetype") == "text/html"
    assert fake_store.calls == [("maple", "mimetype"), ("html5", "mimetype")]

def test_default_strategy_name():
    assert DEFAULT_PAGE_STRATEGY == "default"

def test_store_errors_other_than_not_found_propagate(fake_store):
    """Only misses trigger the fallback; other store failures reach the caller."""
    class BrokenStore(type(fake_store)):
        def get_page_strategy_element(self, strategy_name, element_name):
            raise RuntimeError("store offline")

    with pytest.raises(RuntimeError):
        StrategyResolver(BrokenStore()).resolve("html5", "doctype")
