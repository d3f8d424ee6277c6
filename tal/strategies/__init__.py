"""
TAL Page Strategies Package
"""

from tal.strategies.store import (
    PageStrategyStore, FilesystemPageStrategyStore, InMemoryPageStrategyStore,
    PAGE_STRATEGY_ELEMENTS
)
from tal.strategies.resolver import StrategyResolver, DEFAULT_PAGE_STRATEGY

__all__ = [
    'PageStrategyStore', 'FilesystemPageStrategyStore', 'InMemoryPageStrategyStore',
    'PAGE_STRATEGY_ELEMENTS', 'StrategyResolver', 'DEFAULT_PAGE_STRATEGY'
]
