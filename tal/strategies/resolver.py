"""
Page strategy element resolution with fallback to the default strategy.
"""

from typing import Optional

from tal.core.errors import StrategyNotFoundError
from tal.strategies.store import PageStrategyStore
from tal.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PAGE_STRATEGY = "default"


class StrategyResolver:
    """
    Looks up page strategy elements, falling back to the default strategy on a miss.

    Every call queries the store; nothing is cached between calls.
    """

    def __init__(self, store: PageStrategyStore, default_strategy: str = DEFAULT_PAGE_STRATEGY):
        self.store = store
        self.default_strategy = default_strategy

    def resolve(self, strategy_name: str, element_name: str) -> str:
        """
        Return an element of the page strategy, or of the default strategy if the first lookup misses.

        If the default strategy has no such element either, the miss is logged
        and an empty string is returned.
        """
        value = self.lookup(strategy_name, element_name)
        if value is None:
            logger.warning(
                "Page strategy element unresolved",
                strategy=strategy_name,
                element=element_name,
                default_strategy=self.default_strategy,
            )
            return ""
        return value

    def lookup(self, strategy_name: str, element_name: str) -> Optional[str]:
        """Same two-step lookup as resolve(), returning None when neither strategy has the element."""
        value = self._find(strategy_name, element_name)
        if value is not None:
            return value

        logger.debug(
            "Falling back to default page strategy",
            strategy=strategy_name,
            element=element_name,
            default_strategy=self.default_strategy,
        )
        return self._find(self.default_strategy, element_name)

    def _find(self, strategy_name: str, element_name: str) -> Optional[str]:
        try:
            return self.store.get_page_strategy_element(strategy_name, element_name)
        except StrategyNotFoundError:
            return None
