"""
Page strategy stores.

A page strategy is a named bundle of presentation rules (doctype, mimetype, root
element, extra <head> and <body> markup) selected per class of device. The data
itself lives outside this package; a store is the capability used to read it.
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from tal.core.errors import StrategyNotFoundError
from tal.utils.logging import get_logger
from tal.utils.paths import is_path_segment

logger = get_logger(__name__)

# Element names understood by every page strategy
DOCTYPE = "doctype"
MIMETYPE = "mimetype"
ROOT_ELEMENT = "rootelement"
HEADER = "header"
BODY = "body"

PAGE_STRATEGY_ELEMENTS = (DOCTYPE, MIMETYPE, ROOT_ELEMENT, HEADER, BODY)


class PageStrategyStore(ABC):
    """Base interface for page strategy element lookups."""

    @abstractmethod
    def get_page_strategy_element(self, strategy_name: str, element_name: str) -> str:
        """
        Return one element of a page strategy.

        Args:
            strategy_name: Name of the page strategy, e.g. "html5" or "default"
            element_name: Element to return, e.g. "doctype"

        Returns:
            The element value exactly as stored

        Raises:
            StrategyNotFoundError: If the strategy or the element does not exist
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the store."""
        pass


class FilesystemPageStrategyStore(PageStrategyStore):
    """
    Reads page strategies laid out as ``{root}/{strategy}/{element}`` text files,
    the layout used by the tal-page-strategies data package.

    Bytes that are not valid in the store encoding are replaced with U+FFFD,
    so a damaged element file still yields a value.
    """

    def __init__(self, root: str, encoding: str = "utf-8"):
        self._root = os.fspath(root)
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "filesystem"

    @property
    def root(self) -> str:
        return self._root

    def get_page_strategy_element(self, strategy_name: str, element_name: str) -> str:
        if not (is_path_segment(strategy_name) and is_path_segment(element_name)):
            raise StrategyNotFoundError(strategy_name, element_name)

        path = os.path.join(self._root, strategy_name, element_name)
        try:
            with open(path, "r", encoding=self._encoding, errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.debug("Could not read page strategy element", path=path, error=str(e))
            raise StrategyNotFoundError(strategy_name, element_name) from e


class InMemoryPageStrategyStore(PageStrategyStore):
    """Serves page strategies from a ``{strategy: {element: value}}`` mapping."""

    def __init__(self, strategies: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._strategies: Dict[str, Dict[str, str]] = {
            strategy: dict(elements) for strategy, elements in (strategies or {}).items()
        }

    @property
    def name(self) -> str:
        return "in_memory"

    def get_page_strategy_element(self, strategy_name: str, element_name: str) -> str:
        elements = self._strategies.get(strategy_name)
        if elements is None or element_name not in elements:
            raise StrategyNotFoundError(strategy_name, element_name)
        return elements[element_name]

