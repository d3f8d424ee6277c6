"""
Device facade: loads device configurations and exposes the page strategy
elements (doctype, mimetype, root element, <head> and <body> markup) that the
HTTP response for a device needs.

Example:
    framework = DeviceFacade("./config", store=FilesystemPageStrategyStore("./pagestrategy"))
    device = framework.load_config("default-webkit-default", "devices")
    doctype = framework.get_doc_type(device)
"""

import json
from typing import Optional

from pydantic import ValidationError

from tal import config
from tal.core.config_loader import ConfigLoader
from tal.core.errors import DeserializationError
from tal.models.device import DeviceConfig, PageElements
from tal.strategies.resolver import StrategyResolver
from tal.strategies.store import (
    PageStrategyStore, FilesystemPageStrategyStore,
    DOCTYPE, MIMETYPE, ROOT_ELEMENT, HEADER, BODY
)
from tal.utils.logging import get_logger

logger = get_logger(__name__)


class DeviceFacade:
    """Entry point for device configuration and page strategy lookups."""

    def __init__(self, config_path: str,
                 store: Optional[PageStrategyStore] = None,
                 resolver: Optional[StrategyResolver] = None):
        """
        Initialize the facade.

        Args:
            config_path: Root directory of device configuration files
            store: Page strategy store; used to build a resolver when none is given
            resolver: Strategy resolver to use instead of one built from store
        """
        if resolver is None:
            if store is None:
                raise ValueError("Either a page strategy store or a resolver is required")
            resolver = StrategyResolver(store)
        self._loader = ConfigLoader(config_path)
        self._resolver = resolver

    @classmethod
    def from_settings(cls) -> 'DeviceFacade':
        """Build a facade from the environment driven settings in tal.config."""
        store = FilesystemPageStrategyStore(config.TAL_PAGE_STRATEGY_PATH)
        resolver = StrategyResolver(store, default_strategy=config.TAL_DEFAULT_PAGE_STRATEGY)
        return cls(config.TAL_CONFIG_PATH, resolver=resolver)

    @property
    def config_path(self) -> str:
        return self._loader.config_path

    @property
    def resolver(self) -> StrategyResolver:
        return self._resolver

    def get_doc_type(self, device: DeviceConfig) -> str:
        """Return the doctype required by the device."""
        return self._resolver.resolve(device.page_strategy, DOCTYPE)

    def get_mime_type(self, device: DeviceConfig) -> str:
        """Return the HTTP mimetype required by the device."""
        return self._resolver.resolve(device.page_strategy, MIMETYPE)

    def get_root_html_tag(self, device: DeviceConfig) -> str:
        """Return the root HTML tag required by the device."""
        return self._resolver.resolve(device.page_strategy, ROOT_ELEMENT)

    def get_device_headers(self, device: DeviceConfig) -> str:
        """Return any extra markup to be placed in the HTML <head> for the device."""
        return self._resolver.resolve(device.page_strategy, HEADER)

    def get_device_body(self, device: DeviceConfig) -> str:
        """Return any extra markup to be placed in the HTML <body> for the device."""
        return self._resolver.resolve(device.page_strategy, BODY)

    def get_page_elements(self, device: DeviceConfig) -> PageElements:
        """Resolve all page strategy elements for the device."""
        return PageElements(
            doctype=self.get_doc_type(device),
            mimetype=self.get_mime_type(device),
            root_element=self.get_root_html_tag(device),
            header=self.get_device_headers(device),
            body=self.get_device_body(device),
        )

    def get_configuration_from_filesystem(self, key: str, sub_dir: str) -> str:
        """
        Return the JSON device configuration for ``key`` as text.

        Args:
            key: Unique device identifier, typically "brand-model"
            sub_dir: Sub-directory where the device configuration is located

        Raises:
            OSError: If the configuration file is missing or unreadable
            DeserializationError: If the file is not UTF-8 text
        """
        try:
            return self._loader.load(key, sub_dir)
        except UnicodeDecodeError as e:
            source = self._loader.path_for(key, sub_dir)
            raise DeserializationError(f"Device configuration is not UTF-8 text: {e}", source=source) from e

    def load_config(self, key: str, sub_dir: str) -> DeviceConfig:
        """
        Load and parse the device configuration for ``key``.

        Raises:
            OSError: If the configuration file is missing or unreadable
            DeserializationError: If the file is not UTF-8 text, or not a JSON object with a string PageStrategy
        """
        try:
            raw = self.get_configuration_from_filesystem(key, sub_dir)
            return self.parse_config(raw)
        except DeserializationError as e:
            e.source = self._loader.path_for(key, sub_dir)
            logger.error("Invalid device configuration", key=key, path=e.source, error=str(e))
            raise

    @staticmethod
    def parse_config(raw: str) -> DeviceConfig:
        """
        Parse a JSON device configuration document.

        Raises:
            DeserializationError: If the document is malformed or has the wrong shape
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DeserializationError(f"Device configuration is not valid JSON: {e}") from e

        try:
            return DeviceConfig.model_validate(data)
        except ValidationError as e:
            raise DeserializationError(f"Device configuration has an unexpected shape: {e}") from e
