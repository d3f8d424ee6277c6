"""
Loads raw device configuration documents from the file system.
"""

import errno
import os

from tal.utils.logging import get_logger
from tal.utils.paths import is_path_segment

logger = get_logger(__name__)


class ConfigLoader:
    """Reads ``{config_path}/{sub_dir}/{key}.json`` documents as text."""

    def __init__(self, config_path: str):
        self._config_path = os.fspath(config_path)

    @property
    def config_path(self) -> str:
        """Root directory that device configuration paths are resolved against."""
        return self._config_path

    def path_for(self, key: str, sub_dir: str) -> str:
        """
        Build the path of a device configuration file.

        Args:
            key: Unique device identifier, typically "brand-model"
            sub_dir: Sub-directory of the configuration root holding the file.
                A leading separator is ignored, so "/devices" and "devices" are equivalent.

        Returns:
            Path to the JSON document for the device
        """
        sub_dir = sub_dir.lstrip("/\\")
        return os.path.join(self._config_path, sub_dir, f"{key}.json")

    def load(self, key: str, sub_dir: str) -> str:
        """
        Read the device configuration for ``key`` and return its contents unparsed.

        Keys that are not a single file name (absolute paths, "..", anything
        with a separator) never leave the configuration root; they are reported
        as missing files.

        Raises:
            OSError: If the file is missing or cannot be read
            UnicodeDecodeError: If the file is not UTF-8 text
        """
        path = self.path_for(key, sub_dir)
        if not is_path_segment(key):
            logger.warning("Rejected device key outside the configuration root", key=key)
            raise FileNotFoundError(errno.ENOENT, "Invalid device configuration key", path)

        logger.debug("Reading device configuration", path=path)
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
