"""
Models package for TAL device configuration values.
"""

from tal.models.device import DeviceConfig, PageElements

__all__ = ['DeviceConfig', 'PageElements']
