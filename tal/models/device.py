"""
Device configuration models.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DeviceConfig(BaseModel):
    """
    Per-device JSON descriptor naming the page strategy that applies to the device.

    Field names are matched case-insensitively ("PageStrategy", "pageStrategy"
    and "pagestrategy" are the same field; when several appear the last one
    wins) and unrelated keys are ignored. The Python field name page_strategy
    is also accepted so the model can be built with keyword arguments. A
    missing or null page strategy is the empty string, which no store knows, so
    such devices resolve everything through the default strategy.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    page_strategy: str = Field(default="", alias="PageStrategy")

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        matched = {}
        for key, value in data.items():
            # null leaves the field as it was
            if value is None:
                continue
            # the last matching key wins, whatever its case
            if key == "page_strategy" or (isinstance(key, str) and key.lower() == "pagestrategy"):
                matched["PageStrategy"] = value
        return matched


@dataclass(frozen=True)
class PageElements:
    """All page strategy elements resolved for one device."""
    doctype: str
    mimetype: str
    root_element: str
    header: str
    body: str
