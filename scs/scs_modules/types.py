"""Shared type definitions for the SCS command engine."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_STANDARD_PREFIX = "/"
DEFAULT_STANDARD_DESCRIPTION = "No description."


class RegistrySettings(BaseModel):
    """Process-wide standard values applied at registration.

    A declaration without a prefix gets standard_prefix; one
    without a description gets standard_description. Setting
    either to None stores the empty string.
    """

    model_config = ConfigDict(frozen=True)

    standard_prefix: str = DEFAULT_STANDARD_PREFIX
    standard_description: str = DEFAULT_STANDARD_DESCRIPTION

    @field_validator(
        "standard_prefix", "standard_description", mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        if value is None:
            return ""
        return value
