"""
Profile settings — the typed view of profile.yml.

Every key is optional. A missing profile.yml yields ``ProfileSettings()``
with the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from profilekit.core.models.fragment import Fragment, RegistrationMode


class CacheSettings(BaseModel):
    """Availability cache behaviour."""

    ttl_seconds: float | None = None      # None → records live for the session
    persist: bool = False                 # seed from / write to the snapshot file
    snapshot_file: str = ".state/command_cache.json"

    @field_validator("ttl_seconds")
    @classmethod
    def _non_negative(cls, value: float | None) -> float | None:
        if value is not None and value < 0:
            raise ValueError("ttl_seconds must be >= 0")
        return value


class HintSettings(BaseModel):
    """Install hint resolution."""

    managers: list[str] = Field(default_factory=list)   # empty → platform default order
    extra: dict[str, str] = Field(default_factory=dict)  # tool → hint, wins over the table


class FragmentSettings(BaseModel):
    """Which fragments load, and how."""

    default_mode: RegistrationMode = RegistrationMode.CONDITIONAL
    builtin: bool = True
    disabled: list[str] = Field(default_factory=list)
    custom: list[Fragment] = Field(default_factory=list)


class WarningSettings(BaseModel):
    suppress_missing_tools: bool = False


class ProfileSettings(BaseModel):
    """Root settings model — loaded from profile.yml."""

    version: int = 1

    name: str = "default"
    description: str = ""

    cache: CacheSettings = Field(default_factory=CacheSettings)
    hints: HintSettings = Field(default_factory=HintSettings)
    fragments: FragmentSettings = Field(default_factory=FragmentSettings)
    overrides: dict[str, bool] = Field(default_factory=dict)
    warnings: WarningSettings = Field(default_factory=WarningSettings)
