"""
Domain models — Pydantic types for profilekit.

All models are re-exported here for convenient access:

    from profilekit.core.models import CommandAvailabilityRecord, Fragment, Receipt
"""

from profilekit.core.models.command import CommandAvailabilityRecord, RecordSource
from profilekit.core.models.fragment import Fragment, RegistrationMode, WrapperSpec
from profilekit.core.models.receipt import Receipt
from profilekit.core.models.settings import (
    CacheSettings,
    FragmentSettings,
    HintSettings,
    ProfileSettings,
    WarningSettings,
)

__all__ = [
    # command.py
    "CommandAvailabilityRecord",
    "RecordSource",
    # fragment.py
    "Fragment",
    "RegistrationMode",
    "WrapperSpec",
    # receipt.py
    "Receipt",
    # settings.py
    "CacheSettings",
    "FragmentSettings",
    "HintSettings",
    "ProfileSettings",
    "WarningSettings",
]
