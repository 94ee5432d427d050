"""
Static catalogs shipped with profilekit.

    from profilekit.core.data import builtin_fragments

    for fragment in builtin_fragments():
        ...
"""

from __future__ import annotations

from profilekit.core.data.fragments import BUILTIN_FRAGMENTS
from profilekit.core.models.fragment import Fragment


def builtin_fragments() -> list[Fragment]:
    """Validated copies of the built-in fragment table."""
    return [Fragment.model_validate(raw) for raw in BUILTIN_FRAGMENTS]
