from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

C = TypeVar("C", bound=type)

MARKERS_ATTR = "__bindwire_markers__"


class MarkerKind(Enum):
    """Owner categories a declaration can be marked with."""

    ACTIVITY_OWNER = "activity_owner"
    FRAGMENT_OWNER = "fragment_owner"


def bind_fragment(cls: C) -> C:
    """Mark a fragment class as an owner that needs a generated binding branch.

    Examples:
        .. code-block:: python

            @bind_fragment
            class ProfileFragment(BaseFragment[ProfileBinding]): ...

    """
    return _mark(cls, MarkerKind.FRAGMENT_OWNER)


def bind_activity(cls: C) -> C:
    """Mark an activity class as an owner that needs a generated binding branch."""
    return _mark(cls, MarkerKind.ACTIVITY_OWNER)


def markers_of(cls: Any) -> frozenset[MarkerKind]:
    """Return the markers declared directly on ``cls``.

    Markers are not inherited: a subclass of a marked owner is unmarked unless
    it is decorated itself.

    Args:
        cls: Class to inspect.

    """
    return vars(cls).get(MARKERS_ATTR, frozenset())


def _mark(cls: C, kind: MarkerKind) -> C:
    setattr(cls, MARKERS_ATTR, markers_of(cls) | {kind})
    return cls


__all__ = [
    "MARKERS_ATTR",
    "MarkerKind",
    "bind_activity",
    "bind_fragment",
    "markers_of",
]
