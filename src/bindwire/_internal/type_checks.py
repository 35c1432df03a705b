from __future__ import annotations

import builtins
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_builtin_class(candidate: object) -> bool:
    """Return true when candidate is a class defined by the ``builtins`` module.

    Such classes (``int``, ``str``, ``list`` and friends) play the role of
    primitive types when declarations are collected from live classes.

    Args:
        candidate: Value being checked.

    """
    return is_runtime_class(candidate) and getattr(builtins, candidate.__name__, None) is candidate


__all__ = ["is_builtin_class", "is_runtime_class"]
