from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from bindwire.declarations import Declaration
from bindwire.markers import MarkerKind


@dataclass(frozen=True, slots=True)
class OwnerType:
    """Dispatch key of a marked owner declaration.

    Generic owners are keyed by their erased class with every type parameter
    replaced by a wildcard, so ``Screen[T, U]`` becomes ``Screen[Any, Any]``.
    The arity does not take part in equality: a raw and a parameterized form
    of one class normalize to the same key.
    """

    module: str
    name: str
    arity: int = field(default=0, compare=False)

    @property
    def qualified_name(self) -> str:
        if not self.module:
            return self.name
        return f"{self.module}.{self.name}"

    @property
    def is_generic(self) -> bool:
        return self.arity > 0

    def __str__(self) -> str:
        if not self.arity:
            return self.qualified_name
        wildcards = ", ".join(["Any"] * self.arity)
        return f"{self.qualified_name}[{wildcards}]"


@dataclass(frozen=True, slots=True)
class ScannedOwner:
    declaration: Declaration
    owner_type: OwnerType


def owner_type_of(declaration: Declaration) -> OwnerType:
    """Return the dispatch key for ``declaration``."""
    return OwnerType(
        module=declaration.module,
        name=declaration.name,
        arity=declaration.arity,
    )


def scan(declarations: Iterable[Declaration], marker_kind: MarkerKind) -> tuple[ScannedOwner, ...]:
    """Return the declarations carrying ``marker_kind`` paired with their owner types.

    Host order is preserved. An empty result means there is nothing to
    generate for that owner kind.

    Args:
        declarations: Every declaration visible to the current run.
        marker_kind: Owner category to filter for.

    """
    return tuple(
        ScannedOwner(declaration=declaration, owner_type=owner_type_of(declaration))
        for declaration in declarations
        if declaration.has_marker(marker_kind)
    )


__all__ = ["OwnerType", "ScannedOwner", "owner_type_of", "scan"]
