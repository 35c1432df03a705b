from __future__ import annotations

import logging
from collections.abc import Iterable

from bindwire.contracts import VIEW_BINDING_CONTRACT
from bindwire.declarations import Declaration, DeclarationGraph, TypeArgumentKind
from bindwire.exceptions import BindingNotFoundError, OwnerTypeConflictError
from bindwire.scanner import OwnerType, ScannedOwner

logger = logging.getLogger(__name__)

AssociationMap = dict[OwnerType, Declaration]


class BindingResolver:
    """Resolve the binding type of a marked owner declaration.

    Resolution is a single hop: only the generic arguments of the direct
    superclass are inspected, and a candidate qualifies only when it lists the
    contract among its directly implemented interfaces. The first qualifying
    argument in declaration order wins.
    """

    def __init__(
        self,
        graph: DeclarationGraph,
        *,
        contract: str = VIEW_BINDING_CONTRACT,
    ) -> None:
        self._graph = graph
        self._contract = contract

    @property
    def contract(self) -> str:
        return self._contract

    def resolve(self, declaration: Declaration) -> Declaration:
        """Return the binding declaration associated with ``declaration``.

        Args:
            declaration: Marked owner declaration.

        Raises:
            BindingNotFoundError: If the direct superclass is missing, is not a
                declared type, or exposes no generic argument implementing the
                contract.

        """
        for candidate in self.candidates(declaration):
            if candidate.implements(self._contract):
                logger.debug(
                    "Resolved binding %s for %s",
                    candidate.qualified_name,
                    declaration.qualified_name,
                )
                return candidate

        error = BindingNotFoundError(declaration.qualified_name, self._contract)
        logger.error("%s", error)
        raise error

    def candidates(self, declaration: Declaration) -> tuple[Declaration, ...]:
        """Return the declared generic arguments of the direct superclass in order."""
        superclass = declaration.superclass
        if superclass is None or not superclass.is_declared:
            return ()

        candidates: list[Declaration] = []
        for argument in superclass.arguments:
            if argument.kind is not TypeArgumentKind.DECLARED or argument.name is None:
                continue
            candidate = self._graph.get(argument.name)
            if candidate is not None:
                candidates.append(candidate)
        return tuple(candidates)


def build_association_map(
    owners: Iterable[ScannedOwner],
    resolver: BindingResolver,
    *,
    allow_overrides: bool = False,
) -> AssociationMap:
    """Resolve every scanned owner and fold the results into an association map.

    Entries keep the order of ``owners``. Re-associating an owner type with the
    same binding is a no-op.

    Args:
        owners: Scanned owners of a single marker kind.
        resolver: Resolver bound to the current declaration graph.
        allow_overrides: Keep the last binding when two owners normalize to the
            same owner type instead of failing.

    Raises:
        BindingNotFoundError: If any owner has no resolvable binding.
        OwnerTypeConflictError: If two owners share an owner type with different
            bindings and ``allow_overrides`` is false.

    """
    associations: AssociationMap = {}
    for owner in owners:
        binding = resolver.resolve(owner.declaration)
        existing = associations.get(owner.owner_type)
        if existing is not None and existing.qualified_name != binding.qualified_name:
            # The map keeps its first key object, so report that form.
            existing_key = next(key for key in associations if key == owner.owner_type)
            if not allow_overrides:
                error = OwnerTypeConflictError(
                    str(existing_key),
                    existing.qualified_name,
                    binding.qualified_name,
                )
                logger.error("%s", error)
                raise error
            logger.warning(
                "Owner type %s rebound from %s to %s",
                existing_key,
                existing.qualified_name,
                binding.qualified_name,
            )
        associations[owner.owner_type] = binding
    return associations


__all__ = ["AssociationMap", "BindingResolver", "build_association_map"]
