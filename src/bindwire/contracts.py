"""Runtime types referenced by generated binding factories."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Self


class LayoutInflater:
    """Create view hierarchies for bindings."""


class ViewGroup:
    """Container a binding root can be attached to."""

    def __init__(self) -> None:
        self.children: list[object] = []

    def add_view(self, view: object) -> None:
        self.children.append(view)


class ViewOwner:
    """Base class for objects that own a view hierarchy."""

    def __init__(self, layout_inflater: LayoutInflater | None = None) -> None:
        self.layout_inflater = layout_inflater if layout_inflater is not None else LayoutInflater()


class Fragment(ViewOwner):
    """Owner category for fragment screens."""


class FragmentActivity(ViewOwner):
    """Owner category for activity screens."""


class ViewBinding:
    """Capability contract every binding type implements.

    Owners are associated with a binding by deriving from a generic base whose
    type argument is a direct ``ViewBinding`` subclass.

    Examples:
        .. code-block:: python

            class ProfileBinding(ViewBinding): ...


            @bind_fragment
            class ProfileFragment(BaseFragment[ProfileBinding]): ...

    """

    def __init__(self, inflater: LayoutInflater, parent: ViewGroup | None) -> None:
        self.inflater = inflater
        self.parent = parent

    @classmethod
    def inflate(
        cls,
        inflater: LayoutInflater,
        parent: ViewGroup | None,
        attach_to_parent: bool,  # noqa: FBT001
    ) -> Self:
        """Create the binding, optionally attaching it to ``parent``."""
        binding = cls(inflater, parent)
        if attach_to_parent and parent is not None:
            parent.add_view(binding)
        return binding


VIEW_BINDING_CONTRACT = f"{ViewBinding.__module__}.{ViewBinding.__qualname__}"

__all__ = [
    "VIEW_BINDING_CONTRACT",
    "Fragment",
    "FragmentActivity",
    "LayoutInflater",
    "ViewBinding",
    "ViewGroup",
    "ViewOwner",
]
