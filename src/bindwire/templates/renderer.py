from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from textwrap import indent

from jinja2 import Environment, StrictUndefined, Template

from bindwire.artifacts import GeneratedArtifact
from bindwire.contracts import VIEW_BINDING_CONTRACT, Fragment, FragmentActivity, ViewGroup
from bindwire.declarations import Declaration
from bindwire.exceptions import BindingNotFoundAtRuntimeError
from bindwire.scanner import OwnerType
from bindwire.settings import DEFAULT_FACTORY_NAME
from bindwire.templates.templates import (
    CLASS_TEMPLATE,
    DISPATCH_METHOD_TEMPLATE,
    IMPORTS_TEMPLATE,
    MODULE_TEMPLATE,
)

_INDENT = " " * 4
_GENERATOR_SOURCE = "bindwire.templates.renderer.FactoryTemplateRenderer.render"
_MIN_OVERLOAD_COUNT = 2
_MODULE_ALIAS_PREFIX = "_m"
logger = logging.getLogger(__name__)


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True, slots=True)
class OwnerKindSpec:
    """Signature details of the dispatch method generated for one owner kind."""

    method_name: str
    owner_base: str
    label: str


FRAGMENT_SPEC = OwnerKindSpec(
    method_name="get_fragment_binding",
    owner_base=_qualified_name(Fragment),
    label="fragment",
)
ACTIVITY_SPEC = OwnerKindSpec(
    method_name="get_activity_binding",
    owner_base=_qualified_name(FragmentActivity),
    label="activity",
)

_CONTAINER_TYPE = _qualified_name(ViewGroup)
_DISPATCH_ERROR = _qualified_name(BindingNotFoundAtRuntimeError)


@dataclass(frozen=True, slots=True)
class OverloadPlan:
    owner_annotation: str
    binding_annotation: str


class ModuleAliases:
    """Aliases of the modules imported by a generated factory module.

    Modules are imported as ``_m0``, ``_m1``, ... in sorted order, so a
    generated reference never resolves through a top-level package name that
    a parameter or local of the dispatch methods could shadow.
    """

    def __init__(self, modules: Iterable[str]) -> None:
        self._aliases = {
            module: f"{_MODULE_ALIAS_PREFIX}{index}"
            for index, module in enumerate(sorted({module for module in modules if module}))
        }

    @property
    def imports(self) -> list[tuple[str, str]]:
        return list(self._aliases.items())

    def reference(self, module: str, name: str) -> str:
        """Return the expression naming ``name`` from ``module`` in generated code."""
        if not module:
            return name
        return f"{self._aliases[module]}.{name}"

    def reference_qualified(self, qualified_name: str) -> str:
        module, _, name = qualified_name.rpartition(".")
        return self.reference(module, name)


class FactoryTemplateRenderer:
    """Renderer for the generated binding factory module.

    The module holds one class with a dispatch method per owner kind. Each
    method walks the association map in order with ``isinstance`` checks and
    builds the matching binding through its ``inflate`` entry point. The
    trailing branch raises ``BindingNotFoundAtRuntimeError``.

    Methods return the binding contract type. Two or more owners get one
    ``typing.overload`` each so callers see the precise binding type; a single
    owner gets the precise types in the method signature itself.
    """

    def __init__(
        self,
        *,
        factory_name: str = DEFAULT_FACTORY_NAME,
        package: str = "factory",
        module: str = "binding_factory",
        binding_contract: str = VIEW_BINDING_CONTRACT,
    ) -> None:
        self._factory_name = factory_name
        self._package = package
        self._module = module
        self._binding_contract = binding_contract
        self._env = Environment(
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._module_template = self._template(MODULE_TEMPLATE)
        self._imports_template = self._template(IMPORTS_TEMPLATE)
        self._class_template = self._template(CLASS_TEMPLATE)
        self._dispatch_method_template = self._template(DISPATCH_METHOD_TEMPLATE)

    def render(
        self,
        *,
        fragment_map: Mapping[OwnerType, Declaration],
        activity_map: Mapping[OwnerType, Declaration],
    ) -> GeneratedArtifact:
        """Render the binding factory module for the given association maps.

        Args:
            fragment_map: Fragment owner types mapped to their bindings.
            activity_map: Activity owner types mapped to their bindings.

        Returns:
            The generated module. Identical maps always produce identical text.

        """
        maps = ((FRAGMENT_SPEC, fragment_map), (ACTIVITY_SPEC, activity_map))
        logger.info(
            "Binding factory codegen: fragment_owner_count=%d activity_owner_count=%d",
            len(fragment_map),
            len(activity_map),
        )

        aliases = self._module_aliases(maps=maps)
        methods_block = "\n\n".join(
            indent(
                self._render_dispatch_method(spec=spec, associations=associations, aliases=aliases),
                _INDENT,
            )
            for spec, associations in maps
        )
        class_block = self._class_template.render(
            class_name=self._factory_name,
            class_docstring="Create view bindings for marked view owners.",
            methods_block=methods_block,
        )
        source = self._module_template.render(
            module_docstring_block=self._render_module_docstring(
                fragment_count=len(fragment_map),
                activity_count=len(activity_map),
            ),
            imports_block=self._render_imports(maps=maps, aliases=aliases),
            class_block=class_block,
            class_name=self._factory_name,
        )
        return GeneratedArtifact(
            package=self._package,
            module=self._module,
            source=source + "\n",
            fragment_branch_count=len(fragment_map),
            activity_branch_count=len(activity_map),
        )

    def _render_module_docstring(self, *, fragment_count: int, activity_count: int) -> str:
        lines = [
            "Generated binding factory module.",
            "",
            f"Generated by: {_GENERATOR_SOURCE}",
            f"bindwire version used for generation: {self._resolve_bindwire_version()}",
            "",
            "Dispatch branches:",
            f"- fragment owners: {fragment_count}",
            f"- activity owners: {activity_count}",
        ]
        return '"""' + "\n".join(lines) + '\n"""'

    def _module_aliases(
        self,
        *,
        maps: tuple[tuple[OwnerKindSpec, Mapping[OwnerType, Declaration]], ...],
    ) -> ModuleAliases:
        modules = {
            _module_of(_CONTAINER_TYPE),
            _module_of(_DISPATCH_ERROR),
            _module_of(self._binding_contract),
        }
        for spec, associations in maps:
            if len(associations) != 1:
                modules.add(_module_of(spec.owner_base))
            for owner_type, binding in associations.items():
                modules.add(owner_type.module)
                modules.add(binding.module)
        return ModuleAliases(modules)

    def _render_imports(
        self,
        *,
        maps: tuple[tuple[OwnerKindSpec, Mapping[OwnerType, Declaration]], ...],
        aliases: ModuleAliases,
    ) -> str:
        typing_names: set[str] = set()
        for _, associations in maps:
            if len(associations) >= _MIN_OVERLOAD_COUNT:
                typing_names.add("overload")
            if any(owner_type.is_generic for owner_type in associations):
                typing_names.add("Any")
        return self._imports_template.render(
            typing_names=sorted(typing_names),
            imports=aliases.imports,
        ).strip()

    def _render_dispatch_method(
        self,
        *,
        spec: OwnerKindSpec,
        associations: Mapping[OwnerType, Declaration],
        aliases: ModuleAliases,
    ) -> str:
        overloads: list[OverloadPlan] = []
        owner_annotation = aliases.reference_qualified(spec.owner_base)
        return_annotation = aliases.reference_qualified(self._binding_contract)
        if len(associations) >= _MIN_OVERLOAD_COUNT:
            overloads = [
                OverloadPlan(
                    owner_annotation=_owner_annotation(owner_type, aliases),
                    binding_annotation=aliases.reference(binding.module, binding.name),
                )
                for owner_type, binding in associations.items()
            ]
        elif associations:
            ((owner_type, binding),) = associations.items()
            owner_annotation = _owner_annotation(owner_type, aliases)
            return_annotation = aliases.reference(binding.module, binding.name)

        return self._dispatch_method_template.render(
            overloads=overloads,
            method_name=spec.method_name,
            owner_annotation=owner_annotation,
            container_annotation=f"{aliases.reference_qualified(_CONTAINER_TYPE)} | None",
            return_annotation=return_annotation,
            docstring=f"Create the binding registered for the {spec.label}'s dynamic type.",
            body_block=indent(
                self._render_dispatch_body(associations=associations, aliases=aliases),
                _INDENT,
            ),
        ).strip()

    def _render_dispatch_body(
        self,
        *,
        associations: Mapping[OwnerType, Declaration],
        aliases: ModuleAliases,
    ) -> str:
        lines: list[str] = []
        for owner_type, binding in associations.items():
            owner_reference = aliases.reference(owner_type.module, owner_type.name)
            binding_reference = aliases.reference(binding.module, binding.name)
            lines.extend(
                [
                    f"if isinstance(view_owner, {owner_reference}):",
                    f"{_INDENT}return {binding_reference}.inflate("
                    "view_owner.layout_inflater, container, False)",
                ],
            )
        lines.extend(
            [
                'msg = f"Binder not found for {view_owner!r}"',
                f"raise {aliases.reference_qualified(_DISPATCH_ERROR)}(msg)",
            ],
        )
        return "\n".join(lines)

    def _template(self, source: str) -> Template:
        return self._env.from_string(source)

    def _resolve_bindwire_version(self) -> str:
        try:
            return version("bindwire")
        except PackageNotFoundError:
            return "unknown"


def _module_of(qualified_name: str) -> str:
    return qualified_name.rpartition(".")[0]


def _owner_annotation(owner_type: OwnerType, aliases: ModuleAliases) -> str:
    reference = aliases.reference(owner_type.module, owner_type.name)
    if not owner_type.is_generic:
        return reference
    wildcards = ", ".join(["Any"] * owner_type.arity)
    return f"{reference}[{wildcards}]"


def emit(
    fragment_map: Mapping[OwnerType, Declaration],
    activity_map: Mapping[OwnerType, Declaration],
    **renderer_options: str,
) -> GeneratedArtifact:
    """Render the binding factory module with a default-configured renderer."""
    renderer = FactoryTemplateRenderer(**renderer_options)
    return renderer.render(fragment_map=fragment_map, activity_map=activity_map)


__all__ = [
    "ACTIVITY_SPEC",
    "FRAGMENT_SPEC",
    "FactoryTemplateRenderer",
    "ModuleAliases",
    "OwnerKindSpec",
    "emit",
]
