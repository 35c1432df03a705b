from __future__ import annotations

import logging

import pytest

from bindwire.contracts import VIEW_BINDING_CONTRACT
from bindwire.declarations import Declaration, DeclarationGraph, TypeArgument, TypeArgumentKind
from bindwire.exceptions import BindingNotFoundError
from bindwire.resolver import BindingResolver
from tests.builders import binding, owner


def _resolver(*declarations: Declaration) -> BindingResolver:
    return BindingResolver(DeclarationGraph(declarations))


def test_resolve_returns_single_qualifying_argument() -> None:
    profile_binding = binding("ProfileBinding")
    fragment = owner("ProfileFragment", profile_binding)

    resolved = _resolver(fragment, profile_binding).resolve(fragment)

    assert resolved is profile_binding


def test_resolve_selects_first_qualifying_argument_by_position() -> None:
    first = binding("FirstBinding")
    second = binding("SecondBinding")
    forward = owner("Forward", first, second)
    backward = owner("Backward", second, first)
    resolver = _resolver(forward, backward, first, second)

    assert resolver.resolve(forward) is first
    assert resolver.resolve(backward) is second


def test_resolve_skips_arguments_not_implementing_contract() -> None:
    model = binding("ProfileModel", module="app.models", interfaces=["app.models.Model"])
    profile_binding = binding("ProfileBinding")
    fragment = owner("ProfileFragment", model, profile_binding)

    resolved = _resolver(fragment, model, profile_binding).resolve(fragment)

    assert resolved is profile_binding


def test_resolve_skips_non_declared_arguments() -> None:
    profile_binding = binding("ProfileBinding")
    fragment = owner(
        "ProfileFragment",
        TypeArgument.primitive("int"),
        TypeArgument.wildcard(),
        TypeArgument.type_variable("T"),
        profile_binding,
    )

    resolved = _resolver(fragment, profile_binding).resolve(fragment)

    assert resolved is profile_binding


def test_resolve_fails_without_superclass() -> None:
    fragment = owner("Orphan", superclass=None)

    with pytest.raises(BindingNotFoundError) as exc_info:
        _resolver(fragment).resolve(fragment)

    assert exc_info.value.declaration_name == "app.screens.Orphan"
    assert exc_info.value.contract == VIEW_BINDING_CONTRACT


@pytest.mark.parametrize(
    "superclass_kind",
    [TypeArgumentKind.PRIMITIVE, TypeArgumentKind.TYPE_VARIABLE],
)
def test_resolve_fails_when_superclass_is_not_declared(superclass_kind: TypeArgumentKind) -> None:
    profile_binding = binding("ProfileBinding")
    fragment = owner("ProfileFragment", profile_binding, superclass_kind=superclass_kind)

    with pytest.raises(BindingNotFoundError, match="app.screens.ProfileFragment"):
        _resolver(fragment, profile_binding).resolve(fragment)


def test_resolve_fails_when_superclass_has_no_arguments() -> None:
    activity = owner("B")

    with pytest.raises(BindingNotFoundError) as exc_info:
        _resolver(activity).resolve(activity)

    assert exc_info.value.declaration_name == "app.screens.B"
    assert "should have a parent class with a generic argument" in str(exc_info.value)


def test_resolve_fails_when_argument_is_not_in_graph() -> None:
    fragment = owner("ProfileFragment", binding("ExternalBinding"))

    with pytest.raises(BindingNotFoundError):
        _resolver(fragment).resolve(fragment)


def test_resolve_only_checks_directly_implemented_interfaces() -> None:
    base_binding = binding("ProfileBinding")
    extended = binding("ExtendedBinding", interfaces=[base_binding.qualified_name])
    fragment = owner("ProfileFragment", extended)

    with pytest.raises(BindingNotFoundError):
        _resolver(fragment, base_binding, extended).resolve(fragment)


def test_resolve_does_not_walk_past_direct_superclass() -> None:
    profile_binding = binding("ProfileBinding")
    middle = owner("MiddleFragment", profile_binding, markers=[])
    leaf = owner("LeafFragment", superclass=middle.qualified_name)

    with pytest.raises(BindingNotFoundError, match="app.screens.LeafFragment"):
        _resolver(leaf, middle, profile_binding).resolve(leaf)


def test_resolve_uses_configured_contract() -> None:
    custom = binding("CustomBinding", interfaces=["app.ui.Inflatable"])
    fragment = owner("ProfileFragment", custom)
    graph = DeclarationGraph([fragment, custom])

    assert BindingResolver(graph, contract="app.ui.Inflatable").resolve(fragment) is custom
    with pytest.raises(BindingNotFoundError, match="app.ui.Inflatable"):
        BindingResolver(graph, contract="app.ui.Inflatable").resolve(owner("Other"))


def test_resolve_logs_error_before_raising(caplog: pytest.LogCaptureFixture) -> None:
    fragment = owner("Orphan", superclass=None)

    with caplog.at_level(logging.ERROR, logger="bindwire.resolver"):
        with pytest.raises(BindingNotFoundError):
            _resolver(fragment).resolve(fragment)

    assert "app.screens.Orphan" in caplog.text


def test_candidates_lists_declared_arguments_in_order() -> None:
    first = binding("FirstBinding")
    model = binding("Model", interfaces=[])
    fragment = owner("ProfileFragment", model, TypeArgument.primitive("str"), first)

    assert _resolver(fragment, first, model).candidates(fragment) == (model, first)
