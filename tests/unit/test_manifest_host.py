from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from bindwire.contracts import VIEW_BINDING_CONTRACT
from bindwire.declarations import TypeArgument, TypeArgumentKind
from bindwire.exceptions import InvalidDeclarationManifestError
from bindwire.hosts.manifest import load_manifest, parse_manifest
from bindwire.markers import MarkerKind
from bindwire.resolver import BindingResolver


def _manifest() -> dict[str, Any]:
    return {
        "declarations": [
            {
                "module": "app.screens",
                "name": "ProfileFragment",
                "superclass": {
                    "name": "app.base.BaseFragment",
                    "arguments": [
                        {"kind": "primitive", "name": "int"},
                        {"kind": "wildcard"},
                        {"name": "app.bindings.ProfileBinding"},
                    ],
                },
                "markers": ["fragment_owner"],
            },
            {
                "module": "app.screens",
                "name": "PagerActivity",
                "type_parameters": ["T"],
                "superclass": {"name": "app.base.BaseActivity"},
                "markers": ["activity_owner"],
            },
            {
                "module": "app.bindings",
                "name": "ProfileBinding",
                "interfaces": [VIEW_BINDING_CONTRACT],
            },
        ],
    }


def test_parse_manifest_builds_declarations() -> None:
    graph = parse_manifest(_manifest())

    fragment = graph.require("app.screens.ProfileFragment")
    assert fragment.markers == frozenset({MarkerKind.FRAGMENT_OWNER})
    assert fragment.superclass is not None
    assert fragment.superclass.kind is TypeArgumentKind.DECLARED
    assert fragment.superclass.arguments == (
        TypeArgument.primitive("int"),
        TypeArgument.wildcard(),
        TypeArgument.declared("app.bindings.ProfileBinding"),
    )

    activity = graph.require("app.screens.PagerActivity")
    assert activity.type_parameters == ("T",)
    assert activity.markers == frozenset({MarkerKind.ACTIVITY_OWNER})

    binding = graph.require("app.bindings.ProfileBinding")
    assert binding.superclass is None
    assert binding.implements(VIEW_BINDING_CONTRACT)


def test_parse_manifest_accepts_json_text() -> None:
    from_text = parse_manifest(json.dumps(_manifest()))

    assert from_text.declarations == parse_manifest(_manifest()).declarations


def test_load_manifest_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "declarations.json"
    path.write_text(json.dumps(_manifest()), encoding="utf-8")

    graph = load_manifest(path)

    assert len(graph) == 3


def test_manifest_graph_resolves_bindings() -> None:
    graph = parse_manifest(_manifest())

    resolved = BindingResolver(graph).resolve(graph.require("app.screens.ProfileFragment"))

    assert resolved.qualified_name == "app.bindings.ProfileBinding"


@pytest.mark.parametrize(
    "document",
    [
        {"declarations": [{"name": "Missing"}]},
        {"declarations": [{"module": "", "name": "Unimportable"}]},
        {"declarations": [{"module": "app", "name": ""}]},
        {"declarations": [{"module": "app", "name": "A", "markers": ["view_owner"]}]},
        {"declarations": [{"module": "app", "name": "A", "unknown": True}]},
        {
            "declarations": [
                {
                    "module": "app",
                    "name": "A",
                    "superclass": {"name": "app.Base", "arguments": [{"kind": "declared"}]},
                },
            ],
        },
    ],
)
def test_invalid_manifest_raises(document: dict[str, Any]) -> None:
    with pytest.raises(InvalidDeclarationManifestError, match="Invalid declaration manifest"):
        parse_manifest(document)


def test_malformed_json_raises() -> None:
    with pytest.raises(InvalidDeclarationManifestError):
        parse_manifest("{not json")
