from bindwire.hosts.manifest import load_manifest, parse_manifest
from bindwire.hosts.python import collect_declarations, declarations_from_classes

__all__ = [
    "collect_declarations",
    "declarations_from_classes",
    "load_manifest",
    "parse_manifest",
]
