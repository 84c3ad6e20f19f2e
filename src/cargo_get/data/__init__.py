"""Manifest data model for cargo-get."""

from .manifest import (
    ABSENT,
    EDITION_LABELS,
    INHERIT,
    INHERITABLE_FIELDS,
    Absent,
    Direct,
    Edition,
    FieldKind,
    Inherit,
    Manifest,
    Package,
    Workspace,
    WorkspacePackage,
    load_manifest,
    manifest_from_dict,
    parse_manifest,
)

__all__ = [
    "ABSENT",
    "EDITION_LABELS",
    "INHERIT",
    "INHERITABLE_FIELDS",
    "Absent",
    "Direct",
    "Edition",
    "FieldKind",
    "Inherit",
    "Manifest",
    "Package",
    "Workspace",
    "WorkspacePackage",
    "load_manifest",
    "manifest_from_dict",
    "parse_manifest",
]
