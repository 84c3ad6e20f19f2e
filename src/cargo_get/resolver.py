"""Field resolution across the package/workspace inheritance chain."""

from __future__ import annotations

import logging
from typing import Any

from cargo_get.data.manifest import (
    INHERITABLE_FIELDS,
    Absent,
    Direct,
    Edition,
    FieldKind,
    Inherit,
    Manifest,
    Package,
    WorkspacePackage,
)
from cargo_get.delimiter import DEFAULT_DELIMITER, join_values
from cargo_get.errors import InheritanceError, NotFound
from cargo_get.version import VersionPart, decompose, render_version

logger = logging.getLogger(__name__)

SECTION_PACKAGE = "package"
SECTION_WORKSPACE = "workspace"
SECTION_WORKSPACE_PACKAGE = "workspace.package"

# Cargo assumes 0.0.0 when a package omits its version.
DEFAULT_VERSION = "0.0.0"


def _neutral_default(key: str) -> Any:
    kind = INHERITABLE_FIELDS[key]
    if kind is FieldKind.LIST:
        return []
    if kind is FieldKind.EDITION:
        return Edition.E2015
    if key == "version":
        return DEFAULT_VERSION
    return ""


def _check_field(key: str) -> None:
    if key not in INHERITABLE_FIELDS:
        raise KeyError(f"Unknown manifest field: {key!r}")


def require_package(manifest: Manifest) -> Package:
    if manifest.package is None:
        raise NotFound("package")
    return manifest.package


def require_workspace_package(manifest: Manifest) -> WorkspacePackage:
    if manifest.workspace is None:
        raise NotFound("workspace")
    if manifest.workspace.package is None:
        raise NotFound("workspace.package")
    return manifest.workspace.package


def get_package_field(manifest: Manifest, key: str) -> Any:
    """Resolve ``package.<key>``, following ``workspace = true`` markers.

    Direct values win regardless of the workspace. An inherited field takes
    the ``[workspace.package]`` value and fails with ``InheritanceError``
    when there is none. An absent field resolves to its neutral default.
    """
    package = require_package(manifest)
    if key == "name":
        return package.name
    _check_field(key)

    state = package.state(key)
    if isinstance(state, Direct):
        return state.value
    if isinstance(state, Inherit):
        workspace = manifest.workspace
        template = workspace.package if workspace is not None else None
        value = template.get(key) if template is not None else None
        if value is None:
            raise InheritanceError(f"package.{key}")
        logger.debug("package.%s inherited from workspace.package", key)
        return value
    if isinstance(state, Absent):
        return _neutral_default(key)
    raise TypeError(f"Unexpected field state for package.{key}: {state!r}")


def get_workspace_package_field(manifest: Manifest, key: str) -> Any:
    _check_field(key)
    template = require_workspace_package(manifest)
    value = template.get(key)
    if value is None:
        raise NotFound(f"workspace.package.{key}")
    return value


def get_workspace_members(manifest: Manifest) -> list[str]:
    if manifest.workspace is None:
        raise NotFound("workspace")
    return list(manifest.workspace.members or ())


def format_value(value: Any, delimiter: str) -> str:
    if isinstance(value, Edition):
        return value.label
    if isinstance(value, (list, tuple)):
        return join_values(value, delimiter)
    return str(value)


def query_field(
    manifest: Manifest,
    section: str,
    key: str | None = None,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    version_part: VersionPart | None = None,
) -> str:
    """Resolve one field and render it as the single line the CLI prints.

    ``section`` is ``package``, ``workspace.package`` or ``workspace``; the
    only workspace key is ``members``. Versions are decomposed and rendered
    with ``version_part``.
    """
    if section == SECTION_PACKAGE:
        assert key is not None
        value = get_package_field(manifest, key)
    elif section == SECTION_WORKSPACE_PACKAGE:
        assert key is not None
        value = get_workspace_package_field(manifest, key)
    elif section == SECTION_WORKSPACE and key == "members":
        value = get_workspace_members(manifest)
    else:
        raise KeyError(f"Unknown query: {section}.{key}")

    if key == "version":
        return render_version(decompose(value), version_part)
    return format_value(value, delimiter)
