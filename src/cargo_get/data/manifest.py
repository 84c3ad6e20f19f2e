"""Typed, read-only view of a Cargo manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
import enum
import logging
from pathlib import Path
import tomllib
from types import MappingProxyType
from typing import Any, Generic, Mapping, TypeVar, Union

from cargo_get.errors import ManifestError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Edition(enum.Enum):
    E2015 = "2015"
    E2018 = "2018"
    E2021 = "2021"

    @property
    def label(self) -> str:
        return EDITION_LABELS[self]


EDITION_LABELS: dict[Edition, str] = {
    Edition.E2015: "2015",
    Edition.E2018: "2018",
    Edition.E2021: "2021",
}


class FieldKind(enum.Enum):
    STRING = "string"
    LIST = "list"
    EDITION = "edition"


# Fields a package may take from `[workspace.package]`, keyed by TOML name.
INHERITABLE_FIELDS: dict[str, FieldKind] = {
    "version": FieldKind.STRING,
    "authors": FieldKind.LIST,
    "homepage": FieldKind.STRING,
    "license": FieldKind.STRING,
    "description": FieldKind.STRING,
    "keywords": FieldKind.LIST,
    "categories": FieldKind.LIST,
    "edition": FieldKind.EDITION,
    "links": FieldKind.STRING,
    "repository": FieldKind.STRING,
    "documentation": FieldKind.STRING,
    "rust-version": FieldKind.STRING,
}


@dataclass(frozen=True)
class Direct(Generic[T]):
    value: T


@dataclass(frozen=True)
class Inherit:
    pass


@dataclass(frozen=True)
class Absent:
    pass


INHERIT = Inherit()
ABSENT = Absent()

FieldState = Union[Direct[Any], Inherit, Absent]


@dataclass(frozen=True)
class Package:
    """Package table; inheritable fields are validated when first queried."""

    name: str
    raw: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    path: Path | None = None

    def state(self, key: str) -> FieldState:
        if key not in self.raw:
            return ABSENT
        return _parse_field_state(key, INHERITABLE_FIELDS[key], self.raw[key], self.path)


@dataclass(frozen=True)
class WorkspacePackage:
    raw: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    path: Path | None = None

    def get(self, key: str) -> Any | None:
        if key not in self.raw:
            return None
        return _parse_concrete(
            key,
            INHERITABLE_FIELDS[key],
            self.raw[key],
            where="workspace.package",
            path=self.path,
        )


@dataclass(frozen=True)
class Workspace:
    members: tuple[str, ...] | None = None
    package: WorkspacePackage | None = None


@dataclass(frozen=True)
class Manifest:
    package: Package | None = None
    workspace: Workspace | None = None
    path: Path | None = None


def _parse_concrete(key: str, kind: FieldKind, value: Any, *, where: str, path: Path | None) -> Any:
    if kind is FieldKind.STRING:
        if not isinstance(value, str):
            raise ManifestError(path, f"{where}.{key} must be a string.")
        return value

    if kind is FieldKind.LIST:
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ManifestError(path, f"{where}.{key} must be a list of strings.")
        return list(value)

    if not isinstance(value, str):
        raise ManifestError(path, f"{where}.{key} must be a string.")
    try:
        return Edition(value)
    except ValueError:
        supported = ", ".join(edition.value for edition in Edition)
        raise ManifestError(
            path,
            f"{where}.{key} has unsupported edition {value!r}; expected one of {supported}.",
        ) from None


def _parse_field_state(key: str, kind: FieldKind, value: Any, path: Path | None) -> FieldState:
    if isinstance(value, Mapping):
        if set(value.keys()) != {"workspace"}:
            raise ManifestError(
                path,
                f"package.{key} table may only contain `workspace = true`.",
            )
        if value["workspace"] is not True:
            raise ManifestError(path, f"package.{key}.workspace must be `true`.")
        return INHERIT
    return Direct(_parse_concrete(key, kind, value, where="package", path=path))


def _require_table(payload: Mapping[str, Any], key: str, where: str, path: Path | None) -> Mapping[str, Any] | None:
    table = payload.get(key)
    if table is None:
        return None
    if not isinstance(table, Mapping):
        raise ManifestError(path, f"[{where}] must be a table.")
    return table


def _inheritable_subset(table: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType({key: table[key] for key in INHERITABLE_FIELDS if key in table})


def _parse_package(table: Mapping[str, Any], path: Path | None) -> Package:
    name = table.get("name")
    if name is None:
        raise ManifestError(path, "package.name is missing.")
    if not isinstance(name, str):
        raise ManifestError(path, "package.name must be a string.")
    return Package(name=name, raw=_inheritable_subset(table), path=path)


def _parse_workspace(table: Mapping[str, Any], path: Path | None) -> Workspace:
    members = table.get("members")
    if members is not None:
        if not isinstance(members, list) or not all(isinstance(item, str) for item in members):
            raise ManifestError(path, "workspace.members must be a list of strings.")
        members = tuple(members)

    template = _require_table(table, "package", "workspace.package", path)
    ws_package = None
    if template is not None:
        ws_package = WorkspacePackage(raw=_inheritable_subset(template), path=path)

    return Workspace(members=members, package=ws_package)


def manifest_from_dict(payload: Mapping[str, Any], path: Path | None = None) -> Manifest:
    if not isinstance(payload, Mapping):
        raise ManifestError(path, "Manifest payload must be a mapping.")

    package_table = _require_table(payload, "package", "package", path)
    workspace_table = _require_table(payload, "workspace", "workspace", path)

    return Manifest(
        package=None if package_table is None else _parse_package(package_table, path),
        workspace=None if workspace_table is None else _parse_workspace(workspace_table, path),
        path=path,
    )


def parse_manifest(text: str, path: Path | None = None) -> Manifest:
    try:
        payload = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(path, f"Invalid TOML: {exc}") from exc
    return manifest_from_dict(payload, path)


def load_manifest(input_path: str | Path) -> Manifest:
    path = Path(input_path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(path, f"Could not read manifest: {exc}") from exc
    logger.debug("Loaded manifest %s", path)
    return parse_manifest(text, path)
