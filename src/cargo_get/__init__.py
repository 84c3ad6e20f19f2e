"""Query package info from Cargo.toml in a script-friendly way."""

from .config import QueryConfig, default_config
from .data.manifest import Edition, Manifest, load_manifest, parse_manifest
from .delimiter import resolve_delimiter
from .errors import (
    CargoGetError,
    EntryPointError,
    InheritanceError,
    InvalidSemver,
    ManifestError,
    ManifestNotLocated,
    NotFound,
)
from .paths import locate_manifest, resolve_entry_point
from .resolver import (
    format_value,
    get_package_field,
    get_workspace_members,
    get_workspace_package_field,
    query_field,
)
from .version import VersionComponents, VersionPart, decompose, render_version

__all__ = [
    "CargoGetError",
    "Edition",
    "EntryPointError",
    "InheritanceError",
    "InvalidSemver",
    "Manifest",
    "ManifestError",
    "ManifestNotLocated",
    "NotFound",
    "QueryConfig",
    "VersionComponents",
    "VersionPart",
    "decompose",
    "default_config",
    "format_value",
    "get_package_field",
    "get_workspace_members",
    "get_workspace_package_field",
    "load_manifest",
    "locate_manifest",
    "parse_manifest",
    "query_field",
    "render_version",
    "resolve_delimiter",
    "resolve_entry_point",
]

__version__ = "0.1.0"
