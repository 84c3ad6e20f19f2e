"""Error types raised while locating and querying a manifest."""

from __future__ import annotations

from pathlib import Path


class CargoGetError(Exception):
    """Base class for every failure reported to the user."""


class NotFound(CargoGetError):
    def __init__(self, section: str) -> None:
        super().__init__(f"`{section}` not found in manifest")
        self.section = section


class InheritanceError(CargoGetError):
    def __init__(self, field: str) -> None:
        super().__init__(
            f"`{field}` is inherited from the workspace, "
            "but `workspace.package` does not define it"
        )
        self.field = field


class InvalidSemver(CargoGetError):
    def __init__(self, version: str, diagnostic: str) -> None:
        super().__init__(f"Invalid semver `{version}`: {diagnostic}")
        self.version = version
        self.diagnostic = diagnostic


class EntryPointError(CargoGetError):
    def __init__(self, path: str | Path) -> None:
        super().__init__("No such file or directory")
        self.path = Path(path)


class ManifestNotLocated(CargoGetError):
    def __init__(self, start: Path) -> None:
        super().__init__("No manifest found")
        self.start = start


class ManifestError(CargoGetError):
    """Raised when a manifest cannot be read or has an unexpected shape."""

    def __init__(self, path: Path | None, message: str) -> None:
        super().__init__(message if path is None else f"{path}: {message}")
        self.path = path
