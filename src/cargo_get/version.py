"""Semantic-version decomposition and rendering."""

from __future__ import annotations

from dataclasses import dataclass
import enum

import semver

from cargo_get.errors import InvalidSemver


class VersionPart(enum.Enum):
    FULL = "full"
    PRETTY = "pretty"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    BUILD = "build"
    PRE = "pre"


@dataclass(frozen=True)
class VersionComponents:
    original: str
    major: int
    minor: int
    patch: int
    pre: str | None = None
    build: str | None = None

    @property
    def core(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def decompose(version_string: str) -> VersionComponents:
    try:
        parsed = semver.Version.parse(version_string)
    except (TypeError, ValueError) as exc:
        raise InvalidSemver(str(version_string), str(exc)) from exc

    return VersionComponents(
        original=version_string,
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        pre=parsed.prerelease,
        build=parsed.build,
    )


def render_version(components: VersionComponents, part: VersionPart | None = None) -> str:
    """Render one view of a version.

    Without a part the bare ``major.minor.patch`` core is returned. Missing
    build or pre-release metadata renders as an empty string.
    """
    if part is None:
        return components.core
    if part is VersionPart.FULL:
        return components.original
    if part is VersionPart.PRETTY:
        return f"v{components.core}"
    if part is VersionPart.MAJOR:
        return str(components.major)
    if part is VersionPart.MINOR:
        return str(components.minor)
    if part is VersionPart.PATCH:
        return str(components.patch)
    if part is VersionPart.BUILD:
        return components.build or ""
    if part is VersionPart.PRE:
        return components.pre or ""
    raise ValueError(f"Unsupported version part: {part!r}")
