"""Configuration defaults for cargo-get."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from cargo_get.delimiter import DEFAULT_DELIMITER
from cargo_get.paths import MANIFEST_FILENAME


@dataclass(frozen=True)
class QueryConfig:
    """Single-source defaults shared by the CLI and the query helpers."""

    manifest_filename: str = MANIFEST_FILENAME
    default_delimiter: str = DEFAULT_DELIMITER
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides: Any) -> "QueryConfig":
        merged = self.to_dict()
        merged.update(overrides)
        return QueryConfig(**merged)


def default_config() -> QueryConfig:
    return QueryConfig()
