"""Configuration models describing where metadata is loaded from.

MetadataSource

`path` (`Path`)
: Metadata file of the font being engraved.

`fallbacks` (`list[Path]`)
: Metadata files consulted, in order, for anything `path` does not define.
  The nearest entry wins: a value from the first fallback shadows the same
  value in later ones.

A source can be read from a TOML file holding a `[metadata]` table:

```toml
[metadata]
path = "fonts/petaluma_metadata.json"
fallbacks = ["fonts/bravura_metadata.json"]
```

Relative paths are resolved against the directory of the TOML file.
"""

from __future__ import annotations

from pathlib import Path
import tomllib

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from smufl.core.diagnostics import DiagnosticEmitter
from smufl.core.exceptions import ConfigError
from smufl.metadata import Metadata


class MetadataSource(BaseModel):
    """A metadata file and the ordered chain of files that back it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path
    fallbacks: list[Path] = Field(default_factory=list)

    def resolved(self, base: Path) -> MetadataSource:
        """Return a copy with relative paths anchored at ``base``."""
        return MetadataSource(
            path=base / self.path,
            fallbacks=[base / fallback for fallback in self.fallbacks],
        )

    @classmethod
    def from_file(cls, config_path: Path) -> MetadataSource:
        """Read the ``[metadata]`` table of a TOML configuration file."""
        try:
            payload = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"Unable to read configuration '{config_path}': {exc}") from exc

        section = payload.get("metadata")
        if not isinstance(section, dict):
            raise ConfigError(f"Configuration '{config_path}' has no [metadata] table.")
        try:
            source = cls.model_validate(section)
        except ValidationError as exc:
            raise ConfigError(f"Invalid [metadata] table in '{config_path}': {exc}") from exc
        return source.resolved(config_path.parent)


def load_metadata(
    source: MetadataSource, *, emitter: DiagnosticEmitter | None = None
) -> Metadata:
    """Load ``source.path`` and fill its gaps from each fallback in turn."""
    metadata = Metadata.from_path(source.path, emitter=emitter)
    for fallback in source.fallbacks:
        metadata = metadata.with_defaults(Metadata.from_path(fallback, emitter=emitter))
    return metadata


__all__ = ["MetadataSource", "load_metadata"]
