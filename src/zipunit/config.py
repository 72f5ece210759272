from __future__ import annotations

"""Configuration loading utilities for the zipunit package."""

from dataclasses import dataclass, replace
from pathlib import Path
import textwrap
import zipfile

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python <3.11 fallback
    import tomli as tomllib  # type: ignore

from .errors import ConfigurationError

__all__ = ["Config", "load_config", "write_default_config", "DEFAULT_CONFIG_TOML", "COMPRESSION_TYPES"]

DEFAULT_CONFIG_TOML = textwrap.dedent(
    """
    [builder]
    encoding = "utf-8"
    buffer_size = 1024
    compression = "deflated"

    [inspector]
    preview_limit = 20
    """
)

COMPRESSION_TYPES = {
    "stored": zipfile.ZIP_STORED,
    "deflated": zipfile.ZIP_DEFLATED,
    "bzip2": zipfile.ZIP_BZIP2,
    "lzma": zipfile.ZIP_LZMA,
}


@dataclass(slots=True)
class Config:
    """Runtime configuration shared by the builder and the inspector."""

    encoding: str = "utf-8"
    buffer_size: int = 1024
    compression: str = "deflated"
    preview_limit: int = 20

    def validate(self) -> "Config":
        if self.compression.lower() not in COMPRESSION_TYPES:
            raise ConfigurationError(
                f"Unknown compression [{self.compression}], expected one of {sorted(COMPRESSION_TYPES)}"
            )
        if self.buffer_size <= 0:
            raise ConfigurationError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.preview_limit < 0:
            raise ConfigurationError(f"preview_limit must not be negative, got {self.preview_limit}")
        try:
            "".encode(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding [{self.encoding}]") from e
        return self

    def compress_type(self) -> int:
        return COMPRESSION_TYPES[self.compression.lower()]

    def copy(self) -> "Config":
        return replace(self)

    def encode(self, text: str) -> bytes:
        return text.encode(self.encoding)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from ``config_path`` or the packaged defaults.

    The file is TOML with two optional tables::

        [builder]
        encoding = "utf-8"
        buffer_size = 1024
        compression = "deflated"   # stored / deflated / bzip2 / lzma

        [inspector]
        preview_limit = 20

    Missing keys keep their default values.
    """

    if config_path:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"Config file does not exist: {path}")
        return _config_from_path(path)
    return _config_from_toml(DEFAULT_CONFIG_TOML)


def _config_from_path(path: Path) -> Config:
    raw = path.read_text(encoding="utf-8")
    return _config_from_toml(raw)


def _config_from_toml(content: str) -> Config:
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file: {e}") from e
    builder = data.get("builder", {})
    inspector = data.get("inspector", {})

    config = Config(
        encoding=str(builder.get("encoding", "utf-8")),
        buffer_size=int(builder.get("buffer_size", 1024)),
        compression=str(builder.get("compression", "deflated")),
        preview_limit=int(inspector.get("preview_limit", 20)),
    )
    return config.validate()


def write_default_config(target_path: str | Path) -> Path:
    """Write the default configuration to ``target_path``.

    Creates parent directories if needed and returns the absolute path
    to the created file.
    """

    target = Path(target_path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    return target.resolve()


DEFAULT_CONFIG = load_config()
