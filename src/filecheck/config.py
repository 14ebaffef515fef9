"""Configuration management for filecheck."""
import hashlib
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

try:
    import tomli
except ImportError:
    import tomllib as tomli


class GeneralConfig(BaseModel):
    log_level: str = "WARNING"


class HasherConfig(BaseModel):
    workers: Union[int, Literal["auto"]] = "auto"
    algorithm: str = "sha256"
    chunk_size: int = 65536  # 64 KiB per read

    @field_validator("workers")
    @classmethod
    def _check_workers(cls, value):
        if isinstance(value, int) and value < 1:
            raise ValueError("workers must be a positive integer or 'auto'")
        return value

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        value = value.lower()
        if value not in hashlib.algorithms_available:
            raise ValueError(f"Unsupported hash algorithm: {value}")
        # shake_* need an explicit output length
        if hashlib.new(value).digest_size == 0:
            raise ValueError(f"Hash algorithm has no fixed digest size: {value}")
        return value

    @field_validator("chunk_size")
    @classmethod
    def _check_chunk_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("chunk_size must be positive")
        return value


class ScannerConfig(BaseModel):
    ignore_patterns: list[str] = Field(default_factory=list)


class StoreConfig(BaseModel):
    checksum_file: str = "checksums.json"
    indent: int = 2


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILECHECK_", env_nested_delimiter="__")

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    hasher: HasherConfig = Field(default_factory=HasherConfig)
    scanner: ScannerConfig = Field(default_factory=ScannerConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load config from TOML file or use defaults."""
        if config_path is None:
            config_path = Path.home() / ".config" / "filecheck" / "config.toml"

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomli.load(f)
            return cls(**data)
        return cls()

    def get_checksum_path(self) -> Path:
        """Get expanded baseline file path."""
        return Path(self.store.checksum_file).expanduser()


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Config) -> None:
    """Set the global config instance."""
    global _config
    _config = config
