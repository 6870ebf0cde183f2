"""Configuration management for property-book."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from property_book.exceptions import ConfigurationError


@dataclass
class StorageConfig:
    """Book file configuration."""

    data_file: Path = field(default_factory=lambda: Path("data") / "propertybook.json")
    pretty_json: bool = False


@dataclass
class SampleDataConfig:
    """Sample data generation configuration."""

    num_properties: int = 20
    num_buyers: int = 20
    locale: str = "en_US"


@dataclass
class PropertyBookConfig:
    """Main configuration for property-book."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    sample_data: SampleDataConfig = field(default_factory=SampleDataConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "PropertyBookConfig":
        """Create config from environment variables."""
        storage = StorageConfig(
            data_file=Path(
                os.getenv("PROPERTYBOOK_DATA_FILE", str(Path("data") / "propertybook.json"))
            ),
            pretty_json=os.getenv("PROPERTYBOOK_PRETTY_JSON", "false").lower() == "true",
        )

        sample_data = SampleDataConfig(
            num_properties=_env_int("PROPERTYBOOK_NUM_PROPERTIES", 20),
            num_buyers=_env_int("PROPERTYBOOK_NUM_BUYERS", 20),
            locale=os.getenv("PROPERTYBOOK_LOCALE", "en_US"),
        )

        seed = os.getenv("PROPERTYBOOK_SEED")

        return cls(
            storage=storage,
            sample_data=sample_data,
            seed=_env_int("PROPERTYBOOK_SEED", 0) if seed else None,
            log_level=os.getenv("PROPERTYBOOK_LOG_LEVEL", "INFO"),
            log_format=os.getenv("PROPERTYBOOK_LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
