"""Configuration management for listings."""

from dataclasses import dataclass, field
from pathlib import Path

from listings.exceptions import ConfigurationError


@dataclass
class PricingConfig:
    """Price display configuration."""

    currency: str = "JOD"


@dataclass
class StorageConfig:
    """Public media storage configuration."""

    base_url: str = "/storage"


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Sample listing generation configuration."""

    locale: str = "en_US"
    count: int = 50


@dataclass
class ListingsConfig:
    """Main configuration for listings."""

    pricing: PricingConfig = field(default_factory=PricingConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ListingsConfig":
        """Create config from environment variables."""
        import os

        pricing = PricingConfig(currency=os.getenv("LISTINGS_CURRENCY", "JOD"))

        storage = StorageConfig(base_url=os.getenv("STORAGE_URL", "/storage"))

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        generator = GeneratorConfig(
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            count=_int_env("SAMPLE_COUNT", os.getenv("SAMPLE_COUNT", "50")),
        )

        seed = os.getenv("SEED")

        return cls(
            pricing=pricing,
            storage=storage,
            output=output,
            generator=generator,
            seed=_int_env("SEED", seed) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def apply(self) -> None:
        """Make the pricing and storage settings the display defaults."""
        from listings.models.property import configure_display
        from listings.storage import PublicDiskStorage

        configure_display(
            currency=self.pricing.currency,
            storage=PublicDiskStorage.from_config(self.storage),
        )


def _int_env(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
