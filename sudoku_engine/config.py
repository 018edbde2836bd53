"""Configuration management for the sudoku engine CLI."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .carver import DEFAULT_MAX_ATTEMPTS, DEFAULT_TIER


@dataclass
class GeneratorConfig:
    """Puzzle generation configuration."""

    seed: int | None = None  # None = fresh OS entropy
    tier: str = DEFAULT_TIER
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    strict_tiers: bool = False


@dataclass
class ExportConfig:
    """Batch export configuration."""

    num_puzzles: int = 100
    output: str = "puzzles.csv"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_dir: str | None = None
    level: str = "INFO"


@dataclass
class Config:
    """Complete configuration."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            raw = yaml.safe_load(f)

        return cls.from_dict(raw or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary."""
        config = cls()

        if "generator" in data:
            config.generator = GeneratorConfig(**data["generator"])

        if "export" in data:
            config.export = ExportConfig(**data["export"])

        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "generator": dict(self.generator.__dict__),
            "export": dict(self.export.__dict__),
            "logging": dict(self.logging.__dict__),
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_config(path: str | Path | None = None) -> Config:
    """
    Load configuration from file or return defaults.

    Args:
        path: Path to YAML config file. If None, returns default config.

    Returns:
        Configuration object.
    """
    if path is None:
        return Config()
    return Config.from_yaml(path)


def merge_configs(base: Config, overrides: dict[str, Any]) -> Config:
    """
    Merge override values into a base configuration.

    Args:
        base: Base configuration.
        overrides: Nested dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.to_dict()

    for key, value in overrides.items():
        if isinstance(value, dict) and key in base_dict:
            base_dict[key].update(value)
        else:
            base_dict[key] = value

    return Config.from_dict(base_dict)
