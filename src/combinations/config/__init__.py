"""Configuration for the combinations command line driver."""

from combinations.config.settings import CombinationsConfig, load_config

__all__ = ["CombinationsConfig", "load_config"]
