"""
Configuration management and loading.

Holds the baseline averages used by the daily comparison.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import yaml

# Approximate daily averages per person, in litres.
DEFAULT_LOCAL_BASELINE_LITRES = 150.0
DEFAULT_GLOBAL_BASELINE_LITRES = 173.0


@dataclass(frozen=True)
class ReportingConfig:
    """Baselines the daily usage is compared against."""
    local_baseline_litres: float = DEFAULT_LOCAL_BASELINE_LITRES
    global_baseline_litres: float = DEFAULT_GLOBAL_BASELINE_LITRES

    def __post_init__(self):
        """Validate baseline values are not negative."""
        if self.local_baseline_litres < 0:
            raise ValueError("local_baseline_litres must be >= 0")
        if self.global_baseline_litres < 0:
            raise ValueError("global_baseline_litres must be >= 0")


def load_reporting_config(path: str) -> ReportingConfig:
    """Load and validate reporting configuration from a YAML file.

    Keys that are left out fall back to the built-in averages, and an
    empty file gives the defaults.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated ReportingConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if raw_config is None:
        return ReportingConfig()

    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a mapping")

    allowed_keys = {'local_baseline_litres', 'global_baseline_litres'}
    unknown_keys = set(raw_config.keys()) - allowed_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    values: Dict[str, float] = {}
    for key, value in raw_config.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'{key}' must be a number")
        values[key] = float(value)

    return ReportingConfig(**values)
