"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml in the working directory or the project root.
Missing sections and keys fall back to defaults; unknown keys are ignored.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

from ..games.tetris.config import TetrisConfig

logger = logging.getLogger(__name__)


@dataclass
class VisualizationConfig:
    """Window and drawing settings."""
    cell_size: int = 30
    render_fps: int = 60
    window_title: str = "Blockfall"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: TetrisConfig = field(default_factory=TetrisConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping for {cls.__name__}, got {type(data).__name__}")

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in common locations."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in cwd or project root)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If the file is not valid YAML or holds invalid values
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Config()

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    logger.debug("Loaded config from %s", path)

    # Build config object
    config = Config()

    if 'game' in data:
        config.game = TetrisConfig.from_dict(data['game'] or {})

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
