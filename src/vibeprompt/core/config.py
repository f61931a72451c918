"""Configuration management for vibeprompt."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from vibeprompt.core.logging import get_logger

logger = get_logger("vibeprompt.config")

DEFAULT_MODEL = "gpt-4"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_RELAY_URL = "http://localhost:8000/api/chat"

GATEWAY_MODES = ("direct", "relay")

# Environment variables consulted by Config.load, mapped to config attributes
ENV_VARS = {
    "OPENAI_API_KEY": "api_key",
    "VIBEPROMPT_MODE": "mode",
    "VIBEPROMPT_MODEL": "model",
    "VIBEPROMPT_BASE_URL": "base_url",
    "VIBEPROMPT_RELAY_URL": "relay_url",
}


@dataclass(frozen=True)
class GatewayConfig:
    """Everything the model gateway needs, resolved once up front."""

    mode: str = "direct"
    model: str = DEFAULT_MODEL
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    relay_url: str = DEFAULT_RELAY_URL

    def __post_init__(self):
        if self.mode not in GATEWAY_MODES:
            raise ValueError(f"Unknown gateway mode: {self.mode}. Supported modes: direct, relay")

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    def __repr__(self) -> str:
        key = "***" if self.api_key else None
        return (
            f"GatewayConfig(mode={self.mode!r}, model={self.model!r}, api_key={key!r}, "
            f"base_url={self.base_url!r}, relay_url={self.relay_url!r})"
        )


class Config:
    """Configuration with hierarchy: CLI args > project config > user config > environment > defaults."""

    def __init__(self):
        """Initialize configuration with default values."""
        self.mode: str = "direct"
        self.model: str = DEFAULT_MODEL
        self.api_key: Optional[str] = None
        self.base_url: str = DEFAULT_BASE_URL
        self.relay_url: str = DEFAULT_RELAY_URL
        self.log_level: str = "WARNING"
        self.json_logging: bool = False
        self.log_file: Optional[str] = None

    @classmethod
    def load(
        cls,
        cli_args: Optional[dict[str, Any]] = None,
        env: Optional[Mapping[str, str]] = None,
        config_file: Optional[Path] = None,
    ) -> "Config":
        """
        Load configuration from every source, lowest precedence first.

        This is the only place the process environment is read.

        Args:
            cli_args: Dictionary of CLI arguments to override config
            env: Environment mapping (defaults to os.environ)
            config_file: Explicit config file applied after project config

        Returns:
            Config instance with loaded values
        """
        config = cls()

        env = os.environ if env is None else env
        for var, attr in ENV_VARS.items():
            value = env.get(var)
            if value:
                setattr(config, attr, value)

        # Load user config (~/.vibeprompt/config.yaml)
        user_config_path = Path.home() / ".vibeprompt" / "config.yaml"
        if user_config_path.exists():
            config._load_file(user_config_path)

        # Load project config (.vibeprompt.yaml in current directory)
        project_config_path = Path.cwd() / ".vibeprompt.yaml"
        if project_config_path.exists():
            config._load_file(project_config_path)

        if config_file is not None:
            config._load_file(Path(config_file))

        if cli_args:
            for key, value in cli_args.items():
                if value is not None and hasattr(config, key):
                    setattr(config, key, value)

        return config

    def _load_file(self, config_path: Path) -> None:
        """Load configuration from a YAML or JSON file."""
        try:
            content = config_path.read_text(encoding="utf-8")
            if config_path.suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(content)
            elif config_path.suffix == ".json":
                data = json.loads(content)
            else:
                logger.warning(f"Skipping config file with unknown format: {config_path}")
                return
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Could not read config file {config_path}: {e}")
            return

        if not isinstance(data, dict):
            return

        for key, value in data.items():
            if hasattr(self, key) and value is not None:
                setattr(self, key, value)

    def gateway_config(self) -> GatewayConfig:
        """Freeze the gateway-related settings into a GatewayConfig."""
        api_key = self.api_key.strip().strip('"').strip("'") if self.api_key else None
        return GatewayConfig(
            mode=self.mode,
            model=self.model,
            api_key=api_key or None,
            base_url=self.base_url,
            relay_url=self.relay_url,
        )

    def to_dict(self, redact: bool = True) -> dict[str, Any]:
        """Convert config to dictionary, hiding the credential unless asked not to."""
        api_key = self.api_key
        if redact and api_key:
            api_key = "***"
        return {
            "mode": self.mode,
            "model": self.model,
            "api_key": api_key,
            "base_url": self.base_url,
            "relay_url": self.relay_url,
            "log_level": self.log_level,
            "json_logging": self.json_logging,
            "log_file": self.log_file,
        }

    def save(self, path: Path, format: str = "yaml") -> None:
        """
        Save configuration to file. The credential is never written.

        Args:
            path: Path to save config file
            format: Format to save as ('yaml' or 'json')
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.to_dict()
        data.pop("api_key")

        # Remove None values for cleaner config
        data = {k: v for k, v in data.items() if v is not None}

        if format == "yaml":
            content = yaml.dump(data, default_flow_style=False, sort_keys=False)
        else:
            content = json.dumps(data, indent=2)

        path.write_text(content, encoding="utf-8")
