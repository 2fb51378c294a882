"""
Configuration System for casefix.

Settings live in a single JSON or YAML file with one section per concern;
a couple of environment variables override the rewrite policy without
editing the file.
"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from .constants import (
    CapitalizationStrategy,
    DEFAULT_CONFIG_FILENAMES,
    DEFAULT_CONSTANT_SENTINEL,
    DEFAULT_LOCAL_SENTINEL,
    DEFAULT_METHOD_SENTINEL,
    DEFAULT_OTHER_SENTINEL,
    DEFAULT_TYPE_SENTINEL,
    DIAGNOSTIC_ID,
    DIAGNOSTIC_MESSAGE_FORMAT,
    ENV_CONFIG_FILE,
    ENV_LOG_LEVEL,
    ENV_RETAIN_DIGITS,
    ENV_STRATEGY,
    FALSY_VALUES,
    TRUTHY_VALUES,
)
from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class PolicyConfig:
    """Rewrite policy configuration."""

    strategy: str = CapitalizationStrategy.DIGIT_TRIGGERED.value
    retain_digits: bool = True


@dataclass
class SentinelConfig:
    """Placeholder names used when an identifier has no usable characters."""

    type_name: str = DEFAULT_TYPE_SENTINEL
    method_name: str = DEFAULT_METHOD_SENTINEL
    local_name: str = DEFAULT_LOCAL_SENTINEL
    constant_name: str = DEFAULT_CONSTANT_SENTINEL
    other_name: str = DEFAULT_OTHER_SENTINEL


@dataclass
class AnalyzerConfig:
    """Diagnostic reporting configuration."""

    diagnostic_id: str = DIAGNOSTIC_ID
    message_format: str = DIAGNOSTIC_MESSAGE_FORMAT


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "casefix.log"


def _parse_bool(value: Any, key: str) -> bool:
    """Interpret a boolean from config data or an environment string."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUTHY_VALUES:
        return True
    if text in FALSY_VALUES:
        return False
    raise ConfigurationError(f"Expected a boolean, got {value!r}", key=key)


def _parse_str(value: Any, key: str) -> str:
    """Reject non-string values for settings that name identifiers or formats."""
    if not isinstance(value, str):
        raise ConfigurationError(f"Expected a string, got {value!r}", key=key)
    return value


def _check_message_format(message_format: str) -> str:
    """Trial-format a diagnostic message so bad placeholders fail at load time."""
    try:
        message_format.format(name="name", style="style", suggestion="suggestion")
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        raise ConfigurationError(
            f"Invalid message format {message_format!r}: {e!r}", key="analyzer.message_format"
        ) from e
    return message_format


class CasefixConfig:
    """
    Unified configuration manager for casefix.

    Sections are plain dataclasses built from the loaded file; missing keys
    fall back to their defaults, so an absent file yields a fully default
    configuration.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, ``CASEFIX_CONFIG``
                or a ``casefix.yaml``/``casefix.json`` in the working directory
                is used when present.
        """
        self._explicit = config_file is not None or bool(os.getenv(ENV_CONFIG_FILE))
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.policy = self._create_policy_config()
        self.sentinels = self._create_sentinel_config()
        self.analyzer = self._create_analyzer_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv(ENV_CONFIG_FILE)
        if env_file:
            return Path(env_file)

        for filename in DEFAULT_CONFIG_FILENAMES:
            candidate = Path.cwd() / filename
            if candidate.exists():
                return candidate
        return Path.cwd() / DEFAULT_CONFIG_FILENAMES[-1]

    def _is_yaml(self) -> bool:
        return self.config_file.suffix.lower() in YAML_SUFFIXES

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            if self._explicit:
                logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            else:
                logger.debug(f"No configuration file at {self.config_file}, using defaults")
            return {}

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                if self._is_yaml():
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration: {e}", config_file=str(self.config_file)
            ) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", config_file=str(self.config_file)
            )

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        data = self._config_data.get(name) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Section '{name}' must be a mapping", config_file=str(self.config_file), key=name
            )
        return data

    def _create_policy_config(self) -> PolicyConfig:
        """Create policy configuration from loaded data and environment."""
        policy_data = self._section("policy")

        strategy = os.getenv(ENV_STRATEGY) or policy_data.get(
            "strategy", CapitalizationStrategy.DIGIT_TRIGGERED.value
        )

        env_digits = os.getenv(ENV_RETAIN_DIGITS)
        if env_digits:
            retain_digits = _parse_bool(env_digits, ENV_RETAIN_DIGITS)
        else:
            retain_digits = _parse_bool(policy_data.get("retain_digits", True), "policy.retain_digits")

        return PolicyConfig(strategy=str(strategy).lower(), retain_digits=retain_digits)

    def _create_sentinel_config(self) -> SentinelConfig:
        """Create sentinel configuration from loaded data."""
        sentinel_data = self._section("sentinels")

        defaults = SentinelConfig()
        values = {
            key: _parse_str(sentinel_data.get(key, default), f"sentinels.{key}")
            for key, default in asdict(defaults).items()
        }
        return SentinelConfig(**values)

    def _create_analyzer_config(self) -> AnalyzerConfig:
        """Create analyzer configuration from loaded data."""
        analyzer_data = self._section("analyzer")

        message_format = _parse_str(
            analyzer_data.get("message_format", DIAGNOSTIC_MESSAGE_FORMAT), "analyzer.message_format"
        )
        return AnalyzerConfig(
            diagnostic_id=_parse_str(analyzer_data.get("diagnostic_id", DIAGNOSTIC_ID), "analyzer.diagnostic_id"),
            message_format=_check_message_format(message_format),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=log_data.get("level", os.getenv(ENV_LOG_LEVEL, "INFO")),
            enable_file_logging=_parse_bool(
                log_data.get("enable_file_logging", False), "logging.enable_file_logging"
            ),
            log_file=log_data.get("log_file", "casefix.log"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective configuration as nested dictionaries."""
        return {
            "version": "1.0",
            "policy": asdict(self.policy),
            "sentinels": asdict(self.sentinels),
            "analyzer": asdict(self.analyzer),
            "logging": asdict(self.logging),
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = self.to_dict()

        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                if self._is_yaml():
                    yaml.safe_dump(config_data, f, sort_keys=False)
                else:
                    json.dump(config_data, f, indent=2)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration: {e}", config_file=str(self.config_file)
            ) from e
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[CasefixConfig] = None


def get_config() -> CasefixConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = CasefixConfig()
    return _global_config


def set_config(config: Optional[CasefixConfig]) -> None:
    """Set the global configuration instance (None resets to lazy default)."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> CasefixConfig:
    """Load configuration from a specific file."""
    return CasefixConfig(config_file)
