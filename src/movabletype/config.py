"""Configuration management for movabletype.

Settings come from, lowest to highest priority:

1. Default values
2. User config file (~/.config/movabletype/config.toml)
3. Project config file (.movabletype.toml or an explicit path)
4. Environment variables (MOVABLETYPE_*)

The parser never loads configuration by itself; callers that want file or
environment settings pass ``ParserConfig.load()`` explicitly.

Example:
    >>> config = ParserConfig.load()
    >>> entries = parse(stream, config)
"""

import codecs
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError

ENV_PREFIX = "MOVABLETYPE_"


@dataclass
class ParserConfig:
    """Configuration for parsing an export stream.

    Attributes:
        encoding: Codec used to decode lines that arrive as bytes
        keep_unterminated: Emit a trailing record that has no closing
            ``--------`` line instead of dropping it
    """

    encoding: str = "utf-8"
    keep_unterminated: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid
        """
        if not isinstance(self.encoding, str):
            raise ConfigurationError(
                "encoding must be a string",
                encoding=repr(self.encoding),
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigurationError(
                f"Unknown encoding: {self.encoding}",
                encoding=self.encoding,
            ) from None

        if not isinstance(self.keep_unterminated, bool):
            raise ConfigurationError(
                "keep_unterminated must be a boolean",
                keep_unterminated=repr(self.keep_unterminated),
            )

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        load_user_config: bool = True,
        load_env: bool = True,
    ) -> "ParserConfig":
        """Load configuration from file(s) and environment variables.

        Args:
            config_path: Path to project config file (optional)
            load_user_config: Whether to load the user config file
            load_env: Whether to load environment variables

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_dict: dict[str, Any] = {}

        if load_user_config:
            user_config_path = Path.home() / ".config" / "movabletype" / "config.toml"
            if user_config_path.exists():
                config_dict.update(cls._load_toml(user_config_path))

        project_path = Path(config_path) if config_path else Path(".movabletype.toml")
        if project_path.exists():
            config_dict.update(cls._load_toml(project_path))

        if load_env:
            config_dict.update(cls._load_env())

        unknown = set(config_dict) - cls._field_names()
        if unknown:
            raise ConfigurationError(
                "Unknown configuration keys",
                keys=", ".join(sorted(unknown)),
            )

        return cls(**config_dict)

    @classmethod
    def _field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    @staticmethod
    def _load_toml(path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file.

        A ``[movabletype]`` table is used when present, otherwise the whole
        document.

        Raises:
            ConfigurationError: If the file cannot be read or decoded
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {path}",
                path=str(path),
                error=str(e),
            ) from e

        return data.get("movabletype", data)

    @classmethod
    def _load_env(cls) -> dict[str, Any]:
        """Load configuration from MOVABLETYPE_* environment variables.

        Only variables naming a configuration field are picked up, so
        unrelated settings such as MOVABLETYPE_LOG_LEVEL are left alone.
        For example:
        - MOVABLETYPE_ENCODING=cp1252
        - MOVABLETYPE_KEEP_UNTERMINATED=true
        """
        config: dict[str, Any] = {}
        names = cls._field_names()

        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue

            config_key = key[len(ENV_PREFIX) :].lower()
            if config_key not in names:
                continue

            if value.lower() in ("true", "1", "yes", "on"):
                config[config_key] = True
            elif value.lower() in ("false", "0", "no", "off"):
                config[config_key] = False
            else:
                config[config_key] = value

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def update(self, **kwargs: Any) -> None:
        """Update configuration values.

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid

        Example:
            >>> config = ParserConfig()
            >>> config.update(keep_unterminated=True)
        """
        names = self._field_names()
        for key, value in kwargs.items():
            if key not in names:
                raise ConfigurationError(
                    f"Unknown configuration key: {key}",
                    key=key,
                    valid_keys=", ".join(sorted(names)),
                )
            setattr(self, key, value)

        self._validate()
