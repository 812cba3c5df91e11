"""
Configuration management using Pydantic and Pydantic Settings.

Loads the application configuration from a YAML file (default:
config/app.yaml) and provides type-safe access to:
- Transmission RPC endpoint and credentials
- The ordered list of RSS feeds to poll
- Named parser rules (tag path + attribute) referenced by the feeds

Transmission settings missing from the YAML file may be supplied through
TRANSMISSION_* environment variables or a .env file, so credentials do
not have to live next to the feed list.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union
import logging

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rss_transmission.exceptions import ConfigError
from rss_transmission.models.rule import ParserRule
from rss_transmission.validators import (
    split_tag_path,
    validate_tag_path,
    validate_attribute_name
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/app.yaml'


class TransmissionConfig(BaseSettings):
    """
    Transmission daemon connection settings.

    Environment Variables (from .env):
        TRANSMISSION_HOST: Daemon host (e.g., "localhost")
        TRANSMISSION_PORT: RPC port (e.g., 9091)
        TRANSMISSION_PATH: RPC path without leading slash (e.g., "transmission/rpc")
        TRANSMISSION_USERNAME: Basic-auth user
        TRANSMISSION_PASSWORD: Basic-auth password

    Values given explicitly (from the YAML file) take precedence over the
    environment.

    Example:
        >>> config = TransmissionConfig(host='nas', port=9091, path='transmission/rpc',
        ...                             username='u', password='p')
        >>> config.endpoint_url
        'http://nas:9091/transmission/rpc'
    """

    host: str = Field(
        default="localhost",
        description="Transmission daemon host"
    )

    port: int = Field(
        default=9091,
        ge=0,
        le=65535,
        description="Transmission RPC port"
    )

    path: str = Field(
        default="transmission/rpc",
        description="RPC path appended to http://{host}:{port}/"
    )

    username: str = Field(
        default="",
        description="Basic-auth user name"
    )

    password: str = Field(
        default="",
        description="Basic-auth password",
        repr=False
    )

    model_config = SettingsConfigDict(
        env_prefix='TRANSMISSION_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
        frozen=True
    )

    @property
    def endpoint_url(self) -> str:
        """RPC endpoint in the form http://{host}:{port}/{path}."""
        return f"http://{self.host}:{self.port}/{self.path}"


class FeedConfig(BaseModel):
    """One feed to poll and the name of the parser rule to apply."""

    url: str = Field(..., min_length=1, description="Feed URL")
    parser: str = Field(..., min_length=1, description="Key into the parser table")

    model_config = ConfigDict(frozen=True)


class ParserConfig(BaseModel):
    """
    Parser definition as written in the configuration file.

    Attributes:
        path: Comma-separated tag path, split without trimming whitespace
        property: Attribute holding the download link
    """

    path: str = Field(..., description="Comma-separated tag path, e.g. 'rss,channel,item'")
    property: str = Field(..., description="Attribute name, e.g. 'url'")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def check_rule(self) -> 'ParserConfig':
        """Fail at load time rather than at the first feed using the rule."""
        validate_tag_path(split_tag_path(self.path))
        validate_attribute_name(self.property)
        return self

    def to_rule(self) -> ParserRule:
        return ParserRule.from_config(self.path, self.property)


class AppConfig(BaseModel):
    """
    Complete application configuration.

    YAML layout:
        transmission-rpc:
          host: localhost
          port: 9091
          path: transmission/rpc
          username: admin
          password: secret
        rss:
          - url: https://example.org/feed.xml
            parser: default
        parser:
          default:
            path: rss,channel,item,enclosure
            property: url

    Attributes:
        transmission_rpc: Daemon endpoint and credentials
        rss: Feeds in processing order
        parser: Parser rules by name
        fetch_timeout: HTTP timeout in seconds for feed downloads
        rpc_timeout: Timeout in seconds for Transmission RPC requests
        user_agent: User-Agent header sent with feed requests
    """

    transmission_rpc: TransmissionConfig = Field(
        default_factory=TransmissionConfig,
        alias='transmission-rpc'
    )
    rss: List[FeedConfig] = Field(default_factory=list)
    parser: Dict[str, ParserConfig] = Field(default_factory=dict)
    fetch_timeout: float = Field(default=30.0, gt=0)
    rpc_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="rss-transmission/0.1.0")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

    @model_validator(mode='after')
    def check_parser_references(self) -> 'AppConfig':
        """Every feed must name a parser defined in the parser table."""
        missing = [feed.parser for feed in self.rss if feed.parser not in self.parser]
        if missing:
            raise ValueError(
                f"Parser(s) {sorted(set(missing))} not found in configuration. "
                f"Defined parsers: {sorted(self.parser.keys())}"
            )
        return self

    def rule_for(self, feed: FeedConfig) -> ParserRule:
        """
        Resolve the ParserRule a feed refers to.

        Raises:
            KeyError: If the parser name is not defined
        """
        if feed.parser not in self.parser:
            raise KeyError(f"Parser '{feed.parser}' not found in configuration")
        return self.parser[feed.parser].to_rule()


def parse_config(data: Optional[dict]) -> AppConfig:
    """
    Validate an already-parsed configuration mapping.

    The transmission section is instantiated through TransmissionConfig
    directly so that environment variables can fill fields the mapping
    leaves out.

    Raises:
        ConfigError: If the mapping fails validation
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration must be a mapping at top level, got {type(data).__name__}"
        )

    data = dict(data)
    try:
        transmission = data.pop('transmission-rpc', None)
        if transmission is None:
            transmission = data.pop('transmission_rpc', None) or {}
        if not isinstance(transmission, dict):
            raise ConfigError("'transmission-rpc' must be a mapping")
        data['transmission-rpc'] = TransmissionConfig(**transmission)
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> AppConfig:
    """
    Load and validate the application configuration file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Validated AppConfig

    Raises:
        ConfigError: If the file is missing, not valid YAML, or invalid

    Example:
        >>> config = load_config('config/app.yaml')
        >>> config.transmission_rpc.endpoint_url
        'http://localhost:9091/transmission/rpc'
    """
    config_path = Path(path)

    if not config_path.exists():
        raise ConfigError(
            f"Config file not found at {config_path}. "
            f"Pass --config or create {DEFAULT_CONFIG_PATH}."
        )

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read app config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse app config {config_path}: {e}") from e

    config = parse_config(data)

    logger.debug(
        f"Loaded {config_path}: {len(config.rss)} feed(s), "
        f"{len(config.parser)} parser(s), endpoint {config.transmission_rpc.endpoint_url}"
    )

    return config
