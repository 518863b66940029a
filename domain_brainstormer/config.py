"""Configuration loading from YAML with environment overrides."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .checkers.rdap_checker import RDAP_SERVERS
from .utils.cache import DEFAULT_TTL

DEFAULT_CONFIG_PATH = "config/config.yaml"
DEFAULT_TLDS = ['.com', '.io', '.dev', '.co', '.net', '.app', '.ai']


class ConfigError(ValueError):
    """Raised for invalid configuration values."""


@dataclass
class LoggingSettings:
    level: str = "INFO"
    file: Optional[str] = None
    rotate_max_mb: int = 5
    rotate_backups: int = 3


@dataclass
class GeneratorSettings:
    max_suggestions: int = 20
    min_score: int = 55


@dataclass
class CheckerSettings:
    max_concurrent: int = 10
    timeout: float = 8.0
    max_retries: int = 3
    retry_delay: float = 2.0
    batch_delay: float = 0.2
    rdap_servers: Dict[str, str] = field(default_factory=lambda: dict(RDAP_SERVERS))


@dataclass
class CacheSettings:
    enabled: bool = True
    file: str = ".cache/availability-cache.json"
    ttl: float = DEFAULT_TTL
    flush_every: int = 10


@dataclass
class Settings:
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    generator: GeneratorSettings = field(default_factory=GeneratorSettings)
    checker: CheckerSettings = field(default_factory=CheckerSettings)
    cache: CacheSettings = field(default_factory=CacheSettings)
    tlds: List[str] = field(default_factory=lambda: list(DEFAULT_TLDS))


# env var -> (section, key, parser)
ENV_OVERRIDES = {
    'LOG_LEVEL': ('logging', 'level', str),
    'LOG_FILE': ('logging', 'file', str),
    'MAX_SUGGESTIONS': ('generator', 'max_suggestions', int),
    'MIN_SCORE': ('generator', 'min_score', int),
    'MAX_CONCURRENT': ('checker', 'max_concurrent', int),
    'WHOIS_TIMEOUT': ('checker', 'timeout', float),
    'MAX_RETRIES': ('checker', 'max_retries', int),
    'RETRY_DELAY': ('checker', 'retry_delay', float),
    'CACHE_ENABLED': ('cache', 'enabled', lambda v: v.strip().lower() in ('1', 'true', 'yes', 'on')),
    'CACHE_FILE': ('cache', 'file', str),
    'CACHE_TTL': ('cache', 'ttl', float),
}


def _split_tlds(value: str) -> List[str]:
    return [t.strip() for t in value.split(',') if t.strip()]


def _apply_section(target: Any, values: Dict[str, Any], section: str):
    if not isinstance(values, dict):
        raise ConfigError(f"'{section}' must be a mapping")
    for key, value in values.items():
        if not hasattr(target, key):
            raise ConfigError(f"Unknown setting '{section}.{key}'")
        setattr(target, key, value)


def validate(settings: Settings) -> Settings:
    """Check ranges; raises ConfigError on the first bad value."""
    if not 0 <= settings.generator.min_score <= 100:
        raise ConfigError("generator.min_score must be between 0 and 100")
    if settings.generator.max_suggestions < 1:
        raise ConfigError("generator.max_suggestions must be at least 1")
    if settings.checker.max_concurrent < 1:
        raise ConfigError("checker.max_concurrent must be at least 1")
    if settings.checker.max_retries < 0:
        raise ConfigError("checker.max_retries must not be negative")
    if settings.checker.timeout <= 0:
        raise ConfigError("checker.timeout must be positive")
    if settings.checker.retry_delay < 0 or settings.checker.batch_delay < 0:
        raise ConfigError("checker delays must not be negative")
    if settings.cache.ttl <= 0:
        raise ConfigError("cache.ttl must be positive")
    if not settings.tlds:
        raise ConfigError("at least one TLD is required")

    settings.tlds = [t if t.startswith('.') else '.' + t for t in (t.strip().lower() for t in settings.tlds)]
    settings.checker.rdap_servers = {
        (tld if tld.startswith('.') else '.' + tld).lower(): url
        for tld, url in settings.checker.rdap_servers.items()
    }
    return settings


def load_config(config_path: str = DEFAULT_CONFIG_PATH, environ: Optional[Dict[str, str]] = None) -> Settings:
    """Load settings from a YAML file, then apply environment overrides.

    A missing file yields the defaults.
    """
    settings = Settings()
    environ = os.environ if environ is None else environ

    config_file = Path(config_path)
    if config_file.exists():
        try:
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping")

        for section in ('logging', 'generator', 'checker', 'cache'):
            if section in data:
                _apply_section(getattr(settings, section), data[section], section)
        if 'tlds' in data:
            settings.tlds = list(data['tlds'])

    for var, (section, key, parse) in ENV_OVERRIDES.items():
        if environ.get(var):
            try:
                setattr(getattr(settings, section), key, parse(environ[var]))
            except ValueError as e:
                raise ConfigError(f"Invalid value for {var}: {environ[var]!r}") from e
    if environ.get('DEFAULT_TLDS'):
        settings.tlds = _split_tlds(environ['DEFAULT_TLDS'])

    return validate(settings)
