"""Configuration loader shared by the pipeline CLIs."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from common.errors import ConfigurationError

CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"


@dataclass
class NewsApiConfig:
    base_url: str = "https://newsapi.ai"
    topic_uri: str = ""
    request_timeout: int = 30
    data_types: list[str] = field(default_factory=lambda: ["news", "pr", "blog"])
    article_body_len: int = -1


@dataclass
class DigestConfig:
    max_items: int = 8
    query_limit: int = 50
    excerpt_length: int = 150
    sender: str = ""
    subject_template: str = "{month} {year} Newsletter"


@dataclass
class BroadcastConfig:
    candidate_pool: int = 10
    trailing_days: int = 30
    query_limit: int = 50
    min_post_interval: float = 2.0
    max_retries: int = 3
    retry_delay: float = 5.0


@dataclass
class Config:
    news_api: NewsApiConfig = field(default_factory=NewsApiConfig)
    digest: DigestConfig = field(default_factory=DigestConfig)
    broadcast: BroadcastConfig = field(default_factory=BroadcastConfig)


def find_config_path(
    config_name: str | None,
    config_dir: Path = CONFIG_DIR,
    default_name: str = "prod",
    env_var: str | None = "CONFIG_ENV",
) -> Path:
    """Find config file path, checking env var and defaults.

    Args:
        config_name: Name of config (without .yaml), a path to a YAML file, or None for default
        config_dir: Directory containing config files
        default_name: Default config name if config_name is None
        env_var: Environment variable to check for config name

    Returns:
        Path to the config file

    Raises:
        ConfigurationError: If the config file does not exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    if config_name.endswith((".yaml", ".yml")):
        config_path = Path(config_name)
    else:
        config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(config_name: str | None = None) -> Config:
    """Load configuration from a YAML file under ``configs/``."""
    return parse_config(load_yaml(find_config_path(config_name)))


def parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object."""
    news_api = data.get("news_api", {})
    digest = data.get("digest", {})
    broadcast = data.get("broadcast", {})

    return Config(
        news_api=NewsApiConfig(
            base_url=news_api.get("base_url", "https://newsapi.ai"),
            topic_uri=news_api.get("topic_uri", ""),
            request_timeout=news_api.get("request_timeout", 30),
            data_types=news_api.get("data_types", ["news", "pr", "blog"]),
            article_body_len=news_api.get("article_body_len", -1),
        ),
        digest=DigestConfig(
            max_items=digest.get("max_items", 8),
            query_limit=digest.get("query_limit", 50),
            excerpt_length=digest.get("excerpt_length", 150),
            sender=digest.get("sender", ""),
            subject_template=digest.get("subject_template", "{month} {year} Newsletter"),
        ),
        broadcast=BroadcastConfig(
            candidate_pool=broadcast.get("candidate_pool", 10),
            trailing_days=broadcast.get("trailing_days", 30),
            query_limit=broadcast.get("query_limit", 50),
            min_post_interval=broadcast.get("min_post_interval", 2.0),
            max_retries=broadcast.get("max_retries", 3),
            retry_delay=broadcast.get("retry_delay", 5.0),
        ),
    )


def require_env(*names: str) -> dict[str, str]:
    """Read required environment variables.

    Raises:
        ConfigurationError: Naming every variable that is unset or empty.
    """
    missing = [name for name in names if not os.environ.get(name)]
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")
    return {name: os.environ[name] for name in names}
