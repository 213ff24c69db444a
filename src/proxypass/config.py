"""Configuration loading and defaults for ProxyPass."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)

# Response prefixes the fetch gateway uses to report a failure as text
DEFAULT_ERROR_PREFIXES = ["error:", "http error"]


def get_config_dir() -> Path:
    """Get the proxypass config directory (XDG-style)."""
    return Path.home() / ".config" / "proxypass"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def get_default_data_dir() -> Path:
    """Get the default data directory for the log file."""
    return Path.home() / ".local" / "share" / "proxypass"


@dataclass
class FetchConfig:
    """Fetch gateway configuration."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True
    error_prefixes: list[str] = field(default_factory=lambda: list(DEFAULT_ERROR_PREFIXES))


@dataclass
class Config:
    """Application configuration."""

    home_url: str = ""  # empty = start idle
    data_directory: Path = field(default_factory=lambda: get_default_data_dir())
    log_level: str = "INFO"
    fetch: FetchConfig = field(default_factory=FetchConfig)

    def get_log_path(self) -> Path:
        """Get the log file path based on configured data directory."""
        return self.data_directory / "proxypass.log"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.data_directory.mkdir(parents=True, exist_ok=True)
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        data_dir = data.get("data_directory", str(get_default_data_dir()))

        fetch_data = data.get("fetch", {})
        fetch = FetchConfig(
            timeout=float(fetch_data.get("timeout", 10.0)),
            user_agent=fetch_data.get("user_agent", DEFAULT_USER_AGENT),
            follow_redirects=fetch_data.get("follow_redirects", True),
            error_prefixes=fetch_data.get("error_prefixes", list(DEFAULT_ERROR_PREFIXES)),
        )

        config = cls(
            home_url=data.get("home_url", ""),
            data_directory=Path(data_dir).expanduser(),
            log_level=data.get("log_level", "INFO"),
            fetch=fetch,
        )

        config.data_directory.mkdir(parents=True, exist_ok=True)

        return config

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        prefixes = ", ".join(f'"{p}"' for p in self.fetch.error_prefixes)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# ProxyPass Configuration',
            '',
            '# Page loaded on startup (empty = start with a blank view)',
            f'home_url = "{self.home_url}"',
            '',
            '# Directory for the log file',
            '# Default: ~/.local/share/proxypass',
            f'data_directory = "{self.data_directory}"',
            '',
            '# DEBUG, INFO, WARNING or ERROR',
            f'log_level = "{self.log_level}"',
            '',
            '[fetch]',
            f'timeout = {self.fetch.timeout}  # seconds',
            f'user_agent = "{self.fetch.user_agent}"',
            f'follow_redirects = {str(self.fetch.follow_redirects).lower()}',
            '# Responses starting with one of these (any case) are shown as errors',
            f'error_prefixes = [{prefixes}]',
        ]

        config_path.write_text("\n".join(lines) + "\n")
