"""
Client configuration.

Key invariants:
- The API key belongs to one ClientConfig / Client; nothing is process-wide
- File uploads go to upload_host, every other call goes to host
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from . import __version__

DEFAULT_HOST = "view-api.box.com"
DEFAULT_UPLOAD_HOST = "upload.view-api.box.com"
DEFAULT_USER_AGENT = f"box-view-python/{__version__}"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class ClientConfig:
    """Box View client configuration.

    absolute_timeout bounds the whole throttle-retry loop of a single call,
    connect_timeout and read_timeout apply to each socket operation.
    """

    api_key: str | None = None
    protocol: str = "https"
    host: str = DEFAULT_HOST
    # Alternate host that multipart file uploads are sent to
    upload_host: str = DEFAULT_UPLOAD_HOST
    base_path: str = "/1"
    # Seconds before giving up while the server keeps throttling
    absolute_timeout: float = 62
    connect_timeout: float = 10
    read_timeout: float = 60
    user_agent: str = DEFAULT_USER_AGENT

    def base_url(self, host: str | None = None) -> str:
        """Versioned API root for the given host (default host if omitted)."""
        return f"{self.protocol}://{host or self.host}{self.base_path}"

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("box_view.api_key is required")
        if not self.host:
            errors.append("box_view.host is required")
        if not self.upload_host:
            errors.append("box_view.upload_host is required")
        if self.base_path and not self.base_path.startswith("/"):
            errors.append("box_view.base_path must start with '/'")
        if self.absolute_timeout <= 0:
            errors.append("box_view.absolute_timeout must be positive")
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            errors.append("box_view socket timeouts must be positive")

        return errors


def load_config(config_path: Path) -> ClientConfig:
    """
    Load configuration from YAML file.

    Settings live under a top-level ``box_view`` key. Environment variables
    override config values:
    - BOX_VIEW_API_KEY
    - BOX_VIEW_HOST
    - BOX_VIEW_UPLOAD_HOST
    - BOX_VIEW_ABSOLUTE_TIMEOUT (seconds)
    """
    config_path = Path(config_path)
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    box_data = data.get("box_view", {}) or {}

    absolute_timeout = box_data.get("absolute_timeout", 62)
    absolute_timeout_env = os.environ.get("BOX_VIEW_ABSOLUTE_TIMEOUT", "")
    if absolute_timeout_env:
        try:
            absolute_timeout = float(absolute_timeout_env)
        except ValueError:
            raise ConfigValidationError(
                f"BOX_VIEW_ABSOLUTE_TIMEOUT must be a number, got {absolute_timeout_env!r}"
            )

    return ClientConfig(
        api_key=os.environ.get("BOX_VIEW_API_KEY", box_data.get("api_key")),
        protocol=box_data.get("protocol", "https"),
        host=os.environ.get("BOX_VIEW_HOST", box_data.get("host", DEFAULT_HOST)),
        upload_host=os.environ.get(
            "BOX_VIEW_UPLOAD_HOST", box_data.get("upload_host", DEFAULT_UPLOAD_HOST)
        ),
        base_path=box_data.get("base_path", "/1"),
        absolute_timeout=absolute_timeout,
        connect_timeout=box_data.get("connect_timeout", 10),
        read_timeout=box_data.get("read_timeout", 60),
        user_agent=box_data.get("user_agent", DEFAULT_USER_AGENT),
    )
