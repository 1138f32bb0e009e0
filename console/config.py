"""Configuration management for the FileDesk console."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from common.logging_config import get_logger

logger = get_logger(__name__)


def default_config_path() -> Path:
    """Location of the per-user config file."""
    return Path.home() / '.filedesk' / 'config.json'


class Config:
    """Manages console configuration stored in a JSON file."""

    DEFAULT_CONFIG = {
        "api_scheme": os.environ.get("FILEDESK_API_SCHEME", "http"),
        "api_host": os.environ.get("FILEDESK_API_HOST", "localhost"),
        "api_port": int(os.environ.get("FILEDESK_API_PORT", "3000")),
        "timeout": 30,
        "download_dir": os.environ.get("FILEDESK_DOWNLOAD_DIR", str(Path.home() / "Downloads")),
        "locale": os.environ.get("FILEDESK_LOCALE", "ja"),
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.filedesk/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.filedesk' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            logger.warning(f"Config directory not writable, using {self.config_path}")

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Config file unreadable ({e}), backing up to {backup_path}")
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config file: {copy_error}")
                return self.DEFAULT_CONFIG.copy()

        config = self.DEFAULT_CONFIG.copy()
        try:
            with open(self.config_path, 'w') as f:
                json.dump(config, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not write default config: {e}")
        return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config: {e}")

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value and save to file."""
        self.data[key] = value
        self.save()

    def get_base_url(self) -> str:
        """
        Get backend base URL.

        Returns:
            Base URL string (e.g., "http://localhost:3000")
        """
        scheme = self.data.get('api_scheme', 'http')
        host = self.data.get('api_host', 'localhost')
        port = self.data.get('api_port', 3000)
        return f"{scheme}://{host}:{port}"

    def get_timeout(self) -> float:
        """Per-request timeout in seconds."""
        return self.data.get('timeout', 30)

    def get_download_dir(self) -> Path:
        """Directory that downloaded files are saved into."""
        return Path(self.data.get('download_dir') or Path.home() / 'Downloads').expanduser()

    def get_locale(self) -> str:
        return self.data.get('locale', 'ja')
