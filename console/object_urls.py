"""Temporary object URLs for downloaded bytes and the save-as step."""

import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import unquote, urlparse

from common.logging_config import get_logger

logger = get_logger(__name__)


class ObjectUrlStore:
    """
    Holds downloaded bytes in temporary files addressed by ``file://`` URLs.

    Every URL returned by ``create`` must be passed to ``revoke`` once it has
    been used. Revoking an unknown or already revoked URL is a no-op.
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = root
        self._urls: Dict[str, Path] = {}

    def create(self, data: bytes) -> str:
        """Store bytes and return a URL referencing them."""
        if self.root is not None:
            self.root.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            prefix='filedesk-', suffix='.blob', dir=self.root, delete=False
        ) as f:
            f.write(data)
            path = Path(f.name)
        url = path.as_uri()
        self._urls[url] = path
        logger.debug(f"Created object URL {url} ({len(data)} bytes)")
        return url

    def resolve(self, url: str) -> Path:
        """
        Path of the bytes behind a live URL.

        Raises:
            KeyError: If the URL was never created or has been revoked
        """
        return self._urls[url]

    def revoke(self, url: str) -> None:
        """Release a URL and delete its backing file."""
        path = self._urls.pop(url, None)
        if path is None:
            return
        path.unlink(missing_ok=True)
        logger.debug(f"Revoked object URL {url}")

    def active_urls(self) -> list:
        return list(self._urls)

    def close(self) -> None:
        """Revoke every outstanding URL."""
        for url in list(self._urls):
            self.revoke(url)


def _unique_destination(directory: Path, file_name: str) -> Path:
    """Pick ``name``, ``name (1)``, ``name (2)``... so existing files are never overwritten."""
    candidate = directory / file_name
    stem, suffix = candidate.stem, candidate.suffix
    counter = 1
    while candidate.exists():
        candidate = directory / f"{stem} ({counter}){suffix}"
        counter += 1
    return candidate


def safe_file_name(file_name: str) -> str:
    """Strip directory components so a server-supplied name stays inside the target directory."""
    name = Path(unquote(file_name).replace('\\', '/')).name
    return name if name not in ('', '.', '..') else 'download'


class FileSaver:
    """Saves the bytes behind an object URL into a download directory."""

    def __init__(self, store: ObjectUrlStore, download_dir: Path):
        self.store = store
        self.download_dir = Path(download_dir)

    def save(self, url: str, suggested_name: str, destination: Optional[Path] = None) -> Path:
        """
        Copy the object URL's bytes to a new file named after ``suggested_name``.

        Args:
            url: Live object URL
            suggested_name: File name offered by the backend
            destination: Directory overriding the configured download directory

        Returns:
            Path of the saved file
        """
        source = self.store.resolve(url)
        if urlparse(url).scheme != 'file':
            raise ValueError(f"Unsupported object URL: {url}")

        directory = Path(destination).expanduser() if destination else self.download_dir
        directory.mkdir(parents=True, exist_ok=True)
        target = _unique_destination(directory, safe_file_name(suggested_name))
        shutil.copyfile(source, target)
        logger.info(f"Saved {suggested_name} to {target}")
        return target
