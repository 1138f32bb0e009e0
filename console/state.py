"""Session state held by the file manager controller."""

import mimetypes
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from console.schemas import FileRecord


@dataclass(frozen=True)
class LocalFile:
    """
    A local file chosen for upload.
    """
    path: Path
    name: str
    size: int
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, path) -> 'LocalFile':
        """
        Build a LocalFile from a filesystem path.

        Raises:
            FileNotFoundError: If the path does not exist
            IsADirectoryError: If the path is not a regular file
        """
        resolved = Path(path).expanduser()
        if not resolved.exists():
            raise FileNotFoundError(str(path))
        if not resolved.is_file():
            raise IsADirectoryError(str(path))
        content_type, _ = mimetypes.guess_type(resolved.name)
        return cls(
            path=resolved,
            name=resolved.name,
            size=os.path.getsize(resolved),
            content_type=content_type,
        )


@dataclass
class FileManagerState:
    """
    UI-relevant state of the file manager.

    Created when the console mounts and discarded on exit; the backend holds
    all durable truth.
    """
    files: List[FileRecord] = field(default_factory=list)
    is_loading: bool = True
    is_uploading: bool = False
    active_download_id: Optional[str] = None
    deleting_id: Optional[str] = None
    selected_file: Optional[LocalFile] = None
    description: str = ""
    error_message: Optional[str] = None

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def total_size(self) -> int:
        return sum(record.size for record in self.files)

    @property
    def latest_upload(self) -> Optional[str]:
        """Upload time of the first record, the most recent in backend order."""
        return self.files[0].uploaded_at if self.files else None
