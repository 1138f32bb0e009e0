"""Command request data types for the console REPL."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ListCommand:
    """Fetch the file list."""

    command: Literal["list"] = "list"


@dataclass(frozen=True)
class SelectCommand:
    """Choose a local file for the next upload."""

    path: str
    command: Literal["select"] = "select"


@dataclass(frozen=True)
class DescribeCommand:
    """Set the description of the next upload."""

    description: str
    command: Literal["describe"] = "describe"


@dataclass(frozen=True)
class UploadCommand:
    """Upload the selected or given file."""

    path: str | None = None
    description: str | None = None
    command: Literal["upload"] = "upload"


@dataclass(frozen=True)
class DownloadCommand:
    """Download a file by id, id prefix or file name."""

    ref: str
    destination: str | None = None
    command: Literal["download"] = "download"


@dataclass(frozen=True)
class DeleteCommand:
    """Delete a file by id, id prefix or file name."""

    ref: str
    command: Literal["delete"] = "delete"


@dataclass(frozen=True)
class StatusCommand:
    """Show the current state."""

    command: Literal["status"] = "status"


CommandRequest = (
    ListCommand
    | SelectCommand
    | DescribeCommand
    | UploadCommand
    | DownloadCommand
    | DeleteCommand
    | StatusCommand
)
