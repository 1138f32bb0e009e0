"""Command parser for console input."""

import shlex

from console.models import (
    CommandRequest,
    DeleteCommand,
    DescribeCommand,
    DownloadCommand,
    ListCommand,
    SelectCommand,
    StatusCommand,
    UploadCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0].lower()
    args = tokens[1:]

    if command_name in ("list", "refresh"):
        return _parse_list(args)
    elif command_name == "select":
        return _parse_select(args)
    elif command_name == "describe":
        return DescribeCommand(description=" ".join(args))
    elif command_name == "upload":
        return _parse_upload(args)
    elif command_name == "download":
        return _parse_download(args)
    elif command_name == "delete":
        return _parse_delete(args)
    elif command_name == "status":
        return StatusCommand()
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_list(args: list[str]) -> ListCommand:
    """Parse 'list' command."""
    if args:
        raise ParseError("list takes no arguments")
    return ListCommand()


def _parse_select(args: list[str]) -> SelectCommand:
    """Parse 'select <path>' command."""
    if len(args) != 1:
        raise ParseError("select requires exactly 1 argument: <path>")
    return SelectCommand(path=args[0])


def _parse_upload(args: list[str]) -> UploadCommand:
    """Parse 'upload [path] [-- description...]' command."""
    separator_index = _find_separator(args)

    if separator_index == -1:
        positional, description_words = args, None
    else:
        positional, description_words = args[:separator_index], args[separator_index + 1 :]

    if len(positional) > 1:
        raise ParseError("upload takes at most one path; put the description after '--'")

    path = positional[0] if positional else None
    description = " ".join(description_words) if description_words is not None else None
    return UploadCommand(path=path, description=description)


def _parse_download(args: list[str]) -> DownloadCommand:
    """Parse 'download <id> [directory]' command."""
    if not 1 <= len(args) <= 2:
        raise ParseError("download requires 1 or 2 arguments: <id> [directory]")

    ref = args[0]
    destination = args[1] if len(args) > 1 else None
    return DownloadCommand(ref=ref, destination=destination)


def _parse_delete(args: list[str]) -> DeleteCommand:
    """Parse 'delete <id>' command."""
    if len(args) != 1:
        raise ParseError("delete requires exactly 1 argument: <id>")
    return DeleteCommand(ref=args[0])


def _find_separator(args: list[str]) -> int:
    """Find separator '--' in args, return index or -1."""
    try:
        return args.index("--")
    except ValueError:
        return -1
