"""Command handler functions bridging REPL commands to the controller."""

from pathlib import Path

from common.logging_config import get_logger
from console.controller import FileManagerController
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
from console.render import render_file_table, render_status, render_upload_panel

logger = get_logger(__name__)


def _error_text(controller: FileManagerController) -> str:
    return controller.messages.get('error', message=controller.state.error_message)


async def handle_list(cmd: ListCommand, controller: FileManagerController) -> str:
    """
    Handle 'list' and 'refresh' commands.

    Returns:
        Rendered file table, including any listing error
    """
    logger.info("Executing list command")
    await controller.refresh()
    return render_file_table(controller.state, controller.messages)


def handle_select(cmd: SelectCommand, controller: FileManagerController) -> str:
    """Handle 'select <path>' command."""
    if not controller.select_file(cmd.path):
        return _error_text(controller)
    return render_upload_panel(controller.state, controller.messages)


def handle_describe(cmd: DescribeCommand, controller: FileManagerController) -> str:
    """Handle 'describe <text...>' command."""
    controller.set_description(cmd.description)
    return render_upload_panel(controller.state, controller.messages)


async def handle_upload(cmd: UploadCommand, controller: FileManagerController) -> str:
    """
    Handle 'upload' command.

    Returns:
        Refreshed file table on success, error message otherwise
    """
    logger.info(f"Executing upload command: path={cmd.path}")
    if not await controller.upload(cmd.path, cmd.description):
        return _error_text(controller)

    output = [controller.messages.get('upload_done'), render_file_table(controller.state, controller.messages)]
    return "\n".join(output)


async def handle_download(cmd: DownloadCommand, controller: FileManagerController) -> str:
    """
    Handle 'download <id> [directory]' command.

    Returns:
        Saved path on success, error message otherwise
    """
    logger.info(f"Executing download command: ref={cmd.ref} destination={cmd.destination}")
    record = controller.find(cmd.ref)
    if record is None:
        return controller.messages.get('error', message=controller.messages.get('unknown_record', ref=cmd.ref))

    destination = Path(cmd.destination) if cmd.destination else None
    saved_path = await controller.download(record, destination)
    if saved_path is None:
        return _error_text(controller)
    return controller.messages.get('download_done', path=saved_path)


async def handle_delete(cmd: DeleteCommand, controller: FileManagerController) -> str:
    """
    Handle 'delete <id>' command.

    Returns:
        Updated file table on success, error message otherwise
    """
    logger.info(f"Executing delete command: ref={cmd.ref}")
    record = controller.find(cmd.ref)
    if record is None:
        return controller.messages.get('error', message=controller.messages.get('unknown_record', ref=cmd.ref))

    if not await controller.delete(record.id):
        return _error_text(controller)
    return "\n".join(
        [controller.messages.get('delete_done'), render_file_table(controller.state, controller.messages)]
    )


def handle_status(cmd: StatusCommand, controller: FileManagerController) -> str:
    """Handle 'status' command."""
    return render_status(controller.state, controller.messages)


async def dispatch_command(cmd_obj: CommandRequest, controller: FileManagerController) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, ListCommand):
        return await handle_list(cmd_obj, controller)
    elif isinstance(cmd_obj, SelectCommand):
        return handle_select(cmd_obj, controller)
    elif isinstance(cmd_obj, DescribeCommand):
        return handle_describe(cmd_obj, controller)
    elif isinstance(cmd_obj, UploadCommand):
        return await handle_upload(cmd_obj, controller)
    elif isinstance(cmd_obj, DownloadCommand):
        return await handle_download(cmd_obj, controller)
    elif isinstance(cmd_obj, DeleteCommand):
        return await handle_delete(cmd_obj, controller)
    elif isinstance(cmd_obj, StatusCommand):
        return handle_status(cmd_obj, controller)
    else:
        return f"Unknown command type: {type(cmd_obj)}"
