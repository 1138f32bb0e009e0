"""Plain-text rendering of the file manager state for the REPL."""

from typing import List

from console.constants import ACCENT, DIM, RESET, WARNING
from console.formatters import format_date, format_file_size
from console.messages import Messages
from console.schemas import FileRecord
from console.state import FileManagerState


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


def render_summary(state: FileManagerState, messages: Messages) -> str:
    """Header with file count, total size and the latest upload time."""
    latest = state.latest_upload
    latest_str = format_date(latest, messages.locale) if latest else "-"
    return (
        f"{ACCENT}{messages.get('title')}{RESET}\n"
        f"{DIM}{messages.get('subtitle')}{RESET}\n"
        f"  {messages.get('file_count')}: {state.file_count}   "
        f"{messages.get('total_size')}: {format_file_size(state.total_size)}   "
        f"{messages.get('last_updated')}: {latest_str}"
    )


def _row_status(record: FileRecord, state: FileManagerState, messages: Messages) -> str:
    if state.active_download_id == record.id:
        return messages.get('downloading')
    if state.deleting_id == record.id:
        return messages.get('deleting')
    return ""


def render_file_table(state: FileManagerState, messages: Messages, name_width: int = 32) -> str:
    """
    File listing in backend order, one row per record with its description below.

    Row ids are shortened to 8 characters; commands accept any unique prefix.
    """
    lines: List[str] = [
        f"  {messages.get('column_id'):<10}{messages.get('column_name'):<{name_width + 2}}"
        f"{messages.get('column_size'):>10}  {messages.get('column_uploaded')}"
    ]

    if not state.files and not state.is_loading:
        lines.append(f"  {DIM}{messages.get('empty')}{RESET}")

    for record in state.files:
        status = _row_status(record, state, messages)
        lines.append(
            f"  {record.id[:8]:<10}{_truncate(record.file_name, name_width):<{name_width + 2}}"
            f"{format_file_size(record.size):>10}  {format_date(record.uploaded_at, messages.locale)}"
            + (f"  {WARNING}{status}{RESET}" if status else "")
        )
        if record.description:
            lines.append(f"  {'':<10}{DIM}{record.description}{RESET}")

    if state.is_loading:
        lines.append(f"  {DIM}{messages.get('loading')}{RESET}")

    if state.error_message:
        lines.append(f"{WARNING}{messages.get('error', message=state.error_message)}{RESET}")

    return "\n".join(lines)


def render_upload_panel(state: FileManagerState, messages: Messages) -> str:
    """Pending upload selection and description."""
    selected = state.selected_file
    if selected is None:
        lines = [messages.get('no_selection')]
    else:
        lines = [
            messages.get(
                'selected',
                name=selected.name,
                size=format_file_size(selected.size),
                content_type=selected.content_type or messages.get('unknown_type'),
            )
        ]
    if state.description:
        lines.append(messages.get('description', description=state.description))
    if state.is_uploading:
        lines.append(messages.get('uploading'))
    return "\n".join(lines)


def render_status(state: FileManagerState, messages: Messages) -> str:
    return "\n\n".join(
        [
            render_summary(state, messages),
            render_file_table(state, messages),
            render_upload_panel(state, messages),
        ]
    )
