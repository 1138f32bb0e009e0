"""Custom completer for the FileDesk console."""

from pathlib import Path
from typing import Callable, Iterable, List

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from console.constants import COMMANDS, RECORD_COMMANDS
from console.schemas import FileRecord

PATH_COMMANDS = ("select", "upload")


class FileDeskCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - File id completion for 'download' and 'delete' from the current listing
    - Local path completion for 'select' and 'upload'
    """

    def __init__(self, files_provider: Callable[[], List[FileRecord]] = lambda: []):
        self.files_provider = files_provider

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        current_word = "" if is_typing_new_token else tokens[-1]
        arg_index = len(tokens) - 1 if is_typing_new_token else len(tokens) - 2
        if arg_index != 0:
            return

        if command in RECORD_COMMANDS:
            yield from self._complete_records(current_word)
        elif command in PATH_COMMANDS:
            yield from self._complete_paths(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_records(self, partial: str) -> Iterable[Completion]:
        """Complete file ids from the current listing, showing file names alongside."""
        for record in self.files_provider():
            if record.id.startswith(partial):
                yield Completion(
                    record.id,
                    start_position=-len(partial),
                    display=record.id[:8],
                    display_meta=record.file_name,
                )

    def _complete_paths(self, partial: str) -> Iterable[Completion]:
        """Complete local paths relative to the working directory."""
        if partial.endswith("/"):
            directory_part, name_part = partial, ""
        else:
            directory_part, _, name_part = partial.rpartition("/")
            directory_part = f"{directory_part}/" if directory_part else ""

        directory = Path(directory_part).expanduser()
        if not directory.is_absolute():
            directory = Path.cwd() / directory

        if not directory.is_dir():
            return

        for item in sorted(directory.iterdir()):
            if item.name.startswith(".") and not name_part.startswith("."):
                continue
            if not item.name.startswith(name_part):
                continue
            suffix = "/" if item.is_dir() else ""
            yield Completion(
                f"{directory_part}{item.name}{suffix}",
                start_position=-len(partial),
                display=f"{item.name}{suffix}",
            )
