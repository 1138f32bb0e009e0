"""REPL with prompt_toolkit for user interaction."""

import os
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout

from console.commands import dispatch_command
from console.completer import FileDeskCompleter
from console.config import Config
from console.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from console.controller import FileManagerController
from console.parser import ParseError, parse_command
from console.render import render_status


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    print(LOGO)
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


async def repl_loop(config: Config) -> None:
    """Start interactive REPL: mount the file manager, then read commands until exit."""
    controller = FileManagerController.from_config(config)
    completer = FileDeskCompleter(lambda: controller.state.files)
    session: PromptSession = PromptSession(
        completer=completer, history=InMemoryHistory(), style=STYLE
    )

    clear_screen()
    show_welcome()

    try:
        await controller.mount()
        print(render_status(controller.state, controller.messages))

        while True:
            try:
                with patch_stdout():
                    user_input = await session.prompt_async([("class:prompt", PROMPT_TEXT)])

                command = user_input.strip()
                if not command:
                    continue

                if command == "exit":
                    print("Goodbye!")
                    break

                if command == "help":
                    print(HELP_TEXT)
                    continue

                if command == "clear":
                    clear_screen()
                    show_welcome()
                    continue

                cmd_obj = parse_command(user_input)
                print(await dispatch_command(cmd_obj, controller))

            except ParseError as e:
                print(f"Error: {e}")
            except KeyboardInterrupt:
                continue
            except EOFError:
                print("\nGoodbye!")
                break
    finally:
        await controller.close()
