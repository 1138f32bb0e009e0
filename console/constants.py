"""Console constants: commands, styles and help text."""

from prompt_toolkit.styles import Style

COMMANDS = ["list", "refresh", "select", "describe", "upload", "download", "delete", "status", "clear", "exit", "help"]

# Commands whose first argument is a file reference from the current listing
RECORD_COMMANDS = ("download", "delete")

STYLE = Style.from_dict(
    {
        "prompt": "#4F46E5 bold",
        "command": "#0088ff bold",
    }
)

ACCENT = "\033[38;2;79;70;229m"
WARNING = "\033[38;2;180;83;9m"
DIM = "\033[2m"
RESET = "\033[0m"

LOGO = f"""{ACCENT}
 ┌─┐┬┬  ┌─┐┌┬┐┌─┐┌─┐┬┌─
 ├┤ ││  ├┤  ││├┤ └─┐├┴┐
 └  ┴┴─┘└─┘─┴┘└─┘└─┘┴ ┴
{RESET}"""

WELCOME_TITLE = "FileDesk - File Data Console"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "filedesk> "

MAX_UPLOAD_HINT = "5GB"

HELP_TEXT = f"""Available commands:
  list                                Fetch the latest file list
  refresh                             Same as list
  select <path>                       Choose a local file for the next upload
  describe <text...>                  Set the description for the next upload (empty clears it)
  upload [path] [-- description...]   Upload the selected (or given) file, up to {MAX_UPLOAD_HINT}
  download <id> [directory]           Download a file (id prefix or unique file name)
  delete <id>                         Delete a file (id prefix or unique file name)
  status                              Show the file list and pending upload
  clear                               Clear screen and redisplay welcome message
  help                                Show this help
  exit                                Exit REPL

Examples:
  select ~/reports/q3.pdf
  describe quarterly report
  upload
  upload ./notes.txt -- meeting notes
  download 3f2a9c1b
  download q3.pdf ~/Desktop
  delete 3f2a9c1b"""
