"""
Command routing for Song Lookup.

Routes interactive shell commands to handler functions.
"""

from typing import List, Tuple

from song_lookup.commands import songs
from song_lookup.context import AppContext
from song_lookup.core.console import safe_print
from song_lookup.core.output import log


def print_help() -> None:
    """Display help information for available commands."""
    help_text = """
Song Lookup

Available commands:
  get <id>                   Show the song with this ID
  list                       Show every loaded song
  table                      Show a summary table of loaded songs
  count                      Show how many songs are loaded
  load [path] [--no-header]  Load songs from a CSV file (default: config data.csv_path)
  export <path>              Write loaded songs to a CSV file
  help                       Show this help
  quit, exit                 Leave the shell
"""
    safe_print(help_text.strip())


def handle_command(
    ctx: AppContext, command: str, args: List[str]
) -> Tuple[AppContext, bool]:
    """
    Handle a single shell command.

    Args:
        ctx: Application context
        command: Lowercased command word
        args: Command arguments

    Returns:
        (updated_context, should_continue)
    """
    if not command:
        return ctx, True

    if command in ("quit", "exit"):
        return ctx, False

    if command == "help":
        print_help()
        return ctx, True

    if command == "get":
        return songs.handle_get_command(ctx, args)

    if command == "list":
        return songs.handle_list_command(ctx)

    if command == "table":
        return songs.handle_table_command(ctx)

    if command == "count":
        return songs.handle_count_command(ctx)

    if command == "load":
        return songs.handle_load_command(ctx, args)

    if command == "export":
        return songs.handle_export_command(ctx, args)

    log(f"Unknown command: '{command}'. Type 'help' for available commands.", "warning")
    return ctx, True
